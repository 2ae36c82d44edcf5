class AbsentValueAccessError(RuntimeError):
    """Raised when the value of an empty Optional is read."""

    def __init__(self, message: str = "Optional has no value."):
        super().__init__(message)
