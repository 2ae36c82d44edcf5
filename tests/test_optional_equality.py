import pytest
from optional_value import Optional, empty, equals, not_equals, wrap

def test_two_empties_are_equal():
    a = Optional[int].empty()
    b = Optional[int]()
    assert a == b
    assert equals(a, b)
    assert not not_equals(a, b)

def test_empty_never_equals_present():
    for v in [0, 5, None, "", False]:
        assert empty() != wrap(v)
        assert wrap(v) != empty()
        assert not equals(empty(), wrap(v))
        assert not_equals(wrap(v), empty())

@pytest.mark.parametrize(
    "v1,v2,expected",
    [
        (5, 5, True),
        (5, 6, False),
        ("a", "a", True),
        (None, None, True),
        (None, 0, False),
        ([1, 2], [1, 2], True),
        (1, 1.0, True),
    ],
)
def test_present_equality_follows_value_equality(v1, v2, expected):
    assert (wrap(v1) == wrap(v2)) is expected
    assert equals(wrap(v1), wrap(v2)) is expected
    assert not_equals(wrap(v1), wrap(v2)) is (not expected)

def test_not_equal_to_bare_value():
    assert wrap(5) != 5
    assert not equals(wrap(5), 5)
    assert not_equals(wrap(5), 5)

def test_hash_of_empty_is_zero():
    assert hash(empty()) == 0
    assert hash(Optional[str]()) == 0

def test_equal_optionals_hash_equal():
    assert hash(wrap(5)) == hash(wrap(5))
    assert hash(wrap("hello")) == hash(wrap("hello"))
    assert hash(wrap(None)) == hash(wrap(None))
    assert hash(wrap(1)) == hash(wrap(1.0))

def test_present_hash_is_value_hash():
    assert hash(wrap("abc")) == hash("abc")
    assert hash(wrap(None)) == hash(None)

def test_unhashable_values_still_hash():
    a = wrap([1, 2])
    b = wrap([1, 2])
    assert a == b
    assert hash(a) == hash(b)

def test_usable_as_dict_keys():
    table = {empty(): "missing", wrap(None): "null", wrap(1): "one"}
    assert table[Optional()] == "missing"
    assert table[Optional(None)] == "null"
    assert table[wrap(1)] == "one"
    assert len(table) == 3
