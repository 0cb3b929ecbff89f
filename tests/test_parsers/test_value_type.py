import pytest

from switchboard.parser import ValueType


def test_value_type():
    value_type = ValueType.ARRAY
    assert value_type == ValueType.ARRAY
    assert value_type != ValueType.HASH
    assert value_type != "array"
    assert value_type.value == "array"
    assert str(value_type) == "array"
    assert len(ValueType.choices()) == 6


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("string", ValueType.STRING),
        ("str", ValueType.STRING),
        ("NUMERIC", ValueType.NUMERIC),
        ("int", ValueType.NUMERIC),
        ("float", ValueType.NUMERIC),
        (" bool ", ValueType.BOOLEAN),
        ("list", ValueType.ARRAY),
        ("dict", ValueType.HASH),
        ("default", ValueType.DEFAULT),
    ],
)
def test_value_type_aliases(raw, expected):
    assert ValueType(raw) is expected


def test_value_type_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        ValueType("unknown")
    with pytest.raises(ValueError):
        ValueType(42)


@pytest.mark.parametrize(
    "value_type,needs_input",
    [
        (ValueType.STRING, True),
        (ValueType.NUMERIC, True),
        (ValueType.ARRAY, True),
        (ValueType.HASH, True),
        (ValueType.BOOLEAN, False),
        (ValueType.DEFAULT, False),
    ],
)
def test_input_required(value_type, needs_input):
    assert value_type.input_required is needs_input
