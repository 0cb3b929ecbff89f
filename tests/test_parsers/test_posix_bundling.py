import pytest

from switchboard.exceptions import RequiredArgumentMissingError
from switchboard.ordered_map import OrderedMap
from switchboard.parser import Option, SwitchParser, Token, ValueType


def create(declarations: dict) -> SwitchParser:
    switches = OrderedMap()
    for name, value in declarations.items():
        option = Option.parse(name, value)
        switches[option.human_name] = option
    return SwitchParser(switches)


def test_posix_bundling():
    """Test the bundling of short switches in the POSIX style."""
    parser = create(
        {"--foo": ValueType.BOOLEAN, "--bar": ValueType.BOOLEAN, "--app": ValueType.BOOLEAN}
    )
    result = parser.parse(["-fba"])
    assert result["foo"] is True
    assert result["bar"] is True
    assert result["app"] is True


def test_posix_bundling_last_takes_next_token():
    parser = create(
        {"--foo": ValueType.BOOLEAN, "--bar": ValueType.BOOLEAN, "--app": Token.REQUIRED}
    )
    result = parser.parse(["-fba", "12"])
    assert result["foo"] is True
    assert result["bar"] is True
    assert result["app"] == "12"
    assert result.trailing == []


def test_posix_bundling_four_switches():
    parser = create(
        {
            "--foo": ValueType.BOOLEAN,
            "--bar": ValueType.BOOLEAN,
            "--app": ValueType.BOOLEAN,
            "--gap": Token.REQUIRED,
        }
    )
    result = parser.parse(["-fbag", "7"])
    assert result.values == {"foo": True, "bar": True, "app": True, "gap": "7"}


def test_posix_bundling_rest_is_value():
    parser = create({"--foo": ValueType.BOOLEAN, "n": ValueType.NUMERIC})
    result = parser.parse(["-fn12"])
    assert result.values == {"foo": True, "n": 12}


def test_posix_bundling_input_switch_takes_remaining_letters():
    parser = create(
        {"--app": Token.REQUIRED, "--foo": ValueType.BOOLEAN, "--bar": ValueType.BOOLEAN}
    )
    result = parser.parse(["-afb"])
    assert result.values == {"app": "fb"}


def test_posix_bundling_default_type_in_middle_is_true():
    parser = create({"--out": Token.OPTIONAL, "--foo": ValueType.BOOLEAN})
    result = parser.parse(["-of", "value"])
    assert result.values == {"out": True, "foo": True}
    assert result.trailing == ["value"]


def test_posix_bundling_default_type_last_takes_value():
    parser = create({"--out": Token.OPTIONAL, "--foo": ValueType.BOOLEAN})
    result = parser.parse(["-fo", "value"])
    assert result.values == {"out": "value", "foo": True}


def test_posix_bundling_unknown_letter_passed_through():
    parser = create({"--foo": ValueType.BOOLEAN, "--bar": ValueType.BOOLEAN})
    result = parser.parse(["-fxb"])
    assert result.values == {"foo": True, "bar": True}
    assert result.trailing == ["-x"]


def test_posix_bundling_unknown_first_letter():
    parser = create({"--foo": ValueType.BOOLEAN, "--bar": ValueType.BOOLEAN})
    result = parser.parse(["-xfb"])
    assert result.values == {}
    assert result.trailing == ["-xfb"]


def test_posix_bundling_missing_value():
    parser = create({"--foo": ValueType.BOOLEAN, "--app": Token.REQUIRED})
    with pytest.raises(
        RequiredArgumentMissingError,
        match="no value provided for required argument '-a'",
    ):
        parser.parse(["-fa"])


def test_declared_switch_wins_over_bundle():
    parser = create(
        {"--foo": ValueType.BOOLEAN, "--bar": ValueType.BOOLEAN, "-fb": ValueType.BOOLEAN}
    )
    result = parser.parse(["-fb"])
    assert result.values == {"fb": True}
