import pytest

from switchboard.exceptions import ConstructionError
from switchboard.parser import Argument, Option, Token, ValueType


def parse(names, value):
    return Option.parse(names, value)


@pytest.mark.parametrize(
    "token,value_type",
    [(ValueType.STRING, ValueType.STRING), (ValueType.NUMERIC, ValueType.NUMERIC)],
)
def test_parse_type_token(token, value_type):
    option = parse("foo", token)
    assert option.type is value_type
    assert option.default is None


def test_parse_required():
    option = parse("foo", Token.REQUIRED)
    assert option.type is ValueType.STRING
    assert option.default is None
    assert option.required
    assert not option.optional


def test_parse_optional():
    option = parse("foo", Token.OPTIONAL)
    assert option.type is ValueType.DEFAULT
    assert option.default is None
    assert not option.required
    assert option.optional


def test_parse_hash():
    option = parse("foo", {"a": "b"})
    assert option.type is ValueType.HASH
    assert option.default == {"a": "b"}


def test_parse_empty_hash():
    option = parse("foo", {})
    assert option.type is ValueType.HASH
    assert option.default == {}


def test_parse_array():
    option = parse("foo", ["a", "b"])
    assert option.type is ValueType.ARRAY
    assert option.default == ["a", "b"]


def test_parse_string():
    option = parse("foo", "bar")
    assert option.type is ValueType.STRING
    assert option.default == "bar"


def test_parse_numeric():
    option = parse("foo", 2.0)
    assert option.type is ValueType.NUMERIC
    assert option.default == 2.0


@pytest.mark.parametrize("value", [True, False])
def test_parse_boolean(value):
    option = parse("foo", value)
    assert option.type is ValueType.BOOLEAN
    assert option.default is value


def test_parse_name_and_aliases():
    assert parse("foo", True).name == "foo"
    option = parse(["foo", "bar", "baz"], True)
    assert option.name == "foo"
    assert option.aliases == ("bar", "baz")


@pytest.mark.parametrize("token", ["string", "array", "hash", "numeric"])
def test_input_required(token):
    assert parse("foo", ValueType(token)).input_required


@pytest.mark.parametrize("token", [ValueType.DEFAULT, ValueType.BOOLEAN, Token.DEFAULT])
def test_input_not_required(token):
    assert not parse("foo", token).input_required


def test_switch_name():
    assert Option("foo").switch_name == "--foo"
    assert Option("--foo").switch_name == "--foo"
    assert Option("f").switch_name == "-f"
    assert Option("foo_bar").switch_name == "--foo-bar"


def test_human_name():
    assert Option("foo").human_name == "foo"
    assert Option("--foo").human_name == "foo"
    assert Option("-f").human_name == "f"


def test_is_not_argument():
    assert not Option("task").is_argument


def test_required_sorts_first():
    options = [parse("foo", Token.OPTIONAL), parse("foo", Token.REQUIRED)]
    assert sorted(options)[0].required


def test_sorting_by_name_within_group():
    options = [parse("zeta", True), parse("alpha", True), parse("mid", Token.REQUIRED)]
    assert [option.name for option in sorted(options)] == ["mid", "alpha", "zeta"]


def test_options_are_immutable():
    option = Option("foo")
    with pytest.raises(AttributeError):
        option.name = "bar"


def test_equality():
    assert Option("foo", type="string") == Option("foo", type=ValueType.STRING)
    assert Option("foo") != Option("bar")
    assert Option("foo") != Argument("foo")
    assert hash(Option("foo", default=[1])) == hash(Option("foo", default=[1]))


def test_error_name_missing():
    with pytest.raises(ConstructionError, match="Option name can't be nil."):
        Option(None)
    with pytest.raises(ConstructionError):
        Option.parse([], True)


def test_error_required_with_default():
    with pytest.raises(
        ConstructionError, match="Option cannot be required and have default values."
    ):
        Option("task", None, True, ValueType.STRING, "bla")


def test_error_unknown_type():
    with pytest.raises(ConstructionError, match="Type 'unknown' is not valid for options."):
        Option("task", None, True, "unknown")


def test_construction_error_is_value_error():
    with pytest.raises(ValueError):
        Option("task", None, True, "unknown")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("bar", "[--foo=bar]"),
        (2.0, "[--foo=2.0]"),
        ([1, 2, 3], "[--foo=1 2 3]"),
        (True, "[--foo]"),
        (ValueType.STRING, "[--foo=FOO]"),
        (ValueType.NUMERIC, "[--foo=N]"),
        (ValueType.ARRAY, "[--foo=one two three]"),
        (ValueType.HASH, "[--foo=key:value]"),
        (ValueType.BOOLEAN, "[--foo]"),
        (Token.OPTIONAL, "[--foo]"),
        ([], "[--foo=one two three]"),
        ({}, "[--foo=key:value]"),
        ("", "[--foo=FOO]"),
    ],
)
def test_usage(value, expected):
    assert parse("foo", value).usage() == expected


def test_usage_hash_default():
    usage = parse("foo", {"a": "b", "c": "d"}).usage()
    assert usage.startswith("[--foo=")
    assert "a:b" in usage
    assert "c:d" in usage


def test_usage_required():
    assert parse("foo", Token.REQUIRED).usage() == "--foo=FOO"


def test_usage_with_aliases():
    assert parse(["foo", "-f", "-b"], Token.REQUIRED).usage() == "-f, -b, --foo=FOO"
    assert parse(["foo", "-f"], True).usage() == "[-f, --foo]"


def test_usage_placeholder_from_underscored_name():
    assert parse("dry_run", ValueType.STRING).usage() == "[--dry-run=DRY_RUN]"
