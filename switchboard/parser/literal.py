# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Spec literals: the untyped shorthand callers use to declare a switch.

A declaration such as `Option.parse("branch", "main")` says "a string option
defaulting to main" without naming the type. Each shape of shorthand is a small
frozen variant that knows how to resolve itself into `(type, default, required)`:

- `FromToken`: a keyword (`Token.REQUIRED`, `Token.OPTIONAL`, `Token.DEFAULT`) or a
  `ValueType` name.
- `FromMap`: a mapping, declaring a hash option with that default.
- `FromSequence`: a list, declaring an array option with that default.
- `FromBool`: `True` / `False`, declaring a boolean option with that default.
- `FromNumber`: an `int` / `float`, declaring a numeric option with that default.
- `FromString`: any string, declaring a string option with that default.

`literal_from()` is the single place where a raw Python value is inspected and
wrapped in the matching variant.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from switchboard.exceptions import ConstructionError
from switchboard.parser.value_type import ValueType


class Token(Enum):
    """Keywords accepted as declaration shorthand."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    DEFAULT = "default"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Resolution:
    """The `(type, default, required)` triple a literal resolves to."""

    type: ValueType
    default: Any = None
    required: bool = False


@dataclass(frozen=True)
class FromToken:
    token: str

    def resolve(self) -> Resolution:
        if self.token == Token.REQUIRED.value:
            return Resolution(ValueType.STRING, required=True)
        if self.token in (Token.OPTIONAL.value, Token.DEFAULT.value):
            return Resolution(ValueType.DEFAULT)
        if self.token in {value_type.value for value_type in ValueType}:
            return Resolution(ValueType(self.token))
        return Resolution(ValueType.DEFAULT)


@dataclass(frozen=True)
class FromMap:
    mapping: Mapping[Any, Any] = field(hash=False)

    def resolve(self) -> Resolution:
        return Resolution(ValueType.HASH, dict(self.mapping))


@dataclass(frozen=True)
class FromSequence:
    items: Sequence[Any] = field(hash=False)

    def resolve(self) -> Resolution:
        return Resolution(ValueType.ARRAY, list(self.items))


@dataclass(frozen=True)
class FromBool:
    value: bool

    def resolve(self) -> Resolution:
        return Resolution(ValueType.BOOLEAN, self.value)


@dataclass(frozen=True)
class FromNumber:
    value: int | float

    def resolve(self) -> Resolution:
        return Resolution(ValueType.NUMERIC, self.value)


@dataclass(frozen=True)
class FromString:
    value: str

    def resolve(self) -> Resolution:
        return Resolution(ValueType.STRING, self.value)


SpecLiteral = Union[FromToken, FromMap, FromSequence, FromBool, FromNumber, FromString]

_VARIANTS = (FromToken, FromMap, FromSequence, FromBool, FromNumber, FromString)


def literal_from(value: Any) -> SpecLiteral:
    """
    Wrap a raw declaration value in its `SpecLiteral` variant.

    Plain strings are always string defaults; keywords must be passed as `Token`
    or `ValueType` members.

    Raises:
        ConstructionError: If the value has no matching variant.
    """
    if isinstance(value, _VARIANTS):
        return value
    if isinstance(value, (Token, ValueType)):
        return FromToken(value.value)
    if isinstance(value, bool):
        return FromBool(value)
    if isinstance(value, Mapping):
        return FromMap(value)
    if isinstance(value, str):
        return FromString(value)
    if isinstance(value, (Sequence, Set)):
        return FromSequence(list(value))
    if isinstance(value, (int, float)):
        return FromNumber(value)
    raise ConstructionError(
        f"Cannot infer an option from {value!r} of type '{type(value).__name__}'"
    )
