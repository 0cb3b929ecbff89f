# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ValueType`, the enum of value shapes an option or argument can take.

Besides the canonical member values, a few config-friendly aliases are accepted
when constructing from a string.

Example:
    ValueType("numeric") → ValueType.NUMERIC
    ValueType("int")     → ValueType.NUMERIC (via alias)
    ValueType("LIST")    → ValueType.ARRAY
"""
from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """
    The shape of the value a switch or argument resolves to.

    Members:
        STRING: A single token, kept as a string.
        NUMERIC: A single token coerced to `int` or `float`.
        BOOLEAN: Presence of the switch means `True`; `--no-name` means `False`.
        ARRAY: A run of tokens collected into a list.
        HASH: A run of `key:value` tokens collected into a dict.
        DEFAULT: Either a bare flag (`True`) or the following token as a string.

    Aliases:
        - "str" → "string"
        - "int", "float", "number" → "numeric"
        - "bool" → "boolean"
        - "list" → "array"
        - "dict" → "hash"
    """

    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    ARRAY = "array"
    HASH = "hash"
    DEFAULT = "default"

    @classmethod
    def choices(cls) -> list[ValueType]:
        """Return a list of all value types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "numeric",
            "float": "numeric",
            "number": "numeric",
            "bool": "boolean",
            "list": "array",
            "dict": "hash",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ValueType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def input_required(self) -> bool:
        """True if a switch of this type must be followed by a value."""
        return self in (
            ValueType.STRING,
            ValueType.NUMERIC,
            ValueType.ARRAY,
            ValueType.HASH,
        )

    def __str__(self) -> str:
        """Return the string representation of the value type."""
        return self.value
