"""
Switchboard

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .literal import (
    FromBool,
    FromMap,
    FromNumber,
    FromSequence,
    FromString,
    FromToken,
    SpecLiteral,
    Token,
    literal_from,
)
from .parser_types import ParseResult, ParseState
from .spec import Argument, Option, ValueSpec
from .switch_parser import SwitchParser
from .utils import to_switches
from .value_type import ValueType

__all__ = [
    "Argument",
    "FromBool",
    "FromMap",
    "FromNumber",
    "FromSequence",
    "FromString",
    "FromToken",
    "Option",
    "ParseResult",
    "ParseState",
    "SpecLiteral",
    "SwitchParser",
    "Token",
    "ValueSpec",
    "ValueType",
    "literal_from",
    "to_switches",
]
