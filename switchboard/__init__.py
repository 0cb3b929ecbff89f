"""
Switchboard

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ConstructionError,
    MalformattedArgumentError,
    ParseError,
    RequiredArgumentMissingError,
    SwitchboardError,
)
from .logger import logger
from .ordered_map import OrderedMap
from .parser import (
    Argument,
    Option,
    ParseResult,
    SwitchParser,
    Token,
    ValueType,
    to_switches,
)

__all__ = [
    "Argument",
    "ConstructionError",
    "MalformattedArgumentError",
    "Option",
    "OrderedMap",
    "ParseError",
    "ParseResult",
    "RequiredArgumentMissingError",
    "SwitchParser",
    "SwitchboardError",
    "Token",
    "ValueType",
    "logger",
    "to_switches",
]
