# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification and value coercion helpers for Switchboard parsing.

Functions:
- looks_like_switch: Decide whether a raw token is a switch or a value.
- to_switch_form: Turn a declared name into its switch form.
- coerce_bool: Convert a string to a boolean.
- coerce_numeric: Convert a string to an `int` or `float`.
- parse_hash_pairs: Split a `key:value` token into pairs.
- format_value: Render a value the way it is written on the command line.
- to_switches: Render a mapping of values back into a switch string.
"""
from __future__ import annotations

import re
from typing import Any, Mapping

SWITCH_RE = re.compile(r"^--?[A-Za-z_]")
NUMERIC_RE = re.compile(r"^[+-]?(\d*\.\d+|\d+\.?)([eE][+-]?\d+)?$")
HASH_SEPARATOR_RE = re.compile(r"[,\s]+")


def looks_like_switch(token: str) -> bool:
    """
    Return True if the token is shaped like a switch.

    A switch is one or two dashes followed by a letter or underscore, so negative
    numbers, `-` and `--` are treated as values.
    """
    return bool(SWITCH_RE.match(token))


def to_switch_form(name: str) -> str:
    """
    Convert a declared name to its switch form.

    `foo_bar` → `--foo-bar`, `f` → `-f`. Names that already start with a dash
    are returned unchanged.
    """
    if name.startswith("-"):
        return name
    dashed = name.replace("_", "-")
    return f"-{dashed}" if len(dashed) == 1 else f"--{dashed}"


def coerce_bool(value: str | bool) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str | bool): The input string or boolean.

    Returns:
        bool: Parsed boolean result.
    """
    if isinstance(value, bool):
        return value
    value = value.strip().lower()
    if value in {"true", "t", "1", "yes", "on"}:
        return True
    elif value in {"false", "f", "0", "no", "off"}:
        return False
    return bool(value)


def coerce_numeric(value: str) -> int | float:
    """
    Convert a string to a number.

    Integers stay `int`; anything with a decimal point or an exponent becomes a
    `float`.

    Raises:
        ValueError: If the string is not a decimal number.
    """
    text = value.strip()
    if not NUMERIC_RE.match(text):
        raise ValueError(f"'{value}' is not a numeric value")
    if "." in text or "e" in text.lower():
        return float(text)
    return int(text)


def parse_hash_pairs(token: str) -> dict[str, str]:
    """
    Split a token into `key:value` pairs.

    Pairs are separated by commas or whitespace and each pair is split on its
    first colon. Pieces without a colon map to an empty string.
    """
    pairs: dict[str, str] = {}
    for piece in HASH_SEPARATOR_RE.split(token.strip()):
        if not piece:
            continue
        key, _, value = piece.partition(":")
        pairs[key] = value
    return pairs


def format_value(value: Any) -> str:
    """Render a value as it would be written after a switch."""
    if isinstance(value, Mapping):
        return " ".join(f"{key}:{item}" for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


def to_switches(options: Mapping[str, Any]) -> str:
    """
    Render a mapping of option values back into a switch string.

    `True` becomes a bare flag, `None` and `False` are skipped, strings are
    double-quoted, lists are space-joined and mappings become `key:value` pairs.

    Example:
        to_switches({"color": True, "format": "specdoc"}) == '--color --format "specdoc"'
    """
    switches: list[str] = []
    for name, value in options.items():
        if value is None or value is False:
            continue
        switch = to_switch_form(str(name))
        if value is True:
            switches.append(switch)
        elif isinstance(value, str):
            escaped = value.replace("\\", "\\\\").replace('"', '\\"')
            switches.append(f'{switch} "{escaped}"')
        else:
            switches.append(f"{switch} {format_value(value)}")
    return " ".join(switches)
