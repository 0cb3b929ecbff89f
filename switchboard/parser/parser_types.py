# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and state models for `SwitchParser`.

Contents:
- `ParseResult`: What a successful parse returns.
- `ParseState`: The phases a single parse moves through.
- `ScanState`: The mutable state of one `parse()` call. A fresh instance is built
  for every call so nothing leaks between parses.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from switchboard.parser.spec import Argument
from switchboard.parser.utils import looks_like_switch


@dataclass
class ParseResult:
    """
    The outcome of parsing a token list.

    Attributes:
        values (dict[str, Any]): Resolved option values keyed by human name.
        arguments (list[Any]): Leading argument values in declaration order.
        trailing (list[str]): Tokens that were not consumed, in original order.
    """

    values: dict[str, Any] = field(default_factory=dict)
    arguments: list[Any] = field(default_factory=list)
    trailing: list[str] = field(default_factory=list)

    def __getitem__(self, name: str) -> Any:
        return self.values[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)


class ParseState(Enum):
    READING_ARGUMENTS = "reading_arguments"
    READING_SWITCHES = "reading_switches"
    DONE = "done"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass
class ScanState:
    """Tracks the pile of unread tokens and everything resolved so far."""

    pile: deque[str]
    arguments: list[Argument]
    state: ParseState = ParseState.READING_ARGUMENTS
    values: dict[str, Any] = field(default_factory=dict)
    assigned: dict[str, Any] = field(default_factory=dict)
    trailing: list[str] = field(default_factory=list)

    def peek(self) -> str | None:
        return self.pile[0] if self.pile else None

    def shift(self) -> str:
        return self.pile.popleft()

    def unshift(self, token: str) -> None:
        """Put a token back at the front of the pile."""
        self.pile.appendleft(token)

    def peek_is_value(self) -> bool:
        """True if there is a next token and it is not shaped like a switch."""
        token = self.peek()
        return token is not None and not looks_like_switch(token)

    def next_argument(self) -> Argument | None:
        """Return the first declared argument that has no value yet."""
        return next(
            (arg for arg in self.arguments if arg.human_name not in self.assigned),
            None,
        )
