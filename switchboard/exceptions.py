# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Switchboard.

Declaration-time problems surface as `ConstructionError` as soon as an `Option`
or `Argument` is built. Parse-time problems surface as one of the `ParseError`
subclasses and carry structured attributes so callers can render their own
diagnostics instead of relying on the message text.

Exception Hierarchy:
- SwitchboardError
    ├── ConstructionError
    ├── ConfigError
    └── ParseError
        ├── RequiredArgumentMissingError
        └── MalformattedArgumentError
"""
from __future__ import annotations


class SwitchboardError(Exception):
    """Base exception for Switchboard."""


class ConstructionError(SwitchboardError, ValueError):
    """Exception raised when an option or argument declaration is invalid."""


class ConfigError(SwitchboardError):
    """Exception raised when a declaration file cannot be loaded."""


class ParseError(SwitchboardError):
    """Base exception for failures while parsing a token list."""


class RequiredArgumentMissingError(ParseError):
    """
    Raised when required arguments or switches end up without a value.

    Attributes:
        names (list[str]): Every missing name, in declaration order. Arguments are
            reported by their human name, switches by their switch form.
    """

    def __init__(self, names: list[str], message: str | None = None) -> None:
        self.names: list[str] = list(names)
        if message is None:
            quoted = ", ".join(f"'{name}'" for name in self.names)
            message = f"no value provided for required arguments {quoted}"
        super().__init__(message)

    @classmethod
    def for_switch(cls, switch: str) -> RequiredArgumentMissingError:
        """Build the error for a single switch that was given without its value."""
        return cls([switch], f"no value provided for required argument '{switch}'")


class MalformattedArgumentError(ParseError):
    """
    Raised when a switch that needs input received an invalid one.

    Attributes:
        switch (str): The switch as it appeared in the token list.
        value (str): The offending token or literal.
    """

    def __init__(self, switch: str, value: str, message: str | None = None) -> None:
        self.switch: str = switch
        self.value: str = value
        if message is None:
            message = f"invalid value for '{switch}'; got {value!r}"
        super().__init__(message)

    @classmethod
    def switch_as_value(cls, switch: str, value: str) -> MalformattedArgumentError:
        """Build the error for a switch token passed where a value was expected."""
        return cls(switch, value, f"cannot pass switch '{value}' as an argument")

    @classmethod
    def expected_numeric(cls, switch: str, value: str) -> MalformattedArgumentError:
        """Build the error for a literal that is not a number."""
        return cls(switch, value, f'expected numeric value for \'{switch}\'; got "{value}"')
