# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` and `Argument` specs consumed by `SwitchParser`.

A spec is an immutable description of one named value: its name, description,
value type, default and whether it is required. Options are reached through
switches (`--branch main`, `-b main`) and may carry aliases. Arguments are
positional values read from the front of the token list (or through their own
switch form when no positional value was given).

Specs derive their switch form and human name from the declared name, render a
one-line usage fragment, and sort arguments before options and required specs
before optional ones.

Specs can be built directly:

    Option("branch", "Branch to check out", False, ValueType.STRING, "main", ("-b",))

or inferred from a declaration literal:

    Option.parse(["branch", "-b"], "main")
    Option.parse("force", False)
    Argument.parse("name", Token.REQUIRED)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence

from switchboard.exceptions import ConstructionError
from switchboard.parser.literal import Resolution, literal_from
from switchboard.parser.utils import format_value, to_switch_form
from switchboard.parser.value_type import ValueType


@dataclass(frozen=True, eq=False)
class ValueSpec:
    """
    Base class for options and arguments.

    Attributes:
        name (str): The declared name, with or without leading dashes.
        description (str | None): Help text for the value.
        required (bool): True if a value must be supplied.
        type (ValueType): The shape of the value.
        default (Any): Value used when none is supplied. Cannot be combined with
            `required`.
    """

    name: str
    description: str | None = None
    required: bool = False
    type: ValueType = ValueType.DEFAULT
    default: Any = None

    kind: ClassVar[str] = "value"
    valid_types: ClassVar[tuple[ValueType, ...]] = tuple(ValueType)

    def __post_init__(self) -> None:
        if self.name is None or str(self.name) == "":
            raise ConstructionError(f"{self.kind.capitalize()} name can't be nil.")
        object.__setattr__(self, "name", str(self.name))

        try:
            value_type = ValueType(self.type)
        except (TypeError, ValueError):
            value_type = None
        if value_type not in self.valid_types:
            raise ConstructionError(
                f"Type '{self.type}' is not valid for {self.kind}s."
            )
        object.__setattr__(self, "type", value_type)

        if self.required and self.default is not None:
            raise ConstructionError(
                f"{self.kind.capitalize()} cannot be required and have default values."
            )

    @classmethod
    def parse(cls, names: str | Sequence[str], literal: Any) -> ValueSpec:
        """
        Infer a spec from a name (or `[name, *aliases]`) and a declaration literal.

        Raises:
            ConstructionError: If the literal has no matching shape or the resulting
                spec is invalid.
        """
        if isinstance(names, (list, tuple)):
            name = names[0] if names else None
            aliases = tuple(str(alias) for alias in names[1:])
        else:
            name, aliases = names, ()
        return cls._from_resolution(name, aliases, literal_from(literal).resolve())

    @classmethod
    def _from_resolution(
        cls, name: Any, aliases: tuple[str, ...], resolution: Resolution
    ) -> ValueSpec:
        raise NotImplementedError

    @property
    def is_argument(self) -> bool:
        return False

    @property
    def optional(self) -> bool:
        return not self.required

    @property
    def input_required(self) -> bool:
        """True if the switch must be followed by a value."""
        return self.type.input_required

    @property
    def switch_name(self) -> str:
        """The name as a switch: `foo_bar` → `--foo-bar`, `f` → `-f`."""
        return to_switch_form(self.name)

    @property
    def human_name(self) -> str:
        """The switch name without leading dashes. Used as the result key."""
        return self.switch_name.lstrip("-")

    @property
    def sort_key(self) -> tuple[int, int, str]:
        return (0 if self.is_argument else 1, 0 if self.required else 1, self.human_name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ValueSpec):
            return NotImplemented
        return self.sort_key < other.sort_key

    def placeholder(self) -> str | None:
        """Return the sample value shown in usage, or None for bare switches."""
        if self.type is ValueType.BOOLEAN:
            return None
        if self.default is not None:
            formatted = format_value(self.default)
            if formatted:
                return formatted
        if self.type is ValueType.STRING:
            return self.human_name.upper().replace("-", "_")
        elif self.type is ValueType.NUMERIC:
            return "N"
        elif self.type is ValueType.ARRAY:
            return "one two three"
        elif self.type is ValueType.HASH:
            return "key:value"
        return None

    def usage(self) -> str:
        raise NotImplementedError

    def _identity(self) -> tuple[Any, ...]:
        return (type(self).__name__, self.name, self.type, self.required)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueSpec) or type(other) is not type(self):
            return False
        return (
            self._identity() == other._identity()
            and self.description == other.description
            and self.default == other.default
        )

    def __hash__(self) -> int:
        return hash(self._identity())


@dataclass(frozen=True, eq=False)
class Option(ValueSpec):
    """
    A named value reached through a switch.

    Attributes:
        aliases (tuple[str, ...]): Extra names for the switch, matched in switch
            form (`"bar"` matches `--bar`, `"-b"` matches `-b`).
    """

    aliases: tuple[str, ...] = ()

    kind: ClassVar[str] = "option"

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "aliases", tuple(str(alias) for alias in self.aliases))

    @classmethod
    def _from_resolution(
        cls, name: Any, aliases: tuple[str, ...], resolution: Resolution
    ) -> Option:
        return cls(
            name,
            None,
            resolution.required,
            resolution.type,
            resolution.default,
            aliases,
        )

    def _identity(self) -> tuple[Any, ...]:
        return super()._identity() + (self.aliases,)

    def usage(self) -> str:
        """
        Render the option as a usage fragment.

        Required options render bare (`-f, --foo=FOO`); optional ones are wrapped
        in brackets (`[--foo=FOO]`).
        """
        placeholder = self.placeholder()
        sample = f"{self.switch_name}={placeholder}" if placeholder else self.switch_name
        if self.aliases:
            sample = ", ".join([*(to_switch_form(alias) for alias in self.aliases), sample])
        return sample if self.required else f"[{sample}]"


@dataclass(frozen=True, eq=False)
class Argument(ValueSpec):
    """A leading positional value, optionally also reachable by its switch form."""

    type: ValueType = ValueType.STRING

    kind: ClassVar[str] = "argument"
    valid_types: ClassVar[tuple[ValueType, ...]] = (
        ValueType.STRING,
        ValueType.NUMERIC,
        ValueType.ARRAY,
        ValueType.HASH,
    )

    @classmethod
    def _from_resolution(
        cls, name: Any, aliases: tuple[str, ...], resolution: Resolution
    ) -> Argument:
        if aliases:
            raise ConstructionError("Arguments cannot have aliases.")
        value_type = resolution.type
        if value_type is ValueType.DEFAULT:
            value_type = ValueType.STRING
        return cls(name, None, resolution.required, value_type, resolution.default)

    @property
    def is_argument(self) -> bool:
        return True

    def usage(self) -> str:
        """Render the argument as `FOO`, or `[FOO]` when it is optional."""
        sample = self.placeholder() or self.human_name.upper()
        return sample if self.required else f"[{sample}]"
