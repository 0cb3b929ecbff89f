# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `SwitchParser`, the scanner that turns a flat token list into
resolved option values, leading argument values and trailing tokens.

A parser is built once from ordered declarations and can be run any number of times;
every call to `parse()` works on its own `ScanState`, so the parser itself is never
mutated while parsing.

Parsing happens in three phases:

1. Leading arguments: tokens at the front that are not shaped like switches are
   assigned to the declared `Argument`s in order.
2. Switches: the rest of the tokens are scanned left to right. Each switch-shaped
   token is matched, in order of specificity, as an exact switch (including
   `--name=value`), a `--no-name` negation of a boolean option, or a bundle of
   short switches (`-abc`, `-n12`). Anything that does not match is passed through
   to `trailing` unchanged.
3. Finalization: missing required arguments, then missing required switches, are
   reported all at once, and defaults are filled in for everything left unset.

Example Usage:
    switches = OrderedMap()
    switches["force"] = Option.parse("force", False)
    switches["branch"] = Option.parse(["branch", "-b"], "main")
    parser = SwitchParser(switches)

    result = parser.parse(["--force", "-b", "dev", "extra"])
    # result.values == {"force": True, "branch": "dev"}
    # result.trailing == ["extra"]
"""
from __future__ import annotations

from collections import deque
from copy import deepcopy
from typing import Any, Mapping, Sequence

from switchboard.exceptions import (
    ConstructionError,
    MalformattedArgumentError,
    ParseError,
    RequiredArgumentMissingError,
)
from switchboard.logger import logger
from switchboard.ordered_map import OrderedMap
from switchboard.parser.parser_types import ParseResult, ParseState, ScanState
from switchboard.parser.spec import Argument, Option, ValueSpec
from switchboard.parser.utils import (
    coerce_bool,
    coerce_numeric,
    looks_like_switch,
    parse_hash_pairs,
    to_switch_form,
)
from switchboard.parser.value_type import ValueType


class SwitchParser:
    """
    Parses token lists against declared options and leading arguments.

    Features:
    - Options reachable by switch name, aliases and an automatic `-x` short alias.
    - `--name value`, `--name=value` and `-x=value` assignment.
    - `--no-name` for boolean options.
    - Bundled short switches (`-abc`), with the remainder of the bundle used as the
      value of a switch that needs input (`-n12`).
    - Greedy array and hash values that stop at the next switch.
    - Unrecognized switches passed through to `trailing`.
    - Aggregated reporting of every missing required value.
    """

    def __init__(
        self,
        switches: Mapping[str, ValueSpec] | None = None,
        arguments: Mapping[str, Argument] | None = None,
    ) -> None:
        """
        Initialize the parser.

        Args:
            switches: Options keyed by name. `Argument` entries found here are
                treated as leading arguments, in their declaration order.
            arguments: Additional leading arguments keyed by name.
        """
        self._options: OrderedMap[str, Option] = OrderedMap()
        self._arguments: OrderedMap[str, Argument] = OrderedMap()
        for key, spec in (switches or {}).items():
            if isinstance(spec, Argument):
                self._add_spec(self._arguments, spec)
            elif isinstance(spec, Option):
                self._add_spec(self._options, spec)
            else:
                raise ConstructionError(
                    f"Switch '{key}' must be an Option or Argument, "
                    f"got {type(spec).__name__}"
                )
        for key, spec in (arguments or {}).items():
            if not isinstance(spec, Argument):
                raise ConstructionError(
                    f"Argument '{key}' must be an Argument, got {type(spec).__name__}"
                )
            self._add_spec(self._arguments, spec)
        self._switches: OrderedMap[str, ValueSpec] = self._build_switch_index()

    def _add_spec(self, specs: OrderedMap[str, Any], spec: ValueSpec) -> None:
        name = spec.human_name
        if name in self._options or name in self._arguments:
            raise ConstructionError(f"'{name}' is already declared.")
        specs[name] = spec

    def _build_switch_index(self) -> OrderedMap[str, ValueSpec]:
        switches: OrderedMap[str, ValueSpec] = OrderedMap()

        def register(switch: str, spec: ValueSpec) -> None:
            existing = switches.get(switch)
            if existing is not None and existing is not spec:
                raise ConstructionError(
                    f"Switch '{switch}' is already used by '{existing.human_name}'"
                )
            switches[switch] = spec

        for spec in [*self._arguments.values(), *self._options.values()]:
            register(spec.switch_name, spec)
        for option in self._options.values():
            for alias in option.aliases:
                register(to_switch_form(alias), option)
        for option in self._options.values():
            if not option.aliases and len(option.human_name) > 1:
                short = f"-{option.human_name[0]}"
                if short not in switches:
                    switches[short] = option
        return switches

    @property
    def options(self) -> OrderedMap[str, Option]:
        """Declared options keyed by human name."""
        return self._options.copy()

    @property
    def arguments(self) -> OrderedMap[str, Argument]:
        """Declared leading arguments keyed by human name."""
        return self._arguments.copy()

    @property
    def switches(self) -> OrderedMap[str, ValueSpec]:
        """Every recognized switch form mapped to its spec."""
        return self._switches.copy()

    def get_spec(self, switch: str) -> ValueSpec | None:
        """Return the spec a switch resolves to, if any."""
        return self._switches.get(switch)

    def parse(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Parse a token list.

        Args:
            tokens (Sequence[str]): Raw tokens, without the program name.

        Returns:
            ParseResult: Resolved values, leading arguments and trailing tokens.

        Raises:
            RequiredArgumentMissingError: If required values are missing.
            MalformattedArgumentError: If a switch received an invalid value.
        """
        scan = ScanState(
            pile=deque(tokens or []),
            arguments=list(self._arguments.values()),
        )
        try:
            self._read_arguments(scan)
            self._transition(scan, ParseState.READING_SWITCHES)
            while scan.pile:
                self._read_token(scan)
            self._check_requirements(scan)
            result = self._finalize(scan)
        except ParseError as error:
            self._transition(scan, ParseState.FAILED)
            logger.debug("Parse failed: %s", error)
            raise
        self._transition(scan, ParseState.DONE)
        return result

    def _transition(self, scan: ScanState, state: ParseState) -> None:
        logger.debug("Parser state %s -> %s", scan.state, state)
        scan.state = state

    def _read_arguments(self, scan: ScanState) -> None:
        while scan.peek_is_value():
            argument = scan.next_argument()
            if argument is None:
                break
            scan.assigned[argument.human_name] = self._consume_input(
                scan, argument, argument.human_name, scan.shift()
            )

    def _read_token(self, scan: ScanState) -> None:
        token = scan.shift()
        if not looks_like_switch(token):
            scan.trailing.append(token)
            return

        switch, inline = token, None
        if "=" in token:
            switch, _, inline = token.partition("=")
            if switch not in self._switches:
                self._pass_through(scan, token)
                return

        spec = self._switches.get(switch)
        if spec is not None:
            self._resolve_switch(scan, switch, spec, inline)
            return

        negated = self._negated_option(switch)
        if negated is not None:
            scan.values[negated.human_name] = False
            return

        if self._is_conjoined(switch):
            self._read_conjoined(scan, switch)
            return

        self._pass_through(scan, token)

    def _pass_through(self, scan: ScanState, token: str) -> None:
        logger.debug("Unrecognized switch '%s' passed through to trailing", token)
        scan.trailing.append(token)

    def _negated_option(self, switch: str) -> Option | None:
        if not switch.startswith("--no-"):
            return None
        spec = self._switches.get(f"--{switch[5:]}")
        if isinstance(spec, Option) and spec.type is ValueType.BOOLEAN:
            return spec
        return None

    def _is_conjoined(self, switch: str) -> bool:
        return (
            not switch.startswith("--")
            and len(switch) > 2
            and f"-{switch[1]}" in self._switches
        )

    def _read_conjoined(self, scan: ScanState, token: str) -> None:
        letters = token[1:]
        logger.debug("Expanding conjoined switches '%s'", token)
        for position, letter in enumerate(letters):
            short = f"-{letter}"
            spec = self._switches.get(short)
            if spec is None:
                self._pass_through(scan, short)
                continue
            rest = letters[position + 1 :]
            if spec.input_required:
                self._resolve_switch(scan, short, spec, rest or None)
                return
            if rest:
                scan.values[spec.human_name] = True
            else:
                self._resolve_switch(scan, short, spec, None)

    def _resolve_switch(
        self, scan: ScanState, switch: str, spec: ValueSpec, inline: str | None
    ) -> None:
        if isinstance(spec, Argument):
            value = self._consume_input(scan, spec, switch, inline)
            if spec.human_name in scan.assigned:
                logger.debug(
                    "Ignoring '%s': argument '%s' was already given",
                    switch,
                    spec.human_name,
                )
            else:
                scan.assigned[spec.human_name] = value
            return

        if spec.input_required:
            value = self._consume_input(scan, spec, switch, inline)
        elif spec.type is ValueType.BOOLEAN:
            value = True if inline is None else coerce_bool(inline)
        elif inline is not None:
            value = inline
        elif scan.peek_is_value():
            value = scan.shift()
        else:
            value = True
        scan.values[spec.human_name] = value

    def _consume_input(
        self, scan: ScanState, spec: ValueSpec, switch: str, inline: str | None
    ) -> Any:
        if spec.type is ValueType.ARRAY:
            items = [] if inline is None else [inline]
            while scan.peek_is_value():
                items.append(scan.shift())
            return items

        if spec.type is ValueType.HASH:
            if inline is not None and ":" not in inline:
                # not a pair; the token stays in the pile for whoever reads next
                if inline:
                    scan.unshift(inline)
                inline = None
            pairs = {} if inline is None else parse_hash_pairs(inline)
            while scan.peek_is_value() and ":" in scan.pile[0]:
                pairs.update(parse_hash_pairs(scan.shift()))
            return pairs

        if inline is None:
            token = scan.peek()
            if token is None:
                raise RequiredArgumentMissingError.for_switch(switch)
            if looks_like_switch(token):
                raise MalformattedArgumentError.switch_as_value(switch, token)
            inline = scan.shift()

        if spec.type is ValueType.NUMERIC:
            try:
                return coerce_numeric(inline)
            except ValueError:
                raise MalformattedArgumentError.expected_numeric(switch, inline) from None
        return inline

    def _check_requirements(self, scan: ScanState) -> None:
        missing_arguments = [
            argument.human_name
            for argument in self._arguments.values()
            if argument.required and argument.human_name not in scan.assigned
        ]
        if missing_arguments:
            raise RequiredArgumentMissingError(missing_arguments)

        missing_switches = [
            option.switch_name
            for option in self._options.values()
            if option.required and option.human_name not in scan.values
        ]
        if missing_switches:
            raise RequiredArgumentMissingError(missing_switches)

    def _finalize(self, scan: ScanState) -> ParseResult:
        values = dict(scan.values)
        for option in self._options.values():
            if option.human_name not in values and option.default is not None:
                values[option.human_name] = deepcopy(option.default)

        arguments = [
            (
                scan.assigned[argument.human_name]
                if argument.human_name in scan.assigned
                else deepcopy(argument.default)
            )
            for argument in self._arguments.values()
        ]
        return ParseResult(values=values, arguments=arguments, trailing=scan.trailing)

    def formatted_usage(self) -> str:
        """
        Render the usage line for every declared spec.

        Arguments come first, then required options, then optional ones.
        """
        specs: list[ValueSpec] = [*self._arguments.values(), *self._options.values()]
        return " ".join(spec.usage() for spec in sorted(specs))

    def __str__(self) -> str:
        """Return a human-readable summary of the parser declarations."""
        required = sum(
            spec.required
            for spec in [*self._arguments.values(), *self._options.values()]
        )
        return (
            f"SwitchParser(arguments={len(self._arguments)}, "
            f"options={len(self._options)}, switches={len(self._switches)}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
