# Switchboard — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads switch declarations from YAML or TOML files.

A declaration file lists leading arguments and options in order:

    arguments:
      - name: interval
        type: numeric
    options:
      - names: [unit, -u]
        value: days
      - names: force
        value: false
      - names: tags
        type: array

Options accept either an untyped `value` shorthand (inferred the same way as
`Option.parse`) or explicit `type` / `default` / `required` fields.
"""
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from switchboard.exceptions import ConfigError
from switchboard.logger import logger
from switchboard.ordered_map import OrderedMap
from switchboard.parser.literal import literal_from
from switchboard.parser.spec import Argument, Option
from switchboard.parser.switch_parser import SwitchParser
from switchboard.parser.value_type import ValueType


class RawOption(BaseModel):
    """Raw option model for Switchboard declaration files."""

    names: list[str]
    description: str | None = None
    type: str | None = None
    default: Any = None
    required: bool = False
    value: Any = None

    @field_validator("names", mode="before")
    @classmethod
    def validate_names(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("names")
    @classmethod
    def validate_names_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("names must contain at least one name")
        return value

    @model_validator(mode="after")
    def validate_value_shorthand(self) -> RawOption:
        if self.value is not None and (
            self.type is not None or self.default is not None or self.required
        ):
            raise ValueError("'value' cannot be combined with type, default or required")
        return self

    def to_option(self) -> Option:
        if self.value is not None:
            option = Option.parse(self.names, self.value)
            return replace(option, description=self.description)
        name, *aliases = self.names
        if self.type is not None:
            value_type: ValueType | str = self.type
        elif self.default is not None:
            value_type = literal_from(self.default).resolve().type
        else:
            value_type = ValueType.DEFAULT
        return Option(
            name, self.description, self.required, value_type, self.default, tuple(aliases)
        )


class RawArgument(BaseModel):
    """Raw leading argument model for Switchboard declaration files."""

    name: str
    description: str | None = None
    type: str = "string"
    default: Any = None
    required: bool | None = None

    def to_argument(self) -> Argument:
        required = self.default is None if self.required is None else self.required
        return Argument(self.name, self.description, required, self.type, self.default)


class SwitchboardConfig(BaseModel):
    """Switchboard declaration file model."""

    arguments: list[RawArgument] = Field(default_factory=list)
    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self) -> SwitchParser:
        arguments: OrderedMap[str, Argument] = OrderedMap()
        for raw_argument in self.arguments:
            argument = raw_argument.to_argument()
            arguments[argument.human_name] = argument
        switches: OrderedMap[str, Option] = OrderedMap()
        for raw_option in self.options:
            option = raw_option.to_option()
            switches[option.human_name] = option
        return SwitchParser(switches, arguments)


def loader(file_path: Path | str) -> SwitchParser:
    """
    Load switch declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the declaration file.

    Returns:
        SwitchParser: A parser built from the declarations.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
        ConstructionError: If a declared option or argument is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse '{path}': {error}") from error

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary with 'arguments' and/or "
            "'options' lists.\n"
            "Example:\n"
            "options:\n"
            "  - names: [branch, -b]\n"
            "    value: main"
        )

    try:
        config = SwitchboardConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid declarations in '{path}':\n{error}") from error

    logger.debug(
        "Loaded %d argument(s) and %d option(s) from '%s'",
        len(config.arguments),
        len(config.options),
        path,
    )
    return config.to_parser()
