# Clade CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""configuration.py
Typed configuration files for Clade applications.

Subclass `Configuration` and declare properties as pydantic fields with defaults:

    class ToolConfiguration(Configuration):
        workers: int = 4
        output: str = "build"

    config = ToolConfiguration.load("tool.toml", overrides={"workers": 8})

Files may be TOML (`.toml`), YAML (`.yaml`, `.yml`) or JSON (`.json`); any other
suffix is read as YAML. The top-level document must be a mapping of property names
to values.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from clade.exceptions import ConfigurationError
from clade.logger import logger
from clade.messages import Messages


def _read_document(path: Path) -> Any:
    suffix = path.suffix.lower()
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix == ".toml":
            return toml.load(config_file)
        if suffix == ".json":
            return json.load(config_file)
        return yaml.safe_load(config_file)


class Configuration(BaseModel):
    """
    Base class for application configurations.

    Unset properties report their declared default. Unknown properties in a file are
    rejected; unknown keys in `overrides` are ignored.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @classmethod
    def load(
        cls,
        file: str | Path | None = None,
        overrides: Mapping[str, Any] | None = None,
        messages: Messages | None = None,
    ) -> Configuration:
        """
        Build a configuration from an optional file and overrides.

        Args:
            file (str | Path | None): Configuration file to read.
            overrides (Mapping[str, Any] | None): Values applied after the file, only
                for declared properties.
            messages (Messages | None): Provider of the error texts.

        Returns:
            Configuration: The validated configuration.

        Raises:
            ConfigurationError: If the file does not exist or is not readable, or if
                its content is not a valid mapping of declared properties.
        """
        messages = messages or Messages()
        values: dict[str, Any] = {}
        source = cls.__name__

        if file:
            path = Path(file).expanduser().resolve()
            source = str(path)
            if not path.is_file():
                raise ConfigurationError(messages.configuration_not_found(str(path)))
            logger.info(messages.using_configuration(str(path)))
            try:
                document = _read_document(path)
            except OSError as error:
                raise ConfigurationError(
                    messages.configuration_not_found(str(path))
                ) from error
            except (
                toml.TomlDecodeError,
                yaml.YAMLError,
                json.JSONDecodeError,
                UnicodeDecodeError,
            ) as error:
                raise ConfigurationError(messages.configuration_invalid(str(path))) from error

            if document is None:
                document = {}
            if not isinstance(document, dict):
                raise ConfigurationError(messages.configuration_invalid(str(path)))
            values.update(document)

        for key, value in (overrides or {}).items():
            if key in cls.model_fields:
                values[key] = value
            else:
                logger.debug("Ignoring unknown configuration override '%s'.", key)

        try:
            return cls(**values)
        except ValidationError as error:
            raise ConfigurationError(messages.configuration_invalid(source)) from error
