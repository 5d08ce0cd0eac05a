"""
Process configuration: a property store fed from a TOML file and `-D` overrides
"""

from __future__ import annotations

import logging
import os
import pathlib
import sys
import tomllib
from typing import TYPE_CHECKING

from .errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from os import PathLike

LOGGER = logging.getLogger(__name__)

CONFIG_ENV = "TOOLCLI_CONFIG"
LOG_LEVEL_ENV = "TOOLCLI_LOG_LEVEL"
LOG_LEVEL_PROPERTY = "log.level"
DEFAULT_CONFIG_PATH = pathlib.Path("~/.config/toolcli/config.toml")


def configure_logger(log_level: str):
    """
    Configures the logging settings based on the provided log level.

    Args:
        log_level: The logging level to set (e.g., 'INFO', 'DEBUG').
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(asctime)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger(__package__).setLevel(level)


class Config:
    """Key/value properties visible to every tool for the rest of the run."""

    def __init__(self, properties: Mapping[str, str] | None = None):
        self._properties: dict[str, str] = dict(properties or {})

    def set_property(self, key: str, value: str) -> None:
        LOGGER.debug("setting property %s=%s", key, value)
        self._properties[key] = value

    def get_property(self, key: str, default: str | None = None) -> str | None:
        return self._properties.get(key, default)

    def properties(self) -> dict[str, str]:
        return dict(self._properties)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def load_configuration(self, path: str | PathLike | None = None) -> None:
        """Read properties from a TOML file.

        An explicit `path` (or one named by $TOOLCLI_CONFIG) must exist; the per-user
        default file is optional. Nested tables become dotted keys."""
        explicit = path if path is not None else os.environ.get(CONFIG_ENV)
        if explicit:
            file = pathlib.Path(explicit)
        else:
            file = DEFAULT_CONFIG_PATH.expanduser()
            if not file.is_file():
                LOGGER.debug("no configuration file at %s", file)
                return

        try:
            with open(file, "rb") as fp:
                document = tomllib.load(fp)
        except OSError as e:
            raise ConfigurationError(f"Failed to read {file}: {e}") from e
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Failed to parse {file}: {e}") from e

        for key, value in _flatten(document):
            self._properties[key] = value
        LOGGER.debug("loaded configuration from %s", file)

    def log_level(self) -> str:
        return os.environ.get(LOG_LEVEL_ENV) or self.get_property(LOG_LEVEL_PROPERTY, "WARNING")


def _flatten(table: Mapping[str, object], prefix: str = ""):
    for key, value in table.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            yield from _flatten(value, prefix=f"{name}.")
        elif isinstance(value, bool):
            yield name, str(value).lower()
        else:
            yield name, str(value)
