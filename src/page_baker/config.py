"""Site configuration store.

Values are addressed with slash-separated keys such as `site/root` or
`baker/portable_urls`. Every write goes through the pydantic schemas so that
the stored configuration always satisfies them.
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from schemas.site import SiteConfigModel

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

_MISSING = object()


class SiteConfig:
    """Run-wide key-value configuration for a site.

    Example:
        config = SiteConfig({"site": {"pretty_urls": True}})
        config.get_value("site/pretty_urls")   # True
        config.get_value("site/root")          # "/"
    """

    def __init__(self, values: dict | None = None):
        self._values = self._validate(values or {})

    @classmethod
    def from_file(cls, path: Path) -> "SiteConfig":
        """Load a configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Raises:
            ConfigError: If the file can't be read or parsed
        """
        try:
            values = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Can't load configuration '{path}': {e}") from e

        if values is None:
            values = {}
        if not isinstance(values, dict):
            raise ConfigError(f"Configuration '{path}' must be a mapping")
        logger.debug(f"Loaded configuration from {path}")
        return cls(values)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get a value, returning `default` when the key isn't set."""
        value = self._lookup(key)
        return default if value is _MISSING else value

    def get_value_unchecked(self, key: str) -> Any:
        """Get the stored value as-is.

        Raises:
            KeyError: If the key isn't set
        """
        value = self._lookup(key)
        if value is _MISSING:
            raise KeyError(key)
        return value

    def has_value(self, key: str) -> bool:
        return self._lookup(key) is not _MISSING

    def set_value(self, key: str, value: Any) -> None:
        """Set a value and re-validate the configuration.

        Raises:
            ConfigError: If the new value is invalid
        """
        values = copy.deepcopy(self._values)
        *sections, name = key.split("/")
        container = values
        for section in sections:
            child = container.get(section)
            if not isinstance(child, dict):
                child = {}
                container[section] = child
            container = child
        container[name] = value
        self._values = self._validate(values)

    def to_dict(self) -> dict:
        return copy.deepcopy(self._values)

    def _lookup(self, key: str) -> Any:
        current: Any = self._values
        for part in key.split("/"):
            if not isinstance(current, dict) or part not in current:
                return _MISSING
            current = current[part]
        return current

    @staticmethod
    def _validate(values: dict) -> dict:
        try:
            return SiteConfigModel.model_validate(values).model_dump()
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
