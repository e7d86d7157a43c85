"""Persistent CLI configuration (API key and base URL)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.synq.fm/v1"
CONFIG_DIR_ENV = "SYNQ_CONFIG_DIR"


class ConfigRecord(BaseModel):
    """The stored record. Keys on disk use the camelCase aliases."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    api_key: str = Field(default="", alias="apiKey")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="baseUrl")


# Record keys as they appear on disk
KEYS = tuple(field.alias for field in ConfigRecord.model_fields.values())


class ConfigStore:
    """File-backed key-value store with schema defaults."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def from_env(cls) -> "ConfigStore":
        """Create a store at $SYNQ_CONFIG_DIR/config.json or ~/.synq/config.json."""
        config_dir = os.getenv(CONFIG_DIR_ENV)
        base = Path(config_dir) if config_dir else Path.home() / ".synq"
        return cls(base / "config.json")

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable config file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: expected a JSON object", self.path)
            return {}
        valid = {}
        for key in KEYS:
            if key not in data:
                continue
            try:
                ConfigRecord.model_validate({key: data[key]})
            except SchemaError:
                logger.warning("Ignoring invalid %s in config file %s", key, self.path)
                continue
            valid[key] = data[key]
        return valid

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
        logger.debug("Wrote config to %s", self.path)

    def _record(self) -> ConfigRecord:
        return ConfigRecord.model_validate(self._read())

    def get(self, key: str) -> str:
        """Return the stored value for ``key`` or its default."""
        if key not in KEYS:
            raise KeyError(key)
        return self._record().model_dump(by_alias=True)[key]

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` (as a string) under ``key`` and persist immediately."""
        if key not in KEYS:
            raise KeyError(key)
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def get_all(self) -> dict[str, str]:
        """Return the full record with defaults filled in."""
        return self._record().model_dump(by_alias=True)

    def clear(self) -> None:
        """Remove all stored keys so reads fall back to defaults."""
        self.path.unlink(missing_ok=True)
        logger.debug("Cleared config at %s", self.path)

    def is_configured(self) -> bool:
        """True when an API key has been stored."""
        return bool(self.get("apiKey"))
