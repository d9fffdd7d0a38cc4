"""
Configuration module for cistools.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
import threading
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Optional

from ..types.errors import ConfigurationError
from ..util.config import get_int_config, load_config_file, merge_configs, validate_config

logger = logging.getLogger(__name__)

SETTINGS_SCHEMA = {
    'password_length': {'type': int, 'min': 0},
    'url_token_length': {'type': int, 'min': 0},
}


@dataclass
class Settings:
    """Library-wide defaults"""
    password_length: int = 10
    url_token_length: int = 8

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create settings from a mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown settings: {', '.join(sorted(unknown))}")

        settings = cls(**{key: value for key, value in data.items() if key in known})
        settings.validate()
        return settings

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> "Settings":
        """
        Load settings from defaults, an optional JSON/YAML file and the
        environment (CISTOOLS_PASSWORD_LENGTH, CISTOOLS_URL_TOKEN_LENGTH),
        later sources overriding earlier ones.
        """
        data = asdict(cls())
        if config_file:
            data = merge_configs(data, load_config_file(config_file))

        for key in SETTINGS_SCHEMA:
            data[key] = get_int_config(key, data.get(key))

        return cls.from_dict(data)

    def validate(self) -> bool:
        """Validate the settings"""
        errors = validate_config(asdict(self), SETTINGS_SCHEMA)
        if errors:
            raise ConfigurationError("; ".join(errors), details={'errors': errors})
        return True


_settings: Optional[Settings] = None
_settings_lock = threading.Lock()


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use"""
    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = Settings.load()
        return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call reloads them"""
    global _settings
    with _settings_lock:
        _settings = None
