"""
Configuration utilities for cistools.
Provides configuration loading and validation functions.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, List

logger = logging.getLogger(__name__)

ENV_PREFIX = "CISTOOLS_"


def load_config_from_env(prefix: str = ENV_PREFIX) -> Dict[str, str]:
    """
    Load configuration from environment variables with given prefix.
    """
    config = {}

    for key, value in os.environ.items():
        if key.startswith(prefix):
            # Remove prefix and convert to lowercase
            config_key = key[len(prefix):].lower()
            config[config_key] = value

    return config


def get_config_value(key: str, default: Any = None,
                    cast_type: Optional[type] = None,
                    env_prefix: str = ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            # Handle boolean conversion specially
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes', 'on')
            return bool(value)
        return cast_type(value)
    except (ValueError, TypeError):
        logger.warning(f"Ignoring {env_key}={value!r}: not a valid {cast_type.__name__}")
        return default


def get_bool_config(key: str, default: bool = False,
                   env_prefix: str = ENV_PREFIX) -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix)


def get_int_config(key: str, default: int = 0,
                  env_prefix: str = ENV_PREFIX) -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def get_float_config(key: str, default: float = 0.0,
                    env_prefix: str = ENV_PREFIX) -> float:
    """Get float configuration value."""
    return get_config_value(key, default, float, env_prefix)


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.
    Later configs override earlier ones.
    """
    result = {}

    for config in configs:
        if isinstance(config, dict):
            result.update(config)

    return result


def validate_config(config: Dict[str, Any],
                   schema: Dict[str, Dict[str, Any]]) -> List[str]:
    """
    Validate configuration against a schema.
    Returns list of validation errors.

    Schema format:
    {
        'field_name': {
            'required': True/False,
            'type': type,
            'choices': [list_of_valid_values],
            'min': min_value,
            'max': max_value
        }
    }
    """
    errors = []

    for field, rules in schema.items():
        if rules.get('required', False) and field not in config:
            errors.append(f"Missing required field: {field}")
            continue

        if field not in config:
            continue

        value = config[field]

        # Type validation; bool is an int subclass but never a valid count
        expected_type = rules.get('type')
        if expected_type and (not isinstance(value, expected_type)
                              or (expected_type is int and isinstance(value, bool))):
            errors.append(f"Field {field} must be of type {expected_type.__name__}")
            continue

        choices = rules.get('choices')
        if choices and value not in choices:
            errors.append(f"Field {field} must be one of: {choices}")

        # Range validation for numeric types
        if isinstance(value, (int, float)):
            min_val = rules.get('min')
            max_val = rules.get('max')

            if min_val is not None and value < min_val:
                errors.append(f"Field {field} must be >= {min_val}")

            if max_val is not None and value > max_val:
                errors.append(f"Field {field} must be <= {max_val}")

    return errors


def load_config_file(file_path: str) -> Dict[str, Any]:
    """Load configuration from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()
    logger.debug(f"Loading configuration from {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext in ['.json']:
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            import yaml
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    return data or {}
