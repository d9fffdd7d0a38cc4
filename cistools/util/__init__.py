# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Utility package providing configuration helpers for cistools.

This package includes:
- Environment variable lookup with typed getters
- Configuration file loading (JSON and YAML)
- Configuration merging and schema validation
"""

from .config import (
    ENV_PREFIX, load_config_from_env, get_config_value, get_bool_config,
    get_int_config, get_float_config, merge_configs, validate_config,
    load_config_file
)

__all__ = [
    # Configuration utilities
    'ENV_PREFIX', 'load_config_from_env', 'get_config_value', 'get_bool_config',
    'get_int_config', 'get_float_config', 'merge_configs', 'validate_config',
    'load_config_file'
]
