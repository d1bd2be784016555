"""
Runtime Configuration Module

Provides configuration loading and management.
"""

from .runtime import (
    DEFAULT_MAX_INPUT_BYTES,
    RuntimeConfig,
    LoggingConfig,
    CodecConfig,
    MerkleConfig,
    get_default_config,
    set_default_config,
    get_default_config_template,
)

__all__ = [
    "DEFAULT_MAX_INPUT_BYTES",
    "RuntimeConfig",
    "LoggingConfig",
    "CodecConfig",
    "MerkleConfig",
    "get_default_config",
    "set_default_config",
    "get_default_config_template",
]
