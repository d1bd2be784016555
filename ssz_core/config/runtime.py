"""
Runtime Configuration

Central configuration for logging, input bounds and Merkleization setup.
"""

from __future__ import annotations

import copy
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "SSZ_"

# Encodings carry no length prefix, so decoders bound input out of band
DEFAULT_MAX_INPUT_BYTES = 16 * 1024 * 1024

OUTPUT_FORMATS = ("human", "json")


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class CodecConfig:
    """Configuration for encoding and decoding."""
    max_input_bytes: int = DEFAULT_MAX_INPUT_BYTES

    def __post_init__(self):
        if self.max_input_bytes <= 0:
            raise ValueError(f"max_input_bytes must be positive, got {self.max_input_bytes}")


@dataclass
class MerkleConfig:
    """Configuration for Merkleization."""
    # Depth up to which the zero-hash table is filled at startup (0 = lazy)
    preload_zero_hash_depth: int = 0


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - JSON or YAML file
    - Programmatic construction
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)
    merkle: MerkleConfig = field(default_factory=MerkleConfig)
    output_format: str = "human"
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}"
            )

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SSZ_LOG_LEVEL: Log level name
        - SSZ_LOG_FILE: Optional log file path
        - SSZ_MAX_INPUT_BYTES: Largest encoding accepted for decoding
        - SSZ_OUTPUT_FORMAT: "human" or "json"
        - SSZ_PRELOAD_ZERO_HASH_DEPTH: Zero-hash table depth to fill at startup
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        if os.getenv(f"{ENV_PREFIX}MAX_INPUT_BYTES"):
            overrides.setdefault("codec", {})["max_input_bytes"] = int(
                os.getenv(f"{ENV_PREFIX}MAX_INPUT_BYTES", str(DEFAULT_MAX_INPUT_BYTES))
            )

        if os.getenv(f"{ENV_PREFIX}PRELOAD_ZERO_HASH_DEPTH"):
            overrides.setdefault("merkle", {})["preload_zero_hash_depth"] = int(
                os.getenv(f"{ENV_PREFIX}PRELOAD_ZERO_HASH_DEPTH", "0")
            )

        if os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT"):
            overrides["output_format"] = os.getenv(f"{ENV_PREFIX}OUTPUT_FORMAT")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """
        Load configuration purely from environment variables.

        Uses defaults for any values not specified in env vars.
        """
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_file(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a JSON or YAML file (by extension)."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        if path.suffix in (".yaml", ".yml"):
            import yaml
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        else:
            with open(path) as f:
                data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        logging_data = data.get("logging", {})
        codec_data = data.get("codec", {})
        merkle_data = data.get("merkle", {})

        return cls(
            logging=LoggingConfig(**logging_data) if logging_data else LoggingConfig(),
            codec=CodecConfig(**codec_data) if codec_data else CodecConfig(),
            merkle=MerkleConfig(**merkle_data) if merkle_data else MerkleConfig(),
            output_format=data.get("output_format", "human"),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        data = copy.deepcopy(self.to_dict())

        for section in ("logging", "codec", "merkle"):
            data[section].update(overrides.get(section, {}))

        if "output_format" in overrides:
            data["output_format"] = overrides["output_format"]

        # Rebuild so the dataclass checks run on overridden values
        return self.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
            "codec": {
                "max_input_bytes": self.codec.max_input_bytes,
            },
            "merkle": {
                "preload_zero_hash_depth": self.merkle.preload_zero_hash_depth,
            },
            "output_format": self.output_format,
            "extra": self.extra,
        }


def get_default_config_template() -> str:
    """Return a JSON template for a configuration file."""
    return json.dumps(RuntimeConfig().to_dict(), indent=2) + "\n"


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: RuntimeConfig) -> None:
    """Set the default runtime configuration."""
    global _default_config
    _default_config = config
