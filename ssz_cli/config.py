"""
CLI Configuration

Resolves the RuntimeConfig used by the CLI from an explicit file, a default
location, and environment variables (which take precedence).
"""

from __future__ import annotations

from pathlib import Path

from ssz_core.config import RuntimeConfig


DEFAULT_CONFIG_PATHS = (
    Path("ssz.json"),
    Path(".ssz.json"),
    Path("ssz.yaml"),
)


def _default_paths() -> list[Path]:
    return [Path.cwd() / p for p in DEFAULT_CONFIG_PATHS] + [
        Path.home() / ".config" / "ssz" / "config.json",
    ]


def load_config(config_path: Path | None = None) -> RuntimeConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings.

    Args:
        config_path: Optional path to config file; must exist when given

    Returns:
        Merged configuration
    """
    config = RuntimeConfig()

    if config_path is not None:
        config = RuntimeConfig.from_file(config_path)
    else:
        for default_path in _default_paths():
            if default_path.exists():
                config = RuntimeConfig.from_file(default_path)
                break

    return config.with_env_overrides()
