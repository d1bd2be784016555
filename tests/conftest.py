"""
Pytest configuration and shared fixtures for canonical SSZ tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_bytes4 = _common.make_bytes4
make_variable_vector = _common.make_variable_vector


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def bytes4():
    """Provide Vector[uint8, 4]([1, 2, 3, 4])."""
    return make_bytes4()


@pytest.fixture
def variable_vector():
    """Provide a Vector of three variable-size byte lists."""
    return make_variable_vector()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no SSZ_* environment variables."""
    for name in (
        "SSZ_LOG_LEVEL",
        "SSZ_LOG_FILE",
        "SSZ_MAX_INPUT_BYTES",
        "SSZ_OUTPUT_FORMAT",
        "SSZ_PRELOAD_ZERO_HASH_DEPTH",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path

