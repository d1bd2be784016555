"""
CLI command modules.
"""

from ssz_cli.commands import codec, root

__all__ = ["codec", "root"]
