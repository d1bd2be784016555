"""
Canonical SSZ CLI

Command-line interface for encoding, decoding and Merkleizing typed values.

Usage:
    python -m ssz_cli serialize "Vector[uint8, 4]" "[1, 2, 3, 4]"
    python -m ssz_cli deserialize "Vector[uint8, 4]" 0x01020304
    python -m ssz_cli root "List[uint64, 16]" "[1, 2, 3]"
    python -m ssz_cli describe "Vector[List[uint8, 8], 3]"
"""

__version__ = "0.1.0"
