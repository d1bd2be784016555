"""
Module execution entry point.

Allows running with: python -m ssz_cli
"""

import sys
from ssz_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
