"""
Entry point for running aasx_package as a module.

Usage:
    python -m aasx_package info package.aasx
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
