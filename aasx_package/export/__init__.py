"""
Export module for AASX packages.

Encodes the in-memory package model into archive bytes.
"""

from .package_writer import PackageWriter

__all__ = [
    "PackageWriter",
]
