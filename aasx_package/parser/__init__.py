"""
Parser module for AASX packages.

Decodes the zip container, ``[Content_Types].xml`` and the relationship
documents into the in-memory package model.
"""

from .content_types import ContentTypes
from .relationships import RelationshipManager
from .relationships_parser import RelationshipsParser
from .package_reader import PackageReader, PackageState

__all__ = [
    "ContentTypes",
    "RelationshipManager",
    "RelationshipsParser",
    "PackageReader",
    "PackageState",
]
