"""
Models module for AASX packages.

Contains the part and relationship value classes and the part registry.
"""

from .part_uri import PartURI
from .part import Part
from .relationship import Relationship, SupplementaryRelationship
from .part_registry import PartRegistry

__all__ = [
    "PartURI",
    "Part",
    "Relationship",
    "SupplementaryRelationship",
    "PartRegistry",
]
