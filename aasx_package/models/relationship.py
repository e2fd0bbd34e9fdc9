"""Relationship model for AASX packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from ..constants import TARGET_MODE_INTERNAL
from ..utils.paths import canonical_key
from .part import Part


@dataclass(frozen=True)
class Relationship:
    """
    A typed edge from a source part (or the package root) to a target part.

    Attributes:
        id: Relationship identifier, unique within the package
        rel_type: Relationship type URI
        source: Canonical key of the source part, ``""`` for the package root
        target: Target path as recorded
        target_mode: ``Internal`` or ``External``; external targets are kept
            unresolved
    """

    id: str
    rel_type: str
    source: str
    target: str
    target_mode: str = TARGET_MODE_INTERNAL

    @property
    def target_key(self) -> str:
        """Canonical key of the target part."""
        return canonical_key(self.target)


class SupplementaryRelationship(NamedTuple):
    """A spec part together with one of its supplementary parts."""

    spec: Part
    supplementary: Part
