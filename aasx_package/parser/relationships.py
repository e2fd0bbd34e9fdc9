"""
Relationship manager for AASX packages.

Holds the typed relationship graph of a package: for every source part
(or the package root) an ordered list of edges.
"""

import logging
from typing import Dict, Iterator, List, Tuple

from ..constants import TARGET_MODE_INTERNAL
from ..models.relationship import Relationship
from ..utils.paths import canonical_key

logger = logging.getLogger(__name__)

REL_ID_PREFIX = "R"


class RelationshipManager:
    """
    Manages relationships between package parts.

    Sources and targets are compared by canonical key. Relationship ids are
    allocated from a counter owned by this instance; ids read from an
    existing archive are kept as they are and do not advance the counter.
    """

    def __init__(self):
        """Initialize relationship manager."""
        self.relationships: Dict[str, List[Relationship]] = {}
        self.next_rel_id = 1

    def _next_id(self) -> str:
        rel_id = f"{REL_ID_PREFIX}{self.next_rel_id:08x}"
        self.next_rel_id += 1
        return rel_id

    def add(self, source: str, target: str, rel_type: str) -> str:
        """
        Add a relationship with a newly allocated id.

        Args:
            source: Source part path (``""`` for the package root)
            target: Target part path
            rel_type: Relationship type URI

        Returns:
            The relationship id
        """
        return self.add_with_id(source, target, rel_type, self._next_id())

    def add_with_id(self, source: str, target: str, rel_type: str, rel_id: str,
                    target_mode: str = TARGET_MODE_INTERNAL) -> str:
        """
        Add a relationship keeping a given id.

        Used when loading relationships from an existing archive.
        """
        source_key = canonical_key(source)
        rel = Relationship(id=rel_id, rel_type=rel_type, source=source_key, target=target,
                           target_mode=target_mode)
        self.relationships.setdefault(source_key, []).append(rel)
        logger.debug(f"Added relationship {rel_id} {source_key or '/'} -> {target} ({rel_type})")
        return rel_id

    def remove(self, source: str, target: str, rel_type: str) -> None:
        """Remove all relationships matching source, target and type."""
        source_key = canonical_key(source)
        target_key = canonical_key(target)
        old = self.relationships.get(source_key)
        if not old:
            return

        self.relationships[source_key] = [
            rel for rel in old
            if not (rel.target_key == target_key and rel.rel_type == rel_type)
        ]
        logger.debug(f"Removed {len(old) - len(self.relationships[source_key])} relationship(s) "
                     f"{source_key or '/'} -> {target_key} ({rel_type})")

    def remove_source(self, source: str) -> None:
        """Drop all relationships originating from ``source``."""
        self.relationships.pop(canonical_key(source), None)

    def remove_all_with_source_or_target(self, path: str) -> None:
        """
        Remove every relationship touching ``path``.

        Drops the relationships originating from the part and every
        relationship elsewhere that targets it, so that no relationship
        survives that points at a deleted part.
        """
        key = canonical_key(path)
        self.relationships.pop(key, None)

        for source in list(self.relationships.keys()):
            filtered = [rel for rel in self.relationships[source] if rel.target_key != key]
            if filtered:
                self.relationships[source] = filtered
            else:
                del self.relationships[source]

        logger.debug(f"Removed all relationships with source or target {key}")

    def has(self, source: str, target: str, rel_type: str) -> bool:
        """Whether a relationship with this source, target and type exists."""
        target_key = canonical_key(target)
        return any(
            rel.rel_type == rel_type and rel.target_key == target_key
            for rel in self.relationships.get(canonical_key(source), [])
        )

    def by_type(self, source: str, rel_type: str) -> List[Relationship]:
        """
        Get relationships of a specific type.

        Args:
            source: Source part path (``""`` for the package root)
            rel_type: Type of relationship to filter by

        Returns:
            Relationships in the order they were added
        """
        return [
            rel for rel in self.relationships.get(canonical_key(source), [])
            if rel.rel_type == rel_type
        ]

    def get_relationships(self, source: str) -> List[Relationship]:
        """Get all relationships of a source."""
        return list(self.relationships.get(canonical_key(source), []))

    def items(self) -> Iterator[Tuple[str, List[Relationship]]]:
        """Iterate over non-empty relationship buckets."""
        for source, rels in self.relationships.items():
            if rels:
                yield source, list(rels)

    def __len__(self) -> int:
        return sum(len(rels) for rels in self.relationships.values())
