"""Relationships parser for AASX packages."""

from __future__ import annotations

from typing import Dict, Iterable, List

from lxml import etree

from ..constants import OPC_RELATIONSHIPS_NS, TARGET_MODE_INTERNAL
from ..models.relationship import Relationship
from ..utils.xml_utils import local_name, new_root, parse_xml, to_bytes


class RelationshipsParser:
    """Parse and build the ``_rels/*.rels`` parts of the package."""

    NAMESPACE = OPC_RELATIONSHIPS_NS

    def parse_relationships(self, xml_bytes: bytes, rels_path: str = "") -> List[Dict[str, str]]:
        """
        Parse a relationship document.

        Relationship elements without ``Id``, ``Type`` or ``Target`` are
        skipped; a document whose root is not ``Relationships`` yields no
        relationships.

        Args:
            xml_bytes: Raw document
            rels_path: Archive entry name, for error messages

        Returns:
            Relationship dictionaries in document order
        """
        root = parse_xml(xml_bytes, rels_path)
        if local_name(root) != "Relationships":
            return []

        relationships: List[Dict[str, str]] = []
        for rel_element in root:
            if local_name(rel_element) != "Relationship":
                continue
            rel = self.parse_relationship(rel_element)
            if rel["id"] and rel["type"] and rel["target"]:
                relationships.append(rel)
        return relationships

    def parse_relationship(self, rel_element) -> Dict[str, str]:
        return {
            "id": rel_element.get("Id", ""),
            "type": rel_element.get("Type", ""),
            "target": rel_element.get("Target", ""),
            "target_mode": rel_element.get("TargetMode", TARGET_MODE_INTERNAL),
        }

    def build_relationships(self, relationships: Iterable[Relationship]) -> bytes:
        """Generate a relationship document."""
        root = new_root(self.NAMESPACE, "Relationships")
        for rel in relationships:
            rel_elem = etree.SubElement(root, f"{{{self.NAMESPACE}}}Relationship")
            rel_elem.set("Id", rel.id)
            rel_elem.set("Type", rel.rel_type)
            rel_elem.set("Target", rel.target)
            if rel.target_mode and rel.target_mode != TARGET_MODE_INTERNAL:
                rel_elem.set("TargetMode", rel.target_mode)
        return to_bytes(root)
