"""
Content types for AASX packages.

Builds ``[Content_Types].xml`` from the registered parts on write, and
resolves the content type of each archive entry on read.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from lxml import etree

from ..constants import CONTENT_TYPE_DEFAULT, CONTENT_TYPE_RELATIONSHIPS, CONTENT_TYPES_NS
from ..models.part import Part
from ..utils.paths import canonical_key, extension_of
from ..utils.xml_utils import local_name, new_root, parse_xml, to_bytes

logger = logging.getLogger(__name__)


class ContentTypes:
    """
    Default (per extension) and override (per part) content types.

    Attributes:
        defaults: Extension (lower-cased, without dot) -> content type
        overrides: Part path -> content type
    """

    def __init__(self, defaults: Optional[Dict[str, str]] = None,
                 overrides: Optional[Dict[str, str]] = None):
        self.defaults: Dict[str, str] = dict(defaults or {})
        self.overrides: Dict[str, str] = dict(overrides or {})

    @classmethod
    def from_parts(cls, parts: Iterable[Part]) -> "ContentTypes":
        """
        Derive content types from parts.

        The first part seen with an extension sets the default for that
        extension; later parts with the same extension but another content
        type become overrides, as do parts without an extension.
        """
        content_types = cls()
        for part in parts:
            ext = extension_of(part.path)
            if not ext:
                content_types.overrides[part.path] = part.content_type
                continue

            if ext == "rels":
                existing = CONTENT_TYPE_RELATIONSHIPS
            else:
                existing = content_types.defaults.get(ext)
            if existing is None:
                content_types.defaults[ext] = part.content_type
            elif existing != part.content_type:
                content_types.overrides[part.path] = part.content_type
        return content_types

    @classmethod
    def from_xml(cls, xml_bytes: bytes) -> "ContentTypes":
        """
        Parse a ``[Content_Types].xml`` document.

        Override part names are stored by canonical key so that lookups are
        case-insensitive.

        Raises:
            InvalidFormatError: If the document is not well-formed
        """
        content_types = cls()
        root = parse_xml(xml_bytes, "[Content_Types].xml")
        if local_name(root) != "Types":
            logger.warning(f"Unexpected content types root element: {root.tag}")
            return content_types

        for child in root:
            name = local_name(child)
            if name == "Default":
                extension = child.get("Extension", "")
                content_type = child.get("ContentType", "")
                if extension and content_type:
                    content_types.defaults[extension.lower()] = content_type
            elif name == "Override":
                part_name = child.get("PartName", "")
                content_type = child.get("ContentType", "")
                if part_name and content_type:
                    content_types.overrides[canonical_key(part_name)] = content_type

        logger.debug(f"Parsed {len(content_types.defaults)} default and "
                     f"{len(content_types.overrides)} override content types")
        return content_types

    def resolve(self, path: str) -> str:
        """
        Resolve the content type of a part.

        Args:
            path: Part path

        Returns:
            The override for the part, else the default for its extension,
            else ``application/octet-stream``
        """
        override = self.overrides.get(canonical_key(path))
        if override:
            return override
        return self.defaults.get(extension_of(path), CONTENT_TYPE_DEFAULT)

    def to_xml(self) -> bytes:
        """Generate ``[Content_Types].xml``."""
        root = new_root(CONTENT_TYPES_NS, "Types")

        defaults = [("rels", CONTENT_TYPE_RELATIONSHIPS)]
        defaults.extend(sorted(item for item in self.defaults.items() if item[0] != "rels"))
        for extension, content_type in defaults:
            default_elem = etree.SubElement(root, f"{{{CONTENT_TYPES_NS}}}Default")
            default_elem.set("Extension", extension)
            default_elem.set("ContentType", content_type)

        for part_name, content_type in sorted(self.overrides.items()):
            override_elem = etree.SubElement(root, f"{{{CONTENT_TYPES_NS}}}Override")
            override_elem.set("PartName", part_name)
            override_elem.set("ContentType", content_type)

        return to_bytes(root)
