"""
Package reader for AASX files.

Decodes a zip archive into the in-memory package model: the part registry,
the relationship graph and the origin part.
"""

from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass, field
from typing import Dict, List

from ..constants import CONTENT_TYPES_PART, RELATION_TYPE_AASX_ORIGIN, TARGET_MODE_EXTERNAL
from ..exceptions import AasxPackageError, InvalidFormatError, InvalidPartURIError, NoOriginPartError
from ..models.part import Part
from ..models.part_registry import PartRegistry
from ..utils.paths import (
    canonical_key,
    ensure_leading_slash,
    in_rels_dir,
    is_rels_path,
    resolve_target,
    source_from_rels_path,
)
from .content_types import ContentTypes
from .relationships import RelationshipManager
from .relationships_parser import RelationshipsParser

logger = logging.getLogger(__name__)


@dataclass
class PackageState:
    """
    In-memory model of one package.

    Attributes:
        parts: Registry of all parts
        relationships: Relationship graph
        origin: Canonical key of the origin part
    """

    parts: PartRegistry = field(default_factory=PartRegistry)
    relationships: RelationshipManager = field(default_factory=RelationshipManager)
    origin: str = ""


class PackageReader:
    """
    Reads AASX package contents from bytes.

    Handles the zip container, ``[Content_Types].xml`` and every
    relationship document.
    """

    def __init__(self):
        self.relationships_parser = RelationshipsParser()

    def read(self, data: bytes) -> PackageState:
        """
        Decode a package.

        Args:
            data: Raw archive bytes

        Returns:
            The decoded package state

        Raises:
            InvalidFormatError: If the archive or its XML cannot be read
            NoOriginPartError: If the archive declares no origin part
        """
        try:
            entries = self._unzip(data)
            state = PackageState()
            content_types = self._parse_content_types(entries)
            self._parse_relationships(entries, state)

            if not state.origin:
                raise NoOriginPartError()

            self._register_parts(entries, content_types, state)
        except AasxPackageError:
            raise
        except Exception as e:
            logger.error(f"Failed to read package: {e}")
            raise InvalidFormatError(str(e)) from e

        logger.debug(f"Read package with {len(state.parts)} parts and "
                     f"{len(state.relationships)} relationships")
        return state

    def _unzip(self, data: bytes) -> Dict[str, bytes]:
        """Read all archive entries, keeping the archive order."""
        try:
            with zipfile.ZipFile(io.BytesIO(data), 'r') as zip_file:
                entries = {}
                for file_info in zip_file.infolist():
                    if file_info.is_dir():
                        continue
                    entries[file_info.filename] = zip_file.read(file_info)
                return entries
        except (zipfile.BadZipFile, zipfile.LargeZipFile, EOFError, OSError, NotImplementedError) as e:
            raise InvalidFormatError(str(e)) from e

    def _parse_content_types(self, entries: Dict[str, bytes]) -> ContentTypes:
        """Parse [Content_Types].xml; a missing document yields empty tables."""
        content_types_xml = entries.get(CONTENT_TYPES_PART)
        if content_types_xml is None:
            logger.debug("Package has no [Content_Types].xml")
            return ContentTypes()
        return ContentTypes.from_xml(content_types_xml)

    def _parse_relationships(self, entries: Dict[str, bytes], state: PackageState) -> None:
        """Load every relationship document and locate the origin part."""
        rels_files: List[str] = [name for name in entries if is_rels_path(name)]
        for rels_path in rels_files:
            source = source_from_rels_path(rels_path)
            relationships = self.relationships_parser.parse_relationships(entries[rels_path], rels_path)

            for rel in relationships:
                if rel["target_mode"] == TARGET_MODE_EXTERNAL:
                    target = rel["target"]
                else:
                    target = resolve_target(source, rel["target"])
                state.relationships.add_with_id(source, target, rel["type"], rel["id"],
                                                rel["target_mode"])

                if rel["type"] == RELATION_TYPE_AASX_ORIGIN and source == "":
                    state.origin = canonical_key(target)

        logger.debug(f"Parsed {len(rels_files)} relationship files")

    def _register_parts(self, entries: Dict[str, bytes], content_types: ContentTypes,
                        state: PackageState) -> None:
        for name, content in entries.items():
            if name == CONTENT_TYPES_PART or in_rels_dir(name) or name.endswith("/"):
                continue

            path = ensure_leading_slash(name)
            try:
                part = Part(path, content_types.resolve(path), content)
            except InvalidPartURIError as e:
                raise InvalidFormatError(f"invalid part name {name!r}") from e
            state.parts.add(part)
