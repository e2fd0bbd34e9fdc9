"""

Package writer - creates AASX archives from the in-memory package model.

Packs [Content_Types].xml, one relationship document per source with
relationships, and the raw bytes of every part into a zip archive.

"""

from __future__ import annotations

import io
import logging
import zipfile
from typing import Dict

from ..constants import CONTENT_TYPES_PART, ZIP_DATE_TIME
from ..parser.content_types import ContentTypes
from ..parser.package_reader import PackageState
from ..parser.relationships_parser import RelationshipsParser
from ..utils.paths import rels_path_for, trim_leading_slash

logger = logging.getLogger(__name__)


class PackageWriter:
    """
    Serializes a ``PackageState`` to archive bytes.

    Entries are stored uncompressed with a fixed timestamp, so writing the
    same state twice yields identical bytes.
    """

    def __init__(self):
        self.relationships_parser = RelationshipsParser()

    def write(self, state: PackageState) -> bytes:
        """
        Encode a package.

        Args:
            state: Package model to encode

        Returns:
            Archive bytes
        """
        files = self._collect_files(state)

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_STORED) as zip_file:
            for file_name, content in files.items():
                info = zipfile.ZipInfo(file_name, date_time=ZIP_DATE_TIME)
                info.compress_type = zipfile.ZIP_STORED
                info.external_attr = 0o644 << 16
                zip_file.writestr(info, content)

        data = buffer.getvalue()
        logger.debug(f"Wrote package with {len(files)} entries ({len(data)} bytes)")
        return data

    def _collect_files(self, state: PackageState) -> Dict[str, bytes]:
        files_to_write: Dict[str, bytes] = {}

        # 1. [Content_Types].xml
        files_to_write[CONTENT_TYPES_PART] = ContentTypes.from_parts(state.parts).to_xml()

        # 2. Relationships, one document per source
        for source, rels in state.relationships.items():
            # Sources are canonical keys; name the document after the part's own spelling
            source_part = state.parts.get(source)
            if source_part is not None:
                source = source_part.path
            rels_path = trim_leading_slash(rels_path_for(source))
            files_to_write[rels_path] = self.relationships_parser.build_relationships(rels)

        # 3. Parts
        for part in state.parts:
            files_to_write[trim_leading_slash(part.path)] = part.read_bytes()

        return files_to_write
