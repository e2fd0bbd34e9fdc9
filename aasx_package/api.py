"""
High-level API for AASX packages.

Main entry point for users.

Example:
    >>> from aasx_package import Packaging
    >>>
    >>> packaging = Packaging()
    >>> with packaging.create("example.aasx") as pkg:
    ...     spec = pkg.put_part("/aasx/aas.json", "application/json", b"{}")
    ...     pkg.make_spec(spec)
    ...     data = pkg.flush()
    >>>
    >>> with packaging.open_read("example.aasx") as pkg:
    ...     [part.path for part in pkg.specs()]
    ['/aasx/aas.json']
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import PackageConfig
from .constants import (
    ORIGIN_CONTENT,
    ORIGIN_CONTENT_TYPE,
    ORIGIN_PART_PATH,
    RELATION_TYPE_AASX_ORIGIN,
    RELATION_TYPE_AASX_SPEC,
    RELATION_TYPE_AASX_SUPPLEMENTARY,
    RELATION_TYPE_THUMBNAIL,
)
from .exceptions import (
    InvalidPartURIError,
    PackageClosedError,
    PackageIntegrityError,
    PartNotFoundError,
)
from .export.package_writer import PackageWriter
from .models.part import Part
from .models.part_uri import PartURI
from .models.relationship import SupplementaryRelationship
from .parser.package_reader import PackageReader, PackageState
from .streams import FileSink, PackageSink, StreamSink, drain, read_source
from .utils.contracts import ensure, require
from .utils.paths import is_reserved_name

logger = logging.getLogger(__name__)

__all__ = [
    "Packaging",
    "PackageRead",
    "PackageReadWrite",
    "new_packaging",
]

PartLike = Union[str, PartURI]


class PackageRead:
    """
    Read-only view of an AASX package.

    Examples:
        >>> pkg = Packaging().open_read_from_bytes(data)
        >>> pkg.specs()
        >>> pkg.supplementary_relationships()
        >>> pkg.thumbnail()
    """

    def __init__(self, path: str, state: PackageState, config: Optional[PackageConfig] = None,
                 sink: Optional[PackageSink] = None):
        """
        Wrap a decoded package.

        Args:
            path: File the package was opened from ("" for streams and bytes)
            state: Package model
            config: Configuration for contract checks
            sink: Destination for flushed bytes (read-write packages only)
        """
        self.path = path
        self._state = state
        self._config = config or PackageConfig.from_env()
        self._sink = sink
        self._closed = False

    # ------------------------------------------------------------------
    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def config(self) -> PackageConfig:
        return self._config

    @property
    def origin(self) -> Part:
        """The origin part of the package."""
        self._check_open()
        part = self._state.parts.get(self._state.origin)
        if part is None:
            raise PackageIntegrityError("origin relationship exists but part not found",
                                        self._state.origin)
        return part

    def _check_open(self) -> None:
        if self._closed:
            raise PackageClosedError("package is closed", self.path or None)

    def _is_spec_key(self, key: str) -> bool:
        return self._state.relationships.has(self._state.origin, key, RELATION_TYPE_AASX_SPEC)

    # ------------------------------------------------------------------
    def specs(self) -> List[Part]:
        """
        Get all spec parts.

        Returns:
            Parts related to the origin as specs, in relationship order
        """
        self._check_open()
        result = []
        for rel in self._state.relationships.by_type(self._state.origin, RELATION_TYPE_AASX_SPEC):
            part = self._state.parts.get(rel.target_key)
            if part is not None:
                result.append(part)
        return result

    def specs_by_content_type(self) -> Dict[str, List[Part]]:
        """
        Group spec parts by content type.

        Returns:
            Content type -> spec parts sorted by path
        """
        grouped: Dict[str, List[Part]] = {}
        for spec in self.specs():
            grouped.setdefault(spec.content_type, []).append(spec)

        for parts in grouped.values():
            parts.sort(key=lambda part: part.path)
        return grouped

    def is_spec(self, part: Part) -> bool:
        """Whether the part is related to the origin as a spec."""
        self._check_open()
        return self._is_spec_key(part.key)

    def supplementaries_for(self, spec: Part) -> List[Part]:
        """
        Get the supplementary parts of a spec.

        Raises:
            PackageIntegrityError: If a supplementary relationship points to
                a part that does not exist
        """
        self._check_open()
        result = []
        for rel in self._state.relationships.by_type(spec.key, RELATION_TYPE_AASX_SUPPLEMENTARY):
            part = self._state.parts.get(rel.target_key)
            if part is None:
                raise PackageIntegrityError(f"supplementary part of {spec.path} not found", rel.target)
            result.append(part)
        return result

    def supplementary_relationships(self) -> List[SupplementaryRelationship]:
        """Get all (spec, supplementary) pairs, specs in relationship order."""
        result = []
        for spec in self.specs():
            for supplementary in self.supplementaries_for(spec):
                result.append(SupplementaryRelationship(spec, supplementary))
        return result

    def find_part(self, uri: PartLike) -> Optional[Part]:
        """Get a part by URI, or None if there is none."""
        self._check_open()
        return self._state.parts.find(uri)

    def must_part(self, uri: PartLike) -> Part:
        """
        Get a part that must exist.

        Raises:
            PartNotFoundError: If there is no such part
        """
        part = self.find_part(uri)
        if part is None:
            raise PartNotFoundError(PartURI(uri).path)
        return part

    def thumbnail(self) -> Optional[Part]:
        """
        Get the thumbnail part.

        Returns:
            The thumbnail, or None if the package declares none

        Raises:
            PackageIntegrityError: If the thumbnail relationship points to a
                part that does not exist
        """
        self._check_open()
        rels = self._state.relationships.by_type("", RELATION_TYPE_THUMBNAIL)
        if not rels:
            return None

        part = self._state.parts.get(rels[0].target_key)
        if part is None:
            raise PackageIntegrityError("thumbnail relationship exists but part not found",
                                        rels[0].target)
        return part

    def parts(self) -> List[Part]:
        """Get all parts, including the origin."""
        self._check_open()
        return list(self._state.parts)

    # ------------------------------------------------------------------
    def close(self) -> None:
        """Release the package. Unflushed changes are discarded."""
        if not self._closed:
            self._closed = True
            logger.debug(f"Closed package {self.path or '<memory>'}")

    def __enter__(self):
        self._check_open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._state.parts)} parts"
        return f"{self.__class__.__name__}({self.path or '<memory>'!r}, {state})"


class PackageReadWrite(PackageRead):
    """Read-write view of an AASX package."""

    def put_part(self, uri: PartLike, content_type: str, content: bytes) -> Part:
        """
        Add a part or replace the content of an existing one.

        Args:
            uri: Part address
            content_type: MIME content type
            content: Payload bytes

        Returns:
            The stored part

        Raises:
            InvalidPartURIError: If the name is reserved for ``[Content_Types].xml``
                or lies in a ``_rels`` directory
        """
        self._check_open()
        uri = PartURI(uri)
        if is_reserved_name(uri.path):
            raise InvalidPartURIError("Part name is reserved by the package format", uri.path)

        part = self._state.parts.put(uri, content_type, content)
        ensure(part in self._state.parts, "The part should be included in the package.", self._config)
        return part

    def put_part_from_stream(self, uri: PartLike, content_type: str, stream: Any) -> Part:
        """Add a part, reading its content from a binary stream until exhausted."""
        self._check_open()
        return self.put_part(uri, content_type, drain(stream))

    def delete_part(self, part: Part) -> None:
        """Remove a part together with every relationship from or to it."""
        self._check_open()
        self._state.parts.delete(part.uri)
        self._state.relationships.remove_all_with_source_or_target(part.key)
        ensure(part not in self._state.parts, "The part should not exist in the package anymore.",
               self._config)

    def make_spec(self, part: Part) -> None:
        """Relate the part to the origin as a spec (idempotent)."""
        self._check_open()
        if self._is_spec_key(part.key):
            return
        self._state.relationships.add(self._state.origin, part.path, RELATION_TYPE_AASX_SPEC)

    def unmake_spec(self, part: Part) -> None:
        """
        Remove the spec relationship of a part and all relationships from it.

        Raises:
            PreconditionViolation: If the part is not a spec
        """
        self._check_open()
        require(self._is_spec_key(part.key), "The part fulfills the spec property.", self._config)

        self._state.relationships.remove(self._state.origin, part.path, RELATION_TYPE_AASX_SPEC)
        self._state.relationships.remove_source(part.key)

    def relate_supplementary_to_spec(self, supplementary: Part, spec: Part) -> None:
        """
        Relate a supplementary part to a spec (idempotent).

        Raises:
            PreconditionViolation: If ``spec`` is not a spec
        """
        self._check_open()
        require(self._is_spec_key(spec.key), "The part fulfills the spec property.", self._config)

        relationships = self._state.relationships
        if relationships.has(spec.key, supplementary.key, RELATION_TYPE_AASX_SUPPLEMENTARY):
            return
        relationships.add(spec.key, supplementary.path, RELATION_TYPE_AASX_SUPPLEMENTARY)

    def unrelate_supplementary_from_spec(self, supplementary: Part, spec: Part) -> None:
        """
        Remove the supplementary relationship between two parts.

        Raises:
            PreconditionViolation: If ``spec`` is not a spec
        """
        self._check_open()
        require(self._is_spec_key(spec.key), "The part fulfills the spec property.", self._config)

        self._state.relationships.remove(spec.key, supplementary.key, RELATION_TYPE_AASX_SUPPLEMENTARY)

    def set_thumbnail(self, part: Part) -> None:
        """Make the part the package thumbnail, replacing any previous one."""
        self._check_open()
        self.unset_thumbnail()
        self._state.relationships.add("", part.path, RELATION_TYPE_THUMBNAIL)

    def unset_thumbnail(self) -> None:
        """Remove the package thumbnail relationship."""
        self._check_open()
        for rel in self._state.relationships.by_type("", RELATION_TYPE_THUMBNAIL):
            self._state.relationships.remove("", rel.target, RELATION_TYPE_THUMBNAIL)

    def flush(self) -> bytes:
        """
        Encode the package and write it to the configured destination.

        Returns:
            The encoded archive
        """
        self._check_open()
        data = PackageWriter().write(self._state)
        if self._sink is not None:
            self._sink.write(data)
        logger.debug(f"Flushed package {self.path or '<memory>'} ({len(data)} bytes)")
        return data


class Packaging:
    """
    Factory for creating and opening AASX packages.

    Examples:
        >>> packaging = Packaging()
        >>> pkg = packaging.create_in_stream(MemoryStream())
        >>> pkg = packaging.open_read("example.aasx")
    """

    def __init__(self, config: Optional[PackageConfig] = None):
        """
        Initialize packaging.

        Args:
            config: Configuration passed to every package (defaults to the
                environment)
        """
        self.config = config or PackageConfig.from_env()
        self._reader = PackageReader()

    # ------------------------------------------------------------------
    def _new_state(self) -> PackageState:
        state = PackageState()
        origin = state.parts.put(ORIGIN_PART_PATH, ORIGIN_CONTENT_TYPE, ORIGIN_CONTENT)
        state.origin = origin.key
        state.relationships.add("", origin.path, RELATION_TYPE_AASX_ORIGIN)
        return state

    def _read(self, data: bytes) -> PackageState:
        return self._reader.read(data)

    # ------------------------------------------------------------------
    def create(self, path: Union[str, Path]) -> PackageReadWrite:
        """Create a new package flushed to ``path``."""
        pkg = PackageReadWrite(str(path), self._new_state(), self.config, FileSink(path))
        ensure(len(pkg.specs()) == 0, "Specs must be empty in a new package.", self.config)
        logger.info(f"Created package {path}")
        return pkg

    def create_in_stream(self, stream: Any) -> PackageReadWrite:
        """Create a new package flushed to ``stream``."""
        return PackageReadWrite("", self._new_state(), self.config, StreamSink(stream))

    def open_read(self, path: Union[str, Path]) -> PackageRead:
        """Open a package file read-only."""
        data = Path(path).read_bytes()
        logger.info(f"Opened package {path}")
        return PackageRead(str(path), self._read(data), self.config)

    def open_read_from_stream(self, stream: Any) -> PackageRead:
        return PackageRead("", self._read(read_source(stream)), self.config)

    def open_read_write(self, path: Union[str, Path]) -> PackageReadWrite:
        """Open a package file for editing; ``flush`` writes back to the file."""
        data = Path(path).read_bytes()
        logger.info(f"Opened package {path} for writing")
        return PackageReadWrite(str(path), self._read(data), self.config, FileSink(path))

    def open_read_write_from_stream(self, stream: Any) -> PackageReadWrite:
        return PackageReadWrite("", self._read(read_source(stream)), self.config, StreamSink(stream))

    def open_read_from_bytes(self, data: bytes) -> PackageRead:
        return PackageRead("", self._read(bytes(data)), self.config)

    def open_read_write_from_bytes(self, data: bytes) -> PackageReadWrite:
        """Open package bytes for editing; ``flush`` only returns the bytes."""
        return PackageReadWrite("", self._read(bytes(data)), self.config)


def new_packaging(config: Optional[PackageConfig] = None) -> Packaging:
    """Create a ``Packaging`` factory."""
    return Packaging(config)
