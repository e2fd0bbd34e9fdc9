"""
AASX Package - reading and writing AASX packages.

This package reads and writes AASX packages: zip containers following the
Open Packaging Convention (OPC), where named parts are linked by typed
relationships. It handles:

- Part storage with case-insensitive canonical part names
- The relationship graph (origin, specs, supplementary files, thumbnail)
- [Content_Types].xml defaults and overrides
- Deterministic, uncompressed archive output

Main Components:
- Packaging: Factory for creating and opening packages
- PackageRead / PackageReadWrite: Read-only and read-write package views
- Parser: Archive, content types and relationship decoding
- Export: Archive encoding
- Models: Parts, part URIs and relationships
- Utils: Path helpers, contracts, XML and logging helpers

Quick Start:
    from aasx_package import Packaging, MemoryStream

    packaging = Packaging()
    pkg = packaging.create_in_stream(MemoryStream())
    spec = pkg.put_part("/aasx/aas.json", "application/json", b"{}")
    pkg.make_spec(spec)
    data = pkg.flush()
"""

from .version import __version__

from .exceptions import (
    AasxPackageError,
    InvalidFormatError,
    NoOriginPartError,
    PartNotFoundError,
    PackageIntegrityError,
    InvalidPartURIError,
    PackageClosedError,
    ContractViolation,
    PreconditionViolation,
    PostconditionViolation,
    ERR_INVALID_FORMAT,
    ERR_NO_ORIGIN_PART,
    ERR_PART_NOT_FOUND,
    ERR_PRECONDITION_VIOLATION,
    ERR_POSTCONDITION_VIOLATION,
)
from .constants import (
    RELATION_TYPE_AASX_ORIGIN,
    RELATION_TYPE_AASX_SPEC,
    RELATION_TYPE_AASX_SUPPLEMENTARY,
    RELATION_TYPE_THUMBNAIL,
)
from .config import PackageConfig
from .models import Part, PartURI, Relationship, SupplementaryRelationship
from .streams import MemoryStream, ReadSeeker, ReadWriteSeeker
from .utils.contracts import require, ensure
from .api import Packaging, PackageRead, PackageReadWrite, new_packaging

__all__ = [
    "__version__",
    # API
    "Packaging",
    "PackageRead",
    "PackageReadWrite",
    "new_packaging",
    "PackageConfig",
    # Models
    "Part",
    "PartURI",
    "Relationship",
    "SupplementaryRelationship",
    # Streams
    "MemoryStream",
    "ReadSeeker",
    "ReadWriteSeeker",
    # Contracts
    "require",
    "ensure",
    # Relationship types
    "RELATION_TYPE_AASX_ORIGIN",
    "RELATION_TYPE_AASX_SPEC",
    "RELATION_TYPE_AASX_SUPPLEMENTARY",
    "RELATION_TYPE_THUMBNAIL",
    # Exceptions
    "AasxPackageError",
    "InvalidFormatError",
    "NoOriginPartError",
    "PartNotFoundError",
    "PackageIntegrityError",
    "InvalidPartURIError",
    "PackageClosedError",
    "ContractViolation",
    "PreconditionViolation",
    "PostconditionViolation",
    "ERR_INVALID_FORMAT",
    "ERR_NO_ORIGIN_PART",
    "ERR_PART_NOT_FOUND",
    "ERR_PRECONDITION_VIOLATION",
    "ERR_POSTCONDITION_VIOLATION",
]
