"""
OPC and AASX constants.

Relationship type URIs, XML namespaces and the fixed part names used by
the package reader and writer.
"""

# AASX relationship types
RELATION_TYPE_AASX_ORIGIN = "http://admin-shell.io/aasx/relationships/aasx-origin"
RELATION_TYPE_AASX_SPEC = "http://admin-shell.io/aasx/relationships/aas-spec"
RELATION_TYPE_AASX_SUPPLEMENTARY = "http://admin-shell.io/aasx/relationships/aas-suppl"
RELATION_TYPE_THUMBNAIL = "http://schemas.openxmlformats.org/package/2006/relationships/metadata/thumbnail"

# OPC namespaces
OPC_RELATIONSHIPS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
CONTENT_TYPES_NS = "http://schemas.openxmlformats.org/package/2006/content-types"

CONTENT_TYPES_PART = "[Content_Types].xml"
ROOT_RELS_PATH = "/_rels/.rels"

CONTENT_TYPE_RELATIONSHIPS = "application/vnd.openxmlformats-package.relationships+xml"
CONTENT_TYPE_DEFAULT = "application/octet-stream"

TARGET_MODE_INTERNAL = "Internal"
TARGET_MODE_EXTERNAL = "External"

# Origin part written into every new package
ORIGIN_PART_PATH = "/aasx/aasx-origin"
ORIGIN_CONTENT_TYPE = "text/plain"
ORIGIN_CONTENT = b"Intentionally empty."

# Entries are stored with a fixed timestamp so that flushing is deterministic
ZIP_DATE_TIME = (1980, 1, 1, 0, 0, 0)
