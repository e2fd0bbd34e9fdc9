"""
Tests for ContentTypes class.
"""

import pytest
from lxml import etree

from aasx_package import InvalidFormatError, Part
from aasx_package.constants import CONTENT_TYPE_RELATIONSHIPS, CONTENT_TYPES_NS
from aasx_package.parser import ContentTypes


def _parts():
    return [
        Part("/aasx/aasx-origin", "text/plain", b"Intentionally empty."),
        Part("/aasx/spec.json", "application/json", b"{}"),
        Part("/aasx/other.json", "text/plain", b"{}"),
        Part("/thumb.PNG", "image/png", b"\x89PNG"),
        Part("/aasx/more.json", "application/json", b"{}"),
    ]


class TestContentTypesFromParts:
    """Test cases for deriving content types on write."""

    def test_first_seen_type_becomes_default(self):
        """Test that the first part per extension sets the default."""
        content_types = ContentTypes.from_parts(_parts())
        assert content_types.defaults == {"json": "application/json", "png": "image/png"}

    def test_overrides(self):
        """Test overrides for deviating and extensionless parts."""
        content_types = ContentTypes.from_parts(_parts())
        assert content_types.overrides == {
            "/aasx/aasx-origin": "text/plain",
            "/aasx/other.json": "text/plain",
        }

    def test_rels_extension(self):
        """Test that the rels default is fixed."""
        content_types = ContentTypes.from_parts([
            Part("/a.rels", CONTENT_TYPE_RELATIONSHIPS, b""),
            Part("/b.rels", "text/plain", b""),
        ])
        assert "rels" not in content_types.defaults
        assert content_types.overrides == {"/b.rels": "text/plain"}

    def test_every_part_resolves_to_its_type(self):
        """Test that the derived tables reproduce each part's type."""
        parts = _parts()
        content_types = ContentTypes.from_parts(parts)
        for part in parts:
            assert content_types.resolve(part.path) == part.content_type


class TestContentTypesXml:
    """Test cases for the [Content_Types].xml document."""

    def test_to_xml_order(self):
        """Test that the rels default comes first and the rest is sorted."""
        root = etree.fromstring(ContentTypes.from_parts(_parts()).to_xml())
        assert root.tag == f"{{{CONTENT_TYPES_NS}}}Types"

        defaults = [(e.get("Extension"), e.get("ContentType"))
                    for e in root.findall(f"{{{CONTENT_TYPES_NS}}}Default")]
        assert defaults == [
            ("rels", CONTENT_TYPE_RELATIONSHIPS),
            ("json", "application/json"),
            ("png", "image/png"),
        ]

        overrides = [(e.get("PartName"), e.get("ContentType"))
                     for e in root.findall(f"{{{CONTENT_TYPES_NS}}}Override")]
        assert overrides == [
            ("/aasx/aasx-origin", "text/plain"),
            ("/aasx/other.json", "text/plain"),
        ]

    def test_defaults_precede_overrides(self):
        """Test element order inside the document."""
        root = etree.fromstring(ContentTypes.from_parts(_parts()).to_xml())
        names = [etree.QName(child).localname for child in root]
        assert names == ["Default", "Default", "Default", "Override", "Override"]

    def test_from_xml(self, sample_zip_content):
        """Test parsing defaults and overrides."""
        content_types = ContentTypes.from_xml(sample_zip_content["[Content_Types].xml"].encode("utf-8"))
        assert content_types.defaults["png"] == "image/png"
        assert content_types.defaults["xml"] == "application/xml"
        assert content_types.overrides["/aasx/data/spec.aas.xml"] == "application/aas+xml"

    def test_resolve(self, sample_zip_content):
        """Test override, default and fallback resolution."""
        content_types = ContentTypes.from_xml(sample_zip_content["[Content_Types].xml"].encode("utf-8"))
        assert content_types.resolve("/aasx/aasx-origin") == "text/plain"
        assert content_types.resolve("/AASX/Data/Spec.aas.xml") == "application/aas+xml"
        assert content_types.resolve("/aasx/other.xml") == "application/xml"
        assert content_types.resolve("/thumb.png") == "image/png"
        assert content_types.resolve("/aasx-suppl/manual.pdf") == "application/octet-stream"

    def test_unexpected_root(self):
        """Test that a foreign document yields empty tables."""
        content_types = ContentTypes.from_xml(b"<Other/>")
        assert content_types.defaults == {}
        assert content_types.overrides == {}

    def test_malformed_document(self):
        """Test that malformed XML is an invalid format."""
        with pytest.raises(InvalidFormatError):
            ContentTypes.from_xml(b"<Types")

    def test_empty_tables_fall_back(self):
        """Test the fallback when no content types are known."""
        assert ContentTypes().resolve("/a.xml") == "application/octet-stream"
