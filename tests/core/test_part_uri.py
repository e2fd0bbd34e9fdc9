"""
Tests for PartURI and Part.
"""

import pytest

from aasx_package import InvalidPartURIError, Part, PartURI
from aasx_package.utils.paths import canonical_key


class TestPartURI:
    """Test cases for PartURI class."""

    def test_path_and_key(self):
        """Test that the display path keeps case and the key does not."""
        uri = PartURI("aasx/Data/Spec.XML")
        assert uri.path == "/aasx/Data/Spec.XML"
        assert uri.key == "/aasx/data/spec.xml"
        assert str(uri) == "/aasx/Data/Spec.XML"

    def test_full_uri_uses_path_only(self):
        """Test that scheme and host of a full URI are ignored."""
        assert PartURI("https://package.local/aasx/spec.xml").path == "/aasx/spec.xml"
        assert PartURI("file:///aasx/spec.xml").path == "/aasx/spec.xml"

    def test_percent_escapes_are_kept(self):
        """Test that escape sequences are neither decoded nor re-encoded."""
        uri = PartURI("/aasx/My%20Spec.xml")
        assert uri.path == "/aasx/My%20Spec.xml"
        assert uri.key == canonical_key("/aasx/My%20Spec.xml")
        assert PartURI(uri.path) == uri
        assert PartURI("/aasx/a%2541.xml").path == "/aasx/a%2541.xml"
        assert PartURI("/aasx/My Spec.xml") != uri

    def test_normalizes_dot_segments(self):
        """Test that dot segments are removed."""
        assert PartURI("/aasx/./data/../spec.xml").path == "/aasx/spec.xml"

    @pytest.mark.parametrize("value", ["", "/", "urn:aasx:spec", "mailto:someone@example.com"])
    def test_invalid_uris(self, value):
        """Test URIs that name no part."""
        with pytest.raises(InvalidPartURIError):
            PartURI(value)

    def test_non_string_rejected(self):
        """Test that non-string input is rejected as a ValueError."""
        with pytest.raises(ValueError):
            PartURI(42)

    def test_equality_ignores_case(self):
        """Test equality and hashing by canonical key."""
        first = PartURI("/AASX/Spec.xml")
        second = PartURI("aasx/spec.XML")
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_copy_constructor(self):
        """Test constructing a PartURI from another one."""
        uri = PartURI("/aasx/spec.xml")
        assert PartURI(uri) == uri
        assert PartURI(uri).path == uri.path

    def test_not_equal_to_string(self):
        """Test that a PartURI never equals a plain string."""
        assert PartURI("/aasx/spec.xml") != "/aasx/spec.xml"


class TestPart:
    """Test cases for Part class."""

    def test_part_properties(self):
        """Test path, key, size and content type."""
        part = Part("/aasx/Spec.json", "application/json", b"{}")
        assert part.path == "/aasx/Spec.json"
        assert part.key == "/aasx/spec.json"
        assert part.size == 2
        assert part.content_type == "application/json"

    def test_read_content(self):
        """Test the byte, text and stream accessors."""
        part = Part("/aasx/spec.json", "application/json", '{"a": "ä"}'.encode("utf-8"))
        assert part.read_bytes() == '{"a": "ä"}'.encode("utf-8")
        assert part.read_text() == '{"a": "ä"}'
        assert part.open().read() == part.read_bytes()

    def test_content_is_copied(self):
        """Test that mutable input is not aliased."""
        content = bytearray(b"abc")
        part = Part("/a.bin", "application/octet-stream", content)
        content[0] = ord("x")
        assert part.read_bytes() == b"abc"

    def test_set_content(self):
        """Test replacing the payload."""
        part = Part("/a.txt", "text/plain", b"old")
        part.set_content(b"new content")
        assert part.read_bytes() == b"new content"
        assert part.size == 11

    def test_repr(self):
        """Test the representation."""
        assert repr(Part("/a.txt", "text/plain", b"x")) == \
            "Part(path='/a.txt', content_type='text/plain', size=1)"
