"""
Tests for PartRegistry class.
"""

from aasx_package import Part, PartURI
from aasx_package.models import PartRegistry


class TestPartRegistry:
    """Test cases for PartRegistry class."""

    def test_put_inserts(self):
        """Test inserting a new part."""
        registry = PartRegistry()
        part = registry.put("/aasx/spec.json", "application/json", b"{}")
        assert len(registry) == 1
        assert registry.find("/aasx/spec.json") is part

    def test_put_updates_in_place(self):
        """Test that putting an existing part replaces type and content in place."""
        registry = PartRegistry()
        first = registry.put("/aasx/Spec.json", "application/json", b"{}")
        second = registry.put("/AASX/spec.JSON", "text/plain", b"updated")

        assert second is first
        assert len(registry) == 1
        assert first.content_type == "text/plain"
        assert first.read_bytes() == b"updated"
        # The original spelling is kept
        assert first.path == "/aasx/Spec.json"

    def test_find_is_case_insensitive(self):
        """Test lookups with different spellings."""
        registry = PartRegistry()
        part = registry.put("/aasx/Spec.json", "application/json", b"{}")
        assert registry.find("aasx/spec.json") is part
        assert registry.find(PartURI("/AASX/SPEC.JSON")) is part
        assert registry.get("/aasx/spec.json") is part
        assert registry.find("/aasx/other.json") is None

    def test_delete(self):
        """Test removing parts."""
        registry = PartRegistry()
        part = registry.put("/a.txt", "text/plain", b"a")
        assert registry.delete("/A.TXT") is part
        assert registry.delete("/a.txt") is None
        assert len(registry) == 0

    def test_add(self):
        """Test registering a prepared part."""
        registry = PartRegistry()
        registry.add(Part("/a.txt", "text/plain", b"a"))
        registry.add(Part("/A.txt", "text/markdown", b"b"))
        assert len(registry) == 1
        assert registry.find("/a.txt").content_type == "text/markdown"

    def test_contains(self):
        """Test membership by part, string and PartURI."""
        registry = PartRegistry()
        part = registry.put("/a.txt", "text/plain", b"a")
        assert part in registry
        assert "/A.txt" in registry
        assert PartURI("a.txt") in registry
        assert "/b.txt" not in registry
        assert 42 not in registry

    def test_iteration_order_and_snapshot(self):
        """Test that iteration follows insertion and tolerates deletion."""
        registry = PartRegistry()
        registry.put("/b.txt", "text/plain", b"b")
        registry.put("/a.txt", "text/plain", b"a")
        registry.put("/c.txt", "text/plain", b"c")

        for part in registry:
            registry.delete(part.uri)

        assert len(registry) == 0

    def test_keys(self):
        """Test listing canonical keys."""
        registry = PartRegistry()
        registry.put("/B.txt", "text/plain", b"b")
        registry.put("/a.txt", "text/plain", b"a")
        assert registry.keys() == ["/b.txt", "/a.txt"]
