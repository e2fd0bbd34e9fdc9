"""
Pytest configuration for AASX Package
"""

import io
import logging
import sys
import zipfile
from pathlib import Path

import pytest

from aasx_package import MemoryStream, PackageConfig, Packaging


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    # Clear all existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Set up console-only logging for tests
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    # Cleanup after test
    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def config():
    """Configuration with contract checks enabled."""
    return PackageConfig(debug_contracts=True)


@pytest.fixture
def packaging(config):
    """Packaging factory with contract checks enabled."""
    return Packaging(config)


@pytest.fixture
def memory_stream():
    return MemoryStream()


@pytest.fixture
def new_package(packaging, memory_stream):
    """Fresh read-write package backed by an in-memory stream."""
    pkg = packaging.create_in_stream(memory_stream)
    yield pkg
    pkg.close()


@pytest.fixture
def sample_zip_content():
    """Create sample ZIP content for testing PackageReader."""
    return {
        '[Content_Types].xml': '''<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">
    <Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>
    <Default Extension="xml" ContentType="application/xml"/>
    <Default Extension="PNG" ContentType="image/png"/>
    <Override PartName="/aasx/aasx-origin" ContentType="text/plain"/>
    <Override PartName="/aasx/Data/Spec.aas.xml" ContentType="application/aas+xml"/>
</Types>''',
        '_rels/.rels': '''<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
    <Relationship Id="rId1" Type="http://admin-shell.io/aasx/relationships/aasx-origin" Target="/aasx/aasx-origin"/>
    <Relationship Id="rId2" Type="http://schemas.openxmlformats.org/package/2006/relationships/metadata/thumbnail" Target="thumb.png"/>
</Relationships>''',
        'aasx/aasx-origin': 'Intentionally empty.',
        'aasx/_rels/aasx-origin.rels': '''<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
    <Relationship Id="rId3" Type="http://admin-shell.io/aasx/relationships/aas-spec" Target="Data/Spec.aas.xml"/>
</Relationships>''',
        'aasx/Data/Spec.aas.xml': '<environment/>',
        'aasx/Data/_rels/Spec.aas.xml.rels': '''<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">
    <Relationship Id="rId4" Type="http://admin-shell.io/aasx/relationships/aas-suppl" Target="../../aasx-suppl/manual.pdf"/>
</Relationships>''',
        'aasx-suppl/manual.pdf': b'%PDF-1.4',
        'thumb.png': b'\x89PNG',
    }


def _build_zip(entries) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w') as zf:
        for filename, content in entries.items():
            zf.writestr(filename, content)
    return buffer.getvalue()


@pytest.fixture
def build_zip():
    """Pack ``{name: str | bytes}`` into zip bytes."""
    return _build_zip


@pytest.fixture
def sample_package_bytes(sample_zip_content):
    """Sample AASX archive written by another tool (relative targets, rId ids)."""
    return _build_zip(sample_zip_content)
