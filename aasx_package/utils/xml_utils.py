"""
XML utilities for OPC documents.

Parsing is done with a hardened lxml parser (no entity expansion, no
network access); malformed documents raise ``InvalidFormatError``.
"""

import logging
from typing import Optional

from lxml import etree

from ..exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def parse_xml(data: bytes, part_name: Optional[str] = None) -> etree._Element:
    """
    Parse an XML document.

    Args:
        data: Raw document bytes
        part_name: Archive entry the document was read from, for messages

    Returns:
        Root element

    Raises:
        InvalidFormatError: If the document is not well-formed
    """
    try:
        return etree.fromstring(data, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        logger.error(f"XML parsing failed for {part_name or '<document>'}: {e}")
        raise InvalidFormatError(f"{part_name or 'XML document'}: {e}") from e


def local_name(element: etree._Element) -> str:
    """Get the tag name of an element without its namespace."""
    if not isinstance(element.tag, str):
        return ""
    return etree.QName(element).localname


def new_root(namespace: str, tag: str) -> etree._Element:
    """Create a root element with ``namespace`` as the default namespace."""
    return etree.Element(f"{{{namespace}}}{tag}", nsmap={None: namespace})


def to_bytes(root: etree._Element) -> bytes:
    """Serialize a document with an XML declaration, pretty-printed, UTF-8."""
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8",
                          standalone=True, pretty_print=True)
