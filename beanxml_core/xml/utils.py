"""
XML Utility Functions
=====================

Small lxml helpers shared by the document loaders: tag name handling and
``xsi:schemaLocation`` extraction.
"""

from typing import Any, Dict, Optional
import logging

from lxml import etree

logger = logging.getLogger(__name__)

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_LOCATION = f"{{{XSI_NAMESPACE}}}schemaLocation"
NO_NAMESPACE_SCHEMA_LOCATION = f"{{{XSI_NAMESPACE}}}noNamespaceSchemaLocation"


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace prefix.

    Args:
        element: XML element

    Returns:
        Local tag name without namespace, or "" for comments and PIs

    Example:
        >>> elem = etree.Element("{http://www.example.org/schema/beans}bean")
        >>> local_name(elem)
        'bean'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def namespace_of(element: Any) -> Optional[str]:
    """Namespace URI of an element, or None when it has none."""
    tag = element.tag
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def schema_locations(root: Any) -> Dict[Optional[str], str]:
    """
    Collect schema location hints declared on an element.

    Args:
        root: Element carrying ``xsi:schemaLocation`` and/or
            ``xsi:noNamespaceSchemaLocation``

    Returns:
        Mapping of namespace URI (None for no-namespace) to schema location
    """
    locations: Dict[Optional[str], str] = {}

    pairs = (root.get(SCHEMA_LOCATION) or "").split()
    if len(pairs) % 2:
        logger.warning(f"Odd number of tokens in xsi:schemaLocation, ignoring '{pairs[-1]}'")
    for namespace, location in zip(pairs[0::2], pairs[1::2]):
        locations.setdefault(namespace, location)

    no_namespace = root.get(NO_NAMESPACE_SCHEMA_LOCATION)
    if no_namespace and no_namespace.strip():
        locations.setdefault(None, no_namespace.strip())

    return locations


def strip_namespaces(tree: Any) -> None:
    """
    Drop namespaces from every element tag in place.

    Namespace declarations that become unused are removed as well.

    Args:
        tree: lxml Element or ElementTree
    """
    root = tree.getroot() if hasattr(tree, "getroot") else tree
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith("{"):
            element.tag = local_name(element)
    etree.cleanup_namespaces(root)
