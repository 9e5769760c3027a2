"""
XML Processing Utilities
========================

lxml helpers used by the document loaders.
"""

from beanxml_core.xml.utils import (
    local_name,
    namespace_of,
    schema_locations,
    strip_namespaces,
    XSI_NAMESPACE,
)

__all__ = [
    "local_name",
    "namespace_of",
    "schema_locations",
    "strip_namespaces",
    "XSI_NAMESPACE",
]
