"""
Document Loading
================

Components:
- DocumentLoader: Strategy interface for loading documents
- DefaultDocumentLoader: lxml-backed implementation
- XmlDefinitionReader: Mode selection + loading for definition files
"""

from beanxml_core.loading.base import DocumentLoader

from beanxml_core.loading.lxml_loader import DefaultDocumentLoader

from beanxml_core.loading.reader import (
    XmlDefinitionReader,
    LoadedDocument,
)

__all__ = [
    "DocumentLoader",
    "DefaultDocumentLoader",
    "XmlDefinitionReader",
    "LoadedDocument",
]
