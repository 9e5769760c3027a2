"""
Document Loader Interface
=========================

Strategy interface for turning an input source into a parsed document.
Implementations decide the parser technology; ``DefaultDocumentLoader``
uses lxml.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from beanxml_core.resolution.input_source import InputSource
from beanxml_core.resolution.schema_resolver import SchemaResolver
from beanxml_core.validation.base import ErrorHandler
from beanxml_core.validation.mode import ValidationMode


class DocumentLoader(ABC):
    """
    Strategy for loading an XML document.

    Example:
        class MyLoader(DocumentLoader):
            def load_document(self, input_source, entity_resolver,
                              error_handler, validation_mode, namespace_aware):
                from lxml import etree
                return etree.parse(input_source.byte_stream)
    """

    @abstractmethod
    def load_document(self,
                      input_source: InputSource,
                      entity_resolver: Optional[SchemaResolver],
                      error_handler: Optional[ErrorHandler],
                      validation_mode: ValidationMode,
                      namespace_aware: bool) -> Any:
        """
        Load a document from the supplied input source.

        Args:
            input_source: Source of the document; consumed and closed
            entity_resolver: Resolver for schemas and other external entities
            error_handler: Receiver for warnings and validation errors
            validation_mode: DTD, XSD, or NONE/AUTO for no validation
            namespace_aware: Whether XML namespaces are kept

        Returns:
            The loaded document

        Raises:
            DocumentLoadError: If the document cannot be parsed
        """
        pass
