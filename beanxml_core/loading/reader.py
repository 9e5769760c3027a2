"""
XML Definition Reader
=====================

Ties the pipeline together for one document: pick a validation mode
(configured, or detected from the file), then load the document with
the schema resolver and error handler.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union
import logging

from beanxml_core.config.settings import LoaderConfig
from beanxml_core.loading.base import DocumentLoader
from beanxml_core.loading.lxml_loader import DefaultDocumentLoader
from beanxml_core.resolution.input_source import InputSource
from beanxml_core.resolution.resource_loader import DirectoryResourceLoader
from beanxml_core.resolution.schema_resolver import SchemaResolver
from beanxml_core.validation.base import ErrorHandler, LoggingErrorHandler
from beanxml_core.validation.detector import ValidationModeDetector
from beanxml_core.validation.mode import ValidationMode

logger = logging.getLogger(__name__)


@dataclass
class LoadedDocument:
    """A loaded definition document and how it was validated."""

    path: Path
    validation_mode: ValidationMode
    tree: Any

    @property
    def root(self) -> Any:
        return self.tree.getroot()


class XmlDefinitionReader:
    """
    Loads XML definition documents.

    With the default AUTO mode each file's validation mode is detected;
    when detection itself gives up (AUTO), XSD is assumed.

    Example:
        reader = XmlDefinitionReader.from_config(load_config(Path("beanxml.yaml")))
        document = reader.load(Path("beans.xml"))
        print(document.validation_mode.name, document.root.tag)
    """

    def __init__(self,
                 schema_resolver: Optional[SchemaResolver] = None,
                 document_loader: Optional[DocumentLoader] = None,
                 error_handler: Optional[ErrorHandler] = None,
                 validation_mode: ValidationMode = ValidationMode.AUTO,
                 namespace_aware: bool = False,
                 detector: Optional[ValidationModeDetector] = None):
        self.schema_resolver = schema_resolver or SchemaResolver()
        self.document_loader = document_loader or DefaultDocumentLoader()
        self.error_handler = error_handler or LoggingErrorHandler()
        self.validation_mode = validation_mode
        self.namespace_aware = namespace_aware
        self.detector = detector or ValidationModeDetector()

    @classmethod
    def from_config(cls, config: LoaderConfig,
                    error_handler: Optional[ErrorHandler] = None) -> 'XmlDefinitionReader':
        """Build a reader from a LoaderConfig."""
        resource_loader = DirectoryResourceLoader(config.schema.search_paths or None)
        return cls(
            schema_resolver=SchemaResolver(resource_loader, config.schema.mappings_location),
            document_loader=DefaultDocumentLoader(no_network=config.document.no_network),
            error_handler=error_handler,
            validation_mode=ValidationMode.parse(config.document.validation_mode),
            namespace_aware=config.document.namespace_aware,
            detector=ValidationModeDetector(encoding=config.detector.encoding),
        )

    def validation_mode_for(self, path: Path) -> ValidationMode:
        """
        Determine the validation mode to use for a file.

        Args:
            path: Document path

        Returns:
            The configured mode unless it is AUTO, otherwise the detected
            mode, with XSD standing in when detection is inconclusive

        Raises:
            OSError: If the file cannot be read
        """
        if self.validation_mode is not ValidationMode.AUTO:
            return self.validation_mode

        detected = self.detector.detect_file(path)
        if detected is not ValidationMode.AUTO:
            return detected

        # No DOCTYPE found that we could read: assume XSD
        logger.debug(f"Validation mode for {path} could not be detected, assuming XSD")
        return ValidationMode.XSD

    def load(self, path: Union[str, Path]) -> LoadedDocument:
        """
        Load one definition document.

        Raises:
            OSError: If the file cannot be read
            DocumentLoadError: If the document cannot be parsed
            XmlValidationError: If validation fails and the error handler raises
        """
        path = Path(path)
        mode = self.validation_mode_for(path)
        tree = self.document_loader.load_document(
            InputSource.from_path(path),
            self.schema_resolver,
            self.error_handler,
            mode,
            self.namespace_aware or mode is ValidationMode.XSD,
        )
        logger.info(f"Loaded {path.name} ({mode.name} validation)")
        return LoadedDocument(path=path, validation_mode=mode, tree=tree)
