"""
lxml Document Loader
====================

Default DocumentLoader: parses with lxml, with network access disabled and
external DTDs/XSDs served by a SchemaResolver.

DTD mode validates against the DOCTYPE's DTD. XSD mode validates the root
element against the schema its ``xsi:schemaLocation`` names for the root
namespace. Validation problems go to the error handler; only unparsable
input raises directly.
"""

import io
from typing import Any, Optional
import logging

from lxml import etree

from beanxml_core.errors import DocumentLoadError, XmlValidationError
from beanxml_core.loading.base import DocumentLoader
from beanxml_core.resolution.input_source import InputSource
from beanxml_core.resolution.schema_resolver import LxmlSchemaResolver, SchemaResolver
from beanxml_core.validation.base import ErrorHandler, LoggingErrorHandler
from beanxml_core.validation.mode import ValidationMode
from beanxml_core.xml.utils import namespace_of, schema_locations, strip_namespaces

logger = logging.getLogger(__name__)


def _log_entry_error(entry: Any) -> XmlValidationError:
    return XmlValidationError(
        str(entry.message),
        line=getattr(entry, 'line', None),
        column=getattr(entry, 'column', None),
    )


class DefaultDocumentLoader(DocumentLoader):
    """
    lxml-backed document loader.

    Example:
        loader = DefaultDocumentLoader()
        tree = loader.load_document(
            InputSource.from_path(Path("beans.xml")),
            SchemaResolver(DirectoryResourceLoader([Path("resources")])),
            LoggingErrorHandler(),
            ValidationMode.XSD,
            namespace_aware=True,
        )
    """

    def __init__(self, no_network: bool = True):
        """
        Initialize loader.

        Args:
            no_network: Forbid lxml from fetching unresolved DTDs/XSDs
        """
        self.no_network = no_network

    def create_parser(self, entity_resolver: Optional[SchemaResolver],
                      validation_mode: ValidationMode) -> etree.XMLParser:
        """Build an XMLParser for the given mode with the resolver registered."""
        parser = etree.XMLParser(
            load_dtd=validation_mode is ValidationMode.DTD,
            no_network=self.no_network,
        )
        if entity_resolver is not None:
            parser.resolvers.add(LxmlSchemaResolver(entity_resolver))
        return parser

    def load_document(self,
                      input_source: InputSource,
                      entity_resolver: Optional[SchemaResolver],
                      error_handler: Optional[ErrorHandler],
                      validation_mode: ValidationMode,
                      namespace_aware: bool) -> etree._ElementTree:
        error_handler = error_handler or LoggingErrorHandler()
        system_id = input_source.system_id
        logger.debug(f"Using {validation_mode.name} validation for [{system_id}]")

        parser = self.create_parser(entity_resolver, validation_mode)
        data = input_source.read()
        try:
            root = etree.fromstring(data, parser, base_url=system_id)
        except etree.XMLSyntaxError as e:
            line = e.lineno if hasattr(e, 'lineno') else None
            error_handler.fatal_error(XmlValidationError(e.msg or str(e), line=line))
            raise DocumentLoadError(e.msg or str(e), system_id=system_id, line=line) from e

        tree = root.getroottree()

        if validation_mode is ValidationMode.DTD:
            self._validate_dtd(tree, error_handler)
        elif validation_mode is ValidationMode.XSD:
            self._validate_xsd(tree, entity_resolver, error_handler)

        if not namespace_aware and validation_mode is not ValidationMode.XSD:
            strip_namespaces(tree)

        logger.debug(f"Loaded document [{system_id}] with root <{root.tag}>")
        return tree

    def _validate_dtd(self, tree: etree._ElementTree, error_handler: ErrorHandler) -> None:
        docinfo = tree.docinfo
        dtd = docinfo.externalDTD or docinfo.internalDTD
        if dtd is None:
            error_handler.warning(XmlValidationError(
                f"No DTD available for DOCTYPE '{docinfo.doctype}', skipping validation"
            ))
            return

        if not dtd.validate(tree):
            for entry in dtd.error_log:
                error_handler.error(_log_entry_error(entry))

    def _validate_xsd(self, tree: etree._ElementTree,
                      entity_resolver: Optional[SchemaResolver],
                      error_handler: ErrorHandler) -> None:
        root = tree.getroot()
        namespace = namespace_of(root)
        location = schema_locations(root).get(namespace)
        if location is None:
            error_handler.warning(XmlValidationError(
                f"No schema location declared for namespace [{namespace}]"
            ))
            return

        schema = self._load_schema(location, entity_resolver, error_handler)
        if schema is None:
            return

        if not schema.validate(tree):
            for entry in schema.error_log:
                error_handler.error(_log_entry_error(entry))

    def _load_schema(self, location: str,
                     entity_resolver: Optional[SchemaResolver],
                     error_handler: ErrorHandler) -> Optional[etree.XMLSchema]:
        source = entity_resolver.resolve_entity(None, location) if entity_resolver else None
        if source is None:
            error_handler.warning(XmlValidationError(
                f"Could not resolve XML schema [{location}], skipping validation"
            ))
            return None

        parser = self.create_parser(entity_resolver, ValidationMode.NONE)
        try:
            schema_doc = etree.parse(io.BytesIO(source.read()), parser, base_url=location)
            return etree.XMLSchema(schema_doc)
        except (etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
            raise DocumentLoadError(f"Invalid XML schema: {e}", system_id=location) from e
