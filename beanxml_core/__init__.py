"""
BeanXML Core Library
====================

The loading front end for XML bean definition documents:

- Validation mode detection (DTD vs. XSD) by peeking at the document
- Schema resolution from schema URLs to local resources
- Document loading and DTD/XSD validation with lxml
- Configuration management

Architecture
------------

    beanxml_core/
    ├── validation/    - Validation modes, mode detection, error handlers
    ├── resolution/    - Resource loading and schema resolution
    ├── loading/       - Document loader strategy and definition reader
    ├── xml/           - lxml helpers
    ├── config/        - Configuration management
    └── cli.py         - ``beanxml`` command

Usage
-----

    from beanxml_core.validation import ValidationModeDetector
    from beanxml_core.loading import XmlDefinitionReader

    # Detect the validation mode
    with open("beans.xml", "rb") as f:
        mode = ValidationModeDetector().detect(f)

    # Load and validate
    reader = XmlDefinitionReader(schema_resolver=schema_resolver_for(["resources"]))
    document = reader.load(Path("beans.xml"))

"""

__version__ = "1.0.0"

from beanxml_core.errors import (
    BeanXmlError,
    SchemaMappingError,
    DocumentLoadError,
    XmlValidationError,
)

from beanxml_core.validation import (
    ValidationMode,
    ValidationModeDetector,
    ValidationResult,
    ErrorHandler,
    LoggingErrorHandler,
    CollectingErrorHandler,
)

from beanxml_core.resolution import (
    InputSource,
    ResourceLoader,
    DirectoryResourceLoader,
    SchemaResolver,
    LxmlSchemaResolver,
    schema_resolver_for,
)

from beanxml_core.loading import (
    DocumentLoader,
    DefaultDocumentLoader,
    XmlDefinitionReader,
    LoadedDocument,
)

from beanxml_core.config import (
    LoaderConfig,
    load_config,
    save_config,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "BeanXmlError",
    "SchemaMappingError",
    "DocumentLoadError",
    "XmlValidationError",
    # Validation
    "ValidationMode",
    "ValidationModeDetector",
    "ValidationResult",
    "ErrorHandler",
    "LoggingErrorHandler",
    "CollectingErrorHandler",
    # Resolution
    "InputSource",
    "ResourceLoader",
    "DirectoryResourceLoader",
    "SchemaResolver",
    "LxmlSchemaResolver",
    "schema_resolver_for",
    # Loading
    "DocumentLoader",
    "DefaultDocumentLoader",
    "XmlDefinitionReader",
    "LoadedDocument",
    # Config
    "LoaderConfig",
    "load_config",
    "save_config",
]
