"""
Entity Resolution
=================

Resolves schema URLs referenced by XML definition documents to local
resources.

Components:
- InputSource: Byte stream tagged with public/system ids
- ResourceLoader: Abstract source of properties tables and resources
- DirectoryResourceLoader: ResourceLoader over a list of directories
- SchemaResolver: Properties-driven system id -> resource resolver
- LxmlSchemaResolver: Adapter registering a SchemaResolver with lxml
"""

from beanxml_core.resolution.input_source import InputSource

from beanxml_core.resolution.resource_loader import (
    ResourceLoader,
    DirectoryResourceLoader,
    parse_properties,
)

from beanxml_core.resolution.schema_resolver import (
    DEFAULT_SCHEMA_MAPPINGS_LOCATION,
    SchemaResolver,
    LxmlSchemaResolver,
    schema_resolver_for,
)

__all__ = [
    "InputSource",
    "ResourceLoader",
    "DirectoryResourceLoader",
    "parse_properties",
    "DEFAULT_SCHEMA_MAPPINGS_LOCATION",
    "SchemaResolver",
    "LxmlSchemaResolver",
    "schema_resolver_for",
]
