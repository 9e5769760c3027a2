"""
Schema Resolver
===============

Maps the schema URLs referenced by XML definition documents to local
resources, so documents validate without network access.

The mapping table is a properties file (default
``META-INF/beanxml.schemas``) of ``schema URL -> resource path`` entries,
for example::

    http\\://www.example.org/schema/beans/beans.xsd=org/example/beans.xsd

It is loaded lazily on first lookup, exactly once.
"""

from pathlib import Path
from typing import Dict, Optional
import logging
import threading

from lxml import etree

from beanxml_core.errors import SchemaMappingError
from beanxml_core.resolution.input_source import InputSource
from beanxml_core.resolution.resource_loader import (
    DirectoryResourceLoader,
    ResourceLoader,
)

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_MAPPINGS_LOCATION = "META-INF/beanxml.schemas"


class SchemaResolver:
    """
    Resolves schema system ids through a mappings table.

    Example:
        resolver = SchemaResolver(DirectoryResourceLoader([Path("resources")]))
        source = resolver.resolve_entity(None, "https://www.example.org/schema/beans.xsd")
        if source is not None:
            schema_bytes = source.read()
    """

    def __init__(self, resource_loader: Optional[ResourceLoader] = None,
                 schema_mappings_location: str = DEFAULT_SCHEMA_MAPPINGS_LOCATION):
        """
        Initialize resolver.

        Args:
            resource_loader: Loader for the mappings table and schema files
                (defaults to the current directory)
            schema_mappings_location: Location of the mappings table

        Raises:
            ValueError: If the mappings location is blank
        """
        if not schema_mappings_location or not schema_mappings_location.strip():
            raise ValueError("'schema_mappings_location' must not be empty")

        self.resource_loader = resource_loader or DirectoryResourceLoader()
        self.schema_mappings_location = schema_mappings_location
        self._schema_mappings: Optional[Dict[str, str]] = None
        self._lock = threading.Lock()

    def resolve_entity(self, public_id: Optional[str],
                       system_id: Optional[str]) -> Optional[InputSource]:
        """
        Resolve an external entity to a local schema resource.

        An ``https:`` system id without its own mapping falls back to the
        canonical ``http:`` mapping.

        Args:
            public_id: Public id of the entity (optional)
            system_id: System id of the entity, usually a schema URL

        Returns:
            InputSource over the local resource, or None to let the parser
            fall back to its default behaviour

        Raises:
            SchemaMappingError: If the mappings table cannot be loaded
        """
        logger.debug(f"Trying to resolve XML entity with public id [{public_id}] "
                     f"and system id [{system_id}]")

        if system_id is None:
            return None

        mappings = self._get_schema_mappings()
        resource_location = mappings.get(system_id)
        if resource_location is None and system_id.startswith("https:"):
            resource_location = mappings.get("http:" + system_id[6:])

        if resource_location is None:
            return None

        try:
            stream = self.resource_loader.open_resource(resource_location)
        except FileNotFoundError as e:
            logger.debug(f"Could not find XML schema [{system_id}]: {e}")
            return None

        logger.debug(f"Found XML schema [{system_id}] at: {resource_location}")
        return InputSource(byte_stream=stream, public_id=public_id, system_id=system_id)

    @property
    def schema_mappings(self) -> Dict[str, str]:
        """Copy of the mappings table, loading it on first access."""
        return dict(self._get_schema_mappings())

    def _get_schema_mappings(self) -> Dict[str, str]:
        mappings = self._schema_mappings
        if mappings is None:
            with self._lock:
                mappings = self._schema_mappings
                if mappings is None:
                    mappings = self._load_schema_mappings()
                    self._schema_mappings = mappings
        return mappings

    def _load_schema_mappings(self) -> Dict[str, str]:
        logger.debug(f"Loading schema mappings from [{self.schema_mappings_location}]")
        try:
            mappings = self.resource_loader.load_all_properties(self.schema_mappings_location)
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaMappingError(self.schema_mappings_location) from e
        logger.debug(f"Loaded {len(mappings)} schema mapping(s)")
        return dict(mappings)

    def __str__(self) -> str:
        # Never triggers loading
        mappings = self._schema_mappings
        if mappings is None:
            return f"EntityResolver using schema mappings from [{self.schema_mappings_location}] (not loaded)"
        return f"EntityResolver using schema mappings {mappings}"

    def __repr__(self) -> str:
        mappings = self._schema_mappings
        loaded = "not loaded" if mappings is None else f"{len(mappings)} mapping(s)"
        return (f"SchemaResolver(location={self.schema_mappings_location!r}, "
                f"loader={self.resource_loader!r}, {loaded})")


class LxmlSchemaResolver(etree.Resolver):
    """
    Plugs a SchemaResolver into an lxml parser.

    Example:
        parser = etree.XMLParser(load_dtd=True, no_network=True)
        parser.resolvers.add(LxmlSchemaResolver(schema_resolver))
    """

    def __init__(self, schema_resolver: SchemaResolver):
        super().__init__()
        self.schema_resolver = schema_resolver

    def resolve(self, system_url, public_id, context):
        source = self.schema_resolver.resolve_entity(public_id, system_url)
        if source is None:
            return None
        return self.resolve_file(source.byte_stream, context,
                                 base_url=source.system_id, close=True)


def schema_resolver_for(search_paths, location: str = DEFAULT_SCHEMA_MAPPINGS_LOCATION) -> SchemaResolver:
    """Build a resolver over a list of search directories."""
    return SchemaResolver(DirectoryResourceLoader([Path(p) for p in search_paths]), location)
