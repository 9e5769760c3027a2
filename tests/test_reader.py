"""
XML Definition Reader Tests

Run with: pytest tests/test_reader.py -v
"""

import pytest

from beanxml_core.config import LoaderConfig
from beanxml_core.errors import XmlValidationError
from beanxml_core.loading import XmlDefinitionReader
from beanxml_core.validation import CollectingErrorHandler, ValidationMode

from conftest import DTD_BEANS, XSD_BEANS, XSD_BEANS_INVALID

LATIN1_BEANS = (
    b'<?xml version="1.0" encoding="ISO-8859-1"?>\n'
    b'<!-- caf\xe9 -->\n'
    b'<beans/>\n'
)


@pytest.fixture
def reader(schema_resolver):
    return XmlDefinitionReader(schema_resolver=schema_resolver)


class TestValidationModeSelection:
    """How the reader picks a validation mode."""

    def test_detects_xsd(self, reader, write_xml):
        """AUTO detects XSD documents."""
        assert reader.validation_mode_for(write_xml("a.xml", XSD_BEANS)) is ValidationMode.XSD

    def test_detects_dtd(self, reader, write_xml):
        """AUTO detects DTD documents."""
        assert reader.validation_mode_for(write_xml("a.xml", DTD_BEANS)) is ValidationMode.DTD

    def test_undetectable_falls_back_to_xsd(self, reader, write_xml):
        """When detection gives up, XSD is assumed."""
        path = write_xml("latin.xml", LATIN1_BEANS)
        assert reader.detector.detect_file(path) is ValidationMode.AUTO
        assert reader.validation_mode_for(path) is ValidationMode.XSD

    def test_configured_mode_wins(self, schema_resolver, write_xml):
        """An explicit mode skips detection."""
        reader = XmlDefinitionReader(schema_resolver=schema_resolver,
                                     validation_mode=ValidationMode.NONE)
        assert reader.validation_mode_for(write_xml("a.xml", DTD_BEANS)) is ValidationMode.NONE


class TestLoad:
    """End-to-end loading."""

    def test_load_xsd_document(self, reader, write_xml):
        """XSD documents load namespace-aware and validated."""
        document = reader.load(write_xml("beans.xml", XSD_BEANS))
        assert document.validation_mode is ValidationMode.XSD
        assert document.root.tag == "{http://www.example.org/schema/beans}beans"

    def test_load_dtd_document(self, reader, write_xml):
        """DTD documents load with plain tags."""
        document = reader.load(write_xml("beans.xml", DTD_BEANS))
        assert document.validation_mode is ValidationMode.DTD
        assert document.root.tag == "beans"

    def test_invalid_document_raises(self, reader, write_xml):
        """The default error handler rejects invalid documents."""
        with pytest.raises(XmlValidationError):
            reader.load(write_xml("beans.xml", XSD_BEANS_INVALID))

    def test_missing_file(self, reader, tmp_path):
        """Unreadable files surface as OSError."""
        with pytest.raises(OSError):
            reader.load(tmp_path / "absent.xml")

    def test_from_config(self, resources_dir, write_xml):
        """A reader built from config resolves schemas from its search paths."""
        config = LoaderConfig()
        config.schema.search_paths = [str(resources_dir)]
        handler = CollectingErrorHandler()
        reader = XmlDefinitionReader.from_config(config, error_handler=handler)

        document = reader.load(write_xml("beans.xml", XSD_BEANS_INVALID))
        assert document.validation_mode is ValidationMode.XSD
        assert not handler.result.is_valid

    def test_from_config_with_fixed_mode(self, resources_dir, write_xml):
        """The configured validation mode is honoured."""
        config = LoaderConfig()
        config.schema.search_paths = [str(resources_dir)]
        config.document.validation_mode = "none"
        reader = XmlDefinitionReader.from_config(config)

        document = reader.load(write_xml("beans.xml", XSD_BEANS_INVALID))
        assert document.validation_mode is ValidationMode.NONE
        assert document.root.tag == "beans"
