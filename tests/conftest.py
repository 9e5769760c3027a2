"""
Shared fixtures: a resources directory with a schema mappings table,
an XSD and a DTD, plus sample definition documents.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from beanxml_core.resolution import DirectoryResourceLoader, SchemaResolver


SCHEMA_MAPPINGS = """\
# Schema URL -> local resource
http\\://www.example.org/schema/beans/beans.xsd=schemas/beans.xsd
http\\://www.example.org/dtd/beans.dtd=schemas/beans.dtd
http\\://www.example.org/schema/missing.xsd=schemas/missing.xsd
"""

BEANS_XSD = """\
<?xml version="1.0" encoding="UTF-8"?>
<xsd:schema xmlns:xsd="http://www.w3.org/2001/XMLSchema"
            xmlns="http://www.example.org/schema/beans"
            targetNamespace="http://www.example.org/schema/beans"
            elementFormDefault="qualified">
  <xsd:element name="beans">
    <xsd:complexType>
      <xsd:sequence>
        <xsd:element name="bean" minOccurs="0" maxOccurs="unbounded">
          <xsd:complexType>
            <xsd:attribute name="id" type="xsd:string" use="required"/>
            <xsd:attribute name="class" type="xsd:string"/>
          </xsd:complexType>
        </xsd:element>
      </xsd:sequence>
    </xsd:complexType>
  </xsd:element>
</xsd:schema>
"""

BEANS_DTD = """\
<!ELEMENT beans (bean*)>
<!ELEMENT bean EMPTY>
<!ATTLIST bean
    id CDATA #REQUIRED
    class CDATA #IMPLIED>
"""

XSD_BEANS = """\
<?xml version="1.0" encoding="UTF-8"?>
<!-- Application context -->
<beans xmlns="http://www.example.org/schema/beans"
       xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
       xsi:schemaLocation="http://www.example.org/schema/beans https://www.example.org/schema/beans/beans.xsd">
    <bean id="clock" class="example.Clock"/>
</beans>
"""

XSD_BEANS_INVALID = XSD_BEANS.replace('id="clock" ', '')

DTD_BEANS = """\
<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE beans PUBLIC "-//EXAMPLE//DTD BEAN//EN" "http://www.example.org/dtd/beans.dtd">
<beans>
    <bean id="clock" class="example.Clock"/>
</beans>
"""

DTD_BEANS_INVALID = DTD_BEANS.replace('id="clock" ', '')


@pytest.fixture
def resources_dir(tmp_path):
    """Resources directory holding the mappings table and schemas."""
    root = tmp_path / "resources"
    (root / "META-INF").mkdir(parents=True)
    (root / "schemas").mkdir()
    (root / "META-INF" / "beanxml.schemas").write_text(SCHEMA_MAPPINGS, encoding="utf-8")
    (root / "schemas" / "beans.xsd").write_text(BEANS_XSD, encoding="utf-8")
    (root / "schemas" / "beans.dtd").write_text(BEANS_DTD, encoding="utf-8")
    return root


@pytest.fixture
def schema_resolver(resources_dir):
    """SchemaResolver over the resources directory."""
    return SchemaResolver(DirectoryResourceLoader([resources_dir]))


@pytest.fixture
def write_xml(tmp_path):
    """Factory writing a document into the temp directory."""
    def _write(name: str, content, encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding=encoding)
        return path
    return _write
