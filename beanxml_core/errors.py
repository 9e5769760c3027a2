"""
Exception Classes
=================

Exceptions raised by the XML definition loading pipeline.

Validation mode detection never raises on malformed input: it degrades
to ``ValidationMode.AUTO`` instead. Everything else reports through the
hierarchy below.
"""

from typing import Optional


class BeanXmlError(Exception):
    """Base exception for all beanxml_core errors."""

    pass


class SchemaMappingError(BeanXmlError):
    """Raised when the schema mappings table cannot be loaded."""

    def __init__(self, location: str, message: Optional[str] = None):
        self.location = location
        super().__init__(message or f"Unable to load schema mappings from location [{location}]")


class DocumentLoadError(BeanXmlError):
    """Raised when an XML document cannot be parsed into a tree."""

    def __init__(self, message: str, system_id: Optional[str] = None,
                 line: Optional[int] = None):
        self.message = message
        self.system_id = system_id
        self.line = line

        location = ""
        if system_id:
            location = system_id
        if line is not None:
            location += f":{line}"
        super().__init__(f"{location} {message}".strip() if location else message)


class XmlValidationError(BeanXmlError):
    """
    Raised by an error handler when a document fails DTD/XSD validation.

    Attributes:
        message: Validation message as reported by the parser
        line: Line number (optional)
        column: Column number (optional)
    """

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column

        if line is not None:
            position = f"line {line}" + (f", column {column}" if column is not None else "")
            super().__init__(f"{message} ({position})")
        else:
            super().__init__(message)
