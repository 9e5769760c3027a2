"""
Validation Results and Error Handlers
=====================================

Error handlers receive the warnings and errors a document loader reports
while parsing and validating. Extend ``ErrorHandler`` to route them
elsewhere (a UI, a report file, ...).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import logging

from beanxml_core.errors import XmlValidationError

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid: Whether validation passed
        error_count: Total number of errors (fatal errors included)
        warning_count: Total number of warnings
        errors: List of entry dictionaries with keys:
            - source: System id of the document (optional)
            - line: Line number (optional)
            - column: Column number (optional)
            - message: Error description
            - severity: 'Fatal', 'Error' or 'Warning'
    """
    is_valid: bool = True
    error_count: int = 0
    warning_count: int = 0
    errors: List[Dict[str, Any]] = field(default_factory=list)

    def add_entry(self,
                  message: str,
                  severity: str = "Error",
                  source: Optional[str] = None,
                  line: Optional[int] = None,
                  column: Optional[int] = None) -> None:
        """
        Record a validation entry.

        Args:
            message: Error description
            severity: 'Fatal', 'Error' or 'Warning'
            source: System id of the document (optional)
            line: Line number (optional)
            column: Column number (optional)
        """
        self.errors.append({
            'source': source,
            'line': line,
            'column': column,
            'message': message,
            'severity': severity,
        })

        if severity in ("Error", "Fatal"):
            self.error_count += 1
            self.is_valid = False
        elif severity == "Warning":
            self.warning_count += 1

    def messages(self, severity: Optional[str] = None) -> List[str]:
        """Messages of all entries, optionally filtered by severity."""
        return [e['message'] for e in self.errors
                if severity is None or e['severity'] == severity]

    def summary(self) -> str:
        """Generate a text summary of validation results."""
        if self.is_valid and not self.warning_count:
            return "Validation PASSED - No errors found"

        status = "PASSED" if self.is_valid else "FAILED"
        lines = [f"Validation {status} - {self.error_count} error(s), "
                 f"{self.warning_count} warning(s)"]
        for entry in self.errors:
            where = f"line {entry['line']}: " if entry['line'] is not None else ""
            lines.append(f"  [{entry['severity']}] {where}{entry['message']}")
        return "\n".join(lines)


class ErrorHandler(ABC):
    """
    Receives problems reported while loading a document.

    ``exception`` carries the parser's message and, when known, its
    position (see ``XmlValidationError``).
    """

    @abstractmethod
    def warning(self, exception: XmlValidationError) -> None:
        pass

    @abstractmethod
    def error(self, exception: XmlValidationError) -> None:
        pass

    @abstractmethod
    def fatal_error(self, exception: XmlValidationError) -> None:
        pass


class LoggingErrorHandler(ErrorHandler):
    """
    Logs warnings and raises on errors.

    This is the strict handler used when no other is configured: a document
    that fails validation is not loaded.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    def warning(self, exception: XmlValidationError) -> None:
        self.logger.warning(f"Ignored XML validation warning: {exception}")

    def error(self, exception: XmlValidationError) -> None:
        raise exception

    def fatal_error(self, exception: XmlValidationError) -> None:
        raise exception


class CollectingErrorHandler(ErrorHandler):
    """
    Records every problem into a ValidationResult instead of raising.

    Example:
        handler = CollectingErrorHandler()
        loader.load_document(source, resolver, handler, ValidationMode.XSD, True)
        if not handler.result.is_valid:
            print(handler.result.summary())
    """

    def __init__(self, source: Optional[str] = None):
        self.source = source
        self.result = ValidationResult()

    def _record(self, exception: XmlValidationError, severity: str) -> None:
        self.result.add_entry(
            message=exception.message,
            severity=severity,
            source=self.source,
            line=exception.line,
            column=exception.column,
        )

    def warning(self, exception: XmlValidationError) -> None:
        self._record(exception, "Warning")

    def error(self, exception: XmlValidationError) -> None:
        self._record(exception, "Error")

    def fatal_error(self, exception: XmlValidationError) -> None:
        self._record(exception, "Fatal")
