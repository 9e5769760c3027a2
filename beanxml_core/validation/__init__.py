"""
Validation Framework
====================

Validation mode detection and the error-handling types used while
validating XML definition documents.

Components:
- ValidationMode: NONE / AUTO / DTD / XSD
- ValidationModeDetector: DOCTYPE-sniffing mode detector
- ValidationResult: Container for validation outcomes
- ErrorHandler: Receiver for parser warnings and errors
"""

from beanxml_core.validation.mode import ValidationMode

from beanxml_core.validation.detector import (
    ValidationModeDetector,
    ScanState,
    consume_comment_tokens,
)

from beanxml_core.validation.base import (
    ValidationResult,
    ErrorHandler,
    LoggingErrorHandler,
    CollectingErrorHandler,
)

__all__ = [
    # Modes
    "ValidationMode",
    # Detection
    "ValidationModeDetector",
    "ScanState",
    "consume_comment_tokens",
    # Error handling
    "ValidationResult",
    "ErrorHandler",
    "LoggingErrorHandler",
    "CollectingErrorHandler",
]
