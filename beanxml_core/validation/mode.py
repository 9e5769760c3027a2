"""
Validation Modes
================

Which schema technology an XML definition document expects.
"""

from enum import Enum
from typing import Union


class ValidationMode(int, Enum):
    """
    Validation mode of an XML document.

    NONE and AUTO are signals to the caller: AUTO means the mode could not
    be determined and the caller should pick one. DTD and XSD are positive
    determinations.
    """
    NONE = 0
    AUTO = 1
    DTD = 2
    XSD = 3

    @property
    def label(self) -> str:
        labels = {
            ValidationMode.NONE: "No validation",
            ValidationMode.AUTO: "Auto-detect",
            ValidationMode.DTD: "DTD (DOCTYPE declaration)",
            ValidationMode.XSD: "XML Schema",
        }
        return labels.get(self, self.name)

    @property
    def is_determined(self) -> bool:
        """True for DTD and XSD."""
        return self in (ValidationMode.DTD, ValidationMode.XSD)

    @classmethod
    def parse(cls, value: Union["ValidationMode", int, str]) -> "ValidationMode":
        """
        Coerce a config or CLI value into a ValidationMode.

        Accepts an existing member, its integer value, or its name in any case.

        Raises:
            ValueError: If the value names no mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown validation mode: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Unknown validation mode: {value!r}")
