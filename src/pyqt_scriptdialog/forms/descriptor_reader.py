"""
Typed field access for control descriptors.

Script descriptors are dynamically typed, and a script may leave any field
out or give it the wrong type. Every read here takes a default and returns it
unchanged when the field is absent or incompatible; nothing in this module
raises on bad field data. This is how every control applies its defaults.

Compatibility follows scripting-runtime conversion rules:
- string fields accept strings and numbers (numbers are formatted)
- number and integer fields accept numbers and numeric strings
- boolean fields accept booleans only
"""

import logging
import math
import re
from typing import Any, List, Optional, TypeVar

from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource, as_descriptor, is_table

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Decimal numerals as a scripting runtime reads them (no "_" separators, no NaN)
_NUMERIC_STRING = re.compile(
    r"^\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?)\s*$", re.IGNORECASE
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_string(value: Any) -> Optional[str]:
    """
    Convert a dynamic value to a string, or None if it has no string form.

    Example:
        >>> coerce_string(2.5)
        '2.5'
        >>> coerce_string(True) is None
        True
    """
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return format(value, CONSTANTS.NUMBER_TO_STRING_FORMAT)
    return None


def coerce_number(value: Any) -> Optional[float]:
    """Convert a dynamic value to a float, or None if it is not numeric (NaN included)."""
    if _is_number(value):
        number = float(value)
        return None if math.isnan(number) else number
    if isinstance(value, str) and _NUMERIC_STRING.match(value):
        return float(value.strip())
    return None


def coerce_integer(value: Any) -> Optional[int]:
    """Convert a dynamic value to an int (truncating), or None if it is not numeric."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = coerce_number(value)
    if number is None or not math.isfinite(number):
        return None
    return int(number)


class DescriptorReader:
    """
    Static helpers for reading typed fields from a DescriptorSource.

    Example:
        >>> source = as_descriptor({"name": "n", "width": 3})
        >>> DescriptorReader.get_integer(source, "width", 1)
        3
        >>> DescriptorReader.get_integer(source, "height", 1)
        1
    """

    @staticmethod
    def get_string(descriptor: DescriptorSource, name: str, default: str = "") -> str:
        value = coerce_string(descriptor.get(name))
        return default if value is None else value

    @staticmethod
    def get_number(descriptor: DescriptorSource, name: str, default: float = 0.0) -> float:
        value = coerce_number(descriptor.get(name))
        return default if value is None else value

    @staticmethod
    def get_integer(descriptor: DescriptorSource, name: str, default: int = 0) -> int:
        value = coerce_integer(descriptor.get(name))
        return default if value is None else value

    @staticmethod
    def get_boolean(descriptor: DescriptorSource, name: str, default: bool = False) -> bool:
        value = descriptor.get(name)
        return value if isinstance(value, bool) else default

    @staticmethod
    def get_field(descriptor: DescriptorSource, name: str, default: T) -> T:
        """
        Read a field typed after its default.

        The default's type selects the conversion: bool, int, float or str.

        Args:
            descriptor: Source table
            name: Field name
            default: Value returned when the field is absent or incompatible

        Returns:
            The field value converted to the default's type, or the default

        Raises:
            TypeError: If the default is not a bool, int, float or str
        """
        if isinstance(default, bool):
            return DescriptorReader.get_boolean(descriptor, name, default)
        if isinstance(default, int):
            return DescriptorReader.get_integer(descriptor, name, default)
        if isinstance(default, float):
            return DescriptorReader.get_number(descriptor, name, default)
        if isinstance(default, str):
            return DescriptorReader.get_string(descriptor, name, default)
        raise TypeError(f"Unsupported default type for field '{name}': {type(default).__name__}")

    @staticmethod
    def get_string_sequence(descriptor: DescriptorSource, name: str) -> List[str]:
        """
        Read an ordered list of strings stored under a key.

        Entries without a string form are skipped. A missing or non-table
        field yields an empty list.
        """
        table = descriptor.get(name)
        if not is_table(table):
            return []
        result = []
        for entry in as_descriptor(table).iterate():
            text = coerce_string(entry)
            if text is None:
                logger.debug(f"Skipping non-string entry {entry!r} in '{name}'")
                continue
            result.append(text)
        return result
