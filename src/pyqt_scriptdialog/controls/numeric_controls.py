"""
Numeric edits: integer and floating-point spin controls.

Both keep an effective [minimum, maximum] range. A script that supplies an
inverted or empty range (min >= max) gets the full range of the number type
instead of an error. Values are clamped into the range unless the host turns
clamping off through DialogConfig.

Unserialising accepts the leading number of the text (``"12px"`` reads as 12)
and ignores text with no leading number, keeping the current value.
"""

import logging
import re
from typing import Any, Optional

from pyqt_scriptdialog.controls.text_controls import Edit
from pyqt_scriptdialog.forms.descriptor_reader import DescriptorReader, coerce_integer, coerce_number
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.control_protocols import RangeConfigurable
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource
from pyqt_scriptdialog.protocols.dialog_config import get_dialog_config

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_SPECIAL_FLOAT = re.compile(r"^\s*([+-]?(?:inf(?:inity)?))", re.IGNORECASE)


def parse_leading_int(text: str) -> Optional[int]:
    """
    Parse the integer at the start of a string.

    Example:
        >>> parse_leading_int(" -12px")
        -12
        >>> parse_leading_int("px") is None
        True
    """
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def parse_leading_float(text: str) -> Optional[float]:
    """Parse the finite or infinite float at the start of a string."""
    match = _LEADING_FLOAT.match(text) or _SPECIAL_FLOAT.match(text)
    return float(match.group(1)) if match else None


class IntEdit(Edit, RangeConfigurable):
    """
    Integer-only edit.

    Attributes:
        value: Current integer value
        min, max: Effective range, 32-bit signed by default
    """

    control_class = "intedit"

    def __init__(self, descriptor: DescriptorSource):
        super().__init__(descriptor)
        self.value: int = DescriptorReader.get_integer(descriptor, CONSTANTS.VALUE_FIELD, 0)
        self.configure_range(
            DescriptorReader.get_integer(descriptor, CONSTANTS.MIN_FIELD, CONSTANTS.INT_MIN),
            DescriptorReader.get_integer(descriptor, CONSTANTS.MAX_FIELD, CONSTANTS.INT_MAX),
        )

    def configure_range(self, minimum: float, maximum: float) -> None:
        self.min = int(minimum)
        self.max = int(maximum)
        if self.min >= self.max:
            logger.debug(f"IntEdit '{self.name}': range [{self.min}, {self.max}] is empty; using full range")
            self.min = CONSTANTS.INT_MIN
            self.max = CONSTANTS.INT_MAX
        self.value = self._clamp(self.value)

    def _clamp(self, value: int) -> int:
        if not get_dialog_config().clamp_numeric_values:
            return value
        return max(self.min, min(self.max, value))

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        number = coerce_integer(value)
        if number is None:
            logger.warning(f"IntEdit '{self.name}': ignoring non-integer value {value!r}")
            return
        self.value = self._clamp(number)

    def serialise_value(self) -> str:
        return str(self.value)

    def unserialise_value(self, serialised: str) -> None:
        number = parse_leading_int(serialised)
        if number is None:
            logger.warning(f"IntEdit '{self.name}': ignoring unparsable value {serialised!r}")
            return
        self.value = self._clamp(number)


class FloatEdit(Edit, RangeConfigurable):
    """
    Floating-point edit.

    Attributes:
        value: Current value
        min, max: Effective range, the full finite double range by default
        step: Increment suggested to the rendering layer (0 = none)
    """

    control_class = "floatedit"

    def __init__(self, descriptor: DescriptorSource):
        super().__init__(descriptor)
        self.value: float = DescriptorReader.get_number(descriptor, CONSTANTS.VALUE_FIELD, 0.0)
        self.step: float = DescriptorReader.get_number(descriptor, CONSTANTS.STEP_FIELD, 0.0)
        self.configure_range(
            DescriptorReader.get_number(descriptor, CONSTANTS.MIN_FIELD, CONSTANTS.FLOAT_MIN),
            DescriptorReader.get_number(descriptor, CONSTANTS.MAX_FIELD, CONSTANTS.FLOAT_MAX),
        )

    def configure_range(self, minimum: float, maximum: float) -> None:
        self.min = float(minimum)
        self.max = float(maximum)
        # NaN bounds compare false both ways, so treat them as empty too
        if not self.min < self.max:
            logger.debug(f"FloatEdit '{self.name}': range [{self.min}, {self.max}] is empty; using full range")
            self.min = CONSTANTS.FLOAT_MIN
            self.max = CONSTANTS.FLOAT_MAX
        self.value = self._clamp(self.value)

    def _clamp(self, value: float) -> float:
        if not get_dialog_config().clamp_numeric_values:
            return value
        return max(self.min, min(self.max, value))

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        number = coerce_number(value)
        if number is None:
            logger.warning(f"FloatEdit '{self.name}': ignoring non-numeric value {value!r}")
            return
        self.value = self._clamp(number)

    def serialise_value(self) -> str:
        float_format = get_dialog_config().float_format
        if float_format is None:
            return repr(self.value)
        return format(self.value, float_format)

    def unserialise_value(self, serialised: str) -> None:
        number = parse_leading_float(serialised)
        if number is None:
            logger.warning(f"FloatEdit '{self.name}': ignoring unparsable value {serialised!r}")
            return
        self.value = self._clamp(number)
