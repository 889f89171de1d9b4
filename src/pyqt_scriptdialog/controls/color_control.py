"""
Colour-picker control, with or without an alpha channel.
"""

import logging
from typing import Any

from PyQt6.QtGui import QColor

from pyqt_scriptdialog.controls.base import DialogControl
from pyqt_scriptdialog.core.color import DialogColor, parse_color
from pyqt_scriptdialog.core.string_codec import inline_string_decode, inline_string_encode
from pyqt_scriptdialog.forms.descriptor_reader import DescriptorReader
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.control_protocols import ValueSettable, ValueSerialisable
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource

logger = logging.getLogger(__name__)


class Color(DialogControl, ValueSettable, ValueSerialisable):
    """
    A colour-picker button.

    The value reads back as ``#RRGGBB``, or ``#RRGGBBAA`` when the control
    was created with alpha. An unparsable initial value gives black.
    """

    control_class = "color"

    def __init__(self, descriptor: DescriptorSource, alpha: bool = False):
        super().__init__(descriptor)
        self.alpha = alpha
        text = DescriptorReader.get_string(descriptor, CONSTANTS.VALUE_FIELD)
        self.color: DialogColor = parse_color(text) or DialogColor()

    def get_value(self) -> Any:
        return self.color.to_hex(self.alpha)

    def set_value(self, value: Any) -> None:
        if isinstance(value, DialogColor):
            self.color = value
            return
        if isinstance(value, QColor):
            self.color = DialogColor.from_qcolor(value)
            return
        color = parse_color(value) if isinstance(value, str) else None
        if color is None:
            logger.warning(f"Color '{self.name}': ignoring non-colour value {value!r}")
            return
        self.color = color

    def serialise_value(self) -> str:
        return inline_string_encode(self.color.to_hex(self.alpha))

    def unserialise_value(self, serialised: str) -> None:
        color = parse_color(inline_string_decode(serialised))
        if color is None:
            logger.warning(f"Color '{self.name}': ignoring unparsable value {serialised!r}")
            return
        self.color = color
