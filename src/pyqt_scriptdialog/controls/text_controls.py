"""
Text controls: static labels and single/multi-line text edits.
"""

from typing import Any

from pyqt_scriptdialog.controls.base import DialogControl
from pyqt_scriptdialog.core.string_codec import inline_string_decode, inline_string_encode
from pyqt_scriptdialog.forms.descriptor_reader import DescriptorReader, coerce_string
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.control_protocols import ValueSettable, ValueSerialisable
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource


class Label(DialogControl):
    """A static text label. Produces no value; reads back as None."""

    control_class = "label"

    def __init__(self, descriptor: DescriptorSource):
        super().__init__(descriptor)
        self.label: str = DescriptorReader.get_string(descriptor, CONSTANTS.LABEL_FIELD)

    def get_value(self) -> Any:
        return None

    def set_value(self, value: Any) -> None:
        raise TypeError(
            f"Label '{self.name}' has no value to set. "
            f"Only controls implementing ValueSettable accept set_value()."
        )


class Edit(DialogControl, ValueSettable, ValueSerialisable):
    """
    A single-line text edit.

    The initial text is taken from ``value``, then from ``text`` when that is
    present, so an edit can stand in for other control classes.
    """

    control_class = "edit"

    def __init__(self, descriptor: DescriptorSource):
        super().__init__(descriptor)
        text = DescriptorReader.get_string(descriptor, CONSTANTS.VALUE_FIELD)
        self.text: str = DescriptorReader.get_string(descriptor, CONSTANTS.TEXT_FIELD, text)

    def get_value(self) -> Any:
        return self.text

    def set_value(self, value: Any) -> None:
        if value is None:
            self.text = ""
            return
        text = coerce_string(value)
        self.text = str(value) if text is None else text

    def serialise_value(self) -> str:
        return inline_string_encode(self.text)

    def unserialise_value(self, serialised: str) -> None:
        self.text = inline_string_decode(serialised)


class Textbox(Edit):
    """A multi-line text edit. Same value handling as Edit."""

    control_class = "textbox"
