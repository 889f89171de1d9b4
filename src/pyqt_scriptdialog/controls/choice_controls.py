"""
Choice controls: dropdown lists and checkboxes.
"""

import logging
from typing import Any, List

from pyqt_scriptdialog.controls.base import DialogControl
from pyqt_scriptdialog.core.string_codec import inline_string_decode, inline_string_encode
from pyqt_scriptdialog.forms.descriptor_reader import DescriptorReader, coerce_string
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.control_protocols import ValueSettable, ValueSerialisable
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource

logger = logging.getLogger(__name__)


class Dropdown(DialogControl, ValueSettable, ValueSerialisable):
    """
    A dropdown list of strings.

    When ``items`` is non-empty the selected value is always one of them: an
    initial value that is not an item selects the first item, and later
    values that are not items are ignored. With no items any string is kept.
    """

    control_class = "dropdown"

    def __init__(self, descriptor: DescriptorSource):
        super().__init__(descriptor)
        self.value: str = DescriptorReader.get_string(descriptor, CONSTANTS.VALUE_FIELD)
        self.items: List[str] = DescriptorReader.get_string_sequence(descriptor, CONSTANTS.ITEMS_FIELD)

        if self.items and self.value not in self.items:
            self.value = self.items[0]

    def _accepts(self, value: str) -> bool:
        return not self.items or value in self.items

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        text = coerce_string(value)
        if text is None or not self._accepts(text):
            logger.warning(f"Dropdown '{self.name}': ignoring value {value!r} not in items")
            return
        self.value = text

    def serialise_value(self) -> str:
        return inline_string_encode(self.value)

    def unserialise_value(self, serialised: str) -> None:
        value = inline_string_decode(serialised)
        if not self._accepts(value):
            logger.warning(f"Dropdown '{self.name}': ignoring stale value {value!r}")
            return
        self.value = value


class Checkbox(DialogControl, ValueSettable, ValueSerialisable):
    """A labelled checkbox. Serialises as "1"/"0"."""

    control_class = "checkbox"

    def __init__(self, descriptor: DescriptorSource):
        super().__init__(descriptor)
        self.label: str = DescriptorReader.get_string(descriptor, CONSTANTS.LABEL_FIELD)
        self.value: bool = DescriptorReader.get_boolean(descriptor, CONSTANTS.VALUE_FIELD, False)

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        self.value = bool(value)

    def serialise_value(self) -> str:
        return CONSTANTS.CHECKBOX_CHECKED if self.value else CONSTANTS.CHECKBOX_UNCHECKED

    def unserialise_value(self, serialised: str) -> None:
        self.value = serialised != CONSTANTS.CHECKBOX_UNCHECKED
