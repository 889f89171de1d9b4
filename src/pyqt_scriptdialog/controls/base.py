"""
Base class for script dialog controls.

Every control is built from one descriptor table and carries the shared
attributes below. Layout hints (x, y, width, height) are stored for the
rendering layer and have no meaning to the dialog core.

Capabilities beyond read-back are opt-in through the protocol ABCs:
a control takes part in serialisation by inheriting ValueSerialisable.
"""

import logging
from typing import Any, ClassVar

from pyqt_scriptdialog.forms.descriptor_reader import DescriptorReader
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.control_protocols import ValueGettable, ValueSerialisable
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource
from pyqt_scriptdialog.protocols.dialog_config import get_dialog_config

logger = logging.getLogger(__name__)


class DialogControl(ValueGettable):
    """
    ABC for all dialog controls.

    Attributes:
        name: Key the control's value is read back and serialised under
        hint: Help text shown by the rendering layer
        x, y: Grid position
        width, height: Grid span
    """

    control_class: ClassVar[str] = ""

    def __init__(self, descriptor: DescriptorSource):
        self.name: str = DescriptorReader.get_string(descriptor, CONSTANTS.NAME_FIELD)
        self.hint: str = DescriptorReader.get_string(descriptor, CONSTANTS.HINT_FIELD)
        self.x: int = DescriptorReader.get_integer(descriptor, "x", CONSTANTS.DEFAULT_POSITION)
        self.y: int = DescriptorReader.get_integer(descriptor, "y", CONSTANTS.DEFAULT_POSITION)
        self.width: int = DescriptorReader.get_integer(descriptor, "width", CONSTANTS.DEFAULT_SPAN)
        self.height: int = DescriptorReader.get_integer(descriptor, "height", CONSTANTS.DEFAULT_SPAN)

        if get_dialog_config().log_created_controls:
            logger.debug(CONSTANTS.CONTROL_CREATED_MSG.format(
                self.name, self.x, self.y, self.width, self.height, self.hint
            ))

    def can_serialise_value(self) -> bool:
        """Whether this control's value is part of the serialised state."""
        return isinstance(self, ValueSerialisable)

    def read_back(self) -> Any:
        """Value reported to the script for this control."""
        return self.get_value()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.get_value()!r})"
