"""
Dialog button row resolution.

Scripts pass button labels in display order, plus an optional table that
gives some labels a standard role (``{"ok": "Go", "cancel": "Stop"}``). Roles
let the host recognise OK/Cancel-style buttons whatever their text.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from pyqt_scriptdialog.exceptions import DialogConstructionError
from pyqt_scriptdialog.forms.descriptor_reader import coerce_string
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.descriptor_source import as_descriptor, is_table
from pyqt_scriptdialog.protocols.dialog_config import get_dialog_config

logger = logging.getLogger(__name__)


class ButtonId(IntEnum):
    """Standard button roles."""
    OK = 0
    YES = 1
    SAVE = 2
    APPLY = 3
    CLOSE = 4
    NO = 5
    CANCEL = 6
    HELP = 7
    CONTEXT_HELP = 8


# Button without a standard role
NO_BUTTON_ID = -1

BUTTON_IDS: Mapping[str, ButtonId] = MappingProxyType({
    "ok": ButtonId.OK,
    "yes": ButtonId.YES,
    "save": ButtonId.SAVE,
    "apply": ButtonId.APPLY,
    "close": ButtonId.CLOSE,
    "no": ButtonId.NO,
    "cancel": ButtonId.CANCEL,
    "help": ButtonId.HELP,
    "context_help": ButtonId.CONTEXT_HELP,
})


def button_id_from_name(name: str) -> int:
    """Look up a role name (case-sensitive); unknown names give NO_BUTTON_ID."""
    return BUTTON_IDS.get(name, NO_BUTTON_ID)


@dataclass
class DialogButton:
    """A button in the dialog's button row."""
    id: int
    label: str

    @property
    def is_cancel(self) -> bool:
        return self.id == ButtonId.CANCEL


def default_buttons() -> List[DialogButton]:
    """The fallback button row from the current DialogConfig (OK, Cancel)."""
    return [
        DialogButton(button_id_from_name(name), label)
        for name, label in get_dialog_config().default_buttons
    ]


def _require_string(value: Any, message: str) -> str:
    text = coerce_string(value)
    if text is None:
        raise DialogConstructionError(message.format(type(value).__name__))
    return text


def resolve_buttons(labels: Any = None, button_ids: Any = None,
                    include_buttons: bool = True) -> List[DialogButton]:
    """
    Build the ordered button row.

    Args:
        labels: Table of button labels in display order, or None
        button_ids: Table mapping role names to labels, or None
        include_buttons: Whether the script asked for a custom button row;
            when False the inputs are ignored

    Returns:
        The buttons in label order. An empty row becomes the default
        OK/Cancel pair.

    Raises:
        DialogConstructionError: If a label or role name is not a string, or
            a role names a label that is not in the row
    """
    buttons: List[DialogButton] = []

    if include_buttons and is_table(labels):
        for entry in as_descriptor(labels).iterate():
            buttons.append(DialogButton(NO_BUTTON_ID, _require_string(entry, CONSTANTS.BAD_BUTTON_LABEL_MSG)))

    if include_buttons and is_table(button_ids):
        for key, value in as_descriptor(button_ids).items():
            name = _require_string(key, CONSTANTS.BAD_BUTTON_ID_KEY_MSG)
            label = _require_string(value, CONSTANTS.BAD_BUTTON_LABEL_MSG)
            button = _find_button(buttons, label)
            if button is None:
                raise DialogConstructionError(CONSTANTS.INVALID_BUTTON_ID_MSG.format(name))
            button.id = button_id_from_name(name)

    if not buttons:
        buttons = default_buttons()

    for index, button in enumerate(buttons):
        logger.debug(CONSTANTS.BUTTON_CREATED_MSG.format(button.label, index))

    return buttons


def _find_button(buttons: List[DialogButton], label: str) -> Optional[DialogButton]:
    return next((button for button in buttons if button.label == label), None)
