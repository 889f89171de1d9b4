"""
Script dialog aggregate.

A ScriptDialog is built once from the three values a script passes to its
dialog call (controls, button labels, button roles). Afterwards the UI layer
changes control values and records the pushed button, and the dialog reports
results back to the script or saves/restores control state as one string:

    name1:value1|name2:value2|...

Names and values are escaped with the inline string codec, so the ``|`` and
``:`` delimiters never appear inside an entry. Only the first ``:`` of an
entry separates name from value.

Not thread-safe: confine a dialog to the thread running the UI.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from pyqt_scriptdialog.controls.base import DialogControl
from pyqt_scriptdialog.controls.control_registry import create_control
from pyqt_scriptdialog.core.string_codec import inline_string_decode, inline_string_encode
from pyqt_scriptdialog.dialog.buttons import NO_BUTTON_ID, DialogButton, resolve_buttons
from pyqt_scriptdialog.exceptions import DialogConstructionError
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.descriptor_source import as_descriptor, is_table

logger = logging.getLogger(__name__)


class ScriptDialog:
    """
    Controls and buttons of one scripted configuration dialog.

    Control order is descriptor order: it is the read-back order and the
    default tab order. Names are expected to be unique but this is not
    enforced; duplicate names share read-back and serialised slots, and the
    last control wins on read-back.

    Attributes:
        controls: Controls in descriptor order
        buttons: Button row in display order
        use_buttons: Whether read_back() reports the pushed button
        button_pushed: Index into buttons, or -1 for none (cancelled)

    Example:
        >>> dialog = ScriptDialog([{"class": "edit", "name": "who", "value": "world"}])
        >>> dialog.push_button(0)
        >>> dialog.read_back()
        ('OK', {'who': 'world'})
    """

    def __init__(self, controls: Any, button_labels: Any = None,
                 button_ids: Any = None, include_buttons: bool = True):
        """
        Build the dialog from script descriptors.

        Args:
            controls: Table of control descriptor tables
            button_labels: Optional table of button labels
            button_ids: Optional table mapping role names to button labels
            include_buttons: Whether the script handles the pushed button

        Raises:
            DialogConstructionError: If the descriptors have the wrong shape
        """
        logger.debug(f"creating ScriptDialog, addr: {id(self):#x}")
        self.use_buttons: bool = include_buttons
        self._button_pushed: int = NO_BUTTON_ID

        if not is_table(controls):
            raise DialogConstructionError(CONSTANTS.NON_TABLE_DIALOG_MSG)

        self.controls: List[DialogControl] = [
            create_control(entry) for entry in as_descriptor(controls).iterate()
        ]
        self.buttons: List[DialogButton] = resolve_buttons(button_labels, button_ids, include_buttons)

    @property
    def button_pushed(self) -> int:
        """Index of the pushed button, or -1 for none. Changed only through push_button()."""
        return self._button_pushed

    @property
    def pushed_button(self) -> Optional[DialogButton]:
        """The pushed button, or None if no button was pushed."""
        if self.button_pushed == NO_BUTTON_ID:
            return None
        return self.buttons[self.button_pushed]

    def get_control(self, name: str) -> Optional[DialogControl]:
        """Return the control read back under ``name`` (the last one with that name)."""
        found = None
        for control in self.controls:
            if control.name == name:
                found = control
        return found

    def push_button(self, index: int) -> None:
        """
        Record which button closed the dialog.

        Args:
            index: Index into the button row; -1 means no button. Any other
                out-of-range index is logged and treated as no button.
        """
        if index != NO_BUTTON_ID and not 0 <= index < len(self.buttons):
            logger.error(CONSTANTS.BUTTON_OUT_OF_RANGE_MSG.format(index))
            index = NO_BUTTON_ID
        self._button_pushed = index

    def read_back(self) -> Tuple[Any, ...]:
        """
        Report results to the script.

        Returns:
            ``(activation, values)`` when use_buttons is set, else ``(values,)``.
            activation is False when no button or a Cancel-role button was
            pushed, otherwise the pushed button's label. values maps control
            names to read-back values in control order.
        """
        values: Dict[str, Any] = {}
        for control in self.controls:
            values[control.name] = control.read_back()

        if not self.use_buttons:
            return (values,)

        button = self.pushed_button
        if button is None or button.is_cancel:
            logger.info("Pushing cancel")
            return (False, values)

        logger.info(f"Pushing {button.label}")
        return (button.label, values)

    def serialise(self) -> str:
        """
        Save the values of all serialisable controls.

        Returns:
            ``name:value`` entries joined by ``|``, in control order
        """
        return CONSTANTS.ENTRY_SEPARATOR.join(
            inline_string_encode(control.name) + CONSTANTS.NAME_SEPARATOR + control.serialise_value()
            for control in self.controls
            if control.can_serialise_value()
        )

    def unserialise(self, serialised: str) -> None:
        """
        Restore control values saved by serialise().

        Entries without a ``:`` and entries naming no control are skipped,
        so archives from older versions of a script restore what they can.
        Every serialisable control with a matching name receives the value.

        Args:
            serialised: Text produced by serialise()
        """
        for token in serialised.split(CONSTANTS.ENTRY_SEPARATOR):
            encoded_name, separator, value = token.partition(CONSTANTS.NAME_SEPARATOR)
            if not separator:
                continue

            name = inline_string_decode(encoded_name)
            matched = False
            for control in self.controls:
                if control.name == name and control.can_serialise_value():
                    control.unserialise_value(value)
                    matched = True

            if not matched:
                logger.debug(f"No control for serialised entry '{name}'")

    def __repr__(self) -> str:
        return f"ScriptDialog(controls={len(self.controls)}, buttons={[b.label for b in self.buttons]})"
