"""
Control class dispatch.

Maps the ``class`` field of a control descriptor (case-insensitive) to the
control type that builds it. The catalog is fixed; an unknown class is a
construction error rather than an extension point.
"""

from functools import partial
from typing import Any, Callable, Dict

from pyqt_scriptdialog.controls.base import DialogControl
from pyqt_scriptdialog.controls.choice_controls import Checkbox, Dropdown
from pyqt_scriptdialog.controls.color_control import Color
from pyqt_scriptdialog.controls.numeric_controls import FloatEdit, IntEdit
from pyqt_scriptdialog.controls.text_controls import Edit, Label, Textbox
from pyqt_scriptdialog.exceptions import DialogConstructionError
from pyqt_scriptdialog.forms.descriptor_reader import DescriptorReader
from pyqt_scriptdialog.forms.dialog_constants import CONSTANTS
from pyqt_scriptdialog.protocols.descriptor_source import DescriptorSource, as_descriptor, is_table

ControlFactory = Callable[[DescriptorSource], DialogControl]

CONTROL_FACTORIES: Dict[str, ControlFactory] = {
    "label": Label,
    "edit": Edit,
    "intedit": IntEdit,
    "floatedit": FloatEdit,
    "textbox": Textbox,
    "dropdown": Dropdown,
    "checkbox": Checkbox,
    "color": partial(Color, alpha=False),
    "coloralpha": partial(Color, alpha=True),
    # Legacy alias kept for existing scripts; builds a plain text edit
    "alpha": Edit,
}


def create_control(entry: Any) -> DialogControl:
    """
    Build one control from a descriptor table.

    Args:
        entry: Control descriptor (DescriptorSource, mapping or sequence)

    Returns:
        The constructed control

    Raises:
        DialogConstructionError: If the entry is not a table, or its class
            is missing or unknown
    """
    if not is_table(entry):
        raise DialogConstructionError(CONSTANTS.BAD_CONTROL_ENTRY_MSG)

    descriptor = as_descriptor(entry)
    control_class = DescriptorReader.get_string(descriptor, CONSTANTS.CLASS_FIELD).lower()
    factory = CONTROL_FACTORIES.get(control_class)
    if factory is None:
        raise DialogConstructionError(CONSTANTS.UNKNOWN_CONTROL_CLASS_MSG.format(control_class))

    return factory(descriptor)
