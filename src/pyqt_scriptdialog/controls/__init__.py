"""
Control catalog.

One control type per descriptor class name, all sharing the DialogControl
base and opting into capabilities through the protocol ABCs.
"""

from .base import DialogControl
from .text_controls import Label, Edit, Textbox
from .numeric_controls import IntEdit, FloatEdit
from .choice_controls import Dropdown, Checkbox
from .color_control import Color
from .control_registry import CONTROL_FACTORIES, create_control

__all__ = [
    "DialogControl",
    "Label",
    "Edit",
    "Textbox",
    "IntEdit",
    "FloatEdit",
    "Dropdown",
    "Checkbox",
    "Color",
    "CONTROL_FACTORIES",
    "create_control",
]
