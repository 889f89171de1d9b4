"""
Descriptor reading and shared constants for building dialogs.
"""

from .dialog_constants import CONSTANTS, ScriptDialogConstants
from .descriptor_reader import DescriptorReader, coerce_string, coerce_number, coerce_integer

__all__ = [
    "CONSTANTS",
    "ScriptDialogConstants",
    "DescriptorReader",
    "coerce_string",
    "coerce_number",
    "coerce_integer",
]
