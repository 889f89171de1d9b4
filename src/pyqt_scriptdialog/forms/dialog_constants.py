"""
Script dialog constants for eliminating magic strings throughout the dialog core.

This module centralizes the delimiters of the serialised state format, the
numeric default ranges and the error message templates used when building
dialogs from script descriptors.
"""

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class ScriptDialogConstants:
    """
    Centralized constants for the script dialog core.

    Categories:
    - Serialised state format
    - Descriptor field names
    - Numeric ranges
    - Error and log message templates
    """

    # Serialised state format: name:value|name:value
    ENTRY_SEPARATOR: str = "|"
    NAME_SEPARATOR: str = ":"
    CHECKBOX_CHECKED: str = "1"
    CHECKBOX_UNCHECKED: str = "0"

    # Descriptor field names
    CLASS_FIELD: str = "class"
    NAME_FIELD: str = "name"
    HINT_FIELD: str = "hint"
    LABEL_FIELD: str = "label"
    VALUE_FIELD: str = "value"
    TEXT_FIELD: str = "text"
    ITEMS_FIELD: str = "items"
    MIN_FIELD: str = "min"
    MAX_FIELD: str = "max"
    STEP_FIELD: str = "step"

    # Layout hint defaults
    DEFAULT_POSITION: int = 0
    DEFAULT_SPAN: int = 1

    # Numeric ranges (32-bit signed int, largest finite double)
    INT_MIN: int = -2147483648
    INT_MAX: int = 2147483647
    FLOAT_MIN: float = -sys.float_info.max
    FLOAT_MAX: float = sys.float_info.max

    # Number formatting for string fields given a number
    NUMBER_TO_STRING_FORMAT: str = ".14g"

    # Error messages
    NON_TABLE_DIALOG_MSG: str = "Cannot create config dialog from something non-table"
    BAD_CONTROL_ENTRY_MSG: str = "bad control table entry"
    UNKNOWN_CONTROL_CLASS_MSG: str = "bad control table entry: unknown control class '{}'"
    INVALID_BUTTON_ID_MSG: str = "Invalid button for id {}"
    BAD_BUTTON_LABEL_MSG: str = "Button label must be a string, got {}"
    BAD_BUTTON_ID_KEY_MSG: str = "Button id name must be a string, got {}"

    # Log message templates
    CONTROL_CREATED_MSG: str = "created control: '{}', ({},{})({},{}), {}"
    BUTTON_CREATED_MSG: str = "created button: {} ({})"
    BUTTON_OUT_OF_RANGE_MSG: str = "Button {} not in range; defaulting to cancel"


CONSTANTS = ScriptDialogConstants()
