"""
Dialog aggregate and button row.
"""

from .buttons import (
    ButtonId,
    BUTTON_IDS,
    NO_BUTTON_ID,
    DialogButton,
    button_id_from_name,
    default_buttons,
    resolve_buttons,
)
from .script_dialog import ScriptDialog

__all__ = [
    "ButtonId",
    "BUTTON_IDS",
    "NO_BUTTON_ID",
    "DialogButton",
    "button_id_from_name",
    "default_buttons",
    "resolve_buttons",
    "ScriptDialog",
]
