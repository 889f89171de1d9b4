"""
pyqt-scriptdialog: descriptor-driven configuration dialogs for embedded scripts.

Scripts describe a flat set of named form fields and a button row as plain
tables. This package turns those tables into typed controls, reports current
values back to the script, and saves/restores control state as one string.

Architecture:
- Core: inline string codec and colour value type
- Protocols: control capability ABCs, descriptor source ABC, host config
- Forms: typed descriptor field reading and shared constants
- Controls: the fixed control catalog and class-name dispatch
- Dialog: button row resolution and the ScriptDialog aggregate

Rendering is left to the host: controls expose layout hints and a
get_value()/set_value() contract for whatever toolkit draws them.
"""

__version__ = "0.1.0"

from .exceptions import DialogError, DialogConstructionError
from .dialog import ScriptDialog, ButtonId, DialogButton

__all__ = [
    "__version__",
    "DialogError",
    "DialogConstructionError",
    "ScriptDialog",
    "ButtonId",
    "DialogButton",
]
