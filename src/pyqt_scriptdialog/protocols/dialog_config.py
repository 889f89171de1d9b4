"""Base configuration for script dialog construction.

Provides hooks for host applications to customize dialog behavior.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass, field


@dataclass
class DialogConfig:
    """Configuration for script dialog behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        default_buttons: (semantic id name, label) pairs used when a dialog
            ends up with no buttons
        float_format: Format spec for serialised FloatEdit values; None keeps
            the shortest exact representation
        clamp_numeric_values: Keep IntEdit/FloatEdit values inside [min, max]
        log_created_controls: Emit a debug record for each created control
    """

    default_buttons: List[Tuple[str, str]] = field(
        default_factory=lambda: [("ok", "OK"), ("cancel", "Cancel")]
    )
    float_format: Optional[str] = None
    clamp_numeric_values: bool = True
    log_created_controls: bool = True


# Global config instance (set by application)
_dialog_config: Optional[DialogConfig] = None


def set_dialog_config(config: Optional[DialogConfig]) -> None:
    """Set the global dialog configuration.

    Args:
        config: DialogConfig instance, or None to restore defaults
    """
    global _dialog_config
    _dialog_config = config


def get_dialog_config() -> DialogConfig:
    """Get the current dialog configuration.

    Returns:
        Current DialogConfig or default if not set
    """
    if _dialog_config is None:
        return DialogConfig()
    return _dialog_config
