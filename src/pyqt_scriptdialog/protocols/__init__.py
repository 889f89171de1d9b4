"""
Protocol definitions for script dialogs.

ABC-based contracts for controls and for the scripting engine's tables,
plus the host-facing configuration hook.
"""

from .control_protocols import (
    ValueGettable,
    ValueSettable,
    ValueSerialisable,
    RangeConfigurable,
)
from .descriptor_source import DescriptorSource, TableDescriptor, is_table, as_descriptor
from .dialog_config import DialogConfig, set_dialog_config, get_dialog_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ValueSerialisable",
    "RangeConfigurable",
    "DescriptorSource",
    "TableDescriptor",
    "is_table",
    "as_descriptor",
    "DialogConfig",
    "set_dialog_config",
    "get_dialog_config",
]
