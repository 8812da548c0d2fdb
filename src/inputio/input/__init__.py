"""
Input System

Action mappings, input histories and the window-event coordinator.
"""

from .input_map import InputMapping, MappingTable, MappingInternals
from .input_history import BinaryStateRecord, BinaryHistory, ActionHistory, HistoryTracker
from .input_manager import InputManager
from .key_bindings import export_bindings, import_bindings, load_bindings, save_bindings

__all__ = [
    "InputMapping",
    "MappingTable",
    "MappingInternals",
    "BinaryStateRecord",
    "BinaryHistory",
    "ActionHistory",
    "HistoryTracker",
    "InputManager",
    "export_bindings",
    "import_bindings",
    "load_bindings",
    "save_bindings",
]
