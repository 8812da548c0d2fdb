"""
input.io - Action Mapping and Input History

Bind logical actions to keyboard keys and mouse buttons, then ask which
actions are active and for how long.
"""

# Configuration
from .config.settings import HISTORY_WINDOW_MS, PREVENT_DEFAULT_MODES

# Errors
from .errors import InputIOError, InputTypeError, ValidationError

# Input
from .input.input_map import InputMapping, MappingTable
from .input.input_history import BinaryStateRecord, BinaryHistory, ActionHistory, HistoryTracker
from .input.input_manager import InputManager
from .input.key_bindings import export_bindings, import_bindings, load_bindings, save_bindings

__version__ = "0.1.0"
__all__ = [
    # Config
    "HISTORY_WINDOW_MS",
    "PREVENT_DEFAULT_MODES",
    # Errors
    "InputIOError",
    "InputTypeError",
    "ValidationError",
    # Input
    "InputMapping",
    "MappingTable",
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
