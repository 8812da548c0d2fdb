"""
Lookup Tables

Static code/name tables for keyboard keys and mouse buttons.
"""

from .keys import (
    is_key_name,
    is_key_code,
    key_codes_for,
    names_for_key_code,
    backend_key_table,
)
from .mouse_buttons import (
    is_button_name,
    is_button_code,
    button_codes_for,
    names_for_button_code,
)

__all__ = [
    "is_key_name",
    "is_key_code",
    "key_codes_for",
    "names_for_key_code",
    "backend_key_table",
    "is_button_name",
    "is_button_code",
    "button_codes_for",
    "names_for_button_code",
]
