"""
Key Tables

Static lookup between keyboard codes (``KeyboardEvent.code`` style strings such
as ``"KeyW"`` or ``"ArrowUp"``) and the human-readable names applications use
in their bindings (``"w"``, ``"up"``, ``"left shift"``...).

Each code has one or more names, canonical name first. A name may belong to
several codes (``"shift"`` is both ``ShiftLeft`` and ``ShiftRight``).
Lookup by name is case-insensitive.
"""

from typing import Dict, List, Optional, Tuple

from ..errors import ValidationError

_META_LEFT = ("os left", "command", "cmd", "⌘", "windows", "left command", "left cmd")
_META_RIGHT = ("os right", "command", "cmd", "⌘", "windows", "right command", "right cmd")

CODE_TO_NAMES: Dict[str, Tuple[str, ...]] = {
    "Semicolon": (";",),
    "Equal": ("=",),
    "Comma": (",",),
    "Minus": ("-",),
    "Period": (".",),
    "Slash": ("/",),
    "Backquote": ("`",),
    "BracketLeft": ("[",),
    "Backslash": ("\\",),
    "BracketRight": ("]",),
    "Quote": ("'",),
    "Escape": ("escape", "esc"),
    "Tab": ("tab",),
    "Backspace": ("backspace",),
    "Enter": ("enter", "return"),
    "ShiftLeft": ("left shift", "shift", "⇧"),
    "ShiftRight": ("right shift", "shift", "⇧"),
    "ControlLeft": ("left control", "left ctrl", "left ctl", "control", "ctrl", "ctl"),
    "ControlRight": ("right control", "right ctrl", "right ctl", "control", "ctrl", "ctl"),
    "AltLeft": ("left alt", "left option", "alt", "option", "⌥"),
    "AltRight": ("right alt", "right option", "alt", "option", "⌥"),
    "CapsLock": ("caps lock", "capslock", "capslk", "caps"),
    "Space": ("spacebar", "space", "spc"),
    "PrintScreen": ("print screen", "prntscr", "prtsc"),
    "ScrollLock": ("scroll lock", "scrlk"),
    "Pause": ("pause", "break", "pause/break"),
    "Insert": ("insert", "ins"),
    "Delete": ("delete", "del"),
    "Home": ("home",),
    "End": ("end",),
    "PageUp": ("page up", "pgup"),
    "PageDown": ("page down", "pgdn"),
    "ArrowUp": ("up",),
    "ArrowDown": ("down",),
    "ArrowLeft": ("left",),
    "ArrowRight": ("right",),
    "NumLock": ("num lock",),
    "NumpadMultiply": ("numpad *", "num *"),
    "NumpadAdd": ("numpad +", "num +"),
    "NumpadSubtract": ("numpad -", "num -"),
    "NumpadDecimal": ("numpad .", "num ."),
    "NumpadDivide": ("numpad /", "num /"),
    "NumpadEnter": ("numpad enter", "numpad return", "num enter", "num return"),
    "MetaLeft": _META_LEFT,
    "MetaRight": _META_RIGHT,
    "OSLeft": _META_LEFT,
    "OSRight": _META_RIGHT,
    "ContextMenu": ("context menu", "menu"),
}

# Letters, digits, numpad digits, function keys
for _i in range(26):
    _letter = chr(ord("a") + _i)
    CODE_TO_NAMES[f"Key{_letter.upper()}"] = (_letter,)
for _i in range(10):
    CODE_TO_NAMES[f"Digit{_i}"] = (str(_i),)
for _i in range(10):
    CODE_TO_NAMES[f"Numpad{_i}"] = (f"numpad {_i}", f"num {_i}")
for _i in range(1, 25):
    CODE_TO_NAMES[f"F{_i}"] = (f"f{_i}",)

NAME_TO_CODES: Dict[str, Tuple[str, ...]] = {}
for _code, _names in CODE_TO_NAMES.items():
    for _name in _names:
        NAME_TO_CODES[_name] = NAME_TO_CODES.get(_name, ()) + (_code,)

# Value BaseKeys gives keys a backend does not define
UNDEFINED_KEY = "undefined"

# Key code -> moderngl_window BaseKeys attribute.
# moderngl_window has no right control key, so ControlRight is not translated.
BACKEND_KEY_NAMES: Dict[str, str] = {
    "Escape": "ESCAPE",
    "Space": "SPACE",
    "Enter": "ENTER",
    "PageUp": "PAGE_UP",
    "PageDown": "PAGE_DOWN",
    "ArrowLeft": "LEFT",
    "ArrowRight": "RIGHT",
    "ArrowUp": "UP",
    "ArrowDown": "DOWN",
    "Tab": "TAB",
    "Comma": "COMMA",
    "Minus": "MINUS",
    "Period": "PERIOD",
    "Slash": "SLASH",
    "Semicolon": "SEMICOLON",
    "Equal": "EQUAL",
    "BracketLeft": "LEFT_BRACKET",
    "BracketRight": "RIGHT_BRACKET",
    "Backslash": "BACKSLASH",
    "Backspace": "BACKSPACE",
    "Insert": "INSERT",
    "Delete": "DELETE",
    "Home": "HOME",
    "End": "END",
    "CapsLock": "CAPS_LOCK",
    "ShiftLeft": "LEFT_SHIFT",
    "ShiftRight": "RIGHT_SHIFT",
    "ControlLeft": "LEFT_CTRL",
}
for _i in range(26):
    _upper = chr(ord("A") + _i)
    BACKEND_KEY_NAMES[f"Key{_upper}"] = _upper
for _i in range(10):
    BACKEND_KEY_NAMES[f"Digit{_i}"] = f"NUMBER_{_i}"
    BACKEND_KEY_NAMES[f"Numpad{_i}"] = f"NUMPAD_{_i}"
for _i in range(1, 13):
    BACKEND_KEY_NAMES[f"F{_i}"] = f"F{_i}"


def _normalize(name) -> Optional[str]:
    if not isinstance(name, str):
        return None
    return name.lower()


def is_key_name(name) -> bool:
    """Return True if ``name`` is a known key name (case-insensitive)."""
    return _normalize(name) in NAME_TO_CODES


def is_key_code(code) -> bool:
    """Return True if ``code`` is a known key code."""
    return isinstance(code, str) and code in CODE_TO_NAMES


def key_codes_for(*names: str) -> List[str]:
    """
    Resolve key names to key codes.

    Args:
        *names: Key names, e.g. "w", "Shift", "up"

    Returns:
        Flattened list of codes, in the order the names were given

    Raises:
        ValidationError: On the first name that is not a key
    """
    codes: List[str] = []
    for name in names:
        resolved = NAME_TO_CODES.get(_normalize(name))
        if not resolved:
            raise ValidationError(f"no such key '{name}'", token=name)
        codes.extend(resolved)
    return codes


def names_for_key_code(code: str) -> List[str]:
    """Return every name of a key code, canonical first (empty if unknown)."""
    return list(CODE_TO_NAMES.get(code, ()))


def backend_key_table(keys) -> Dict[object, str]:
    """
    Build a backend key -> key code table from a moderngl_window keys class.

    Args:
        keys: BaseKeys subclass (``window.keys``)

    Returns:
        Dict of backend key constant to key code. Keys the backend does not
        define are left out.
    """
    table: Dict[object, str] = {}
    for code, attr in BACKEND_KEY_NAMES.items():
        value = getattr(keys, attr, None)
        if value is not None and value != UNDEFINED_KEY:
            table[value] = code
    return table
