"""
Mouse Button Tables

Static lookup between mouse button codes (0=left, 1=middle, 2=right,
3..14=auxiliary buttons 4-15) and their names. Lookup by name is
case-insensitive; the canonical name is listed first.
"""

from typing import Dict, List, Tuple

from ..errors import ValidationError

CODE_TO_NAMES: Dict[int, Tuple[str, ...]] = {
    0: ("button1", "left"),
    1: ("button2", "middle"),
    2: ("button3", "right"),
}
for _code in range(3, 15):
    CODE_TO_NAMES[_code] = (f"button{_code + 1}",)

NAME_TO_CODES: Dict[str, Tuple[int, ...]] = {}
for _code, _names in CODE_TO_NAMES.items():
    for _name in _names:
        NAME_TO_CODES[_name] = NAME_TO_CODES.get(_name, ()) + (_code,)


def is_button_name(name) -> bool:
    """Return True if ``name`` is a known mouse button name (case-insensitive)."""
    return isinstance(name, str) and name.lower() in NAME_TO_CODES


def is_button_code(code) -> bool:
    """Return True if ``code`` is a known mouse button code."""
    return isinstance(code, int) and not isinstance(code, bool) and code in CODE_TO_NAMES


def button_codes_for(*names: str) -> List[int]:
    """
    Resolve mouse button names to button codes.

    Raises:
        ValidationError: On the first name that is not a mouse button
    """
    codes: List[int] = []
    for name in names:
        resolved = NAME_TO_CODES.get(name.lower()) if isinstance(name, str) else None
        if not resolved:
            raise ValidationError(f"no such mouse button '{name}'", token=name)
        codes.extend(resolved)
    return codes


def names_for_button_code(code: int) -> List[str]:
    """Return every name of a button code, canonical first (empty if unknown)."""
    return list(CODE_TO_NAMES.get(code, ()))
