"""
Input Map

Manages the bidirectional action <-> raw input association.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from ..errors import InputTypeError, ValidationError
from ..tables import keys as key_table
from ..tables import mouse_buttons as button_table

logger = logging.getLogger(__name__)

RawInput = Union[str, int]


def _names(value) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


@dataclass
class InputMapping:
    """
    An action and the inputs bound to it.

    Attributes:
        action: Application-defined action name (e.g. "jump")
        keys: Key names (e.g. "w", "space")
        buttons: Mouse button names (e.g. "left", "button4")
        inputs: Mixed key/button names, sorted out by looking them up
    """

    action: str
    keys: List[str] = field(default_factory=list)
    buttons: List[str] = field(default_factory=list)
    inputs: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "InputMapping":
        return cls(
            action=data.get("action"),
            keys=_names(data.get("keys")),
            buttons=_names(data.get("buttons")),
            inputs=_names(data.get("inputs")),
        )

    def to_dict(self) -> dict:
        return {"action": self.action, "keys": list(self.keys), "buttons": list(self.buttons)}


@dataclass(frozen=True)
class _ResolvedMapping:
    action: str
    key_codes: Tuple[str, ...]
    button_codes: Tuple[int, ...]


class MappingTable:
    """
    Manages all action to input mappings.

    Features:
    - Many actions per input, many inputs per action
    - Keyboard and mouse inputs in one mapping
    - Forward (action -> codes) and reverse (code -> actions) indices kept in sync
    - All-or-nothing batch validation

    Usage:
        table = MappingTable()
        table.add({"action": "up", "keys": ["w", "up"]})
        table.get_actions(keys=["w"])   # -> {"up"}
    """

    def __init__(self):
        """Initialize an empty table."""
        # Forward: action -> raw codes
        self._action_to_keys: Dict[str, Set[str]] = {}
        self._action_to_buttons: Dict[str, Set[int]] = {}

        # Reverse: raw code -> actions
        self._key_to_actions: Dict[str, Set[str]] = {}
        self._button_to_actions: Dict[int, Set[str]] = {}

        self.internal = MappingInternals(self)

    @property
    def actions(self) -> Set[str]:
        """A snapshot of all actions with mappings."""
        return set(self._action_to_keys) | set(self._action_to_buttons)

    def has(self, action: str) -> bool:
        """Return True if ``action`` has a mapping."""
        return action in self._action_to_keys or action in self._action_to_buttons

    def __contains__(self, action) -> bool:
        return self.has(action)

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.actions))

    def get_mapping(self, action: str) -> Optional[InputMapping]:
        """
        Get the mapping for an action.

        Args:
            action: The action of interest

        Returns:
            InputMapping with canonical key and button names, or None if unmapped
        """
        if not self.has(action):
            return None

        # Codes sharing a canonical name (MetaLeft/OSLeft) are listed once
        key_names: List[str] = []
        for code in sorted(self._action_to_keys.get(action, ())):
            name = key_table.names_for_key_code(code)[0]
            if name not in key_names:
                key_names.append(name)
        button_names = [button_table.names_for_button_code(code)[0]
                        for code in sorted(self._action_to_buttons.get(action, ()))]
        return InputMapping(action=action, keys=key_names, buttons=button_names)

    def get_actions(self, keys: Iterable[str] = (), buttons: Iterable[str] = ()) -> Set[str]:
        """
        Get the actions mapped to any of the given inputs.

        Args:
            keys: Key names
            buttons: Mouse button names

        Returns:
            Union of the actions bound to those inputs

        Raises:
            ValidationError: If no inputs are given or a name does not resolve
        """
        keys = list(keys or ())
        buttons = list(buttons or ())
        if not keys and not buttons:
            raise ValidationError("at least one input must be provided")

        return self.internal.actions_for(
            key_table.key_codes_for(*keys),
            button_table.button_codes_for(*buttons),
        )

    def has_action_for(self, raw_input: RawInput) -> bool:
        """
        Check if at least one action is bound to a raw input.

        Args:
            raw_input: Key code (str) or mouse button code (int)

        Returns:
            False for anything else, including bools
        """
        if isinstance(raw_input, str):
            return self.internal.key_has_action(raw_input)
        if isinstance(raw_input, int) and not isinstance(raw_input, bool):
            return self.internal.button_has_action(raw_input)
        return False

    def add(self, *mappings: Union[InputMapping, dict, None]):
        """
        Add action to input mappings. Appends to existing mappings.

        The whole batch is validated before anything is applied; if any
        mapping is invalid, the table is left unchanged.

        Args:
            *mappings: InputMapping objects or dicts with "action" and any of
                "keys", "buttons", "inputs". None entries are skipped.

        Raises:
            InputTypeError: If a mapping is not a dict or InputMapping
            ValidationError: If an action is missing, has no inputs, or
                names an unknown input
        """
        for resolved in self._resolve_all(mappings):
            self._apply(resolved)

    def remove(self, *actions: str):
        """
        Remove all mappings for the given actions. Unmapped actions are ignored.

        Args:
            *actions: Actions to remove
        """
        for action in actions:
            if not self.has(action):
                continue

            for code in self._action_to_keys.pop(action, ()):
                self._discard_reverse(self._key_to_actions, code, action)
            for code in self._action_to_buttons.pop(action, ()):
                self._discard_reverse(self._button_to_actions, code, action)

            logger.debug("Removed mapping for action %r", action)

    def set(self, *mappings: Union[InputMapping, dict, None]):
        """
        Set action to input mappings, overwriting existing ones.

        Validated as one batch, like add().
        """
        resolved = self._resolve_all(mappings)
        self.remove(*(item.action for item in resolved))
        for item in resolved:
            self._apply(item)

    def clear(self):
        """Remove every mapping."""
        self._action_to_keys.clear()
        self._action_to_buttons.clear()
        self._key_to_actions.clear()
        self._button_to_actions.clear()

    def _resolve_all(self, mappings) -> List[_ResolvedMapping]:
        return [self._resolve(mapping) for mapping in mappings if mapping is not None]

    def _resolve(self, mapping) -> _ResolvedMapping:
        if isinstance(mapping, dict):
            mapping = InputMapping.from_dict(mapping)
        elif not isinstance(mapping, InputMapping):
            raise InputTypeError(f"mapping is not a dict or InputMapping: {mapping!r}")

        action = mapping.action
        if not isinstance(action, str):
            raise ValidationError(f"action must be a string, got {action!r}", action=action)

        key_names = _names(mapping.keys)
        button_names = _names(mapping.buttons)
        for name in _names(mapping.inputs):
            if key_table.is_key_name(name):
                key_names.append(name)
            elif button_table.is_button_name(name):
                button_names.append(name)
            else:
                raise ValidationError(f"no such input '{name}': {action}", action=action, token=name)

        if not key_names and not button_names:
            raise ValidationError(f"at least one input must be provided: {action}", action=action)

        try:
            key_codes = key_table.key_codes_for(*key_names)
            button_codes = button_table.button_codes_for(*button_names)
        except ValidationError as e:
            raise ValidationError(f"{e}: {action}", action=action, token=e.token) from e

        return _ResolvedMapping(action, tuple(key_codes), tuple(button_codes))

    def _apply(self, resolved: _ResolvedMapping):
        action = resolved.action
        for code in resolved.key_codes:
            self._action_to_keys.setdefault(action, set()).add(code)
            self._key_to_actions.setdefault(code, set()).add(action)
        for code in resolved.button_codes:
            self._action_to_buttons.setdefault(action, set()).add(code)
            self._button_to_actions.setdefault(code, set()).add(action)

        logger.debug("Mapped action %r to keys %s, buttons %s",
                     action, resolved.key_codes, resolved.button_codes)

    @staticmethod
    def _discard_reverse(index: dict, code, action: str):
        bound = index.get(code)
        if bound is None:
            return
        bound.discard(action)
        if not bound:
            del index[code]


class MappingInternals:
    """
    Raw-code view of a MappingTable, for the InputManager.

    Works on key codes and button codes instead of names.
    Not part of the application-facing API.
    """

    def __init__(self, table: MappingTable):
        self._table = table

    def actions_for(self, key_codes: Iterable[str] = (), button_codes: Iterable[int] = ()) -> Set[str]:
        """Return the actions mapped to any of the given raw codes."""
        results: Set[str] = set()
        for code in key_codes or ():
            results.update(self._table._key_to_actions.get(code, ()))
        for code in button_codes or ():
            results.update(self._table._button_to_actions.get(code, ()))
        return results

    def key_has_action(self, key_code: str) -> bool:
        return bool(self._table._key_to_actions.get(key_code))

    def button_has_action(self, button_code: int) -> bool:
        return bool(self._table._button_to_actions.get(button_code))

    def key_codes_of(self, action: str) -> Set[str]:
        return set(self._table._action_to_keys.get(action, ()))

    def button_codes_of(self, action: str) -> Set[int]:
        return set(self._table._action_to_buttons.get(action, ()))
