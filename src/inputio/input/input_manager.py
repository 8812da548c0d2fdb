"""
Input Manager

Central coordinator for the input system. Translates raw window events to
key/button codes, resolves the actions they drive, and records the resulting
state transitions.
"""

import logging
from typing import Dict, Optional

from moderngl_window.context.base.keys import BaseKeys

from ..config.settings import DEFAULT_PREVENT_DEFAULT, MOUSE_BUTTON_TO_CODE, PREVENT_DEFAULT_MODES
from ..errors import InputTypeError, ValidationError
from ..tables import keys as key_table
from ..tables import mouse_buttons as button_table
from .input_history import ActionHistory, HistoryTracker
from .input_map import MappingTable

logger = logging.getLogger(__name__)


class InputManager:
    """
    Central input coordinator.

    Responsibilities:
    - Translate moderngl_window key constants and mouse buttons to raw codes
    - Record raw input histories
    - Resolve affected actions through the MappingTable
    - Record action histories (OR of their contributing inputs)
    - Report whether an event should be consumed

    Usage:
        manager = InputManager(window.keys)
        manager.mapping.add({"action": "jump", "keys": ["space"]})
        manager.on_key_event(key, action, modifiers)  # from WindowConfig.on_key_event
        manager.is_action_active("jump")
    """

    def __init__(
        self,
        keys: BaseKeys,
        mapping: Optional[MappingTable] = None,
        history: Optional[HistoryTracker] = None,
        prevent_default: str = DEFAULT_PREVENT_DEFAULT,
    ):
        """
        Initialize input manager.

        Args:
            keys: moderngl_window keys class (``window.keys``)
            mapping: Action mappings (default: new empty MappingTable)
            history: Input histories (default: new HistoryTracker)
            prevent_default: Which events are reported as consumed
                ("all", "action" or "none")
        """
        self.keys = keys
        self.mapping = mapping if mapping is not None else MappingTable()
        self.history = history if history is not None else HistoryTracker()
        self.prevent_default = prevent_default

        # Backend key constant -> key code
        self._key_codes: Dict[object, str] = key_table.backend_key_table(keys)

    @property
    def prevent_default(self) -> str:
        return self._prevent_default

    @prevent_default.setter
    def prevent_default(self, value: str):
        if not isinstance(value, str):
            raise InputTypeError("prevent_default must be a string")
        if value not in PREVENT_DEFAULT_MODES:
            raise ValidationError(f"invalid prevent_default value: {value}")
        self._prevent_default = value

    def key_code_for(self, key) -> Optional[str]:
        """Get the key code for a backend key constant, or None if unknown."""
        return self._key_codes.get(key)

    @staticmethod
    def button_code_for(button: int) -> Optional[int]:
        """
        Get the button code for a moderngl_window mouse button.

        Args:
            button: Mouse button (1=left, 2=right, 3=middle, 4+=auxiliary)
        """
        code = MOUSE_BUTTON_TO_CODE.get(button)
        if code is None and isinstance(button, int) and button > 3:
            code = button - 1
        if code is None or not button_table.is_button_code(code):
            return None
        return code

    def on_key_event(self, key, action, modifiers=None) -> bool:
        """
        Handle keyboard event.

        Args:
            key: Key constant (moderngl_window)
            action: keys.ACTION_PRESS or keys.ACTION_RELEASE (others ignored)
            modifiers: Modifier keys (unused, modifier keys are tracked as keys)

        Returns:
            True if the event should be consumed
        """
        if action == self.keys.ACTION_PRESS:
            state = True
        elif action == self.keys.ACTION_RELEASE:
            state = False
        else:
            return False

        code = self.key_code_for(key)
        if code is None:
            logger.debug("Ignoring unknown key %r", key)
            return self.prevent_default == "all"

        self.history.history_for_key(code).update(state)
        for name in self.mapping.internal.actions_for(key_codes=[code]):
            self.history.history_for_action(name).update(code, state)

        return self._should_consume(self.mapping.internal.key_has_action(code))

    def on_mouse_press_event(self, x: int, y: int, button: int) -> bool:
        """
        Handle mouse button press.

        Args:
            x, y: Mouse position (unused)
            button: Mouse button (1=left, 2=right, 3=middle)

        Returns:
            True if the event should be consumed
        """
        return self._on_mouse_button(button, True)

    def on_mouse_release_event(self, x: int, y: int, button: int) -> bool:
        """
        Handle mouse button release.

        Args:
            x, y: Mouse position (unused)
            button: Mouse button
        """
        return self._on_mouse_button(button, False)

    def _on_mouse_button(self, button: int, state: bool) -> bool:
        code = self.button_code_for(button)
        if code is None:
            logger.debug("Ignoring unknown mouse button %r", button)
            return self.prevent_default == "all"

        self.history.history_for_button(code).update(state)
        for name in self.mapping.internal.actions_for(button_codes=[code]):
            self.history.history_for_action(name).update(code, state)

        return self._should_consume(self.mapping.internal.button_has_action(code))

    def _should_consume(self, has_action: bool) -> bool:
        if self.prevent_default == "all":
            return True
        if self.prevent_default == "action":
            return has_action
        return False

    def action_history(self, action: str) -> ActionHistory:
        """Get the history of an action (created on first access)."""
        return self.history.history_for_action(action)

    def is_action_active(self, action: str) -> bool:
        return self.history.history_for_action(action).current_state

    def action_duration(self, action: str) -> float:
        """Milliseconds the action has been in its current state."""
        return self.history.history_for_action(action).current_duration

    def is_key_down(self, name: str) -> bool:
        """
        Check if any key with the given name is held.

        Raises:
            ValidationError: If the name is not a key
        """
        return any(self.history.history_for_key(code).current_state
                   for code in key_table.key_codes_for(name))

    def is_button_down(self, name: str) -> bool:
        """
        Check if any mouse button with the given name is held.

        Raises:
            ValidationError: If the name is not a mouse button
        """
        return any(self.history.history_for_button(code).current_state
                   for code in button_table.button_codes_for(name))
