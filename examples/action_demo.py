#!/usr/bin/env python3
"""
Action Demo

Opens a window, loads keybindings.json and tints the screen while actions
are held. The title shows how long "fire" has been in its current state.
"""

import logging
from pathlib import Path

import moderngl_window as mglw

from inputio import InputManager, load_bindings

BINDINGS_PATH = Path(__file__).parent / "keybindings.json"

logger = logging.getLogger(__name__)


class ActionDemo(mglw.WindowConfig):
    """Minimal window driving an InputManager"""

    gl_version = (3, 3)
    title = "input.io demo"
    window_size = (640, 360)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.input_manager = InputManager(self.wnd.keys)
        self.input_manager.mapping.set(*load_bindings(BINDINGS_PATH))
        logger.info("Actions: %s", sorted(self.input_manager.mapping.actions))

    def on_render(self, time, frametime):
        manager = self.input_manager
        red = 1.0 if manager.is_action_active("fire") else 0.1
        green = 0.5 if manager.is_action_active("up") or manager.is_action_active("down") else 0.1
        blue = 0.5 if manager.is_action_active("left") or manager.is_action_active("right") else 0.1
        self.ctx.clear(red, green, blue)

        state = "held" if manager.is_action_active("fire") else "released"
        self.wnd.title = f"fire {state} for {manager.action_duration('fire'):.0f} ms"

    def on_key_event(self, key, action, modifiers):
        if key == self.wnd.keys.ESCAPE and action == self.wnd.keys.ACTION_PRESS:
            self.wnd.close()
            return
        self.input_manager.on_key_event(key, action, modifiers)

    def on_mouse_press_event(self, x: int, y: int, button: int):
        self.input_manager.on_mouse_press_event(x, y, button)

    def on_mouse_release_event(self, x: int, y: int, button: int):
        self.input_manager.on_mouse_release_event(x, y, button)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    ActionDemo.run()
