"""
Input Configuration Settings

All configuration constants for the input system.
Modify these values to change input behavior.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
DEFAULT_BINDINGS_PATH = PROJECT_ROOT / "keybindings.json"

# ============================================================================
# History Settings
# ============================================================================

# How far back (milliseconds) input histories must be able to answer state queries.
# Older records are pruned lazily during updates.
HISTORY_WINDOW_MS = 1000.0

# ============================================================================
# Event Consumption ("prevent default")
# ============================================================================
#
# Decides which window events the InputManager reports as consumed:
#   "all"    - every key/button event
#   "action" - only events for raw inputs bound to at least one action
#   "none"   - never
# ============================================================================

PREVENT_DEFAULT_MODES = ("all", "action", "none")
DEFAULT_PREVENT_DEFAULT = "action"

# ============================================================================
# Mouse Buttons
# ============================================================================

# moderngl_window reports 1=left, 2=right, 3=middle.
# Raw button codes are 0=left, 1=middle, 2=right, 3..14=auxiliary.
MOUSE_BUTTON_TO_CODE = {
    1: 0,
    2: 2,
    3: 1,
}
