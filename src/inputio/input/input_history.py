"""
Input History

Edge-triggered, time-bounded on/off histories for raw inputs and actions.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, FrozenSet, Hashable, Optional, Set, Tuple

from ..config.settings import HISTORY_WINDOW_MS

Clock = Callable[[], float]


def get_now() -> float:
    """Current monotonic time in milliseconds."""
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class BinaryStateRecord:
    """One state transition: the input became ``state`` at ``start`` (ms)."""

    state: bool
    start: float


class BinaryHistory:
    """
    History of a single on/off input.

    A record is added only when the state flips. Records older than the
    window are pruned on update, keeping the one needed to know the state
    at the window boundary. The newest record is never pruned.
    """

    def __init__(self, clock: Optional[Clock] = None, window: float = HISTORY_WINDOW_MS):
        self._clock = clock or get_now
        self._window = window
        # Newest first
        self._history: Deque[BinaryStateRecord] = deque()

    @property
    def current_state(self) -> bool:
        return self._history[0].state if self._history else False

    @property
    def current_duration(self) -> float:
        """Milliseconds spent in the current state (0.0 if never updated)."""
        if not self._history:
            return 0.0
        return self._clock() - self._history[0].start

    @property
    def records(self) -> Tuple[BinaryStateRecord, ...]:
        """Snapshot of the retained records, newest first."""
        return tuple(self._history)

    def state_at(self, timestamp: float) -> bool:
        """
        Get the state at a past time.

        Only meaningful within the window before the last update; before the
        oldest retained record the state is the opposite of that record's.
        """
        for record in self._history:
            if record.start <= timestamp:
                return record.state
        if self._history:
            return not self._history[-1].state
        return False

    def update(self, state: bool):
        """
        Record a state, adding a transition only if it differs from the current one.

        Args:
            state: The asserted state
        """
        state = bool(state)
        if state == self.current_state:
            return

        now = self._clock()
        self._history.appendleft(BinaryStateRecord(state, now))
        while len(self._history) > 1 and self._history[-2].start + self._window < now:
            self._history.pop()


class ActionHistory:
    """
    History of an action, derived from the raw inputs bound to it.

    The action is active while at least one contributing input is active.
    Its history only records a transition when that aggregate flips.
    """

    def __init__(self, clock: Optional[Clock] = None, window: float = HISTORY_WINDOW_MS):
        self.history = BinaryHistory(clock, window)
        self._contributing: Set[Hashable] = set()

    @property
    def current_state(self) -> bool:
        return self.history.current_state

    @property
    def current_duration(self) -> float:
        return self.history.current_duration

    @property
    def records(self) -> Tuple[BinaryStateRecord, ...]:
        return self.history.records

    @property
    def contributing_inputs(self) -> FrozenSet[Hashable]:
        """Raw inputs currently asserting this action."""
        return frozenset(self._contributing)

    def state_at(self, timestamp: float) -> bool:
        return self.history.state_at(timestamp)

    def update(self, input: Hashable, state: bool):
        """
        Update the state of one input this action depends on.

        Args:
            input: Raw input code (key code or button code)
            state: Whether that input is active
        """
        if state:
            self._contributing.add(input)
        else:
            self._contributing.discard(input)
        self.history.update(bool(self._contributing))


class HistoryTracker:
    """
    Owns the histories of every key, mouse button and action.

    Histories are created on first access and kept for the tracker's lifetime.

    Usage:
        tracker = HistoryTracker()
        tracker.history_for_key("KeyW").update(True)
        tracker.history_for_action("up").update("KeyW", True)
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Args:
            clock: Callable returning the current time in milliseconds
                (default: monotonic clock)
        """
        self.clock = clock or get_now
        self._keys: Dict[str, BinaryHistory] = {}
        self._buttons: Dict[int, BinaryHistory] = {}
        self._actions: Dict[str, ActionHistory] = {}

    def history_for_key(self, code: str) -> BinaryHistory:
        if code not in self._keys:
            self._keys[code] = BinaryHistory(self.clock)
        return self._keys[code]

    def history_for_button(self, code: int) -> BinaryHistory:
        if code not in self._buttons:
            self._buttons[code] = BinaryHistory(self.clock)
        return self._buttons[code]

    def history_for_action(self, name: str) -> ActionHistory:
        if name not in self._actions:
            self._actions[name] = ActionHistory(self.clock)
        return self._actions[name]
