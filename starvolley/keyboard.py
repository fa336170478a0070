"""Per-frame keyboard state: press and release edges and hold duration."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class Key(enum.Enum):
    """Keys the game reacts to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    SPACE = enum.auto()
    ESCAPE = enum.auto()


class Keyboard:
    """Tracks which keys went down, came up or stayed held between frames."""

    def __init__(self) -> None:
        self._pressed: frozenset[Key] = frozenset()
        self._down: frozenset[Key] = frozenset()
        self._up: frozenset[Key] = frozenset()
        self._held: dict[Key, int] = {}

    def update(self, pressed: Iterable[Key]) -> None:
        """Take the set of keys pressed this frame."""
        previous = self._pressed
        current = frozenset(pressed)
        changed = previous ^ current
        self._pressed = current
        self._down = current & changed
        self._up = previous & changed
        self._held = {key: self._held.get(key, 0) + 1 for key in current & previous}

    def is_key_up(self, key: Key) -> bool:
        """True on the frame the key was released."""
        return key in self._up

    def is_key_down(self, key: Key) -> bool:
        """True on the frame the key was pressed."""
        return key in self._down

    def held_frames(self, key: Key) -> int:
        """Frames the key has stayed down after the one it was pressed on."""
        return self._held.get(key, 0)