"""Keyboard state: which of the 256 virtual keys are held down."""

from __future__ import annotations

KEY_COUNT = 256

VK_ESCAPE = 0x1B
VK_LEFT = 0x25
VK_RIGHT = 0x27


class InputState:
    """Tracks pressed and released keys by virtual key code."""

    def __init__(self) -> None:
        self._keys = [False] * KEY_COUNT

    @property
    def keys(self) -> tuple[bool, ...]:
        """Snapshot of every key's state."""
        return tuple(self._keys)

    def reset(self) -> None:
        """Mark every key as released."""
        self._keys = [False] * KEY_COUNT

    def _check(self, key: int) -> int:
        if not 0 <= key < KEY_COUNT:
            raise IndexError(f"key code out of range: {key}")
        return key

    def key_down(self, key: int) -> None:
        self._keys[self._check(key)] = True

    def key_up(self, key: int) -> None:
        self._keys[self._check(key)] = False

    def is_key_down(self, key: int) -> bool:
        return self._keys[self._check(key)]