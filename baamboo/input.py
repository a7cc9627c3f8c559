"""Keyboard and mouse state tracking."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Optional

KEY_LAST = 348
MOUSE_BUTTON_LAST = 7


class Key(IntEnum):
    """Key codes used by the engine."""

    A = 65
    D = 68
    E = 69
    Q = 81
    S = 83
    V = 86
    W = 87
    ESCAPE = 256
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


def _check(code: int, limit: int, kind: str) -> None:
    if not 0 <= code < limit:
        raise IndexError(f"{kind} {code} out of range")


class Input:
    """Per-frame and persistent key, button, cursor and wheel state."""

    _instance: ClassVar[Optional["Input"]] = None

    def __init__(self) -> None:
        self._transient_keys: set[int] = set()
        self._persistent_keys: set[int] = set()
        self._transient_mouse: set[int] = set()
        self._persistent_mouse: set[int] = set()
        self.mouse_delta_x = 0.0
        self.mouse_delta_y = 0.0
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.mouse_wheel = 0.0

    @classmethod
    def instance(cls) -> "Input":
        """The shared process-wide input state."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def end_frame(self) -> None:
        """Forget per-frame state."""
        self._transient_keys.clear()
        self._transient_mouse.clear()
        self.mouse_wheel = 0.0
        self.mouse_delta_x = self.mouse_delta_y = 0.0

    @staticmethod
    def _set(states: set[int], code: int, on: bool) -> None:
        if on:
            states.add(code)
        else:
            states.discard(code)

    def update_key(self, keycode: int, pressed: bool) -> None:
        _check(keycode, KEY_LAST, "key")
        self._set(self._transient_keys, keycode, pressed)
        self._set(self._persistent_keys, keycode, pressed)

    def update_mouse(self, button: int, clicked: bool) -> None:
        _check(button, MOUSE_BUTTON_LAST, "mouse button")
        self._set(self._transient_mouse, button, clicked)
        self._set(self._persistent_mouse, button, clicked)

    def update_mouse_wheel(self, mouse_wheel: float) -> None:
        self.mouse_wheel = mouse_wheel

    def update_mouse_position(self, x: float, y: float) -> None:
        self.mouse_delta_x = x - self.mouse_x
        self.mouse_delta_y = y - self.mouse_y
        self.mouse_x = x
        self.mouse_y = y

    def is_key_down(self, keycode: int) -> bool:
        """True if the key changed to pressed during this frame."""
        _check(keycode, KEY_LAST, "key")
        return keycode in self._transient_keys

    def is_key_pressed(self, keycode: int) -> bool:
        """True while the key is held."""
        _check(keycode, KEY_LAST, "key")
        return keycode in self._persistent_keys

    def is_mouse_down(self, button: int) -> bool:
        _check(button, MOUSE_BUTTON_LAST, "mouse button")
        return button in self._transient_mouse

    def is_mouse_pressed(self, button: int) -> bool:
        _check(button, MOUSE_BUTTON_LAST, "mouse button")
        return button in self._persistent_mouse