"""An off-screen RGB canvas with keyboard and mouse state."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional


class MouseButton(IntEnum):
    """Mouse button index."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class MouseButtonState(IntEnum):
    """State of a mouse button."""

    UP = 0
    DOWN = 1
    PRESSED = 2


def _key_code(key: int | str) -> int:
    code = ord(key) if isinstance(key, str) else int(key)
    if not 0 <= code < 256:
        raise IndexError(f"key code out of range: {code}")
    return code


class Window:
    """A width x height RGB back buffer plus input state fed by events."""

    def __init__(
        self,
        width: int,
        height: int,
        name: str = "",
        on_present: Optional[Callable[[Window], None]] = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid window size: {width}x{height}")
        self.width = width
        self.height = height
        self.name = name
        self._on_present = on_present
        data_size = width * height * 3
        self.back_buffer = bytearray(((data_size + 3) // 4) * 4)
        self._keys = [False] * 256
        self._buttons = [MouseButtonState.UP] * 3
        self.mouse_x = 0
        self.mouse_y = 0
        self.wheel = 0

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return (y * self.width + x) * 3

    def draw(self, x: int, y: int, r: int, g: int, b: int) -> None:
        """Set the pixel at (x, y)."""
        i = self._offset(x, y)
        self.back_buffer[i:i + 3] = bytes((r, g, b))

    def draw_index(self, pixel_index: int, r: int, g: int, b: int) -> None:
        """Set the pixel at a linear index (row-major)."""
        if not 0 <= pixel_index < self.width * self.height:
            raise IndexError(f"pixel index out of range: {pixel_index}")
        i = pixel_index * 3
        self.back_buffer[i:i + 3] = bytes((r, g, b))

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the RGB value at (x, y)."""
        i = self._offset(x, y)
        r, g, b = self.back_buffer[i:i + 3]
        return r, g, b

    def clear(self) -> None:
        """Set every pixel to black."""
        self.back_buffer[: self.width * self.height * 3] = bytes(
            self.width * self.height * 3
        )

    def present(self) -> None:
        """Hand the finished frame to the presentation callback, if any."""
        if self._on_present is not None:
            self._on_present(self)

    def _promote_buttons(self) -> None:
        self._buttons = [
            MouseButtonState.PRESSED if s == MouseButtonState.DOWN else s
            for s in self._buttons
        ]

    def key_down(self, key: int | str) -> None:
        """Record a key press."""
        self._promote_buttons()
        self._keys[_key_code(key)] = True

    def key_up(self, key: int | str) -> None:
        """Record a key release."""
        self._promote_buttons()
        self._keys[_key_code(key)] = False

    def key_pressed(self, key: int | str) -> bool:
        """Whether the key is currently held."""
        return self._keys[_key_code(key)]

    def mouse_down(self, button: MouseButton, x: int, y: int) -> None:
        """Record a mouse button press at (x, y)."""
        self._promote_buttons()
        self.mouse_move_to(x, y)
        self._buttons[MouseButton(button)] = MouseButtonState.DOWN

    def mouse_up(self, button: MouseButton, x: int, y: int) -> None:
        """Record a mouse button release at (x, y)."""
        self._promote_buttons()
        self.mouse_move_to(x, y)
        self._buttons[MouseButton(button)] = MouseButtonState.UP

    def mouse_move(self, x: int, y: int) -> None:
        """Record mouse movement."""
        self._promote_buttons()
        self.mouse_move_to(x, y)

    def mouse_move_to(self, x: int, y: int) -> None:
        """Update the mouse position without counting it as an event."""
        self.mouse_x = x
        self.mouse_y = y

    def mouse_wheel(self, x: int, y: int, delta: int) -> None:
        """Record wheel movement at (x, y)."""
        self._promote_buttons()
        self.mouse_move_to(x, y)
        self.wheel += delta

    def mouse_button_pressed(self, button: MouseButton) -> bool:
        """Whether the button is down or being held."""
        return self._buttons[MouseButton(button)] in (
            MouseButtonState.DOWN,
            MouseButtonState.PRESSED,
        )

    def mouse_button_state(self, button: MouseButton) -> MouseButtonState:
        """The button's current state."""
        return self._buttons[MouseButton(button)]

    def reset_mouse_wheel(self) -> None:
        """Set the accumulated wheel value back to zero."""
        self.wheel = 0