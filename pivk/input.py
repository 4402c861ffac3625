"""Keyboard, mouse and joystick state tracking between frames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

KEYS_COUNT = 256
JOYSTICK_BUTTONS = 32
RUSSIAN_LAYOUT_ID = 1049
POV_CENTERED = 0xFFFF


class KeyboardLayout(Enum):
    """Active keyboard layout."""

    ENGLISH = "english"
    RUSSIAN = "russian"


class Keyboard:
    """Key states for the current frame and click detection."""

    def __init__(self):
        self.keys = [0] * KEYS_COUNT
        self.keys_click = [0] * KEYS_COUNT
        self._keys_old = [0] * KEYS_COUNT
        self.layout = KeyboardLayout.ENGLISH
        self.caps_active = False

    def update(self, keys: Sequence[int], layout_id: int = 0x0409,
               caps_on: bool = False) -> None:
        """Take a raw 256-byte key state (high bit set means pressed)."""
        if len(keys) != KEYS_COUNT:
            raise ValueError(f"key state must have {KEYS_COUNT} entries")
        self.layout = (KeyboardLayout.RUSSIAN
                       if layout_id & 0xFFFF == RUSSIAN_LAYOUT_ID
                       else KeyboardLayout.ENGLISH)
        self.caps_active = bool(caps_on)
        self._keys_old = self.keys
        self.keys = [(k & 0xFF) >> 7 for k in keys]
        self.keys_click = [int(bool(now and not old))
                           for now, old in zip(self.keys, self._keys_old)]


class Mouse:
    """Cursor position, wheel total and their change since the last frame."""

    def __init__(self):
        self.mx = self.my = self.mz = 0
        self.mdx = self.mdy = self.mdz = 0

    def update(self, x: int, y: int, wheel: int = 0) -> None:
        """Record the cursor position and the wheel delta for this frame."""
        self.mdx = x - self.mx
        self.mdy = y - self.my
        self.mdz = wheel
        self.mx = x
        self.my = y
        self.mz += wheel


def axis_value(pos: float, low: float, high: float) -> float:
    """Map a raw axis position in [low, high] to [-1, 1]."""
    return 2.0 * (pos - low) / (high - low) - 1


@dataclass(frozen=True)
class JoystickState:
    """Raw joystick readings for one frame."""

    buttons: int = 0
    pov: int = POV_CENTERED
    x: float = 32767.5
    y: float = 32767.5
    z: float = 32767.5
    r: float = 32767.5
    x_range: tuple[float, float] = (0, 65535)
    y_range: tuple[float, float] = (0, 65535)
    z_range: tuple[float, float] = (0, 65535)
    r_range: tuple[float, float] = (0, 65535)


class Joystick:
    """Joystick buttons, axes and point-of-view direction."""

    def __init__(self):
        self.buttons = [0] * JOYSTICK_BUTTONS
        self.buttons_click = [0] * JOYSTICK_BUTTONS
        self._buttons_old = [0] * JOYSTICK_BUTTONS
        self.pov = 0
        self.jx = self.jy = self.jz = self.jr = 0.0

    def update(self, state: Optional[JoystickState]) -> None:
        """Apply a reading; None means no joystick is connected."""
        if state is None:
            return
        self.buttons = [(state.buttons >> i) & 1 for i in range(JOYSTICK_BUTTONS)]
        self.buttons_click = [int(bool(now and not old))
                              for now, old in zip(self.buttons, self._buttons_old)]
        self._buttons_old = list(self.buttons)
        self.jx = axis_value(state.x, *state.x_range)
        self.jy = axis_value(state.y, *state.y_range)
        self.jz = axis_value(state.z, *state.z_range)
        self.jr = axis_value(state.r, *state.r_range)
        self.pov = -1 if state.pov == POV_CENTERED else state.pov // 4500


class Input:
    """All input devices updated together once per frame."""

    def __init__(self):
        self.keyboard = Keyboard()
        self.mouse = Mouse()
        self.joystick = Joystick()

    def update(self, keys: Sequence[int], cursor: tuple[int, int], wheel: int = 0,
               layout_id: int = 0x0409, caps_on: bool = False,
               joystick: Optional[JoystickState] = None) -> None:
        """Update keyboard, mouse and joystick in that order."""
        self.keyboard.update(keys, layout_id, caps_on)
        x, y = cursor
        self.mouse.update(x, y, wheel)
        self.joystick.update(joystick)