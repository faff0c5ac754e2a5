"""
input_source.py
---------------
Device-agnostic input interface consumed by the simulation.

Each input slot (device index) exposes gamepad-style buttons with a
"pressed" (held this tick) and "just pressed" (rising edge this tick)
state. The simulation only ever reads through this interface.
"""

from enum import Enum
from typing import Protocol


class Button(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    A = "a"
    B = "b"
    START = "start"


# Logical actions and the buttons that trigger them
CONFIRM_BUTTONS = (Button.START, Button.A)
FIRE_BUTTONS = (Button.START, Button.A, Button.B)
JOIN_BUTTONS = (Button.A, Button.B)


class InputSource(Protocol):
    """Anything the simulation can poll for button state."""

    def pressed(self, device: int, button: Button) -> bool:
        ...

    def just_pressed(self, device: int, button: Button) -> bool:
        ...


# ===========================================================
# Action Helpers
# ===========================================================

def any_just_pressed(source, device: int, buttons) -> bool:
    return any(source.just_pressed(device, button) for button in buttons)


def confirm_pressed(source, device: int) -> bool:
    return any_just_pressed(source, device, CONFIRM_BUTTONS)


def fire_pressed(source, device: int) -> bool:
    return any_just_pressed(source, device, FIRE_BUTTONS)


def join_pressed(source, device: int) -> bool:
    return any_just_pressed(source, device, JOIN_BUTTONS)


class NullInput:
    """Input source with nothing ever pressed."""

    def pressed(self, device: int, button: Button) -> bool:
        return False

    def just_pressed(self, device: int, button: Button) -> bool:
        return False
