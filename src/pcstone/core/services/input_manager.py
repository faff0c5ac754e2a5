"""
input_manager.py
----------------
Keyboard and joystick polling for every input slot.

Provides:
- One gamepad-style button set per slot (see input_source.Button)
- Edge detection (pressed / just pressed) computed once per tick
- Keyboard layouts loaded from config, merged with any attached joystick
"""

import pygame

from pcstone.core.debug.debug_logger import DebugLogger
from pcstone.core.runtime.game_settings import Rules
from pcstone.core.services.config_manager import load_config
from pcstone.core.services.input_source import Button


# ===========================================================
# Default Bindings
# ===========================================================

DEFAULT_CONTROLS = {
    "keyboard": {
        "0": {
            "up": "w", "down": "s", "left": "a", "right": "d",
            "a": "space", "b": "left shift", "start": "return",
        },
        "1": {
            "up": "up", "down": "down", "left": "left", "right": "right",
            "a": "right ctrl", "b": "right shift", "start": "keypad enter",
        },
    },
    "joystick": {
        "a": 0,
        "b": 1,
        "start": 7,
        "deadzone": 0.5,
    },
}


class InputManager:
    """
    Polls pygame once per tick and answers InputSource queries.

    Usage:
        input_manager.update()                          # once per tick
        if input_manager.just_pressed(0, Button.A):     # rising edge
            ...
        if input_manager.pressed(1, Button.LEFT):       # held
            ...
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, controls=None, slots=Rules.MAX_PLAYERS):
        DebugLogger.init_entry("InputManager")

        controls = controls or load_config("controls.yaml", DEFAULT_CONTROLS)
        self.slots = slots
        self.key_bindings = self._build_key_bindings(controls.get("keyboard", {}))
        self.joystick_config = controls.get("joystick", DEFAULT_CONTROLS["joystick"])

        self._held = {}
        self._prev_held = {}
        self._just_pressed = {}
        self._reset_states()

        self.joysticks = []
        self._init_joysticks()

    def _build_key_bindings(self, keyboard_config):
        """Translate {slot: {button: key_name}} into {slot: {Button: keycode}}."""
        bindings = {}
        for slot in range(self.slots):
            layout = keyboard_config.get(str(slot), {})
            slot_bindings = {}
            for button in Button:
                key_name = layout.get(button.value)
                if key_name is None:
                    continue
                try:
                    slot_bindings[button] = pygame.key.key_code(key_name)
                except ValueError:
                    DebugLogger.warn(f"Unknown key '{key_name}' for P{slot + 1} {button.value}",
                                     category="input")
            bindings[slot] = slot_bindings
            DebugLogger.init_sub(f"P{slot + 1}: {len(slot_bindings)} keys bound")
        return bindings

    def _reset_states(self):
        for slot in range(self.slots):
            for button in Button:
                self._held[(slot, button)] = False
                self._prev_held[(slot, button)] = False
                self._just_pressed[(slot, button)] = False

    def _init_joysticks(self):
        """Assign attached joysticks to slots in the order pygame reports them."""
        pygame.joystick.init()
        count = min(pygame.joystick.get_count(), self.slots)
        for index in range(count):
            joystick = pygame.joystick.Joystick(index)
            joystick.init()
            self.joysticks.append(joystick)
            DebugLogger.init_sub(f"Controller for P{index + 1}: {joystick.get_name()}")

    # ===========================================================
    # InputSource API
    # ===========================================================

    def pressed(self, device: int, button: Button) -> bool:
        return self._held.get((device, Button(button)), False)

    def just_pressed(self, device: int, button: Button) -> bool:
        return self._just_pressed.get((device, Button(button)), False)

    # ===========================================================
    # Frame Update
    # ===========================================================

    def update(self):
        """Poll all devices. Call exactly once per simulation tick."""
        keys = pygame.key.get_pressed()

        for slot in range(self.slots):
            joystick = self.joysticks[slot] if slot < len(self.joysticks) else None
            for button in Button:
                held = self._is_key_held(slot, button, keys)
                if not held and joystick is not None:
                    held = self._is_joystick_held(joystick, button)
                self._update_button_state((slot, button), held)

    def _update_button_state(self, key, current_held: bool):
        """Rising edge: not held on the previous poll, held on this one."""
        self._just_pressed[key] = current_held and not self._prev_held[key]
        self._held[key] = current_held
        self._prev_held[key] = current_held

    # ===========================================================
    # Internal Helpers
    # ===========================================================

    def _is_key_held(self, slot: int, button: Button, keys) -> bool:
        keycode = self.key_bindings.get(slot, {}).get(button)
        if keycode is None:
            return False
        return bool(keys[keycode])

    def _is_joystick_held(self, joystick, button: Button) -> bool:
        deadzone = self.joystick_config.get("deadzone", 0.5)

        if button in (Button.LEFT, Button.RIGHT, Button.UP, Button.DOWN):
            hat_x, hat_y = joystick.get_hat(0) if joystick.get_numhats() > 0 else (0, 0)
            x_axis = joystick.get_axis(0) if joystick.get_numaxes() > 0 else 0.0
            y_axis = joystick.get_axis(1) if joystick.get_numaxes() > 1 else 0.0
            directions = {
                Button.LEFT: hat_x == -1 or x_axis < -deadzone,
                Button.RIGHT: hat_x == 1 or x_axis > deadzone,
                Button.UP: hat_y == 1 or y_axis < -deadzone,
                Button.DOWN: hat_y == -1 or y_axis > deadzone,
            }
            return directions[button]

        index = self.joystick_config.get(button.value)
        if index is None or index >= joystick.get_numbuttons():
            return False
        return bool(joystick.get_button(index))
