"""Per-frame keyboard and mouse state tracking."""

from __future__ import annotations

from enum import Enum

import pygame

MOUSE_BUTTON_COUNT = 5


class ButtonState(Enum):
    """State of a key or mouse button within the current frame."""

    UP = "up"
    PRESSED = "pressed"
    DOWN = "down"
    RELEASED = "released"

    @property
    def held(self) -> bool:
        """True while the button counts as held down."""
        return self in (ButtonState.PRESSED, ButtonState.DOWN)

    def settled(self) -> ButtonState:
        """The state this one turns into at the start of the next frame."""
        if self is ButtonState.PRESSED:
            return ButtonState.DOWN
        if self is ButtonState.RELEASED:
            return ButtonState.UP
        return self


class Input:
    """Keyboard (by scancode) and mouse state fed from pygame events."""

    def __init__(self) -> None:
        self._key_states: dict[int, ButtonState] = {}
        self._mouse_buttons: list[ButtonState] = [ButtonState.UP] * MOUSE_BUTTON_COUNT
        self.mouse_x = 0
        self.mouse_y = 0

    def update(self) -> None:
        """Age this frame's transitions; call once per frame before new events."""
        self._key_states = {key: state.settled() for key, state in self._key_states.items()}
        self._mouse_buttons = [state.settled() for state in self._mouse_buttons]

    def process_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event to the tracked state."""
        if event.type == pygame.KEYDOWN:
            # A key already held stays Down, so key repeat does not re-press it.
            if self.key_state(event.scancode) is not ButtonState.DOWN:
                self._key_states[event.scancode] = ButtonState.PRESSED
        elif event.type == pygame.KEYUP:
            self._key_states[event.scancode] = ButtonState.RELEASED
        elif event.type == pygame.MOUSEBUTTONDOWN:
            index = event.button - 1
            if 0 <= index < MOUSE_BUTTON_COUNT and self._mouse_buttons[index] is not ButtonState.DOWN:
                self._mouse_buttons[index] = ButtonState.PRESSED
        elif event.type == pygame.MOUSEBUTTONUP:
            index = event.button - 1
            if 0 <= index < MOUSE_BUTTON_COUNT:
                self._mouse_buttons[index] = ButtonState.RELEASED
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.mouse_x = int(x)
            self.mouse_y = int(y)

    def key_state(self, key: int) -> ButtonState:
        """State of the key with this scancode; keys never seen are Up."""
        return self._key_states.get(key, ButtonState.UP)

    def is_key_down(self, key: int) -> bool:
        return self.key_state(key).held

    def is_key_pressed(self, key: int) -> bool:
        return self.key_state(key) is ButtonState.PRESSED

    def is_key_released(self, key: int) -> bool:
        return self.key_state(key) is ButtonState.RELEASED

    def _mouse_state(self, button: int) -> ButtonState | None:
        if 0 <= button < MOUSE_BUTTON_COUNT:
            return self._mouse_buttons[button]
        return None

    def is_mouse_button_down(self, button: int) -> bool:
        """Whether mouse button 0-4 is held; out-of-range buttons are never down."""
        state = self._mouse_state(button)
        return state is not None and state.held

    def is_mouse_button_pressed(self, button: int) -> bool:
        return self._mouse_state(button) is ButtonState.PRESSED

    def is_mouse_button_released(self, button: int) -> bool:
        return self._mouse_state(button) is ButtonState.RELEASED

    def get_axis(self, negative: int, positive: int) -> float:
        """-1, 0 or 1 depending on which of the two keys are held."""
        value = 0.0
        if self.is_key_down(positive):
            value += 1.0
        if self.is_key_down(negative):
            value -= 1.0
        return value