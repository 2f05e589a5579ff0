"""Digital input state: per-button press/hold tracking and analogue stick helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

AXIS_MAX = 32767
AXIS_MIN_MAGNITUDE = 32768

LSTICK_DEADZONE = 0.3
RSTICK_DEADZONE = 0.3
LTRIGGER_DEADZONE = 0.3
RTRIGGER_DEADZONE = 0.3


class Button(IntEnum):
    """Logical buttons; ANY mirrors whether any other button is held."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    A = 4
    B = 5
    C = 6
    START = 7
    ANY = 8


INPUT_MAX = len(Button)

# (flag bit, button, attribute of InputData)
_FLAG_MAP = (
    (0x01, Button.UP, "up"),
    (0x02, Button.DOWN, "down"),
    (0x04, Button.LEFT, "left"),
    (0x08, Button.RIGHT, "right"),
    (0x10, Button.A, "a"),
    (0x20, Button.B, "b"),
    (0x40, Button.C, "c"),
    (0x80, Button.START, "start"),
)


def axis_delta(value: int) -> float:
    """Normalise a signed stick axis reading to the range -1.0..1.0."""
    if value < 0:
        return -((-value - 1) / (AXIS_MIN_MAGNITUDE - 1))
    return value / AXIS_MAX


def trigger_delta(value: int) -> float:
    """Normalise a trigger axis reading (0..32767) to 0.0..1.0."""
    return value / AXIS_MAX


@dataclass
class InputData:
    """A snapshot of the eight game buttons."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    a: bool = False
    b: bool = False
    c: bool = False
    start: bool = False


@dataclass
class InputButton:
    """Press (first frame) and hold state of one button."""

    press: bool = False
    hold: bool = False
    key_mapping: int = 0
    controller_mapping: int = 0

    def set_held(self) -> None:
        """Mark the button held; press is true only on the first held frame."""
        self.press = not self.hold
        self.hold = True

    def set_released(self) -> None:
        """Clear both press and hold."""
        self.press = False
        self.hold = False

    def down(self) -> bool:
        """True while the button is pressed or held."""
        return self.press or self.hold


@dataclass
class InputState:
    """All buttons, touch points and the idle dim timer."""

    buttons: list[InputButton] = field(
        default_factory=lambda: [InputButton() for _ in range(INPUT_MAX)]
    )
    touch_down: list[bool] = field(default_factory=list)
    any_press: bool = False
    dim_timer: int = 0
    dim_limit: int = 0

    def __getitem__(self, button: Button) -> InputButton:
        return self.buttons[button]

    def update(self, held: Iterable[Button]) -> None:
        """Advance one frame given the set of buttons currently held."""
        held_set = {Button(b) for b in held}
        any_button = self.buttons[Button.ANY]
        for button in Button:
            if button == Button.ANY:
                continue
            state = self.buttons[button]
            if button in held_set:
                state.set_held()
                if not any_button.hold:
                    any_button.set_held()
            elif state.hold:
                state.set_released()

        if not held_set:
            any_button.set_released()

        if any_button.press or any_button.hold or len(self.touch_down) > 1:
            self.dim_timer = 0
        elif self.dim_timer < self.dim_limit:
            self.dim_timer += 1

    def check_key_press(self, target: InputData, flags: int) -> InputData:
        """Copy first-frame presses of the flagged buttons into ``target``."""
        for bit, button, name in _FLAG_MAP:
            if flags & bit:
                setattr(target, name, self.buttons[button].press)
        if flags & 0x80:
            self.any_press = self.buttons[Button.ANY].press or any(self.touch_down)
        return target

    def check_key_down(self, target: InputData, flags: int) -> InputData:
        """Copy held state of the flagged buttons into ``target``."""
        for bit, button, name in _FLAG_MAP:
            if flags & bit:
                setattr(target, name, self.buttons[button].hold)
        return target