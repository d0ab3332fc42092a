from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

INPUT_DIM = 4


class InputIndex(IntEnum):
    THRUST = 0
    ROTATE_LEFT = 1
    ROTATE_RIGHT = 2
    FIRE = 3


# Browser-style key codes -> input flag. Arrows and WASD steer, Space fires.
KEY_BINDINGS: dict[str, InputIndex] = {
    "ArrowUp": InputIndex.THRUST,
    "KeyW": InputIndex.THRUST,
    "ArrowLeft": InputIndex.ROTATE_LEFT,
    "KeyA": InputIndex.ROTATE_LEFT,
    "ArrowRight": InputIndex.ROTATE_RIGHT,
    "KeyD": InputIndex.ROTATE_RIGHT,
    "Space": InputIndex.FIRE,
}


@dataclass(frozen=True)
class ShipInput:
    """Control flags read once per simulation step."""

    thrust_forward: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    fire: bool = False

    @classmethod
    def from_array(cls, action: Sequence[float], threshold: float = 0.0) -> ShipInput:
        """Build from a numeric action vector; a flag is set when its value exceeds ``threshold``."""
        if len(action) < INPUT_DIM:
            raise ValueError(f"action needs {INPUT_DIM} values, got {len(action)}")
        return cls(
            thrust_forward=float(action[InputIndex.THRUST]) > threshold,
            rotate_left=float(action[InputIndex.ROTATE_LEFT]) > threshold,
            rotate_right=float(action[InputIndex.ROTATE_RIGHT]) > threshold,
            fire=float(action[InputIndex.FIRE]) > threshold,
        )

    @classmethod
    def from_keys(cls, pressed: Iterable[str]) -> ShipInput:
        flags = {KEY_BINDINGS[code] for code in pressed if code in KEY_BINDINGS}
        return cls(
            thrust_forward=InputIndex.THRUST in flags,
            rotate_left=InputIndex.ROTATE_LEFT in flags,
            rotate_right=InputIndex.ROTATE_RIGHT in flags,
            fire=InputIndex.FIRE in flags,
        )


IDLE = ShipInput()


class InputState:
    """
    Latched control flags written by an input adapter at arbitrary times.

    Each flag is an independent bool; the simulation only ever sees the
    frozen copy returned by ``snapshot()``.
    """

    def __init__(self) -> None:
        self.thrust_forward = False
        self.rotate_left = False
        self.rotate_right = False
        self.fire = False

    def set(self, flag: InputIndex, pressed: bool) -> None:
        if flag == InputIndex.THRUST:
            self.thrust_forward = bool(pressed)
        elif flag == InputIndex.ROTATE_LEFT:
            self.rotate_left = bool(pressed)
        elif flag == InputIndex.ROTATE_RIGHT:
            self.rotate_right = bool(pressed)
        elif flag == InputIndex.FIRE:
            self.fire = bool(pressed)

    def key_down(self, code: str) -> bool:
        """Returns True when ``code`` is bound (adapters suppress its default action)."""
        flag = KEY_BINDINGS.get(code)
        if flag is None:
            return False
        self.set(flag, True)
        return True

    def key_up(self, code: str) -> bool:
        flag = KEY_BINDINGS.get(code)
        if flag is None:
            return False
        self.set(flag, False)
        return True

    def release_all(self) -> None:
        self.thrust_forward = False
        self.rotate_left = False
        self.rotate_right = False
        self.fire = False

    def snapshot(self) -> ShipInput:
        return ShipInput(
            thrust_forward=self.thrust_forward,
            rotate_left=self.rotate_left,
            rotate_right=self.rotate_right,
            fire=self.fire,
        )
