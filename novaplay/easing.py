"""Easing curves and a stepping interpolator built on them."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto

from novaplay.structures import Vector2

EasingFunction = Callable[[float], float]


class EasingType(Enum):
    """The available easing curves."""

    EASE_IN_SINE = auto()
    EASE_OUT_SINE = auto()
    EASE_IN_OUT_SINE = auto()
    EASE_IN_QUAD = auto()
    EASE_OUT_QUAD = auto()
    EASE_IN_OUT_QUAD = auto()
    EASE_IN_CUBIC = auto()
    EASE_OUT_CUBIC = auto()
    EASE_IN_OUT_CUBIC = auto()
    EASE_IN_QUART = auto()
    EASE_OUT_QUART = auto()
    EASE_IN_OUT_QUART = auto()
    EASE_IN_EXPO = auto()
    EASE_OUT_EXPO = auto()
    EASE_IN_OUT_EXPO = auto()
    EASE_IN_CIRC = auto()
    EASE_OUT_CIRC = auto()
    EASE_IN_OUT_CIRC = auto()
    EASE_IN_BACK = auto()
    EASE_OUT_BACK = auto()
    EASE_IN_OUT_BACK = auto()
    EASE_IN_ELASTIC = auto()
    EASE_OUT_ELASTIC = auto()
    EASE_IN_OUT_ELASTIC = auto()
    EASE_IN_BOUNCE = auto()
    EASE_OUT_BOUNCE = auto()
    EASE_IN_OUT_BOUNCE = auto()


def ease_in_sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2)


def ease_in_out_sine(t: float) -> float:
    return 0.5 * (1 - math.cos(math.pi * t))


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return -t * (t - 2)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return -2.0 * t * (t - 2.0) - 1.0


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    u = t - 1
    return 1 + u * u * u


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4.0 * t * t * t
    u = t - 1
    return 1 + 4.0 * u * u * u


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    u = t - 1
    return 1 - u * u * u * u


def ease_in_out_quart(t: float) -> float:
    if t < 0.5:
        return 8.0 * t * t * t * t
    u = t - 1
    return 1 - 8.0 * u * u * u * u


def ease_in_expo(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10 * (t - 1))


def ease_out_expo(t: float) -> float:
    return 1.0 if t == 1.0 else 1 - 2.0 ** (-10 * t)


def ease_in_out_expo(t: float) -> float:
    if t in (0.0, 1.0):
        return t
    tt = t * 2
    if tt < 1:
        return 0.5 * 2.0 ** (10 * (tt - 1))
    tt -= 1
    return 0.5 * (2 - 2.0 ** (-10 * tt))


def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - (t - 1) * (t - 1))


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return 0.5 * (1 - math.sqrt(1 - t * t * 4))
    tt = t - 1
    return 0.5 * (math.sqrt(1 - tt * tt * 4) + 1)


def ease_in_back(t: float) -> float:
    s = 1.70158
    return t * t * ((s + 1) * t - s)


def ease_out_back(t: float) -> float:
    s1 = 6.00158
    s2 = s1 + 1
    return 1 + s2 * (t - 1) ** 3 + s1 * (t - 1) ** 2


def ease_in_out_back(t: float) -> float:
    s2 = 6.00158 + 1
    if t < 0.5:
        return 0.5 * (t * t * ((s2 + 1) * t - s2))
    return 0.5 * (t * t * ((s2 + 1) * t - s2) + 2)


def ease_in_elastic(t: float) -> float:
    p = 0.3
    s = p / 4.0
    if t in (0.0, 1.0):
        return t
    return -(2.0 ** (10 * (t - 1))) * math.sin((t - 1 - s) * (2 * math.pi) / p)


def ease_out_elastic(t: float) -> float:
    p = 0.3
    s = p / 4.0
    if t in (0.0, 1.0):
        return t
    return 2.0 ** (-10 * t) * math.sin((t - s) * (2 * math.pi) / p) + 1


def ease_in_out_elastic(t: float) -> float:
    p = 0.45
    s = p / 4.0
    if t in (0.0, 1.0):
        return t
    tt = t * 2
    if tt < 1:
        return -0.5 * 2.0 ** (10 * (tt - 1)) * math.sin((tt - 1 - s) * (2 * math.pi) / p)
    tt -= 1
    return 2.0 ** (-10 * tt) * math.sin((tt - s) * (2 * math.pi) / p) * 0.5 + 1


def ease_out_bounce(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        u = t - 1.5 / 2.75
        return 7.5625 * u * u + 0.75
    if t < 2.5 / 2.75:
        u = t - 2.25 / 2.75
        return 7.5625 * u * u + 0.9375
    u = t - 2.625 / 2.75
    return 7.5625 * u * u + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1.0 - ease_out_bounce(1.0 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return 0.5 * ease_in_bounce(t * 2.0)
    return 0.5 * ease_out_bounce(t * 2.0 - 1.0) + 0.5


_FUNCTIONS: dict[EasingType, EasingFunction] = {
    EasingType.EASE_IN_SINE: ease_in_sine,
    EasingType.EASE_OUT_SINE: ease_out_sine,
    EasingType.EASE_IN_OUT_SINE: ease_in_out_sine,
    EasingType.EASE_IN_QUAD: ease_in_quad,
    EasingType.EASE_OUT_QUAD: ease_out_quad,
    EasingType.EASE_IN_OUT_QUAD: ease_in_out_quad,
    EasingType.EASE_IN_CUBIC: ease_in_cubic,
    EasingType.EASE_OUT_CUBIC: ease_out_cubic,
    EasingType.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    EasingType.EASE_IN_QUART: ease_in_quart,
    EasingType.EASE_OUT_QUART: ease_out_quart,
    EasingType.EASE_IN_OUT_QUART: ease_in_out_quart,
    EasingType.EASE_IN_EXPO: ease_in_expo,
    EasingType.EASE_OUT_EXPO: ease_out_expo,
    EasingType.EASE_IN_OUT_EXPO: ease_in_out_expo,
    EasingType.EASE_IN_CIRC: ease_in_circ,
    EasingType.EASE_OUT_CIRC: ease_out_circ,
    EasingType.EASE_IN_OUT_CIRC: ease_in_out_circ,
    EasingType.EASE_IN_BACK: ease_in_back,
    EasingType.EASE_OUT_BACK: ease_out_back,
    EasingType.EASE_IN_OUT_BACK: ease_in_out_back,
    EasingType.EASE_IN_ELASTIC: ease_in_elastic,
    EasingType.EASE_OUT_ELASTIC: ease_out_elastic,
    EasingType.EASE_IN_OUT_ELASTIC: ease_in_out_elastic,
    EasingType.EASE_IN_BOUNCE: ease_in_bounce,
    EasingType.EASE_OUT_BOUNCE: ease_out_bounce,
    EasingType.EASE_IN_OUT_BOUNCE: ease_in_out_bounce,
}


def get_easing_function(easing_type: EasingType) -> EasingFunction:
    """Return the curve for ``easing_type``, falling back to in-out sine."""
    return _FUNCTIONS.get(easing_type, ease_in_out_sine)


def _channels(color: int) -> tuple[int, int, int, int]:
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def _pack(channels: tuple[int, ...]) -> int:
    r, g, b, a = channels
    return ((r << 24) | (g << 16) | (b << 8) | a) & 0xFFFFFFFF


def _blend_color(start: int, end: int, weight: float) -> int:
    return _pack(
        tuple(
            int((1.0 - weight) * s + weight * e)
            for s, e in zip(_channels(start), _channels(end))
        )
    )


@dataclass
class Easing:
    """A timer that advances by ``interval`` per step and eases between two values."""

    interval: float = 0.01
    cycle: float = 0.0
    timer: float = 0.0
    ease_timer: float = 0.0
    is_ease: bool = False
    is_reverse: bool = False
    frame_count: int = 0
    run_count: int = 0
    fade_color: int = 0x00000000

    start_color: int = 0x000000FF
    int_start_pos: int = 0
    float_start_pos: float = 0.0
    vec2_start_pos: Vector2 = field(default_factory=Vector2)

    end_color: int = 0x000000FF
    int_end_pos: int = 0
    float_end_pos: float = 0.0
    vec2_end_pos: Vector2 = field(default_factory=Vector2)

    easing_type: EasingType = EasingType.EASE_IN_OUT_SINE

    @property
    def easing_func(self) -> EasingFunction:
        """The curve currently in use."""
        return get_easing_function(self.easing_type)

    def set_easing(self, easing_type: EasingType) -> None:
        """Choose the curve used by the stepping methods."""
        self.easing_type = easing_type

    def init_easing(self) -> None:
        """Reset the timers and stop easing."""
        self.interval = 0.01
        self.cycle = 0.0
        self.timer = 0.0
        self.ease_timer = 0.0
        self.is_ease = False

    def _finish(self) -> None:
        self.timer = 0.0
        self.is_ease = False

    def _advance(self) -> float:
        self.timer += self.interval
        self.ease_timer = self.easing_func(self.timer)
        return self.ease_timer

    def step_value(self, start: int | float, end: int | float) -> int | float:
        """Advance one step and return the eased number between start and end.

        When both ends are integers the result is truncated to an integer.
        """
        if self.timer >= 1.0:
            self._finish()
            return end
        weight = self._advance()
        value = (1.0 - weight) * float(start) + weight * float(end)
        if isinstance(start, int) and isinstance(end, int):
            return int(value)
        return value

    def step_color(self, start: int, end: int) -> int:
        """Advance one step and return the eased RGBA colour, channel by channel."""
        if self.timer >= 1.0:
            self._finish()
            return _pack(_channels(end))
        return _blend_color(start, end, self._advance())

    def step_vector(self, start: Vector2, end: Vector2) -> Vector2:
        """Advance one step and return the eased point between start and end."""
        if self.timer >= 1.0:
            self.ease_timer = 0.0
            self._finish()
            return end.copy()
        weight = self._advance()
        return Vector2(
            (1.0 - weight) * start.x + weight * end.x,
            (1.0 - weight) * start.y + weight * end.y,
        )

    def color_reverse(self, start: int, end: int) -> int:
        """Blend two colours by the current ease value, swapping them when reversed."""
        if self.is_reverse:
            start, end = end, start
        return _blend_color(start, end, self.ease_timer)