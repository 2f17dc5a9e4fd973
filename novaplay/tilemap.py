"""A grid of map chips with wall collision tests and a cycling block colour."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from novaplay.easing import Easing, EasingType
from novaplay.gamebase import BLOCK_SIZE, WINDOW_HEIGHT
from novaplay.structures import RectangleObject, Vector2

WHITE = 0xFFFFFFFF
RED = 0xFF0000FF
GREEN = 0x00FF00FF

FLOOR_WIDTH = 19
FLOOR_HEIGHT = 32
_GROUND_ROWS = 3
_HALF_CHIP = 25


class ChipType(IntEnum):
    """What occupies a map cell."""

    NONE = 0
    BLOCK = 1


def _build_stage() -> tuple[tuple[int, ...], ...]:
    walled = (1,) + (0,) * (FLOOR_WIDTH - 2) + (1,)
    solid = (1,) * FLOOR_WIDTH
    return (walled,) * (FLOOR_HEIGHT - _GROUND_ROWS) + (solid,) * _GROUND_ROWS


STAGES: tuple[tuple[tuple[int, ...], ...], ...] = (_build_stage(),)


def generate_random_color(rng: random.Random | None = None) -> int:
    """Return an opaque colour, packed as alpha, red, green, blue, with bright channels."""
    rng = rng if rng is not None else random.Random()
    red = rng.randint(128, 255)
    green = rng.randint(128, 255)
    blue = rng.randint(128, 255)
    alpha = 255
    return (alpha << 24) | (red << 16) | (green << 8) | blue


@dataclass
class MapChip:
    """One cell of the map: its type, placement, size and colour."""

    chip_type: ChipType = ChipType.NONE
    pos: Vector2 = field(default_factory=Vector2)
    height: float = 50.0
    width: float = 50.0
    color: int = WHITE
    ro: RectangleObject = field(default_factory=RectangleObject)

    def __post_init__(self) -> None:
        self.ro.width = self.width
        self.ro.height = self.height

    def set_position(self, x: float, y: float) -> None:
        """Place the chip's lower-left corner at (x, y) and centre its rectangle there."""
        self.pos = Vector2(x, y)
        self.ro.w_pos.x = x + self.width / 2
        self.ro.w_pos.y = y + self.height / 2


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class Map:
    """The stage grid, indexed by row from the top and column from the left."""

    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    stage_no: int = 0
    color: int = 0xFFFFFFFF
    timer: int = 0
    pre_color: int = 0xFFFFFFFF
    end_color: int = 0xFFFFFFFF
    rg_color_ease: Easing = field(default_factory=Easing)
    gb_color_ease: Easing = field(default_factory=Easing)
    br_color_ease: Easing = field(default_factory=Easing)
    chips: list[list[MapChip]] = field(default_factory=list)

    floor_width = FLOOR_WIDTH
    floor_height = FLOOR_HEIGHT

    def __post_init__(self) -> None:
        if not self.chips:
            self.chips = [
                [MapChip() for _ in range(FLOOR_WIDTH)] for _ in range(FLOOR_HEIGHT)
            ]
        for row, line in enumerate(self.chips):
            for col, chip in enumerate(line):
                chip.set_position(
                    float(col * chip.width),
                    float(WINDOW_HEIGHT - chip.height - row * chip.height),
                )
        self.rg_color_ease.is_ease = True

    def set_map(self) -> None:
        """Load the current stage's chip types; empty cells become transparent."""
        stage = STAGES[self.stage_no]
        for line, values in zip(self.chips, stage):
            for chip, value in zip(line, values):
                chip.chip_type = ChipType(value)
                if chip.chip_type is ChipType.NONE:
                    chip.color = 0x00000000

    def collision_check(self, wx: float, wy: float) -> bool:
        """Return whether the point (wx, wy), with y counted downwards, is in a block."""
        col = _trunc_div(int(wx), BLOCK_SIZE)
        row = _trunc_div(int(wy), BLOCK_SIZE)
        if not (0 <= col < FLOOR_WIDTH and 0 <= row < FLOOR_HEIGHT):
            return False
        return self.chips[row][col].chip_type is ChipType.BLOCK

    def collision_left(self, wx: float, wy: float) -> bool:
        """Return whether a character's left edge at (wx, wy) overlaps a block."""
        return self.collision_check(wx, WINDOW_HEIGHT - wy) or self.collision_check(
            wx, WINDOW_HEIGHT - (wy - _HALF_CHIP)
        )

    def collision_right(self, wx: float, wy: float) -> bool:
        """Return whether a character's right edge at (wx, wy) overlaps a block."""
        right = wx + _HALF_CHIP
        return self.collision_check(right, WINDOW_HEIGHT - wy) or self.collision_check(
            right, WINDOW_HEIGHT - (wy - _HALF_CHIP)
        )

    def collision_top(self, wx: float, wy: float) -> bool:
        """Return whether a character's top edge at (wx, wy) overlaps a block."""
        y = WINDOW_HEIGHT - wy
        return self.collision_check(wx, y) or self.collision_check(wx + _HALF_CHIP, y)

    def collision_bottom(self, wx: float, wy: float) -> bool:
        """Return whether a character's bottom edge at (wx, wy) touches a block."""
        y = WINDOW_HEIGHT - (wy - _HALF_CHIP)
        return self.collision_check(wx, y) or self.collision_check(wx + _HALF_CHIP, y)

    def get_chip(self, x: int, y: int) -> MapChip:
        """Return the chip at column x, row y, or a fresh default chip when out of range."""
        if 0 <= x < FLOOR_WIDTH and 0 <= y < FLOOR_HEIGHT:
            return self.chips[y][x]
        return MapChip()

    def set_chip(self, x: int, y: int, chip: MapChip) -> None:
        """Replace the chip at column x, row y; out-of-range positions are ignored."""
        if 0 <= x < FLOOR_WIDTH and 0 <= y < FLOOR_HEIGHT:
            self.chips[y][x] = chip

    def _ease_step(self, ease: Easing, start: int, end: int, following: Easing) -> None:
        ease.set_easing(EasingType.EASE_OUT_CUBIC)
        self.color = ease.step_color(start, end)
        if not ease.is_ease:
            following.is_ease = True
            self.pre_color = self.color
            self.end_color = generate_random_color(self.rng)

    def update_colors(self) -> None:
        """Advance the block colour cycle by one frame."""
        if self.rg_color_ease.is_ease:
            self._ease_step(self.rg_color_ease, RED, GREEN, self.gb_color_ease)
        if self.gb_color_ease.is_ease:
            self._ease_step(
                self.gb_color_ease, self.pre_color, self.end_color, self.br_color_ease
            )
        if self.br_color_ease.is_ease:
            self._ease_step(
                self.br_color_ease, self.pre_color, self.end_color, self.gb_color_ease
            )

    def chip_colors(self) -> Iterator[tuple[MapChip, int]]:
        """Yield each chip with the colour it is drawn in."""
        for line in self.chips:
            for chip in line:
                if chip.chip_type is ChipType.BLOCK:
                    yield chip, self.color
                else:
                    yield chip, chip.color