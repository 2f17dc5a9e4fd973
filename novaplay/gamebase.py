"""Shared game constants, object facing and frame-by-frame keyboard state."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import Enum, auto

WINDOW_WIDTH = 1300
WINDOW_HEIGHT = 700
BLOCK_SIZE = 50


class Direction(Enum):
    """The direction an object faces."""

    RIGHT = auto()
    LEFT = auto()
    UP = auto()
    DOWN = auto()


class Key(Enum):
    """Keys the game reacts to."""

    ESCAPE = auto()
    SPACE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    C = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    Q = auto()
    R = auto()
    T = auto()
    V = auto()
    X = auto()
    Z = auto()


@dataclass
class KeyManager:
    """Keys held this frame and last frame, for edge detection."""

    keys: frozenset[Hashable] = field(default_factory=frozenset)
    pre_keys: frozenset[Hashable] = field(default_factory=frozenset)

    def update(self, pressed: Iterable[Hashable]) -> None:
        """Start a new frame in which exactly the keys in ``pressed`` are held."""
        self.pre_keys = self.keys
        self.keys = frozenset(pressed)

    def is_just_pressed(self, key: Hashable) -> bool:
        """Return whether ``key`` went down this frame."""
        return key in self.keys and key not in self.pre_keys

    def is_pressed(self, key: Hashable) -> bool:
        """Return whether ``key`` is held this frame."""
        return key in self.keys

    def is_just_released(self, key: Hashable) -> bool:
        """Return whether ``key`` came up this frame."""
        return key not in self.keys and key in self.pre_keys

    def is_released(self, key: Hashable) -> bool:
        """Return whether ``key`` is not held this frame."""
        return key not in self.keys