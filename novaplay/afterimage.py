"""A short trail of past positions, drawn behind a moving object."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from novaplay.camera import Camera
from novaplay.gamebase import WINDOW_HEIGHT
from novaplay.structures import Vector2

MAX_HISTORY = 5
_RECORD_EVERY = 3
_ALPHA_STEP = 0.1


def _trail_color(alpha: float) -> int:
    """Return white with the given opacity packed as RGBA."""
    channel = min(255, max(0, int(alpha * 255)))
    return (0xFFFFFF << 8) | channel


@dataclass(frozen=True)
class AfterImageQuad:
    """One rectangular trail image in screen coordinates."""

    x: int
    y: int
    width: int
    height: int
    color: int

    @property
    def corners(self) -> tuple[tuple[int, int], ...]:
        """The four corners: left-top, right-top, left-bottom, right-bottom."""
        return (
            (self.x, self.y),
            (self.x + self.width, self.y),
            (self.x, self.y + self.height),
            (self.x + self.width, self.y + self.height),
        )


@dataclass(frozen=True)
class AfterImageCircle:
    """One circular trail image in screen coordinates."""

    x: int
    y: int
    radius: int
    color: int


@dataclass
class AfterImage:
    """Records every third position, newest first, and fades them out."""

    pos_history: deque[Vector2] = field(default_factory=lambda: deque(maxlen=MAX_HISTORY))
    frame_counter: int = 0
    past_pos: Vector2 = field(default_factory=Vector2)
    color_rgb: int = 0xFFFFFF
    color_alpha: float = 0.0
    scale: float = 1.0
    is_fading: bool = False
    fade_timer: float = 0.0

    max_history = MAX_HISTORY

    def update_position_history(self, new_pos: Vector2) -> None:
        """Count a frame and, every third frame, record ``new_pos`` at the front."""
        self.frame_counter += 1
        if self.frame_counter >= _RECORD_EVERY:
            self.pos_history.appendleft(new_pos.copy())
            self.frame_counter = 0

    def update_fade(self) -> None:
        """Set the trail opacity from the history length; stop when it reaches zero."""
        if not self.is_fading:
            return
        if self.pos_history:
            self.color_alpha = 1.0 - (len(self.pos_history) - 1) / MAX_HISTORY
        if self.color_alpha <= 0.0:
            self.is_fading = False

    def start_fading(self) -> None:
        """Begin fading and reset the fade timer."""
        self.is_fading = True
        self.fade_timer = 0.0

    def rect_instances(self, width: int, height: int, camera: Camera) -> list[AfterImageQuad]:
        """Return one quad per recorded position, offset by the camera, older ones fainter."""
        return [
            AfterImageQuad(
                x=int(pos.x - camera.pos.x),
                y=int(pos.y - camera.pos.y),
                width=width,
                height=height,
                color=_trail_color(self.color_alpha - index * _ALPHA_STEP),
            )
            for index, pos in enumerate(self.pos_history)
        ]

    def circle_instances(self, radius: int) -> list[AfterImageCircle]:
        """Return one circle per recorded position, with y flipped to screen space."""
        return [
            AfterImageCircle(
                x=int(pos.x),
                y=WINDOW_HEIGHT - int(pos.y),
                radius=radius,
                color=_trail_color(self.color_alpha - index * _ALPHA_STEP),
            )
            for index, pos in enumerate(self.pos_history)
        ]