"""Plain value types shared by the game objects: vectors, matrices and rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vector2:
    """A 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Vector2:
        """Return an independent copy of this vector."""
        return Vector2(self.x, self.y)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class IntVector2:
    """A 2D vector of integers."""

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y


def _zero_rows() -> list[list[float]]:
    return [[0.0, 0.0, 0.0] for _ in range(3)]


@dataclass
class Matrix3x3:
    """A 3x3 matrix stored row by row in ``m``."""

    m: list[list[float]] = field(default_factory=_zero_rows)

    @staticmethod
    def identity() -> Matrix3x3:
        """Return the identity matrix."""
        return Matrix3x3(
            [
                [1.0, 0.0, 0.0],
                [0.0, 1.0, 0.0],
                [0.0, 0.0, 1.0],
            ]
        )


@dataclass
class Vertex:
    """The four corners of a quad: left/right, top/bottom."""

    lt: Vector2 = field(default_factory=lambda: Vector2(-10.0, 10.0))
    lb: Vector2 = field(default_factory=lambda: Vector2(-10.0, -10.0))
    rt: Vector2 = field(default_factory=lambda: Vector2(10.0, 10.0))
    rb: Vector2 = field(default_factory=lambda: Vector2(10.0, -10.0))

    @staticmethod
    def centered(width: float, height: float) -> Vertex:
        """Return the corners of a ``width`` x ``height`` quad centred on the origin."""
        half_w = width / 2
        half_h = height / 2
        return Vertex(
            lt=Vector2(-half_w, half_h),
            lb=Vector2(-half_w, -half_h),
            rt=Vector2(half_w, half_h),
            rb=Vector2(half_w, -half_h),
        )


@dataclass
class VertexOnMap:
    """The four corners of a quad expressed as map-chip indices."""

    lt: IntVector2 = field(default_factory=IntVector2)
    lb: IntVector2 = field(default_factory=IntVector2)
    rt: IntVector2 = field(default_factory=IntVector2)
    rb: IntVector2 = field(default_factory=IntVector2)


@dataclass
class RectangleObject:
    """A rectangle with world, screen and drawing geometry plus shake state."""

    pos: Vector2 = field(default_factory=Vector2)
    pre_pos: Vector2 = field(default_factory=Vector2)
    next_pos: Vector2 = field(default_factory=Vector2)
    radius: Vector2 = field(default_factory=Vector2)
    color: int = 0x000000FF

    w_pos: Vector2 = field(default_factory=Vector2)
    pre_w_pos: Vector2 = field(default_factory=Vector2)
    w_pos_current_chip_no: IntVector2 = field(default_factory=IntVector2)

    s_pos: Vector2 = field(default_factory=Vector2)
    draw_pos: Vector2 = field(default_factory=Vector2)

    w_vertex: Vertex = field(default_factory=Vertex)
    s_vertex: Vertex = field(default_factory=Vertex)
    s_draw_vertex: Vertex = field(default_factory=Vertex)
    pre_vertex: Vertex = field(default_factory=Vertex)

    current_chip_no: VertexOnMap = field(default_factory=VertexOnMap)
    pre_chip_no: VertexOnMap = field(default_factory=VertexOnMap)

    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    theta: float = 0.0
    width: float = 40.0
    height: float = 40.0

    shaking_pos: IntVector2 = field(default_factory=IntVector2)
    is_shake: bool = False
    shake_duration: int = 20
    shake_counter: int = 0
    magnitude: int = 15


@dataclass
class Knockback:
    """State of a knockback push applied to an object."""

    dir: Vector2 = field(default_factory=Vector2)
    normalized_dir: Vector2 = field(default_factory=Vector2)
    strength: float = 10.0
    is_knockback: bool = False
    is_knockbacked: bool = False
    frame_count: int = 0