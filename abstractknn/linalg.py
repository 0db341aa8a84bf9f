"""Small fixed-size vectors, quaternions and column-major matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Union

__all__ = [
    "PI",
    "V2",
    "V3",
    "V4",
    "Quat",
    "M3",
    "M4",
    "radians_from_degrees",
    "lerp",
    "quat_from_rotation",
    "quat_mul",
    "quat_rotate",
    "m4_fill_diagonal",
    "m4_from_rotation",
    "m4_from_translation",
    "m4_look_at",
    "m4_perspective",
    "unproject",
]

PI = 3.14159265358979


def _roundf(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def radians_from_degrees(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * PI / 180.0


def lerp(a: float, b: float, amount: float) -> float:
    """Linear interpolation between two scalars."""
    return a + amount * (b - a)


@dataclass(frozen=True)
class V2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: V2) -> V2:
        return V2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: V2) -> V2:
        return V2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Union[V2, float]) -> V2:
        if isinstance(other, V2):
            return V2(self.x * other.x, self.y * other.y)
        return V2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[V2, float]) -> V2:
        if isinstance(other, V2):
            return V2(self.x / other.x, self.y / other.y)
        return V2(self.x / other, self.y / other)

    def __neg__(self) -> V2:
        return V2(-self.x, -self.y)

    def dot(self, other: V2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> V2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return V2()
        return V2(self.x / length, self.y / length)

    def rotate(self, angle: float) -> V2:
        """Rotate counter-clockwise by an angle in radians."""
        s, c = math.sin(angle), math.cos(angle)
        return V2(self.x * c - self.y * s, self.x * s + self.y * c)

    def lerp(self, other: V2, amount: float) -> V2:
        """Linear interpolation towards another vector."""
        return self + (other - self) * amount

    def round(self) -> V2:
        """Round each component half away from zero."""
        return V2(_roundf(self.x), _roundf(self.y))

    def round_down(self) -> V2:
        """Round each component after subtracting one half."""
        return (self - V2(0.5, 0.5)).round()

    def max(self, other: V2) -> V2:
        """Component-wise maximum."""
        return V2(max(self.x, other.x), max(self.y, other.y))

    def min(self, other: V2) -> V2:
        """Component-wise minimum."""
        return V2(min(self.x, other.x), min(self.y, other.y))

    def reciprocal(self) -> V2:
        """Component-wise reciprocal."""
        return V2(1.0 / self.x, 1.0 / self.y)


@dataclass(frozen=True)
class V3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: V3) -> V3:
        return V3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: V3) -> V3:
        return V3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale: float) -> V3:
        return V3(self.x * scale, self.y * scale, self.z * scale)

    __rmul__ = __mul__

    def __neg__(self) -> V3:
        return V3(-self.x, -self.y, -self.z)

    def cross(self, other: V3) -> V3:
        """Cross product."""
        return V3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: V3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> V3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return V3()
        return V3(self.x / length, self.y / length, self.z / length)

    def lerp(self, other: V3, amount: float) -> V3:
        """Linear interpolation towards another vector."""
        return self + (other - self) * amount


@dataclass(frozen=True)
class V4:
    """A four-component vector, also used as a quaternion."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_v3(cls, xyz: V3, w: float) -> V4:
        """Extend a three-component vector with a w component."""
        return cls(xyz.x, xyz.y, xyz.z, w)

    @property
    def xyz(self) -> V3:
        return V3(self.x, self.y, self.z)

    def __add__(self, other: V4) -> V4:
        return V4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: V4) -> V4:
        return V4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scale: float) -> V4:
        return V4(self.x * scale, self.y * scale, self.z * scale, self.w * scale)

    __rmul__ = __mul__

    def dot(self, other: V4) -> float:
        """Dot product."""
        return self.xyz.dot(other.xyz) + self.w * other.w

    def lerp(self, other: V4, amount: float) -> V4:
        """Linear interpolation towards another vector."""
        return self + (other - self) * amount

    def round(self) -> V4:
        """Round each component half away from zero."""
        return V4(_roundf(self.x), _roundf(self.y), _roundf(self.z), _roundf(self.w))


Quat = V4


def quat_from_rotation(axis: V3, angle: float) -> V4:
    """Quaternion rotating by an angle in radians about an axis."""
    half = angle / 2.0
    s = math.sin(half)
    return V4(axis.x * s, axis.y * s, axis.z * s, math.cos(half))


def quat_mul(a: V4, b: V4) -> V4:
    """Hamilton product of two quaternions."""
    return V4(
        a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
        a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
        a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
    )


def quat_rotate(q: V4, v: V3) -> V3:
    """Rotate a vector by a unit quaternion."""
    qv = V4.from_v3(v, 0.0)
    conjugate = V4(-q.x, -q.y, -q.z, q.w)
    return quat_mul(quat_mul(q, qv), conjugate).xyz


def _matrix(items: Sequence[Sequence[float]], size: int) -> tuple:
    rows = tuple(tuple(float(value) for value in column) for column in items)
    if len(rows) != size or any(len(column) != size for column in rows):
        raise ValueError(f"expected a {size}x{size} matrix")
    return rows


@dataclass(frozen=True)
class M3:
    """A 3x3 matrix stored as items[column][row]."""

    items: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _matrix(self.items, 3))

    def mul_vector(self, v: V3) -> V3:
        """Dot the vector with each stored column in turn."""
        return V3(*(v.dot(V3(*column)) for column in self.items))


@dataclass(frozen=True)
class M4:
    """A 4x4 matrix stored as items[column][row]."""

    items: tuple

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _matrix(self.items, 4))

    @classmethod
    def from_columns(cls, columns: Sequence[V4]) -> M4:
        """Build a matrix from four column vectors."""
        return cls(tuple((c.x, c.y, c.z, c.w) for c in columns))

    @property
    def columns(self) -> tuple:
        return tuple(V4(*column) for column in self.items)

    def transpose(self) -> M4:
        """Swap rows and columns."""
        return M4(tuple(zip(*self.items)))

    def inverse(self) -> M4:
        """Inverse matrix; raises ValueError when the matrix is singular."""
        c0, c1, c2, c3 = self.columns
        cross_0_1 = c0.xyz.cross(c1.xyz)
        cross_2_3 = c2.xyz.cross(c3.xyz)
        sub_1_0 = c0.xyz * c1.w - c1.xyz * c0.w
        sub_3_2 = c2.xyz * c3.w - c3.xyz * c2.w

        determinant = cross_0_1.dot(sub_3_2) + cross_2_3.dot(sub_1_0)
        if determinant == 0:
            raise ValueError("matrix is singular")
        inv_det = 1.0 / determinant
        cross_0_1 = cross_0_1 * inv_det
        cross_2_3 = cross_2_3 * inv_det
        sub_1_0 = sub_1_0 * inv_det
        sub_3_2 = sub_3_2 * inv_det

        return M4.from_columns((
            V4.from_v3(c1.xyz.cross(sub_3_2) + cross_2_3 * c1.w, -c1.xyz.dot(cross_2_3)),
            V4.from_v3(sub_3_2.cross(c0.xyz) - cross_2_3 * c0.w, c0.xyz.dot(cross_2_3)),
            V4.from_v3(c3.xyz.cross(sub_1_0) + cross_0_1 * c3.w, -c3.xyz.dot(cross_0_1)),
            V4.from_v3(sub_1_0.cross(c2.xyz) - cross_0_1 * c2.w, c2.xyz.dot(cross_0_1)),
        )).transpose()

    def mul_vector(self, v: V4) -> V4:
        """Dot the vector with each stored column in turn."""
        return V4(*(v.dot(column) for column in self.columns))

    def __matmul__(self, other: M4) -> M4:
        if not isinstance(other, M4):
            return NotImplemented
        return M4(tuple(
            tuple(
                sum(self.items[pos][row] * other.items[col][pos] for pos in range(4))
                for row in range(4)
            )
            for col in range(4)
        ))

    def forward(self) -> V3:
        """Forward direction of a view matrix."""
        return V3(-self.items[0][2], -self.items[1][2], -self.items[2][2])

    def right(self) -> V3:
        """Right direction of a view matrix."""
        return V3(self.items[0][0], self.items[1][0], self.items[2][0])

    def up(self) -> V3:
        """Up direction of a view matrix."""
        return V3(self.items[0][1], self.items[1][1], self.items[2][1])


def m4_fill_diagonal(value: float) -> M4:
    """Matrix with the given value on the diagonal and zeros elsewhere."""
    return M4(tuple(
        tuple(value if row == col else 0.0 for row in range(4)) for col in range(4)
    ))


def m4_from_rotation(axis: V3, angle: float) -> M4:
    """Rotation matrix about an axis (normalised here) by an angle in radians."""
    a = axis.normalized()
    s, c = math.sin(angle), math.cos(angle)
    k = 1.0 - c
    return M4((
        (a.x * a.x * k + c, a.x * a.y * k + a.z * s, a.x * a.z * k - a.y * s, 0.0),
        (a.y * a.x * k - a.z * s, a.y * a.y * k + c, a.y * a.z * k + a.x * s, 0.0),
        (a.z * a.x * k + a.y * s, a.z * a.y * k - a.x * s, a.z * a.z * k + c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    ))


def m4_from_translation(translation: V3) -> M4:
    """Identity matrix with the translation in its last column."""
    items = [list(column) for column in m4_fill_diagonal(1.0).items]
    items[3][0:3] = [translation.x, translation.y, translation.z]
    return M4(items)


def m4_look_at(eye: V3, centre: V3, up: V3) -> M4:
    """Right-handed view matrix looking from eye towards centre."""
    forward = (centre - eye).normalized()
    right = forward.cross(up).normalized()
    true_up = right.cross(forward)
    return M4((
        (right.x, true_up.x, -forward.x, 0.0),
        (right.y, true_up.y, -forward.y, 0.0),
        (right.z, true_up.z, -forward.z, 0.0),
        (-right.dot(eye), -true_up.dot(eye), forward.dot(eye), 1.0),
    ))


def m4_perspective(fov_vertical: float, aspect: float, near: float, far: float) -> M4:
    """Perspective projection for a vertical field of view in radians."""
    cot = 1.0 / math.tan(fov_vertical / 2.0)
    return M4((
        (cot / aspect, 0.0, 0.0, 0.0),
        (0.0, cot, 0.0, 0.0),
        (0.0, 0.0, (near + far) / (near - far), -1.0),
        (0.0, 0.0, (2.0 * near * far) / (near - far), 0.0),
    ))


def unproject(position: V3, view_projection: M4) -> V3:
    """Map a position back through the inverse of a view-projection matrix."""
    transformed = view_projection.inverse().mul_vector(V4.from_v3(position, 1.0))
    return transformed.xyz * (1.0 / transformed.w)