"""Homogeneous 3D vectors."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .position import Position3

logger = logging.getLogger(__name__)


class Vec3:
    r"""A mutable homogeneous point or direction $\left(x, y, z, w\right)$.

    Points normally carry $w = 1$ and directions $w = 0$.
    The arithmetic methods (add, subtract, dot, cross, length, normalize) treat the vector as a standardized point
    and never divide by $w$; call :meth:`standardize` to complete a perspective divide.

    Parameters
    ----------
    x
        X coordinate
    y
        Y coordinate
    z
        Z coordinate
    w
        Homogeneous coordinate, optional
    """

    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @classmethod
    def from_array(cls, arr: Sequence[float] | None) -> Vec3:
        """Build a point from the first three entries of arr.

        If arr is None or holds fewer than three values, the origin is returned.
        """
        vec = cls()
        if arr is not None and len(arr) >= 3:
            vec.set(arr[0], arr[1], arr[2])
        return vec

    @classmethod
    def from_position(cls, position: Position3 | None) -> Vec3:
        """Build a point from the Cartesian coordinates of a :class:`Position3`."""
        vec = cls()
        if position is not None:
            vec.set(*position.get_cartesian_coords())
        return vec

    def copy(self) -> Vec3:
        return Vec3(self.x, self.y, self.z, self.w)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z and self.w == other.w

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vec3({self.x}, {self.y}, {self.z}, w={self.w})"

    def __str__(self) -> str:
        return f"{{ {self.x}, {self.y}, {self.z} : {self.w} }}"

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def set(self, x: float, y: float, z: float, w: float = 1.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    def set_vector(self, other: Vec3) -> None:
        """Copy all four components of other into this vector."""
        self.x = other.x
        self.y = other.y
        self.z = other.z
        self.w = other.w

    def get(self) -> tuple[float, float, float, float]:
        """Return a copy of the (x, y, z, w) components."""
        return (self.x, self.y, self.z, self.w)

    def add(self, other: Vec3) -> None:
        self.x += other.x
        self.y += other.y
        self.z += other.z

    def subtract(self, other: Vec3) -> None:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z

    def scalar_add(self, scalar: float) -> None:
        """Add scalar to each of x, y and z."""
        self.x += scalar
        self.y += scalar
        self.z += scalar

    def scalar_multiply(self, scalar: float) -> None:
        """Multiply each of x, y and z by scalar."""
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: Vec3) -> float:
        """Return the Euclidean distance between this point and other."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def normalize(self) -> None:
        """Scale to unit length. A zero-length vector is left unchanged."""
        length = self.length()
        if length != 0.0:
            self.x /= length
            self.y /= length
            self.z /= length
            self.w = 1.0

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, a: Vec3, b: Vec3 | None = None) -> None:
        r"""Set this vector to a cross product.

        Parameters
        ----------
        a
            First vector. If `b` is omitted, this vector becomes $\vec{self} \times \vec{a}$.
        b
            Second vector, optional. If given, this vector becomes $\vec{a} \times \vec{b}$.

        Notes
        -----
        Either argument may be this vector itself; the result is built in temporaries first.
        """
        if b is None:
            a, b = self, a
        t0 = a.y * b.z - a.z * b.y
        t1 = -a.x * b.z + a.z * b.x
        t2 = a.x * b.y - a.y * b.x
        self.x = t0
        self.y = t1
        self.z = t2
        self.w = 1.0

    def average(self, vectors: Sequence[Vec3] | None) -> None:
        """Set this vector to the component-wise average of vectors.

        An empty or missing list resets the vector to the origin.
        """
        if not vectors:
            logger.warning("Average of empty list of vectors, using the origin")
            self.set(0.0, 0.0, 0.0)
            return

        n_vectors = len(vectors)
        x_tot = sum(vec.x for vec in vectors)
        y_tot = sum(vec.y for vec in vectors)
        z_tot = sum(vec.z for vec in vectors)
        self.x = x_tot / n_vectors
        self.y = y_tot / n_vectors
        self.z = z_tot / n_vectors

    def linear_combination(self, coeffs: Sequence[float] | None, vectors: Sequence[Vec3] | None) -> None:
        r"""Set this vector to $\sum_i c_i \vec{V_i}$.

        Only the first ``min(len(coeffs), len(vectors))`` pairs are combined.
        """
        if coeffs is None or vectors is None:
            logger.error(f"Missing array in linear combination: {coeffs}, {vectors}")
            return

        self.set(0.0, 0.0, 0.0)
        for coeff, vec in zip(coeffs, vectors):
            self.x += coeff * vec.x
            self.y += coeff * vec.y
            self.z += coeff * vec.z

    def standardize(self) -> None:
        """Divide x, y, z by w and reset w to 1. A direction (w == 0) is left unchanged."""
        if self.w == 0.0:
            logger.error(f"Cannot standardize {self}, w is zero")
            return
        self.x /= self.w
        self.y /= self.w
        self.z /= self.w
        self.w = 1.0
