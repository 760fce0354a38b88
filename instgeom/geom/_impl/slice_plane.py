"""Planes with their own local 2D coordinate frame, for taking slices through 3D data."""

from __future__ import annotations

import logging

from .vector import Vec3

logger = logging.getLogger(__name__)

_AXES = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


class SlicePlane3:
    """A plane through an origin point, spanned by orthonormal in-plane axes u and v.

    Every successful mutator leaves u and v orthonormal. The normal is always u x v and is
    recomputed on each call to :meth:`get_normal`. Mutators return False and leave the plane
    unchanged when given missing, zero or collinear vectors.

    Parameters
    ----------
    origin
        Point on the plane, optional. Defaults to (0, 0, 0).
    u
        First in-plane direction, optional
    v
        Second in-plane direction, optional. Only its component perpendicular to u is used.
        If u and v are not both given, or are degenerate, the plane is the XY plane.
    """

    def __init__(self, origin: Vec3 | None = None, u: Vec3 | None = None, v: Vec3 | None = None) -> None:
        self._origin = Vec3(0.0, 0.0, 0.0)
        self._u = Vec3(1.0, 0.0, 0.0)
        self._v = Vec3(0.0, 1.0, 0.0)
        if origin is not None:
            self.set_origin(origin)
        if u is not None or v is not None:
            self.set_u_and_v(u, v)

    def copy(self) -> SlicePlane3:
        return SlicePlane3(self._origin, self._u, self._v)

    def __repr__(self) -> str:
        return f"SlicePlane3(origin={self._origin!r}, u={self._u!r}, v={self._v!r})"

    def __str__(self) -> str:
        return f"Origin = {self._origin}\nu = {self._u}\nv = {self._v}"

    def get_origin(self) -> Vec3:
        return self._origin.copy()

    def get_u(self) -> Vec3:
        return self._u.copy()

    def get_v(self) -> Vec3:
        return self._v.copy()

    def get_normal(self) -> Vec3:
        normal = Vec3()
        normal.cross(self._u, self._v)
        normal.normalize()
        return normal

    def set_origin(self, origin: Vec3 | None) -> bool:
        if origin is None:
            logger.error("No origin specified for SlicePlane3")
            return False
        self._origin = origin.copy()
        return True

    def set_u_and_v(self, u: Vec3 | None, v: Vec3 | None) -> bool:
        """Set the in-plane axes to u and the part of v perpendicular to u, both normalised."""
        if u is None or v is None:
            logger.error(f"Missing vector in SlicePlane3.set_u_and_v: u = {u}, v = {v}")
            return False
        if u.length() == 0 or v.length() == 0:
            logger.error(f"Zero length vector in SlicePlane3.set_u_and_v: u = {u}, v = {v}")
            return False

        n = Vec3()
        n.cross(u, v)
        if n.length() == 0:
            logger.error(f"u and v are collinear in SlicePlane3.set_u_and_v: u = {u}, v = {v}")
            return False

        new_u = Vec3(u.x, u.y, u.z)
        new_u.normalize()
        n.normalize()
        new_v = Vec3()
        new_v.cross(n, new_u)

        self._u = new_u
        self._v = new_v
        return True

    def set_normal_and_u(self, normal: Vec3 | None, u: Vec3 | None) -> bool:
        """Set the plane normal, using the part of u perpendicular to it as the first in-plane axis."""
        if normal is None or u is None:
            logger.error(f"Missing vector in SlicePlane3.set_normal_and_u: normal = {normal}, u = {u}")
            return False
        if normal.length() == 0 or u.length() == 0:
            logger.error(f"Zero length vector in SlicePlane3.set_normal_and_u: normal = {normal}, u = {u}")
            return False

        temp = Vec3()
        temp.cross(normal, u)
        if temp.length() == 0:
            logger.error(f"u is parallel to the normal in SlicePlane3.set_normal_and_u: normal = {normal}, u = {u}")
            return False

        n = Vec3(normal.x, normal.y, normal.z)
        n.normalize()

        # remove the component of u along n
        new_u = Vec3(u.x, u.y, u.z)
        along_n = n.copy()
        along_n.scalar_multiply(u.dot(n))
        new_u.subtract(along_n)
        new_u.normalize()

        new_v = Vec3()
        new_v.cross(n, new_u)

        self._u = new_u
        self._v = new_v
        return True

    def set_normal(self, normal: Vec3 | None) -> bool:
        """Set the plane normal, choosing u from the coordinate axes.

        With k the axis having the largest |normal . axis|, u comes from axis (k+1) % 3 if
        normal . axis_k is positive and from axis (k+2) % 3 otherwise.
        """
        if normal is None or normal.length() == 0:
            logger.error(f"Missing or zero normal in SlicePlane3.set_normal: {normal}")
            return False

        axes = [Vec3(*axis) for axis in _AXES]
        dots = [normal.dot(axis) for axis in axes]
        max_index = 0
        for i in (1, 2):
            # first index wins ties
            if abs(dots[i]) > abs(dots[max_index]):
                max_index = i

        if dots[max_index] > 0:
            return self.set_normal_and_u(normal, axes[(max_index + 1) % 3])
        return self.set_normal_and_u(normal, axes[(max_index + 2) % 3])

    def set_plane(self, origin: Vec3 | None, pt1: Vec3 | None, pt2: Vec3 | None) -> bool:
        """Set the plane through three points, with u along pt1 - origin."""
        if origin is None or pt1 is None or pt2 is None:
            logger.error(f"Missing point in SlicePlane3.set_plane: {origin}, {pt1}, {pt2}")
            return False

        edge1 = pt1.copy()
        edge1.subtract(origin)
        if edge1.length() == 0:
            logger.error(f"pt1 {pt1} coincides with origin in SlicePlane3.set_plane")
            return False

        edge2 = pt2.copy()
        edge2.subtract(origin)
        if edge2.length() == 0:
            logger.error(f"pt2 {pt2} coincides with origin in SlicePlane3.set_plane")
            return False

        # logs if the points are collinear
        if not self.set_u_and_v(edge1, edge2):
            return False
        self._origin = origin.copy()
        return True
