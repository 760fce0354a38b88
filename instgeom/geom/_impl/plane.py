"""Infinite planes in 3D."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import jax.numpy as jnp

from .vector import Vec3

logger = logging.getLogger(__name__)


class Plane3:
    r"""An infinite plane $\left\{ \vec{p} : \hat{n} \cdot \vec{p} = c \right\}$.

    The normal is always kept at unit length, so $c$ is the signed distance of the plane from the origin.
    The default is the XY plane through the origin.
    """

    def __init__(self) -> None:
        self._normal = Vec3(0.0, 0.0, 1.0)
        self._distance = 0.0

    def copy(self) -> Plane3:
        plane = Plane3()
        plane._normal = self._normal.copy()
        plane._distance = self._distance
        return plane

    def __repr__(self) -> str:
        return f"Plane3(normal={self._normal!r}, distance={self._distance})"

    def __str__(self) -> str:
        return f"{self._normal}, distance = {self._distance}"

    def get_normal(self) -> Vec3:
        return self._normal.copy()

    def get_distance(self) -> float:
        """Return c, the signed distance of the plane from the origin along the normal."""
        return self._distance

    def set(self, normal: Vec3 | None, c: float) -> bool:
        r"""Set the plane to $\vec{n} \cdot \vec{p} = c$.

        If normal is not of unit length, both normal and c are divided by its length,
        so the same set of points is described.

        Returns False and leaves the plane unchanged if normal is missing or zero.
        """
        if not self.set_normal(normal):
            return False
        self._distance = c / normal.length()
        return True

    def set_points(self, origin: Vec3 | None, pt1: Vec3 | None, pt2: Vec3 | None) -> bool:
        """Set the plane through three points.

        The normal is (pt1 - origin) x (pt2 - origin), normalised.
        Returns False and leaves the plane unchanged if a point is missing, coincides with origin,
        or the three points are collinear.
        """
        if origin is None or pt1 is None or pt2 is None:
            logger.error(f"Missing point in Plane3.set_points: {origin}, {pt1}, {pt2}")
            return False

        edge1 = pt1.copy()
        edge1.subtract(origin)
        if edge1.length() == 0:
            logger.error(f"pt1 {pt1} coincides with origin in Plane3.set_points")
            return False

        edge2 = pt2.copy()
        edge2.subtract(origin)
        if edge2.length() == 0:
            logger.error(f"pt2 {pt2} coincides with origin in Plane3.set_points")
            return False

        n = Vec3()
        n.cross(edge1, edge2)
        length = n.length()
        if length == 0:
            logger.error(f"Collinear points in Plane3.set_points: {origin}, {pt1}, {pt2}")
            return False

        n.scalar_multiply(1 / length)
        self._normal = n
        self._distance = n.dot(origin)
        return True

    def set_normal(self, normal: Vec3 | None) -> bool:
        """Set the direction of the normal, keeping c.

        Returns False and leaves the plane unchanged if normal is missing or zero.
        """
        if normal is None:
            logger.error("No normal specified for Plane3")
            return False
        length = normal.length()
        if length == 0:
            logger.error("Zero length normal specified for Plane3")
            return False

        self._normal = Vec3(normal.x, normal.y, normal.z)
        if length != 1:
            self._normal.scalar_multiply(1 / length)
        return True

    def set_distance(self, c: float) -> None:
        """Set c, keeping the normal."""
        self._distance = float(c)

    def distance_to(self, point: Vec3 | None) -> float:
        """Return the signed distance from the plane to point, positive on the side the normal points to.

        Returns NaN if point is missing.
        """
        if point is None:
            return math.nan
        return point.dot(self._normal) - self._distance

    def fit(self, points: Sequence[Vec3] | None) -> float:
        """Set this plane to the least squares fit through points.

        Parameters
        ----------
        points
            At least three points

        Returns
        -------
        float
            Square root of the sum of squared distances of the points from the fitted plane.
            NaN if there are fewer than three points, in which case the plane is unchanged.

        Notes
        -----
        The points are shifted so their average is at the origin, and the normal is the right
        singular vector of the shifted (N,3) coordinates that belongs to the smallest singular value.
        """
        if points is None or len(points) < 3:
            logger.error("Not enough points specified in Plane3.fit")
            return math.nan
        if any(point is None for point in points):
            logger.error("Missing point in Plane3.fit")
            return math.nan

        average_pt = Vec3()
        average_pt.average(points)

        shifted = jnp.array(
            [[pt.x - average_pt.x, pt.y - average_pt.y, pt.z - average_pt.z] for pt in points]
        )
        # singular values come back in descending order
        _, _, vh = jnp.linalg.svd(shifted, full_matrices=False)

        n = Vec3.from_array([float(val) for val in vh[-1]])
        n.normalize()
        self._normal = n
        self._distance = n.dot(average_pt)

        err_sq = 0.0
        for pt in points:
            d = self.distance_to(pt)
            err_sq += d * d
        return math.sqrt(err_sq)
