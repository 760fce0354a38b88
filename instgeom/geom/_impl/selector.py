"""Factory functions returning a plane, or None when the inputs do not define one.

Plane-valued controls report "no valid plane" with None rather than raising, and these are
the functions they build their planes with.
"""

from __future__ import annotations

from .plane import Plane3
from .slice_plane import SlicePlane3
from .vector import Vec3


def plane_from_normal(normal: Vec3 | None, distance: float) -> Plane3 | None:
    """Return the plane normal . p = distance, or None if normal is missing or zero."""
    plane = Plane3()
    if not plane.set(normal, distance):
        return None
    return plane


def plane_from_points(origin: Vec3 | None, pt1: Vec3 | None, pt2: Vec3 | None) -> Plane3 | None:
    """Return the plane through three points, or None if they do not span a plane."""
    plane = Plane3()
    if not plane.set_points(origin, pt1, pt2):
        return None
    return plane


def slice_plane_from_points(origin: Vec3 | None, pt1: Vec3 | None, pt2: Vec3 | None) -> SlicePlane3 | None:
    """Return the slice plane at origin with u towards pt1, or None if the points do not span a plane."""
    plane = SlicePlane3()
    if not plane.set_plane(origin, pt1, pt2):
        return None
    return plane


def slice_plane_from_normal(origin: Vec3 | None, normal: Vec3 | None) -> SlicePlane3 | None:
    """Return the slice plane at origin with the given normal, or None if either is missing or normal is zero."""
    plane = SlicePlane3()
    if not plane.set_origin(origin) or not plane.set_normal(normal):
        return None
    return plane
