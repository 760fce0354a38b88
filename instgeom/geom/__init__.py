"""Vectors, transforms, positions, Euler angles and planes for instrument geometry."""

from ._impl.constants import GIMBAL_LOCK_TOL, ROTATION_AXIS_TOL, VIEW_DIRECTION_TOL
from ._impl.euler import (
    euler_rotation_matrix,
    euler_rotation_matrix_inverse,
    get_euler_angles,
    make_euler_rotation,
    make_euler_rotation_inverse,
)
from ._impl.plane import Plane3
from ._impl.position import DetectorPosition, Position3
from ._impl.selector import (
    plane_from_normal,
    plane_from_points,
    slice_plane_from_normal,
    slice_plane_from_points,
)
from ._impl.slice_plane import SlicePlane3
from ._impl.transform import IDENTITY, Mat4, view_basis, view_matrix
from ._impl.utils import rmat_from_axis_angle, rot_x, rot_z
from ._impl.vector import Vec3
from ._impl.viewing import ViewingTran3

__all__ = [
    "GIMBAL_LOCK_TOL",
    "ROTATION_AXIS_TOL",
    "VIEW_DIRECTION_TOL",
    "euler_rotation_matrix",
    "euler_rotation_matrix_inverse",
    "get_euler_angles",
    "make_euler_rotation",
    "make_euler_rotation_inverse",
    "Plane3",
    "DetectorPosition",
    "Position3",
    "plane_from_normal",
    "plane_from_points",
    "slice_plane_from_normal",
    "slice_plane_from_points",
    "SlicePlane3",
    "IDENTITY",
    "Mat4",
    "view_basis",
    "view_matrix",
    "rmat_from_axis_angle",
    "rot_x",
    "rot_z",
    "Vec3",
    "ViewingTran3",
]
