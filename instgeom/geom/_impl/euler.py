r"""Conversions between goniometer Euler angles (phi, chi, omega) and orientations.

All angles are in degrees. The rotation is phi about z, then chi about x, then omega about z:

$$\matr{R} = \matr{R_z}(\omega) \cdot \matr{R_x}(\chi) \cdot \matr{R_z}(\phi)$$
"""

import logging
import math

import jax
from jaxtyping import Array, Float

from .constants import GIMBAL_LOCK_TOL
from .transform import Mat4
from .utils import rot_x, rot_z
from .vector import Vec3

logger = logging.getLogger(__name__)

_I_VEC = (1.0, 0.0, 0.0)
_K_VEC = (0.0, 0.0, 1.0)


def get_euler_angles(u: Vec3, v: Vec3) -> tuple[float, float, float]:
    r"""Return the Euler angles (phi, chi, omega) that rotate the x and y axes onto u and v.

    Parameters
    ----------
    u
        Direction that the x axis is rotated onto
    v
        Direction in the plane of the rotated x and y axes. It need not be perpendicular to u;
        only its component perpendicular to u is used.

    Returns
    -------
    tuple[float, float, float]
        (phi, chi, omega) in degrees. (0, 0, 0) if u or v is zero, or if they are collinear.

    Notes
    -----
    With $\hat{n} = \hat{u} \times \hat{v}$ and $\hat{v}$ re-orthogonalised as $\hat{n} \times \hat{u}$:

    $\phi = \operatorname{atan2}(u_z, v_z)$, $\chi = \arccos(n_z)$, $\omega = \operatorname{atan2}(n_x, -n_y)$

    When $n_z$ is within 1e-15 of $\pm 1$, chi is 0 or 180 degrees, phi and omega are about the same axis,
    and the whole rotation is given to phi with omega = 0.

    u and v are not modified.
    """
    if u.length() == 0 or v.length() == 0:
        logger.error(f"Zero length u or v in get_euler_angles(): u = {u}, v = {v}")
        return (0.0, 0.0, 0.0)

    u = u.copy()
    v = v.copy()
    u.normalize()
    v.normalize()
    n = Vec3()
    n.cross(u, v)
    if n.length() == 0:
        logger.error(f"u and v are collinear in get_euler_angles(): u = {u}, v = {v}")
        return (0.0, 0.0, 0.0)

    n.normalize()
    v.cross(n, u)

    if n.z >= GIMBAL_LOCK_TOL:  # chi == 0, just a rotation about z
        phi = math.atan2(u.y, u.x)
        chi = 0.0
        omega = 0.0
    elif n.z <= -GIMBAL_LOCK_TOL:  # chi == 180
        phi = -math.atan2(u.y, u.x)
        chi = math.pi
        omega = 0.0
    else:
        phi = math.atan2(u.z, v.z)
        chi = math.acos(n.z)
        omega = math.atan2(n.x, -n.y)

    return (math.degrees(phi), math.degrees(chi), math.degrees(omega))


def make_euler_rotation(phi: float, chi: float, omega: float) -> Mat4:
    """Return the Euler rotation as a :class:`Mat4`.

    Parameters
    ----------
    phi
        Rotation about z, applied first (degrees)
    chi
        Rotation about x, applied second (degrees)
    omega
        Rotation about z, applied last (degrees)

    Returns
    -------
    Mat4
        omegaR @ chiR @ phiR
    """
    phi_rot = Mat4()
    chi_rot = Mat4()
    omega_rot = Mat4()
    phi_rot.set_rotation(phi, Vec3(*_K_VEC))
    chi_rot.set_rotation(chi, Vec3(*_I_VEC))
    omega_rot.set_rotation(omega, Vec3(*_K_VEC))

    # applied to a vector, the rightmost (phi) acts first
    omega_rot.multiply_by(chi_rot)
    omega_rot.multiply_by(phi_rot)
    return omega_rot


def make_euler_rotation_inverse(phi: float, chi: float, omega: float) -> Mat4:
    """Return the inverse of :func:`make_euler_rotation` as a :class:`Mat4`."""
    inverse = make_euler_rotation(phi, chi, omega)
    # rotations are orthogonal
    inverse.transpose()
    return inverse


@jax.jit
def euler_rotation_matrix(phi: float, chi: float, omega: float) -> Float[Array, "3 3"]:
    r"""Return the [3,3] Euler rotation matrix.

    Parameters
    ----------
    phi
        Rotation about z, applied first (degrees)
    chi
        Rotation about x, applied second (degrees)
    omega
        Rotation about z, applied last (degrees)

    Returns
    -------
    R: jax.Array
        [3,3] Rotation matrix $\matr{R_z}(\omega) \cdot \matr{R_x}(\chi) \cdot \matr{R_z}(\phi)$
    """
    return rot_z(omega) @ rot_x(chi) @ rot_z(phi)


@jax.jit
def euler_rotation_matrix_inverse(phi: float, chi: float, omega: float) -> Float[Array, "3 3"]:
    """Return the inverse (transpose) of :func:`euler_rotation_matrix`."""
    return euler_rotation_matrix(phi, chi, omega).T
