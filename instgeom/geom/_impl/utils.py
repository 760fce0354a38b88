"""Rotation matrix helpers shared by the transform and Euler-angle code."""

import jax
import jax.numpy as jnp
from jax.scipy.spatial.transform import Rotation as jR
from jaxtyping import Array, Float


@jax.jit
def rmat_from_axis_angle(axis: Float[Array, "3"], angle: float) -> Float[Array, "3 3"]:
    r"""Return rotation matrix for positive right-handed rotation about axis by angle (degrees).

    Parameters
    ----------
    axis
        [3] Rotation axis vector, need not be normalised. Must not be zero.
    angle
        Rotation angle in degrees

    Returns
    -------
    R: jax.Array
        [3,3] Rotation matrix

    Notes
    -----
    Equivalent to Rodrigues' formula, with $\hat{a} = (x, y, z)$, $s = \sin\theta$, $c = \cos\theta$:

    .. math::
        \matr{R} =
        \begin{bmatrix}
        x^2(1-c) + c  & xy(1-c) - zs  & xz(1-c) + ys \\
        yx(1-c) + zs  & y^2(1-c) + c  & yz(1-c) - xs \\
        zx(1-c) - ys  & zy(1-c) + xs  & z^2(1-c) + c
        \end{bmatrix}
    """
    # normalise axis
    axis = axis / jnp.linalg.norm(axis)
    R = jR.from_rotvec(angle * axis, degrees=True).as_matrix()
    return R


@jax.jit
def rot_x(angle: float) -> Float[Array, "3 3"]:
    """Return rotation matrix for positive right-handed rotation about the X axis by angle (degrees).

    Parameters
    ----------
    angle
        Rotation angle in degrees

    Returns
    -------
    R: jax.Array
        [3,3] Rotation matrix
    """
    axis = jnp.array([1.0, 0.0, 0.0])
    return rmat_from_axis_angle(axis, angle)


@jax.jit
def rot_z(angle: float) -> Float[Array, "3 3"]:
    """Return rotation matrix for positive right-handed rotation about the Z axis by angle (degrees).

    Parameters
    ----------
    angle
        Rotation angle in degrees

    Returns
    -------
    R: jax.Array
        [3,3] Rotation matrix

    Notes
    -----
    An example - with 90 degrees:
    Rz(90) @ (X,Y,Z) = (-Y,X,Z)

    This is the rotation used for the phi and omega circles of a goniometer.
    """
    axis = jnp.array([0.0, 0.0, 1.0])
    return rmat_from_axis_angle(axis, angle)
