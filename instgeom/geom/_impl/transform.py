"""4x4 homogeneous transformation matrices."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import jax.numpy as jnp
import numpy as np

from .constants import ROTATION_AXIS_TOL, VIEW_DIRECTION_TOL
from .utils import rmat_from_axis_angle
from .vector import Vec3

logger = logging.getLogger(__name__)

# fmt: off
IDENTITY: tuple[tuple[float, ...], ...] = ((1.0, 0.0, 0.0, 0.0),
                                           (0.0, 1.0, 0.0, 0.0),
                                           (0.0, 0.0, 1.0, 0.0),
                                           (0.0, 0.0, 0.0, 1.0))
# fmt: on


def view_basis(cop: Vec3, vrp: Vec3, vuv: Vec3) -> tuple[Vec3, Vec3, Vec3] | None:
    r"""Return the orthonormal camera basis (u, v, n) for a viewing transform.

    Parameters
    ----------
    cop
        Center of projection (observer position)
    vrp
        View reference point (the point looked at)
    vuv
        View up vector

    Returns
    -------
    tuple[Vec3, Vec3, Vec3] | None
        The local "x" axis u, "y" axis v and the unit vector n pointing from vrp back towards cop.
        None if |cop - vrp| or |vuv x n| is below VIEW_DIRECTION_TOL.

    Notes
    -----
    $\hat{n} = \frac{cop - vrp}{\abs{cop - vrp}}$, $\hat{u} = \frac{vuv \times n}{\abs{vuv \times n}}$, $\hat{v} = \hat{n} \times \hat{u}$
    """
    n = cop.copy()
    n.subtract(vrp)
    if n.length() < VIEW_DIRECTION_TOL:
        logger.error(f"cop {cop} and vrp {vrp} coincide, no view direction")
        return None
    n.normalize()

    u = Vec3()
    u.cross(vuv, n)
    if u.length() < VIEW_DIRECTION_TOL:
        logger.error(f"View direction {n} and view up vector {vuv} are collinear")
        return None
    u.normalize()

    v = Vec3()
    v.cross(n, u)
    return u, v, n


def view_matrix(u: Vec3, v: Vec3, n: Vec3, cop: Vec3, vrp: Vec3, perspective: bool) -> np.ndarray:
    """Return the [4,4] viewing matrix for a camera basis from :func:`view_basis`.

    The rows of the rotation part are u, v and n and the translation moves vrp to the origin.
    With perspective, the result is left-multiplied by a projection matrix with -1/|cop - vrp| in row 3, column 2;
    transformed points must then be standardized to complete the divide.
    """
    a = np.identity(4)
    a[0, :3] = (u.x, u.y, u.z)
    a[1, :3] = (v.x, v.y, v.z)
    a[2, :3] = (n.x, n.y, n.z)
    a[0, 3] = -u.dot(vrp)
    a[1, 3] = -v.dot(vrp)
    a[2, 3] = -n.dot(vrp)

    if perspective:
        distance = cop.copy()
        distance.subtract(vrp)
        perspec = np.identity(4)
        perspec[3, 2] = -1.0 / distance.length()
        a = perspec @ a
    return a


class Mat4:
    """A mutable 4x4 transformation acting on homogeneous :class:`Vec3` points.

    Composition is right-multiplication: after ``A.multiply_by(B)``, applying A to a vector applies B first.
    Nothing enforces orthogonality or invertibility.

    Parameters
    ----------
    matrix
        Initial [4,4] values (another Mat4 or nested sequence), optional. Defaults to the identity.
    """

    def __init__(self, matrix: Mat4 | Sequence[Sequence[float]] | None = None) -> None:
        self._a = np.array(IDENTITY)
        if matrix is not None:
            self.set(matrix)

    def copy(self) -> Mat4:
        return Mat4(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return bool(np.array_equal(self._a, other._a))

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._a.tolist()})"

    def __str__(self) -> str:
        rows = [", ".join(str(val) for val in row) for row in self._a]
        return "{ " + "\n  ".join(rows) + " }"

    def get(self) -> np.ndarray:
        """Return a copy of the [4,4] matrix."""
        return self._a.copy()

    def set(self, matrix: Mat4 | Sequence[Sequence[float]]) -> bool:
        """Copy the values from another Mat4 or a nested sequence with at least 4 rows and 4 columns.

        Returns False and leaves this matrix unchanged if there are too few rows or columns.
        """
        if isinstance(matrix, Mat4):
            self._a = matrix._a.copy()
            return True

        if matrix is None or len(matrix) < 4:
            logger.error("Too few rows in matrix for Mat4.set()")
            return False
        for row in matrix[:4]:
            if len(row) < 4:
                logger.error("Too few columns in matrix for Mat4.set()")
                return False

        self._a = np.array([[float(val) for val in row[:4]] for row in matrix[:4]])
        return True

    def set_identity(self) -> None:
        self._a = np.array(IDENTITY)

    def set_translation(self, v: Vec3) -> None:
        """Set this matrix to a translation by (v.x, v.y, v.z)."""
        self.set_identity()
        self._a[:3, 3] = (v.x, v.y, v.z)

    def set_scale(self, v: Vec3) -> None:
        """Set this matrix to a scaling by v.x, v.y, v.z along the coordinate axes."""
        self.set_identity()
        self._a[0, 0] = v.x
        self._a[1, 1] = v.y
        self._a[2, 2] = v.z

    def set_rotation(self, angle: float, axis: Vec3) -> bool:
        """Set this matrix to a right-handed rotation by angle (degrees) about axis.

        Parameters
        ----------
        angle
            Rotation angle in degrees
        axis
            Rotation axis, need not be normalised

        Returns
        -------
        bool
            False if the axis is essentially zero, in which case the matrix is set to the identity.
        """
        if axis.length() < ROTATION_AXIS_TOL:
            logger.error(f"Rotation axis {axis} is essentially zero, using the identity")
            self.set_identity()
            return False

        R = rmat_from_axis_angle(jnp.array([axis.x, axis.y, axis.z]), angle)
        self.set_identity()
        self._a[:3, :3] = np.asarray(R)
        return True

    def set_orientation(self, base: Vec3, up: Vec3, point: Vec3) -> None:
        """Set this matrix to move the standard basis onto (base, up, base x up) placed at point.

        base and up should be orthonormal for the result to be a rigid motion.
        """
        self.set_translation(point)
        n = Vec3()
        n.cross(base, up)

        orient = Mat4()
        orient._a[:3, 0] = (base.x, base.y, base.z)
        orient._a[:3, 1] = (up.x, up.y, up.z)
        orient._a[:3, 2] = (n.x, n.y, n.z)
        self.multiply_by(orient)

    def set_view_matrix(self, cop: Vec3, vrp: Vec3, vuv: Vec3, perspective: bool) -> bool:
        """Set this matrix to the viewing transform for an observer at cop looking at vrp.

        Parameters
        ----------
        cop
            Center of projection
        vrp
            View reference point, mapped to the origin
        vuv
            View up vector, projects to the local +y direction
        perspective
            Whether to include the perspective projection

        Returns
        -------
        bool
            False if cop and vrp (nearly) coincide or the view direction is (nearly) parallel to vuv.
            The matrix is then set to the identity.

        See Also
        --------
        view_basis, view_matrix
        """
        basis = view_basis(cop, vrp, vuv)
        if basis is None:
            self.set_identity()
            return False
        u, v, n = basis
        self._a = view_matrix(u, v, n, cop, vrp, perspective)
        return True

    def multiply_by(self, other: Mat4) -> None:
        """Set this matrix to self @ other."""
        self._a = self._a @ other._a

    def apply_to(self, v1: Vec3, v2: Vec3 | None = None) -> None:
        """Transform v1 and store the result in v2 (v1 itself if v2 is omitted).

        v1 and v2 may be the same object. The result is not standardized.
        """
        if v2 is None:
            v2 = v1
        temp = self._a @ np.array(v1.get())
        v2.set(temp[0], temp[1], temp[2], temp[3])

    def apply_to_all(self, v1s: Sequence[Vec3] | None, v2s: Sequence[Vec3] | None = None) -> bool:
        """Transform each vector in v1s, storing the results in the matching entries of v2s.

        If v2s is omitted the vectors are transformed in place.
        Returns False if v1s is missing or v2s is shorter than v1s.
        """
        if v2s is None:
            v2s = v1s
        if v1s is None or len(v1s) > len(v2s):
            logger.error("Invalid arrays in Mat4.apply_to_all()")
            return False

        for v1, v2 in zip(v1s, v2s):
            self.apply_to(v1, v2)
        return True

    def transpose(self) -> None:
        self._a = self._a.T.copy()

    def invert(self) -> bool:
        """Replace this matrix with its inverse.

        Returns False and leaves the matrix unchanged if it is singular.
        """
        a = jnp.asarray(self._a)
        if int(jnp.linalg.matrix_rank(a)) < 4:
            logger.error("Singular matrix can not be inverted")
            return False

        inverse = jnp.linalg.inv(a)
        if not bool(jnp.all(jnp.isfinite(inverse))):
            logger.error("Matrix inverse is not finite")
            return False

        self._a = np.array(inverse)
        return True
