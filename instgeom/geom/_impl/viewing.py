"""Camera (viewing) transform used to project points for 3D display."""

from __future__ import annotations

from .transform import Mat4, view_basis, view_matrix
from .vector import Vec3


class ViewingTran3(Mat4):
    """A :class:`Mat4` built from a center of projection, view reference point and view up vector.

    The inputs and the derived camera basis (u, v, n) are kept for introspection.
    The default state, an observer on +z looking at the origin with +y up, is the identity.

    Parameters
    ----------
    cop
        Center of projection, optional
    vrp
        View reference point, optional
    vuv
        View up vector, optional
    perspective
        Whether to include the perspective projection, optional

    Notes
    -----
    After applying a perspective transform, call :meth:`Vec3.standardize` on the result to complete the divide.
    """

    def __init__(
        self,
        cop: Vec3 | None = None,
        vrp: Vec3 | None = None,
        vuv: Vec3 | None = None,
        perspective: bool = False,
    ) -> None:
        super().__init__()
        self._cop = Vec3(0.0, 0.0, 1.0)
        self._vrp = Vec3(0.0, 0.0, 0.0)
        self._vuv = Vec3(0.0, 1.0, 0.0)
        self._u = Vec3(1.0, 0.0, 0.0)
        self._v = Vec3(0.0, 1.0, 0.0)
        self._n = Vec3(0.0, 0.0, 1.0)
        self._perspective = False

        if cop is not None and vrp is not None and vuv is not None:
            self.set_view_matrix(cop, vrp, vuv, perspective)

    def copy(self) -> ViewingTran3:
        tran = ViewingTran3()
        tran._a = self._a.copy()
        tran._cop = self._cop.copy()
        tran._vrp = self._vrp.copy()
        tran._vuv = self._vuv.copy()
        tran._u = self._u.copy()
        tran._v = self._v.copy()
        tran._n = self._n.copy()
        tran._perspective = self._perspective
        return tran

    def __str__(self) -> str:
        return "\n".join(
            str(item) for item in (self._cop, self._vrp, self._vuv, self._u, self._v, self._n, self._perspective)
        ) + "\n" + super().__str__()

    @property
    def perspective(self) -> bool:
        return self._perspective

    def get_cop(self) -> Vec3:
        return self._cop.copy()

    def get_vrp(self) -> Vec3:
        return self._vrp.copy()

    def get_vuv(self) -> Vec3:
        return self._vuv.copy()

    def get_u(self) -> Vec3:
        return self._u.copy()

    def get_v(self) -> Vec3:
        return self._v.copy()

    def get_n(self) -> Vec3:
        return self._n.copy()

    def set_view_matrix(self, cop: Vec3, vrp: Vec3, vuv: Vec3, perspective: bool) -> bool:
        """Rebuild the viewing transform.

        Unlike :meth:`Mat4.set_view_matrix`, a degenerate configuration leaves the matrix and all
        retained inputs unchanged.
        """
        basis = view_basis(cop, vrp, vuv)
        if basis is None:
            return False

        self._u, self._v, self._n = basis
        self._cop = cop.copy()
        self._vrp = vrp.copy()
        self._vuv = vuv.copy()
        self._perspective = bool(perspective)
        self._a = view_matrix(self._u, self._v, self._n, cop, vrp, perspective)
        return True
