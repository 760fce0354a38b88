import unittest

import jax
import jax.numpy as jnp
import numpy as np

import instgeom

jax.config.update("jax_enable_x64", True)


class TestRotZ(unittest.TestCase):
    def test_against_explicit_matrix(self):
        # Omega = [cos(w) -sin(w)       0]
        #         [sin(w)  cos(w)       0]
        #         [     0       0       1]
        omega = 12.345
        romega = jnp.radians(omega)
        expected = jnp.array([[jnp.cos(romega), -jnp.sin(romega), 0], [jnp.sin(romega), jnp.cos(romega), 0], [0, 0, 1]])
        result = instgeom.geom.rot_z(omega)
        np.testing.assert_allclose(result, expected)

    def test_quarter_turn(self):
        result = instgeom.geom.rot_z(90.0) @ jnp.array([1.0, 2.0, 3.0])
        np.testing.assert_allclose(result, [-2.0, 1.0, 3.0], atol=1e-12)


class TestRotX(unittest.TestCase):
    def test_against_explicit_matrix(self):
        chi = -33.0
        rchi = jnp.radians(chi)
        expected = jnp.array([[1, 0, 0], [0, jnp.cos(rchi), -jnp.sin(rchi)], [0, jnp.sin(rchi), jnp.cos(rchi)]])
        result = instgeom.geom.rot_x(chi)
        np.testing.assert_allclose(result, expected)


class TestRmatFromAxisAngle(unittest.TestCase):
    def test_matches_rot_z(self):
        result = instgeom.geom.rmat_from_axis_angle(jnp.array([0.0, 0.0, 3.0]), 47.0)
        np.testing.assert_allclose(result, instgeom.geom.rot_z(47.0))

    def test_orthogonal(self):
        rng = np.random.default_rng(3)
        for axis, angle in zip(rng.normal(size=(10, 3)), rng.uniform(-180, 180, size=10)):
            R = instgeom.geom.rmat_from_axis_angle(jnp.asarray(axis), angle)
            np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
            np.testing.assert_allclose(jnp.linalg.det(R), 1.0)
            # the axis is left fixed
            np.testing.assert_allclose(R @ axis, axis, atol=1e-12)

    def test_against_rodrigues_formula(self):
        rng = np.random.default_rng(8)
        for axis, angle in zip(rng.normal(size=(10, 3)), rng.uniform(-360, 360, size=10)):
            x, y, z = axis / np.linalg.norm(axis)
            s = np.sin(np.radians(angle))
            c = np.cos(np.radians(angle))
            C = 1 - c
            expected = np.array(
                [
                    [x * x * C + c, x * y * C - z * s, x * z * C + y * s],
                    [y * x * C + z * s, y * y * C + c, y * z * C - x * s],
                    [z * x * C - y * s, z * y * C + x * s, z * z * C + c],
                ]
            )
            result = instgeom.geom.rmat_from_axis_angle(jnp.asarray(axis), angle)
            np.testing.assert_allclose(result, expected, atol=1e-12)
