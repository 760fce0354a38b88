import unittest

import jax
import numpy as np

import instgeom

jax.config.update("jax_enable_x64", True)


class TestVec3Construction(unittest.TestCase):
    def test_default_is_standardized_origin(self):
        vec = instgeom.geom.Vec3()
        self.assertEqual(vec.get(), (0.0, 0.0, 0.0, 1.0))

    def test_from_array(self):
        vec = instgeom.geom.Vec3.from_array([1.0, 2.0, 3.0, 99.0])
        self.assertEqual(vec.get(), (1.0, 2.0, 3.0, 1.0))

    def test_from_short_array_is_origin(self):
        vec = instgeom.geom.Vec3.from_array([1.0, 2.0])
        self.assertEqual(vec.get(), (0.0, 0.0, 0.0, 1.0))
        vec = instgeom.geom.Vec3.from_array(None)
        self.assertEqual(vec.get(), (0.0, 0.0, 0.0, 1.0))

    def test_from_position(self):
        position = instgeom.geom.Position3()
        position.set_cartesian_coords(1.0, -2.0, 3.0)
        vec = instgeom.geom.Vec3.from_position(position)
        np.testing.assert_allclose(vec.get(), [1.0, -2.0, 3.0, 1.0])

    def test_copy_is_independent(self):
        vec = instgeom.geom.Vec3(1.0, 2.0, 3.0)
        other = vec.copy()
        other.add(vec)
        self.assertEqual(vec.get(), (1.0, 2.0, 3.0, 1.0))
        self.assertEqual(other.get(), (2.0, 4.0, 6.0, 1.0))

    def test_equality(self):
        self.assertEqual(instgeom.geom.Vec3(1, 2, 3), instgeom.geom.Vec3(1.0, 2.0, 3.0))
        self.assertNotEqual(instgeom.geom.Vec3(1, 2, 3), instgeom.geom.Vec3(1, 2, 3, 0))


class TestVec3Arithmetic(unittest.TestCase):
    def test_add_subtract_keep_w(self):
        vec = instgeom.geom.Vec3(1.0, 2.0, 3.0, 2.0)
        vec.add(instgeom.geom.Vec3(2.0, 3.0, 4.0))
        self.assertEqual(vec.get(), (3.0, 5.0, 7.0, 2.0))
        vec.subtract(instgeom.geom.Vec3(1.0, 1.0, 1.0))
        self.assertEqual(vec.get(), (2.0, 4.0, 6.0, 2.0))

    def test_scalar_ops(self):
        vec = instgeom.geom.Vec3(1.0, 2.0, 3.0)
        vec.scalar_add(1.0)
        self.assertEqual(vec.get(), (2.0, 3.0, 4.0, 1.0))
        vec.scalar_multiply(-2.0)
        self.assertEqual(vec.get(), (-4.0, -6.0, -8.0, 1.0))

    def test_length_and_distance(self):
        vec = instgeom.geom.Vec3(3.0, 4.0, 12.0)
        self.assertEqual(vec.length(), 13.0)
        self.assertEqual(vec.distance(instgeom.geom.Vec3(3.0, 4.0, 0.0)), 12.0)

    def test_dot_ignores_w(self):
        a = instgeom.geom.Vec3(1.0, 2.0, 3.0, 5.0)
        b = instgeom.geom.Vec3(2.0, 3.0, 4.0, 7.0)
        self.assertEqual(a.dot(b), 20.0)

    def test_normalize(self):
        rng = np.random.default_rng(1234)
        for xyz in rng.uniform(-10, 10, size=(20, 3)):
            vec = instgeom.geom.Vec3(*xyz)
            vec.normalize()
            np.testing.assert_allclose(vec.length(), 1.0)
            np.testing.assert_allclose(list(vec), xyz / np.linalg.norm(xyz))

    def test_normalize_zero_is_noop(self):
        vec = instgeom.geom.Vec3(0.0, 0.0, 0.0, 3.0)
        vec.normalize()
        self.assertEqual(vec.get(), (0.0, 0.0, 0.0, 3.0))

    def test_standardize(self):
        vec = instgeom.geom.Vec3(2.0, 4.0, 6.0, 2.0)
        vec.standardize()
        self.assertEqual(vec.get(), (1.0, 2.0, 3.0, 1.0))

    def test_standardize_direction_is_rejected(self):
        vec = instgeom.geom.Vec3(2.0, 4.0, 6.0, 0.0)
        with self.assertLogs("instgeom", level="ERROR"):
            vec.standardize()
        self.assertEqual(vec.get(), (2.0, 4.0, 6.0, 0.0))


class TestVec3Cross(unittest.TestCase):
    def test_known_value(self):
        result = instgeom.geom.Vec3()
        result.cross(instgeom.geom.Vec3(1.0, 1.0, 1.0), instgeom.geom.Vec3(1.0, -1.0, 0.0))
        self.assertEqual(result.get(), (1.0, 1.0, -2.0, 1.0))

    def test_against_numpy(self):
        rng = np.random.default_rng(42)
        for a, b in rng.uniform(-5, 5, size=(10, 2, 3)):
            result = instgeom.geom.Vec3()
            result.cross(instgeom.geom.Vec3(*a), instgeom.geom.Vec3(*b))
            np.testing.assert_allclose(list(result), np.cross(a, b))

    def test_aliased_first_argument(self):
        a = instgeom.geom.Vec3(1.0, 2.0, 3.0)
        a.cross(a, instgeom.geom.Vec3(2.0, 3.0, 4.0))
        np.testing.assert_allclose(list(a), np.cross([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]))

    def test_aliased_second_argument(self):
        b = instgeom.geom.Vec3(2.0, 3.0, 4.0)
        b.cross(instgeom.geom.Vec3(1.0, 2.0, 3.0), b)
        np.testing.assert_allclose(list(b), np.cross([1.0, 2.0, 3.0], [2.0, 3.0, 4.0]))

    def test_single_argument(self):
        a = instgeom.geom.Vec3(1.0, 0.0, 0.0)
        a.cross(instgeom.geom.Vec3(0.0, 1.0, 0.0))
        self.assertEqual(a.get(), (0.0, 0.0, 1.0, 1.0))

    def test_self_cross_self_is_zero(self):
        a = instgeom.geom.Vec3(1.0, 2.0, 3.0)
        a.cross(a)
        self.assertEqual(a.get(), (0.0, 0.0, 0.0, 1.0))


class TestVec3Combinations(unittest.TestCase):
    def test_average(self):
        vec = instgeom.geom.Vec3()
        vec.average([instgeom.geom.Vec3(0.0, 1.0, 2.0), instgeom.geom.Vec3(2.0, 3.0, 4.0)])
        self.assertEqual(vec.get(), (1.0, 2.0, 3.0, 1.0))

    def test_average_of_empty_list(self):
        vec = instgeom.geom.Vec3(5.0, 5.0, 5.0)
        with self.assertLogs("instgeom", level="WARNING"):
            vec.average([])
        self.assertEqual(vec.get(), (0.0, 0.0, 0.0, 1.0))

    def test_linear_combination(self):
        vec = instgeom.geom.Vec3()
        vectors = [instgeom.geom.Vec3(1.0, 0.0, 0.0), instgeom.geom.Vec3(0.0, 1.0, 0.0), instgeom.geom.Vec3(0, 0, 1)]
        vec.linear_combination([2.0, -3.0], vectors)
        self.assertEqual(vec.get(), (2.0, -3.0, 0.0, 1.0))

    def test_linear_combination_missing_input(self):
        vec = instgeom.geom.Vec3(1.0, 2.0, 3.0)
        with self.assertLogs("instgeom", level="ERROR"):
            vec.linear_combination(None, [instgeom.geom.Vec3()])
        self.assertEqual(vec.get(), (1.0, 2.0, 3.0, 1.0))
