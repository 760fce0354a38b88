import unittest

import jax
import numpy as np

import instgeom

jax.config.update("jax_enable_x64", True)


class TestPlaneSelectors(unittest.TestCase):
    def test_plane_from_normal(self):
        plane = instgeom.geom.plane_from_normal(instgeom.geom.Vec3(0.0, 0.0, 2.0), 4.0)
        self.assertIsInstance(plane, instgeom.geom.Plane3)
        self.assertEqual(plane.get_distance(), 2.0)
        with self.assertLogs("instgeom", level="ERROR"):
            self.assertIsNone(instgeom.geom.plane_from_normal(instgeom.geom.Vec3(), 1.0))
        with self.assertLogs("instgeom", level="ERROR"):
            self.assertIsNone(instgeom.geom.plane_from_normal(None, 1.0))

    def test_plane_from_points(self):
        plane = instgeom.geom.plane_from_points(
            instgeom.geom.Vec3(0.0, 0.0, 0.0), instgeom.geom.Vec3(0.0, 1.0, 0.0), instgeom.geom.Vec3(0.0, 0.0, 1.0)
        )
        self.assertEqual(plane.get_normal().get(), (1.0, 0.0, 0.0, 1.0))
        self.assertEqual(plane.get_distance(), 0.0)
        with self.assertLogs("instgeom", level="ERROR"):
            self.assertIsNone(
                instgeom.geom.plane_from_points(
                    instgeom.geom.Vec3(), instgeom.geom.Vec3(1.0, 0.0, 0.0), instgeom.geom.Vec3(2.0, 0.0, 0.0)
                )
            )


class TestSlicePlaneSelectors(unittest.TestCase):
    def test_slice_plane_from_points(self):
        origin = instgeom.geom.Vec3(0.0, 0.0, 1.0)
        plane = instgeom.geom.slice_plane_from_points(
            origin, instgeom.geom.Vec3(0.0, 2.0, 1.0), instgeom.geom.Vec3(1.0, 0.0, 1.0)
        )
        self.assertIsInstance(plane, instgeom.geom.SlicePlane3)
        self.assertEqual(plane.get_origin(), origin)
        np.testing.assert_allclose(list(plane.get_u()), [0.0, 1.0, 0.0])
        np.testing.assert_allclose(list(plane.get_normal()), [0.0, 0.0, -1.0])
        with self.assertLogs("instgeom", level="ERROR"):
            self.assertIsNone(instgeom.geom.slice_plane_from_points(origin, origin, origin))

    def test_slice_plane_from_normal(self):
        origin = instgeom.geom.Vec3(1.0, 2.0, 3.0)
        plane = instgeom.geom.slice_plane_from_normal(origin, instgeom.geom.Vec3(0.0, 0.0, 1.0))
        self.assertEqual(plane.get_origin(), origin)
        np.testing.assert_allclose(list(plane.get_u()), [1.0, 0.0, 0.0])
        with self.assertLogs("instgeom", level="ERROR"):
            self.assertIsNone(instgeom.geom.slice_plane_from_normal(origin, instgeom.geom.Vec3()))
        with self.assertLogs("instgeom", level="ERROR"):
            self.assertIsNone(instgeom.geom.slice_plane_from_normal(None, instgeom.geom.Vec3(0.0, 0.0, 1.0)))
