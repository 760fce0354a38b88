"""Numerical thresholds shared by the geometry classes."""

# below this an axis of rotation is treated as zero
ROTATION_AXIS_TOL = 1.0e-10

# below this the view direction or the camera "x" axis is treated as zero
VIEW_DIRECTION_TOL = 1.0e-4

# |n.z| at or above this is treated as chi == 0 or chi == 180 degrees
GIMBAL_LOCK_TOL = 1.0 - 1.0e-15
