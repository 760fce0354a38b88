"""Points stored in spherical coordinates, with Cartesian and cylindrical views.

Angles are in radians throughout. The azimuth angle is measured in the XY plane from +X,
the polar angle from +Z.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vector import Vec3

logger = logging.getLogger(__name__)

# element names and their required order for a serialized DetectorPosition
XML_TAG = "DetectorPosition"
XML_FIELDS = ("sph_radius", "azimuth_angle", "polar_angle")


def _fmt(value: float, digits: int) -> str:
    """Format value with at most digits decimal places."""
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _weighted_pairs(points, weights, caller: str):
    """Return the usable (point, weight) pairs, or None if there are none."""
    if points is None or weights is None:
        logger.error(f"No points or weights specified in {caller}")
        return None

    n_points = min(len(points), len(weights))
    if n_points == 0:
        logger.error(f"No points or weights specified in {caller}")
        return None

    # zip stops at the shorter of the two
    return [(point, weight) for point, weight in zip(points, weights) if point is not None]


class Position3:
    r"""A point in 3D space held as one canonical spherical triple.

    Only $\left(r, \phi_{\text{azimuth}}, \theta_{\text{polar}}\right)$ is stored.
    The Cartesian and cylindrical coordinates are computed from it whenever they are asked for,
    so the three views can never disagree.
    """

    def __init__(self, sph_radius: float = 0.0, azimuth_angle: float = 0.0, polar_angle: float = 0.0) -> None:
        self._sph_radius = float(sph_radius)
        self._azimuth_angle = float(azimuth_angle)
        self._polar_angle = float(polar_angle)

    @classmethod
    def from_vector(cls, vec: Vec3):
        """Build a position from the x, y, z components of a :class:`Vec3`."""
        position = cls()
        position.set_cartesian_coords(vec.x, vec.y, vec.z)
        return position

    def copy(self):
        return type(self)(self._sph_radius, self._azimuth_angle, self._polar_angle)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position3):
            return NotImplemented
        return self.get_spherical_coords() == other.get_spherical_coords()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._sph_radius}, {self._azimuth_angle}, {self._polar_angle})"

    def __str__(self) -> str:
        rho, azimuth, z = self.get_cylindrical_coords()
        return f"r={_fmt(rho, 3)},φ={_fmt(math.degrees(azimuth), 2)},z={_fmt(z, 3)}"

    def set_cartesian_coords(self, x: float, y: float, z: float) -> None:
        self._sph_radius = math.sqrt(x * x + y * y + z * z)
        cyl_radius = math.sqrt(x * x + y * y)
        self._polar_angle = math.atan2(cyl_radius, z)
        self._azimuth_angle = math.atan2(y, x)

    def get_cartesian_coords(self) -> tuple[float, float, float]:
        """Return (x, y, z)."""
        r = self._sph_radius * math.sin(self._polar_angle)
        return (
            r * math.cos(self._azimuth_angle),
            r * math.sin(self._azimuth_angle),
            self._sph_radius * math.cos(self._polar_angle),
        )

    def set_spherical_coords(self, sph_radius: float, azimuth_angle: float, polar_angle: float) -> None:
        self._sph_radius = float(sph_radius)
        self._azimuth_angle = float(azimuth_angle)
        self._polar_angle = float(polar_angle)

    def get_spherical_coords(self) -> tuple[float, float, float]:
        """Return (sph_radius, azimuth_angle, polar_angle)."""
        return (self._sph_radius, self._azimuth_angle, self._polar_angle)

    def set_cylindrical_coords(self, cyl_radius: float, azimuth_angle: float, z: float) -> None:
        self._sph_radius = math.sqrt(cyl_radius * cyl_radius + z * z)
        self._azimuth_angle = float(azimuth_angle)
        self._polar_angle = math.atan2(cyl_radius, z)

    def get_cylindrical_coords(self) -> tuple[float, float, float]:
        """Return (cyl_radius, azimuth_angle, z)."""
        return (
            self._sph_radius * math.sin(self._polar_angle),
            self._azimuth_angle,
            self._sph_radius * math.cos(self._polar_angle),
        )

    def get_distance(self) -> float:
        """Return the distance from the origin, the spherical radius."""
        return self._sph_radius

    @staticmethod
    def center_of_mass(points: Sequence[Position3 | None], weights: Sequence[float]) -> Position3 | None:
        """Return the weighted average of points, taken in Cartesian coordinates.

        Parameters
        ----------
        points
            Positions to average. None entries are skipped.
        weights
            One weight per point. Extra points or extra weights are ignored.

        Returns
        -------
        Position3 | None
            None if there is nothing to average or the weights sum to zero.
        """
        pairs = _weighted_pairs(points, weights, "Position3.center_of_mass")
        if pairs is None:
            return None

        sum_x = sum_y = sum_z = sum_w = 0.0
        for point, weight in pairs:
            x, y, z = point.get_cartesian_coords()
            sum_x += x * weight
            sum_y += y * weight
            sum_z += z * weight
            sum_w += weight

        if sum_w == 0:
            logger.error("Sum of weights is zero in Position3.center_of_mass")
            return None

        center = Position3()
        center.set_cartesian_coords(sum_x / sum_w, sum_y / sum_w, sum_z / sum_w)
        return center


class DetectorPosition(Position3):
    """Position of a detector element, with the beam travelling along +x from a source on the -x axis."""

    def __str__(self) -> str:
        rho, azimuth, z = self.get_cylindrical_coords()
        scat_ang = _fmt(math.degrees(self.get_scattering_angle()), 3)
        return f"2θ={scat_ang}:r={_fmt(rho, 4)},φ={_fmt(math.degrees(azimuth), 3)},z={_fmt(z, 4)}"

    def get_scattering_angle(self) -> float:
        r"""Return the scattering angle $2\theta$ in radians: the angle between the position vector and +x."""
        x, y, z = self.get_cartesian_coords()
        dist_from_x = math.sqrt(y * y + z * z)
        return math.atan2(dist_from_x, x)

    @staticmethod
    def average_position(
        points: Sequence[DetectorPosition | None], weights: Sequence[float]
    ) -> DetectorPosition | None:
        """Return the weighted average of points, taken component-wise in spherical coordinates.

        Detector arrays are laid out in spherical coordinates, so the radius, azimuth and polar angle
        are averaged separately. Near the azimuth wrap-around this differs from a Cartesian average.

        Parameters
        ----------
        points
            Positions to average. None entries are skipped.
        weights
            One weight per point. Extra points or extra weights are ignored.

        Returns
        -------
        DetectorPosition | None
            None if there is nothing to average or the weights sum to zero.
        """
        pairs = _weighted_pairs(points, weights, "DetectorPosition.average_position")
        if pairs is None:
            return None

        sum_r = sum_azimuth = sum_polar = sum_w = 0.0
        for point, weight in pairs:
            r, azimuth, polar = point.get_spherical_coords()
            sum_r += r * weight
            sum_azimuth += azimuth * weight
            sum_polar += polar * weight
            sum_w += weight

        if sum_w == 0:
            logger.error("Sum of weights is zero in DetectorPosition.average_position")
            return None

        return DetectorPosition(sum_r / sum_w, sum_azimuth / sum_w, sum_polar / sum_w)

    def to_xml(self) -> str:
        """Serialize as a DetectorPosition element holding sph_radius, azimuth_angle and polar_angle, in that order."""
        root = ET.Element(XML_TAG)
        for tag, value in zip(XML_FIELDS, self.get_spherical_coords()):
            ET.SubElement(root, tag).text = repr(value)
        return ET.tostring(root, encoding="unicode")

    @classmethod
    def from_xml(cls, text: str) -> DetectorPosition | None:
        """Read a position written by :meth:`to_xml`.

        Returns None if the text is not well formed, the element names or their order differ,
        or a value is not a number.
        """
        try:
            root = ET.fromstring(text)
        except ET.ParseError as e:
            logger.error(f"Could not parse {XML_TAG}: {e}")
            return None

        tags = tuple(child.tag for child in root)
        if root.tag != XML_TAG or tags != XML_FIELDS:
            logger.error(f"Expected <{XML_TAG}> with fields {XML_FIELDS}, got <{root.tag}> with {tags}")
            return None

        try:
            values = [float(child.text) for child in root]
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid value in {XML_TAG}: {e}")
            return None

        return cls(*values)
