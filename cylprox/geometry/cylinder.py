import logging
import numpy as np

from cylprox.config import APPROX_EQ_EPS
from .geometry import GeometryType, InvalidGeometryError, approx_eq, format_xyz
from .point import Point
from .vector import Vector

logger = logging.getLogger(__name__)


class RightCircularCylinder:
    """
    Finite right circular cylinder, represented by a base point, axis vector,
    radius and height.

    The axis is normalized at construction, which gives the parametric line
        P(t) = base + t * axis
    where t is in [0, height] for points inside the finite cylinder.

    The boundary is made of 3 surfaces: the lateral (curved) surface and one flat
    disk, or cap, at each end. distance() measures to the nearest of these.
    """

    __slots__ = ('_base', '_axis', '_radius', '_height')

    geotype:GeometryType = GeometryType.CYLINDER

    def __init__(self, base:Point, axis:Vector, radius:float, height:float):
        if not (np.isfinite([radius, height]).all() and np.isfinite(axis.as_array()).all()
                and np.isfinite(base.as_array()).all()):
            logger.debug("rejecting cylinder with non-finite data base=%r axis=%r r=%s h=%s", base, axis, radius, height)
            raise InvalidGeometryError(f"Cylinder data must be finite, got base={base!r}, axis={axis!r}, r={radius}, h={height}")

        if radius < 0 or height < 0:
            logger.debug("rejecting cylinder with radius=%s height=%s", radius, height)
            raise InvalidGeometryError(f"Cylinder radius and height must be >= 0, got r={radius}, h={height}")

        axis_length = axis.length()
        if approx_eq(axis_length, 0.0):
            logger.debug("rejecting cylinder with degenerate axis %r", axis)
            raise InvalidGeometryError(f"Cylinder axis vector is degenerate: {axis!r}")

        self._base:Point = Point(*base.as_array())
        # private copy, so the caller's vector is left alone
        self._axis:Vector = Vector(*axis.as_array())._scale(1 / axis_length)
        self._radius:float = float(radius)
        self._height:float = float(height)

        logger.debug("constructed %r", self)

    @property
    def base(self)->Point:
        return self._base

    @property
    def axis(self)->Vector:
        return self._axis

    @property
    def radius(self)->float:
        return self._radius

    @property
    def height(self)->float:
        return self._height

    @property
    def top(self)->Point:
        """
        center of the far cap
        """
        return self._base + self._axis * self._height

    def axial_parameter(self, point:Point)->float:
        """
        Signed distance along the axis from base to the projection of point.
        """
        return (point - self._base).dot(self._axis)

    def distance_to_axis(self, point:Point)->float:
        """
        Perpendicular distance from point to the (infinite) axis line.
        """
        pt_on_axis = self._base + self._axis * self.axial_parameter(point)
        return pt_on_axis.distance(point)

    def distance(self, point:Point)->float:
        """
        Distance from point to the cylinder boundary. The point may be inside,
        outside, or on one of the surfaces. Always >= 0.

        When the projection of point onto the axis falls in [0, height] the result
        is min(distance to the infinite lateral surface, distance to the nearer cap
        plane). Outside the radius the cap plane can win even though the cap disk
        is farther away, so there this is not the exact Euclidean minimum.
        """
        line_param = self.axial_parameter(point)
        pt_on_axis = self._base + self._axis * line_param

        d_to_axis = pt_on_axis.distance(point)
        # to the infinite lateral surface
        d_to_cyl = abs(d_to_axis - self._radius)
        # to the plane of the nearer cap
        d_to_cap = min(abs(line_param), abs(self._height - line_param))

        if 0 <= line_param <= self._height:
            return min(d_to_cyl, d_to_cap)
        elif d_to_axis < self._radius:
            # beyond an end but within the radius, straight out to the cap disk
            return d_to_cap
        else:
            # beyond an end and outside the radius. In the plane through the point
            # and the axis the cylinder is a rectangle, so this is the distance
            # to one of its corners, i.e. the rim.
            return float(np.hypot(d_to_cap, d_to_cyl))

    def distances(self, points)->np.ndarray:
        """
        Vectorized distance() over many points.

        points: (N,3) array-like, a sequence of Point, or a single xyz triple.
        Returns an (N,) array.
        """
        xyz = _as_rows(points)
        # a single triple, or an empty sequence
        if xyz.ndim == 1 and xyz.shape[0] in (0, 3):
            xyz = xyz.reshape(-1, 3)
        if xyz.ndim != 2 or xyz.shape[1] != 3:
            raise ValueError(f"points must have shape (N,3), got {xyz.shape}")

        axis = self._axis.as_array()
        to_points = xyz - self._base.as_array()
        line_param = to_points @ axis
        perpendicular = to_points - np.outer(line_param, axis)

        d_to_axis = np.linalg.norm(perpendicular, axis=1)
        d_to_cyl = np.abs(d_to_axis - self._radius)
        d_to_cap = np.minimum(np.abs(line_param), np.abs(self._height - line_param))

        inside_span = (line_param >= 0) & (line_param <= self._height)
        inside_radius = d_to_axis < self._radius

        return np.where(inside_span, np.minimum(d_to_cyl, d_to_cap),
                        np.where(inside_radius, d_to_cap, np.hypot(d_to_cap, d_to_cyl)))

    def __contains__(self, point:Point)->bool:
        """
        True if point lies on the cylinder boundary
        """
        if not isinstance(point, Point):
            return False
        return approx_eq(self.distance(point), 0.0, APPROX_EQ_EPS)

    def __repr__(self):
        return (f"RightCircularCylinder(base=[{format_xyz(self._base.as_array())}],"
                f"axis=[{format_xyz(self._axis.as_array())}],r={self._radius:0.3g},h={self._height:0.3g})")


Cylinder = RightCircularCylinder


def _as_rows(points)->np.ndarray:
    if isinstance(points, Point):
        return points.as_array()
    if isinstance(points, np.ndarray):
        return points.astype('float64')
    return np.asarray([p.as_array() if isinstance(p, Point) else p for p in points], dtype='float64')
