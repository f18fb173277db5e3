import numpy as np
from scipy.spatial import transform
from typing import TYPE_CHECKING

from cylprox.config import APPROX_EQ_EPS
from .geometry import GeometryType, InvalidGeometryError, approx_eq, as_xyz, format_xyz, to_xyz, xyz_approx_eq

if TYPE_CHECKING:
    from .point import Point


class Vector:
    """
    Free 3D displacement (direction and magnitude, no location).

    Vectors are values: every public operation returns a new Vector. Zero-length
    vectors are allowed.
    """

    __slots__ = ('_xyz',)
    # numpy scalars on the left defer to __rmul__
    __array_ufunc__ = None

    geotype:GeometryType = GeometryType.VECTOR

    def __init__(self, x:float, y:float, z:float):
        self._xyz:np.ndarray = to_xyz(x, y, z)

    @classmethod
    def from_point(cls, head:'Point')->'Vector':
        """
        vector from the origin to head
        """
        return cls(*head.as_array())

    @classmethod
    def from_array(cls, values)->'Vector':
        return cls(*as_xyz(values))

    @property
    def x(self)->float:
        return float(self._xyz[0])

    @property
    def y(self)->float:
        return float(self._xyz[1])

    @property
    def z(self)->float:
        return float(self._xyz[2])

    def as_array(self)->np.ndarray:
        return self._xyz.copy()

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __add__(self, other:'Vector')->'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(self._xyz + other._xyz))

    def __sub__(self, other:'Vector')->'Vector':
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(*(self._xyz - other._xyz))

    def __neg__(self)->'Vector':
        return Vector(*(-self._xyz))

    def __mul__(self, scale:float)->'Vector':
        if not np.isscalar(scale):
            return NotImplemented
        return Vector(*(self._xyz * scale))

    __rmul__ = __mul__

    def _scale(self, s:float)->'Vector':
        # in place; only used while a cylinder normalizes its private copy of the axis
        self._xyz *= s
        return self

    def length(self)->float:
        return float(np.sqrt(np.dot(self._xyz, self._xyz)))

    def dot(self, other:'Vector')->float:
        return float(np.dot(self._xyz, other._xyz))

    def normalized(self, eps:float=APPROX_EQ_EPS)->'Vector':
        length = self.length()
        if approx_eq(length, 0.0, eps):
            raise InvalidGeometryError(f"cannot normalize a degenerate vector {self!r}")
        return Vector(*self._xyz)._scale(1 / length)

    def rotated(self, rx:float, ry:float, rz:float, deg=False)->'Vector':
        """
        Rotate about the world x, y and z axes, in that order.
        """
        rotation = transform.Rotation.from_euler('xyz', [rx, ry, rz], degrees=deg)
        return Vector(*rotation.apply(self._xyz))

    def approx_eq(self, other:'Vector', eps:float=APPROX_EQ_EPS)->bool:
        return xyz_approx_eq(self._xyz, other._xyz, eps)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    def __hash__(self):
        return hash((GeometryType.VECTOR, self.x, self.y, self.z))

    def __repr__(self):
        return f"Vector([{format_xyz(self._xyz)}])"
