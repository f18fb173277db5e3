import numpy as np

from cylprox.config import APPROX_EQ_EPS
from .geometry import GeometryType, as_xyz, format_xyz, to_xyz, xyz_approx_eq
from .vector import Vector


class Point:
    """
    3D position.

    point - point gives the Vector FROM the right operand TO the left one,
    point + vector gives the translated Point.
    """

    __slots__ = ('_xyz',)
    __array_ufunc__ = None

    geotype:GeometryType = GeometryType.POINT

    def __init__(self, x:float, y:float, z:float):
        self._xyz:np.ndarray = to_xyz(x, y, z)

    @classmethod
    def origin(cls)->'Point':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, values)->'Point':
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

    def __sub__(self, base_pt:'Point')->Vector:
        if not isinstance(base_pt, Point):
            return NotImplemented
        return Vector(*(self._xyz - base_pt._xyz))

    def __add__(self, offset:Vector)->'Point':
        if not isinstance(offset, Vector):
            return NotImplemented
        return Point(*(self._xyz + offset.as_array()))

    __radd__ = __add__

    def distance(self, point:'Point')->float:
        return (self - point).length()

    def approx_eq(self, point:'Point', eps:float=APPROX_EQ_EPS)->bool:
        return xyz_approx_eq(self._xyz, point._xyz, eps)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._xyz, other._xyz))

    def __hash__(self):
        return hash((GeometryType.POINT, self.x, self.y, self.z))

    def __repr__(self):
        return f"Point([{format_xyz(self._xyz)}])"
