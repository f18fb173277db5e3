from .geometry import GeometryType, InvalidGeometryError, approx_eq
from .vector import Vector
from .point import Point
from .cylinder import RightCircularCylinder, Cylinder


__all__ = ['GeometryType','InvalidGeometryError','approx_eq','Vector','Point','RightCircularCylinder','Cylinder']
