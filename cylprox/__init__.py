"""
Distance queries against a finite right circular cylinder.
"""

from .config import APPROX_EQ_EPS
from .geometry import (GeometryType, InvalidGeometryError, approx_eq, Vector, Point,
                       RightCircularCylinder, Cylinder)
from .logging_config import setup_logging

__all__ = [
    'APPROX_EQ_EPS',
    'GeometryType',
    'InvalidGeometryError',
    'approx_eq',
    'Vector',
    'Point',
    'RightCircularCylinder',
    'Cylinder',
    'setup_logging',
]
