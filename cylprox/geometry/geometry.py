from enum import Enum
import numpy as np

from cylprox.config import APPROX_EQ_EPS


class GeometryType(Enum):
    POINT=0
    VECTOR=1

    CYLINDER=11


class InvalidGeometryError(ValueError):
    """
    Raised when a shape is constructed from data that cannot describe it,
    e.g. a negative radius or a zero-length axis.
    """


def approx_eq(a:float, b:float, eps:float=APPROX_EQ_EPS)->bool:
    """
    True if |a-b| < eps
    """
    return bool(abs(a - b) < eps)


def to_xyz(x:float, y:float, z:float)->np.ndarray:
    return np.array([x, y, z], dtype='float64')


def as_xyz(values)->np.ndarray:
    """
    copies any 3-sequence (list, tuple, ndarray, Point, Vector) into a fresh float64 triple
    """
    if hasattr(values, 'as_array'):
        return values.as_array()
    xyz = np.array(values, dtype='float64').reshape(-1)
    if xyz.shape != (3,):
        raise ValueError(f"expected 3 coordinates, got shape {np.shape(values)}")
    return xyz


def xyz_approx_eq(a:np.ndarray, b:np.ndarray, eps:float=APPROX_EQ_EPS)->bool:
    """
    coordinate-wise approximate equality. NOT a distance comparison: each of x, y, z
    is checked on its own against eps.
    """
    return approx_eq(a[0], b[0], eps) and approx_eq(a[1], b[1], eps) and approx_eq(a[2], b[2], eps)


def format_xyz(xyz:np.ndarray)->str:
    return ','.join([format(a, '0.3g') for a in xyz])
