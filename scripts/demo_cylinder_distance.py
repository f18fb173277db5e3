#!/usr/bin/env python3
"""
Distance from a handful of points to an X-axis cylinder.

The cylinder starts at the origin, has axis (2,0,0), radius 0.5 and height 2.0,
so its axis spans x in [0,2].
"""

import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import numpy as np
from cylprox import Point, Vector, RightCircularCylinder, InvalidGeometryError, setup_logging

logger = logging.getLogger("cylprox.scripts.demo")

cases = [
    ("outside, over the body", Point(1, 1, 0), 0.5),
    ("inside, near the body", Point(1, 0.25, 0), 0.25),
    ("on the rim", Point(2, 0.5, 0), 0.0),
    ("on cap and axis", Point(2, 0, 0), 0.0),
    ("inside, near a cap", Point(0.25, 0, 0), 0.25),
    ("beyond an end, outside radius", Point(-1, -1.5, 0), np.sqrt(2)),
    ("beyond an end, inside radius", Point(-1, 0, 0), 1.0),
]


def main():
    setup_logging(logging.DEBUG if "-v" in sys.argv else logging.INFO)

    cyl = RightCircularCylinder(Point.origin(), Vector(2, 0, 0), 0.5, 2.0)
    print(cyl)
    print("="*60)

    failures = 0
    for label, pt, expected in cases:
        got = cyl.distance(pt)
        ok = np.isclose(got, expected, atol=1e-5)
        failures += not ok
        print(f"   {label:32s} {pt!r:22s} expected {expected:.4f}, got {got:.4f}")

    batch = cyl.distances([pt for _, pt, _ in cases])
    print(f"\n   batch: {np.array2string(batch, precision=4)}")

    print("\nDegenerate axis:")
    try:
        RightCircularCylinder(Point.origin(), Vector(0, 0, 0), 1, 1)
    except InvalidGeometryError as e:
        print(f"   rejected: {e}")

    print("="*60)
    if failures:
        logger.error("%d case(s) did not match", failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
