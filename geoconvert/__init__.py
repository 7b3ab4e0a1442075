"""Geodetic coordinate conversion on the WGS84 ellipsoid.

This package contains:
- coords: LLA <-> ECEF <-> ENU conversions and typed frame points
- linalg: Gauss-Jordan matrix inversion and homogeneous transforms
"""

from geoconvert.coords import (
    EcefPoint,
    EnuPoint,
    GeodeticPoint,
    PolarPrecisionWarning,
    ecef_from_enu,
    ecef_from_lla,
    enu_from_ecef,
    enu_from_lla,
    lla_from_ecef,
    lla_from_enu,
)
from geoconvert.linalg import InvalidInputError, SingularMatrixError, invert_matrix

__version__ = "0.1.0"

__all__ = [
    "ecef_from_lla",
    "lla_from_ecef",
    "enu_from_lla",
    "lla_from_enu",
    "enu_from_ecef",
    "ecef_from_enu",
    "GeodeticPoint",
    "EcefPoint",
    "EnuPoint",
    "PolarPrecisionWarning",
    "invert_matrix",
    "InvalidInputError",
    "SingularMatrixError",
]
