"""Geodetic coordinate frames and transformations.

This module provides functions and types for converting positions between:
- LLA (Latitude, Longitude, Altitude) geodetic coordinates
- ECEF (Earth-Centered Earth-Fixed) Cartesian coordinates
- ENU (East-North-Up) local tangent plane coordinates
"""

from geoconvert.coords.frames import (
    FRAME_ECEF,
    FRAME_ENU,
    FRAME_LLA,
    EcefPoint,
    EnuPoint,
    Frame,
    FrameType,
    GeodeticPoint,
)
from geoconvert.coords.transforms import (
    POLAR_AXIS_TOL,
    WGS84_A,
    WGS84_B,
    WGS84_E2,
    WGS84_EP2,
    WGS84_F,
    PolarPrecisionWarning,
    ecef_from_enu,
    ecef_from_lla,
    enu_from_ecef,
    enu_from_lla,
    lla_from_ecef,
    lla_from_enu,
)

__all__ = [
    # Frames
    "Frame",
    "FrameType",
    "FRAME_LLA",
    "FRAME_ECEF",
    "FRAME_ENU",
    # Points
    "GeodeticPoint",
    "EcefPoint",
    "EnuPoint",
    # Ellipsoid
    "WGS84_A",
    "WGS84_F",
    "WGS84_B",
    "WGS84_E2",
    "WGS84_EP2",
    # Transforms
    "ecef_from_lla",
    "lla_from_ecef",
    "enu_from_lla",
    "lla_from_enu",
    "enu_from_ecef",
    "ecef_from_enu",
    # Diagnostics
    "POLAR_AXIS_TOL",
    "PolarPrecisionWarning",
]
