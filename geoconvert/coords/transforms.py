"""Coordinate transformations between LLA, ECEF, and ENU frames.

This module implements transformations between geodetic (LLA),
Earth-Centered Earth-Fixed (ECEF), and local East-North-Up (ENU)
coordinate systems. Public angles are in degrees, distances in meters.

The ENU frame is handled through a 4x4 homogeneous transform (rotation
plus translation to the reference point). ENU -> ECEF applies it
directly; ECEF -> ENU applies its inverse, computed by Gauss-Jordan
elimination.

WGS84 ellipsoid parameters:
- Semi-major axis (a): 6378137.0 m
- Flattening (f): 1/298.257224
- Semi-minor axis (b): a * (1 - f)
"""

import warnings

import numpy as np
from numpy.typing import NDArray

from geoconvert.coords.frames import EcefPoint, EnuPoint, GeodeticPoint
from geoconvert.linalg import apply_homogeneous, invert_matrix, make_homogeneous

# WGS84 ellipsoid parameters
WGS84_A = 6378137.0  # Semi-major axis (m)
WGS84_F = 1.0 / 298.257224  # Flattening
WGS84_B = WGS84_A * (1.0 - WGS84_F)  # Semi-minor axis (m)
WGS84_E2 = (WGS84_A**2 - WGS84_B**2) / WGS84_A**2  # First eccentricity squared
WGS84_EP2 = (WGS84_A**2 - WGS84_B**2) / WGS84_B**2  # Second eccentricity squared

# Distance from the polar axis below which altitude is unreliable (m)
POLAR_AXIS_TOL = 1e-3


class PolarPrecisionWarning(RuntimeWarning):
    """ECEF point lies so close to the polar axis that altitude is inaccurate."""


def ecef_from_lla(lat: float, lon: float, alt: float) -> EcefPoint:
    """Convert geodetic coordinates (LLA) to ECEF Cartesian coordinates.

    Args:
        lat: Latitude in degrees (positive north).
        lon: Longitude in degrees (positive east).
        alt: Altitude above the WGS84 ellipsoid in meters.

    Returns:
        ECEF coordinates (x, y, z) in meters.

    Example:
        >>> xyz = ecef_from_lla(55.754066, 37.621734, 153.0)
        >>> print(f"ECEF: {xyz}")
    """
    lat_rad = np.deg2rad(lat)
    lon_rad = np.deg2rad(lon)

    cos_lat = np.cos(lat_rad)
    sin_lat = np.sin(lat_rad)
    cos_lon = np.cos(lon_rad)
    sin_lon = np.sin(lon_rad)

    # Prime-vertical radius of curvature, as multiples of a
    one_minus_f2 = (1.0 - WGS84_F) ** 2
    c = 1.0 / np.sqrt(cos_lat**2 + one_minus_f2 * sin_lat**2)
    s = one_minus_f2 * c

    x = (WGS84_A * c + alt) * cos_lat * cos_lon
    y = (WGS84_A * c + alt) * cos_lat * sin_lon
    z = (WGS84_A * s + alt) * sin_lat

    return EcefPoint(float(x), float(y), float(z))


def lla_from_ecef(x: float, y: float, z: float) -> GeodeticPoint:
    """Convert ECEF Cartesian coordinates to geodetic coordinates (LLA).

    Uses Bowring's closed-form approximation (no iteration): latitude is
    computed from the parametric angle theta = atan2(z*a, p*b).

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.

    Returns:
        Geodetic coordinates (lat, lon, alt): degrees, degrees, meters.

    Warns:
        PolarPrecisionWarning: If the point is within POLAR_AXIS_TOL of the
            polar axis. Altitude is computed as p / cos(lat) - N, which loses
            accuracy as cos(lat) -> 0; the value is still returned.

    Note:
        Accuracy degrades slowly with altitude; near the surface the
        round-trip with ecef_from_lla agrees to better than 1e-8.
    """
    # Distance from z-axis
    p = np.sqrt(x**2 + y**2)
    if p < POLAR_AXIS_TOL:
        warnings.warn(
            f"Point is {p:.3g} m from the polar axis; altitude is numerically "
            "unreliable this close to the poles.",
            PolarPrecisionWarning,
            stacklevel=2,
        )

    theta = np.arctan2(z * WGS84_A, p * WGS84_B)
    lon = np.arctan2(y, x)
    lat = np.arctan2(
        z + WGS84_EP2 * WGS84_B * np.sin(theta) ** 3,
        p - WGS84_E2 * WGS84_A * np.cos(theta) ** 3,
    )

    # Radius of curvature in the prime vertical
    N = WGS84_A / np.sqrt(1.0 - WGS84_E2 * np.sin(lat) ** 2)
    alt = p / np.cos(lat) - N

    return GeodeticPoint(float(np.rad2deg(lat)), float(np.rad2deg(lon)), float(alt))


def _ecef_from_enu_transform(
    ref_lat: float,
    ref_lon: float,
    ref_alt: float,
) -> NDArray[np.float64]:
    """Build the 4x4 homogeneous transform from ENU to ECEF.

    Columns of the rotation block are the East, North and Up unit vectors
    expressed in ECEF; the translation is the reference point in ECEF.
    """
    origin = ecef_from_lla(ref_lat, ref_lon, ref_alt)

    lat_rad = np.deg2rad(ref_lat)
    lon_rad = np.deg2rad(ref_lon)
    sin_lat = np.sin(lat_rad)
    cos_lat = np.cos(lat_rad)
    sin_lon = np.sin(lon_rad)
    cos_lon = np.cos(lon_rad)

    # R_ECEF_ENU
    R = np.array(
        [
            [-sin_lon, -sin_lat * cos_lon, cos_lat * cos_lon],
            [cos_lon, -sin_lat * sin_lon, cos_lat * sin_lon],
            [0.0, cos_lat, sin_lat],
        ],
        dtype=np.float64,
    )

    return make_homogeneous(R, origin)


def ecef_from_enu(
    east: float,
    north: float,
    up: float,
    ref_lat: float,
    ref_lon: float,
    ref_alt: float,
) -> EcefPoint:
    """Convert local ENU coordinates to ECEF coordinates.

    Args:
        east: East coordinate in meters.
        north: North coordinate in meters.
        up: Up coordinate in meters.
        ref_lat: Reference latitude in degrees (origin of ENU frame).
        ref_lon: Reference longitude in degrees (origin of ENU frame).
        ref_alt: Reference altitude in meters (origin of ENU frame).

    Returns:
        ECEF coordinates (x, y, z) in meters.
    """
    T = _ecef_from_enu_transform(ref_lat, ref_lon, ref_alt)
    xyz = apply_homogeneous(T, [east, north, up])
    return EcefPoint(*(float(v) for v in xyz))


def enu_from_ecef(
    x: float,
    y: float,
    z: float,
    ref_lat: float,
    ref_lon: float,
    ref_alt: float,
) -> EnuPoint:
    """Convert ECEF coordinates to local ENU coordinates.

    Args:
        x: ECEF x-coordinate in meters.
        y: ECEF y-coordinate in meters.
        z: ECEF z-coordinate in meters.
        ref_lat: Reference latitude in degrees (origin of ENU frame).
        ref_lon: Reference longitude in degrees (origin of ENU frame).
        ref_alt: Reference altitude in meters (origin of ENU frame).

    Returns:
        ENU coordinates (east, north, up) in meters.

    Raises:
        SingularMatrixError: If the ENU transform cannot be inverted.
    """
    T_inv = invert_matrix(_ecef_from_enu_transform(ref_lat, ref_lon, ref_alt))
    enu = apply_homogeneous(T_inv, [x, y, z])
    return EnuPoint(*(float(v) for v in enu))


def lla_from_enu(
    east: float,
    north: float,
    up: float,
    ref_lat: float,
    ref_lon: float,
    ref_alt: float,
) -> GeodeticPoint:
    """Convert local ENU coordinates to geodetic coordinates (LLA).

    Args:
        east: East coordinate in meters.
        north: North coordinate in meters.
        up: Up coordinate in meters.
        ref_lat: Reference latitude in degrees (origin of ENU frame).
        ref_lon: Reference longitude in degrees (origin of ENU frame).
        ref_alt: Reference altitude in meters (origin of ENU frame).

    Returns:
        Geodetic coordinates (lat, lon, alt): degrees, degrees, meters.

    Example:
        >>> # 100 m east of the reference point
        >>> lla = lla_from_enu(100.0, 0.0, 0.0, 55.753708, 37.620034, 154.0)
    """
    return lla_from_ecef(*ecef_from_enu(east, north, up, ref_lat, ref_lon, ref_alt))


def enu_from_lla(
    lat: float,
    lon: float,
    alt: float,
    ref_lat: float,
    ref_lon: float,
    ref_alt: float,
) -> EnuPoint:
    """Convert geodetic coordinates (LLA) to local ENU coordinates.

    Args:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        alt: Altitude above the WGS84 ellipsoid in meters.
        ref_lat: Reference latitude in degrees (origin of ENU frame).
        ref_lon: Reference longitude in degrees (origin of ENU frame).
        ref_alt: Reference altitude in meters (origin of ENU frame).

    Returns:
        ENU coordinates (east, north, up) in meters.

    Raises:
        SingularMatrixError: If the ENU transform cannot be inverted.

    Example:
        >>> enu = enu_from_lla(55.754066, 37.621734, 153.0,
        ...                    55.753708, 37.620034, 154.0)
        >>> print(f"ENU: {enu}")
    """
    return enu_from_ecef(*ecef_from_lla(lat, lon, alt), ref_lat, ref_lon, ref_alt)
