"""Coordinate frame definitions and typed points.

This module defines the three frames positions are converted between:
- LLA (Latitude-Longitude-Altitude): Geodetic coordinates on WGS84
- ECEF (Earth-Centered Earth-Fixed): Global Cartesian frame
- ENU (East-North-Up): Local tangent plane with origin at a reference point

Converted positions are returned as NamedTuples, so they unpack like plain
3-tuples while still knowing which frame they belong to.
"""

from enum import Enum
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray


class FrameType(Enum):
    """Enumeration of coordinate frame types.

    Attributes:
        LLA: Latitude-Longitude-Altitude geodetic frame.
        ECEF: Earth-Centered Earth-Fixed Cartesian frame.
        ENU: East-North-Up local tangent plane frame.
    """

    LLA = "lla"
    ECEF = "ecef"
    ENU = "enu"


class Frame(NamedTuple):
    """Representation of a coordinate frame.

    Attributes:
        frame_type: Type of coordinate frame.
        description: Human-readable description of the frame.
    """

    frame_type: FrameType
    description: str

    def __repr__(self) -> str:
        """Return string representation of frame."""
        return f"Frame({self.frame_type.value}: {self.description})"


FRAME_LLA = Frame(
    FrameType.LLA,
    "Latitude-Longitude-Altitude geodetic coordinates (deg, deg, m above WGS84)",
)

FRAME_ECEF = Frame(
    FrameType.ECEF,
    "Earth-Centered Earth-Fixed (x=0°E 0°N, y=90°E 0°N, z=North Pole)",
)

FRAME_ENU = Frame(
    FrameType.ENU,
    "East-North-Up local tangent plane (x=East, y=North, z=Up)",
)


class GeodeticPoint(NamedTuple):
    """Geodetic position: latitude and longitude in degrees, altitude in meters."""

    lat: float
    lon: float
    alt: float

    @property
    def frame(self) -> Frame:
        return FRAME_LLA

    def to_array(self) -> NDArray[np.float64]:
        return np.array(self, dtype=np.float64)


class EcefPoint(NamedTuple):
    """ECEF position in meters."""

    x: float
    y: float
    z: float

    @property
    def frame(self) -> Frame:
        return FRAME_ECEF

    def to_array(self) -> NDArray[np.float64]:
        return np.array(self, dtype=np.float64)


class EnuPoint(NamedTuple):
    """ENU position in meters, relative to a reference geodetic point."""

    east: float
    north: float
    up: float

    @property
    def frame(self) -> Frame:
        return FRAME_ENU

    def to_array(self) -> NDArray[np.float64]:
        return np.array(self, dtype=np.float64)
