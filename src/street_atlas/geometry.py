"""Great-circle geometry on (lon, lat) pairs in decimal degrees.

All distances use the haversine formula on a sphere of radius
EARTH_RADIUS_MILES. Argument order is always longitude first.
"""

import math

import numpy as np

# Mean Earth radius in miles
EARTH_RADIUS_MILES = 3963.0


def distance(lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> float:
    """Great-circle distance in miles between two points."""
    phi1 = math.radians(lat_a)
    phi2 = math.radians(lat_b)
    dphi = math.radians(lat_b - lat_a)
    dlambda = math.radians(lon_b - lon_a)

    a = math.sin(dphi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def bearing(lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> float:
    """Initial great-circle bearing from A to B in degrees.

    The result is the raw atan2 angle in (-180, 180], measured clockwise
    from north. Use normalize_bearing() for a [0, 360) compass value.
    """
    phi1 = math.radians(lat_a)
    phi2 = math.radians(lat_b)
    dlambda = math.radians(lon_b - lon_a)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlambda)
    return math.degrees(math.atan2(y, x))


def normalize_bearing(degrees: float) -> float:
    """Map any angle onto [0, 360)."""
    return degrees % 360.0


def to_unit_vectors(lons: np.ndarray, lats: np.ndarray) -> np.ndarray:
    """Project lon/lat arrays onto the unit sphere as an (n, 3) array.

    Euclidean (chord) distance between two projected points grows
    strictly with their great-circle distance.
    """
    lam = np.radians(np.asarray(lons, dtype=np.float64))
    phi = np.radians(np.asarray(lats, dtype=np.float64))
    cos_phi = np.cos(phi)
    return np.column_stack((cos_phi * np.cos(lam), cos_phi * np.sin(lam), np.sin(phi)))
