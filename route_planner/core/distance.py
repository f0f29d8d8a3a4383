"""
Great-circle distance estimation.

Straight-line haversine distance is the proxy the sequencer uses to compare
candidate stops. Road distance is left to the routing provider.
"""
from typing import Sequence
import logging
import numpy as np

from route_planner.core.constants import EARTH_RADIUS_KM
from route_planner.core.types import GeoPoint

logger = logging.getLogger(__name__)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points
    on the earth (specified in decimal degrees).

    Coordinates are not validated; non-finite input yields NaN.

    Args:
        lat1, lon1: Coordinates of first point
        lat2, lon2: Coordinates of second point

    Returns:
        Distance in kilometers
    """
    # Convert decimal degrees to radians
    lat1, lon1, lat2, lon2 = map(np.radians, [lat1, lon1, lat2, lon2])

    dlon = lon2 - lon1
    dlat = lat2 - lat1
    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    # Rounding can push a just past 1.0 for antipodal points
    c = 2 * np.arcsin(np.sqrt(np.minimum(a, 1.0)))

    return float(c * EARTH_RADIUS_KM)


def haversine_distance(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """Distance in kilometers between two GeoPoints."""
    return haversine_km(point_a.latitude, point_a.longitude, point_b.latitude, point_b.longitude)


def distance_matrix(points: Sequence[GeoPoint]) -> np.ndarray:
    """
    Build a symmetric matrix of pairwise haversine distances.

    Args:
        points: Points in matrix order.

    Returns:
        2D numpy array (distances in km) with a zero diagonal.
    """
    num_points = len(points)
    if num_points == 0:
        return np.array([]).reshape(0, 0)

    matrix_km = np.zeros((num_points, num_points))
    for i in range(num_points):
        for j in range(i + 1, num_points):
            matrix_km[i, j] = matrix_km[j, i] = haversine_distance(points[i], points[j])

    return matrix_km
