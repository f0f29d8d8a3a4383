"""
Helper functions for the route planner module.
"""
import logging
from typing import Sequence

import numpy as np

from route_planner.core.distance import distance_matrix
from route_planner.core.types import GeoPoint, Place

logger = logging.getLogger(__name__)


def tour_length_km(tour: Sequence[GeoPoint]) -> float:
    """
    Total straight-line length of a tour, following stops in order.

    Args:
        tour: Stops in visiting order.

    Returns:
        Sum of consecutive haversine distances in km (0.0 for fewer than 2 stops).
    """
    if len(tour) < 2:
        return 0.0

    matrix = distance_matrix(tour)
    indices = np.arange(len(tour) - 1)
    return float(matrix[indices, indices + 1].sum())


def format_route_for_display(tour: Sequence[GeoPoint]) -> str:
    """
    Format a tour for display, using place names where available.

    Args:
        tour: Stops in visiting order.

    Returns:
        Formatted route string.
    """
    labels = []
    for point in tour:
        place = point.data
        if isinstance(place, Place) and (place.name or place.id):
            labels.append(place.name or place.id)
        else:
            labels.append(f"({point.latitude:.5f}, {point.longitude:.5f})")
    return " → ".join(labels)
