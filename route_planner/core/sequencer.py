"""
Nearest-neighbor tour construction.

This module orders a set of drop-off points into a visiting sequence by
repeatedly walking to the closest point not yet visited. It is a heuristic:
there is no backtracking or 2-opt pass, so tours can be noticeably longer
than optimal on unlucky layouts. Running time is O(n^2) distance evaluations.
"""
from typing import Callable, List, Optional, Sequence, Set
import logging

from route_planner.core.constants import DEFAULT_START_INDEX
from route_planner.core.distance import haversine_distance
from route_planner.core.types import GeoPoint

logger = logging.getLogger(__name__)

DistanceFunction = Callable[[GeoPoint, GeoPoint], float]


class NearestNeighborSequencer:
    """
    Greedy nearest-neighbor sequencer.

    Ties are always resolved in favour of the lowest input index, so the same
    input produces the same tour on every run.
    """

    def __init__(self, distance_function: Optional[DistanceFunction] = None):
        """
        Initialize the sequencer.

        Args:
            distance_function: Distance between two GeoPoints in km.
                Defaults to the haversine great-circle distance.
        """
        self.distance_function = distance_function or haversine_distance

    def find_start_index(self, points: Sequence[GeoPoint], anchor: Optional[GeoPoint] = None) -> int:
        """
        Pick the first stop of the tour.

        Args:
            points: Candidate stops.
            anchor: The traveler's current position, if known.

        Returns:
            Index of the point nearest the anchor, or 0 without an anchor.
        """
        if anchor is None:
            return DEFAULT_START_INDEX

        start_index = DEFAULT_START_INDEX
        min_distance = float('inf')
        for i, point in enumerate(points):
            distance = self.distance_function(anchor, point)
            if distance < min_distance:
                min_distance = distance
                start_index = i

        return start_index

    def find_nearest_unvisited(self, points: Sequence[GeoPoint], current_index: int, visited: Set[int]) -> int:
        """
        Find the unvisited point closest to ``points[current_index]``.

        When no distance compares smaller than infinity (NaN coordinates), the
        first unvisited index is returned so the tour still completes.
        """
        current = points[current_index]
        nearest_index = -1
        min_distance = float('inf')
        first_unvisited = -1

        for i, point in enumerate(points):
            if i in visited:
                continue
            if first_unvisited == -1:
                first_unvisited = i
            distance = self.distance_function(current, point)
            if distance < min_distance:
                min_distance = distance
                nearest_index = i

        if nearest_index == -1:
            logger.warning(
                f"No comparable distance from point {current_index}; "
                f"falling back to first unvisited point {first_unvisited}."
            )
            return first_unvisited

        return nearest_index

    def sequence(self, points: Sequence[GeoPoint], anchor: Optional[GeoPoint] = None) -> List[GeoPoint]:
        """
        Order points into a nearest-neighbor visiting sequence.

        Args:
            points: Stops to visit. Payloads travel with their coordinates.
            anchor: Optional current position. Only used to choose the first
                stop; it never appears in the output.

        Returns:
            A permutation of ``points`` in visiting order.
        """
        num_points = len(points)
        if num_points <= 1:
            return list(points)

        current_index = self.find_start_index(points, anchor)
        tour = [points[current_index]]
        visited = {current_index}

        while len(visited) < num_points:
            current_index = self.find_nearest_unvisited(points, current_index, visited)
            tour.append(points[current_index])
            visited.add(current_index)

        logger.debug(f"Sequenced {num_points} points (anchor={'yes' if anchor is not None else 'no'}).")
        return tour


def sequence(points: Sequence[GeoPoint], anchor: Optional[GeoPoint] = None) -> List[GeoPoint]:
    """Order points with the default haversine sequencer."""
    return NearestNeighborSequencer().sequence(points, anchor)
