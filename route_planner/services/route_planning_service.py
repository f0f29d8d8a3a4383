"""
Service that turns a set of drop-off points into an ordered, routed plan.
"""
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from route_planner.core.distance import haversine_distance
from route_planner.core.exceptions import LongdoAPIError, RouteValidationError
from route_planner.core.sequencer import NearestNeighborSequencer
from route_planner.core.types import GeoPoint, Place, RoutePlan
from route_planner.services.longdo_client import LongdoClient
from route_planner.settings import MAX_LOCATIONS, MIN_LOCATIONS
from route_planner.utils.helpers import format_route_for_display, tour_length_km

logger = logging.getLogger(__name__)


class RoutePlanningService:
    def __init__(self, client: Optional[LongdoClient] = None, sequencer: Optional[NearestNeighborSequencer] = None):
        """
        Initialize the route planning service.

        Args:
            client: Longdo client used for the driving route. If None, a default client is created.
            sequencer: Stop sequencer. If None, a haversine nearest-neighbor sequencer is used.
        """
        self.client = client or LongdoClient()
        self.sequencer = sequencer or NearestNeighborSequencer()

    @staticmethod
    def validate_points(points: Sequence[GeoPoint]) -> None:
        if points is None or len(points) < MIN_LOCATIONS:
            raise RouteValidationError(f"At least {MIN_LOCATIONS} locations are required")
        if len(points) > MAX_LOCATIONS:
            raise RouteValidationError(f"At most {MAX_LOCATIONS} locations are allowed")

    @staticmethod
    def number_stops(tour: Sequence[GeoPoint]) -> List[GeoPoint]:
        """
        Attach the 1-based visiting order to each stop.

        Payloads that are not a Place are left untouched.
        """
        numbered = []
        for position, point in enumerate(tour, start=1):
            if isinstance(point.data, Place):
                point = point.with_data(replace(point.data, order=position))
            elif point.data is None:
                point = point.with_data(Place(order=position))
            numbered.append(point)
        return numbered

    @staticmethod
    def extract_path(route_response: Dict[str, Any]) -> Optional[List[Any]]:
        """Pull the path geometry out of a Longdo route response, if present."""
        if not isinstance(route_response, dict):
            return None
        data = route_response.get('data')
        if isinstance(data, dict):
            return data.get('route')
        return None

    @staticmethod
    def build_statistics(tour: Sequence[GeoPoint], anchor: Optional[GeoPoint] = None) -> Dict[str, Any]:
        statistics: Dict[str, Any] = {
            'total_stops': len(tour),
            'straight_line_distance_km': tour_length_km(tour),
        }
        if anchor is not None and tour:
            statistics['distance_from_anchor_km'] = haversine_distance(anchor, tour[0])
        return statistics

    def sequence_stops(self, points: Sequence[GeoPoint], anchor: Optional[GeoPoint] = None) -> List[GeoPoint]:
        """Validate and order the stops without contacting the routing provider."""
        self.validate_points(points)
        return self.sequencer.sequence(points, anchor)

    def plan_route(self, points: Sequence[GeoPoint], anchor: Optional[GeoPoint] = None) -> RoutePlan:
        """
        Order the stops and fetch a driving route through them.

        Args:
            points: Drop-off points, each optionally carrying a Place.
            anchor: The traveler's current position, used to pick the first stop.

        Returns:
            RoutePlan with the numbered stops, raw route response, path and statistics.

        Raises:
            RouteValidationError: Fewer than MIN_LOCATIONS or more than MAX_LOCATIONS points.
            ConfigurationError: The Longdo API key is missing.
            LongdoAPIError: The routing provider failed.
        """
        tour = self.sequence_stops(points, anchor)
        logger.info(f"Planning route through {len(tour)} stops")
        logger.debug(f"Visiting order: {format_route_for_display(tour)}")

        route_response = self.client.route(
            start=tour[0],
            destination=tour[-1],
            waypoints=tour[1:-1]
        )
        if route_response is None:
            raise LongdoAPIError("Longdo route service returned an empty response")

        return RoutePlan(
            ordered_locations=self.number_stops(tour),
            route=route_response,
            path=self.extract_path(route_response),
            statistics=self.build_statistics(tour, anchor)
        )
