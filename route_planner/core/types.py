"""
Core data types for the route planner.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Generic, List, Optional, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class GeoPoint(Generic[T]):
    """
    An immutable geographic coordinate in decimal degrees.

    ``data`` is an opaque payload owned by the caller. The sequencer moves it
    along with the coordinate and never looks inside.
    """
    latitude: float
    longitude: float
    data: Optional[T] = None

    def with_data(self, data: Any) -> 'GeoPoint':
        return replace(self, data=data)

    def as_param(self) -> str:
        """Format as 'latitude,longitude' for provider requests."""
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True)
class Place:
    """Caller metadata attached to a drop-off point."""
    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    type: Optional[str] = None
    order: Optional[int] = None


@dataclass(frozen=True)
class Province:
    """A Thai province and its two-digit area code."""
    code: str
    name: str


@dataclass
class RoutePlan:
    """Data Transfer Object for an ordered tour and its driving route."""
    ordered_locations: List[GeoPoint] = field(default_factory=list)
    route: Dict[str, Any] = field(default_factory=dict)
    path: Optional[List[Any]] = None
    statistics: Dict[str, Any] = field(default_factory=dict)


def place_to_dict(point: GeoPoint) -> Dict[str, Any]:
    """
    Flatten a GeoPoint carrying a Place into the API's location shape.

    Metadata fields that are None are left out.
    """
    result: Dict[str, Any] = {'lat': point.latitude, 'lon': point.longitude}
    place = point.data
    if isinstance(place, Place):
        for key in ('id', 'name', 'address', 'type', 'order'):
            value = getattr(place, key)
            if value is not None:
                result[key] = value
    elif place is not None:
        logger.debug(f"Point payload of type {type(place).__name__} is not a Place; omitted from output.")
    return result
