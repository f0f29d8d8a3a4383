"""
Serializers for the route planner API.

This module provides serializers for converting between API requests/responses
and the internal GeoPoint/Place structures used by the route planner.
"""
import logging
import math

from rest_framework import serializers

from route_planner.core.provinces import is_known_area_code
from route_planner.core.types import GeoPoint, Place
from route_planner.settings import DEFAULT_SEARCH_LIMIT, MAX_LOCATIONS, MAX_SEARCH_LIMIT, MIN_LOCATIONS

logger = logging.getLogger(__name__)


class CoordinateSerializer(serializers.Serializer):
    """Base serializer for a latitude/longitude pair."""
    lat = serializers.FloatField(min_value=-90.0, max_value=90.0, help_text="Latitude in decimal degrees.")
    lon = serializers.FloatField(min_value=-180.0, max_value=180.0, help_text="Longitude in decimal degrees.")

    def validate(self, attrs):
        for key in ('lat', 'lon'):
            if not math.isfinite(attrs[key]):
                raise serializers.ValidationError({key: "Coordinate must be a finite number."})
        return attrs


class LocationSerializer(CoordinateSerializer):
    """Serializer for a drop-off location."""
    id = serializers.CharField(max_length=100, required=False, allow_null=True, help_text="Provider place identifier (optional).")
    name = serializers.CharField(max_length=255, required=False, allow_null=True, allow_blank=True, help_text="Display name (optional).")
    address = serializers.CharField(max_length=500, required=False, allow_null=True, allow_blank=True, help_text="Street address (optional).")


class CurrentLocationSerializer(CoordinateSerializer):
    """Serializer for the traveler's current position."""
    accuracy = serializers.FloatField(required=False, allow_null=True, min_value=0.0,
                                      help_text="GPS accuracy in meters (optional, informational only).")


class RouteRequestSerializer(serializers.Serializer):
    """Serializer for route planning requests."""
    locations = LocationSerializer(many=True, help_text=f"Drop-off points to visit ({MIN_LOCATIONS} to {MAX_LOCATIONS}).")
    current_location = CurrentLocationSerializer(required=False, allow_null=True,
                                                 help_text="Current position used to choose the first stop (optional).")

    def validate_locations(self, value):
        if len(value) < MIN_LOCATIONS:
            raise serializers.ValidationError(f"At least {MIN_LOCATIONS} locations are required")
        if len(value) > MAX_LOCATIONS:
            raise serializers.ValidationError(f"At most {MAX_LOCATIONS} locations are allowed")
        return value


class OrderedLocationSerializer(serializers.Serializer):
    """Serializer for a stop in the ordered tour."""
    lat = serializers.FloatField()
    lon = serializers.FloatField()
    id = serializers.CharField(required=False)
    name = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    order = serializers.IntegerField(help_text="1-based position in the visiting order.")


class RouteResponseSerializer(serializers.Serializer):
    """Serializer for route planning responses."""
    ordered_locations = OrderedLocationSerializer(many=True, help_text="Stops in visiting order.")
    route = serializers.JSONField(help_text="Raw response from the Longdo route service.")
    path = serializers.JSONField(required=False, allow_null=True, help_text="Path geometry extracted from the route response, if present.")
    statistics = serializers.DictField(help_text="Stop count and straight-line distances in km.")


class SearchQuerySerializer(serializers.Serializer):
    """Serializer for search/suggest query parameters."""
    keyword = serializers.CharField(max_length=255, help_text="Search keyword.")
    area = serializers.CharField(max_length=10, required=False, allow_blank=True,
                                 help_text="Province area code to scope the search, e.g. '10' for Bangkok (optional).")
    limit = serializers.IntegerField(default=DEFAULT_SEARCH_LIMIT, min_value=1, max_value=MAX_SEARCH_LIMIT,
                                     help_text="Maximum number of results.")

    def validate_keyword(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Keyword is required")
        return value

    def validate_area(self, value):
        value = value.strip()
        if value and not is_known_area_code(value):
            raise serializers.ValidationError(f"Unknown area code: {value}")
        return value or None


class PlaceSerializer(serializers.Serializer):
    """Serializer for a search result."""
    lat = serializers.FloatField()
    lon = serializers.FloatField()
    id = serializers.CharField(required=False)
    name = serializers.CharField(required=False, allow_blank=True)
    address = serializers.CharField(required=False, allow_blank=True)
    type = serializers.CharField(required=False, allow_blank=True)


def location_to_geo_point(data) -> GeoPoint:
    """Build a GeoPoint[Place] from validated location data."""
    place = Place(
        id=data.get('id'),
        name=data.get('name'),
        address=data.get('address'),
    )
    return GeoPoint(latitude=data['lat'], longitude=data['lon'], data=place)


def current_location_to_anchor(data):
    """Build the anchor GeoPoint from validated current-location data, or None."""
    if not data:
        return None
    return GeoPoint(latitude=data['lat'], longitude=data['lon'])
