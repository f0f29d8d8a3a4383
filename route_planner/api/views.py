"""
API views for the route planner.

This module exposes route planning, place search and suggestion endpoints
that proxy to the Longdo Map API.
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.decorators import api_view
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi
import logging

from route_planner.core.exceptions import (
    ConfigurationError,
    LongdoAPIError,
    RouteValidationError,
    SearchValidationError,
)
from route_planner.core.types import place_to_dict
from route_planner.services.route_planning_service import RoutePlanningService
from route_planner.services.search_service import SearchService
from route_planner.api.serializers import (
    PlaceSerializer,
    RouteRequestSerializer,
    RouteResponseSerializer,
    SearchQuerySerializer,
    current_location_to_anchor,
    location_to_geo_point,
)

# Set up logging
logger = logging.getLogger(__name__)

API_KEY_NOT_CONFIGURED = "API key not configured"


class RouteView(APIView):
    """
    API view for ordering drop-off points and fetching a driving route.
    """

    @swagger_auto_schema(
        request_body=RouteRequestSerializer,
        responses={
            200: RouteResponseSerializer,
            400: "Bad Request - Fewer than 2 locations or invalid coordinates",
            500: "Internal Server Error - API key not configured or unexpected failure",
            502: "Bad Gateway - The routing provider failed"
        },
        operation_id="plan_route_create",
        operation_description="""Orders the given locations with a nearest-neighbor heuristic, starting from the
        location closest to `current_location` when provided, then requests a driving route through them.""",
        tags=['Route Planning']
    )
    def post(self, request, format=None):
        """
        POST endpoint for route planning.

        Args:
            request: HTTP request object with `locations` and optional `current_location`.
            format: Format of the response.

        Returns:
            Response object with ordered locations and the provider's route.
        """
        serializer = RouteRequestSerializer(data=request.data)

        if not serializer.is_valid():
            logger.error(f"RouteView validation error: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        points = [location_to_geo_point(loc) for loc in serializer.validated_data['locations']]
        anchor = current_location_to_anchor(serializer.validated_data.get('current_location'))

        try:
            plan = RoutePlanningService().plan_route(points, anchor)
        except RouteValidationError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except ConfigurationError:
            logger.error("Route requested but Longdo API key is not configured.")
            return Response({"error": API_KEY_NOT_CONFIGURED}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        except LongdoAPIError as e:
            logger.error(f"Route API error: {e}")
            return Response({"error": "Failed to calculate route"}, status=status.HTTP_502_BAD_GATEWAY)
        except Exception as e:
            logger.exception("Unexpected error during route planning: %s", str(e))
            return Response(
                {"error": "Failed to calculate route"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        response_data = {
            "ordered_locations": [place_to_dict(point) for point in plan.ordered_locations],
            "route": plan.route,
            "path": plan.path,
            "statistics": plan.statistics,
        }
        response_serializer = RouteResponseSerializer(data=response_data)
        if not response_serializer.is_valid():
            logger.error(f"RouteView response serialization error: {response_serializer.errors}")
            return Response(response_serializer.errors, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(response_serializer.data, status=status.HTTP_200_OK)


class _SearchBaseView(APIView):
    """Shared query validation and error mapping for search endpoints."""

    failure_message = "Failed to search locations"

    def _validated_query(self, request):
        serializer = SearchQuerySerializer(data=request.query_params)
        if not serializer.is_valid():
            logger.error(f"{type(self).__name__} validation error: {serializer.errors}")
            return None, Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)
        return serializer.validated_data, None

    def _handle_error(self, error):
        if isinstance(error, SearchValidationError):
            return Response({"error": str(error)}, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(error, ConfigurationError):
            return Response({"error": API_KEY_NOT_CONFIGURED}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
        if isinstance(error, LongdoAPIError):
            logger.error(f"{type(self).__name__} provider error: {error}")
            return Response({"error": self.failure_message}, status=status.HTTP_502_BAD_GATEWAY)
        logger.exception("Unexpected error in %s: %s", type(self).__name__, str(error))
        return Response({"error": self.failure_message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class SearchView(_SearchBaseView):
    """
    API view for keyword place search.
    """

    @swagger_auto_schema(
        query_serializer=SearchQuerySerializer,
        responses={
            200: PlaceSerializer(many=True),
            400: "Bad Request - Missing keyword or unknown area code",
            502: "Bad Gateway - The search provider failed"
        },
        operation_id="search_places_list",
        operation_description="Searches places by keyword, optionally scoped to a province area code.",
        tags=['Place Search']
    )
    def get(self, request, format=None):
        query, error_response = self._validated_query(request)
        if error_response is not None:
            return error_response

        try:
            places = SearchService().search(query['keyword'], area=query.get('area'), limit=query['limit'])
        except Exception as e:
            return self._handle_error(e)

        results = PlaceSerializer([place_to_dict(place) for place in places], many=True).data
        return Response(results, status=status.HTTP_200_OK)


class SuggestView(_SearchBaseView):
    """
    API view for keyword autocomplete.
    """

    failure_message = "Failed to get suggestions"

    @swagger_auto_schema(
        query_serializer=SearchQuerySerializer,
        responses={
            200: openapi.Response("Suggestion entries as returned by the provider."),
            400: "Bad Request - Missing keyword or unknown area code",
            502: "Bad Gateway - The search provider failed"
        },
        operation_id="suggest_places_list",
        operation_description="Returns autocomplete suggestions for a partial keyword.",
        tags=['Place Search']
    )
    def get(self, request, format=None):
        query, error_response = self._validated_query(request)
        if error_response is not None:
            return error_response

        try:
            suggestions = SearchService().suggest(query['keyword'], area=query.get('area'))
        except Exception as e:
            return self._handle_error(e)

        return Response(suggestions, status=status.HTTP_200_OK)


@swagger_auto_schema(
    method='get',
    operation_id="health_check_get",
    operation_description="Checks if the route planner API is running.",
    responses={
        200: openapi.Response(
            description="API is healthy.",
            examples={"application/json": {"status": "healthy"}}
        )
    },
    tags=['Health Check']
)
@api_view(['GET'])
def health_check(request):
    """
    Health check endpoint to verify the API is running.
    """
    return Response({"status": "healthy"}, status=status.HTTP_200_OK)
