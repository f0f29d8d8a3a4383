from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase, APIClient
from unittest.mock import patch

from route_planner.core.exceptions import ConfigurationError, LongdoAPIError
from route_planner.core.types import GeoPoint, Place, RoutePlan


class RouteViewTests(APITestCase):
    def setUp(self):
        self.client = APIClient()
        self.route_url = reverse('route_planner:plan_route_create')

        self.locations = [
            {"id": "bkk", "name": "Bangkok", "lat": 13.7563, "lon": 100.5018, "address": "Bangkok"},
            {"id": "cnx", "name": "Chiang Mai", "lat": 18.7883, "lon": 98.9853},
            {"id": "pty", "name": "Pattaya", "lat": 13.3611, "lon": 100.9847},
        ]
        self.valid_request_data = {
            "locations": self.locations,
            "current_location": {"lat": 13.75, "lon": 100.50, "accuracy": 12.5},
        }
        self.longdo_response = {"data": {"route": [[100.5018, 13.7563], [100.9847, 13.3611]]}, "meta": {}}

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_success(self, mock_route):
        mock_route.return_value = self.longdo_response

        response = self.client.post(self.route_url, self.valid_request_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ordered = response.data['ordered_locations']
        self.assertEqual([loc['id'] for loc in ordered], ['bkk', 'pty', 'cnx'])
        self.assertEqual([loc['order'] for loc in ordered], [1, 2, 3])
        self.assertEqual(ordered[0]['address'], 'Bangkok')
        self.assertEqual(response.data['route'], self.longdo_response)
        self.assertEqual(response.data['path'], self.longdo_response['data']['route'])
        self.assertEqual(response.data['statistics']['total_stops'], 3)

        _, kwargs = mock_route.call_args
        self.assertEqual(kwargs['start'].data.id, 'bkk')
        self.assertEqual([wp.data.id for wp in kwargs['waypoints']], ['pty'])
        self.assertEqual(kwargs['destination'].data.id, 'cnx')

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_without_current_location_starts_at_first(self, mock_route):
        mock_route.return_value = self.longdo_response

        response = self.client.post(self.route_url, {"locations": self.locations}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['ordered_locations'][0]['id'], 'bkk')
        self.assertNotIn('distance_from_anchor_km', response.data['statistics'])

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_with_null_current_location(self, mock_route):
        mock_route.return_value = self.longdo_response
        data = {"locations": self.locations, "current_location": None}

        response = self.client.post(self.route_url, data, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_minimal_locations(self, mock_route):
        mock_route.return_value = {}
        data = {"locations": [{"lat": 13.0, "lon": 100.0}, {"lat": 14.0, "lon": 100.0}]}

        response = self.client.post(self.route_url, data, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['ordered_locations'][0], {"lat": 13.0, "lon": 100.0, "order": 1})
        self.assertIsNone(response.data['path'])

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_requires_two_locations(self, mock_route):
        response = self.client.post(self.route_url, {"locations": self.locations[:1]}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('locations', response.data)
        self.assertIn("At least 2 locations are required", str(response.data['locations']))
        mock_route.assert_not_called()

    def test_route_missing_locations(self):
        response = self.client.post(self.route_url, {}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('locations', response.data)

    def test_route_rejects_out_of_range_coordinates(self):
        data = {"locations": [{"lat": 91.0, "lon": 100.0}, {"lat": 13.0, "lon": 181.0}]}
        response = self.client.post(self.route_url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_route_rejects_missing_coordinates(self):
        data = {"locations": [{"name": "Nowhere"}, {"lat": 13.0, "lon": 100.0}]}
        response = self.client.post(self.route_url, data, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @patch('route_planner.services.longdo_client.LONGDO_API_KEY', None)
    def test_route_without_api_key(self):
        response = self.client.post(self.route_url, self.valid_request_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "API key not configured"})

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_provider_failure(self, mock_route):
        mock_route.side_effect = LongdoAPIError("Longdo API returned HTTP 503", status_code=503)

        response = self.client.post(self.route_url, self.valid_request_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data, {"error": "Failed to calculate route"})

    @patch('route_planner.services.longdo_client.LongdoClient.route')
    def test_route_null_provider_body(self, mock_route):
        mock_route.return_value = None

        response = self.client.post(self.route_url, self.valid_request_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data, {"error": "Failed to calculate route"})

    @patch('route_planner.api.views.RoutePlanningService.plan_route')
    def test_route_unexpected_error(self, mock_plan_route):
        mock_plan_route.side_effect = RuntimeError("boom")

        response = self.client.post(self.route_url, self.valid_request_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"error": "Failed to calculate route"})

    @patch('route_planner.api.views.RoutePlanningService.plan_route')
    def test_route_passes_anchor_to_service(self, mock_plan_route):
        mock_plan_route.return_value = RoutePlan(
            ordered_locations=[GeoPoint(13.0, 100.0, data=Place(order=1)), GeoPoint(14.0, 100.0, data=Place(order=2))],
            route={},
            statistics={'total_stops': 2}
        )

        response = self.client.post(self.route_url, self.valid_request_data, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        points, anchor = mock_plan_route.call_args[0]
        self.assertEqual(len(points), 3)
        self.assertEqual(points[0], GeoPoint(13.7563, 100.5018, data=Place(id='bkk', name='Bangkok', address='Bangkok')))
        self.assertEqual(anchor, GeoPoint(13.75, 100.50))


class HealthCheckTests(APITestCase):
    def test_health_check(self):
        response = self.client.get(reverse('route_planner:health_check_get'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"status": "healthy"})
