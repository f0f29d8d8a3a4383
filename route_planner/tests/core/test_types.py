import dataclasses
import unittest

from route_planner.core.types import GeoPoint, Place, RoutePlan, place_to_dict


class TestGeoPoint(unittest.TestCase):
    def test_is_immutable(self):
        point = GeoPoint(13.75, 100.5)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            point.latitude = 0.0

    def test_equality_includes_payload(self):
        self.assertEqual(GeoPoint(1.0, 2.0), GeoPoint(1.0, 2.0))
        self.assertNotEqual(GeoPoint(1.0, 2.0, data='a'), GeoPoint(1.0, 2.0, data='b'))

    def test_with_data_returns_new_point(self):
        point = GeoPoint(1.0, 2.0, data='a')
        updated = point.with_data('b')
        self.assertEqual(point.data, 'a')
        self.assertEqual(updated.data, 'b')
        self.assertEqual((updated.latitude, updated.longitude), (1.0, 2.0))

    def test_as_param(self):
        self.assertEqual(GeoPoint(13.7563, 100.5018).as_param(), "13.7563,100.5018")


class TestPlaceToDict(unittest.TestCase):
    def test_flattens_place_and_skips_none(self):
        point = GeoPoint(13.7563, 100.5018, data=Place(id='A1', name='Siam', order=2))
        self.assertEqual(
            place_to_dict(point),
            {'lat': 13.7563, 'lon': 100.5018, 'id': 'A1', 'name': 'Siam', 'order': 2}
        )

    def test_point_without_payload(self):
        self.assertEqual(place_to_dict(GeoPoint(1.0, 2.0)), {'lat': 1.0, 'lon': 2.0})

    def test_foreign_payload_is_omitted(self):
        self.assertEqual(place_to_dict(GeoPoint(1.0, 2.0, data={'x': 1})), {'lat': 1.0, 'lon': 2.0})


class TestRoutePlan(unittest.TestCase):
    def test_defaults(self):
        plan = RoutePlan()
        self.assertEqual(plan.ordered_locations, [])
        self.assertEqual(plan.route, {})
        self.assertIsNone(plan.path)
        self.assertEqual(plan.statistics, {})


if __name__ == '__main__':
    unittest.main()
