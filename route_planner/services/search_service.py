"""
Service for place search and autocomplete.

Validates the keyword and province area code, then normalizes Longdo search
results into GeoPoints carrying Place metadata.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from route_planner.core.exceptions import SearchValidationError
from route_planner.core.provinces import is_known_area_code
from route_planner.core.types import GeoPoint, Place
from route_planner.services.longdo_client import LongdoClient
from route_planner.settings import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT

logger = logging.getLogger(__name__)


class SearchService:
    """
    Keyword search and suggestions backed by the Longdo search API.
    """

    def __init__(self, client: Optional[LongdoClient] = None):
        self.client = client or LongdoClient()

    @staticmethod
    def validate_query(keyword: Optional[str], area: Optional[str] = None) -> str:
        """
        Check a search query before it is sent upstream.

        Returns:
            The stripped keyword.

        Raises:
            SearchValidationError: Missing keyword or unknown area code.
        """
        keyword = (keyword or '').strip()
        if not keyword:
            raise SearchValidationError("Keyword is required")
        if area and not is_known_area_code(area):
            raise SearchValidationError(f"Unknown area code: {area}")
        return keyword

    @staticmethod
    def _to_point(item: Dict[str, Any]) -> Optional[GeoPoint]:
        try:
            latitude = float(item['lat'])
            longitude = float(item['lon'])
        except (KeyError, TypeError, ValueError):
            return None
        if not (math.isfinite(latitude) and math.isfinite(longitude)):
            return None

        item_id = item.get('id')
        place = Place(
            id=str(item_id) if item_id is not None else None,
            name=item.get('name'),
            address=item.get('address'),
            type=item.get('type'),
        )
        return GeoPoint(latitude=latitude, longitude=longitude, data=place)

    def search(self, keyword: str, area: Optional[str] = None, limit: int = DEFAULT_SEARCH_LIMIT) -> List[GeoPoint]:
        """
        Search for places matching a keyword.

        Args:
            keyword: Free-text query.
            area: Optional province area code.
            limit: Maximum number of results, clamped to 1..MAX_SEARCH_LIMIT.

        Returns:
            GeoPoints carrying Place metadata. Results without usable
            coordinates are dropped.
        """
        keyword = self.validate_query(keyword, area)
        limit = max(1, min(int(limit), MAX_SEARCH_LIMIT))

        response = self.client.search(keyword, area=area, limit=limit)
        items = (response.get('data') or []) if isinstance(response, dict) else []

        results = []
        skipped = 0
        for item in items:
            point = self._to_point(item) if isinstance(item, dict) else None
            if point is None:
                skipped += 1
                continue
            results.append(point)

        if skipped:
            logger.warning(f"Skipped {skipped} search results without valid coordinates.")
        logger.info(f"Search for '{keyword}' returned {len(results)} places")
        return results

    def suggest(self, keyword: str, area: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return the provider's suggestion entries for a partial keyword."""
        keyword = self.validate_query(keyword, area)
        response = self.client.suggest(keyword, area=area)
        if not isinstance(response, dict):
            return []
        return response.get('data', []) or []
