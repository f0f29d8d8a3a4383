"""
Client for the Longdo Map web services.

This module wraps the place search, suggest and driving route endpoints
used by the planner. Transient failures are retried with exponential backoff.
"""
import logging
import time  # For retry delays
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import requests
from requests.exceptions import (
    HTTPError,
    InvalidSchema,
    InvalidURL,
    JSONDecodeError,
    MissingSchema,
    RequestException,
)

from route_planner.core.exceptions import ConfigurationError, LongdoAPIError
from route_planner.core.types import GeoPoint
from route_planner.settings import (
    BACKOFF_FACTOR,
    DEFAULT_SEARCH_LIMIT,
    LONGDO_API_KEY,
    LONGDO_ROUTE_API_URL,
    LONGDO_SEARCH_API_URL,
    LONGDO_SUGGEST_API_URL,
    MAX_RETRIES,
    REQUEST_TIMEOUT_SECONDS,
    RETRY_DELAY_SECONDS,
    ROUTE_LOCALE,
    ROUTE_MODE,
    ROUTE_TYPE,
    SUGGEST_LIMIT,
)

logger = logging.getLogger(__name__)

Params = Union[Dict[str, Any], List[Tuple[str, str]]]


class LongdoClient:
    """
    Thin HTTP client for the Longdo search and routing APIs.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        search_url: str = LONGDO_SEARCH_API_URL,
        suggest_url: str = LONGDO_SUGGEST_API_URL,
        route_url: str = LONGDO_ROUTE_API_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS
    ):
        """
        Initialize the client.

        Args:
            api_key: Longdo API key. Defaults to LONGDO_API_KEY from settings.
            search_url: Place search endpoint.
            suggest_url: Autocomplete endpoint.
            route_url: Driving route endpoint.
            timeout: Per-request timeout in seconds.
        """
        self.api_key = LONGDO_API_KEY if api_key is None else api_key
        self.search_url = search_url
        self.suggest_url = suggest_url
        self.route_url = route_url
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("API key not configured")
        return self.api_key

    def _make_api_request(self, url: str, params: Params) -> Dict[str, Any]:
        """
        Send a GET request with retry logic.

        Connection errors, timeouts and HTTP 429 are retried with exponential
        backoff. Other HTTP errors, malformed URLs and undecodable bodies fail
        immediately.

        Raises:
            LongdoAPIError: If no usable response was obtained.
        """
        for attempt in range(MAX_RETRIES):
            try:
                response = requests.get(url, params=params, timeout=self.timeout)
                response.raise_for_status()  # Raises HTTPError for 4XX/5XX
                return response.json()
            except HTTPError as http_err:
                status_code = http_err.response.status_code if http_err.response is not None else None
                logger.error(f"HTTP error from Longdo API: {http_err} - Status: {status_code}")
                if status_code == 429 and attempt < MAX_RETRIES - 1:
                    sleep_time = RETRY_DELAY_SECONDS * (BACKOFF_FACTOR ** attempt)
                    logger.info(f"Rate limit exceeded. Retrying in {sleep_time:.2f} seconds...")
                    time.sleep(sleep_time)
                    continue
                raise LongdoAPIError(f"Longdo API returned HTTP {status_code}", status_code=status_code) from http_err
            except JSONDecodeError as json_err:
                logger.error(f"Failed to decode Longdo API response: {json_err}")
                raise LongdoAPIError("Longdo API returned invalid JSON") from json_err
            except (MissingSchema, InvalidSchema, InvalidURL) as url_err:
                logger.error(f"Invalid Longdo API URL {url}: {url_err}")
                raise LongdoAPIError(f"Invalid Longdo API URL: {url}") from url_err
            except RequestException as req_err:  # ConnectionError, Timeout, etc.
                logger.warning(f"Request to Longdo API failed: {req_err}")
                if attempt < MAX_RETRIES - 1:
                    sleep_time = RETRY_DELAY_SECONDS * (BACKOFF_FACTOR ** attempt)
                    logger.info(f"Retrying in {sleep_time:.2f} seconds...")
                    time.sleep(sleep_time)
                    continue
                logger.error(f"Max retries reached for Longdo API request: {req_err}")
                raise LongdoAPIError(f"Longdo API request failed: {req_err}") from req_err

        raise LongdoAPIError(f"Failed to fetch data from {url} after {MAX_RETRIES} attempts")

    def search(self, keyword: str, area: Optional[str] = None, limit: int = DEFAULT_SEARCH_LIMIT) -> Dict[str, Any]:
        """
        Search places by keyword.

        Args:
            keyword: Free-text query.
            area: Optional province area code to scope the search.
            limit: Maximum number of results.

        Returns:
            Raw JSON response from mapsearch/json/search.
        """
        params = {'keyword': keyword, 'key': self._require_api_key(), 'limit': str(limit)}
        if area:
            params['area'] = area

        logger.info(f"Searching Longdo for '{keyword}' (area={area}, limit={limit})")
        return self._make_api_request(self.search_url, params)

    def suggest(self, keyword: str, area: Optional[str] = None, limit: int = SUGGEST_LIMIT) -> Dict[str, Any]:
        """Fetch autocomplete suggestions for a partial keyword."""
        params = {'keyword': keyword, 'key': self._require_api_key(), 'limit': str(limit)}
        if area:
            params['area'] = area

        return self._make_api_request(self.suggest_url, params)

    @staticmethod
    def build_route_params(
        api_key: str,
        start: GeoPoint,
        destination: GeoPoint,
        waypoints: Sequence[GeoPoint] = ()
    ) -> List[Tuple[str, str]]:
        """
        Build the query for a route request.

        Returned as a list of pairs because 'wp' repeats once per waypoint,
        in visiting order.
        """
        params = [
            ('key', api_key),
            ('type', ROUTE_TYPE),
            ('mode', ROUTE_MODE),
            ('locale', ROUTE_LOCALE),
            ('s', start.as_param()),
        ]
        params.extend(('wp', waypoint.as_param()) for waypoint in waypoints)
        params.append(('d', destination.as_param()))
        return params

    def route(
        self,
        start: GeoPoint,
        destination: GeoPoint,
        waypoints: Sequence[GeoPoint] = ()
    ) -> Dict[str, Any]:
        """
        Request a driving route from start through waypoints to destination.

        Returns:
            Raw JSON response from RouteService/json/route.
        """
        params = self.build_route_params(self._require_api_key(), start, destination, waypoints)
        logger.info(f"Requesting Longdo route with {len(waypoints)} waypoints")
        return self._make_api_request(self.route_url, params)
