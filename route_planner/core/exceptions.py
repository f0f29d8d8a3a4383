"""
Exceptions raised by the route planner services.
"""


class RoutePlannerError(Exception):
    """Base class for route planner errors."""


class ConfigurationError(RoutePlannerError):
    """A required setting, such as the Longdo API key, is missing."""


class LongdoAPIError(RoutePlannerError):
    """The Longdo Map API could not be reached or returned an unusable response."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class RouteValidationError(RoutePlannerError, ValueError):
    """A route request failed validation before sequencing."""


class SearchValidationError(RoutePlannerError, ValueError):
    """A search or suggest request failed validation."""
