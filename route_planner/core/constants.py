"""
Constants shared by the route planner core.
"""

# Mean radius of the Earth used by the haversine formula
EARTH_RADIUS_KM = 6371.0

# Index used when there is no anchor to pick a starting stop
DEFAULT_START_INDEX = 0
