import os
import sys
import logging

from route_planner.utils.env_loader import load_env_from_file

logger = logging.getLogger(__name__)

# Try the app directory first, then the repository root
env_paths = [
    os.path.join(os.path.dirname(__file__), 'env_var.env'),
    os.path.join(os.path.dirname(os.path.dirname(__file__)), 'env_var.env'),
]

for path in env_paths:
    if load_env_from_file(path):
        break

# Determine if we're in test mode
TESTING = 'test' in sys.argv or 'pytest' in sys.modules

# Longdo Map API configuration
LONGDO_API_KEY = os.getenv('LONGDO_API_KEY')
if not LONGDO_API_KEY:
    if TESTING:
        LONGDO_API_KEY = "test_dummy_key_for_unit_tests"
        logger.warning("Using dummy Longdo API key for testing.")
    else:
        # Views answer 500 "API key not configured" until the key is set
        logger.warning("LONGDO_API_KEY is not set. Search and routing requests will be rejected.")

LONGDO_SEARCH_API_URL = os.getenv(
    'LONGDO_SEARCH_API_URL', 'https://search.longdo.com/mapsearch/json/search'
)
LONGDO_SUGGEST_API_URL = os.getenv(
    'LONGDO_SUGGEST_API_URL', 'https://search.longdo.com/mapsearch/json/suggest'
)
LONGDO_ROUTE_API_URL = os.getenv(
    'LONGDO_ROUTE_API_URL', 'https://api.longdo.com/RouteService/json/route'
)

# API request settings
MAX_RETRIES = 3
BACKOFF_FACTOR = 2  # Exponential backoff
RETRY_DELAY_SECONDS = 1
REQUEST_TIMEOUT_SECONDS = 10

# Route request parameters
ROUTE_TYPE = 't'     # Traffic-aware routing
ROUTE_MODE = '1'     # Driving
ROUTE_LOCALE = 'th'

# Request limits
MIN_LOCATIONS = 2
MAX_LOCATIONS = 100
DEFAULT_SEARCH_LIMIT = 20
MAX_SEARCH_LIMIT = 100
SUGGEST_LIMIT = 10
