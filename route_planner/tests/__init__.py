import os
import django

# Configure Django settings before any tests are run
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'route_planner.tests.test_settings')
django.setup()

# # Running the suite
# python -m pytest route_planner/tests/
# python -m pytest route_planner/tests/ --ds route_planner.tests.test_settings
