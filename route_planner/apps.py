from django.apps import AppConfig


class RoutePlannerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'route_planner'
    verbose_name = 'Delivery Route Planner'
