"""
URL configuration for the route planner API.
"""
from django.urls import path
from route_planner.api.views import RouteView, SearchView, SuggestView, health_check

app_name = 'route_planner'

urlpatterns = [
    # Health check endpoint
    path('health/', health_check, name='health_check_get'),

    # Route planning
    path('route/', RouteView.as_view(), name='plan_route_create'),

    # Place search proxies
    path('search/', SearchView.as_view(), name='search_places_list'),
    path('suggest/', SuggestView.as_view(), name='suggest_places_list'),
]
