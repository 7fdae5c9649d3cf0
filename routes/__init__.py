"""
Routes domain package.

Public API:
- Domain models: Route, Waypoint, SampledPosition, PuvType
- Catalog: ROUTES, get_route, routes_for_types
- Geo-Sample Generator: sample_near_route, place_on_route, initial_bearing
"""
from .models import PuvType, Route, SampledPosition, Waypoint
from .catalog import ROUTES, get_route, routes_for_types
from .geo import initial_bearing, place_on_route, sample_near_route

__all__ = [
    "PuvType",
    "Route",
    "SampledPosition",
    "Waypoint",
    "ROUTES",
    "get_route",
    "routes_for_types",
    "initial_bearing",
    "place_on_route",
    "sample_near_route",
]
