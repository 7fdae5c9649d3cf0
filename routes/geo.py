"""
Purpose: Geo-Sample Generator.
What it does:
- Scatters a simulated commuter somewhere close to a route (sample_near_route).
- Parks a simulated vehicle on a route waypoint, facing the next waypoint
  (place_on_route), using the great-circle initial bearing.

Offsets are plain degree jitter (flat-earth), good enough for map markers but
not geodesically exact: the longitude jitter is not scaled by cos(latitude).
"""

from __future__ import annotations

import math
import random
from typing import Optional, Tuple

from .models import Route, SampledPosition, Waypoint

# 0.001 degrees either side is roughly 100 m around these latitudes
DEFAULT_JITTER_DEGREES = 0.001


def _require_waypoints(route: Route) -> None:
    if not route.waypoints:
        raise ValueError(f"Route {route.route_code!r} has no waypoints.")


def initial_bearing(start: Waypoint, end: Waypoint) -> float:
    """
    Great-circle initial bearing from `start` toward `end`, in degrees
    clockwise from true north, normalized to [0, 360).
    """
    phi1 = math.radians(start.lat)
    phi2 = math.radians(end.lat)
    delta_lambda = math.radians(end.lng - start.lng)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    theta = math.atan2(y, x)

    # shift before the modulo so tiny negative angles land on 0, never 360
    return (math.degrees(theta) + 360.0) % 360.0


def sample_near_route(
    route: Route,
    rng: Optional[random.Random] = None,
    jitter_degrees: float = DEFAULT_JITTER_DEGREES,
) -> SampledPosition:
    """
    Pick a waypoint uniformly at random and nudge it by an independent uniform
    offset in [-jitter_degrees, +jitter_degrees] on each axis.

    Raises:
        ValueError: the route has no waypoints.
    """
    _require_waypoints(route)
    rng = rng or random

    waypoint = rng.choice(route.waypoints)
    lat_offset = rng.uniform(-jitter_degrees, jitter_degrees)
    lng_offset = rng.uniform(-jitter_degrees, jitter_degrees)

    return SampledPosition(
        lat=waypoint.lat + lat_offset,
        lng=waypoint.lng + lng_offset,
        route_id=route.id,
        puv_type=route.puv_type,
    )


def place_on_route(route: Route, rng: Optional[random.Random] = None) -> Tuple[Waypoint, float]:
    """
    Place a vehicle exactly on a random waypoint and point it at the next one.

    The last waypoint faces the first. A single-waypoint route has no
    direction, so a uniformly random bearing in [0, 360) is returned instead.

    Returns:
        (waypoint, bearing_degrees)

    Raises:
        ValueError: the route has no waypoints.
    """
    _require_waypoints(route)
    rng = rng or random

    waypoint_count = len(route.waypoints)
    index = rng.randrange(waypoint_count)
    waypoint = route.waypoints[index]

    if waypoint_count > 1:
        next_waypoint = route.waypoints[(index + 1) % waypoint_count]
        return waypoint, initial_bearing(waypoint, next_waypoint)

    return waypoint, rng.random() * 360.0
