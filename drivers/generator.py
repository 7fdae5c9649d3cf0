"""
Purpose: Fabricates believable PUV drivers for the commuter map.
What it does:
Each helper draws one field (name, plate, speed, rating, capacity, status, ETA,
photo); generate_driver() puts a driver on a route with place_on_route() and
fills in the rest.
"""

from __future__ import annotations

import random
from typing import Optional

from filipino_names import random_full_name
from routes.geo import place_on_route
from routes.models import PuvType, Route

from .models import DriverLocation, DriverStatus
from .policy import DriverPolicy, default_driver_policy


def generate_driver_name(rng: Optional[random.Random] = None) -> str:
    return random_full_name(rng)


def generate_plate_number(
    puv_type: PuvType,
    rng: Optional[random.Random] = None,
    policy: Optional[DriverPolicy] = None,
) -> str:
    """Plate like "BUS-417"; vehicle classes without a prefix use "PUV"."""
    rng = rng or random
    policy = policy or default_driver_policy()

    prefix = policy.plate_prefixes.get(puv_type, policy.default_plate_prefix)
    number = rng.randint(*policy.plate_number_range)
    return f"{prefix}-{number}"


def generate_speed(rng: Optional[random.Random] = None, policy: Optional[DriverPolicy] = None) -> float:
    """Speed in m/s (roughly 10-40 km/h by default)."""
    rng = rng or random
    policy = policy or default_driver_policy()
    return policy.min_speed_mps + rng.random() * policy.speed_spread_mps


def generate_rating(rng: Optional[random.Random] = None, policy: Optional[DriverPolicy] = None) -> str:
    """Rating between 3.0 and 5.0, kept as a one-decimal string the way the app reads it."""
    rng = rng or random
    policy = policy or default_driver_policy()
    return f"{policy.min_rating + rng.random() * policy.rating_spread:.1f}"


def generate_capacity(
    puv_type: PuvType,
    rng: Optional[random.Random] = None,
    policy: Optional[DriverPolicy] = None,
) -> str:
    """Occupancy as "current/max", e.g. "7/12" for a multicab."""
    rng = rng or random
    policy = policy or default_driver_policy()

    max_capacity = policy.max_capacities.get(puv_type, policy.default_max_capacity)
    current_passengers = rng.randint(0, max_capacity)
    return f"{current_passengers}/{max_capacity}"


def generate_status(rng: Optional[random.Random] = None, policy: Optional[DriverPolicy] = None) -> DriverStatus:
    rng = rng or random
    policy = policy or default_driver_policy()
    return rng.choice(policy.statuses)


def generate_eta(rng: Optional[random.Random] = None, policy: Optional[DriverPolicy] = None) -> int:
    """Minutes until the vehicle reaches the commuter."""
    rng = rng or random
    policy = policy or default_driver_policy()
    return rng.randint(*policy.eta_minutes_range)


def generate_photo_url(rng: Optional[random.Random] = None, policy: Optional[DriverPolicy] = None) -> str:
    rng = rng or random
    policy = policy or default_driver_policy()

    gender = "women" if rng.random() > 0.5 else "men"
    portrait = rng.randint(1, policy.portrait_count)
    return f"https://randomuser.me/api/portraits/{gender}/{portrait}.jpg"


def generate_driver(
    route: Route,
    index: int,
    rng: Optional[random.Random] = None,
    policy: Optional[DriverPolicy] = None,
) -> DriverLocation:
    """
    Build one simulated driver on `route`.

    `index` is the running driver number across the whole seeding run and ends
    up in the document id: mock_<puvtype>_<index>.
    """
    rng = rng or random
    policy = policy or default_driver_policy()

    location, heading = place_on_route(route, rng)

    return DriverLocation(
        id=f"mock_{route.puv_type.value.lower()}_{index}",
        location=location,
        heading=heading,
        speed=generate_speed(rng, policy),
        puv_type=route.puv_type,
        plate_number=generate_plate_number(route.puv_type, rng, policy),
        capacity=generate_capacity(route.puv_type, rng, policy),
        driver_name=generate_driver_name(rng),
        rating=generate_rating(rng, policy),
        status=generate_status(rng, policy),
        eta_minutes=generate_eta(rng, policy),
        route_id=route.id,
        route_code=route.route_code,
        photo_url=generate_photo_url(rng, policy),
    )
