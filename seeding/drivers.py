"""
Purpose: Fill `driver_locations` with simulated PUV drivers.
What it does:
For every vehicle class in the policy, removes that class's previous mock
drivers, then parks `drivers_per_route` drivers on each route of those classes.
Real drivers and mock drivers of other classes are left alone.
"""

import logging
import random
from typing import List, Optional, Sequence

from drivers.generator import generate_driver
from drivers.models import DriverLocation
from drivers.policy import DriverPolicy, default_driver_policy
from routes.catalog import routes_for_types
from routes.models import Route

DRIVERS_COLLECTION = "driver_locations"

logger = logging.getLogger(__name__)


def seed_mock_drivers(
    store,
    routes: Optional[Sequence[Route]] = None,
    policy: Optional[DriverPolicy] = None,
    rng: Optional[random.Random] = None,
) -> List[DriverLocation]:
    """
    Args:
        store: FirestoreStore or InMemoryStore
        routes: routes to seed; defaults to the catalog routes of policy.puv_types.
            Routes of other vehicle classes are skipped.
        policy: DriverPolicy (default_driver_policy() if omitted)
        rng: random.Random for reproducible runs

    Returns:
        the drivers written, in write order
    """
    policy = policy or default_driver_policy()
    policy.validate()
    routes = routes_for_types(policy.puv_types, routes)

    for puv_type in policy.puv_types:
        removed = store.delete_where(DRIVERS_COLLECTION, {"isMockData": True, "puvType": puv_type.value})
        logger.info("Removed %d existing mock %s drivers.", removed, puv_type.value)

    drivers: List[DriverLocation] = []
    for route in routes:
        logger.info(
            "Creating %d %s drivers for route %s...",
            policy.drivers_per_route, route.puv_type.value, route.route_code,
        )
        for _ in range(policy.drivers_per_route):
            driver = generate_driver(route, len(drivers), rng, policy)
            store.upsert(DRIVERS_COLLECTION, driver.id, driver.to_document())
            drivers.append(driver)

    return drivers
