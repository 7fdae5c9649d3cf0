"""
Purpose: Fill `commuter_locations` with simulated commuters.
What it does:
Removes the previous mock commuters (isMockData == True), then places
`commuters_per_route` commuters near every route.
"""

import logging
import random
from typing import List, Optional, Sequence

from commuters.generator import generate_commuter
from commuters.models import CommuterLocation
from commuters.policy import CommuterPolicy, default_commuter_policy
from routes.catalog import ROUTES
from routes.models import Route

COMMUTERS_COLLECTION = "commuter_locations"

logger = logging.getLogger(__name__)


def seed_mock_commuters(
    store,
    routes: Sequence[Route] = ROUTES,
    policy: Optional[CommuterPolicy] = None,
    rng: Optional[random.Random] = None,
) -> List[CommuterLocation]:
    policy = policy or default_commuter_policy()
    policy.validate()

    removed = store.delete_where(COMMUTERS_COLLECTION, {"isMockData": True})
    logger.info("Removed %d existing mock commuters.", removed)

    commuters: List[CommuterLocation] = []
    for route in routes:
        logger.info(
            "Creating %d commuters for %s route %s...",
            policy.commuters_per_route, route.puv_type.value, route.route_code,
        )
        for _ in range(policy.commuters_per_route):
            commuter = generate_commuter(route, len(commuters), rng, policy)
            store.upsert(COMMUTERS_COLLECTION, commuter.id, commuter.to_document())
            commuters.append(commuter)

    return commuters
