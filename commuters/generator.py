import random
from typing import Optional

from filipino_names import random_full_name
from routes.geo import sample_near_route
from routes.models import Route

from .models import CommuterLocation
from .policy import CommuterPolicy, default_commuter_policy


def generate_commuter(
    route: Route,
    index: int,
    rng: Optional[random.Random] = None,
    policy: Optional[CommuterPolicy] = None,
) -> CommuterLocation:
    """
    Build one simulated commuter standing somewhere near `route`.

    `index` is the running commuter number across the seeding run; the
    document id is mock_commuter_<routeCode>_<index>.
    """
    policy = policy or default_commuter_policy()

    return CommuterLocation(
        id=f"mock_commuter_{route.route_code}_{index}",
        user_name=random_full_name(rng),
        location=sample_near_route(route, rng, jitter_degrees=policy.jitter_degrees),
        route_code=route.route_code,
    )
