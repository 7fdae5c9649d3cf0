#Commuters domain package: simulated riders waiting near a route.
from .models import CommuterLocation
from .policy import CommuterPolicy, default_commuter_policy
from .generator import generate_commuter

__all__ = [
    "CommuterLocation",
    "CommuterPolicy",
    "default_commuter_policy",
    "generate_commuter",
]
