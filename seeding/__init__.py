#Expose the seeding entry points:
#Route catalog upload
#Mock commuter seeding
#Mock driver seeding
#Run summary

from .routes import upload_routes
from .commuters import seed_mock_commuters
from .drivers import seed_mock_drivers
from .summary import summarize

__all__ = [
    "upload_routes",
    "seed_mock_commuters",
    "seed_mock_drivers",
    "summarize",
]
