import logging
import sys

from seeding import seed_mock_drivers, summarize
from store import SeedError, open_store

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    try:
        store = open_store()
        drivers = seed_mock_drivers(store)
    except SeedError:
        logger.exception("Error generating mock PUV drivers")
        return 1

    print(f"✅ Successfully created {len(drivers)} mock PUV drivers")
    print("\nDrivers per route:")
    print(summarize(drivers).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
