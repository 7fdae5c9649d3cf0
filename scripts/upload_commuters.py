import logging
import sys

from seeding import seed_mock_commuters, summarize
from store import SeedError, open_store

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    try:
        store = open_store()
        commuters = seed_mock_commuters(store)
    except SeedError:
        logger.exception("Error generating mock commuters")
        return 1

    print(f"✅ Successfully created {len(commuters)} mock commuters")
    print("\nCommuters per route:")
    print(summarize(commuters).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
