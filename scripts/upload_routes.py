import logging
import sys

from seeding import summarize, upload_routes
from store import SeedError, open_store

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    try:
        store = open_store()
        routes = upload_routes(store)
    except SeedError:
        logger.exception("Error uploading routes")
        return 1

    print(f"✅ All {len(routes)} routes uploaded successfully!")
    print(summarize(routes).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
