"""
Purpose: Publish the route catalog to the `routes` collection.
What it does:
Clears every existing route document, then writes each catalog route keyed by
its route code so the app always reads one consistent set.
"""

import logging
from typing import List, Sequence

from google.cloud.firestore import SERVER_TIMESTAMP

from routes.catalog import ROUTES
from routes.models import Route

ROUTES_COLLECTION = "routes"

logger = logging.getLogger(__name__)


def upload_routes(store, routes: Sequence[Route] = ROUTES) -> List[Route]:
    """
    Replace the `routes` collection with `routes`.

    Store failures propagate as StoreError; routes written before the failure
    stay written.
    """
    logger.info("Checking for existing routes...")
    removed = store.delete_where(ROUTES_COLLECTION)
    if removed:
        logger.info("Removed %d existing routes.", removed)
    else:
        logger.info("No existing routes found.")

    logger.info("Uploading routes to Firestore...")
    uploaded = []
    for route in routes:
        data = route.to_document()
        data["isActive"] = True
        data["updatedAt"] = SERVER_TIMESTAMP

        # routeCode doubles as the document id so re-runs land on the same documents
        store.upsert(ROUTES_COLLECTION, route.route_code, data, merge=True)
        logger.info("Route %s (%s) uploaded successfully.", route.route_code, route.name)
        uploaded.append(route)

    return uploaded
