#Purpose: The Firestore "adapter/client".
#Sole responsibility: talk to Cloud Firestore through the Firebase Admin SDK.
#Encapsulates Firestore-specific details:
#service-account credential loading and app initialization
#query building for marker-field deletes
#write batching (Firestore caps a batch at 500 operations)
#turning SDK exceptions into StoreError / InitializationError
#It should not know what a route, driver or commuter is.

import logging
import os
from typing import Any, Dict, Optional

import firebase_admin
from dotenv import load_dotenv
from firebase_admin import credentials, firestore
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from .errors import InitializationError, StoreError

# Read the service-account path from the environment
# Example in .env:
# FIREBASE_SERVICE_ACCOUNT=./serviceAccountKey.json
load_dotenv()
SERVICE_ACCOUNT_PATH = os.getenv("FIREBASE_SERVICE_ACCOUNT", "serviceAccountKey.json")

# Firestore rejects write batches larger than this
MAX_BATCH_OPERATIONS = 500

logger = logging.getLogger(__name__)

# GoogleAPIError also covers RetryError, raised when the SDK retry deadline runs out
_STORE_ERRORS = (google_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError)


def initialize_app(credentials_path: Optional[str] = None) -> firebase_admin.App:
    """
    Initialize the default Firebase Admin app from a service-account file.

    Safe to call more than once: an already initialized default app is returned
    as-is and the credentials file is not read again.
    """
    try:
        app = firebase_admin.get_app()
        logger.info("Firebase already initialized")
        return app
    except ValueError:
        pass  # no default app yet

    path = credentials_path or SERVICE_ACCOUNT_PATH
    if not path:
        raise InitializationError("Service account path not set. Please set FIREBASE_SERVICE_ACCOUNT in the .env file.")

    try:
        certificate = credentials.Certificate(path)
        app = firebase_admin.initialize_app(certificate)
    except (OSError, ValueError) as e:
        raise InitializationError(f"Could not initialize Firebase from {path!r}: {e}") from e

    logger.info("Firebase initialized successfully")
    return app


class FirestoreStore:
    """
    Firestore Adapter

    Sole responsibility:
    - Delete documents matching marker fields
    - Upsert a single document by id
    - Surface SDK failures as StoreError
    """
    def __init__(self, client, batch_size: int = MAX_BATCH_OPERATIONS):
        if not 0 < batch_size <= MAX_BATCH_OPERATIONS:
            raise ValueError(f"batch_size must be between 1 and {MAX_BATCH_OPERATIONS}.")

        self.client = client
        self.batch_size = batch_size

    @classmethod
    def from_service_account(cls, credentials_path: Optional[str] = None) -> "FirestoreStore":
        app = initialize_app(credentials_path)
        try:
            client = firestore.client(app)
        except (ValueError, auth_exceptions.GoogleAuthError) as e:
            raise InitializationError(f"Could not create Firestore client: {e}") from e
        return cls(client)

    def delete_where(self, collection: str, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Delete every document in `collection` whose fields equal all of `filters`
        (every document when no filters are given).

        Returns:
            the number of documents deleted
        """
        query = self.client.collection(collection)
        for field_path, value in (filters or {}).items():
            query = query.where(filter=FieldFilter(field_path, "==", value))

        try:
            snapshots = list(query.stream())

            #chunk deletes so no single batch goes over the Firestore cap
            for start in range(0, len(snapshots), self.batch_size):
                batch = self.client.batch()
                for snapshot in snapshots[start: start + self.batch_size]:
                    batch.delete(snapshot.reference)
                batch.commit()
        except _STORE_ERRORS as e:
            raise StoreError(f"Failed to delete from {collection!r}: {e}") from e

        return len(snapshots)

    def upsert(self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False) -> None:
        """
        Create or replace `collection/doc_id`. With merge=True the fields are
        merged into an existing document instead of replacing it.
        """
        try:
            self.client.collection(collection).document(doc_id).set(data, merge=merge)
        except _STORE_ERRORS as e:
            raise StoreError(f"Failed to write {collection}/{doc_id}: {e}") from e
