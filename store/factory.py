import logging
import os
from typing import Optional

from dotenv import load_dotenv

from .errors import InitializationError
from .firestore_client import FirestoreStore
from .memory import InMemoryStore

# IPARA_STORE=memory runs the seeders against an in-process store (dry run)
load_dotenv()
STORE_BACKEND = os.getenv("IPARA_STORE", "firestore")

logger = logging.getLogger(__name__)


def open_store(backend: Optional[str] = None, credentials_path: Optional[str] = None):
    """
    Build the configured document store.

    Raises:
        InitializationError: unknown backend, or Firestore could not be set up.
    """
    backend = (backend or STORE_BACKEND).strip().lower()

    if backend == "memory":
        logger.info("Using in-memory store, nothing will be written to Firestore")
        return InMemoryStore()

    if backend == "firestore":
        return FirestoreStore.from_service_account(credentials_path)

    raise InitializationError(f"Unknown store backend {backend!r}; expected 'firestore' or 'memory'.")
