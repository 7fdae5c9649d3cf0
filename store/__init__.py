#Marks store as a package.
#Re-exports the store adapters so seeders import from store without knowing internal file names.
#No business logic.

from .errors import InitializationError, SeedError, StoreError
from .firestore_client import FirestoreStore, initialize_app
from .memory import InMemoryStore
from .factory import open_store

__all__ = [
    "InitializationError",
    "SeedError",
    "StoreError",
    "FirestoreStore",
    "InMemoryStore",
    "initialize_app",
    "open_store",
]
