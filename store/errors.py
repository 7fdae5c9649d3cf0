"""
Failure taxonomy for the seeders.

Only two kinds of failure are told apart: the store rejected a delete/write,
or the store could not be set up in the first place.
"""


class SeedError(Exception):
    """Base class for failures the seeding scripts report and exit on."""
    pass


class StoreError(SeedError):
    """A delete or write was rejected by the document store."""
    pass


class InitializationError(SeedError):
    """Credentials or the store client could not be set up."""
    pass
