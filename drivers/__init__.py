"""
Drivers domain package.

Public API:
- Domain models: DriverLocation, DriverStatus
- Tunables: DriverPolicy, default_driver_policy
- Generator entry: generate_driver
"""
from .models import DriverLocation, DriverStatus
from .policy import DriverPolicy, default_driver_policy
from .generator import generate_driver

__all__ = [
    "DriverLocation",
    "DriverStatus",
    "DriverPolicy",
    "default_driver_policy",
    "generate_driver",
]
