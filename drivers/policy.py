"""
Purpose: Central configuration for mock PUV driver generation.
What it does:

Stores all tunables used when simulating drivers on the map:

DRIVERS_PER_ROUTE = 5
SEEDED_PUV_TYPES = Bus, Multicab, Motorela
SPEED = 2.8 .. 11.1 m/s (roughly 10-40 km/h)

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from routes.models import PuvType

from .models import DriverStatus


@dataclass(frozen=True)
class DriverPolicy:
    """
    Central configuration for simulated driver records.
    """

    # --- Volume ---
    drivers_per_route: int = 5

    # Only these vehicle classes are seeded; their previous mock drivers are cleared first.
    puv_types: List[PuvType] = field(
        default_factory=lambda: [PuvType.BUS, PuvType.MULTICAB, PuvType.MOTORELA]
    )

    # --- Motion ---
    # speed = min_speed + U[0,1) * speed_spread, in m/s
    min_speed_mps: float = 2.8
    speed_spread_mps: float = 8.3

    # --- Profile ---
    min_rating: float = 3.0
    rating_spread: float = 2.0
    eta_minutes_range: Tuple[int, int] = (5, 30)
    plate_number_range: Tuple[int, int] = (100, 999)
    statuses: List[DriverStatus] = field(default_factory=lambda: list(DriverStatus))

    # --- Vehicle classes ---
    plate_prefixes: Dict[PuvType, str] = field(
        default_factory=lambda: {
            PuvType.BUS: "BUS",
            PuvType.MULTICAB: "MCB",
            PuvType.MOTORELA: "MTR",
        }
    )
    default_plate_prefix: str = "PUV"

    max_capacities: Dict[PuvType, int] = field(
        default_factory=lambda: {
            PuvType.BUS: 50,
            PuvType.MULTICAB: 12,
            PuvType.MOTORELA: 8,
        }
    )
    default_max_capacity: int = 10

    # randomuser.me has portraits 1..99; the app only ever used the first 70
    portrait_count: int = 70

    def validate(self) -> None:
        """
        Basic sanity checks to catch misconfiguration early.
        """
        if self.drivers_per_route < 0:
            raise ValueError("drivers_per_route must be >= 0")

        if not self.puv_types:
            raise ValueError("puv_types must name at least one vehicle class")

        if self.min_speed_mps < 0 or self.speed_spread_mps < 0:
            raise ValueError("speed bounds must be non-negative")

        low, high = self.eta_minutes_range
        if low < 0 or high < low:
            raise ValueError("eta_minutes_range must be an increasing, non-negative pair")

        low, high = self.plate_number_range
        if high < low:
            raise ValueError("plate_number_range must be an increasing pair")

        if not self.statuses:
            raise ValueError("statuses must not be empty")

        if self.default_max_capacity <= 0 or any(cap <= 0 for cap in self.max_capacities.values()):
            raise ValueError("max capacities must be > 0")

        if self.portrait_count <= 0:
            raise ValueError("portrait_count must be > 0")


def default_driver_policy() -> DriverPolicy:
    """
    Convenience factory for the default policy.
    """
    p = DriverPolicy()
    p.validate()
    return p
