"""
Purpose: Central configuration for mock commuter generation.

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass

from routes.geo import DEFAULT_JITTER_DEGREES


@dataclass(frozen=True)
class CommuterPolicy:
    """
    Central configuration for simulated commuter records.
    """

    commuters_per_route: int = 5

    # Half-width of the uniform lat/lng offset around the chosen waypoint (~100 m).
    jitter_degrees: float = DEFAULT_JITTER_DEGREES

    def validate(self) -> None:
        if self.commuters_per_route < 0:
            raise ValueError("commuters_per_route must be >= 0")

        if self.jitter_degrees < 0:
            raise ValueError("jitter_degrees must be >= 0")


def default_commuter_policy() -> CommuterPolicy:
    p = CommuterPolicy()
    p.validate()
    return p
