"""
Purpose: Core data models for the routes domain.
What it does:
Defines the structure of a PUV route, its waypoints, and the positions sampled
around it, without any knowledge of the document store.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class PuvType(str, Enum):
    """
    Vehicle classes running on the catalog routes.
    The value is exactly what gets stored in the `puvType` fields.
    """
    JEEPNEY = "Jeepney"
    BUS = "Bus"
    MULTICAB = "Multicab"
    MOTORELA = "Motorela"


@dataclass(frozen=True)
class Waypoint:
    """A single (lat, lng) coordinate in decimal degrees."""
    lat: float
    lng: float

    def to_document(self) -> Dict[str, float]:
        return {"latitude": self.lat, "longitude": self.lng}


@dataclass(frozen=True)
class Route:
    """
    A fixed PUV route with display metadata.

    `waypoints` is ordered; loop routes repeat the first waypoint as the last.
    """
    id: str
    name: str
    route_code: str
    puv_type: PuvType
    waypoints: Tuple[Waypoint, ...]

    description: str = ""
    start_point_name: str = ""
    end_point_name: str = ""
    estimated_travel_time: int = 0  # minutes
    fare_price: float = 0.0
    color_value: int = 0xFF000000  # ARGB
    is_active: bool = True
    is_loop: bool = False

    @classmethod
    def new(
        cls,
        route_code: str,
        name: str,
        puv_type: str | PuvType,
        points: Tuple[Tuple[float, float], ...],
        **metadata: Any,
    ) -> Route:
        if isinstance(puv_type, str):
            puv_type = PuvType(puv_type)

        return cls(
            id=metadata.pop("id", route_code),
            name=name,
            route_code=route_code,
            puv_type=puv_type,
            waypoints=tuple(Waypoint(lat, lng) for lat, lng in points),
            **metadata,
        )

    def to_document(self) -> Dict[str, Any]:
        """
        Fields written to the `routes` collection. The id is the document key,
        so it is not repeated inside the document.
        """
        return {
            "name": self.name,
            "description": self.description,
            "puvType": self.puv_type.value,
            "routeCode": self.route_code,
            "waypoints": [waypoint.to_document() for waypoint in self.waypoints],
            "startPointName": self.start_point_name,
            "endPointName": self.end_point_name,
            "estimatedTravelTime": self.estimated_travel_time,
            "farePrice": self.fare_price,
            "colorValue": self.color_value,
            "isActive": self.is_active,
        }


@dataclass(frozen=True)
class SampledPosition:
    """
    A position generated near a route, tagged with the route and vehicle
    class it was generated for.
    """
    lat: float
    lng: float
    route_id: str
    puv_type: PuvType
