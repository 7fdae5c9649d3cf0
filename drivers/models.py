"""
Purpose: Core data models for the drivers domain.
What it does:
Defines the structure of a simulated PUV driver as shown on the commuter map,
and how it is laid out as a `driver_locations` document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from google.cloud.firestore import SERVER_TIMESTAMP, GeoPoint

from routes.models import PuvType, Waypoint


class DriverStatus(str, Enum):
    """
    Standardizes the status label a driver shows to commuters.
    """
    AVAILABLE = "Available"
    EN_ROUTE = "En Route"
    FULL = "Full"
    ON_BREAK = "On Break"


@dataclass(frozen=True)
class DriverLocation:
    """
    A simulated driver parked on a route waypoint at a specific point in time.
    """
    id: str
    location: Waypoint
    heading: float  # degrees clockwise from north
    speed: float  # m/s
    puv_type: PuvType
    plate_number: str
    capacity: str  # "current/max" passengers
    driver_name: str
    rating: str
    status: DriverStatus
    eta_minutes: int
    route_id: str
    route_code: str
    photo_url: str

    def to_document(self) -> Dict[str, Any]:
        return {
            "userId": self.id,
            "location": GeoPoint(self.location.lat, self.location.lng),
            "heading": self.heading,
            "speed": self.speed,
            "isLocationVisible": True,
            "isOnline": True,
            "lastUpdated": SERVER_TIMESTAMP,
            "puvType": self.puv_type.value,
            "plateNumber": self.plate_number,
            "capacity": self.capacity,
            "driverName": self.driver_name,
            "rating": self.rating,
            "status": self.status.value,
            "etaMinutes": self.eta_minutes,
            "isMockData": True,
            "routeId": self.route_id,
            "routeCode": self.route_code,
            "iconType": self.puv_type.value.lower(),
            "photoUrl": self.photo_url,
        }
