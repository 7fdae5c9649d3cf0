"""
Purpose: Core data model for simulated commuters.
What it does:
A commuter waiting near a route for a given vehicle class, and its
`commuter_locations` document layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from google.cloud.firestore import SERVER_TIMESTAMP, GeoPoint

from routes.models import SampledPosition


@dataclass(frozen=True)
class CommuterLocation:
    id: str
    user_name: str
    location: SampledPosition
    route_code: str

    @property
    def selected_puv_type(self):
        return self.location.puv_type

    @property
    def route_id(self) -> str:
        return self.location.route_id

    def to_document(self) -> Dict[str, Any]:
        return {
            "userId": self.id,
            "userName": self.user_name,
            "location": GeoPoint(self.location.lat, self.location.lng),
            "isLocationVisible": True,
            "lastUpdated": SERVER_TIMESTAMP,
            "selectedPuvType": self.selected_puv_type.value,
            "routeCode": self.route_code,
            "routeId": self.route_id,
            "isMockData": True,
            "iconType": "person",
        }
