import random

import pytest
from google.cloud.firestore import SERVER_TIMESTAMP, GeoPoint

from commuters.generator import generate_commuter
from commuters.policy import CommuterPolicy
from filipino_names import FIRST_NAMES, LAST_NAMES
from routes.catalog import get_route
from routes.models import PuvType


@pytest.fixture
def rng():
    return random.Random(99)


def test_generate_commuter_near_route(rng):
    route = get_route("C2")

    commuter = generate_commuter(route, 3, rng)

    assert commuter.id == "mock_commuter_C2_3"
    assert commuter.route_code == "C2"
    assert commuter.route_id == "C2"
    assert commuter.selected_puv_type == PuvType.JEEPNEY
    assert any(
        abs(commuter.location.lat - waypoint.lat) <= 0.001 + 1e-12
        and abs(commuter.location.lng - waypoint.lng) <= 0.001 + 1e-12
        for waypoint in route.waypoints
    )

    first, last = commuter.user_name.split(" ", 1)
    assert first in FIRST_NAMES
    assert last in LAST_NAMES


def test_policy_jitter_is_used(rng):
    route = get_route("LA")

    commuter = generate_commuter(route, 0, rng, CommuterPolicy(jitter_degrees=0.0))

    assert any(
        commuter.location.lat == waypoint.lat and commuter.location.lng == waypoint.lng
        for waypoint in route.waypoints
    )


def test_commuter_document_layout(rng):
    commuter = generate_commuter(get_route("BLUE"), 0, rng)

    document = commuter.to_document()

    assert document["userId"] == "mock_commuter_BLUE_0"
    assert document["userName"] == commuter.user_name
    assert isinstance(document["location"], GeoPoint)
    assert document["location"].latitude == commuter.location.lat
    assert document["lastUpdated"] is SERVER_TIMESTAMP
    assert document["selectedPuvType"] == "Motorela"
    assert document["routeCode"] == "BLUE"
    assert document["routeId"] == "BLUE"
    assert document["isMockData"] is True
    assert document["isLocationVisible"] is True
    assert document["iconType"] == "person"


def test_invalid_policy_is_rejected():
    with pytest.raises(ValueError):
        CommuterPolicy(commuters_per_route=-1).validate()

    with pytest.raises(ValueError):
        CommuterPolicy(jitter_degrees=-0.001).validate()
