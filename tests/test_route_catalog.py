import pytest

from routes.catalog import ROUTES, get_route, routes_for_types
from routes.models import PuvType, Route, Waypoint


def test_every_route_has_waypoints():
    for route in ROUTES:
        assert len(route.waypoints) >= 1, route.route_code


def test_loop_routes_return_to_their_start():
    loops = [route for route in ROUTES if route.is_loop]

    # R3 and BLUE are run as loops
    assert {route.route_code for route in loops} == {"R3", "BLUE"}
    for route in loops:
        assert route.waypoints[0] == route.waypoints[-1], route.route_code


def test_route_codes_are_unique():
    codes = [route.route_code for route in ROUTES]
    assert len(codes) == len(set(codes))


def test_waypoints_are_around_cagayan_de_oro():
    for route in ROUTES:
        for waypoint in route.waypoints:
            assert 8.4 < waypoint.lat < 8.6
            assert 124.6 < waypoint.lng < 124.8


def test_get_route():
    route = get_route("BLUE")

    assert route.puv_type == PuvType.MOTORELA
    assert route.fare_price == 10.0

    with pytest.raises(KeyError):
        get_route("NOPE")


def test_routes_for_types_keeps_catalog_order():
    routes = routes_for_types([PuvType.MOTORELA, PuvType.BUS])

    assert [route.route_code for route in routes] == ["R3", "RC", "BLUE"]


def test_routes_for_types_on_custom_list():
    custom = [
        Route.new("X1", "X1", "Jeepney", ((8.48, 124.65),)),
        Route.new("X2", "X2", "Multicab", ((8.48, 124.65),)),
    ]

    routes = routes_for_types([PuvType.MULTICAB], custom)

    assert [route.route_code for route in routes] == ["X2"]


def test_route_new_accepts_string_puv_type_and_defaults_id_to_code():
    route = Route.new("X1", "X1 - Somewhere", "Bus", ((8.48, 124.65), (8.49, 124.66)))

    assert route.id == "X1"
    assert route.puv_type is PuvType.BUS
    assert route.waypoints == (Waypoint(8.48, 124.65), Waypoint(8.49, 124.66))

    with pytest.raises(ValueError):
        Route.new("X2", "X2", "Tricycle", ((8.48, 124.65),))


def test_route_document_layout():
    document = get_route("R3").to_document()

    assert "id" not in document
    assert document["routeCode"] == "R3"
    assert document["puvType"] == "Bus"
    assert document["waypoints"][0] == {"latitude": 8.482776, "longitude": 124.664608}
    assert len(document["waypoints"]) == 7
    assert document["startPointName"] == "Lapasan"
    assert document["endPointName"] == "Cogon Market"
    assert document["estimatedTravelTime"] == 40
    assert document["farePrice"] == 15.0
    assert document["colorValue"] == 0xFF3F51B5
    assert document["isActive"] is True
