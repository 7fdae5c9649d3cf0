"""
Purpose: The fixed catalog of iPara PUV routes in Cagayan de Oro.
What it does:
Holds every route the seeders know about, with the waypoints traced for the
app's map and the display metadata shown to commuters.

Rule: Data only, plus two lookup helpers.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .models import PuvType, Route

ROUTES: List[Route] = [
    # --- Jeepney routes ---
    Route.new(
        "R2",
        "R2 - Gaisano-Agora-Cogon-Carmen",
        PuvType.JEEPNEY,
        (
            (8.486261, 124.649210),  # gaisano
            (8.488737, 124.654004),  # osmena
            (8.488257, 124.657648),  # agora market
            (8.484704, 124.656401),  # ustp
            (8.484704, 124.656401),  # ustp
            (8.478534, 124.654355),  # pearl mont
            (8.478744, 124.652822),  # pearl mont unahan
            (8.479595, 124.649240),  # cogon
            (8.477819, 124.642316),  # capistrano
            (8.476322, 124.640128),  # yselina bridge
            (8.481712, 124.637232),  # coc terminal
            (8.484994, 124.637248),  # mango st
            (8.486158, 124.638827),  # liceo
            (8.486261, 124.649210),  # gaisano
        ),
        description="Route from Carmen to Divisoria via Corrales Avenue",
        start_point_name="Gaisano",
        end_point_name="Carmen",
        estimated_travel_time=25,
        fare_price=12.0,
        color_value=0xFFFF6D00,  # deep orange
    ),
    Route.new(
        "C2",
        "C2 - Patag-Gaisano-Limketkai-Cogon",
        PuvType.JEEPNEY,
        (
            (8.477434, 124.649630),  # Cogon
            (8.476343, 124.639981),  # ysalina bridge
            (8.480251, 124.637131),  # carmen cogon
            (8.485040, 124.637276),  # mango st
            (8.487765, 124.626766),  # Patag
            (8.486605, 124.638888),  # liceo
            (8.486261, 124.649210),  # gaisano
            (8.477434, 124.649630),  # Cogon
        ),
        description="Route from Patag to Cogon via Gaisano",
        start_point_name="Patag",
        end_point_name="Cogon",
        estimated_travel_time=30,
        fare_price=13.0,
        color_value=0xFF2196F3,  # blue
    ),
    Route.new(
        "RA",
        "RA - Pier-Gaisano-Ayala-Cogon",
        PuvType.JEEPNEY,
        (
            (8.486684, 124.650807),  # Gaisano main
            (8.498177, 124.660786),  # Pier
            (8.504380, 124.661618),  # Macabalan edge
            (8.503708, 124.659001),  # Macabalan
            (8.498178, 124.660057),  # Julio Pacana St
            (8.476927, 124.644083),  # Divisoria Plaza
            (8.476425, 124.645800),  # Xavier
            (8.476817, 124.652773),  # borja st
            (8.477448, 124.652930),  # Roxas St
            (8.477855, 124.651483),  # yacapin to vicente
            (8.480664, 124.650289),  # Ebarle st
            (8.485169, 124.650207),  # Ayala
            (8.486684, 124.650807),  # Gaisano main
        ),
        description="Route from Pier to Cogon via Gaisano",
        start_point_name="Pier",
        end_point_name="Cogon",
        estimated_travel_time=45,
        fare_price=15.0,
        color_value=0xFF4CAF50,  # green
    ),
    Route.new(
        "RD",
        "RD - Gusa-Cugman-Cogon-Limketkai",
        PuvType.JEEPNEY,
        (
            (8.469899, 124.705196),  # cugman
            (8.477536, 124.676559),  # Gusa
            (8.486028, 124.650684),  # Gaisano
            (8.485010, 124.647179),  # Velez
            (8.485627, 124.646200),  # capistrano
            (8.477565, 124.642297),  # Divisoria
            (8.476425, 124.645800),  # Xavier
            (8.476817, 124.652773),  # borja
            (8.477595, 124.653591),  # yacapin
            (8.484484, 124.657109),  # ketkai
            (8.469899, 124.705196),  # cugman
        ),
        description="Route from Cugman to Limketkai via Gusa",
        start_point_name="Cugman",
        end_point_name="Limketkai",
        estimated_travel_time=35,
        fare_price=14.0,
        color_value=0xFFE91E63,  # pink
    ),
    Route.new(
        "LA",
        "LA - Lapasan to Divisoria",
        PuvType.JEEPNEY,
        (
            (8.479595, 124.649240),  # Cogon
            (8.481712, 124.637232),  # Carmen terminal
            (8.490123, 124.652781),  # Lapasan
            (8.498177, 124.660786),  # Pier
            (8.490123, 124.652781),  # Lapasan
            (8.481712, 124.637232),  # Carmen terminal
            (8.479595, 124.649240),  # Cogon
        ),
        description="Route from Lapasan to Divisoria",
        start_point_name="Pier",
        end_point_name="Cogon",
        estimated_travel_time=45,
        fare_price=15.0,
        color_value=0xFF9C27B0,  # purple
    ),
    # --- Bus routes ---
    Route.new(
        "R3",
        "R3 - Lapasan-Cogon Market (Loop)",
        PuvType.BUS,
        (
            (8.482776, 124.664608),  # Lapasan
            (8.486510, 124.648319),  # Gaisano
            (8.477458, 124.644200),  # Cogon Market
            (8.477023, 124.645975),  # Yacapin
            (8.478459, 124.646503),  # Velez
            (8.480728, 124.657680),  # back toward Lapasan
            (8.482776, 124.664608),  # Lapasan
        ),
        description="Route from Lapasan to Cogon Market and back in a loop",
        start_point_name="Lapasan",
        end_point_name="Cogon Market",
        estimated_travel_time=40,
        fare_price=15.0,
        color_value=0xFF3F51B5,  # indigo
        is_loop=True,
    ),
    Route.new(
        "RC",
        "RC - Cugman - Velez - Divisoria - Cogon",
        PuvType.BUS,
        (
            (8.469449, 124.705358),  # Cugman
            (8.469031, 124.703102),  # U-turn
            (8.482910, 124.646112),  # Velez main
            (8.486411, 124.648293),  # Velez
            (8.480066, 124.644827),  # D-Morvie
            (8.480302, 124.643627),  # Rizal
            (8.477783, 124.643120),  # Divisoria
            (8.477131, 124.646014),  # xavier
            (8.477219, 124.649640),  # Borja
            (8.476823, 124.652875),  # Cogon
            (8.477613, 124.653608),  # pearlmont
            (8.484305, 124.657059),  # Shakeys
            (8.469449, 124.705358),  # Cugman
        ),
        description="Route from Cugman to Cogon via Velez",
        start_point_name="Cugman",
        end_point_name="Cogon Market",
        estimated_travel_time=40,
        fare_price=12.0,
        color_value=0xFFFFC0CB,  # pink
    ),
    # --- Multicab routes ---
    Route.new(
        "RBC",
        "RBC - Pier-Puregold-Cogon-Velez-Julio Pacana-Macabalan",
        PuvType.MULTICAB,
        (
            (8.498177, 124.660786),  # Pier
            (8.489390, 124.657666),  # Agora
            (8.484315, 124.658291),  # Puregold
            (8.480585, 124.657328),  # limketkai
            (8.478014, 124.650861),  # Cogon
            (8.480090, 124.644857),  # Velez
            (8.498178, 124.660057),  # Julio Pacana St
            (8.502677, 124.664270),  # Macabalan
            (8.503693, 124.659047),  # Macabalan
            (8.498177, 124.660786),  # Pier
        ),
        description="Route from Pier through city center to Macabalan",
        start_point_name="Pier",
        end_point_name="Cogon",
        estimated_travel_time=35,
        fare_price=12.0,
        color_value=0xFFFF5722,  # deep orange
    ),
    # --- Motorela routes ---
    Route.new(
        "BLUE",
        "BLUE - Agora-Osmena-Cogon (Loop)",
        PuvType.MOTORELA,
        (
            (8.489290, 124.657606),  # Agora Market
            (8.488186, 124.659699),  # Agora - tulay semento
            (8.490775, 124.655332),  # Osmena
            (8.484709, 124.653492),  # Osmena
            (8.477754, 124.652605),  # Cogon
            (8.485069, 124.653629),  # U-turn
            (8.490868, 124.655387),  # Osmena
            (8.489290, 124.657606),  # Agora Market
        ),
        description="Route from Agora through Osmena to Cogon in a loop",
        start_point_name="Agora",
        end_point_name="Cogon",
        estimated_travel_time=25,
        fare_price=10.0,
        color_value=0xFF03A9F4,  # light blue
        is_loop=True,
    ),
]

_BY_CODE: Dict[str, Route] = {route.route_code: route for route in ROUTES}


def get_route(route_code: str) -> Route:
    """Look up a catalog route by its code. Raises KeyError for unknown codes."""
    return _BY_CODE[route_code]


def routes_for_types(puv_types: Iterable[PuvType], routes: Optional[Iterable[Route]] = None) -> List[Route]:
    """Catalog routes served by any of the given vehicle classes, in catalog order."""
    wanted = set(puv_types)
    return [route for route in (ROUTES if routes is None else routes) if route.puv_type in wanted]
