# Name tables shared by the mock driver and mock commuter generators.

import random
from typing import List, Optional

FIRST_NAMES: List[str] = [
    "Juan", "Pedro", "Miguel", "Jose", "Antonio", "Ricardo", "Eduardo", "Francisco",
    "Roberto", "Manuel", "Danilo", "Rodrigo", "Ernesto", "Fernando", "Andres",
    "Maria", "Rosa", "Ana", "Luisa", "Elena", "Josefa", "Margarita", "Teresita",
    "Juana", "Rosario", "Corazon", "Gloria", "Lourdes", "Natividad", "Remedios",
]

LAST_NAMES: List[str] = [
    "Garcia", "Santos", "Reyes", "Cruz", "Bautista", "Gonzales", "Ramos", "Aquino",
    "Diaz", "Castro", "Mendoza", "Torres", "Flores", "Villanueva", "Fernandez",
    "Morales", "Perez", "Ramirez", "Hernandez", "Pascual", "Delos Santos", "Tolentino",
    "Valdez", "Gutierrez", "Navarro", "Domingo", "Salazar", "Del Rosario", "Mercado",
]


def random_full_name(rng: Optional[random.Random] = None) -> str:
    """Random "First Last" name, e.g. "Rosa Del Rosario"."""
    rng = rng or random
    return f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"
