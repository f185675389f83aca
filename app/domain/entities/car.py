"""Entidades del catálogo: Car y Location."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class CarType(str, Enum):
    """Categorías del catálogo."""

    ECONOMY = "Economy"
    COMPACT = "Compact"
    SEDAN = "Sedan"
    SUV = "SUV"
    LUXURY = "Luxury"
    LUXURY_SUV = "Luxury SUV"
    TRUCK = "Truck"
    SPORTS = "Sports"


@dataclass
class Car:
    """
    Auto del catálogo.

    `available` es un indicador en caché ("libre hoy") que se recalcula en
    cada cambio de reservación; nunca decide conflictos.
    """

    id: int | None = None
    model: str = ""
    type: CarType = CarType.ECONOMY
    price_per_day: Decimal = Decimal("0.00")
    available: bool = True
    location_id: int | None = None
    image_url: str | None = None


@dataclass
class Location:
    id: int | None = None
    name: str = ""
