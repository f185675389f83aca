from app.api.schemas.common import CamelModel, Money
from app.domain.entities.car import CarType


class CarResponse(CamelModel):
    id: int
    model: str
    type: CarType
    price_per_day: Money
    available: bool
    location_id: int | None = None
    image_url: str | None = None


class LocationResponse(CamelModel):
    id: int
    name: str
