from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_use_cases
from app.api.schemas.cars import CarResponse, LocationResponse
from app.application.interfaces.car_repo import CarFilter

router = APIRouter()


@router.get("/cars", response_model=list[CarResponse])
async def list_cars(
    min_price: Decimal | None = Query(default=None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(default=None, alias="maxPrice", ge=0),
    car_type: str | None = Query(default=None, alias="type"),
    location_id: int | None = Query(default=None, alias="locationId"),
    available_from: date | None = Query(default=None, alias="availableFrom"),
    available_to: date | None = Query(default=None, alias="availableTo"),
    use_cases=Depends(get_use_cases),
) -> list[CarResponse]:
    filters = CarFilter(
        min_price=min_price,
        max_price=max_price,
        car_type=car_type,
        location_id=location_id,
        available_from=available_from,
        available_to=available_to,
    )
    cars = await use_cases["list_cars"].execute(filters)
    return [CarResponse.model_validate(car) for car in cars]


@router.get("/cars/{car_id}", response_model=CarResponse)
async def get_car(car_id: int, use_cases=Depends(get_use_cases)) -> CarResponse:
    car = await use_cases["get_car"].execute(car_id)
    return CarResponse.model_validate(car)


@router.get("/locations", response_model=list[LocationResponse])
async def search_locations(
    query: str | None = Query(default=None, max_length=150),
    use_cases=Depends(get_use_cases),
) -> list[LocationResponse]:
    locations = await use_cases["search_locations"].execute(query)
    return [LocationResponse.model_validate(location) for location in locations]
