"""Cars Routes — CRUD endpoints over the Cars table.

Invariants:
    - {car_id} is received as raw text; parsing happens in ResourceHandler
    - POST answers 201, DELETE answers with the remaining cars
"""

from fastapi import APIRouter, Depends, status

from rental_api.api.dependencies import get_car_handler
from rental_api.schemas.car import CarPayload
from rental_api.services.resource_handler import ResourceHandler

router = APIRouter(prefix="/cars", tags=["cars"])


@router.get("")
async def list_cars(handler: ResourceHandler = Depends(get_car_handler)):
    return await handler.list_all()


@router.get("/{car_id}")
async def get_car(
    car_id: str, handler: ResourceHandler = Depends(get_car_handler),
):
    return await handler.get(car_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_car(
    body: CarPayload, handler: ResourceHandler = Depends(get_car_handler),
):
    return await handler.create(body)


@router.put("/{car_id}")
async def update_car(
    car_id: str,
    body: CarPayload,
    handler: ResourceHandler = Depends(get_car_handler),
):
    """Full replace of every car field."""
    return await handler.update(car_id, body)


@router.delete("/{car_id}")
async def delete_car(
    car_id: str, handler: ResourceHandler = Depends(get_car_handler),
):
    return await handler.delete(car_id)
