"""Rentals Routes — CRUD endpoints over the Rentals table plus per-user listing.

Invariants:
    - /rentals/user/{user_id} returns 200 with a possibly empty list (never 404)
    - CarID/UserID are stored without checking that the car or user exists
"""

from fastapi import APIRouter, Depends, status

from rental_api.api.dependencies import get_rental_handler
from rental_api.schemas.rental import RentalPayload
from rental_api.services.resource_handler import ResourceHandler

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.get("")
async def list_rentals(
    handler: ResourceHandler = Depends(get_rental_handler),
):
    return await handler.list_all()


@router.get("/user/{user_id}")
async def list_rentals_for_user(
    user_id: str, handler: ResourceHandler = Depends(get_rental_handler),
):
    """All rentals booked by one user."""
    return await handler.list_where("UserID", user_id, id_label="User")


@router.get("/{rental_id}")
async def get_rental(
    rental_id: str, handler: ResourceHandler = Depends(get_rental_handler),
):
    return await handler.get(rental_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_rental(
    body: RentalPayload,
    handler: ResourceHandler = Depends(get_rental_handler),
):
    return await handler.create(body)


@router.put("/{rental_id}")
async def update_rental(
    rental_id: str,
    body: RentalPayload,
    handler: ResourceHandler = Depends(get_rental_handler),
):
    return await handler.update(rental_id, body)


@router.delete("/{rental_id}")
async def delete_rental(
    rental_id: str, handler: ResourceHandler = Depends(get_rental_handler),
):
    return await handler.delete(rental_id)
