"""Users Routes — CRUD endpoints over the Users table."""

from fastapi import APIRouter, Depends, status

from rental_api.api.dependencies import get_user_handler
from rental_api.schemas.user import UserPayload
from rental_api.services.resource_handler import ResourceHandler

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def list_users(handler: ResourceHandler = Depends(get_user_handler)):
    return await handler.list_all()


@router.get("/{user_id}")
async def get_user(
    user_id: str, handler: ResourceHandler = Depends(get_user_handler),
):
    return await handler.get(user_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserPayload, handler: ResourceHandler = Depends(get_user_handler),
):
    return await handler.create(body)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    body: UserPayload,
    handler: ResourceHandler = Depends(get_user_handler),
):
    return await handler.update(user_id, body)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, handler: ResourceHandler = Depends(get_user_handler),
):
    return await handler.delete(user_id)
