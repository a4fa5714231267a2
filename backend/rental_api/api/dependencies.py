"""Route Dependencies — build a ResourceHandler per request from the pooled session.

Invariants:
    - One AsyncSession (one pooled connection) per request, released when the response is sent
    - Settings are the ones the app was built with (app.state.settings)
    - Password redaction follows Settings.expose_user_passwords
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from rental_api.config import Settings
from rental_api.infrastructure.database import get_db
from rental_api.infrastructure.resource_store import ResourceStore
from rental_api.services.resource_handler import ResourceHandler
from rental_api.services.resource_registry import CARS, RENTALS, USERS


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(db: AsyncSession = Depends(get_db)) -> ResourceStore:
    return ResourceStore(db)


def get_car_handler(
    store: ResourceStore = Depends(get_store),
) -> ResourceHandler:
    return ResourceHandler(CARS, store)


def get_rental_handler(
    store: ResourceStore = Depends(get_store),
) -> ResourceHandler:
    return ResourceHandler(RENTALS, store)


def get_user_handler(
    store: ResourceStore = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
) -> ResourceHandler:
    return ResourceHandler(
        USERS, store, redact=not settings.expose_user_passwords,
    )
