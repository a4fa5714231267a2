"""User Schemas — request body for POST /users and PUT /users/{id}."""

from pydantic import BaseModel

from rental_api.schemas.field_types import Text


class UserPayload(BaseModel):
    """Full user record minus the store-assigned UserID."""
    Name: Text
    Email: Text
    Password: Text
