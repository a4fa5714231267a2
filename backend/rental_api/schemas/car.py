"""Car Schemas — request body for POST /cars and PUT /cars/{id}.

Invariants:
    - All eight fields required
    - Status is exactly one of Available | Rented | Maintenance
"""

from typing import Literal

from pydantic import BaseModel

from rental_api.schemas.field_types import Number, Text


class CarPayload(BaseModel):
    """Full car record minus the store-assigned CarID."""
    Make: Text
    Model: Text
    Year: Number
    Color: Text
    LicensePlate: Text
    DailyRate: Number
    Status: Literal["Available", "Rented", "Maintenance"]
    ImageURL: Text
