"""Rental Schemas — request body for POST /rentals and PUT /rentals/{id}.

Invariants:
    - CarID, UserID, TotalAmount are numbers; StartDate is a string
    - EndDate is checked only when present and truthy; falsy values
      (absent, null, "", 0, false) pass validation
    - Falsy non-string EndDate values are normalized to None (stored as NULL)
    - CarID/UserID existence is not checked here
"""

from typing import Any

from pydantic import BaseModel, field_validator

from rental_api.schemas.field_types import Number, Text


class RentalPayload(BaseModel):
    """Full rental record minus the store-assigned RentalID."""
    CarID: Number
    UserID: Number
    StartDate: Text
    EndDate: Any = None
    TotalAmount: Number

    @field_validator("EndDate")
    @classmethod
    def check_end_date(cls, v: Any) -> str | None:
        if v and not isinstance(v, str):
            raise ValueError("EndDate must be a string when provided")
        if not isinstance(v, str):
            return None
        return v
