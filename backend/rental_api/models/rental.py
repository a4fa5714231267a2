"""Rental ORM — one row per booking of a car by a user.

Invariants:
    - RentalID is an auto-incrementing integer primary key
    - CarID/UserID reference Cars/Users by convention only (no FK constraint)
      and are floating point, like every number the schema accepts
    - StartDate/EndDate hold the caller's date strings; EndDate is nullable
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from rental_api.db.base import Base


class Rental(Base):
    __tablename__ = "Rentals"

    RentalID: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    CarID: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    UserID: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    StartDate: Mapped[str] = mapped_column(Text, nullable=False)
    EndDate: Mapped[str | None] = mapped_column(Text, nullable=True)
    TotalAmount: Mapped[float] = mapped_column(Float, nullable=False)
