"""Car ORM — one row per fleet vehicle.

Invariants:
    - CarID is an auto-incrementing integer primary key
    - Text columns are unbounded and numeric columns are floating point, so
      every payload the schema accepts fits
    - Status holds one of CarStatus values; the column does not enforce it
"""

from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from rental_api.core.domain_types import CarStatus
from rental_api.db.base import Base


class Car(Base):
    __tablename__ = "Cars"

    CarID: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    Make: Mapped[str] = mapped_column(Text, nullable=False)
    Model: Mapped[str] = mapped_column(Text, nullable=False)
    Year: Mapped[float] = mapped_column(Float, nullable=False)
    Color: Mapped[str] = mapped_column(Text, nullable=False)
    LicensePlate: Mapped[str] = mapped_column(Text, nullable=False)
    DailyRate: Mapped[float] = mapped_column(Float, nullable=False)
    Status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=CarStatus.AVAILABLE.value,
    )
    ImageURL: Mapped[str] = mapped_column(Text, nullable=False)
