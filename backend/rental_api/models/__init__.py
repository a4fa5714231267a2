"""ORM Models — SQLAlchemy declarative tables for Cars, Rentals and Users.

Invariants:
    - All models inherit from Base (db/base.py)
    - Table and column names use store-native casing (they are also the wire names)
    - No foreign keys: Rentals.CarID / Rentals.UserID are plain numeric columns
    - Text columns are unbounded and payload numbers use Float columns, so
      every value the payload schemas accept can be stored

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from rental_api.models.car import Car  # noqa: F401
from rental_api.models.rental import Rental  # noqa: F401
from rental_api.models.user import User  # noqa: F401
