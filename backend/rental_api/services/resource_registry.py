"""Resource Registry — static description of each table-backed resource.

Invariants:
    - label is the capitalized singular used in error messages ("Car not found")
    - id_column is the table's primary key and the identifier key in response bodies
    - hidden_fields are dropped from response bodies when redaction is enabled
"""

from dataclasses import dataclass, field

from sqlalchemy import Table

from rental_api.models.car import Car
from rental_api.models.rental import Rental
from rental_api.models.user import User


@dataclass(frozen=True)
class ResourceDescriptor:
    label: str
    table: Table
    id_column: str
    hidden_fields: tuple[str, ...] = field(default_factory=tuple)


CARS = ResourceDescriptor(label="Car", table=Car.__table__, id_column="CarID")
RENTALS = ResourceDescriptor(
    label="Rental", table=Rental.__table__, id_column="RentalID",
)
USERS = ResourceDescriptor(
    label="User", table=User.__table__, id_column="UserID",
    hidden_fields=("Password",),
)
