"""Domain Types — enumerated values shared across layers.

Invariants:
    - CarStatus values are the exact literals accepted on the wire
"""

from enum import Enum


class CarStatus(str, Enum):
    """Car availability — stored verbatim in Cars.Status."""
    AVAILABLE = "Available"
    RENTED = "Rented"
    MAINTENANCE = "Maintenance"


CAR_STATUS_VALUES: tuple[str, ...] = tuple(s.value for s in CarStatus)
