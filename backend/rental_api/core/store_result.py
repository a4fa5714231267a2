"""Store Result — explicit outcome of a single statement at the store boundary.

Invariants:
    - Exactly one of (data fields, error) is meaningful: ok is False iff error is set
    - rows preserves store-native order
    - affected is the driver's affected-row-count for mutations, 0 for reads

Design Decisions:
    - Frozen dataclass over exceptions: store failures travel as values and are
      mapped to statuses by core/outcomes.py
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class StoreResult:
    """Rows, affected count and inserted id of one statement, or its error."""
    rows: list[dict[str, Any]] = field(default_factory=list)
    affected: int = 0
    inserted_id: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def first(self) -> dict[str, Any] | None:
        return self.rows[0] if self.rows else None

    @classmethod
    def failure(cls, message: str) -> "StoreResult":
        return cls(error=message)
