"""Outcome Classification — maps a StoreResult to one of three status classes.

Invariants:
    - Any result carrying an error is STORE_FAILURE, regardless of other fields
    - Reads that must match a row are NOT_FOUND when no rows came back
    - Mutations that must match a row are NOT_FOUND when affected == 0
    - Everything else is OK
"""

from enum import Enum

from rental_api.core.store_result import StoreResult


class Outcome(str, Enum):
    """Status class of a store call: 2xx, 404 or 500."""
    OK = "ok"
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


def classify_read(result: StoreResult, require_row: bool = False) -> Outcome:
    """Classify a SELECT result."""
    if not result.ok:
        return Outcome.STORE_FAILURE
    if require_row and not result.rows:
        return Outcome.NOT_FOUND
    return Outcome.OK


def classify_write(result: StoreResult, require_match: bool = False) -> Outcome:
    """Classify an INSERT/UPDATE/DELETE result by its affected-row-count."""
    if not result.ok:
        return Outcome.STORE_FAILURE
    if require_match and result.affected == 0:
        return Outcome.NOT_FOUND
    return Outcome.OK
