"""Error Hierarchy — typed exceptions for every request failure mode.

Invariants:
    - Every error has a message (str), a code (str) and an http_status (int)
    - to_response() always produces the uniform envelope {"error": <message>}
    - Validation errors are 400, missing records 404, store failures 500

Design Decisions:
    - Single hierarchy with RentalApiError base: one FastAPI handler renders all of them
    - StoreError carries the driver message verbatim (callers see the raw cause)
"""


class RentalApiError(Exception):
    """Base exception for all request-level failures."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Validation Errors (400) ────────────────────────────────────

class InvalidInputError(RentalApiError):
    """Request body (or update identifier) failed validation."""
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, "INVALID_INPUT", 400)


class InvalidIdentifierError(RentalApiError):
    """Path identifier is not an integer."""
    def __init__(self, resource: str):
        super().__init__(f"Invalid {resource.lower()} ID", "INVALID_IDENTIFIER", 400)
        self.resource = resource


# ─── Lookup Errors (404) ────────────────────────────────────────

class ResourceNotFoundError(RentalApiError):
    """Identifier parsed but no row matched."""
    def __init__(self, resource: str, record_id: int | None = None):
        super().__init__(f"{resource} not found", "RESOURCE_NOT_FOUND", 404)
        self.resource = resource
        self.record_id = record_id


# ─── Store Errors (500) ─────────────────────────────────────────

class StoreError(RentalApiError):
    """Store rejected or failed to run a statement."""
    def __init__(self, message: str, operation: str = "query"):
        super().__init__(message, "STORE_ERROR", 500)
        self.operation = operation
