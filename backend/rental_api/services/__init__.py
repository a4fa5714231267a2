"""Services Layer — per-resource request handling over the ResourceStore.

Invariants:
    - Handlers raise RentalApiError subclasses; routes never build error bodies
    - Exactly one store call is outstanding at a time per request
"""
