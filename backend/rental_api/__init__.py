"""Car Rental API Package — CRUD service over Cars, Rentals and Users.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
