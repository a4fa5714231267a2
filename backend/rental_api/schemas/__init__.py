"""Pydantic Schemas — declarative request-body validation for resource endpoints.

Invariants:
    - One payload schema per resource, shared by create and update
    - Type checks are exact: no coercion between strings, numbers and booleans
    - Unknown fields are ignored
"""
