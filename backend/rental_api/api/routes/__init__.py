"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with a resource prefix and tags
    - The API base path is applied once, at include time in main.py
    - Routes never contain query or validation logic (delegate to ResourceHandler)
"""
