"""Infrastructure Layer — database engine, statement execution and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Database failures leave this layer as StoreResult values, not exceptions
"""
