"""Infrastructure Layer — external store client and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store failures mapped to StoreError (core/errors.py)
"""
