"""Infrastructure Layer — store handle, credentials crypto and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All store failures mapped to StoreUnavailableError (core/errors.py)

Design Decisions:
    - Thin wrappers over raw libraries (SQLAlchemy, PyJWT, bcrypt) with domain errors
"""
