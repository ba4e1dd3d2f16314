"""Core Layer — pure domain logic, error taxonomy and domain types.

Invariants:
    - Core never imports from infrastructure/, services/ or api/
    - No IO in this package
"""
