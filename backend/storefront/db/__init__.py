"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - All models inherit from db.base.Base
"""
