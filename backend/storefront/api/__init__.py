"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every failure answers with a success=False JSON envelope

Design Decisions:
    - Thin routes delegate to services
"""
