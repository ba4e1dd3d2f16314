"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Every endpoint body is an explicit schema with enumerated required fields
    - Missing or malformed values fail before any service runs

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
