"""Services Layer — catalog, credential and cart operations over an explicit session.

Invariants:
    - Every service receives its AsyncSession in the constructor (no global store handle)
    - Each public mutation commits its own transaction
    - Shared rows are only changed through single atomic statements

Design Decisions:
    - One service class per resource for locality
"""
