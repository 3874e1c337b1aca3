"""Core Layer — pure domain types, pagination and error hierarchy.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async, no DB
"""
