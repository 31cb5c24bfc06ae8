"""Pydantic Schemas: request body shapes for API endpoints.

Invariants:
    - Schemas validate at the system boundary, before any store call
    - Persisted records live in core/records.py, not here
"""
