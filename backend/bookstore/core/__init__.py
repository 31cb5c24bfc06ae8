"""Core Layer: records, error taxonomy and pure catalog operations.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - No file IO, no async: callers hand in an already loaded catalog
"""
