"""Infrastructure Layer: catalog file persistence and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every OSError and decode failure is mapped to a StorageError (core/errors.py)
"""
