"""API Layer: FastAPI routes, dependencies, error handlers and request logging.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors share the {"error": {...}} envelope
"""
