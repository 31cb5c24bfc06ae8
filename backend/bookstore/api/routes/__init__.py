"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes hold no business logic; they delegate to CatalogStore
"""
