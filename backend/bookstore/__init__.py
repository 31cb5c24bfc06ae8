"""Bookstore Application Package: book catalog REST service over a flat JSON file.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
