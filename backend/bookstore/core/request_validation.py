"""Request Validation: turn schema failures into one structured InvalidRequestError.

Invariants:
    - Pure functions: no IO, no logging, same input gives same output
    - Every missing or mismatched field is named in the message and in details
    - Location prefixes added by the web framework ("body") are not part of field names
"""

from collections.abc import Mapping, Sequence
from typing import Any

from bookstore.core.errors import InvalidRequestError

_LOCATION_ROOTS = ("body", "query", "path")


def field_name(loc: Sequence[Any]) -> str:
    """Dotted field path from a pydantic error location."""
    parts = [str(p) for p in loc]
    if parts and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]
    return ".".join(parts) or "body"


def describe_field_errors(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error records into {field, message, type} entries."""
    return [
        {
            "field": field_name(e.get("loc", ())),
            "message": e.get("msg", "invalid value"),
            "type": e.get("type", "value_error"),
        }
        for e in errors
    ]


def invalid_request(errors: Sequence[Mapping[str, Any]]) -> InvalidRequestError:
    """Build the 400 error naming each offending field once, in order."""
    details = describe_field_errors(errors)
    missing = _unique(d["field"] for d in details if d["type"] == "missing")
    mismatched = _unique(d["field"] for d in details if d["type"] != "missing")
    parts = []
    if missing:
        parts.append("missing field(s): " + ", ".join(missing))
    if mismatched:
        parts.append("invalid field(s): " + ", ".join(mismatched))
    message = "; ".join(parts) or "invalid request body"
    return InvalidRequestError(message, details)


def _unique(names) -> list[str]:
    return list(dict.fromkeys(names))
