"""Request Validation: schema shapes plus the error builder that names bad fields."""

import pytest
from pydantic import ValidationError

from bookstore.core.request_validation import (
    describe_field_errors,
    field_name,
    invalid_request,
)
from bookstore.schemas.catalog import AuthorWrite, BookCreate, BookUpdate


def _errors(schema, payload) -> list[dict]:
    with pytest.raises(ValidationError) as exc:
        schema.model_validate(payload)
    return exc.value.errors()


def test_field_name_drops_location_root():
    assert field_name(("body", "desc")) == "desc"
    assert field_name(("title",)) == "title"
    assert field_name(("body",)) == "body"
    assert field_name(()) == "body"


def test_missing_field_is_named():
    error = invalid_request(_errors(BookUpdate, {"title": "Bible", "borrowed": False}))
    assert error.http_status == 400
    assert error.code == "VALIDATION_ERROR"
    assert error.fields == ["desc"]
    assert "desc" in error.message
    assert error.message.startswith("missing field(s)")


def test_wrong_kind_is_named():
    error = invalid_request(
        _errors(BookUpdate, {"title": "Bible", "borrowed": "true", "desc": "d"}),
    )
    assert error.fields == ["borrowed"]
    assert error.message == "invalid field(s): borrowed"


def test_missing_and_mismatched_together():
    error = invalid_request(_errors(AuthorWrite, {"first": 7}))
    assert set(error.fields) == {"first", "last"}
    assert "missing field(s): last" in error.message
    assert "invalid field(s): first" in error.message


def test_blank_title_rejected():
    error = invalid_request(_errors(BookCreate, {"title": "   ", "desc": "d"}))
    assert error.fields == ["title"]


def test_describe_field_errors_shape():
    details = describe_field_errors(
        [{"loc": ("body", "last"), "msg": "Field required", "type": "missing"}],
    )
    assert details == [{"field": "last", "message": "Field required", "type": "missing"}]


def test_schemas_accept_valid_bodies_and_ignore_extras():
    update = BookUpdate.model_validate(
        {"title": " Bible ", "borrowed": True, "desc": "d", "authors": [{"id": "x"}]},
    )
    assert update.title == "Bible"
    assert not hasattr(update, "authors")
    assert AuthorWrite.model_validate({"first": "Ed", "last": "Phelps"}).last == "Phelps"
