"""Error Hierarchy — every error maps to 400 and the flat error envelope."""

from restful_tasks.core.errors import (
    BodyParseError, ErrorCategory, StoreError, TasksApiError,
    error_code, error_payload,
)


def test_store_error_defaults():
    err = StoreError("relation \"tasks\" does not exist", status_code=404, store_code="42P01")
    assert isinstance(err, TasksApiError)
    assert err.http_status == 400
    assert err.code == "STORE_ERROR"
    assert err.category is ErrorCategory.STORE
    assert err.status_code == 404
    assert err.store_code == "42P01"
    assert err.to_response() == {"error": "relation \"tasks\" does not exist"}


def test_body_parse_error_is_400_validation():
    err = BodyParseError("task: Field required")
    assert err.http_status == 400
    assert err.category is ErrorCategory.VALIDATION
    assert str(err) == "task: Field required"


def test_error_payload_for_foreign_exceptions():
    assert error_payload(ValueError("bad")) == {"error": "bad"}
    assert error_code(ValueError("bad")) == "INTERNAL_ERROR"


def test_error_payload_for_domain_errors():
    err = BodyParseError("Invalid JSON")
    assert error_payload(err) == {"error": "Invalid JSON"}
    assert error_code(err) == "BODY_PARSE_ERROR"
