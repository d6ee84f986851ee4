"""Error Hierarchy — verifies codes, statuses, and the REST envelope."""

from crud_api.core.errors import (
    CrudApiError, ErrorCategory, ErrorSeverity,
    InvalidFieldError, InvalidIdentifierError, ResourceNotFoundError,
    build_error_envelope,
)


def test_all_domain_errors_share_base():
    for exc in (
        InvalidFieldError("name"),
        InvalidIdentifierError("User", 0),
        ResourceNotFoundError("Todo", "abc"),
    ):
        assert isinstance(exc, CrudApiError)


def test_invalid_field_is_400_validation():
    exc = InvalidFieldError("email")
    assert exc.http_status == 400
    assert exc.code == "VALIDATION_ERROR"
    assert exc.category is ErrorCategory.VALIDATION
    assert "email" in exc.message


def test_invalid_identifier_records_resource_id():
    exc = InvalidIdentifierError("User", 0)
    assert exc.http_status == 400
    assert exc.code == "INVALID_IDENTIFIER"
    assert exc.context.resource_id == "0"


def test_not_found_is_404():
    exc = ResourceNotFoundError("Todo", "missing-id")
    assert exc.http_status == 404
    assert exc.message == "Todo 'missing-id' not found"


def test_to_response_envelope_shape():
    body = ResourceNotFoundError("Todo", "xyz").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == ErrorSeverity.ERROR.value
    assert error["context"]["resource_id"] == "xyz"
    assert "timestamp" in error


def test_build_error_envelope_adds_details_only_when_given():
    plain = build_error_envelope(
        "INTERNAL_ERROR", "boom", ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )["error"]
    assert plain["category"] == "internal"
    assert plain["context"] == {"resource_id": None, "field": None}
    assert "details" not in plain

    detailed = build_error_envelope(
        "VALIDATION_ERROR", "bad", ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
        details=[{"field": "body.age"}],
    )["error"]
    assert detailed["details"] == [{"field": "body.age"}]


def test_to_response_matches_envelope_builder():
    exc = InvalidFieldError("name")
    assert exc.to_response() == build_error_envelope(
        exc.code, exc.message, exc.category, exc.severity, context=exc.context,
    )
