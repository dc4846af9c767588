"""Error Hierarchy — status codes, codes and the REST envelope."""

from pollen8.core.errors import (
    ConflictError,
    ConnectionAlreadyExistsError,
    ConnectionNotFoundError,
    DatabaseError,
    DuplicateInviteUrlError,
    ErrorCategory,
    ErrorContext,
    InputValidationError,
    InviteTrackingError,
    Pollen8Error,
    ResourceNotFoundError,
)


def test_validation_error_is_400():
    err = InputValidationError("bad", "period")
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.field == "period"


def test_connection_not_found_message_and_status():
    err = ConnectionNotFoundError("a", "b")
    assert isinstance(err, ResourceNotFoundError)
    assert err.http_status == 404
    assert err.message == "Connection does not exist"
    assert err.code == "CONNECTION_NOT_FOUND"


def test_connection_exists_is_conflict():
    err = ConnectionAlreadyExistsError("a", "b")
    assert isinstance(err, ConflictError)
    assert err.http_status == 409
    assert err.message == "Connection already exists"
    assert err.category == ErrorCategory.CONFLICT


def test_duplicate_invite_url_reports_attempts():
    err = DuplicateInviteUrlError(5)
    assert err.http_status == 409
    assert err.attempts == 5
    assert "5 attempt" in err.message


def test_invite_tracking_status_depends_on_cause():
    missing = InviteTrackingError("inv-1", invite_missing=True)
    failed = InviteTrackingError("inv-1")
    assert missing.http_status == 404
    assert failed.http_status == 503
    assert missing.message == failed.message == "Failed to track invite click"
    assert failed.context.invite_id == "inv-1"


def test_database_error_is_503_critical():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity.value == "critical"


def test_to_response_envelope():
    err = ResourceNotFoundError(
        "User", "u-1", context=ErrorContext(user_id="u-1", operation="lookup"),
    )
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == "User 'u-1' not found"
    assert body["category"] == "resource_not_found"
    assert body["context"] == {
        "user_id": "u-1", "invite_id": None, "operation": "lookup",
    }
    assert "timestamp" in body


def test_all_errors_share_base():
    assert issubclass(InviteTrackingError, Pollen8Error)
    assert issubclass(DatabaseError, Pollen8Error)
