"""Error hierarchy — status codes, categories and the response envelope.

Tests:
    - Every error renders success=False with a human-readable `errors` message
    - Taxonomy maps to the documented HTTP statuses
    - Credential errors share one base class
"""

from storefront.core.errors import (
    EmailTakenError, ErrorCategory, ErrorContext, InvalidCredentialsError,
    InvalidTokenError, MissingTokenError, ResourceNotFoundError,
    StoreUnavailableError, UnauthorizedError, UnknownEmailError,
    ValidationError, WrongPasswordError,
)


def test_to_response_envelope():
    body = EmailTakenError().to_response()
    assert body["success"] is False
    assert body["errors"] == "Existing User With Same Email Id"
    assert body["error"]["code"] == "EMAIL_TAKEN"
    assert body["error"]["category"] == ErrorCategory.CONFLICT.value
    assert "timestamp" in body["error"]


def test_http_statuses():
    assert EmailTakenError().http_status == 400
    assert UnknownEmailError().http_status == 400
    assert WrongPasswordError().http_status == 400
    assert MissingTokenError().http_status == 401
    assert InvalidTokenError().http_status == 401
    assert ResourceNotFoundError("User", "x").http_status == 404
    assert ValidationError("bad", "name").http_status == 400
    assert StoreUnavailableError("down", "execute").http_status == 503


def test_credential_errors_share_base():
    assert isinstance(UnknownEmailError(), InvalidCredentialsError)
    assert isinstance(WrongPasswordError(), InvalidCredentialsError)


def test_credential_error_messages_are_distinct():
    assert UnknownEmailError().message != WrongPasswordError().message


def test_token_errors_are_unauthorized():
    assert isinstance(MissingTokenError(), UnauthorizedError)
    assert isinstance(InvalidTokenError(), UnauthorizedError)


def test_context_defaults_timestamp():
    ctx = ErrorContext(product_id=3)
    err = StoreUnavailableError("counter missing", "assign_id", ctx)
    assert err.context.product_id == 3
    assert err.context.timestamp is not None
    assert "assign_id" in err.message
