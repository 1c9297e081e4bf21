"""
Response validators. Every check raises AssertionError with a message
that names the expected and actual values.
"""

import logging
from enum import Enum
from typing import Callable, Optional

from .client import ApiResponse

logger = logging.getLogger(__name__)

_AUTH_ERROR_WORDS = ("error", "unauthorized", "forbidden", "invalid", "authentication")
_VALIDATION_ERROR_WORDS = ("error", "invalid", "validation", "required")
_BASIC_ERROR_FIELDS = ("error", "message", "code", "status")


class ResponseValidator:
    """Status, field and content-type checks for any response."""

    def validate_response(
        self,
        expected_code: int,
        check: Optional[Callable[[ApiResponse], None]],
        response: ApiResponse,
    ) -> None:
        """Status code first, then the extra check when given"""
        try:
            self.validate_status_code(expected_code, response)
            if check is not None:
                check(response)
        except AssertionError as e:
            logger.error(f"Response validation failed: {e}")
            raise

    def validate_status_code(self, expected_code: int, response: ApiResponse) -> None:
        if response.status_code != expected_code:
            raise AssertionError(
                f"Unexpected status code. Expected: {expected_code}, actual: {response.status_code}"
            )

    def validate_field_exists(self, response: ApiResponse, field: str) -> None:
        if response.get_path(field) is None:
            raise AssertionError(f"Field '{field}' not found in response")

    def validate_json_content(self, response: ApiResponse) -> None:
        try:
            response.json()
        except ValueError as e:
            raise AssertionError(f"Response body is not valid JSON: {e}") from e


class ErrorType(Enum):
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    SERVER_ERROR = "server_error"
    GENERAL = "general"


class ApiErrorValidator:
    """Checks for 4xx/5xx responses."""

    def validate_error_response_format(self, response: ApiResponse) -> None:
        """Error status, non-empty body, body parses as JSON"""
        if response is None:
            raise AssertionError("Response must not be None")
        if response.status_code < 400:
            raise AssertionError(f"Status code must be an error (>=400), got: {response.status_code}")
        if not response.text:
            raise AssertionError("Error response body must not be empty")
        try:
            response.json()
        except ValueError as e:
            raise AssertionError(f"Error response is not valid JSON: {e}") from e

    def validate_authentication_error_response(self, response: ApiResponse) -> None:
        if response.status_code not in (400, 401, 403):
            raise AssertionError(f"Status code must be 401, 403 or 400, got: {response.status_code}")
        body = response.text.lower()
        if not any(word in body for word in _AUTH_ERROR_WORDS):
            raise AssertionError("Response must indicate an authentication error")

    def validate_data_validation_error_response(self, response: ApiResponse) -> None:
        if response.status_code != 400:
            raise AssertionError(f"Status code must be 400 (Bad Request), got: {response.status_code}")
        body = response.text.lower()
        if not any(word in body for word in _VALIDATION_ERROR_WORDS):
            raise AssertionError("Response must indicate a validation error")

    def validate_not_found_error_response(self, response: ApiResponse) -> None:
        if response.status_code != 404:
            raise AssertionError(f"Status code must be 404 (Not Found), got: {response.status_code}")

    def validate_method_not_allowed_error_response(self, response: ApiResponse) -> None:
        if response.status_code != 405:
            raise AssertionError(f"Status code must be 405 (Method Not Allowed), got: {response.status_code}")

    def validate_error_response(self, response: ApiResponse, error_type: ErrorType) -> None:
        if error_type is ErrorType.AUTHENTICATION:
            self.validate_authentication_error_response(response)
        elif error_type is ErrorType.VALIDATION:
            self.validate_data_validation_error_response(response)
        elif error_type is ErrorType.NOT_FOUND:
            self.validate_not_found_error_response(response)
        elif error_type is ErrorType.METHOD_NOT_ALLOWED:
            self.validate_method_not_allowed_error_response(response)
        else:
            self.validate_error_response_format(response)

    def validate_error_message(
        self,
        response: ApiResponse,
        error_field: str,
        expected_content: Optional[str] = None,
    ) -> None:
        """The field holds a non-empty message containing expected_content (case-insensitive)"""
        message = response.get_path(error_field)
        if message is None:
            raise AssertionError(f"Error message '{error_field}' must not be None")
        message = str(message)
        if not message:
            raise AssertionError(f"Error message '{error_field}' must not be empty")
        if expected_content and expected_content.lower() not in message.lower():
            raise AssertionError(f"Error message must contain '{expected_content}', got: {message}")

    def validate_error_response_fields(self, response: ApiResponse, *required_fields: str) -> None:
        for name in required_fields:
            if response.get_path(name) is None:
                raise AssertionError(f"Required field '{name}' not found in error response")

    def validate_basic_error_structure(self, response: ApiResponse) -> None:
        if not any(name in response.text for name in _BASIC_ERROR_FIELDS):
            raise AssertionError("Response must contain at least one standard error field")
