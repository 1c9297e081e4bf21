"""
Domain assertions for users and auth responses.
"""

from typing import Optional

from .client import ApiResponse
from .models import User, UserListResponse


def assert_user_basic_attributes(user: Optional[User]) -> None:
    assert user is not None, "User must not be None"
    assert user.id is not None, "User id must not be None"
    assert user.email is not None, "User email must not be None"
    assert user.first_name is not None, "User first name must not be None"
    assert user.last_name is not None, "User last name must not be None"


def assert_user_list_response(user_list: Optional[UserListResponse], expected_page: int) -> None:
    assert user_list is not None, "Response must not be None"
    assert user_list.page == expected_page, f"Wrong page: expected {expected_page}, got {user_list.page}"
    assert user_list.data, "User list must not be empty"


def assert_user_created(expected: User, actual: Optional[User]) -> None:
    assert actual is not None, "Created user must not be None"
    assert actual.id is not None, "Created user id must not be None"
    assert actual.first_name == expected.first_name, "Wrong first name"
    assert actual.last_name == expected.last_name, "Wrong last name"
    assert actual.email == expected.email, "Wrong email"
    assert actual.job == expected.job, "Wrong job"
    assert actual.created_at is not None, "Creation timestamp must not be None"


def assert_user_updated(expected: User, actual: Optional[User]) -> None:
    """Only fields set on expected are compared"""
    assert actual is not None, "Updated user must not be None"
    if expected.first_name is not None:
        assert actual.first_name == expected.first_name, "Wrong first name"
    if expected.last_name is not None:
        assert actual.last_name == expected.last_name, "Wrong last name"
    if expected.job is not None:
        assert actual.job == expected.job, "Wrong job"
    assert actual.updated_at is not None, "Update timestamp must not be None"


def assert_valid_token(response: ApiResponse) -> None:
    token = response.get_path("token")
    assert token is not None, "Token must not be None"
    assert token != "", "Token must not be empty"


def assert_error_response(response: ApiResponse, expected_keyword: Optional[str] = None) -> None:
    message = response.get_path("error")
    assert message is not None, "Error message must not be None"
    if expected_keyword:
        assert expected_keyword.lower() in str(message).lower(), f"Error message must mention: {expected_keyword}"


def assert_auth_error_status(response: ApiResponse) -> None:
    assert response.status_code in (400, 401, 403), (
        f"Status code should be 400, 401 or 403, got: {response.status_code}"
    )
