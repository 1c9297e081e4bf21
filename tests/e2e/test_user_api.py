"""Users resource against the live API"""

import pytest

from qaprobe_api import assertions, fixtures
from qaprobe_api.models import User, UserListResponse

from . import live

pytestmark = [pytest.mark.e2e, live]

VALID_USER_ID = 2
INVALID_USER_ID = 999


def test_user_list(user_service, request_spec, response_validator):
    response = user_service.get_user_list(request_spec, 1)

    def check(r):
        user_list = UserListResponse.from_dict(r.json())
        assertions.assert_user_list_response(user_list, 1)
        assertions.assert_user_basic_attributes(user_list.data[0])

    response_validator.validate_response(200, check, response)


def test_single_user(user_service, request_spec, response_validator):
    response = user_service.get_user(request_spec, VALID_USER_ID)

    def check(r):
        user = User.from_dict(r.get_path("data"))
        assertions.assert_user_basic_attributes(user)
        assert user.id == VALID_USER_ID, "Wrong user id"

    response_validator.validate_response(200, check, response)


def test_create_user(user_service, request_spec, response_validator):
    new_user = fixtures.valid_user()
    response = user_service.create_user(request_spec, new_user)

    response_validator.validate_response(
        201, lambda r: assertions.assert_user_created(new_user, User.from_dict(r.json())), response
    )


@pytest.mark.parametrize("update", [fixtures.user_for_update, fixtures.user_for_partial_update])
def test_update_user(user_service, request_spec, response_validator, update):
    expected = update()
    if expected.first_name is None:
        response = user_service.patch_user(request_spec, VALID_USER_ID, expected)
    else:
        response = user_service.update_user(request_spec, VALID_USER_ID, expected)

    response_validator.validate_response(
        200, lambda r: assertions.assert_user_updated(expected, User.from_dict(r.json())), response
    )


def test_delete_user(user_service, request_spec, response_validator):
    response_validator.validate_status_code(204, user_service.delete_user(request_spec, VALID_USER_ID))


def test_unknown_user(user_service, request_spec, response_validator):
    response_validator.validate_status_code(404, user_service.get_user(request_spec, INVALID_USER_ID))
