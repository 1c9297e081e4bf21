"""Login against the live API"""

import pytest

from qaprobe_api import assertions, fixtures
from qaprobe_core.config import config

from . import live

pytestmark = [pytest.mark.e2e, live]


def test_login(auth_service, response_validator):
    response = auth_service.login(fixtures.valid_credentials(config))
    response_validator.validate_response(200, assertions.assert_valid_token, response)


def test_get_auth_token(auth_service):
    assert auth_service.get_auth_token() != ""


def test_login_with_wrong_password_still_returns_token(auth_service, response_validator):
    # the public service accepts any password for a registered email
    response = auth_service.login(fixtures.invalid_password_credentials(config))
    response_validator.validate_response(200, assertions.assert_valid_token, response)


@pytest.mark.parametrize("credentials, missing", [
    (fixtures.credentials_without_password, "password"),
    (fixtures.credentials_without_email, "email"),
])
def test_login_with_missing_field(auth_service, response_validator, credentials, missing):
    response = auth_service.login(credentials(config))
    response_validator.validate_response(400, lambda r: assertions.assert_error_response(r, missing), response)
