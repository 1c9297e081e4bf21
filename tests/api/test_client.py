"""Tests for request specs and the HTTP client (requests mocked)"""

import json

import pytest
import requests
from unittest.mock import MagicMock

from qaprobe_api.client import ApiClient, ApiConnectionError, ApiResponse
from qaprobe_api.models import User
from qaprobe_api.specs import API_KEY_HEADER, RequestSpec, api_key_spec, auth_spec, base_spec
from qaprobe_core.config import Config
from qaprobe_logs.run_report import MemoryEvidence

CFG = Config(api_base_url="https://reqres.in/api", api_key="test-key", api_timeout=7)


def raw_response(status=200, body="", content_type="application/json; charset=utf-8"):
    response = MagicMock()
    response.status_code = status
    response.headers = {"Content-Type": content_type}
    response.text = body
    return response


@pytest.fixture
def session():
    mock_session = MagicMock(spec=requests.Session)
    mock_session.request.return_value = raw_response(200, '{"data": {"id": 2}}')
    return mock_session


class TestSpecs:

    def test_base_spec_has_no_credentials(self):
        spec = base_spec(CFG)
        assert spec.base_url == "https://reqres.in/api"
        assert spec.headers["Content-Type"] == "application/json"
        assert API_KEY_HEADER not in spec.headers

    def test_api_key_spec(self):
        assert api_key_spec(CFG).headers[API_KEY_HEADER] == "test-key"

    @pytest.mark.parametrize("token", [None, ""])
    def test_auth_spec_without_token(self, token):
        headers = auth_spec(CFG, token).headers
        assert "Authorization" not in headers
        assert headers[API_KEY_HEADER] == "test-key"

    def test_auth_spec_with_token(self):
        assert auth_spec(CFG, "abc").headers["Authorization"] == "Bearer abc"

    def test_url_for(self):
        spec = RequestSpec("https://reqres.in/api/")
        assert spec.url_for("/users/2") == "https://reqres.in/api/users/2"
        assert spec.url_for("users") == "https://reqres.in/api/users"
        assert spec.url_for("https://other.test/x") == "https://other.test/x"

    def test_header_copies(self):
        spec = api_key_spec(CFG)
        changed = spec.with_header("Content-Type", "application/x-www-form-urlencoded")
        stripped = spec.without_header("x-api-key")
        assert spec.headers["Content-Type"] == "application/json"
        assert changed.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert API_KEY_HEADER not in stripped.headers


class TestApiResponse:

    def test_get_path(self):
        response = ApiResponse(200, {}, '{"data": [{"id": 7, "email": "a@b.c"}], "page": 1}')
        assert response.get_path("page") == 1
        assert response.get_path("data.0.id") == 7
        assert response.get_path("data.5.id") is None
        assert response.get_path("support.url") is None

    def test_get_path_on_non_json(self):
        assert ApiResponse(500, {}, "<html>").get_path("error") is None
        assert ApiResponse(204, {}, "").get_path("data") is None

    def test_json_raises_on_html(self):
        with pytest.raises(ValueError):
            ApiResponse(500, {}, "<html>").json()

    def test_content_type_is_case_insensitive(self):
        response = ApiResponse(200, {"content-type": "application/json"}, "{}")
        assert response.content_type == "application/json"
        assert response.is_json()
        assert not ApiResponse(200, {"Content-Type": "text/html"}, "").is_json()


class TestApiClient:

    def test_get(self, session):
        sink = MemoryEvidence()
        client = ApiClient(sink=sink, session=session, timeout=7)

        response = client.get(api_key_spec(CFG), "/users/2")

        session.request.assert_called_once_with(
            "GET",
            "https://reqres.in/api/users/2",
            headers=api_key_spec(CFG).headers,
            timeout=7,
        )
        assert response.status_code == 200
        assert response.get_path("data.id") == 2
        assert sink.names() == ["Response Body"]

    def test_post_dict_as_json(self, session):
        sink = MemoryEvidence()
        ApiClient(sink=sink, session=session).post(base_spec(CFG), "/login", {"email": "e"})
        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"email": "e"}
        assert sink.names() == ["Request Body", "Response Body"]

    def test_put_dto_uses_payload(self, session):
        ApiClient(session=session).put(base_spec(CFG), "/users/2", User(first_name="Ana", last_name="Lima"))
        _, kwargs = session.request.call_args
        assert kwargs["json"] == {"first_name": "Ana", "last_name": "Lima", "name": "Ana Lima"}

    def test_raw_string_body(self, session):
        ApiClient(session=session).post(base_spec(CFG), "/login", "{ email: broken }")
        _, kwargs = session.request.call_args
        assert kwargs["data"] == b"{ email: broken }"
        assert "json" not in kwargs

    def test_patch_and_delete_methods(self, session):
        client = ApiClient(session=session)
        client.patch(base_spec(CFG), "/users/2", {"job": "x"})
        assert session.request.call_args[0][0] == "PATCH"
        client.delete(base_spec(CFG), "/users/2")
        assert session.request.call_args[0][0] == "DELETE"

    def test_transport_error(self, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(ApiConnectionError, match="refused"):
            ApiClient(session=session).get(base_spec(CFG), "/users")

    def test_error_status_is_returned_not_raised(self, session):
        session.request.return_value = raw_response(404, "{}")
        assert ApiClient(session=session).get(base_spec(CFG), "/users/999").status_code == 404
