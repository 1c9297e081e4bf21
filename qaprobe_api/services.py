"""
Users and authentication services over ApiClient.
"""

import logging
from typing import Any, Dict, Optional

from qaprobe_core.config import Config, config
from qaprobe_logs.attachments import attach_error_message

from .client import ApiClient, ApiConnectionError, ApiResponse
from .fixtures import valid_credentials
from .models import User
from .specs import RequestSpec, api_key_spec

logger = logging.getLogger(__name__)


class UserService:
    """CRUD calls on the users resource."""

    def __init__(self, client: ApiClient, cfg: Config = config):
        self.client = client
        self.cfg = cfg

    def get_user_list(self, spec: RequestSpec, page: int = 1) -> ApiResponse:
        return self.client.get(spec, f"{self.cfg.api_users_endpoint}?page={page}")

    def get_user(self, spec: RequestSpec, user_id: int) -> ApiResponse:
        return self.client.get(spec, self.cfg.user_endpoint(user_id))

    def create_user(self, spec: RequestSpec, user: User) -> ApiResponse:
        return self.client.post(spec, self.cfg.api_users_endpoint, user)

    def update_user(self, spec: RequestSpec, user_id: int, user: User) -> ApiResponse:
        return self.client.put(spec, self.cfg.user_endpoint(user_id), user)

    def patch_user(self, spec: RequestSpec, user_id: int, user: User) -> ApiResponse:
        return self.client.patch(spec, self.cfg.user_endpoint(user_id), user)

    def delete_user(self, spec: RequestSpec, user_id: int) -> ApiResponse:
        return self.client.delete(spec, self.cfg.user_endpoint(user_id))


class AuthService:
    """Login against the configured credentials."""

    def __init__(self, client: ApiClient, cfg: Config = config):
        self.client = client
        self.cfg = cfg

    def login(self, credentials: Dict[str, Any], spec: Optional[RequestSpec] = None) -> ApiResponse:
        return self.client.post(spec or api_key_spec(self.cfg), self.cfg.api_login_endpoint, credentials)

    def get_auth_token(self) -> str:
        """
        Fetch a bearer token with the configured credentials.

        Returns:
            The token, or "" when login fails (non-200 or transport error).
            The failure is attached as "Error Message".
        """
        try:
            response = self.login(valid_credentials(self.cfg))
        except ApiConnectionError as e:
            attach_error_message(self.client.sink, f"Erro ao obter token de autenticação: {e}")
            return ""

        if response.status_code != 200:
            attach_error_message(self.client.sink, f"Erro na autenticação: código {response.status_code}")
            return ""

        token = response.get_path("token") or ""
        logger.debug(f"Auth token received ({len(token)} chars)")
        return token
