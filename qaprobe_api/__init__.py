"""
qaprobe_api package: REST API suite for the users/login service

Usage:
    from qaprobe_api import ApiClient, UserService, api_key_spec

    client = ApiClient()
    response = UserService(client).get_user(api_key_spec(), 2)
"""
from .specs import RequestSpec, api_key_spec, auth_spec, base_spec
from .client import ApiClient, ApiConnectionError, ApiResponse
from .models import Support, User, UserListResponse
from .services import AuthService, UserService
from .validators import ApiErrorValidator, ErrorType, ResponseValidator

__all__ = [
    "RequestSpec",
    "api_key_spec",
    "auth_spec",
    "base_spec",
    "ApiClient",
    "ApiConnectionError",
    "ApiResponse",
    "Support",
    "User",
    "UserListResponse",
    "AuthService",
    "UserService",
    "ApiErrorValidator",
    "ErrorType",
    "ResponseValidator",
]
