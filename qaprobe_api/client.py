"""
HTTP client for the REST suite.

Thin wrapper over requests.Session that records request and response
bodies in an evidence sink and returns a plain ApiResponse. No retries:
each call is sent exactly once.

Usage:
    client = ApiClient(sink=report)
    response = client.get(api_key_spec(), "/users/2")
    assert response.get_path("data.id") == 2
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests
from requests.structures import CaseInsensitiveDict

from qaprobe_core.config import config
from qaprobe_logs.attachments import attach_request_body, attach_response_body

from .specs import RequestSpec

logger = logging.getLogger(__name__)


class ApiConnectionError(Exception):
    """The request never produced an HTTP response"""
    pass


@dataclass
class ApiResponse:
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    text: str = ""

    def __post_init__(self):
        self.headers = CaseInsensitiveDict(self.headers)

    @classmethod
    def from_requests(cls, response: requests.Response) -> "ApiResponse":
        return cls(status_code=response.status_code, headers=dict(response.headers), text=response.text or "")

    def json(self) -> Any:
        """Parsed body; raises ValueError when the body is not JSON"""
        return json.loads(self.text)

    def get_path(self, path: str) -> Any:
        """
        Dotted lookup into the JSON body, e.g. "data.id" or "data.0.email".

        Returns None when the body is not JSON or any segment is missing.
        """
        try:
            node = self.json()
        except ValueError:
            return None
        for part in path.split("."):
            if isinstance(node, dict):
                node = node.get(part)
            elif isinstance(node, list) and part.isdigit() and int(part) < len(node):
                node = node[int(part)]
            else:
                return None
            if node is None:
                return None
        return node

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", "")

    def is_json(self) -> bool:
        return "json" in self.content_type.lower()


class ApiClient:
    """Sends requests described by a RequestSpec."""

    def __init__(self, sink=None, session: Optional[requests.Session] = None, timeout: int = config.api_timeout):
        self.sink = sink
        self.session = session or requests.Session()
        self.timeout = timeout

    def request(self, method: str, spec: RequestSpec, endpoint: str, payload: Any = None) -> ApiResponse:
        """
        Send one request.

        Strings are sent as the raw body, objects with ``to_payload()`` and
        plain dicts/lists as JSON.

        Raises:
            ApiConnectionError: transport failure (DNS, refused, timeout)
        """
        url = spec.url_for(endpoint)
        kwargs: Dict[str, Any] = {"headers": dict(spec.headers), "timeout": self.timeout}
        if payload is not None:
            attach_request_body(self.sink, payload)
            if isinstance(payload, str):
                kwargs["data"] = payload.encode("utf-8")
            elif hasattr(payload, "to_payload"):
                kwargs["json"] = payload.to_payload()
            else:
                kwargs["json"] = payload

        logger.debug(f"{method} {url}")
        try:
            raw = self.session.request(method, url, **kwargs)
        except requests.exceptions.RequestException as e:
            raise ApiConnectionError(f"{method} {url} failed: {e}") from e

        response = ApiResponse.from_requests(raw)
        logger.info(f"{method} {url} -> {response.status_code}")
        attach_response_body(self.sink, response)
        return response

    def get(self, spec: RequestSpec, endpoint: str) -> ApiResponse:
        return self.request("GET", spec, endpoint)

    def post(self, spec: RequestSpec, endpoint: str, payload: Any = None) -> ApiResponse:
        return self.request("POST", spec, endpoint, payload)

    def put(self, spec: RequestSpec, endpoint: str, payload: Any = None) -> ApiResponse:
        return self.request("PUT", spec, endpoint, payload)

    def patch(self, spec: RequestSpec, endpoint: str, payload: Any = None) -> ApiResponse:
        return self.request("PATCH", spec, endpoint, payload)

    def delete(self, spec: RequestSpec, endpoint: str) -> ApiResponse:
        return self.request("DELETE", spec, endpoint)

    def close(self) -> None:
        self.session.close()
