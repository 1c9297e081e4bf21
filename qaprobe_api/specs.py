"""
Request specifications: base URL plus default headers for a family of calls.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from qaprobe_core.config import Config, config

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
API_KEY_HEADER = "X-API-KEY"


@dataclass(frozen=True)
class RequestSpec:
    base_url: str
    headers: Dict[str, str] = field(default_factory=dict)

    def url_for(self, endpoint: str) -> str:
        """Join endpoint onto base_url; absolute URLs pass through"""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def with_header(self, name: str, value: str) -> "RequestSpec":
        return replace(self, headers={**self.headers, name: value})

    def without_header(self, name: str) -> "RequestSpec":
        return replace(self, headers={k: v for k, v in self.headers.items() if k.lower() != name.lower()})


def base_spec(cfg: Config = config) -> RequestSpec:
    """JSON spec with no credentials"""
    return RequestSpec(
        base_url=cfg.api_base_url,
        headers={"Content-Type": JSON_CONTENT_TYPE, "Accept": JSON_CONTENT_TYPE},
    )


def api_key_spec(cfg: Config = config) -> RequestSpec:
    spec = base_spec(cfg)
    if cfg.api_key:
        spec = spec.with_header(API_KEY_HEADER, cfg.api_key)
    return spec


def auth_spec(cfg: Config = config, token: Optional[str] = None) -> RequestSpec:
    """API key spec plus a bearer token, when one is given"""
    spec = api_key_spec(cfg)
    if token:
        spec = spec.with_header("Authorization", f"Bearer {token}")
    return spec
