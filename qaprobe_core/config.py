#!/usr/bin/env python3
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from .models import FilterRange
from .retry import RetryBudget

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ["true", "1", "yes"]


@dataclass
class Config:
    """Suite configuration"""
    # Web UI suite
    web_base_url: str = os.getenv("QAPROBE_WEB_BASE_URL", "https://www.americanas.com.br/")
    search_term: str = os.getenv("QAPROBE_SEARCH_TERM", "Smart TV")
    price_min: float = float(os.getenv("QAPROBE_PRICE_MIN", "2500"))
    price_max: float = float(os.getenv("QAPROBE_PRICE_MAX", "5000"))
    price_expected: float = float(os.getenv("QAPROBE_PRICE_EXPECTED", "3500"))
    wait_timeout_ms: int = int(os.getenv("QAPROBE_WAIT_TIMEOUT_MS", "15000"))
    settle_delay_ms: int = int(os.getenv("QAPROBE_SETTLE_DELAY_MS", "3000"))
    filter_settle_ms: int = int(os.getenv("QAPROBE_FILTER_SETTLE_MS", "5000"))
    retry_attempts: int = int(os.getenv("QAPROBE_RETRY_ATTEMPTS", "3"))
    retry_backoff_ms: int = int(os.getenv("QAPROBE_RETRY_BACKOFF_MS", "1000"))
    satisfaction_target: int = int(os.getenv("QAPROBE_SATISFACTION_TARGET", "1"))
    headless: bool = _flag("QAPROBE_HEADLESS", "true")
    locale: str = os.getenv("QAPROBE_LOCALE", "pt-BR")

    # REST API suite
    api_base_url: str = os.getenv("QAPROBE_API_BASE_URL", "https://reqres.in/api")
    api_users_endpoint: str = os.getenv("QAPROBE_API_USERS_ENDPOINT", "/users")
    api_login_endpoint: str = os.getenv("QAPROBE_API_LOGIN_ENDPOINT", "/login")
    api_auth_email: str = os.getenv("QAPROBE_API_AUTH_EMAIL", "eve.holt@reqres.in")
    api_auth_password: str = os.getenv("QAPROBE_API_AUTH_PASSWORD", "cityslicka")
    api_key: Optional[str] = os.getenv("QAPROBE_API_KEY", "reqres-free-v1")
    api_timeout: int = int(os.getenv("QAPROBE_API_TIMEOUT", "30"))
    api_throttle_ms: int = int(os.getenv("QAPROBE_API_THROTTLE_MS", "1000"))

    # Reporting
    log_dir: Path = Path(os.getenv("QAPROBE_LOG_DIR", "./logs"))
    screenshot_dir: Path = Path(os.getenv("QAPROBE_SCREENSHOT_DIR", "./screenshots"))
    enable_debug: bool = _flag("QAPROBE_DEBUG", "false")

    def price_range(self) -> FilterRange:
        return FilterRange(min=self.price_min, max=self.price_max, expected=self.price_expected)

    def retry_budget(self) -> RetryBudget:
        return RetryBudget(max_attempts=self.retry_attempts, backoff_ms=self.retry_backoff_ms)

    def user_endpoint(self, user_id: int) -> str:
        return f"{self.api_users_endpoint}/{user_id}"

    def full_login_endpoint(self) -> str:
        return f"{self.api_base_url}{self.api_login_endpoint}"


config = Config()
