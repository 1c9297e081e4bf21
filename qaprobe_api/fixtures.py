"""Request payloads used by the API suite."""

from typing import Dict

from qaprobe_core.config import Config, config

from .models import User

INVALID_PASSWORD = "senhaInvalida"


def valid_user() -> User:
    return User(first_name="João", last_name="Silva", email="joao.silva@email.com", job="QA Engineer")


def user_for_update() -> User:
    return User(first_name="João Atualizado", last_name="Silva Atualizado", job="Senior QA Engineer")


def user_for_partial_update() -> User:
    return User(job="Automation Specialist")


def valid_credentials(cfg: Config = config) -> Dict[str, str]:
    return {"email": cfg.api_auth_email, "password": cfg.api_auth_password}


def invalid_password_credentials(cfg: Config = config) -> Dict[str, str]:
    return {"email": cfg.api_auth_email, "password": INVALID_PASSWORD}


def credentials_without_password(cfg: Config = config) -> Dict[str, str]:
    return {"email": cfg.api_auth_email}


def credentials_without_email(cfg: Config = config) -> Dict[str, str]:
    return {"password": cfg.api_auth_password}
