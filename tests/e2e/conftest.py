"""
Fixtures for the live suites.

Both suites write a markdown run report per test under config.log_dir.
API tests pause config.api_throttle_ms after each call to respect the
public service's rate limit.
"""

import time

import pytest
import pytest_asyncio

from qaprobe_api.client import ApiClient
from qaprobe_api.services import AuthService, UserService
from qaprobe_api.specs import api_key_spec
from qaprobe_api.validators import ApiErrorValidator, ResponseValidator
from qaprobe_core.browser import launch_browser
from qaprobe_core.config import config
from qaprobe_logs.attachments import log_test_start
from qaprobe_logs.run_report import RunReport


@pytest.fixture
def report(request):
    log_test_start(request.node.name)
    run_report = RunReport(title=request.node.name, log_dir=config.log_dir)
    yield run_report
    failed = getattr(request.node, "rep_call", None)
    run_report.finalize(success=not (failed and failed.failed))


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


@pytest.fixture
def api_client(report):
    client = ApiClient(sink=report)
    yield client
    client.close()
    time.sleep(config.api_throttle_ms / 1000)


@pytest.fixture
def request_spec():
    return api_key_spec(config)


@pytest.fixture
def user_service(api_client):
    return UserService(api_client, config)


@pytest.fixture
def auth_service(api_client):
    return AuthService(api_client, config)


@pytest.fixture
def response_validator():
    return ResponseValidator()


@pytest.fixture
def error_validator():
    return ApiErrorValidator()


@pytest_asyncio.fixture
async def driver():
    async with launch_browser(config) as browser_driver:
        yield browser_driver
