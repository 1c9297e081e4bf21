"""Tests for retry module."""

import pytest

from qaprobe_core.errors import NotFoundError, StaleReferenceError
from qaprobe_core.retry import RetryBudget, retry_with_backoff, stale_retry, with_stale_retry
from tests.mocks.fake_driver import RecordingSleep


def flaky(failures, exc=StaleReferenceError, result="ok"):
    calls = {"count": 0}

    async def operation():
        calls["count"] += 1
        if calls["count"] <= failures:
            raise exc(f"failure {calls['count']}")
        return result

    return operation, calls


class TestRetryBudget:

    def test_defaults(self):
        budget = RetryBudget()
        assert budget.max_attempts == 3
        assert budget.backoff_ms == 1000
        assert budget.backoff_seconds == 1.0

    def test_rejects_zero_attempts(self):
        with pytest.raises(ValueError):
            RetryBudget(max_attempts=0)

    def test_rejects_negative_backoff(self):
        with pytest.raises(ValueError):
            RetryBudget(backoff_ms=-1)


@pytest.mark.asyncio
class TestWithStaleRetry:

    async def test_success_on_first_attempt(self):
        sleep = RecordingSleep()
        operation, calls = flaky(0)

        assert await with_stale_retry(operation, sleep=sleep) == "ok"
        assert calls["count"] == 1
        assert sleep.calls == []

    async def test_two_failures_then_success_sleeps_twice(self):
        sleep = RecordingSleep()
        operation, calls = flaky(2)

        assert await with_stale_retry(operation, RetryBudget(3, 1000), sleep=sleep) == "ok"
        assert calls["count"] == 3
        assert sleep.calls == [1.0, 1.0]

    async def test_exhausted_reraises_last_stale_error(self):
        sleep = RecordingSleep()
        operation, calls = flaky(10)

        with pytest.raises(StaleReferenceError, match="failure 3"):
            await with_stale_retry(operation, RetryBudget(3, 1000), sleep=sleep)
        assert calls["count"] == 3
        assert len(sleep.calls) == 2

    async def test_other_errors_propagate_immediately(self):
        sleep = RecordingSleep()
        operation, calls = flaky(1, exc=NotFoundError)

        with pytest.raises(NotFoundError):
            await with_stale_retry(operation, sleep=sleep)
        assert calls["count"] == 1
        assert sleep.calls == []

    async def test_single_attempt_budget_never_sleeps(self):
        sleep = RecordingSleep()
        operation, calls = flaky(1)

        with pytest.raises(StaleReferenceError):
            await with_stale_retry(operation, RetryBudget(max_attempts=1), sleep=sleep)
        assert sleep.calls == []


@pytest.mark.asyncio
class TestRetryWithBackoff:

    async def test_custom_retry_on(self):
        sleep = RecordingSleep()
        operation, calls = flaky(1, exc=ConnectionError)

        result = await retry_with_backoff(operation, RetryBudget(2, 250), (ConnectionError,), sleep=sleep)
        assert result == "ok"
        assert sleep.calls == [0.25]


@pytest.mark.asyncio
class TestStaleRetryDecorator:

    async def test_uses_owner_sleep(self):
        class Page:
            def __init__(self):
                self._sleep = RecordingSleep()
                self.calls = 0

            @stale_retry(RetryBudget(max_attempts=3, backoff_ms=500))
            async def check(self):
                self.calls += 1
                if self.calls < 3:
                    raise StaleReferenceError("detached")
                return self.calls

        page = Page()
        assert await page.check() == 3
        assert page._sleep.calls == [0.5, 0.5]
        assert Page.check.__name__ == "check"
