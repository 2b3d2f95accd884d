import logging

import pytest

from webhook_http import retry_on_fail


class FlakyOperation:
    def __init__(self, failures: int, result: str = "ok") -> None:
        self.failures = failures
        self.result = result
        self.calls = 0
        self.errors: list[Exception] = []

    async def __call__(self) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            error = RuntimeError(f"failure {self.calls}")
            self.errors.append(error)
            raise error
        return self.result


class TestRetryOnFail:
    @pytest.mark.asyncio
    async def test_success_on_first_attempt(self) -> None:
        operation = FlakyOperation(failures=0)

        assert await retry_on_fail(operation) == "ok"
        assert operation.calls == 1

    @pytest.mark.asyncio
    async def test_fails_twice_then_succeeds(self) -> None:
        operation = FlakyOperation(failures=2)

        assert await retry_on_fail(operation) == "ok"
        assert operation.calls == 3

    @pytest.mark.asyncio
    async def test_reraises_last_error_after_three_attempts(self) -> None:
        operation = FlakyOperation(failures=3)

        with pytest.raises(RuntimeError) as exc_info:
            await retry_on_fail(operation)

        assert operation.calls == 3
        assert exc_info.value is operation.errors[-1]

    @pytest.mark.asyncio
    async def test_never_makes_a_fourth_attempt(self) -> None:
        operation = FlakyOperation(failures=10)

        with pytest.raises(RuntimeError, match="failure 3"):
            await retry_on_fail(operation)

        assert operation.calls == 3

    @pytest.mark.asyncio
    async def test_every_exception_kind_is_retried(self) -> None:
        calls = 0

        async def operation() -> int:
            nonlocal calls
            calls += 1
            if calls == 1:
                raise ValueError("bad value")
            if calls == 2:
                raise KeyError("missing")
            return calls

        assert await retry_on_fail(operation) == 3

    @pytest.mark.asyncio
    async def test_custom_attempt_budget(self) -> None:
        operation = FlakyOperation(failures=10)

        with pytest.raises(RuntimeError):
            await retry_on_fail(operation, attempts=5)

        assert operation.calls == 5

    @pytest.mark.asyncio
    async def test_single_attempt_does_not_retry(self) -> None:
        operation = FlakyOperation(failures=1)

        with pytest.raises(RuntimeError):
            await retry_on_fail(operation, attempts=1)

        assert operation.calls == 1

    @pytest.mark.asyncio
    async def test_invalid_attempt_budget(self) -> None:
        with pytest.raises(ValueError):
            await retry_on_fail(FlakyOperation(failures=0), attempts=0)

    @pytest.mark.asyncio
    async def test_retries_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        operation = FlakyOperation(failures=2)

        with caplog.at_level(logging.WARNING, logger="webhook_http"):
            await retry_on_fail(operation)

        retry_records = [r for r in caplog.records if r.name == "webhook_http"]
        assert len(retry_records) == 2
