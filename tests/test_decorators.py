"""Tests for the loguru logging decorators."""

from collections.abc import Iterator

import pytest
from loguru import logger

from storefront.domain.result import ErrorKind, Result
from storefront.shared.decorators import log_errors, log_failures


@pytest.fixture
def messages() -> Iterator[list[str]]:
    captured: list[str] = []
    handler_id = logger.add(lambda message: captured.append(message.record["message"]), level="DEBUG")
    yield captured
    logger.remove(handler_id)


def test_log_errors_logs_and_reraises(messages: list[str]) -> None:
    @log_errors
    def explode() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        explode()

    assert any("RuntimeError: boom" in m and "explode" in m for m in messages)


async def test_log_errors_wraps_coroutines(messages: list[str]) -> None:
    @log_errors
    async def explode() -> None:
        raise ValueError("bad")

    with pytest.raises(ValueError):
        await explode()

    assert any("ValueError: bad" in m for m in messages)


async def test_log_failures_warns_on_failed_result(messages: list[str]) -> None:
    @log_failures
    async def fetch() -> Result:
        return Result.fail(ErrorKind.transport, "timed out")

    result = await fetch()

    assert not result.success
    assert any("transport: timed out" in m for m in messages)


async def test_log_failures_is_quiet_on_success(messages: list[str]) -> None:
    @log_failures
    async def fetch() -> Result:
        return Result.ok({})

    await fetch()

    assert not any("fetch" in m for m in messages)
