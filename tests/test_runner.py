# ============================================================================
# CHECK RUNNER TESTS
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Tests - Concurrent execution and timeout race
# PURPOSE: Verify ordering, timeouts, failure capture and cancellation
# CREATED: 18 OCT 2026
# ============================================================================
"""
Check Runner Tests

Covers:
1. One result per check, in input order regardless of completion order
2. Checks run concurrently
3. Hanging checks resolve to 'timeout' within the bound
4. Raising checks (sync and async) become DEGRADED results
5. Losing checks are cancelled and not awaited

Run with:
    pytest tests/test_runner.py -v
"""

import asyncio
import time

import pytest

from core.contracts import CheckStatus, FailureKind
from health.core import Check, CheckResult
from health.runner import CheckRunner


# ============================================================================
# HELPERS
# ============================================================================

class SleepyCheck(Check):
    """Returns OK after a delay, recording when it finished."""

    def __init__(self, name, delay=0.0, finished=None):
        self.name = name
        self.delay = delay
        self.finished = finished if finished is not None else []

    async def check(self) -> CheckResult:
        await asyncio.sleep(self.delay)
        self.finished.append(self.name)
        return CheckResult.ok(self.name)


class HangingCheck(Check):
    """Never settles on its own; records whether it was cancelled."""

    name = "hanging"

    def __init__(self):
        self.cancelled = False

    async def check(self) -> CheckResult:
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return CheckResult.ok(self.name)


class RaisingCheck(Check):
    name = "raising"

    def __init__(self, exc):
        self.exc = exc

    async def check(self) -> CheckResult:
        await asyncio.sleep(0)
        raise self.exc


def _run(checks, timeout_ms=1000, runner=None):
    runner = runner or CheckRunner(timeout_ms=timeout_ms)
    return asyncio.run(runner.run(checks))


# ============================================================================
# ORDERING
# ============================================================================

class TestOrdering:
    """Results come back in input order, one per check."""

    def test_empty_list(self):
        assert _run([]) == []

    def test_one_result_per_check(self):
        checks = [SleepyCheck(f"c{i}") for i in range(5)]
        results = _run(checks)
        assert [r.name for r in results] == ["c0", "c1", "c2", "c3", "c4"]

    def test_input_order_not_completion_order(self):
        finished = []
        checks = [
            SleepyCheck("slow", delay=0.05, finished=finished),
            SleepyCheck("fast", delay=0.0, finished=finished),
        ]

        results = _run(checks)

        assert finished == ["fast", "slow"]
        assert [r.name for r in results] == ["slow", "fast"]

    def test_mixed_outcomes_keep_positions(self):
        checks = [
            SleepyCheck("a"),
            RaisingCheck(ValueError("boom")),
            HangingCheck(),
            SleepyCheck("d"),
        ]

        results = _run(checks, timeout_ms=50)

        assert [r.name for r in results] == ["a", "raising", "hanging", "d"]
        assert [r.status for r in results] == [
            CheckStatus.OK,
            CheckStatus.DEGRADED,
            CheckStatus.DEGRADED,
            CheckStatus.OK,
        ]


# ============================================================================
# CONCURRENCY
# ============================================================================

class TestConcurrency:

    def test_checks_run_concurrently(self):
        checks = [SleepyCheck(f"c{i}", delay=0.2) for i in range(3)]

        start = time.monotonic()
        results = _run(checks)
        elapsed = time.monotonic() - start

        assert all(r.is_ok for r in results)
        assert elapsed < 0.5


# ============================================================================
# TIMEOUTS
# ============================================================================

class TestTimeout:

    def test_hanging_check_times_out(self):
        start = time.monotonic()
        results = _run([HangingCheck()], timeout_ms=50)
        elapsed = time.monotonic() - start

        assert results[0].status == CheckStatus.DEGRADED
        assert results[0].error == "timeout"
        assert results[0].kind == FailureKind.TIMEOUT
        assert elapsed < 1.0

    def test_timeout_keeps_check_name(self):
        results = _run([HangingCheck()], timeout_ms=20)
        assert results[0].name == "hanging"

    def test_slow_check_bounded_by_timeout(self):
        start = time.monotonic()
        results = _run([SleepyCheck("slow", delay=5.0)], timeout_ms=50)
        elapsed = time.monotonic() - start

        assert results[0].error == "timeout"
        assert elapsed < 1.0

    def test_losing_check_is_cancelled(self):
        hanging = HangingCheck()

        async def scenario():
            results = await CheckRunner(timeout_ms=20).run([hanging])
            await asyncio.sleep(0.01)
            return results

        results = asyncio.run(scenario())
        assert results[0].error == "timeout"
        assert hanging.cancelled is True

    def test_runner_does_not_wait_for_check_ignoring_cancel(self):
        """A check that swallows cancellation can't stretch run()."""
        outcome = {}

        async def stubborn():
            try:
                await asyncio.sleep(0.3)
            except asyncio.CancelledError:
                await asyncio.sleep(0.1)
            outcome["finished"] = True
            return CheckResult.ok("stubborn")

        async def scenario():
            runner = CheckRunner(timeout_ms=30)
            start = time.monotonic()
            results = await runner.run([stubborn])
            elapsed = time.monotonic() - start
            pending = runner.abandoned_count

            await asyncio.sleep(0.3)
            return results, elapsed, pending, runner.abandoned_count

        results, elapsed, pending, remaining = asyncio.run(scenario())

        assert results[0].name == "stubborn"
        assert results[0].error == "timeout"
        assert elapsed < 0.25
        assert pending == 1
        assert remaining == 0
        assert outcome["finished"] is True

    def test_timeout_override_per_run(self):
        async def scenario():
            runner = CheckRunner(timeout_ms=5000)
            return await runner.run([SleepyCheck("slow", delay=1.0)], timeout_ms=20)

        results = asyncio.run(scenario())
        assert results[0].error == "timeout"

    def test_non_positive_override_times_out_everything(self):
        async def scenario():
            runner = CheckRunner(timeout_ms=1000)
            return await runner.run(
                [SleepyCheck("a", delay=0.01), SleepyCheck("b", delay=0.01)],
                timeout_ms=0,
            )

        results = asyncio.run(scenario())
        assert [r.error for r in results] == ["timeout", "timeout"]

    @pytest.mark.parametrize("timeout_ms", [0, -1])
    def test_constructor_rejects_non_positive_timeout(self, timeout_ms):
        with pytest.raises(ValueError):
            CheckRunner(timeout_ms=timeout_ms)


# ============================================================================
# FAILURE CAPTURE
# ============================================================================

class TestFailureCapture:
    """Nothing a check does escapes run()."""

    def test_async_raise_carries_message(self):
        results = _run([RaisingCheck(ConnectionError("connection refused"))])

        assert results[0].name == "raising"
        assert results[0].status == CheckStatus.DEGRADED
        assert results[0].error == "connection refused"
        assert results[0].kind == FailureKind.UNKNOWN_FAILURE

    def test_exception_without_message_uses_fallback(self):
        results = _run([RaisingCheck(RuntimeError())])
        assert results[0].error == "failed"

    def test_sync_raise_before_first_await(self):
        class ExplodingCheck(Check):
            name = "exploding"

            def check(self):
                raise KeyError("missing")

        results = _run([ExplodingCheck()])
        assert results[0].name == "exploding"
        assert results[0].status == CheckStatus.DEGRADED
        assert "missing" in results[0].error

    def test_bare_sync_callable(self):
        def sync_check():
            return CheckResult.ok("sync")

        def broken():
            raise ValueError("bad config")

        results = _run([sync_check, broken])
        assert results[0] == CheckResult.ok("sync")
        assert results[1].name == "broken"
        assert results[1].error == "bad config"

    def test_bare_async_callable(self):
        async def ping():
            return CheckResult.ok("ping")

        assert _run([ping]) == [CheckResult.ok("ping")]

    def test_non_result_return_value(self):
        async def sloppy():
            return {"status": "ok"}

        results = _run([sloppy])
        assert results[0].name == "sloppy"
        assert results[0].status == CheckStatus.DEGRADED
        assert results[0].error == "invalid check result"

    def test_self_cancelling_check(self):
        async def quitter():
            raise asyncio.CancelledError()

        results = _run([quitter])
        assert results[0].status == CheckStatus.DEGRADED
        assert results[0].error == "cancelled"

    def test_error_is_always_a_string(self):
        results = _run([RaisingCheck(ValueError(42))])
        assert isinstance(results[0].error, str)
        assert results[0].error == "42"

    def test_degraded_value_passes_through(self):
        async def degraded():
            return CheckResult.degraded("db", "slow replica")

        results = _run([degraded])
        assert results[0] == CheckResult.degraded("db", "slow replica")

    def test_string_status_is_coerced(self):
        async def db():
            return CheckResult(name="db", status="ok")

        async def cache():
            return CheckResult(name="cache", status="degraded", error="evicting")

        results = _run([db, cache])

        assert results[0].status is CheckStatus.OK
        assert results[0].is_ok
        assert results[1].status is CheckStatus.DEGRADED
        assert results[1].error == "evicting"

    def test_unknown_string_status_degrades_slot(self):
        async def db():
            return CheckResult(name="db", status="fine")

        results = _run([db, SleepyCheck("env")])

        assert results[0].name == "db"
        assert results[0].status == CheckStatus.DEGRADED
        assert "fine" in results[0].error
        assert results[1] == CheckResult.ok("env")

    def test_status_forced_past_validation(self):
        async def forced():
            result = CheckResult.ok("forced")
            object.__setattr__(result, "status", "fine")
            return result

        results = _run([forced])
        assert results[0] == CheckResult.degraded("forced", "invalid check result")

    def test_failing_name_lookup_uses_class_name(self):
        class NamelessCheck(Check):
            @property
            def name(self):
                raise RuntimeError("no name")

            async def check(self) -> CheckResult:
                raise ConnectionError("connection refused")

        results = _run([NamelessCheck(), SleepyCheck("env")])

        assert results[0].name == "NamelessCheck"
        assert results[0].error == "connection refused"
        assert results[1].is_ok

    def test_unprintable_exception_uses_fallback(self):
        class Unprintable(Exception):
            def __str__(self):
                raise RuntimeError("unprintable")

        results = _run([RaisingCheck(Unprintable()), SleepyCheck("env")])

        assert results[0].name == "raising"
        assert results[0].status == CheckStatus.DEGRADED
        assert results[0].error == "failed"
        assert results[1].is_ok


# ============================================================================
# CALLER CANCELLATION
# ============================================================================

class TestCallerCancellation:

    def test_cancelling_run_cancels_checks(self):
        hanging = HangingCheck()

        async def scenario():
            runner = CheckRunner(timeout_ms=5000)
            task = asyncio.ensure_future(runner.run([hanging]))
            await asyncio.sleep(0.02)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task
            await asyncio.sleep(0.01)

        asyncio.run(scenario())
        assert hanging.cancelled is True
