# ============================================================================
# HEALTH CHECK RUNNER
# ============================================================================
# EPOCH: 1 - HEALTH PROBES
# STATUS: Infrastructure - Concurrent check execution
# PURPOSE: Run checks concurrently, each raced against a timeout
# CREATED: 18 OCT 2026
# ============================================================================
"""
Health Check Runner

Executes checks with:
- Concurrent execution (every check started before any is awaited)
- Per-check timeout race (check done vs. timer fired)
- Fail-safe capture: raises, self-cancellation and bad return values
  become DEGRADED results, never exceptions
- Index-stable output: results come back in input order

Execution Strategy:
1. Wrap each check in a slot coroutine and gather the slots
2. Each slot starts its check as a task and waits on it with a timeout
3. A check that wins the race supplies the slot's result
4. A check that loses is cancelled and abandoned; run() does not wait
   for it, so total time stays bounded by the timeout
"""

import asyncio
import inspect
import logging
import time
from typing import Any, List, Optional, Sequence, Set

from core.contracts import CheckStatus, FailureKind
from core.logging import log_context
from health.core import (
    FALLBACK_ERROR,
    CheckResult,
    check_name,
    describe_exception,
)

logger = logging.getLogger(__name__)

TIMEOUT_ERROR = "timeout"
CANCELLED_ERROR = "cancelled"
INVALID_RESULT_ERROR = "invalid check result"


class CheckRunner:
    """
    Runs a heterogeneous list of checks concurrently.

    Accepts Check instances (anything with an async check() method) or
    bare callables, sync or async, returning a CheckResult.
    """

    def __init__(self, timeout_ms: int = 1500):
        """
        Initialize runner.

        Args:
            timeout_ms: Default per-check bound, in milliseconds

        Raises:
            ValueError: If timeout_ms is not positive
        """
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        self.timeout_ms = timeout_ms
        self._abandoned: Set[asyncio.Task] = set()

    @property
    def abandoned_count(self) -> int:
        """Timed-out checks that are still winding down."""
        return len(self._abandoned)

    async def run(
        self,
        checks: Sequence[Any],
        timeout_ms: Optional[int] = None,
    ) -> List[CheckResult]:
        """
        Run all checks and collect one result per check.

        Args:
            checks: Ordered checks to run
            timeout_ms: Override the runner's default bound. Zero or
                negative means every check times out immediately.

        Returns:
            Results in the same order as checks
        """
        if not checks:
            return []

        timeout = (self.timeout_ms if timeout_ms is None else timeout_ms) / 1000
        start_time = time.monotonic()

        results = await asyncio.gather(
            *(self._run_slot(check, max(timeout, 0)) for check in checks)
        )

        logger.debug(
            f"Ran {len(results)} checks in "
            f"{(time.monotonic() - start_time) * 1000:.1f}ms"
        )
        return list(results)

    async def _run_slot(self, check: Any, timeout: float) -> CheckResult:
        """Race one check against the timer. Never raises Exception."""
        name = check_name(check)

        with log_context(check_name=name):
            start_time = time.monotonic()
            task = asyncio.ensure_future(self._invoke(check))

            try:
                done, _ = await asyncio.wait({task}, timeout=timeout)
            except asyncio.CancelledError:
                # Caller gave up on the whole run
                task.cancel()
                raise

            duration_ms = (time.monotonic() - start_time) * 1000

            if task not in done:
                task.cancel()
                self._abandon(task, name)
                logger.warning(
                    f"Check {name} timed out after {timeout * 1000:.0f}ms"
                )
                return CheckResult.degraded(name, TIMEOUT_ERROR, FailureKind.TIMEOUT)

            try:
                result = task.result()
            except asyncio.CancelledError:
                logger.warning(f"Check {name} cancelled itself")
                return CheckResult.degraded(name, CANCELLED_ERROR)
            except Exception as e:
                failed = CheckResult.from_exception(name, e, FALLBACK_ERROR)
                logger.error(f"Check {name} failed: {type(e).__name__}: {failed.error}")
                return failed

            if not isinstance(result, CheckResult):
                logger.error(
                    f"Check {name} returned {type(result).__name__}, "
                    f"expected CheckResult"
                )
                return CheckResult.degraded(name, INVALID_RESULT_ERROR)

            # Status was forced past validation
            if not isinstance(result.status, CheckStatus):
                logger.error(
                    f"Check {name} returned status of type "
                    f"{type(result.status).__name__}"
                )
                return CheckResult.degraded(name, INVALID_RESULT_ERROR)

            if result.is_ok:
                logger.debug(f"Check {name}: ok ({duration_ms:.1f}ms)")
            else:
                logger.warning(
                    f"Check {name}: degraded ({duration_ms:.1f}ms): {result.error}"
                )
            return result

    @staticmethod
    async def _invoke(check: Any) -> Any:
        """Call the check; synchronous raises land in the task too."""
        method = getattr(check, "check", None)
        outcome = method() if callable(method) else check()
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome

    def _abandon(self, task: asyncio.Task, name: str) -> None:
        """Keep a reference to a losing check until it finishes."""
        self._abandoned.add(task)

        def _discard(finished: asyncio.Task) -> None:
            self._abandoned.discard(finished)
            if finished.cancelled():
                return
            # Retrieve so asyncio doesn't report it as never retrieved
            exc = finished.exception()
            if exc is not None:
                logger.debug(
                    f"Discarded late failure from {name}: {describe_exception(exc)}"
                )
            else:
                logger.debug(f"Discarded late result from {name}")

        task.add_done_callback(_discard)


# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    "TIMEOUT_ERROR",
    "CANCELLED_ERROR",
    "INVALID_RESULT_ERROR",
    "CheckRunner",
]
