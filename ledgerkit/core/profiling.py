"""Transparent profiling of operation dispatch."""

from __future__ import annotations

import math
import threading
import time
from collections import defaultdict, deque
from contextlib import contextmanager
from typing import Any

from .context import get_current_execution_context, running_operation

_profiler_lock = threading.Lock()


class ExecutionProfiler:
    def __init__(self, max_samples: int = 10_000):
        self._nested: dict[str, set[str]] = defaultdict(set)
        self._fanout_counts: dict[str, dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._calls: dict[str, int] = defaultdict(int)
        self._failures: dict[str, int] = defaultdict(int)
        self._cancellations: dict[str, int] = defaultdict(int)
        self._execution_times: dict[str, deque[float]] = defaultdict(
            lambda: deque(maxlen=max_samples)
        )
        self._lock = threading.Lock()
        self._start_time = time.perf_counter()

    def record_operation_start(self, key: str, caller: str | None) -> None:
        with self._lock:
            self._calls[key] += 1
            if caller:
                self._nested[caller].add(key)
                self._fanout_counts[caller][key] += 1

    def record_operation_end(
        self, key: str, duration: float, error: BaseException | None = None
    ) -> None:
        from .errors import OperationCanceledError

        with self._lock:
            self._execution_times[key].append(duration)
            if isinstance(error, OperationCanceledError):
                self._cancellations[key] += 1
            elif error is not None:
                self._failures[key] += 1

    def get_dependency_graph(self) -> dict[str, set[str]]:
        """Operations each operation ran as nested calls."""
        with self._lock:
            return {caller: set(keys) for caller, keys in self._nested.items()}

    def get_fanout_matrix(self) -> dict[str, dict[str, float]]:
        """Average nested calls per caller execution."""
        with self._lock:
            return {
                caller: {k: c / self._calls[caller] for k, c in counts.items()}
                for caller, counts in self._fanout_counts.items()
                if self._calls[caller] > 0
            }

    def get_execution_stats(self) -> dict[str, dict[str, float]]:
        import statistics

        with self._lock:
            stats = {}
            for key, times in self._execution_times.items():
                if not times:
                    continue
                sample = sorted(times)
                n = len(sample)

                def pct(p: float) -> float:
                    k = (n - 1) * (p / 100)
                    f, c = math.floor(k), math.ceil(k)
                    return (
                        sample[int(k)]
                        if f == c
                        else sample[f] + (sample[c] - sample[f]) * (k - f)
                    )

                stats[key] = {
                    "mean": statistics.fmean(sample),
                    "p50": pct(50),
                    "p95": pct(95),
                    "p99": pct(99),
                    "count": n,
                }
            return stats

    def get_call_counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._calls)

    def get_failure_counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._failures)

    def get_cancellation_counts(self) -> dict[str, int]:
        with self._lock:
            return dict(self._cancellations)

    def get_elapsed_time(self) -> float:
        return time.perf_counter() - self._start_time

    def reset(self) -> None:
        with self._lock:
            self._nested.clear()
            self._fanout_counts.clear()
            self._calls.clear()
            self._failures.clear()
            self._cancellations.clear()
            self._execution_times.clear()
            self._start_time = time.perf_counter()

    def summary(self) -> dict[str, Any]:
        """Get a complete summary of profiling data."""
        return {
            "dependency_graph": self.get_dependency_graph(),
            "fanout_matrix": self.get_fanout_matrix(),
            "execution_stats": self.get_execution_stats(),
            "call_counts": self.get_call_counts(),
            "failure_counts": self.get_failure_counts(),
            "cancellation_counts": self.get_cancellation_counts(),
            "elapsed_seconds": self.get_elapsed_time(),
        }


# Profiler control


def enable_profiling(max_samples: int = 10_000) -> ExecutionProfiler:
    """Enable transparent operation profiling.

    Returns:
        The active profiler instance

    Example:
        profiler = enable_profiling()
        # ... run operations ...
        stats = profiler.summary()
        print(stats["dependency_graph"])
    """
    ctx = get_current_execution_context()
    with _profiler_lock:
        if ctx.profiler is None:
            ctx.profiler = ExecutionProfiler(max_samples=max_samples)
        return ctx.profiler


def disable_profiling() -> None:
    """Disable operation profiling."""
    ctx = get_current_execution_context()
    with _profiler_lock:
        ctx.profiler = None


def is_profiling_enabled() -> bool:
    """Check if profiling is currently enabled."""
    ctx = get_current_execution_context()
    with _profiler_lock:
        return ctx.profiler is not None


def get_profiler() -> ExecutionProfiler | None:
    """Get the active profiler instance, if any."""
    ctx = get_current_execution_context()
    with _profiler_lock:
        return ctx.profiler


@contextmanager
def profile(max_samples: int = 10_000):
    """Context manager for scoped profiling.

    Example:
        with profile() as profiler:
            await client.auctions().for_auction_house(house).load_bid(lazy)
            print(profiler.summary())
    """
    profiler = enable_profiling(max_samples=max_samples)
    try:
        yield profiler
    finally:
        disable_profiling()


@contextmanager
def operation_context(key: str):
    """Context manager for operation execution tracking (internal use).

    Used by the executor to track the running operation so nested
    operations can be attributed to their caller.
    """
    profiler = get_current_execution_context().profiler
    with running_operation(key) as caller:
        if profiler is None:
            yield
            return

        profiler.record_operation_start(key, caller)
        start_time = time.perf_counter()
        error: BaseException | None = None

        try:
            yield
        except BaseException as e:
            error = e
            raise
        finally:
            duration = time.perf_counter() - start_time
            profiler.record_operation_end(key, duration, error)
