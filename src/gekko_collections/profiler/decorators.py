"""Decorators for easy profiling."""

import functools
import logging
import os
import time
from collections.abc import Sized
from typing import Any, Callable, Optional

import psutil

from gekko_collections.config import config
from gekko_collections.profiler.profiler import OperationProfile, record_profile

logger = logging.getLogger(__name__)

_process: Optional[psutil.Process] = None


def current_process() -> psutil.Process:
    """Return a handle for the calling process, renewed after a fork."""
    global _process
    if _process is None or _process.pid != os.getpid():
        _process = psutil.Process()
    return _process


def _rss() -> int:
    return current_process().memory_info().rss


def profiled(func: Callable) -> Callable:
    """
    Instrument a collection operation.

    Pass-through unless config.enable_profiling is set. When enabled, the
    call's duration and RSS delta are recorded and logged; slow or
    memory-hungry calls are logged at WARNING.
    """
    name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Any:
        if not config.enable_profiling:
            return func(*args, **kwargs)

        receiver = args[0] if args else None
        item_count = len(receiver) if isinstance(receiver, Sized) else None

        start_memory = _rss()
        start_time = time.perf_counter()
        failed = True
        try:
            result = func(*args, **kwargs)
            failed = False
            return result
        finally:
            profile = OperationProfile(
                name=name,
                duration=time.perf_counter() - start_time,
                memory_delta=_rss() - start_memory,
                item_count=item_count,
                failed=failed,
            )
            record_profile(profile)

            if profile.duration > config.slow_operation_threshold:
                logger.warning(f"Slow operation: {profile} "
                               f"(threshold: {config.slow_operation_threshold}s)")
            elif profile.memory_delta_mb > config.memory_alert_threshold_mb:
                logger.warning(f"Memory alert: {profile} "
                               f"(threshold: {config.memory_alert_threshold_mb}MB)")
            else:
                logger.debug(str(profile))

    return wrapper


def profile_memory(threshold_mb: float = 100,
                   alert: bool = True) -> Callable:
    """
    Decorator to profile memory usage.

    Args:
        threshold_mb: Memory threshold in MB to trigger alert
        alert: Log a warning if threshold exceeded

    Example:
        @profile_memory(threshold_mb=500)
        def build_report(rows):
            return Collection.of(rows).select(format_row).join("\\n")
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_memory = _rss()
            start_time = time.perf_counter()

            try:
                return func(*args, **kwargs)
            finally:
                memory_used = (_rss() - start_memory) / (1024 * 1024)
                duration = time.perf_counter() - start_time

                wrapper.memory_used = memory_used
                wrapper.duration = duration

                if alert and memory_used > threshold_mb:
                    logger.warning(f"Memory alert: {func.__name__} used {memory_used:.1f}MB "
                                   f"(threshold: {threshold_mb}MB)")
                else:
                    logger.debug(f"{func.__name__}: memory {memory_used:.1f}MB, time {duration:.4f}s")

        wrapper.memory_used = None
        wrapper.duration = None
        return wrapper

    return decorator


def profile_time(threshold_seconds: float = 1.0,
                 alert: bool = True) -> Callable:
    """
    Decorator to profile execution time.

    Args:
        threshold_seconds: Time threshold to trigger alert
        alert: Log a warning if threshold exceeded
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()

            try:
                return func(*args, **kwargs)
            finally:
                duration = time.perf_counter() - start_time
                wrapper.duration = duration

                if alert and duration > threshold_seconds:
                    logger.warning(f"Time alert: {func.__name__} took {duration:.4f}s "
                                   f"(threshold: {threshold_seconds}s)")
                else:
                    logger.debug(f"{func.__name__}: time {duration:.4f}s")

        wrapper.duration = None
        return wrapper

    return decorator
