"""Profiling for collection operations."""

from gekko_collections.profiler.profiler import (
    OperationProfile,
    record_profile,
    get_profiles,
    clear_profiles,
)
from gekko_collections.profiler.decorators import (
    profiled,
    current_process,
    profile_memory,
    profile_time,
)

__all__ = [
    "OperationProfile",
    "record_profile",
    "get_profiles",
    "clear_profiles",
    "profiled",
    "current_process",
    "profile_memory",
    "profile_time",
]
