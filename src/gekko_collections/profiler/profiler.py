"""Operation profiles and the in-memory profile history."""

import threading
from dataclasses import dataclass
from typing import List, Optional

from gekko_collections.config import config


@dataclass
class OperationProfile:
    """Timing and memory figures for one profiled call."""
    name: str
    duration: float
    memory_delta: int
    item_count: Optional[int] = None
    failed: bool = False

    @property
    def memory_delta_mb(self) -> float:
        return self.memory_delta / (1024 * 1024)

    def __str__(self) -> str:
        items = "?" if self.item_count is None else self.item_count
        status = " (raised)" if self.failed else ""
        return (f"{self.name} over {items} items: {self.duration * 1000:.3f}ms, "
                f"memory {config.format_bytes(self.memory_delta)}{status}")


_history: List[OperationProfile] = []
_lock = threading.Lock()


def record_profile(profile: OperationProfile) -> None:
    """Append a profile, dropping the oldest beyond config.max_profile_history."""
    with _lock:
        _history.append(profile)
        overflow = len(_history) - max(0, config.max_profile_history)
        if overflow > 0:
            del _history[:overflow]


def get_profiles(name: Optional[str] = None) -> List[OperationProfile]:
    """Return recorded profiles, optionally only those for one operation."""
    with _lock:
        if name is None:
            return list(_history)
        return [p for p in _history if p.name == name]


def clear_profiles() -> None:
    """Forget every recorded profile."""
    with _lock:
        _history.clear()
