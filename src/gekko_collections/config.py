"""
Configuration management for collection operations.
"""

import logging
from typing import Optional
from dataclasses import dataclass


@dataclass
class CollectionConfig:
    """Global configuration for collection operations."""

    # Profiling
    enable_profiling: bool = False
    slow_operation_threshold: float = 0.1  # seconds
    memory_alert_threshold_mb: float = 100
    max_profile_history: int = 100

    # Logging
    log_level: str = "WARNING"

    _instance: Optional['CollectionConfig'] = None

    @classmethod
    def get_instance(cls) -> 'CollectionConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)

    @classmethod
    def reset(cls) -> None:
        """Restore every field of the shared instance to its default."""
        instance = cls.get_instance()
        defaults = cls()
        for key in defaults.__dataclass_fields__:
            if key.startswith('_'):
                continue
            setattr(instance, key, getattr(defaults, key))

    def format_bytes(self, bytes: int) -> str:
        """Format bytes as human-readable string."""
        sign = "-" if bytes < 0 else ""
        bytes = abs(bytes)
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if bytes < 1024.0:
                return f"{sign}{bytes:.2f} {unit}"
            bytes /= 1024.0
        return f"{sign}{bytes:.2f} PB"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level name (None uses config.log_level)
    """
    logger = logging.getLogger("gekko_collections")
    level = level or config.log_level
    logger.setLevel(level.upper())

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)

    return logger


# Global configuration instance
config = CollectionConfig.get_instance()
