"""Reusable predicates for Collection operations."""

from typing import Any, Callable

PredicateFunc = Callable[[Any, int], bool]


class Predicate:
    """Factory of ``(item, index) -> bool`` functions."""

    @staticmethod
    def is_null() -> PredicateFunc:
        """Matches None."""
        def predicate(item: Any, index: int) -> bool:
            return item is None
        return predicate

    @staticmethod
    def is_empty() -> PredicateFunc:
        """
        Matches falsy items: None, "", 0, 0.0, False and empty containers.

        Objects take part through __bool__ or __len__.
        """
        def predicate(item: Any, index: int) -> bool:
            return not item
        return predicate
