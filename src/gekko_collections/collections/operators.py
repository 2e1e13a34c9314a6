"""
Index-aware element operators.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, TypeVar

T = TypeVar('T')
U = TypeVar('U')


class CollectionOperator(ABC):
    """Base class for element operators."""

    @abstractmethod
    def apply(self, items: Iterable[T]) -> Iterator[Any]:
        """Apply operator to the items, in storage order."""
        pass


class SelectOperator(CollectionOperator):
    """Map each element to a new value."""

    def __init__(self, func: Callable[[T, int], U]):
        self.func = func

    def apply(self, items: Iterable[T]) -> Iterator[U]:
        for index, item in enumerate(items):
            yield self.func(item, index)


class WhereOperator(CollectionOperator):
    """Keep elements whose predicate result is exactly True."""

    def __init__(self, predicate: Callable[[T, int], bool]):
        self.predicate = predicate

    def apply(self, items: Iterable[T]) -> Iterator[T]:
        for index, item in enumerate(items):
            if self.predicate(item, index) is True:
                yield item


class SelectManyOperator(CollectionOperator):
    """Map each element to several elements and flatten one level."""

    def __init__(self, func: Callable[[T, int], Iterable[U]]):
        self.func = func

    def apply(self, items: Iterable[T]) -> Iterator[U]:
        for index, item in enumerate(items):
            result = self.func(item, index)
            # Mappings contribute their values
            if isinstance(result, Mapping):
                result = result.values()
            try:
                iterator = iter(result)
            except TypeError:
                raise TypeError(
                    f"select_many callback must return an iterable or a Collection, "
                    f"got {type(result).__name__} for item at index {index}"
                ) from None
            yield from iterator
