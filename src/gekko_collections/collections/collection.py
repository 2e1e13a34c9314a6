"""
Collection: an immutable, chainable wrapper around an ordered sequence.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union

from gekko_collections.collections.operators import (
    SelectOperator, WhereOperator, SelectManyOperator
)
from gekko_collections.profiler import profiled

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')


class Collection(Generic[T]):
    """
    An ordered sequence of values with functional query operations.

    The wrapped values are copied on construction and never mutated.
    Transformations return a new Collection; queries return a scalar or
    string. Callbacks receive ``(item, index)`` (``(accumulator, item,
    index)`` for ``reduce``) in storage order, and any exception they raise
    propagates unchanged.

    Predicates are matched strictly: only a result that ``is True`` selects
    an element, and only a result that ``is False`` fails ``all``.

    Example:
        >>> Collection.of([1, 2, 3, 4]).where(lambda x, i: x % 2 == 0).select(lambda x, i: x * 10).to_array()
        [20, 40]
    """

    __slots__ = ('_items',)

    def __init__(self, items: Iterable[T] = ()):
        """
        Initialize Collection. Prefer Collection.of().

        Args:
            items: Any iterable; its values are copied
        """
        try:
            iterator = iter(items)
        except TypeError:
            raise TypeError(f"Collection source must be iterable, got {type(items).__name__}") from None

        self._items: Tuple[T, ...] = tuple(iterator)

    @classmethod
    @profiled
    def of(cls, items: Iterable[T]) -> 'Collection[T]':
        """Create a collection from an ordered iterable."""
        return cls(items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    # Queries

    @profiled
    def count(self) -> int:
        """Number of wrapped elements."""
        return len(self._items)

    @profiled
    def to_array(self) -> List[T]:
        """Return the elements as a new list."""
        return list(self._items)

    @profiled
    def first(self, predicate: Optional[Callable[[T, int], bool]] = None) -> Optional[T]:
        """
        Return the first element, or the first one matching predicate.

        Returns None for an empty collection or when nothing matches.
        """
        if predicate is None:
            return self._items[0] if self._items else None

        for index, item in enumerate(self._items):
            if predicate(item, index) is True:
                return item
        return None

    @profiled
    def any(self, predicate: Callable[[T, int], bool]) -> bool:
        """True if at least one element matches; stops at the first match."""
        for index, item in enumerate(self._items):
            if predicate(item, index) is True:
                return True
        return False

    @profiled
    def all(self, predicate: Callable[[T, int], bool]) -> bool:
        """False on the first element whose predicate returns False, else True."""
        for index, item in enumerate(self._items):
            if predicate(item, index) is False:
                return False
        return True

    @profiled
    def reduce(self, func: Callable[[A, T, int], A], initial: A) -> A:
        """Left fold: acc = func(acc, item, index), starting from initial."""
        result = initial
        for index, item in enumerate(self._items):
            result = func(result, item, index)
        return result

    @profiled
    def join(self, separator: str = "") -> str:
        """Concatenate str() of every element with separator between them."""
        return separator.join(str(item) for item in self._items)

    # Transformations

    @profiled
    def for_each(self, func: Callable[[T, int], Any]) -> 'Collection[T]':
        """Call func for every element and return this same collection."""
        for index, item in enumerate(self._items):
            func(item, index)
        return self

    @profiled
    def select(self, func: Callable[[T, int], U]) -> 'Collection[U]':
        """Apply func to each element."""
        return self._derive(SelectOperator(func).apply(self._items))

    @profiled
    def select_many(self, func: Callable[[T, int], Union[Iterable[U], 'Collection[U]']]) -> 'Collection[U]':
        """Map each element to an iterable or Collection and flatten one level."""
        return self._derive(SelectManyOperator(func).apply(self._items))

    @profiled
    def where(self, predicate: Callable[[T, int], bool]) -> 'Collection[T]':
        """Keep only elements matching predicate."""
        return self._derive(WhereOperator(predicate).apply(self._items))

    def _derive(self, items: Iterable[Any]) -> 'Collection[Any]':
        return type(self)(items)
