"""Immutable collections with chainable query operations."""

from gekko_collections.collections.collection import Collection
from gekko_collections.collections.predicate import Predicate, PredicateFunc
from gekko_collections.collections.operators import (
    CollectionOperator,
    SelectOperator,
    WhereOperator,
    SelectManyOperator,
)

__all__ = [
    "Collection",
    "Predicate",
    "PredicateFunc",
    "CollectionOperator",
    "SelectOperator",
    "WhereOperator",
    "SelectManyOperator",
]
