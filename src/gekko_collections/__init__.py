"""
Gekko Collections: immutable sequences with chainable functional operations.

Wrap any ordered iterable with Collection.of() and chain select, where,
select_many and friends; finish with count, first, any, all, reduce, join
or to_array.
"""

import logging

from gekko_collections.config import CollectionConfig, configure_logging
from gekko_collections.collections import Collection, Predicate
from gekko_collections.profiler import get_profiles, clear_profiles

__version__ = "0.1.0"
__author__ = "Leonardo Brugnara"
__license__ = "MIT"

__all__ = [
    "CollectionConfig",
    "configure_logging",
    "Collection",
    "Predicate",
    "get_profiles",
    "clear_profiles",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
