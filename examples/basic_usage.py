#!/usr/bin/env python3
"""
Basic usage examples for Gekko Collections.
"""

from gekko_collections import (
    Collection,
    Predicate,
    CollectionConfig,
    configure_logging,
    get_profiles,
)
from gekko_collections.profiler import profile_time


def example_transformations():
    """Example: map, filter and flatten."""
    print("\n=== Transformations ===")

    numbers = Collection.of(range(1, 11))
    evens = numbers.where(lambda x, i: x % 2 == 0)
    squares = evens.select(lambda x, i: x * x)
    pairs = Collection.of([1, 3, 5]).select_many(lambda x, i: [x, x + 1])

    print(f"Evens: {evens.to_array()}")
    print(f"Squares: {squares.to_array()}")
    print(f"Pairs: {pairs.to_array()}")
    print(f"Original untouched: {numbers.count()} items")


def example_queries():
    """Example: scalar and string results."""
    print("\n=== Queries ===")

    scores = Collection.of([72, 88, 95, 61])
    print(f"First above 90: {scores.first(lambda s, i: s > 90)}")
    print(f"Any failing: {scores.any(lambda s, i: s < 65)}")
    print(f"All passing: {scores.all(lambda s, i: s >= 60)}")
    print(f"Total: {scores.reduce(lambda acc, s, i: acc + s, 0)}")

    columns = Collection.of(["id", "name", "email"])
    print(f"SELECT {columns.join(', ')} FROM users")


def example_predicates():
    """Example: reusable predicates."""
    print("\n=== Predicates ===")

    fields = Collection.of(["alice", None, "", "bob", 0])
    print(f"Null fields: {fields.where(Predicate.is_null()).count()}")
    print(f"Empty fields: {fields.where(Predicate.is_empty()).count()}")


@profile_time(threshold_seconds=0.5)
def example_profiling():
    """Example: log and inspect operation timings."""
    print("\n=== Profiling ===")

    CollectionConfig.set_defaults(enable_profiling=True)
    configure_logging("DEBUG")

    (Collection.of(range(100_000))
     .select(lambda x, i: x * 3)
     .where(lambda x, i: x % 2 == 0)
     .count())

    for profile in get_profiles():
        print(profile)

    CollectionConfig.set_defaults(enable_profiling=False)


def main():
    """Run all examples."""
    print("Gekko Collections Examples")
    print("=" * 50)

    example_transformations()
    example_queries()
    example_predicates()
    example_profiling()


if __name__ == "__main__":
    main()
