"""Pure functions that build raw three-way comparison closures.

Each builder closes over its inputs and returns a new two-argument function.
Nothing here mutates a comparator or keeps state between calls; the
``Comparator`` methods wrap these closures to add the combinators.
"""

from __future__ import annotations

from typing import Any

from comparekit.core.types import BaseComparator, Predicate, Transform


def default_order(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ordering.

    Returns -1 if ``a < b``, 1 if ``a > b`` and 0 otherwise. Values where
    neither relation holds (NaN, incomparable sets) compare as 0.

    Raises:
        TypeError: Propagated from ``<`` when the values cannot be ordered.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def reversed_order[T](func: BaseComparator[T]) -> BaseComparator[T]:
    """Swap the arguments of ``func``."""

    def compare_reversed(a: T, b: T) -> int:
        return func(b, a)

    return compare_reversed


def projected[T, U](func: BaseComparator[T], transform: Transform[U, T]) -> BaseComparator[U]:
    """Compare values by ``func`` applied to ``transform`` of each argument.

    ``transform`` runs exactly once per argument, ``a`` first.
    """

    def compare_projected(a: U, b: U) -> int:
        return func(transform(a), transform(b))

    return compare_projected


def matched_last[T](
    func: BaseComparator[T],
    predicate: Predicate[Any],
    handler: BaseComparator[Any] = default_order,
) -> BaseComparator[Any]:
    """Order values matching ``predicate`` after all others.

    Args:
        func: Ordering among unmatched values.
        predicate: Partition test, evaluated on ``a`` then ``b``.
        handler: Ordering among matched values.

    Returns:
        Comparison function implementing the partition.
    """

    def compare_matched_last(a: Any, b: Any) -> int:
        a_matches = predicate(a)
        b_matches = predicate(b)
        if a_matches:
            return handler(a, b) if b_matches else 1
        if b_matches:
            return -1
        return func(a, b)

    return compare_matched_last


def matched_first[T](
    func: BaseComparator[T],
    predicate: Predicate[Any],
    handler: BaseComparator[Any] = default_order,
) -> BaseComparator[Any]:
    """Order values matching ``predicate`` before all others.

    Mirror image of ``matched_last``.
    """

    def compare_matched_first(a: Any, b: Any) -> int:
        a_matches = predicate(a)
        b_matches = predicate(b)
        if a_matches:
            return handler(a, b) if b_matches else -1
        if b_matches:
            return 1
        return func(a, b)

    return compare_matched_first


def tie_broken[T](
    func: BaseComparator[T],
    handler: BaseComparator[Any] = default_order,
) -> BaseComparator[Any]:
    """Consult ``handler`` only when ``func`` reports a tie.

    A non-zero result from ``func`` is returned as is and ``handler`` is never
    called for that pair.
    """

    def compare_tie_broken(a: Any, b: Any) -> int:
        return func(a, b) or handler(a, b)

    return compare_tie_broken
