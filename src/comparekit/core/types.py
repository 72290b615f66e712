"""Core type definitions for comparekit."""

from collections.abc import Callable

type BaseComparator[T] = Callable[[T, T], int]
"""Bare three-way comparison function.

Negative when the first argument orders first, zero when both are equivalent,
positive when the first argument orders last.
"""

type Predicate[T] = Callable[[T], bool]

type Transform[U, T] = Callable[[U], T]
"""Projection applied to each argument before comparing."""
