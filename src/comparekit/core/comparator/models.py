"""Comparator models: callable comparison values carrying the combinators.

A ``Comparator`` is invoked like the function it wraps and exposes
``reverse``, ``from_``, ``append``, ``prepend`` and ``then``. Every combinator
returns a new ``Comparator``; the receiver is never modified.
"""

from __future__ import annotations

import functools
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeGuard, overload

from comparekit.core.comparator import operations
from comparekit.core.types import BaseComparator

if TYPE_CHECKING:
    import icu


def _or_default(handler: BaseComparator[Any] | None) -> BaseComparator[Any]:
    return operations.default_order if handler is None else handler


class Comparator[T]:
    """Three-way comparison function with composition operators.

    Immutable: the wrapped function is fixed at construction, so combinators
    always build on the behaviour this instance was created with.

    Usage:
        by_name = Comparator(operations.default_order).from_(lambda p: p.name)
        oldest_first = by_name.then(compare.on(lambda p: p.age).reverse())
        people.sort(key=oldest_first.to_key())
    """

    __slots__ = ("_func",)

    def __init__(self, func: BaseComparator[T]) -> None:
        self._func = func

    def __call__(self, a: T, b: T) -> int:
        return self._func(a, b)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"{type(self).__name__}({name})"

    def reverse(self) -> Comparator[T]:
        """Comparator whose result for ``(a, b)`` is this one's for ``(b, a)``."""
        return Comparator(operations.reversed_order(self._func))

    def from_[U](self, transform: Callable[[U], T]) -> Comparator[U]:
        """Compare values of another type through a key projection.

        Args:
            transform: Pure function mapping each argument to a ``T``.

        Returns:
            Comparator computing ``self(transform(a), transform(b))``.
        """
        return Comparator(operations.projected(self._func, transform))

    @overload
    def append[U](
        self,
        predicate: Callable[[T | U], TypeGuard[U]],
        handler: BaseComparator[U] | None = None,
    ) -> Comparator[T | U]: ...

    @overload
    def append(
        self,
        predicate: Callable[[T], bool],
        handler: BaseComparator[T] | None = None,
    ) -> Comparator[T]: ...

    def append(
        self,
        predicate: Callable[[Any], bool],
        handler: BaseComparator[Any] | None = None,
    ) -> Comparator[Any]:
        """Move values matching ``predicate`` after all other values.

        Unmatched values keep this comparator's order; matched values are
        ordered among themselves by ``handler`` (default ordering if omitted).
        """
        matched = operations.matched_last(self._func, predicate, _or_default(handler))
        return Comparator(matched)

    @overload
    def prepend[U](
        self,
        predicate: Callable[[T | U], TypeGuard[U]],
        handler: BaseComparator[U] | None = None,
    ) -> Comparator[T | U]: ...

    @overload
    def prepend(
        self,
        predicate: Callable[[T], bool],
        handler: BaseComparator[T] | None = None,
    ) -> Comparator[T]: ...

    def prepend(
        self,
        predicate: Callable[[Any], bool],
        handler: BaseComparator[Any] | None = None,
    ) -> Comparator[Any]:
        """Move values matching ``predicate`` before all other values.

        Same contract as ``append`` with the partition order inverted.
        """
        matched = operations.matched_first(self._func, predicate, _or_default(handler))
        return Comparator(matched)

    def then[U](self, handler: BaseComparator[U] | None = None) -> Comparator[Any]:
        """Break ties with ``handler`` (default ordering if omitted).

        ``handler`` is only called for pairs this comparator reports as equal.
        """
        return Comparator(operations.tie_broken(self._func, _or_default(handler)))

    def to_key(self) -> Callable[[T], Any]:
        """Adapt to the ``key=`` argument of ``sorted``, ``min`` and ``max``."""
        return functools.cmp_to_key(self)


class LocaleComparator(Comparator[str]):
    """String comparator backed by an ICU collator.

    Calls into the collator are serialized per instance. Combinators return
    plain ``Comparator`` instances that still route through this one.
    """

    __slots__ = ("_collator", "_lock")

    def __init__(self, collator: icu.Collator) -> None:
        self._collator = collator
        self._lock = threading.Lock()
        super().__init__(self._collate)

    def _collate(self, a: str, b: str) -> int:
        with self._lock:
            return self._collator.compare(a, b)

    @property
    def collator(self) -> icu.Collator:
        """The underlying ICU collator (read-only)."""
        return self._collator
