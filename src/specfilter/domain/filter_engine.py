"""Filter evaluator: applies any Predicate to a collection, preserving source order.

The evaluator is written once against the Predicate abstraction. New leaf
predicates and combinators plug in without any change here.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, TypeVar

from ..observability import get_logger, log_filter_pass
from .errors import PredicateContractError
from .predicates import Predicate

T = TypeVar("T")


def _require_predicate(predicate: object) -> None:
    if not isinstance(predicate, Predicate):
        raise PredicateContractError(
            f"filter requires a Predicate, got {type(predicate).__name__}"
        )


class Filter(ABC, Generic[T]):
    """Selects the items of a collection that satisfy a predicate."""

    @abstractmethod
    def apply(self, items: Iterable[T], predicate: Predicate[T]) -> list[T]: ...


class PredicateFilter(Filter[T]):
    """Single-pass, order-preserving filter over any Predicate."""

    def apply(self, items: Iterable[T], predicate: Predicate[T]) -> list[T]:
        """Return the items satisfying ``predicate``, in source order.

        Every item is evaluated exactly once; results are the source objects
        themselves, not copies.
        """
        _require_predicate(predicate)
        start = time.perf_counter()
        scanned = 0
        result: list[T] = []
        for item in items:
            scanned += 1
            if predicate.is_satisfied(item):
                result.append(item)
        if get_logger().isEnabledFor(logging.DEBUG):
            log_filter_pass(
                predicate.describe(),
                scanned=scanned,
                matched=len(result),
                latency_ms=(time.perf_counter() - start) * 1000.0,
            )
        return result

    def iter_matching(self, items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
        """Lazy variant of :meth:`apply`; yields matches as they are found."""
        _require_predicate(predicate)
        return (item for item in items if predicate.is_satisfied(item))


_DEFAULT_FILTER: PredicateFilter = PredicateFilter()


def filter_items(items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    """Return the items satisfying ``predicate`` using the shared stateless filter."""
    return _DEFAULT_FILTER.apply(items, predicate)


def iter_matching(items: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """Lazily yield the items satisfying ``predicate``."""
    return _DEFAULT_FILTER.iter_matching(items, predicate)
