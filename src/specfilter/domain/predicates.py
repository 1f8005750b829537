"""Predicate abstraction and the AND / OR / NOT combinators.

A predicate answers one question about one item: ``is_satisfied(item)``.
Combinators build new predicates out of existing ones without touching them,
so criteria can be authored independently and composed later:

    green_and_large = and_(ColorSpecification("green"), SizeSpecification("large"))
    blue_or_small = ColorSpecification("blue") | SizeSpecification("small")

Predicates must be pure: the same item in the same state always yields the
same answer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import PredicateContractError

T = TypeVar("T")


class Predicate(ABC, Generic[T]):
    """A pure, reusable test of whether a single item satisfies a criterion."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool: ...

    def describe(self) -> str:
        """Human-readable rendering used by logs and the CLI."""
        return type(self).__name__

    def __and__(self, other: Predicate[T]) -> AndPredicate[T]:
        return and_(self, other)

    def __or__(self, other: Predicate[T]) -> OrPredicate[T]:
        return or_(self, other)

    def __invert__(self) -> NotPredicate[T]:
        return not_(self)


def _check_child(child: object) -> None:
    if not isinstance(child, Predicate):
        raise PredicateContractError(
            f"combinator child must be a Predicate, got {type(child).__name__}"
        )


@dataclass(frozen=True, eq=False)
class AndPredicate(Predicate[T]):
    """Satisfied iff every child is satisfied. No children: always satisfied."""

    children: tuple[Predicate[T], ...] = ()

    def __post_init__(self) -> None:
        for child in self.children:
            _check_child(child)

    def is_satisfied(self, item: T) -> bool:
        return all(child.is_satisfied(item) for child in self.children)

    def describe(self) -> str:
        return "and(" + ", ".join(c.describe() for c in self.children) + ")"


@dataclass(frozen=True, eq=False)
class OrPredicate(Predicate[T]):
    """Satisfied iff at least one child is satisfied. No children: never satisfied."""

    children: tuple[Predicate[T], ...] = ()

    def __post_init__(self) -> None:
        for child in self.children:
            _check_child(child)

    def is_satisfied(self, item: T) -> bool:
        return any(child.is_satisfied(item) for child in self.children)

    def describe(self) -> str:
        return "or(" + ", ".join(c.describe() for c in self.children) + ")"


@dataclass(frozen=True, eq=False)
class NotPredicate(Predicate[T]):
    """Satisfied iff its single child is not."""

    child: Predicate[T]

    def __post_init__(self) -> None:
        _check_child(self.child)

    def is_satisfied(self, item: T) -> bool:
        return not self.child.is_satisfied(item)

    def describe(self) -> str:
        return f"not({self.child.describe()})"


def and_(*predicates: Predicate[T]) -> AndPredicate[T]:
    """Conjunction of ``predicates``; ``and_()`` accepts every item."""
    return AndPredicate(tuple(predicates))


def or_(*predicates: Predicate[T]) -> OrPredicate[T]:
    """Disjunction of ``predicates``; ``or_()`` rejects every item."""
    return OrPredicate(tuple(predicates))


def not_(predicate: Predicate[T]) -> NotPredicate[T]:
    """Negation of ``predicate``."""
    return NotPredicate(predicate)
