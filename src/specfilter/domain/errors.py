"""Error types raised while building predicates."""

from __future__ import annotations


class InvalidCriterionError(ValueError):
    """A leaf predicate was given a criterion that cannot apply to its item type."""


class PredicateContractError(AssertionError):
    """A predicate graph was wired with something that is not a Predicate."""
