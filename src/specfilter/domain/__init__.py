"""Domain layer for specfilter."""

from .attributes import AttributeEquals, AttributeIn
from .errors import InvalidCriterionError, PredicateContractError
from .filter_engine import Filter, PredicateFilter, filter_items, iter_matching
from .predicates import (
    AndPredicate,
    NotPredicate,
    OrPredicate,
    Predicate,
    and_,
    not_,
    or_,
)
from .products import Color, ColorSpecification, Product, Size, SizeSpecification

__all__ = [
    "AndPredicate",
    "AttributeEquals",
    "AttributeIn",
    "Color",
    "ColorSpecification",
    "Filter",
    "InvalidCriterionError",
    "NotPredicate",
    "OrPredicate",
    "Predicate",
    "PredicateContractError",
    "PredicateFilter",
    "Product",
    "Size",
    "SizeSpecification",
    "and_",
    "filter_items",
    "iter_matching",
    "not_",
    "or_",
]
