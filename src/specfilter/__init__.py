"""specfilter: composable predicates and an order-preserving filter."""

from .domain import (
    AndPredicate,
    AttributeEquals,
    AttributeIn,
    Color,
    ColorSpecification,
    Filter,
    InvalidCriterionError,
    NotPredicate,
    OrPredicate,
    Predicate,
    PredicateContractError,
    PredicateFilter,
    Product,
    Size,
    SizeSpecification,
    and_,
    filter_items,
    iter_matching,
    not_,
    or_,
)

__version__ = "0.1.0"
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
