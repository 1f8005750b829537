"""Generic leaf predicates that match a single declared attribute of an item type."""

from __future__ import annotations

import dataclasses
import typing
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError

from .errors import InvalidCriterionError
from .predicates import Predicate

T = TypeVar("T")


def _field_annotation(item_type: type, attribute: str) -> Any:
    """Return the declared annotation of ``attribute`` on ``item_type``."""
    if isinstance(item_type, type) and issubclass(item_type, BaseModel):
        field = item_type.model_fields.get(attribute)
        if field is None:
            raise InvalidCriterionError(
                f"{item_type.__name__} has no field '{attribute}'"
            )
        return field.annotation
    if dataclasses.is_dataclass(item_type):
        names = {f.name for f in dataclasses.fields(item_type)}
        if attribute not in names:
            raise InvalidCriterionError(
                f"{item_type.__name__} has no field '{attribute}'"
            )
        try:
            return typing.get_type_hints(item_type)[attribute]
        except NameError as e:
            raise InvalidCriterionError(
                f"cannot resolve the annotation of {item_type.__name__}.{attribute}"
            ) from e
    raise InvalidCriterionError(
        f"cannot inspect fields of {item_type!r}; use a pydantic model or dataclass"
    )


def _coerce(item_type: type, attribute: str, annotation: Any, value: Any) -> Any:
    try:
        return TypeAdapter(annotation).validate_python(value)
    except PydanticUserError as e:
        raise InvalidCriterionError(
            f"{item_type.__name__}.{attribute} has a type that cannot be validated"
        ) from e
    except ValidationError as e:
        raise InvalidCriterionError(
            f"{value!r} is not a valid value for {item_type.__name__}.{attribute}"
        ) from e


class AttributeEquals(Predicate[T]):
    """Satisfied when ``item.<attribute> == value``.

    The attribute must be a declared field of ``item_type`` and ``value`` must
    validate against its annotation; both are checked here, never per item.
    """

    def __init__(self, item_type: type[T], attribute: str, value: Any) -> None:
        annotation = _field_annotation(item_type, attribute)
        self._attribute = attribute
        self._value = _coerce(item_type, attribute, annotation, value)

    @property
    def attribute(self) -> str:
        return self._attribute

    @property
    def value(self) -> Any:
        return self._value

    def is_satisfied(self, item: T) -> bool:
        return getattr(item, self._attribute) == self._value

    def describe(self) -> str:
        return f"{self._attribute} == {_render(self._value)}"


class AttributeIn(Predicate[T]):
    """Satisfied when ``item.<attribute>`` is any of ``values``."""

    def __init__(self, item_type: type[T], attribute: str, values: Iterable[Any]) -> None:
        annotation = _field_annotation(item_type, attribute)
        self._attribute = attribute
        self._values = tuple(
            _coerce(item_type, attribute, annotation, v) for v in values
        )

    @property
    def attribute(self) -> str:
        return self._attribute

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def is_satisfied(self, item: T) -> bool:
        return getattr(item, self._attribute) in self._values

    def describe(self) -> str:
        rendered = ", ".join(_render(v) for v in self._values)
        return f"{self._attribute} in [{rendered}]"


def _render(value: Any) -> str:
    return str(getattr(value, "value", value))
