"""Product catalog models and the colour / size criteria over them."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidCriterionError
from .predicates import Predicate


class Color(str, Enum):
    """Product colours."""

    red = "red"
    green = "green"
    blue = "blue"


class Size(str, Enum):
    """Product sizes."""

    small = "small"
    medium = "medium"
    large = "large"


class Product(BaseModel):
    """A catalog entry. Frozen so filter passes only ever read it."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name")
    color: Color = Field(..., description="Product colour")
    size: Size = Field(..., description="Product size")


class ColorSpecification(Predicate[Product]):
    """Products of one colour."""

    def __init__(self, color: Color | str) -> None:
        try:
            self._color = Color(color)
        except ValueError as e:
            raise InvalidCriterionError(f"unknown color: {color!r}") from e

    @property
    def color(self) -> Color:
        return self._color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self._color

    def describe(self) -> str:
        return f"color == {self._color.value}"


class SizeSpecification(Predicate[Product]):
    """Products of one size."""

    def __init__(self, size: Size | str) -> None:
        try:
            self._size = Size(size)
        except ValueError as e:
            raise InvalidCriterionError(f"unknown size: {size!r}") from e

    @property
    def size(self) -> Size:
        return self._size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self._size

    def describe(self) -> str:
        return f"size == {self._size.value}"
