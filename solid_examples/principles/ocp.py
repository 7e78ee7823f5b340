"""The Open/Closed Principle (OCP).

Software entities (classes, modules, functions, etc.) should be open for
extension, but closed for modification: their behaviour can be extended
without changing their source code.

``LegacyProductFilter`` needs a new method for every criterion and every
combination of criteria. ``ProductFilter`` takes a ``Specification``, so new
criteria are new specification classes and the filter never changes.

Ref: https://en.wikipedia.org/wiki/Open/closed_principle
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Iterable, List, TypeVar

from pydantic import BaseModel, ConfigDict

from solid_examples.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Size(str, Enum):
    """Product size enumeration."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    GIANT = "giant"


class Color(str, Enum):
    """Product color enumeration."""
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    BLACK = "black"
    WHITE = "white"


class Product(BaseModel):
    """A product that can be filtered by size and color."""
    model_config = ConfigDict(frozen=True)

    name: str
    size: Size
    color: Color


def sample_products() -> List[Product]:
    return [
        Product(name="Bike", size=Size.SMALL, color=Color.BLUE),
        Product(name="Motorcycle", size=Size.SMALL, color=Color.GREEN),
        Product(name="Car", size=Size.MEDIUM, color=Color.GREEN),
        Product(name="Truck", size=Size.LARGE, color=Color.RED),
        Product(name="Train", size=Size.LARGE, color=Color.YELLOW),
    ]


# Wrong: one hard-coded method per criterion and per combination.
class LegacyProductFilter:
    """Filter that must be modified for every new criterion."""

    def by_size(self, products: Iterable[Product], size: Size) -> List[Product]:
        return [product for product in products if product.size == size]

    def by_color(self, products: Iterable[Product], color: Color) -> List[Product]:
        return [product for product in products if product.color == color]

    def by_size_and_color(
        self, products: Iterable[Product], size: Size, color: Color
    ) -> List[Product]:
        return [
            product
            for product in products
            if product.size == size and product.color == color
        ]


# Better: criteria are specifications, the filter is closed for modification.
class Specification(ABC, Generic[T]):
    """Predicate that tests a single criterion against an item."""

    @abstractmethod
    def is_satisfied(self, item: T) -> bool:
        """Return True if the item meets this specification."""

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class SizeSpecification(Specification[Product]):
    """Matches products of a given size."""

    def __init__(self, size: Size):
        self.size = size

    def is_satisfied(self, item: Product) -> bool:
        return item.size == self.size

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value})"


class ColorSpecification(Specification[Product]):
    """Matches products of a given color."""

    def __init__(self, color: Color):
        self.color = color

    def is_satisfied(self, item: Product) -> bool:
        return item.color == self.color

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value})"


class AndSpecification(Specification[T]):
    """Satisfied only when both wrapped specifications are satisfied."""

    def __init__(self, first: Specification[T], second: Specification[T]):
        self.first = first
        self.second = second

    def is_satisfied(self, item: T) -> bool:
        return self.first.is_satisfied(item) and self.second.is_satisfied(item)

    def __repr__(self) -> str:
        return f"AndSpecification({self.first!r}, {self.second!r})"


class Filter(ABC, Generic[T]):
    """Selects the items that meet a specification."""

    @abstractmethod
    def filter(self, items: Iterable[T], specification: Specification[T]) -> List[T]:
        """Return the items satisfying the specification, in input order."""


class ProductFilter(Filter[Product]):
    """Filters products by any specification."""

    def filter(
        self, items: Iterable[Product], specification: Specification[Product]
    ) -> List[Product]:
        result = [item for item in items if specification.is_satisfied(item)]
        logger.debug("Filtered products", specification=repr(specification), matched=len(result))
        return result


def _print_names(title: str, products: Iterable[Product]) -> None:
    print()
    print(f"--{title}:")
    for product in products:
        print(product.name)


def run() -> None:
    """Filter the sample products with both designs and print the names."""
    products = sample_products()

    print("--The wrong way to filter things...")
    legacy_filter = LegacyProductFilter()
    _print_names("Small things", legacy_filter.by_size(products, Size.SMALL))
    _print_names("Green things", legacy_filter.by_color(products, Color.GREEN))
    _print_names(
        "Large and yellow things",
        legacy_filter.by_size_and_color(products, Size.LARGE, Color.YELLOW),
    )

    print()
    print()
    print("--The right way to filter things...")
    product_filter = ProductFilter()
    _print_names("Small things", product_filter.filter(products, SizeSpecification(Size.SMALL)))
    _print_names("Green things", product_filter.filter(products, ColorSpecification(Color.GREEN)))
    large_and_yellow = AndSpecification(
        SizeSpecification(Size.LARGE), ColorSpecification(Color.YELLOW)
    )
    _print_names("Large and yellow things", product_filter.filter(products, large_and_yellow))


def main() -> None:
    run()


if __name__ == "__main__":
    main()
