"""The Liskov Substitution Principle (LSP).

If S is a subtype of T, objects of type T may be replaced with objects of
type S without altering any of the desirable properties of T. This is
(strong) behavioral subtyping, introduced by Barbara Liskov in her 1987
keynote "Data abstraction and hierarchy".

``Square`` offers the full ``RectangleShape`` interface, but setting one of
its dimensions changes both. Code written against a rectangle, which expects
``set_height`` to leave the width alone, computes the wrong area when handed
a square. That mismatch is what this example prints.

Ref: https://en.wikipedia.org/wiki/Liskov_substitution_principle
"""
from abc import ABC, abstractmethod
from typing import Tuple

from solid_examples.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class RectangleShape(ABC):
    """Capability interface shared by anything that behaves like a rectangle."""

    @abstractmethod
    def get_width(self) -> int:
        """Get the width."""

    @abstractmethod
    def get_height(self) -> int:
        """Get the height."""

    @abstractmethod
    def set_width(self, width: int) -> None:
        """Set the width."""

    @abstractmethod
    def set_height(self, height: int) -> None:
        """Set the height."""

    @abstractmethod
    def area(self) -> int:
        """Width times height."""


class Rectangle(RectangleShape):
    """Rectangle with independent width and height."""

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height

    def get_width(self) -> int:
        return self._width

    def get_height(self) -> int:
        return self._height

    def set_width(self, width: int) -> None:
        self._width = width

    def set_height(self, height: int) -> None:
        self._height = height

    def area(self) -> int:
        return self._width * self._height

    def __repr__(self) -> str:
        return f"Rectangle(width={self._width}, height={self._height})"


class Square(RectangleShape):
    """
    Square posing as a rectangle.

    Both setters change the single side length, so ``set_height`` also
    changes the width. This breaks the rectangle's contract.
    """

    def __init__(self, size: int):
        self._size = size

    def get_width(self) -> int:
        return self._size

    def get_height(self) -> int:
        return self._size

    def set_width(self, width: int) -> None:
        self._size = width

    def set_height(self, height: int) -> None:
        self._size = height

    def area(self) -> int:
        return self._size * self._size

    def __repr__(self) -> str:
        return f"Square(size={self._size})"


def height_change_areas(shape: RectangleShape, new_height: int) -> Tuple[int, int]:
    """
    Change a shape's height the way rectangle client code would.

    Args:
        shape: Any rectangle-like shape
        new_height: Height to set

    Returns:
        Tuple of the area a rectangle client expects (original width times
        the new height) and the area the shape actually reports
    """
    width = shape.get_width()
    shape.set_height(new_height)
    expected, actual = width * new_height, shape.area()
    if expected != actual:
        logger.debug("Substitution broke the area", shape=repr(shape), expected=expected, actual=actual)
    return expected, actual


def run() -> None:
    rectangle = Rectangle(10, 10)
    expected, actual = height_change_areas(rectangle, 20)
    print(f"\nExpected {expected}, got {actual}")

    # LSP violated: a square should not stand in for a rectangle.
    square = Square(10)
    expected, actual = height_change_areas(square, 20)
    print(f"\nExpected {expected}, got {actual}")


def main() -> None:
    run()


if __name__ == "__main__":
    main()
