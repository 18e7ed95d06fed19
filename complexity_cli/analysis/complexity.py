"""
Complexity classes and their total order.
"""

from enum import IntEnum
from typing import Iterable


class ComplexityClass(IntEnum):
    """Asymptotic growth classes, ordered from best to worst."""

    CONSTANT = 0
    LOGARITHMIC = 1
    LINEAR = 2
    LINEARITHMIC = 3
    QUADRATIC = 4
    CUBIC = 5
    EXPONENTIAL = 6
    FACTORIAL = 7

    @property
    def label(self) -> str:
        return LABELS[self]

    def __str__(self) -> str:
        return self.label


LABELS = {
    ComplexityClass.CONSTANT: "O(1)",
    ComplexityClass.LOGARITHMIC: "O(log n)",
    ComplexityClass.LINEAR: "O(n)",
    ComplexityClass.LINEARITHMIC: "O(n log n)",
    ComplexityClass.QUADRATIC: "O(n²)",
    ComplexityClass.CUBIC: "O(n³)",
    ComplexityClass.EXPONENTIAL: "O(2^n)",
    ComplexityClass.FACTORIAL: "O(n!)",
}


def worst(classes: Iterable[ComplexityClass]) -> ComplexityClass:
    """Highest class under the total order; CONSTANT for an empty input."""
    return max(classes, default=ComplexityClass.CONSTANT)
