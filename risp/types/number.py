"""Exact rational numbers."""

from __future__ import annotations

from fractions import Fraction

from risp.types.atom import Atom


class Number(Atom):
    """An arbitrary-precision rational kept in lowest terms.

    ``Fraction`` already normalises on construction, so equality and hashing
    on ``value`` operate on the reduced form: ``Number(Fraction(2, 4)) ==
    Number(Fraction(1, 2))``.
    """

    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value: Fraction | int | str):
        if isinstance(value, float):
            raise TypeError("Number takes an exact value; pass the decimal text instead of a float")
        self.value: Fraction = Fraction(value)

    @property
    def numerator(self) -> int:
        return self.value.numerator

    @property
    def denominator(self) -> int:
        return self.value.denominator

    def is_integer(self) -> bool:
        return self.value.denominator == 1

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Number) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Number, self.value))

    def __repr__(self):
        return f"Number({self})"

    def __str__(self):
        if self.is_integer():
            return str(self.value.numerator)
        return f"{self.value.numerator}/{self.value.denominator}"
