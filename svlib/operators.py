"""Comparison operators used by comparators."""

from __future__ import annotations

from enum import Enum


class Operator(Enum):
    """A comparison operator, valued by the symbol it is written with."""

    EQ = ""
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @property
    def symbol(self):
        """The text the operator is written as; equality is written as nothing."""
        return self.value

    def accepts(self, ordering):
        """Tell whether a comparison result satisfies this operator.

        ``ordering`` is negative, zero or positive as a version sorts before,
        equal to or after the comparator's version.
        """
        if ordering < 0:
            return self in (Operator.LT, Operator.LE)
        if ordering > 0:
            return self in (Operator.GT, Operator.GE)
        return self in (Operator.EQ, Operator.LE, Operator.GE)