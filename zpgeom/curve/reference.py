"""Trivial curves used to check the curve contract itself.

UnitCurve has no geometry at all: its points and vectors are None. StepCurve
jumps from one integer to another halfway through its parameter range.
Neither is useful for modeling, but both are valid ParametricCurves, so code
written against the contract (and the checks in random_laws) can be tried on
them without any real curve representation."""

from . import parametric

class UnitCurve(parametric.ParametricCurve):
    def subs(self, t):
        return None

    def der(self, t):
        return None

    def der2(self, t):
        return None

    def parameter_range(self):
        return (0.0, 1.0)

    def __eq__(self, other):
        if not isinstance(other, UnitCurve):
            return NotImplemented
        return True

    def __hash__(self):
        return hash(UnitCurve)

    def __repr__(self):
        return 'UnitCurve()'


class StepCurve(parametric.ParametricCurve):
    """Curve over (0, 1) whose point is 'first' for t < 0.5 and 'second' otherwise.

    Both derivatives are the constant second - first, regardless of t."""
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def subs(self, t):
        if t < 0.5:
            return self.first
        return self.second

    def der(self, t):
        return self.second - self.first

    def der2(self, t):
        return self.second - self.first

    def parameter_range(self):
        return (0.0, 1.0)

    def __eq__(self, other):
        if not isinstance(other, StepCurve):
            return NotImplemented
        return (self.first, self.second) == (other.first, other.second)

    def __hash__(self):
        return hash((self.first, self.second))

    def __repr__(self):
        return 'StepCurve({!r}, {!r})'.format(self.first, self.second)
