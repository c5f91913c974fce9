import abc
import copy

import numpy

class ParametricCurve(abc.ABC):
    """Base class for parametric curves.

    A curve maps parameter values t in a closed range [t0, t1] to points, and
    provides the first and second derivatives at each parameter. The point
    and vector types are whatever the concrete curve returns: floats, ints,
    numpy arrays, or arbitrary objects with a sensible == operator.

    Subclasses must implement subs(), der(), der2() and parameter_range().
    Curves are values: copies made with clone() share no mutable state with
    the original. Evaluating outside of the parameter range is allowed, but
    the result is up to the concrete curve."""

    @abc.abstractmethod
    def subs(self, t):
        """Return the point on the curve at parameter t."""

    @abc.abstractmethod
    def der(self, t):
        """Return the first derivative of the curve at parameter t."""

    @abc.abstractmethod
    def der2(self, t):
        """Return the second derivative of the curve at parameter t."""

    @abc.abstractmethod
    def parameter_range(self):
        """Return the range of the parameter as a tuple (t0, t1), t0 <= t1."""

    def front(self):
        """Return the point at the start of the parameter range."""
        t0, _ = self.parameter_range()
        return self.subs(t0)

    def back(self):
        """Return the point at the end of the parameter range."""
        _, t1 = self.parameter_range()
        return self.subs(t1)

    def clone(self):
        return copy.deepcopy(self)


class ParameterDivision1D(abc.ABC):
    """Curves that can produce an adaptive sampling of their parameter."""

    @abc.abstractmethod
    def parameter_division(self, range, tol):
        """Divide a parameter range for approximating the curve by a polyline.

        Parameters:
            range: (start, stop) tuple of parameter values to divide.
            tol: maximum allowed distance between the curve and the chords
                connecting consecutive sampled points.

        Returns: ordered list of parameter values, starting at range[0] and
            ending at range[1]."""


class ParameterTransform(ParametricCurve):
    """Curves whose parameter can be moved by an affine transformation."""

    @abc.abstractmethod
    def parameter_transform(self, scalar, move):
        """Replace the parameter t of the curve with scalar*t + move, in place.

        After the call, evaluating the curve at scalar*t + move gives the
        point and derivatives that the curve had at t before the call. The
        derivative values themselves are not rescaled.

        Returns: self, so that calls can be chained."""

    def parameter_transformed(self, scalar, move):
        """Return a copy of the curve with its parameter t replaced by
        scalar*t + move. The curve itself is not modified.

        Example:
            curve1 = curve0.parameter_transformed(1, 2)
            curve1.subs(2.5) == curve0.subs(0.5)
        """
        curve = self.clone()
        curve.parameter_transform(scalar, move)
        return curve

    def parameter_normalization(self):
        """Transform the parameter of the curve in place so that its range
        becomes (0, 1), and return self.

        The parameter range must not be a single point: if t0 == t1 the
        transformation is not finite, and no error is raised."""
        t0, t1 = self.parameter_range()
        a = 1 / (numpy.float64(t1) - t0)
        b = -t0 * a
        return self.parameter_transform(a, b)


class Cut(ParametricCurve):
    """Curves that can be split into two curves at a parameter value."""

    @abc.abstractmethod
    def cut(self, t):
        """Split the curve at parameter t, which must lie in the parameter range.

        The curve is modified in place to cover [t0, t] and the part covering
        [t, t1] is returned as a new curve. Both parts keep the values the
        curve had on their sub-ranges; in particular self.back() and the
        returned curve's front() both equal the original subs(t)."""
