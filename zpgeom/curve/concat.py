import abc
import copy
import logging

import numpy

from . import parametric

logger = logging.getLogger(__name__)

class ConcatError(ValueError):
    """Two curves could not be joined end-to-start."""

    def point_map(self, f):
        """Return an equivalent error with any carried points passed through f.

        Useful when re-raising the error from a curve type whose points are
        represented differently from those of the curves that were joined."""
        return self


class DisconnectedParameters(ConcatError):
    """The end parameter of the first curve differs from the start parameter
    of the second curve."""

    def __init__(self, end, start):
        super().__init__(end, start)
        self.end = end
        self.start = start

    def __str__(self):
        return ('The end parameter {} of the first curve is different from the '
            'start parameter {} of the second curve.'.format(self.end, self.start))


class DisconnectedPoints(ConcatError):
    """The parameters match, but the end point of the first curve differs from
    the start point of the second curve."""

    def __init__(self, end_point, start_point):
        super().__init__(end_point, start_point)
        self.end_point = end_point
        self.start_point = start_point

    def __str__(self):
        return ('The end point {!r} of the first curve is different from the '
            'start point {!r} of the second curve.'.format(self.end_point, self.start_point))

    def point_map(self, f):
        return DisconnectedPoints(f(self.end_point), f(self.start_point))


def points_equal(p, q):
    """Return True if two points are equal.

    Scalars and other objects are compared with their own == operator; array-like
    points (numpy arrays, tuples, lists) must have the same shape and equal elements."""
    return numpy.array_equal(p, q)


class Concat(parametric.ParametricCurve):
    """Curves that can be joined with a following curve into a single curve.

    Subclasses implement concat_unchecked() to build the joined curve; the
    continuity checks are done here, in try_concat()."""

    @abc.abstractmethod
    def concat_unchecked(self, rhs):
        """Return the curve made of self followed by rhs.

        Called only once self.parameter_range()[1] == rhs.parameter_range()[0]
        and self.back() equals rhs.front() have been established. The result
        covers [self.t0, rhs.t1], agreeing with self on [self.t0, self.t1] and
        with rhs on [rhs.t0, rhs.t1]."""

    def try_concat(self, rhs):
        """Join rhs to the end of this curve and return the joined curve.

        Neither curve is modified. rhs may be of a different curve type, but
        must have the same point and vector types.

        Raises:
            DisconnectedParameters: if the parameter range of self does not end
                exactly where that of rhs starts.
            DisconnectedPoints: if the parameters match but self.back() differs
                from rhs.front()."""
        _, end = self.parameter_range()
        start, _ = rhs.parameter_range()
        if end != start:
            logger.debug('Rejected concatenation: parameter %s != %s', end, start)
            raise DisconnectedParameters(end, start)
        back, front = self.back(), rhs.front()
        if not points_equal(back, front):
            logger.debug('Rejected concatenation: point %r != %r', back, front)
            raise DisconnectedPoints(back, front)
        return self.concat_unchecked(rhs)

    def concat(self, rhs):
        """Join rhs to the end of this curve, for use when the two curves are
        known to be adjacent. A disconnection is treated as a programming error
        and raises RuntimeError."""
        try:
            return self.try_concat(rhs)
        except ConcatError as err:
            raise RuntimeError(str(err)) from err


class CurveCollector:
    """Accumulate a sequence of adjacent curve segments into one curve.

    A new collector is empty (a "singleton"). The first segment accepted
    becomes the held curve, and each later segment is concatenated onto it.
    This avoids needing an "empty" value of the curve type, which most curve
    representations do not have.

    Parameters:
        convert: function turning the first segment into the held curve type.
            If None, the held curve is a deep copy of the first segment.
            Segments are never stored by reference.

    Example:
        collector = CurveCollector()
        for segment in segments:
            collector.concat(segment)
        curve = collector.unwrap()
    """
    def __init__(self, convert=None):
        self._convert = convert
        self._curve = None

    def __repr__(self):
        if self._curve is None:
            return 'CurveCollector(<singleton>)'
        return 'CurveCollector({!r})'.format(self._curve)

    def try_concat(self, curve):
        """Add a segment to the end of the collected curve, and return self.

        If the segment cannot be joined, ConcatError is raised and the
        collector is left unchanged."""
        if self._curve is None:
            if self._convert is None:
                self._curve = copy.deepcopy(curve)
            else:
                self._curve = self._convert(copy.deepcopy(curve))
            logger.debug('Curve collector seeded with %r', self._curve)
        else:
            self._curve = self._curve.try_concat(curve)
        return self

    def concat(self, curve):
        """Add a segment known to be adjacent to the collected curve, and
        return self. A disconnection raises RuntimeError."""
        try:
            return self.try_concat(curve)
        except ConcatError as err:
            raise RuntimeError(str(err)) from err

    def extend(self, curves):
        """Add each segment of an iterable in order with try_concat(), and return self.
        Stops at the first segment that cannot be joined, keeping the segments
        accepted before it."""
        for curve in curves:
            self.try_concat(curve)
        return self

    def is_singleton(self):
        """Return True if no segment has been accepted yet."""
        return self._curve is None

    def unwrap(self):
        """Return the collected curve and reset the collector to singleton, so
        the returned curve is no longer held by the collector. RuntimeError if
        no segment was accepted."""
        if self._curve is None:
            raise RuntimeError('This curve collector is singleton.')
        curve, self._curve = self._curve, None
        return curve

    def get(self):
        """Return the collected curve, or None if no segment was accepted."""
        return self._curve
