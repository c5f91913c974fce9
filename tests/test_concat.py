import logging

import numpy
import pytest

from zpgeom.curve import concat
from zpgeom.curve import parametric
from zpgeom.curve import random_laws
from zpgeom.curve import reference

from piecewise import PiecewiseCurve


def _segments():
    # three adjacent pieces meeting at (1, 1) and (2, 3)
    return [
        PiecewiseCurve.from_coefficients(0.0, 1.0, [0, 1], [0, 0, 1]),
        PiecewiseCurve.from_coefficients(1.0, 2.0, [0, 1], [-1, 2]),
        PiecewiseCurve.from_coefficients(2.0, 3.0, [0, 1], [7, -4, 1]),
    ]


class Constant(concat.Concat):
    def __init__(self, value, t0, t1):
        self.value = value
        self.range = (t0, t1)

    def subs(self, t):
        return self.value

    def der(self, t):
        return 0

    def der2(self, t):
        return 0

    def parameter_range(self):
        return self.range

    def concat_unchecked(self, rhs):
        return Joined(self.clone(), rhs.clone())


class Joined(parametric.ParametricCurve):
    def __init__(self, first, second):
        self.first = first
        self.second = second

    def _pick(self, t):
        if t < self.first.parameter_range()[1]:
            return self.first
        return self.second

    def subs(self, t):
        return self._pick(t).subs(t)

    def der(self, t):
        return self._pick(t).der(t)

    def der2(self, t):
        return self._pick(t).der2(t)

    def parameter_range(self):
        return self.first.parameter_range()[0], self.second.parameter_range()[1]


def test_concat():
    first, second, _ = _segments()
    joined = first.try_concat(second)
    assert joined.parameter_range() == (0.0, 2.0)
    assert numpy.array_equal(joined.subs(0.5), first.subs(0.5))
    assert numpy.array_equal(joined.subs(1.5), second.subs(1.5))
    assert numpy.array_equal(joined.der(1.5), [1, 2])
    assert numpy.array_equal(joined.subs(1.0), [1, 1])


def test_concat_does_not_modify_curves():
    first, second, _ = _segments()
    joined = first.concat(second)
    joined.parameter_transform(2, 0)
    assert first.parameter_range() == (0.0, 1.0)
    assert second.parameter_range() == (1.0, 2.0)


def test_concat_different_curve_types():
    joined = Constant(5, -1.0, 0.0).concat(reference.StepCurve(5, 7))
    assert joined.parameter_range() == (-1.0, 1.0)
    assert joined.front() == 5
    assert joined.back() == 7
    random_laws.concat_random_test(Constant(5, -1.0, 0.0), reference.StepCurve(5, 7), 20, rng=1)


def test_disconnected_parameters():
    first, _, third = _segments()
    with pytest.raises(concat.DisconnectedParameters) as info:
        first.try_concat(third)
    err = info.value
    assert (err.end, err.start) == (1.0, 2.0)
    assert err.args == (1.0, 2.0)
    assert str(err) == ('The end parameter 1.0 of the first curve is different '
        'from the start parameter 2.0 of the second curve.')


def test_disconnected_parameters_is_checked_exactly():
    first = PiecewiseCurve.from_coefficients(0.0, 1.0, [0, 1])
    second = PiecewiseCurve.from_coefficients(1.0 + 1e-15, 2.0, [0, 1])
    with pytest.raises(concat.DisconnectedParameters):
        first.try_concat(second)


def test_disconnected_points():
    first, second, _ = _segments()
    shifted = PiecewiseCurve.from_coefficients(1.0, 2.0, [1, 1], [-1, 2])
    with pytest.raises(concat.DisconnectedPoints) as info:
        first.try_concat(shifted)
    err = info.value
    assert numpy.array_equal(err.end_point, [1, 1])
    assert numpy.array_equal(err.start_point, [2, 1])
    assert 'end point' in str(err) and 'start point' in str(err)


def test_disconnected_points_of_different_types():
    # parameters match but an integer point never equals a 2d point
    curve = PiecewiseCurve.from_coefficients(-1.0, 0.0, [0, 1], [1])
    with pytest.raises(concat.DisconnectedPoints):
        curve.try_concat(reference.StepCurve(0, 1))


def test_concat_errors_are_value_errors():
    assert issubclass(concat.DisconnectedParameters, concat.ConcatError)
    assert issubclass(concat.DisconnectedPoints, concat.ConcatError)
    assert issubclass(concat.ConcatError, ValueError)


def test_concat_raises_runtime_error_on_disconnection():
    first, _, third = _segments()
    with pytest.raises(RuntimeError) as info:
        first.concat(third)
    assert isinstance(info.value.__cause__, concat.DisconnectedParameters)


def test_rejected_concat_is_logged(caplog):
    first, _, third = _segments()
    with caplog.at_level(logging.DEBUG, logger='zpgeom.curve.concat'):
        with pytest.raises(concat.ConcatError):
            first.try_concat(third)
    assert 'Rejected concatenation' in caplog.text


def test_point_map():
    err = concat.DisconnectedPoints((1, 2), (3, 4))
    mapped = err.point_map(lambda p: p[0])
    assert isinstance(mapped, concat.DisconnectedPoints)
    assert (mapped.end_point, mapped.start_point) == (1, 3)
    assert (err.end_point, err.start_point) == ((1, 2), (3, 4))


def test_point_map_keeps_parameters():
    err = concat.DisconnectedParameters(1.0, 2.0)
    mapped = err.point_map(lambda p: p[0])
    assert isinstance(mapped, concat.DisconnectedParameters)
    assert (mapped.end, mapped.start) == (1.0, 2.0)


def test_collector_starts_as_singleton():
    collector = concat.CurveCollector()
    assert collector.is_singleton()
    assert collector.get() is None
    with pytest.raises(RuntimeError):
        collector.unwrap()


def test_collector_fold_matches_direct_concat():
    segments = _segments()
    collector = concat.CurveCollector()
    for segment in segments:
        assert collector.try_concat(segment) is collector
    assert not collector.is_singleton()
    folded = collector.unwrap()
    direct = segments[0].concat(segments[1]).concat(segments[2])
    assert folded.parameter_range() == direct.parameter_range() == (0.0, 3.0)
    for t in numpy.linspace(0, 3, 13):
        assert numpy.array_equal(folded.subs(t), direct.subs(t))
        assert numpy.array_equal(folded.der(t), direct.der(t))
        assert numpy.array_equal(folded.der2(t), direct.der2(t))


def test_collector_extend():
    segments = _segments()
    collector = concat.CurveCollector().extend(segments)
    assert collector.get().parameter_range() == (0.0, 3.0)


def test_collector_copies_first_segment():
    segments = _segments()
    collector = concat.CurveCollector()
    collector.concat(segments[0])
    assert collector.get() is not segments[0]
    collector.concat(segments[1])
    assert segments[0].parameter_range() == (0.0, 1.0)


def test_collector_converts_first_segment():
    converted = []
    def convert(curve):
        converted.append(curve)
        return curve
    segments = _segments()
    collector = concat.CurveCollector(convert=convert)
    collector.extend(segments)
    assert len(converted) == 1
    assert converted[0].parameter_range() == (0.0, 1.0)


def test_collector_failure_leaves_state_unchanged():
    first, _, third = _segments()
    collector = concat.CurveCollector()
    collector.concat(first)
    with pytest.raises(concat.DisconnectedParameters):
        collector.try_concat(third)
    assert collector.get().parameter_range() == (0.0, 1.0)
    with pytest.raises(RuntimeError):
        collector.concat(third)
    assert collector.unwrap().parameter_range() == (0.0, 1.0)


def test_collector_repr():
    collector = concat.CurveCollector()
    assert 'singleton' in repr(collector)
    collector.concat(reference.StepCurve(1, 2))
    assert repr(collector) == 'CurveCollector(StepCurve(1, 2))'


def test_collector_unwrap_releases_curve():
    first, second, _ = _segments()
    collector = concat.CurveCollector()
    collector.concat(first)
    curve = collector.unwrap()
    assert collector.is_singleton()
    curve.cut(0.5)
    assert collector.get() is None
    collector.concat(second)
    assert collector.unwrap().parameter_range() == (1.0, 2.0)
    assert curve.parameter_range() == (0.0, 0.5)


class DropsSecond(Constant):
    """Joins to a constant in place of the second curve."""
    def concat_unchecked(self, rhs):
        return Joined(self.clone(), Constant(self.value, *rhs.parameter_range()))


def test_concat_law_catches_wrong_second_part():
    with pytest.raises(AssertionError):
        random_laws.concat_random_test(DropsSecond(5, -1.0, 0.0), reference.StepCurve(5, 7), 5, rng=3)


def test_concat_law_with_tolerance_on_none_points():
    curve = Constant(None, -1.0, 0.0)
    assert curve.concat(reference.UnitCurve()).parameter_range() == (-1.0, 1.0)
    random_laws.concat_random_test(curve, reference.UnitCurve(), 10, rng=2, tol=1e-9)
