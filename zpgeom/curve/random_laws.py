"""Randomized checks that a curve type obeys the laws of its capabilities.

Each check repeats a number of independent trials with random parameters and
raises AssertionError at the first violation, so the functions can be called
directly from a test suite:

    def test_my_curve_transform():
        random_laws.parameter_transform_random_test(MyCurve(...), trials=100, rng=0)

Parameters common to all checks:
    trials: number of independent random trials to run.
    rng: source of randomness: a numpy.random.Generator, an integer seed, or
        None for a freshly seeded generator.
    tol: if 0, points, vectors and parameter ranges must compare exactly
        equal. Otherwise numeric values must have the same shape and agree to
        within tol (relative and absolute), which is usually needed for curves
        with floating-point coordinates. Non-numeric values are always
        compared exactly.
"""

import numpy

def _is_numeric(value):
    return numpy.asarray(value).dtype.kind in 'biufc'

def _assert_equal(actual, expected, tol, what):
    # non-numeric points (None, arbitrary objects) can only be compared exactly
    if tol == 0 or not (_is_numeric(actual) and _is_numeric(expected)):
        equal = numpy.array_equal(actual, expected)
    else:
        equal = (numpy.shape(actual) == numpy.shape(expected) and
            numpy.allclose(actual, expected, rtol=tol, atol=tol))
    if not equal:
        raise AssertionError('{}: {!r} != {!r}'.format(what, actual, expected))

def _assert_same_values(curve, reference, t, tol, what):
    """Check that curve and reference agree at t in position and both derivatives."""
    _assert_equal(curve.subs(t), reference.subs(t), tol, '{} subs({})'.format(what, t))
    _assert_equal(curve.der(t), reference.der(t), tol, '{} der({})'.format(what, t))
    _assert_equal(curve.der2(t), reference.der2(t), tol, '{} der2({})'.format(what, t))

def _lerp(t0, t1, p):
    return t0 * (1 - p) + t1 * p


def curve_endpoint_test(curve, tol=0):
    """Check that front() and back() are subs() at the ends of the parameter range."""
    t0, t1 = curve.parameter_range()
    if not t0 <= t1:
        raise AssertionError('parameter range ({}, {}) is reversed'.format(t0, t1))
    _assert_equal(curve.front(), curve.subs(t0), tol, 'front()')
    _assert_equal(curve.back(), curve.subs(t1), tol, 'back()')


def parameter_transform_random_test(curve, trials, rng=None, tol=0):
    """Check parameter_transformed() of a ParameterTransform curve.

    Each trial draws a scale a with random sign and magnitude in [0.5, 1.5)
    and a move b in [0, 2), then checks that the transformed curve has range
    (t0*a + b, t1*a + b), that it matches the original curve at a*t + b for a
    random t in the range, and that front() and back() are unchanged. The
    original curve must not be modified."""
    rng = numpy.random.default_rng(rng)
    for _ in range(trials):
        _parameter_transform_trial(curve, rng, tol)

def _parameter_transform_trial(curve, rng, tol):
    sign = rng.choice([-1, 1])
    a = sign * (rng.random() + 0.5)
    b = rng.random() * 2
    t0, t1 = curve.parameter_range()
    transformed = curve.parameter_transformed(a, b)

    _assert_equal(curve.parameter_range(), (t0, t1), 0, 'range of original curve')
    _assert_equal(transformed.parameter_range(), (t0 * a + b, t1 * a + b), tol,
        'range of curve transformed by ({}, {})'.format(a, b))
    t = _lerp(t0, t1, rng.random())
    what = 'transformed by ({}, {})'.format(a, b)
    _assert_equal(transformed.subs(t * a + b), curve.subs(t), tol, '{} subs({})'.format(what, t))
    _assert_equal(transformed.der(t * a + b), curve.der(t), tol, '{} der({})'.format(what, t))
    _assert_equal(transformed.der2(t * a + b), curve.der2(t), tol, '{} der2({})'.format(what, t))
    _assert_equal(transformed.front(), curve.front(), tol, '{} front()'.format(what))
    _assert_equal(transformed.back(), curve.back(), tol, '{} back()'.format(what))


def concat_random_test(curve0, curve1, trials, rng=None, tol=0):
    """Check concat() of a Concat curve with an adjacent curve.

    curve1 must start where curve0 ends, both in parameter and in position.
    Each trial checks that the joined curve has range (t0, t2) and matches
    curve0 at a random parameter in [t0, t1] and curve1 at a random parameter
    in [t1, t2]."""
    rng = numpy.random.default_rng(rng)
    for _ in range(trials):
        _concat_trial(curve0, curve1, rng, tol)

def _concat_trial(curve0, curve1, rng, tol):
    concatted = curve0.concat(curve1)
    t0, t1 = curve0.parameter_range()
    _, t2 = curve1.parameter_range()
    _assert_equal(concatted.parameter_range(), (t0, t2), tol, 'range of joined curve')

    t = _lerp(t0, t1, rng.random())
    _assert_same_values(concatted, curve0, t, tol, 'joined curve vs. first curve:')
    _assert_equal(concatted.front(), curve0.front(), tol, 'joined curve front()')

    t = _lerp(t1, t2, rng.random())
    _assert_same_values(concatted, curve1, t, tol, 'joined curve vs. second curve:')
    _assert_equal(concatted.back(), curve1.back(), tol, 'joined curve back()')


def cut_random_test(curve, trials, rng=None, tol=0):
    """Check cut() of a Cut curve.

    Each trial cuts a copy of the curve at a random parameter t and checks
    that the two parts cover (t0, t) and (t, t1), that each part matches the
    original curve at a random parameter in its range, and that the parts
    meet at the original subs(t)."""
    rng = numpy.random.default_rng(rng)
    for _ in range(trials):
        _cut_trial(curve, rng, tol)

def _cut_trial(curve, rng, tol):
    part0 = curve.clone()
    t0, t1 = curve.parameter_range()
    t = _lerp(t0, t1, rng.random())
    part1 = part0.cut(t)
    _assert_equal(part0.parameter_range(), (t0, t), 0, 'range of first part cut at {}'.format(t))
    _assert_equal(part1.parameter_range(), (t, t1), 0, 'range of second part cut at {}'.format(t))

    s = _lerp(t0, t, rng.random())
    _assert_same_values(part0, curve, s, tol, 'first part cut at {}:'.format(t))
    _assert_equal(part0.front(), curve.front(), tol, 'first part front()')
    _assert_equal(part0.back(), curve.subs(t), tol, 'first part back()')

    s = _lerp(t, t1, rng.random())
    _assert_same_values(part1, curve, s, tol, 'second part cut at {}:'.format(t))
    _assert_equal(part1.front(), curve.subs(t), tol, 'second part front()')
    _assert_equal(part1.back(), curve.back(), tol, 'second part back()')
