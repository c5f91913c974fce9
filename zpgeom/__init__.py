'''
# zpgeom

Python modules for working with parametric curves independently of how they
are represented.

Curve
-----
Abstract parametric curves and the operations that can be built on top of them.
 - curve.parametric: base classes for parametric curves (evaluation, derivatives,
   parameter range) and for the parameter-division, affine reparametrization
   and cutting capabilities.
 - curve.concat: joining curves end-to-start with continuity checks, the
   ConcatError exceptions, and CurveCollector for folding many segments into one curve.
 - curve.reference: trivial UnitCurve and StepCurve implementations of the curve contract.
 - curve.random_laws: randomized checks that a curve type obeys the laws of
   reparametrization, concatenation and cutting (for use in test suites).

'''
