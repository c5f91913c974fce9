'''
Curve
-----
Abstract parametric curves and the operations that can be built on top of them.
 - curve.parametric: base classes for parametric curves and their capabilities.
 - curve.concat: joining curves with continuity checks, and CurveCollector.
 - curve.reference: trivial curves for checking the curve contract itself.
 - curve.random_laws: randomized law checks for curve implementations (using numpy random Generators).
 '''
