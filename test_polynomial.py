import numpy as np
from numpy.polynomial import polynomial as P

import elliptix
from elliptix.coefficients import ELLIPTIC_K_INTERVALS, INTERVAL_BOUNDS


def test_horner_matches_polyval():
    coefficients = (1.0, -2.0, 0.5, 3.0, -0.25)
    for x in np.linspace(-2.0, 2.0, 9):
        assert abs(elliptix.horner(coefficients, x) - P.polyval(x, coefficients)) < 1e-13


def test_estrin_matches_horner():
    rng = np.random.default_rng(0)
    for degree in range(13):
        coefficients = tuple(rng.normal(size=degree + 1))
        for x in (-0.7, 0.03, 0.5, 1.3):
            assert abs(
                elliptix.estrin(coefficients, x) - elliptix.horner(coefficients, x)
            ) < 1e-12


def test_empty_polynomial_is_zero():
    assert elliptix.horner((), 0.3) == 0.0
    assert elliptix.estrin((), 0.3) == 0.0


def test_piecewise_selects_first_bound_not_exceeded():
    assert elliptix.piecewise(INTERVAL_BOUNDS, ELLIPTIC_K_INTERVALS, 0.0)[0] == 0.05
    assert elliptix.piecewise(INTERVAL_BOUNDS, ELLIPTIC_K_INTERVALS, 0.1)[0] == 0.05
    assert elliptix.piecewise(INTERVAL_BOUNDS, ELLIPTIC_K_INTERVALS, 0.15)[0] == 0.15
    assert elliptix.piecewise(INTERVAL_BOUNDS, ELLIPTIC_K_INTERVALS, 0.84)[0] == 0.825
    # past the last inner bound the catch-all row is used
    assert elliptix.piecewise(INTERVAL_BOUNDS, ELLIPTIC_K_INTERVALS, 0.89)[0] == 0.875
