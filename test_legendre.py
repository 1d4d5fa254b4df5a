import numpy as np
import pytest
from scipy.special import ellipe, ellipeinc, ellipk, ellipkinc

import elliptix

MCS = (0.05, 0.4, 0.8, 1.0)


def test_any_real_amplitude_against_scipy():
    for mc in MCS:
        m = 1.0 - mc
        for phi in np.linspace(-7.0, 7.0, 57):
            assert elliptix.elliptic_f(phi, mc) == pytest.approx(
                ellipkinc(phi, m), rel=1e-12, abs=1e-14
            )
            assert elliptix.elliptic_e(phi, mc) == pytest.approx(
                ellipeinc(phi, m), rel=1e-12, abs=1e-14
            )


def test_odd_and_quasi_periodic():
    for mc in MCS:
        k = elliptix.elliptic_k(mc)
        e = elliptix.complete_elliptic_e(mc)
        for phi in (0.2, 0.9, 1.4):
            assert elliptix.elliptic_f(-phi, mc) == -elliptix.elliptic_f(phi, mc)
            assert elliptix.elliptic_f(phi + np.pi, mc) == pytest.approx(
                elliptix.elliptic_f(phi, mc) + 2 * k, rel=1e-13
            )
            assert elliptix.elliptic_e(phi - 2 * np.pi, mc) == pytest.approx(
                elliptix.elliptic_e(phi, mc) - 4 * e, rel=1e-13
            )


def test_third_kind_periodic_portion():
    mc = 0.3
    for n in (0.0, 0.4, 0.7):
        complete = elliptix.complete_elliptic_pi(n, mc)
        for phi in (0.3, 1.1):
            assert elliptix.elliptic_pi(phi + np.pi, n, mc) == pytest.approx(
                elliptix.elliptic_pi(phi, n, mc) + 2 * complete, rel=1e-13
            )


def test_fe_pi_matches_individual_integrals():
    for phi in (-2.0, 0.4, 1.2, 5.0):
        f, e, p = elliptix.elliptic_fe_pi(phi, 0.35, 0.6)
        assert f == elliptix.elliptic_f(phi, 0.6)
        assert e == elliptix.elliptic_e(phi, 0.6)
        assert p == pytest.approx(elliptix.elliptic_pi(phi, 0.35, 0.6), rel=1e-15)


def test_complete_forms():
    for mc in (0.001, 0.2, 0.5, 0.9, 1.0):
        assert elliptix.complete_elliptic_e(mc) == pytest.approx(ellipe(1.0 - mc), rel=1e-13)
        assert elliptix.complete_elliptic_pi(0.0, mc) == pytest.approx(ellipk(1.0 - mc), rel=1e-13)
        assert elliptix.elliptic_f(np.pi / 2, mc) == pytest.approx(ellipk(1.0 - mc), rel=1e-14)
