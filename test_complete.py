import numpy as np
import pytest
from scipy.special import ellipe, ellipk, elliprf, elliprj

import elliptix
from elliptix.coefficients import INTERVAL_BOUNDS

MCS = (0.01, 0.1, 0.3, 0.5, 0.7, 0.9, 0.99)


def test_elliptic_k_against_scipy():
    for m in np.concatenate([np.linspace(0.0, 0.99, 100), 1.0 - np.logspace(-15, -2, 27)]):
        assert elliptix.elliptic_k(1.0 - m) == pytest.approx(ellipk(m), rel=1e-14)


def test_elliptic_k_limits():
    assert elliptix.elliptic_k(1.0) == np.pi / 2
    mc = 1e-10
    assert elliptix.elliptic_k(mc) == pytest.approx(np.log(4.0) - 0.5 * np.log(mc), rel=1e-9)
    assert elliptix.elliptic_k(0.0) == pytest.approx(np.log(4.0) - 0.5 * np.log(1e-99))
    assert np.isfinite(elliptix.elliptic_k(0.0))


def test_elliptic_nome_q():
    for mc in (0.001, 0.05, 0.1):
        q = np.exp(-np.pi * ellipk(1.0 - mc) / ellipk(mc))
        assert elliptix.elliptic_nome_q(mc, 16) == pytest.approx(q, rel=1e-13)


def test_cel_special_values():
    assert elliptix.bulirsch_cel(1.0, 1.0, 1.0, 1.0) == pytest.approx(np.pi / 2, rel=1e-15)
    assert np.isnan(elliptix.bulirsch_cel(0.0, 1.0, 1.0, 1.0))
    # kc = 0 with b = 0 is replaced by a tiny modulus: the integral tends to B(m = 1) = 1
    assert elliptix.bulirsch_cel(0.0, 1.0, 1.0, 0.0) == pytest.approx(1.0, rel=1e-10)


def test_cel_reduces_to_legendre_forms():
    for mc in MCS:
        kc = np.sqrt(mc)
        m = 1.0 - mc
        assert elliptix.bulirsch_cel(kc, 1.0, 1.0, 1.0) == pytest.approx(ellipk(m), rel=1e-13)
        assert elliptix.bulirsch_cel(kc, 1.0, 1.0, mc) == pytest.approx(ellipe(m), rel=1e-13)


def test_fukushima_bd_limits():
    assert elliptix.fukushima_bd(1.0) == (np.pi / 4, np.pi / 4)
    b, d = elliptix.fukushima_bd(1e-17)
    assert b == 1.0
    assert d == pytest.approx(np.log(4.0) - 1.0 - 0.5 * np.log(1e-17))
    assert elliptix.fukushima_bd(0.0) == (1.0, np.inf)


def test_fukushima_bd_against_scipy():
    for m in np.concatenate([np.linspace(0.0, 0.999, 112), 1.0 - np.logspace(-12, -3, 10)]):
        mc = 1.0 - m
        b, d = elliptix.fukushima_bd(mc)
        assert b + d == pytest.approx(ellipk(m), rel=1e-13)
        assert b + mc * d == pytest.approx(ellipe(m), rel=1e-13)


def test_legendre_relation():
    for mc in MCS:
        k = elliptix.elliptic_k(mc)
        kp = elliptix.elliptic_k(1.0 - mc)
        e = elliptix.complete_elliptic_e(mc)
        ep = elliptix.complete_elliptic_e(1.0 - mc)
        assert e * kp + ep * k - k * kp == pytest.approx(np.pi / 2, rel=1e-13)


def test_continuity_across_intervals():
    boundaries_in_m = list(INTERVAL_BOUNDS[:-1]) + [0.9, 0.99, 0.01]
    delta = 1e-13
    for m in boundaries_in_m:
        below = 1.0 - (m - delta)
        above = 1.0 - (m + delta)
        assert elliptix.elliptic_k(below) == pytest.approx(elliptix.elliptic_k(above), rel=1e-10)
        b_below, d_below = elliptix.fukushima_bd(below)
        b_above, d_above = elliptix.fukushima_bd(above)
        assert b_below == pytest.approx(b_above, rel=1e-10)
        assert d_below == pytest.approx(d_above, rel=1e-10)


def test_fukushima_bdj_against_carlson():
    for mc in MCS:
        for n in (0.0, 0.2, 0.5, 0.8, 0.95):
            b, d, j = elliptix.fukushima_bdj(1.0 - n, mc)
            j_ref = elliprj(0.0, mc, 1.0, 1.0 - n) / 3.0
            assert j == pytest.approx(j_ref, rel=1e-12)
            pi_ref = elliprf(0.0, mc, 1.0) + n * j_ref
            assert elliptix.complete_elliptic_pi(n, mc) == pytest.approx(pi_ref, rel=1e-12)
