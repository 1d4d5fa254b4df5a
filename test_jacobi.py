import numpy as np
from scipy.special import ellipj

import elliptix

PARAMETERS = (0.0, 0.1, 0.5, 0.9, 0.99, 0.999999)


def test_sn_cn_dn_against_scipy():
    for m in PARAMETERS:
        for u in np.linspace(-20.0, 20.0, 81):
            sn, cn, dn = elliptix.sn_cn_dn(u, 1.0 - m)
            sn_ref, cn_ref, dn_ref, _ = ellipj(u, m)
            assert abs(sn - sn_ref) < 1e-12, (u, m)
            assert abs(cn - cn_ref) < 1e-12, (u, m)
            assert abs(dn - dn_ref) < 1e-12, (u, m)


def test_small_argument():
    sn, cn, dn = elliptix.sn_cn_dn(0.2, 1.0 - 0.81)
    residual = np.array([sn, cn, dn]) - np.array(ellipj(0.2, 0.81)[:3])
    assert np.all(np.abs(residual) < 1e-14)
    assert elliptix.sn_cn_dn(0.0, 0.3) == (0.0, 1.0, 1.0)


def test_pythagorean_identities():
    for mc in (1e-6, 0.01, 0.3, 0.5, 0.8, 1.0):
        m = 1.0 - mc
        for u in np.linspace(-12.0, 12.0, 97):
            s, c, d = elliptix.sn_cn_dn(u, mc)
            assert abs(s * s + c * c - 1.0) < 5e-15
            assert abs(d * d + m * s * s - 1.0) < 5e-15


def test_tiny_complementary_parameter():
    for mc in (1e-90, 1e-300):
        m = 1.0 - mc
        for u in np.linspace(0.5, 200.0, 400):
            s, c, d = elliptix.sn_cn_dn(u, mc)
            assert np.isfinite(s) and np.isfinite(c) and np.isfinite(d), (u, mc)
            assert abs(s * s + c * c - 1.0) < 5e-15, (u, mc)
            assert abs(d * d + m * s * s - 1.0) < 5e-15, (u, mc)


def test_period_and_parity():
    for mc in (0.05, 0.4, 0.9):
        k = elliptix.elliptic_k(mc)
        for u in (0.1, 0.6, 1.3, 2.9, 5.0):
            s, c, d = elliptix.sn_cn_dn(u, mc)
            sp, cp, dp = elliptix.sn_cn_dn(u + 4.0 * k, mc)
            assert abs(s - sp) < 1e-13
            assert abs(c - cp) < 1e-13
            assert abs(d - dp) < 1e-13

            sm, cm, dm = elliptix.sn_cn_dn(-u, mc)
            assert sm == -s
            assert cm == c
            assert dm == d


def test_trigonometric_limit():
    for u in np.linspace(-10.0, 10.0, 41):
        s, c, d = elliptix.sn_cn_dn(u, 1.0)
        assert abs(s - np.sin(u)) < 1e-13
        assert abs(c - np.cos(u)) < 1e-13
        assert d == 1.0


def test_quarter_period_values():
    for mc in (0.1, 0.5, 0.9):
        k = elliptix.elliptic_k(mc)
        s, c, d = elliptix.sn_cn_dn(k, mc)
        assert abs(s - 1.0) < 1e-14
        assert abs(c) < 1e-14
        assert abs(d - np.sqrt(mc)) < 1e-14


def test_amplitude():
    for m in (0.0, 0.3, 0.8):
        for u in np.linspace(-3.0, 3.0, 25):
            s, c, d, am = elliptix.sn_cn_dn_am(u, 1.0 - m)
            _, _, _, am_ref = ellipj(u, m)
            assert abs(am - am_ref) < 1e-12, (u, m)
            assert abs(np.sin(am) - s) < 1e-14
            assert abs(np.cos(am) - c) < 1e-14


def test_amplitude_is_continuous_and_increasing():
    mc = 0.2
    k = elliptix.elliptic_k(mc)
    u = np.linspace(-10.0 * k, 10.0 * k, 2001)
    am = np.array([elliptix.sn_cn_dn_am(x, mc)[3] for x in u])
    assert np.all(np.diff(am) > 0.0)
    _, _, _, am0 = elliptix.sn_cn_dn_am(0.7, mc)
    _, _, _, am2 = elliptix.sn_cn_dn_am(0.7 + 2.0 * k, mc)
    assert abs(am2 - am0 - np.pi) < 1e-13
