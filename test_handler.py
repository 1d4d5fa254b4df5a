import logging

import numpy as np
import pytest

import elliptix
from elliptix import ParameterDomainError


@pytest.fixture
def unchecked():
    elliptix.set_domain_checks(False)
    yield
    elliptix.set_domain_checks(True)


def test_domain_error_is_value_error():
    assert issubclass(ParameterDomainError, ValueError)
    assert elliptix.domain_checks_enabled()


@pytest.mark.parametrize(
    "call",
    [
        lambda: elliptix.jacobi_functions(0.5, 0.0),
        lambda: elliptix.jacobi_functions(0.5, 1.5),
        lambda: elliptix.jacobi_functions(np.inf, 0.5),
        lambda: elliptix.complete_first_kind(-0.1),
        lambda: elliptix.complete_first_kind(np.nan),
        lambda: elliptix.general_cel(np.inf, 1.0, 1.0, 1.0),
        lambda: elliptix.complete_bd(2.0),
        lambda: elliptix.complete_bdj(1.0, 0.5),
        lambda: elliptix.complete_bdj(0.5, 1.1),
        lambda: elliptix.incomplete_bdj(2.0, 0.5, 0.5),
        lambda: elliptix.incomplete_bdj(-0.1, 0.5, 0.5),
        lambda: elliptix.incomplete_bdj(1.0, 1.5, 0.5),
        lambda: elliptix.incomplete_bdj(1.0, 0.5, -1.0),
    ],
)
def test_out_of_domain_raises(call, caplog):
    with pytest.raises(ParameterDomainError):
        call()
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_out_of_domain_returns_nan_when_unchecked(unchecked, caplog):
    with caplog.at_level(logging.WARNING):
        assert np.isnan(elliptix.complete_first_kind(1.5))
        s, c, d = elliptix.jacobi_functions(0.5, 0.0)
        assert np.isnan(s) and np.isnan(c) and np.isnan(d)
        assert len(elliptix.jacobi_functions(0.5, 0.0, amplitude=True)) == 4
        assert all(np.isnan(x) for x in elliptix.incomplete_bdj(3.0, 0.5, 0.5))
    assert "returning NaN" in caplog.text
    assert all(record.levelno == logging.WARNING for record in caplog.records)


def test_undefined_cel_is_logged_not_raised(caplog):
    assert np.isnan(elliptix.general_cel(0.0, 1.0, 1.0, 1.0))
    assert "undefined" in caplog.text
    assert elliptix.general_cel(1.0, 1.0, 1.0, 1.0) == pytest.approx(np.pi / 2)


def test_checked_calls_match_kernels():
    assert elliptix.jacobi_functions(1.7, 0.3) == elliptix.sn_cn_dn(1.7, 0.3)
    assert elliptix.jacobi_functions(1.7, 0.3, amplitude=True) == elliptix.sn_cn_dn_am(1.7, 0.3)
    assert elliptix.complete_first_kind(0.3) == elliptix.elliptic_k(0.3)
    assert elliptix.complete_bd(0.3) == elliptix.fukushima_bd(0.3)
    assert elliptix.complete_bdj(0.4, 0.3) == elliptix.fukushima_bdj(0.6, 0.3)
    assert elliptix.incomplete_bdj(np.pi / 2, 0.4, 0.3) == elliptix.fukushima_bdj_incomplete(
        np.pi / 2, 0.4, 0.3
    )
    assert elliptix.incomplete_bdj(1.0, 1.0, 0.0) == elliptix.fukushima_bdj_incomplete(1.0, 1.0, 0.0)


def test_unit_characteristic_diverges_at_quarter_period(caplog):
    with caplog.at_level(logging.WARNING):
        b, d, j = elliptix.incomplete_bdj(np.pi / 2, 1.0, 0.3)
    assert j == np.inf
    assert (b, d) == elliptix.fukushima_bd(0.3)
    assert "diverges" in caplog.text
    assert np.isfinite(elliptix.incomplete_bdj(np.pi / 2 - 1e-7, 1.0, 0.3)[2])


def test_elliptic_k_cache():
    cache = elliptix.EllipticKCache()
    assert cache(0.5) == elliptix.elliptic_k(0.5)
    assert cache(0.5) == elliptix.elliptic_k(0.5)
    assert (cache.hits, cache.misses) == (1, 1)
    assert cache(0.25) == elliptix.elliptic_k(0.25)
    assert (cache.hits, cache.misses) == (1, 2)
    cache.clear()
    assert (cache.hits, cache.misses) == (0, 0)
    cache(0.25)
    assert cache.misses == 1


def test_elliptic_k_cache_verbose(caplog):
    cache = elliptix.EllipticKCache(verbose=True)
    with caplog.at_level(logging.DEBUG, logger="elliptix.handler"):
        cache(0.7)
        cache(0.7)
    assert "miss" in caplog.text
    assert "hit" in caplog.text


def test_elliptic_k_cache_rejects_bad_parameter():
    with pytest.raises(ParameterDomainError):
        elliptix.EllipticKCache()(1.5)
