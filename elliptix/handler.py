import logging
import os

import numpy as np

from .complete import bulirsch_cel, elliptic_k, fukushima_bd, fukushima_bdj
from .incomplete import fukushima_bdj_incomplete
from .jacobi import sn_cn_dn, sn_cn_dn_am

log = logging.getLogger(__name__)

_LOG_LEVEL = os.environ.get("ELLIPTIX_LOG_LEVEL")
if _LOG_LEVEL:
    formatter = logging.Formatter("%(levelname)s (%(name)s): %(message)s")
    console = logging.StreamHandler()
    console.setFormatter(formatter)
    package_log = logging.getLogger("elliptix")
    package_log.addHandler(console)
    package_log.setLevel(_LOG_LEVEL.upper())

_DOMAIN_CHECKS = os.environ.get("ELLIPTIX_DOMAIN_CHECKS", "1") != "0"

# Relative tolerance below which two mc are treated as equal
_MC_REUSE_TOLERANCE = 1.11e-16


class ParameterDomainError(ValueError):
    """Raised when an argument lies outside the domain of an elliptic function"""


def set_domain_checks(enabled: bool) -> None:
    """Switches between raising on domain violations and returning NaN

    :param enabled: Raise ``ParameterDomainError`` if True, return NaN otherwise
    :type enabled: bool
    """
    global _DOMAIN_CHECKS
    _DOMAIN_CHECKS = bool(enabled)


def domain_checks_enabled() -> bool:
    return _DOMAIN_CHECKS


def _in_range(x: float, low: float, high: float, low_open: bool = False) -> bool:
    if not np.isfinite(x):
        return False
    if low_open:
        return low < x <= high
    return low <= x <= high


def _violation(function: str, message: str, size: int):
    """Raises or, with checks disabled, returns ``size`` NaNs"""
    if _DOMAIN_CHECKS:
        log.error(f"{function}: {message}")
        raise ParameterDomainError(f"{function}: {message}")
    log.warning(f"{function}: {message}, returning NaN")
    if size == 1:
        return np.nan
    return (np.nan,) * size


def jacobi_functions(u: float, mc: float, amplitude: bool = False) -> tuple:
    """Jacobi elliptic functions with argument validation

    :param u: Argument, any finite real
    :type u: float
    :param mc: Complementary parameter :math:`0 < m_c \\leq 1`
    :type mc: float
    :param amplitude: Whether to append :math:`am(u|m)` to the result, defaults to False
    :type amplitude: bool, optional
    :return: :math:`(sn, cn, dn)` or :math:`(sn, cn, dn, am)`
    :rtype: tuple
    """
    size = 4 if amplitude else 3
    if not np.isfinite(u):
        return _violation("jacobi_functions", f"u = {u} is not finite", size)
    if not _in_range(mc, 0.0, 1.0, low_open=True):
        return _violation("jacobi_functions", f"mc = {mc} outside (0, 1]", size)
    if amplitude:
        return sn_cn_dn_am(float(u), float(mc))
    return sn_cn_dn(float(u), float(mc))


def complete_first_kind(mc: float) -> float:
    """:math:`K(m)` with argument validation, :math:`0 \\leq m_c \\leq 1`"""
    if not _in_range(mc, 0.0, 1.0):
        return _violation("complete_first_kind", f"mc = {mc} outside [0, 1]", 1)
    return elliptic_k(float(mc))


def general_cel(kc: float, nc: float, a: float, b: float) -> float:
    """Bulirsch's :math:`cel(k_c, n_c, a, b)` with argument validation

    An undefined result, :math:`k_c = 0` with :math:`b \\neq 0`, is returned
    as NaN and logged, never raised.
    """
    for name, value in (("kc", kc), ("nc", nc), ("a", a), ("b", b)):
        if not np.isfinite(value):
            return _violation("general_cel", f"{name} = {value} is not finite", 1)
    result = bulirsch_cel(float(kc), float(nc), float(a), float(b))
    if np.isnan(result):
        log.error(f"general_cel: undefined for kc = {kc}, b = {b}, returning NaN")
    return result


def complete_bd(mc: float) -> tuple:
    """:math:`(B(m), D(m))` with argument validation, :math:`0 \\leq m_c \\leq 1`"""
    if not _in_range(mc, 0.0, 1.0):
        return _violation("complete_bd", f"mc = {mc} outside [0, 1]", 2)
    return fukushima_bd(float(mc))


def complete_bdj(n: float, mc: float) -> tuple:
    """:math:`(B(m), D(m), J(n|m))` with argument validation

    :param n: Characteristic :math:`0 \\leq n < 1`
    :type n: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B, D, J)`
    :rtype: tuple
    """
    if not _in_range(n, 0.0, 1.0) or n == 1.0:
        return _violation("complete_bdj", f"n = {n} outside [0, 1)", 3)
    if not _in_range(mc, 0.0, 1.0):
        return _violation("complete_bdj", f"mc = {mc} outside [0, 1]", 3)
    return fukushima_bdj(1.0 - float(n), float(mc))


def incomplete_bdj(phi: float, n: float, mc: float) -> tuple:
    """:math:`(B(\\phi|m), D(\\phi|m), J(\\phi, n|m))` with argument validation

    :param phi: Amplitude :math:`0 \\leq \\phi \\leq \\pi/2`
    :type phi: float
    :param n: Characteristic :math:`0 \\leq n \\leq 1`; :math:`J` is +inf for
        :math:`n = 1` at :math:`\\phi = \\pi/2`
    :type n: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B, D, J)`
    :rtype: tuple
    """
    if not _in_range(phi, 0.0, np.pi / 2):
        return _violation("incomplete_bdj", f"phi = {phi} outside [0, pi/2]", 3)
    if not _in_range(n, 0.0, 1.0):
        return _violation("incomplete_bdj", f"n = {n} outside [0, 1]", 3)
    if not _in_range(mc, 0.0, 1.0):
        return _violation("incomplete_bdj", f"mc = {mc} outside [0, 1]", 3)
    if n == 1.0 and phi == np.pi / 2:
        log.warning("incomplete_bdj: J diverges for n = 1 at phi = pi/2, returning inf")
        b, d = fukushima_bd(float(mc))
        return b, d, np.inf
    return fukushima_bdj_incomplete(float(phi), float(n), float(mc))


class EllipticKCache:
    """Remembers the most recent :math:`K(m)`

    Callers that evaluate many Jacobi functions at a fixed parameter, such as
    a torque-free rigid body propagated over a time grid, reuse the stored
    value instead of recomputing it. Not thread-safe: keep one per thread.

    :param verbose: Whether to log hits and misses at DEBUG, defaults to False
    :type verbose: bool, optional
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.clear()

    def clear(self) -> None:
        self.mc = None
        self.k = None
        self.hits = 0
        self.misses = 0

    def __call__(self, mc: float) -> float:
        if self.mc is not None and abs(mc - self.mc) < _MC_REUSE_TOLERANCE * mc:
            self.hits += 1
            if self.verbose:
                log.debug(f"EllipticKCache hit for mc = {mc}")
            return self.k
        self.misses += 1
        if self.verbose:
            log.debug(f"EllipticKCache miss for mc = {mc}")
        self.k = complete_first_kind(mc)
        self.mc = mc
        return self.k
