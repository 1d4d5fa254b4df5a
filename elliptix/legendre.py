import taichi as ti

from .complete import fukushima_bd, fukushima_bdj
from .incomplete import fukushima_bdj_incomplete

PI = ti.math.pi


@ti.pyfunc
def _bdj_any_phi(phi: float, n: float, mc: float):
    # phi = c * pi + phi_shifted with phi_shifted in [-pi/2, pi/2)
    c = ti.floor((phi + PI / 2) / PI)
    phi_shifted = phi - c * PI
    b, d, j = fukushima_bdj_incomplete(ti.abs(phi_shifted), n, mc)
    if phi_shifted < 0.0:
        b, d, j = -b, -d, -j
    if c != 0:
        bc, dc, jc = fukushima_bdj(1.0 - n, mc)
        b = b + 2 * c * bc
        d = d + 2 * c * dc
        j = j + 2 * c * jc
    return b, d, j


@ti.pyfunc
def _bd_any_phi(phi: float, mc: float):
    c = ti.floor((phi + PI / 2) / PI)
    phi_shifted = phi - c * PI
    b, d, _ = fukushima_bdj_incomplete(ti.abs(phi_shifted), 0.0, mc)
    if phi_shifted < 0.0:
        b, d = -b, -d
    if c != 0:
        bc, dc = fukushima_bd(mc)
        b = b + 2 * c * bc
        d = d + 2 * c * dc
    return b, d


@ti.pyfunc
def elliptic_f(phi: float, mc: float) -> float:
    """Computes the incomplete elliptic integral of the first kind :math:`F(\\phi | m) = B + D`

    :param phi: :math:`\\phi`, any real
    :type phi: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`F(\\phi | m)`
    :rtype: float
    """
    b, d = _bd_any_phi(phi, mc)
    return b + d


@ti.pyfunc
def elliptic_e(phi: float, mc: float) -> float:
    """Computes the incomplete elliptic integral of the second kind :math:`E(\\phi | m) = B + m_c D`

    :param phi: :math:`\\phi`, any real
    :type phi: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`E(\\phi | m)`
    :rtype: float
    """
    b, d = _bd_any_phi(phi, mc)
    return b + mc * d


@ti.pyfunc
def elliptic_pi(phi: float, n: float, mc: float) -> float:
    """Computes the incomplete elliptic integral of the third kind :math:`\\Pi(\\phi, n | m) = B + D + n J`

    :param phi: :math:`\\phi`, any real
    :type phi: float
    :param n: Characteristic :math:`0 \\leq n \\leq 1`
    :type n: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`\\Pi(\\phi, n | m)`
    :rtype: float
    """
    b, d, j = _bdj_any_phi(phi, n, mc)
    return b + d + n * j


@ti.pyfunc
def elliptic_fe_pi(phi: float, n: float, mc: float):
    """All three Legendre integrals from a single evaluation of :math:`B, D, J`

    :return: :math:`(F, E, \\Pi)`
    :rtype: tuple
    """
    b, d, j = _bdj_any_phi(phi, n, mc)
    f = b + d
    return f, b + mc * d, f + n * j


@ti.pyfunc
def complete_elliptic_e(mc: float) -> float:
    """:math:`E(m) = B(m) + m_c D(m)`"""
    b, d = fukushima_bd(mc)
    return b + mc * d


@ti.pyfunc
def complete_elliptic_pi(n: float, mc: float) -> float:
    """:math:`\\Pi(n | m) = B(m) + D(m) + n J(n | m)`"""
    b, d, j = fukushima_bdj(1.0 - n, mc)
    return b + d + n * j
