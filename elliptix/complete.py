import taichi as ti

from .coefficients import (
    B_MACLAURIN,
    D_MACLAURIN,
    DDDC_MACLAURIN,
    DDDC_SERIES,
    DKKC_MACLAURIN,
    DKKC_SERIES,
    ELLIPTIC_K_INTERVALS,
    FUKUSHIMA_BD_INTERVALS,
    INTERVAL_BOUNDS,
    NOME_Q_SERIES,
)
from .polynomial import horner, piecewise

PI = ti.math.pi
LOG4 = 1.3862943611198906
LOG4_MINUS_1 = 0.3862943611198906188344642429164
TINY = 1.0e-99

# Bulirsch: ca = 1e-7 gives about 14 digits
CEL_TOLERANCE = 1.0e-7
CEL_KC_NEARLY_0 = 1.0e-14
MAX_CEL_ITERATIONS = 100


@ti.pyfunc
def elliptic_nome_q(mc: float, degree) -> float:
    """Jacobi's nome :math:`q(m)` from its Maclaurin series in :math:`m_c`

    :param mc: Complementary parameter :math:`m_c = 1 - m`
    :type mc: float
    :param degree: Number of series terms, at most 16
    :type degree: int
    :return: :math:`q(m)`
    :rtype: float
    """
    return mc * horner(NOME_Q_SERIES[:degree], mc)


@ti.pyfunc
def elliptic_k(mc: float) -> float:
    """Computes the complete elliptic integral of the first kind :math:`K(m)`

    Fukushima (2009), Celest. Mech. Dyn. Astron. 105, 305-328. Piecewise
    minimax polynomials in :math:`m`; near :math:`m_c = 0` the logarithmic
    singularity is factored out through the nome.

    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`K(m)`
    :rtype: float
    """
    m = 1.0 - mc
    k = 0.0
    if ti.abs(m) < 1.0e-16:
        k = PI / 2
    elif mc < TINY:
        k = LOG4 - 0.5 * ti.log(TINY)
    elif mc < 1.11e-16:
        k = LOG4 - 0.5 * ti.log(mc)
    elif mc < 0.1:
        nome = elliptic_nome_q(mc, 14)
        # K'(m) is K at the complementary parameter, first interval
        kkc = horner(ELLIPTIC_K_INTERVALS[0][1], mc - 0.05)
        k = -kkc * ti.log(nome) / PI
    else:
        center, coefficients = piecewise(INTERVAL_BOUNDS, ELLIPTIC_K_INTERVALS, m)
        k = horner(coefficients, m - center)
    return k


@ti.pyfunc
def bulirsch_cel(kc: float, nc: float, a: float, b: float) -> float:
    """Bulirsch's general complete elliptic integral

    .. math::

        cel(k_c, n_c, a, b) = \\int_0^{\\pi/2}
            \\frac{a \\cos^2\\theta + b \\sin^2\\theta}
            {(\\cos^2\\theta + n_c \\sin^2\\theta)
             \\sqrt{\\cos^2\\theta + k_c^2 \\sin^2\\theta}} d\\theta

    Bulirsch (1969), Numer. Math. 13, 305-315, evaluated with Bartky's
    transformation. ``kc == 0`` with ``b != 0`` is undefined and yields NaN.

    :param kc: Complementary modulus :math:`0 \\leq k_c \\leq 1`
    :type kc: float
    :param nc: Complementary characteristic :math:`0 \\leq n_c \\leq 1`
    :type nc: float
    :param a: Coefficient of :math:`\\cos^2`
    :type a: float
    :param b: Coefficient of :math:`\\sin^2`
    :type b: float
    :return: :math:`cel(k_c, n_c, a, b)`
    :rtype: float
    """
    if kc == 0.0:
        if b != 0.0:
            return ti.math.nan
        kc = CEL_KC_NEARLY_0

    p = nc
    kc = ti.abs(kc)
    e = kc
    m = 1.0

    if p > 0.0:
        p = ti.sqrt(p)
        b = b / p
    else:
        f = kc * kc
        q = 1.0 - f
        g = 1.0 - p
        f = f - p
        q = (b - a * p) * q
        p = ti.sqrt(f / g)
        a = (a - b) / g
        b = a * p - q / (g * g * p)

    # Bartky's algorithm
    converged = False
    for _ in range(MAX_CEL_ITERATIONS):
        f = a
        a = b / p + a
        g = e / p
        b = f * g + b
        b = b + b
        p = g + p
        g = m
        m = kc + m
        if ti.abs(g - kc) <= g * CEL_TOLERANCE:
            converged = True
            break
        kc = ti.sqrt(e)
        kc = kc + kc
        e = kc * m
    assert converged, "bulirsch_cel: Bartky iteration did not converge"

    return (PI / 2) * (a * m + b) / (m * (m + p))


@ti.pyfunc
def fukushima_bd(mc: float):
    """Computes Fukushima's complete elliptic integrals :math:`B(m), D(m)`

    .. math::

        B(m) = \\int_0^{\\pi/2} \\frac{\\cos^2\\theta}{\\Delta} d\\theta, \\quad
        D(m) = \\int_0^{\\pi/2} \\frac{\\sin^2\\theta}{\\Delta} d\\theta, \\quad
        \\Delta = \\sqrt{1 - m \\sin^2\\theta}

    so that :math:`K = B + D` and :math:`E = B + m_c D`. Fukushima (2011),
    Math. Comp. 80, 1725-1743.

    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B, D)`
    :rtype: tuple
    """
    m = 1.0 - mc
    if m < 1.11e-16:
        return PI / 4, PI / 4
    if mc == 0.0:
        return 1.0, ti.math.inf
    if mc < 1.11e-16:
        return 1.0, LOG4_MINUS_1 - 0.5 * ti.log(mc)

    b = 0.0
    d = 0.0
    if mc < 0.1:
        nome = elliptic_nome_q(mc, 16)
        dkkc = 0.0
        dddc = 0.0
        if mc < 0.01:
            dkkc = horner(DKKC_MACLAURIN, mc)
            dddc = horner(DDDC_MACLAURIN, mc)
        else:
            mx = mc - 0.05
            # (K' - 1) / (pi / 2) and (K' - E') / (pi / 2)
            dkkc = horner(DKKC_SERIES, mx)
            dddc = horner(DDDC_SERIES, mx)
        kkc = 1.0 + dkkc
        logq2 = -0.5 * ti.log(nome)
        elk = kkc * logq2
        dele = -dkkc / kkc + logq2 * dddc
        elk1 = elk - 1.0
        delb = (dele - mc * elk1) / m
        b = 1.0 + delb
        d = elk1 - delb
    elif m <= 0.01:
        b = (PI / 2) * horner(B_MACLAURIN, m)
        d = (PI / 2) * horner(D_MACLAURIN, m)
    else:
        center, b_coefficients, d_coefficients = piecewise(
            INTERVAL_BOUNDS, FUKUSHIMA_BD_INTERVALS, m
        )
        mx = center - mc
        b = horner(b_coefficients, mx)
        d = horner(d_coefficients, mx)
    return b, d


@ti.pyfunc
def fukushima_bdj(nc: float, mc: float):
    """Computes the complete integrals :math:`B(m), D(m), J(n|m)`

    .. math::

        J(n|m) = \\int_0^{\\pi/2}
            \\frac{\\sin^2\\theta}{(1 - n \\sin^2\\theta) \\Delta} d\\theta

    :math:`J` is :math:`cel(\\sqrt{m_c}, n_c, 0, 1)`, Bulirsch (1969), special
    examples after equation (1.2.2).

    :param nc: Complementary characteristic :math:`n_c = 1 - n`
    :type nc: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B, D, J)`
    :rtype: tuple
    """
    b, d = fukushima_bd(mc)
    j = bulirsch_cel(ti.sqrt(mc), nc, 0.0, 1.0)
    return b, d, j
