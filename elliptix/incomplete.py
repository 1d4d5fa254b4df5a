import taichi as ti

from .coefficients import BS_DS_F_SERIES, JS_SERIES, T_SERIES
from .complete import fukushima_bdj
from .polynomial import estrin, horner

# Fukushima (2011), J. Comp. Appl. Math. 236, 1961-1975, section 3.5
Y_B = 0.01622
# Fukushima (2011), J. Comp. Appl. Math. 235, 4140-4148, section 2.2
X_S = 0.1
MAX_TRANSFORMATIONS = 10

# sin(PHI_S)**2 is approximately Y_S
PHI_S = 1.249
Y_S = 0.9

T_NEGLIGIBLE = 3.3306691e-16
# |z| bounds of the truncated series of degree 1 .. 9, valid for either sign
T_SERIES_BOUNDS = (
    2.3560805e-08,
    9.1939631e-06,
    1.7779240e-04,
    1.0407839e-03,
    3.3616998e-03,
    7.7408014e-03,
    1.4437181e-02,
    2.3407312e-02,
    3.4416203e-02,
)
# degrees 10 .. 12, only reached for z >= 0
T_SERIES_BOUNDS_POSITIVE = (4.7138547e-02, 6.1227405e-02, 7.6353468e-02)

# y bounds for the Js series of degree 5 .. 9, degree 10 past the last one
JS_DEGREE_BOUNDS = (6.0369310e-04, 2.0727505e-03, 5.0047026e-03, 9.6961652e-03,
                    1.6220210e-02)


@ti.pyfunc
def _t_series(t: float, z: float, degree) -> float:
    coefficients = T_SERIES[: degree + 1]
    result = 0.0
    if degree <= 3:
        result = t * horner(coefficients, z)
    else:
        result = t * estrin(coefficients, z)
    return result


@ti.pyfunc
def fukushima_t(t: float, h: float) -> float:
    """Fukushima's auxiliary function

    .. math::

        T(t, h) = \\int_0^t \\frac{d\\tau}{1 + h \\tau^2}
                = \\frac{\\arctan(\\sqrt{h} t)}{\\sqrt{h}}

    with the :math:`\\operatorname{artanh}` form for :math:`h < 0`. For small
    :math:`|z|`, :math:`z = -h t^2`, a truncated Maclaurin series in
    :math:`z` is used instead; the distribution of :math:`z` is heavily
    biased towards small values, so the bounds are scanned in order.

    :param t: Argument
    :type t: float
    :param h: :math:`n (1 - n) (n - m)`
    :type h: float
    :return: :math:`T(t, h)`
    :rtype: float
    """
    z = -h * t * t
    abs_z = ti.abs(z)
    if abs_z < T_NEGLIGIBLE:
        return t
    for i in range(len(T_SERIES_BOUNDS)):
        if abs_z < T_SERIES_BOUNDS[i]:
            return _t_series(t, z, i + 1)
    if z < 0.0:
        r = ti.sqrt(h)
        return ti.atan2(r * t, 1.0) / r
    for i in range(len(T_SERIES_BOUNDS_POSITIVE)):
        if abs_z < T_SERIES_BOUNDS_POSITIVE[i]:
            return _t_series(t, z, len(T_SERIES_BOUNDS) + i + 1)
    r = ti.sqrt(-h)
    x = r * t
    return 0.5 * ti.log((1.0 + x) / (1.0 - x)) / r


@ti.pyfunc
def fukushima_bs_ds_maclaurin(y: float, m: float):
    """Series of :math:`B_s, D_s` in :math:`y = \\sin^2\\varphi`, to degree 11

    :math:`B = s B_s(y)` and :math:`D = s y D_s(y)`. Both series derive from
    the palindromic polynomials :math:`F_k(m)`.
    """
    d_coefficients = [0.0] * (len(BS_DS_F_SERIES) + 1)
    b_coefficients = [0.0] * (len(BS_DS_F_SERIES) + 1)
    d_coefficients[0] = 1.0 / 3.0
    b_coefficients[0] = 1.0
    for k in range(1, len(BS_DS_F_SERIES) + 1):
        f = horner(BS_DS_F_SERIES[k - 1], m)
        d_coefficients[k] = f * (2.0 * k + 1.0) / (2.0 * k + 3.0)
        b_coefficients[k] = f - d_coefficients[k - 1]
    return horner(b_coefficients, y), horner(d_coefficients, y)


@ti.pyfunc
def fukushima_js_maclaurin(y: float, n: float, m: float) -> float:
    """Series of :math:`J_s` in :math:`y`, degree 5 to 10 depending on :math:`y`

    Each coefficient :math:`J_k(n, m)` is itself a polynomial in both the
    characteristic and the parameter.
    """
    degree = len(JS_SERIES)
    for i in range(len(JS_DEGREE_BOUNDS)):
        if y <= JS_DEGREE_BOUNDS[i]:
            degree = i + 5
            break
    coefficients = [0.0] * degree
    for k in range(degree):
        rows = JS_SERIES[k]
        jk = 0.0
        for r in range(len(rows) - 1, -1, -1):
            jk = jk * m + horner(rows[r], n)
        coefficients[k] = jk
    return y * horner(coefficients, y)


@ti.pyfunc
def _double_argument(
    b: float,
    d: float,
    j: float,
    x: ti.template(),
    y: ti.template(),
    s: ti.template(),
    cd: ti.template(),
    i,
    n: float,
    h: float,
):
    # Undo i half argument transformations. 1 - n (y[k-1] - y[k] cd[k-1]) is
    # formed from x = 1 - y, which the cosine entry records exactly
    nc = 1.0 - n
    for k in range(i, 0, -1):
        sy = s[k - 1] * y[k]
        t = sy / (nc + n * (x[k - 1] + y[k] * cd[k - 1]))
        b = 2.0 * b - sy
        d = d + (d + sy)
        j = j + (j + fukushima_t(t, h))
    return b, d, j


@ti.pyfunc
def fukushima_bs_ds_js(s0: float, n: float, mc: float):
    """Incomplete :math:`B, D, J` from the sine of the amplitude

    The argument is halved until :math:`y = \\sin^2 < 0.01622`, the
    Maclaurin series are evaluated there and the result is doubled back.
    Fukushima (2011), J. Comp. Appl. Math. 236, 1961-1975, section 3.3.

    :param s0: :math:`\\sin\\varphi`, :math:`0 \\leq s_0 \\leq 1`
    :type s0: float
    :param n: Characteristic :math:`0 \\leq n \\leq 1`
    :type n: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B(\\varphi|m), D(\\varphi|m), J(\\varphi, n|m))`
    :rtype: tuple
    """
    x = [0.0] * (MAX_TRANSFORMATIONS + 1)
    y = [0.0] * (MAX_TRANSFORMATIONS + 1)
    s = [0.0] * (MAX_TRANSFORMATIONS + 1)
    cd = [0.0] * (MAX_TRANSFORMATIONS + 1)

    m = 1.0 - mc
    h = n * (1.0 - n) * (n - m)
    yi = s0 * s0
    x[0] = 1.0 - yi
    y[0] = yi
    s[0] = s0
    i = 0
    while yi >= Y_B:
        assert i < MAX_TRANSFORMATIONS, "fukushima_bs_ds_js: too many transformations"
        ci = ti.sqrt(1.0 - yi)
        di = ti.sqrt(1.0 - m * yi)
        yi = yi / ((1.0 + ci) * (1.0 + di))
        x[i + 1] = 1.0 - yi
        y[i + 1] = yi
        s[i + 1] = ti.sqrt(yi)
        cd[i] = ci * di
        i += 1

    bs, ds = fukushima_bs_ds_maclaurin(yi, m)
    b = s[i] * bs
    d = s[i] * yi * ds
    j = s[i] * fukushima_js_maclaurin(yi, n, m)
    return _double_argument(b, d, j, x, y, s, cd, i, n, h)


@ti.pyfunc
def fukushima_bc_dc_jc(c0: float, n: float, mc: float):
    """Incomplete :math:`B, D, J` from the cosine of the amplitude

    Half argument transformations on :math:`x = \\cos^2` avoid the
    cancellation in :math:`1 - c^2` when the amplitude is close to
    :math:`\\pi/2`. Once :math:`x > 0.1` the sine routine takes over.
    Fukushima (2011), J. Comp. Appl. Math. 235, 4140-4148.

    :param c0: :math:`\\cos\\varphi`, :math:`0 \\leq c_0 \\leq 1`
    :type c0: float
    :param n: Characteristic :math:`0 \\leq n \\leq 1`
    :type n: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B(\\varphi|m), D(\\varphi|m), J(\\varphi, n|m))`
    :rtype: tuple
    """
    x = [0.0] * (MAX_TRANSFORMATIONS + 1)
    y = [0.0] * (MAX_TRANSFORMATIONS + 1)
    s = [0.0] * (MAX_TRANSFORMATIONS + 1)
    cd = [0.0] * (MAX_TRANSFORMATIONS + 1)

    m = 1.0 - mc
    h = n * (1.0 - n) * (n - m)
    xi = c0 * c0
    x[0] = xi
    y[0] = 1.0 - xi
    s[0] = ti.sqrt(y[0])
    ci = c0
    i = 0
    while xi <= X_S:
        assert i < MAX_TRANSFORMATIONS, "fukushima_bc_dc_jc: too many transformations"
        di = ti.sqrt(mc + m * xi)
        xi = (ci + di) / (1.0 + di)
        x[i + 1] = xi
        y[i + 1] = 1.0 - xi
        s[i + 1] = ti.sqrt(y[i + 1])
        cd[i] = ci * di
        ci = ti.sqrt(xi)
        i += 1

    b, d, j = fukushima_bs_ds_js(s[i], n, mc)
    return _double_argument(b, d, j, x, y, s, cd, i, n, h)


@ti.pyfunc
def fukushima_bdj_incomplete(phi: float, n: float, mc: float):
    """Computes Fukushima's incomplete integrals :math:`B, D, J`

    .. math::

        B(\\varphi|m) = \\int_0^\\varphi \\frac{\\cos^2\\theta}{\\Delta} d\\theta,
        \\quad
        D(\\varphi|m) = \\int_0^\\varphi \\frac{\\sin^2\\theta}{\\Delta} d\\theta,
        \\quad
        J(\\varphi, n|m) = \\int_0^\\varphi
            \\frac{\\sin^2\\theta}{(1 - n \\sin^2\\theta) \\Delta} d\\theta

    Below :math:`\\varphi_s = 1.249` the sine routine is used directly.
    Above it, the sine or cosine routine is applied either to :math:`\\varphi`
    or to its complementary amplitude, whichever avoids cancellation, and in
    the latter case the result is subtracted from the complete integrals.

    :param phi: Amplitude :math:`0 \\leq \\varphi \\leq \\pi/2`
    :type phi: float
    :param n: Characteristic :math:`0 \\leq n \\leq 1`
    :type n: float
    :param mc: Complementary parameter :math:`0 \\leq m_c \\leq 1`
    :type mc: float
    :return: :math:`(B, D, J)`
    :rtype: tuple
    """
    m = 1.0 - mc
    nc = 1.0 - n
    b, d, j = 0.0, 0.0, 0.0
    if phi < PHI_S:
        b, d, j = fukushima_bs_ds_js(ti.sin(phi), n, mc)
    elif nc == 0.0:
        # the complementary amplitude needs J(n|m), which diverges at n = 1
        b, d, j = fukushima_bc_dc_jc(ti.cos(phi), n, mc)
    else:
        h = n * nc * (n - m)
        c = ti.cos(phi)
        c2 = c * c
        z2_denominator = mc + m * c2
        if c2 < Y_S * z2_denominator:
            z = c / ti.sqrt(z2_denominator)
            b, d, j = fukushima_bs_ds_js(z, n, mc)
            bc, dc, jc = fukushima_bdj(nc, mc)
            sz = z * ti.sqrt(1.0 - c2)
            t = sz / nc
            b, d, j = bc - (b - sz), dc - (d + sz), jc - (j + fukushima_t(t, h))
        elif mc * (1.0 - c2) < c2 * z2_denominator:
            b, d, j = fukushima_bc_dc_jc(c, n, mc)
        else:
            w2_over_mc = (1.0 - c2) / z2_denominator
            b, d, j = fukushima_bc_dc_jc(ti.sqrt(mc * w2_over_mc), n, mc)
            bc, dc, jc = fukushima_bdj(nc, mc)
            sz = c * ti.sqrt(w2_over_mc)
            t = sz / nc
            b, d, j = bc - (b - sz), dc - (d + sz), jc - (j + fukushima_t(t, h))
    return b, d, j
