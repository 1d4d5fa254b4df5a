import taichi as ti

from .complete import elliptic_k

PI = ti.math.pi

# Maclaurin coefficients of sn^2 / 2 to third order in u^2
B10 = 1.0 / 24.0
B11 = 1.0 / 6.0
B20 = 1.0 / 720.0
B21 = 11.0 / 180.0
B22 = 1.0 / 45.0

# Below this bound u < K(m) / 2 holds for every m
U_DIRECT = 0.785
MAX_HALVINGS = 20


@ti.pyfunc
def _scd2(u: float, mc: float):
    """sn, cn, dn for the limited argument :math:`0 \\leq u < K/2`

    Fukushima (2012), Numer. Math., "Precise and Fast Computation of Jacobian
    Elliptic Functions by Conditional Duplication". The argument is halved
    until a short series for :math:`sn^2` is exact, then doubled back. Past
    ``uA`` the duplication of :math:`1 - cn` may cancel, in which case the
    remaining steps run on :math:`cn` directly.
    """
    m = 1.0 - mc
    ua = 1.76269 + mc * 1.16357
    ut = 5.217e-3 - m * 2.143e-3

    u0 = u
    n = 0
    while u0 >= ut:
        assert n < MAX_HALVINGS, "_scd2: input argument too large"
        u0 = u0 * 0.5
        n += 1

    v = u0 * u0
    a = 1.0
    b = v * (0.5 - v * (B10 + m * B11 - v * (B20 + m * (B21 + m * B22))))

    # step at which the complementary recurrence takes over, n if never
    switch = n
    if u < ua:
        for _ in range(n):
            y = b * (a * 2.0 - b)
            z = a * a
            my = m * y
            b = (y * 2.0) * (z - my)
            a = z * z - my * y
    else:
        for j in range(n):
            y = b * (a * 2.0 - b)
            z = a * a
            my = m * y
            if z < my * 2.0:
                switch = j
                break
            b = (y * 2.0) * (z - my)
            a = z * z - my * y

    s = 0.0
    c = 0.0
    d = 0.0
    if switch < n:
        # the recurrence is homogeneous of degree 4 in (c, a): carry c / a
        # with a = 1 so that neither underflows for tiny mc
        c = (a - b) / a
        mc2 = mc * 2.0
        m2 = m * 2.0
        for _ in range(switch, n):
            x = c * c
            w = m * x * x - mc
            c = (mc2 * x + w) / (m2 * x - w)
        x = c * c
        s = ti.sqrt(1.0 - x)
        d = ti.sqrt(mc + m * x)
    else:
        b = b / a
        y = b * (2.0 - b)
        c = 1.0 - b
        s = ti.sqrt(y)
        d = ti.sqrt(1.0 - m * y)
    return s, c, d


@ti.pyfunc
def sn_cn_dn(u: float, mc: float):
    """Computes the Jacobi elliptic functions sn, cn, dn for any real argument

    The argument is reduced modulo :math:`4K` into octants of width
    :math:`K/2`, each mapped back to :math:`[0, K/2)` with the quarter and
    half period identities, see https://dlmf.nist.gov/22.4.

    :param u: Argument
    :type u: float
    :param mc: Complementary parameter :math:`0 < m_c \\leq 1`
    :type mc: float
    :return: :math:`(sn(u|m), cn(u|m), dn(u|m))`
    :rtype: tuple
    """
    kc = ti.sqrt(mc)
    ux = ti.abs(u)
    s, c, d = 0.0, 0.0, 0.0
    if ux < U_DIRECT:
        s, c, d = _scd2(ux, mc)
    else:
        k = elliptic_k(mc)
        kh = k * 0.5
        kh3 = k * 1.5
        kh5 = k * 2.5
        kh7 = k * 3.5
        k2 = k * 2.0
        k3 = k * 3.0
        k4 = k * 4.0
        ux = ux - k4 * ti.floor(ux / k4)
        if ux < kh:
            s, c, d = _scd2(ux, mc)
        elif ux < k:
            s, c, d = _scd2(k - ux, mc)
            s, c, d = c / d, kc * s / d, kc / d
        elif ux < kh3:
            s, c, d = _scd2(ux - k, mc)
            s, c, d = c / d, -kc * s / d, kc / d
        elif ux < k2:
            s, c, d = _scd2(k2 - ux, mc)
            c = -c
        elif ux < kh5:
            s, c, d = _scd2(ux - k2, mc)
            s, c = -s, -c
        elif ux < k3:
            s, c, d = _scd2(k3 - ux, mc)
            s, c, d = -c / d, -kc * s / d, kc / d
        elif ux < kh7:
            s, c, d = _scd2(ux - k3, mc)
            s, c, d = -c / d, kc * s / d, kc / d
        else:
            s, c, d = _scd2(k4 - ux, mc)
            s = -s
    if u < 0.0:
        s = -s
    return s, c, d


@ti.pyfunc
def sn_cn_dn_am(u: float, mc: float):
    """Computes sn, cn, dn together with the Jacobi amplitude :math:`am(u|m)`

    The amplitude is continuous and increasing, :math:`am(u + 2K) = am(u) + \\pi`,
    so that :math:`sn = \\sin(am)` and :math:`cn = \\cos(am)`.

    :param u: Argument
    :type u: float
    :param mc: Complementary parameter :math:`0 < m_c \\leq 1`
    :type mc: float
    :return: :math:`(sn, cn, dn, am)`
    :rtype: tuple
    """
    s, c, d, am = 0.0, 0.0, 0.0, 0.0
    if ti.abs(u) < U_DIRECT:
        s, c, d = sn_cn_dn(u, mc)
        am = ti.atan2(s, c)
    else:
        k2 = 2.0 * elliptic_k(mc)
        # number of half periods to the nearest multiple of 2K
        n = ti.floor(u / k2 + 0.5)
        s, c, d = sn_cn_dn(u - n * k2, mc)
        am = ti.atan2(s, c) + n * PI
        if n % 2 != 0:
            s, c = -s, -c
    return s, c, d, am
