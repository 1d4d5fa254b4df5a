import taichi as ti


@ti.pyfunc
def horner(coefficients: ti.template(), x: float) -> float:
    """Evaluates the polynomial ``sum(c[i] * x**i)`` by Horner's rule

    :param coefficients: Polynomial coefficients in increasing degree
    :type coefficients: tuple
    :param x: Evaluation point
    :type x: float
    :return: Polynomial value at ``x``
    :rtype: float
    """
    result = 0.0
    for c in reversed(coefficients):
        result = result * x + c
    return result


@ti.pyfunc
def estrin(coefficients: ti.template(), x: float) -> float:
    """Evaluates the same polynomial as ``horner`` with Estrin's scheme

    Adjacent coefficients are paired as ``c[2i] + c[2i+1] * x`` and the pairs
    are folded again in ``x**2``, ``x**4``, ... until one value remains. The
    dependency chain is logarithmic in the degree instead of linear.

    :param coefficients: Polynomial coefficients in increasing degree
    :type coefficients: tuple
    :param x: Evaluation point
    :type x: float
    :return: Polynomial value at ``x``
    :rtype: float
    """
    terms = list(coefficients)
    power = x
    while len(terms) > 1:
        if len(terms) % 2 == 1:
            terms.append(0.0)
        terms = [terms[i] + terms[i + 1] * power for i in range(0, len(terms), 2)]
        power = power * power
    return terms[0] if terms else 0.0


@ti.pyfunc
def piecewise(bounds: ti.template(), table: ti.template(), x: float):
    """Returns the row of ``table`` for the first bound that ``x`` does not exceed

    Rows past the last bound are never selected: the final row is the catch-all.
    """
    for i in range(len(bounds) - 1):
        if x <= bounds[i]:
            return table[i]
    return table[len(table) - 1]
