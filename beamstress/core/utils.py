import math

import numpy as np


def divide(numerator: float, denominator: float) -> float:
    r"""Divide two scalars with IEEE semantics.

    Plain Python float division raises :class:`ZeroDivisionError`. Stress
    formulas must instead report degenerate sections as non-finite numbers,
    so the division is carried out on :any:`numpy.float64` with the floating
    point warnings silenced.

    Parameters
    ----------
    numerator : :any:`float`
        Dividend.
    denominator : :any:`float`
        Divisor, may be zero.

    Returns
    -------
    :any:`float`
        The quotient. ``x / 0`` gives ``inf`` with the sign of ``x`` and
        ``0 / 0`` gives ``nan``.

    Examples
    --------
    >>> divide(1000, 0.005)
    200000.0
    >>> divide(1.0, 0.0)
    inf
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def is_valid_dimension(value: float) -> bool:
    """Check one section dimension.

    Zero counts as valid; it flows through the formulas as a degenerate
    section. Negative, ``nan`` and infinite values are physically
    meaningless, but they are still evaluated: callers get non-finite or
    degenerate results instead of an exception.
    """
    return math.isfinite(value) and value >= 0


def half_cube_term(radius: float, y: float) -> float:
    r"""Return :math:`(r^2 - y^2)^{3/2}`, the chord term of circular
    segments.

    Callers only pass :math:`|y| \le r`. Rounding may still leave a tiny
    negative base at :math:`|y| = r`; it is clamped to zero so the result
    stays real.
    """
    return max(radius ** 2 - y ** 2, 0.0) ** 1.5
