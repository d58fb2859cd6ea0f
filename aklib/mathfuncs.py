"""Floating-point math: roots, trigonometry, exponentials, hyperbolics and powers.

Domain errors yield NaN and overflow yields infinity, as IEEE arithmetic
does, rather than raising.
"""

from __future__ import annotations

import math
from collections.abc import Callable

NAN = math.nan
PI = math.pi
E = math.e

_INF = math.inf


def _product_step2(value: int) -> int:
    """value * (value - 2) * ... down to 1 or 2."""
    return math.prod(range(value, 0, -2))


def _ieee(func: Callable[..., float], *args: float) -> float:
    """Call a math function, mapping domain errors to NaN and overflow to infinity."""
    try:
        return func(*args)
    except ValueError:
        return NAN
    except OverflowError:
        return _INF


def _log_family(func: Callable[[float], float], x: float) -> float:
    if math.isnan(x):
        return x
    if x < 0:
        return NAN
    if x == 0:
        return -_INF
    if math.isinf(x):
        return _INF
    return func(x)


def fmod(x: float, y: float) -> float:
    """Remainder of x / y truncated toward zero, with the sign of x."""
    return _ieee(math.fmod, x, y)


def remainder(x: float, y: float) -> float:
    """IEEE remainder of x / y, rounding the quotient to nearest."""
    return _ieee(math.remainder, x, y)


def sqrt(x: float) -> float:
    return _ieee(math.sqrt, x)


def rsqrt(x: float) -> float:
    """Reciprocal square root."""
    root = sqrt(x)
    if root == 0:
        return math.copysign(_INF, root)
    return 1.0 / root


def cbrt(x: float) -> float:
    """Cube root by a polynomial estimate refined with four Newton steps."""
    if math.isinf(x) or x == 0:
        return x
    if x < 0:
        return -cbrt(-x)

    r = x
    ex = 0
    while r < 0.125:
        r *= 8
        ex -= 1
    while r > 1.0:
        r *= 0.125
        ex += 1

    r = (-0.46946116 * r + 1.072302) * r + 0.3812513

    while ex < 0:
        r *= 0.5
        ex += 1
    while ex > 0:
        r *= 2.0
        ex -= 1

    for _ in range(4):
        r = (2.0 / 3.0) * r + (1.0 / 3.0) * x / (r * r)
    return r


def fabs(x: float) -> float:
    return math.fabs(x)


def hypot(x: float, y: float) -> float:
    return sqrt(x * x + y * y)


def sin(angle: float) -> float:
    return _ieee(math.sin, angle)


def cos(angle: float) -> float:
    return _ieee(math.cos, angle)


def sincos(angle: float) -> tuple[float, float]:
    """Sine and cosine of the angle, as a pair."""
    return sin(angle), cos(angle)


def tan(angle: float) -> float:
    return _ieee(math.tan, angle)


def atan(value: float) -> float:
    return _ieee(math.atan, value)


def asin(x: float) -> float:
    """Arc sine by a Taylor series near zero, via atan further out."""
    if x > 1 or x < -1:
        return NAN
    if x > 0.5 or x < -0.5:
        return 2 * atan(x / (1 + sqrt(1 - x * x)))
    squared = x * x
    value = x
    term = x * squared
    for odd in range(1, 17, 2):
        value += term * _product_step2(odd) / _product_step2(odd + 1) / (odd + 2)
        term *= squared
    return value


def acos(value: float) -> float:
    return 0.5 * PI - asin(value)


def atan2(y: float, x: float) -> float:
    return _ieee(math.atan2, y, x)


def log(x: float) -> float:
    return _log_family(math.log, x)


def log2(x: float) -> float:
    return _log_family(math.log2, x)


def log10(x: float) -> float:
    return _log_family(math.log10, x)


def exp(exponent: float) -> float:
    return _ieee(math.exp, exponent)


def exp2(exponent: float) -> float:
    try:
        return 2.0**exponent
    except OverflowError:
        return _INF


def sinh(x: float) -> float:
    exponentiated = exp(x)
    if x > 0:
        if math.isinf(exponentiated):
            return _INF
        return (exponentiated * exponentiated - 1) / 2 / exponentiated
    if exponentiated == 0:
        return -_INF
    return (exponentiated - 1 / exponentiated) / 2


def cosh(x: float) -> float:
    exponentiated = exp(-x)
    if math.isinf(exponentiated) or exponentiated == 0:
        return _INF
    if x < 0:
        return (1 + exponentiated * exponentiated) / 2 / exponentiated
    return (1 / exponentiated + exponentiated) / 2


def tanh(x: float) -> float:
    if x > 0:
        exponentiated = exp(2 * x)
        if math.isinf(exponentiated):
            return 1.0
        return (exponentiated - 1) / (exponentiated + 1)
    plus_x = exp(x)
    if plus_x == 0:
        return -1.0
    minus_x = 1 / plus_x
    if math.isinf(minus_x):
        return -1.0
    return (plus_x - minus_x) / (plus_x + minus_x)


def asinh(x: float) -> float:
    return log(x + sqrt(x * x + 1))


def acosh(x: float) -> float:
    return log(x + sqrt(x * x - 1))


def atanh(x: float) -> float:
    denominator = 1 - x
    if denominator == 0:
        return _INF
    return log((1 + x) / denominator) / 2.0


def _integer_power(x: float, n: int) -> float:
    if n <= 64:
        result = x
        for _ in range(n - 1):
            result *= x
        return result
    try:
        return x**n
    except OverflowError:
        return math.copysign(_INF, x if n % 2 else 1.0)


def pow(x: float, y: float) -> float:
    """x raised to y; integral exponents multiply, others go through exp2 and log2."""
    if math.isnan(y):
        return y
    if y == 0:
        return 1.0
    if x == 0:
        return 0.0
    if y == 1:
        return x
    if math.isfinite(y) and y == int(y):
        result = _integer_power(x, int(abs(y)))
        if y < 0:
            if result == 0:
                return math.copysign(_INF, result)
            result = 1.0 / result
        return result
    return exp2(y * log2(x))