"""Closed-form real root solvers for polynomials up to degree three.

Every solver returns the real roots as a small unordered list (0 to 3
entries). The scalar's machine epsilon is the only tolerance: it decides when
a leading coefficient counts as zero and which side of zero a discriminant
lies on. Getting those branches wrong corrupts scanline crossing counts, so
the thresholds follow one rule throughout.

Coefficients are passed highest degree first, e.g. ``solve_quadratic(c, b, a)``
solves ``c*x^2 + b*x + a = 0``.
"""

import math

from glyphsdf.domain.scalar import DOUBLE_EPSILON

TWO_THIRDS_PI = 2.0 * math.pi / 3.0


def _cbrt(value: float) -> float:
    """Real cube root, defined for negative input."""
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def solve_linear(b: float, a: float, epsilon: float = DOUBLE_EPSILON) -> float | None:
    """Solve ``b*x + a = 0``.

    Args:
        b: Linear coefficient
        a: Constant term
        epsilon: Zero tolerance

    Returns:
        The root, 0.0 when every x is a solution, or None when none is.
    """
    if abs(b) > epsilon:
        return -a / b
    if abs(a) <= epsilon:
        return 0.0
    return None


def solve_quadratic(
    c: float, b: float, a: float, epsilon: float = DOUBLE_EPSILON
) -> list[float]:
    """Solve ``c*x^2 + b*x + a = 0``.

    Falls back to the linear solver when c is within epsilon of zero.

    Args:
        c: Quadratic coefficient
        b: Linear coefficient
        a: Constant term
        epsilon: Zero tolerance

    Returns:
        List of 0, 1 or 2 real roots
    """
    if abs(c) < epsilon:
        root = solve_linear(b, a, epsilon)
        return [] if root is None else [root]

    discriminant = b * b - 4.0 * c * a
    two_c = 2.0 * c
    if discriminant > epsilon:
        sq = math.sqrt(discriminant)
        return [(-b + sq) / two_c, (-b - sq) / two_c]
    if discriminant >= -epsilon:
        return [-b / two_c]
    return []


def solve_cubic_depressed(b: float, a: float, epsilon: float = DOUBLE_EPSILON) -> list[float]:
    """Solve the depressed cubic ``x^3 + b*x + a = 0``.

    A negative discriminant means three distinct real roots; they are found
    with the trigonometric method so no complex intermediate is needed.
    Otherwise Cardano's formula gives the single real root, plus the double
    root when the discriminant vanishes.

    Args:
        b: Linear coefficient
        a: Constant term
        epsilon: Zero tolerance

    Returns:
        List of 1 to 3 real roots
    """
    if abs(b) < epsilon:
        return [-_cbrt(a)]
    if abs(a) < epsilon:
        roots = solve_quadratic(1.0, 0.0, b, epsilon)
        roots.append(0.0)
        return roots

    discriminant = a * a / 4.0 + b * b * b / 27.0
    if discriminant < 0.0:
        sq = math.sqrt(-4.0 * b / 3.0)
        phi = _clamped_acos(-4.0 * a / (sq * sq * sq)) / 3.0
        return [
            sq * math.cos(phi),
            sq * math.cos(phi + TWO_THIRDS_PI),
            sq * math.cos(phi - TWO_THIRDS_PI),
        ]

    sq = math.sqrt(discriminant)
    half_a = a / 2.0
    u = _cbrt(sq - half_a)
    v = _cbrt(sq + half_a)
    x1 = u - v
    roots = [x1]
    # u == -v only when the discriminant is zero: x1 = 2u and -u is a double root
    if abs(u + v) < epsilon and abs(x1) > epsilon:
        roots.append(-x1 / 2.0)
    return roots


def solve_cubic_normalized(
    c: float, b: float, a: float, epsilon: float = DOUBLE_EPSILON
) -> list[float]:
    """Solve the monic cubic ``x^3 + c*x^2 + b*x + a = 0``.

    Uses the resolvent substitution ``x = y - c/3`` with
    ``q = (3b - c^2) / 9`` and ``r = (9cb - 27a - 2c^3) / 54``.

    Args:
        c: Quadratic coefficient
        b: Linear coefficient
        a: Constant term
        epsilon: Zero tolerance

    Returns:
        List of 1 to 3 real roots
    """
    if abs(c) < epsilon:
        return solve_cubic_depressed(b, a, epsilon)

    c_squared = c * c
    q = (3.0 * b - c_squared) / 9.0
    r = (9.0 * c * b - 27.0 * a - 2.0 * c_squared * c) / 54.0
    q3 = q * q * q
    discriminant = q3 + r * r
    c_thirds = c / 3.0

    if discriminant < -epsilon:
        # discriminant < 0 implies q < 0
        phi = _clamped_acos(r / math.sqrt(-q3)) / 3.0
        sqrt_q_2 = 2.0 * math.sqrt(-q)
        return [
            sqrt_q_2 * math.cos(phi) - c_thirds,
            sqrt_q_2 * math.cos(phi - TWO_THIRDS_PI) - c_thirds,
            sqrt_q_2 * math.cos(phi + TWO_THIRDS_PI) - c_thirds,
        ]

    sq = math.sqrt(max(discriminant, 0.0))
    s = _cbrt(r + sq)
    t = _cbrt(r - sq)
    roots = [s + t - c_thirds]
    if abs(s - t) < epsilon and abs(s + t) > epsilon:
        roots.append(-(s + t) / 2.0 - c_thirds)
    return roots


def solve_cubic(
    d: float, c: float, b: float, a: float, epsilon: float = DOUBLE_EPSILON
) -> list[float]:
    """Solve ``d*x^3 + c*x^2 + b*x + a = 0``.

    Degrades to the quadratic solver when d is within epsilon of zero,
    otherwise divides through by d.

    Args:
        d: Cubic coefficient
        c: Quadratic coefficient
        b: Linear coefficient
        a: Constant term
        epsilon: Zero tolerance

    Returns:
        List of 0 to 3 real roots
    """
    if abs(d) < epsilon:
        return solve_quadratic(c, b, a, epsilon)
    return solve_cubic_normalized(c / d, b / d, a / d, epsilon)
