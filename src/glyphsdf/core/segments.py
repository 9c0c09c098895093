"""Geometric queries on edge segments.

Each public function dispatches on the segment variant:
- bounding_box: Tight axis-aligned box including curve extrema
- evaluate: Position at parameter t
- scanline_crossings: X coordinates where the segment crosses a horizontal line
- closest_point: Nearest point on the segment to a query point

All functions are pure and stateless.
"""

from glyphsdf.core.roots import solve_cubic, solve_linear, solve_quadratic
from glyphsdf.domain import (
    DOUBLE_EPSILON,
    BoundingBox,
    CubicSegment,
    EdgeSegment,
    LinearSegment,
    Point,
    QuadraticSegment,
)

# Initial sampling steps for the closest point search, one per curve degree
# above linear.
QUADRATIC_SEARCH_STEPS = 1
CUBIC_SEARCH_STEPS = 2


def start_point(segment: EdgeSegment) -> Point:
    """First point of the segment."""
    return segment.start


def end_point(segment: EdgeSegment) -> Point:
    """Last point of the segment."""
    return segment.end


def evaluate(segment: EdgeSegment, t: float) -> Point:
    """Evaluate the segment at parameter t.

    Values outside [0, 1] extrapolate the underlying polynomial.

    Args:
        segment: Segment to evaluate
        t: Curve parameter

    Returns:
        Point on the segment
    """
    match segment:
        case LinearSegment(start=p0, end=p1):
            return p0.lerp(p1, t)
        case QuadraticSegment(start=p0, ctrl=p1, end=p2):
            mt = 1.0 - t
            return p0 * (mt * mt) + p1 * (2.0 * mt * t) + p2 * (t * t)
        case CubicSegment(start=p0, ctrl0=p1, ctrl1=p2, end=p3):
            mt = 1.0 - t
            return (
                p0 * (mt * mt * mt)
                + p1 * (3.0 * mt * mt * t)
                + p2 * (3.0 * mt * t * t)
                + p3 * (t * t * t)
            )
    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def bounding_box(segment: EdgeSegment, epsilon: float = DOUBLE_EPSILON) -> BoundingBox:
    """Compute the tight bounding box of a segment.

    Curves are bounded by their endpoints plus every interior point where
    the derivative of x or y vanishes for t in [0, 1].

    Args:
        segment: Segment to bound
        epsilon: Zero tolerance for the derivative root solve

    Returns:
        BoundingBox containing the whole segment
    """
    box = BoundingBox.from_point(segment.start).expand_to_point(segment.end)

    match segment:
        case LinearSegment():
            return box
        case QuadraticSegment(start=p0, ctrl=p1, end=p2):
            # B'(t) / 2 = (p1 - p0) + t * ((p2 - p1) - (p1 - p0))
            a = p1 - p0
            b = (p2 - p1) - a
            candidates = []
            for root in (solve_linear(b.x, a.x, epsilon), solve_linear(b.y, a.y, epsilon)):
                if root is not None:
                    candidates.append(root)
        case CubicSegment(start=p0, ctrl0=p1, ctrl1=p2, end=p3):
            # B'(t) / 3 = c t^2 + b t + a
            a = p1 - p0
            b = ((p2 - p1) - a) * 2.0
            c = p3 - p2 * 3.0 + p1 * 3.0 - p0
            candidates = solve_quadratic(c.x, b.x, a.x, epsilon)
            candidates += solve_quadratic(c.y, b.y, a.y, epsilon)
        case _:
            raise TypeError(f"Unsupported segment type: {type(segment).__name__}")

    for t in candidates:
        if 0.0 <= t <= 1.0:
            box = box.expand_to_point(evaluate(segment, t))
    return box


def _crossing_parameters(
    segment: EdgeSegment, y: float, epsilon: float
) -> list[float]:
    match segment:
        case QuadraticSegment(start=p0, ctrl=p1, end=p2):
            a = p1 - p0
            b = (p2 - p1) - a
            return solve_quadratic(b.y, 2.0 * a.y, p0.y - y, epsilon)
        case CubicSegment(start=p0, ctrl0=p1, ctrl1=p2, end=p3):
            a = p1 - p0
            b = (p2 - p1) - a
            d = p3 - p0 + (p1 - p2) * 3.0
            return solve_cubic(d.y, 3.0 * b.y, 3.0 * a.y, p0.y - y, epsilon)
    raise TypeError(f"Unsupported segment type: {type(segment).__name__}")


def scanline_crossings(
    segment: EdgeSegment, y: float, epsilon: float = DOUBLE_EPSILON
) -> list[float]:
    """Find the x coordinates where the segment crosses the line at height y.

    The parameter interval is half-open so a vertex shared by two consecutive
    segments counts once: the lower-y endpoint is included, the higher-y one
    excluded. A rising segment accepts t in [0, 1), a falling one t in
    (0, 1]. Horizontal lines never cross.

    Args:
        segment: Segment to intersect
        y: Height of the horizontal line
        epsilon: Zero tolerance for the root solve

    Returns:
        Unsorted list of crossing x coordinates
    """
    p0, p1 = segment.start, segment.end

    if isinstance(segment, LinearSegment):
        if not (p0.y <= y < p1.y or p1.y <= y < p0.y):
            return []
        t = solve_linear(p1.y - p0.y, p0.y - y, epsilon)
        return [] if t is None else [p0.x + (p1.x - p0.x) * t]

    falling = p1.y < p0.y
    crossings = []
    for t in _crossing_parameters(segment, y, epsilon):
        inside = 0.0 < t <= 1.0 if falling else 0.0 <= t < 1.0
        if inside:
            crossings.append(evaluate(segment, t).x)
    return crossings


def _search_closest_parameter(
    segment: EdgeSegment, point: Point, steps: int, epsilon: float
) -> float:
    """Bracket search for the curve parameter nearest to point.

    Samples the curve at ``i / steps`` to seed the search, then probes one
    step to either side and halves the step until it drops below epsilon.
    The result may leave [0, 1].
    """
    best_t = 0.0
    best_distance = float("inf")
    for i in range(steps + 1):
        t = i / steps
        distance = evaluate(segment, t).distance_to(point)
        if distance < best_distance:
            best_t = t
            best_distance = distance

    step = 1.0 / (2 * steps)
    while step > epsilon:
        for t in (best_t - step, best_t + step):
            distance = evaluate(segment, t).distance_to(point)
            if distance < best_distance:
                best_t = t
                best_distance = distance
                break
        step /= 2.0
    return best_t


def closest_point(
    segment: EdgeSegment, point: Point, epsilon: float
) -> tuple[float, Point]:
    """Find the point on the segment nearest to point.

    Lines are projected exactly. Curves use an iterative bracket search that
    stops once the bracket is narrower than epsilon; a parameter outside
    [0, 1] snaps to the matching endpoint, curves are never extrapolated.

    Args:
        segment: Segment to search
        point: Query point
        epsilon: Parameter resolution of the curve search (must be > 0)

    Returns:
        Tuple of (distance, closest point)
    """
    match segment:
        case LinearSegment(start=p0, end=p1):
            direction = p1 - p0
            length_squared = direction.dot(direction)
            if length_squared == 0.0:
                nearest = p0
            else:
                t = max(0.0, min(1.0, (point - p0).dot(direction) / length_squared))
                nearest = p0.lerp(p1, t)
            return nearest.distance_to(point), nearest
        case QuadraticSegment():
            t = _search_closest_parameter(segment, point, QUADRATIC_SEARCH_STEPS, epsilon)
        case CubicSegment():
            t = _search_closest_parameter(segment, point, CUBIC_SEARCH_STEPS, epsilon)
        case _:
            raise TypeError(f"Unsupported segment type: {type(segment).__name__}")

    if t < 0.0:
        nearest = segment.start
    elif t > 1.0:
        nearest = segment.end
    else:
        nearest = evaluate(segment, t)
    return nearest.distance_to(point), nearest
