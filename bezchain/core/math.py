from typing import Sequence

Point = tuple[float, float]


def evaluate(coordinates: Sequence[float], t: float) -> float:
    """
    Blend one coordinate axis of a control polygon at parameter t by recursive
    linear interpolation:

        B(c0..cn, t) = (1 - t) * B(c0..cn-1, t) + t * B(c1..cn, t)

    A single coordinate evaluates to itself, so single-point and linear groups
    go through the same call.
    """
    n = len(coordinates)
    if n == 0:
        raise ValueError("cannot evaluate an empty control polygon")
    if n == 1:
        return coordinates[0]
    return (1.0 - t) * evaluate(coordinates[:-1], t) + t * evaluate(coordinates[1:], t)


def parameter_values(resolution: int) -> list[float]:
    """
    Return resolution + 1 evenly spaced parameters covering [0, 1] inclusive.
    """
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")
    return [i / resolution for i in range(resolution + 1)]


def sample_group(points: Sequence[Point], resolution: int) -> list[Point]:
    """
    Sample the Bézier segment defined by `points` at resolution + 1 parameters.
    The first and last samples reproduce the first and last control points.
    """
    if not points:
        raise ValueError("cannot sample an empty control polygon")
    xs = [float(p[0]) for p in points]
    ys = [float(p[1]) for p in points]
    return [(evaluate(xs, t), evaluate(ys, t)) for t in parameter_values(resolution)]


def within_tolerance(a: Point, b: Point, tolerance: float) -> bool:
    # box test, both axes
    return abs(a[0] - b[0]) <= tolerance and abs(a[1] - b[1]) <= tolerance
