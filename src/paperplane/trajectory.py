from __future__ import annotations

from dataclasses import dataclass

from .config import GliderParameters
from .dynamics import Glider


Point = tuple[float, float]


def predict_trajectory(
    source: Glider | GliderParameters,
    steps: int = 500,
    step_size: float = 0.001,
) -> list[Point]:
    """Fly a throwaway copy of ``source`` from its initial conditions.

    Returns the starting position followed by the position after every step. The
    source glider is only read; its live state is left as it was.
    """
    tracer = Glider()
    tracer.prepare(source)

    points = [tracer.position()]
    for _ in range(steps):
        tracer.step(step_size)
        points.append(tracer.position())
    return points


def trajectory_segments(points: list[Point]) -> list[tuple[Point, Point]]:
    return list(zip(points, points[1:]))


@dataclass
class GlideSummary:
    final_range_m: float
    final_height_m: float
    max_height_m: float
    min_height_m: float
    landing_range_m: float | None

    def glide_ratio(self, start_height_m: float) -> float | None:
        if self.landing_range_m is None or start_height_m <= 0.0:
            return None
        return self.landing_range_m / start_height_m


def summarize(points: list[Point]) -> GlideSummary:
    if not points:
        raise ValueError("cannot summarize an empty trajectory")

    heights = [h for _, h in points]
    # Landing is the first descent from above the ground to or below it, so a launch
    # from h == 0 only lands after it has been airborne.
    landing_range = None
    for (r0, h0), (r1, h1) in trajectory_segments(points):
        if h0 > 0.0 and h1 <= 0.0:
            # Linear interpolation to the ground crossing.
            frac = h0 / (h0 - h1)
            landing_range = r0 + frac * (r1 - r0)
            break

    final_r, final_h = points[-1]
    return GlideSummary(
        final_range_m=final_r,
        final_height_m=final_h,
        max_height_m=max(heights),
        min_height_m=min(heights),
        landing_range_m=landing_range,
    )
