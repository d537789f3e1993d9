from __future__ import annotations

import math
import pathlib
import sys
from dataclasses import dataclass

ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from paperplane.aero import derive_coefficients
from paperplane.config import GliderParameters
from paperplane.trajectory import predict_trajectory, summarize


@dataclass
class GlideMetrics:
    alpha_deg: float
    cl: float
    cd: float
    landing_range_m: float | None
    landing_time_s: float | None
    glide_ratio: float | None
    max_height_m: float


def evaluate_glide(
    alpha_deg: float,
    duration_s: float = 5.0,
    dt: float = 0.001,
    params: GliderParameters | None = None,
) -> GlideMetrics:
    base = params if params is not None else GliderParameters()
    glider_params = base.with_changes(attack_angle_rad=math.radians(alpha_deg))
    coeffs = derive_coefficients(glider_params)

    points = predict_trajectory(glider_params, int(duration_s / dt), dt)
    summary = summarize(points)

    landing_time = None
    if summary.landing_range_m is not None:
        # First sample at or past the landing range; range only grows in forward flight.
        for i, (r, _) in enumerate(points):
            if r >= summary.landing_range_m:
                landing_time = i * dt
                break

    return GlideMetrics(
        alpha_deg=alpha_deg,
        cl=coeffs.cl,
        cd=coeffs.cd,
        landing_range_m=summary.landing_range_m,
        landing_time_s=landing_time,
        glide_ratio=summary.glide_ratio(base.init_height_m),
        max_height_m=summary.max_height_m,
    )


def sweep(alphas_deg: list[float], params: GliderParameters | None = None) -> list[GlideMetrics]:
    return [evaluate_glide(alpha, params=params) for alpha in alphas_deg]


if __name__ == "__main__":
    for metrics in sweep([2.0, 4.0, 6.0, 8.0, 9.3, 10.0, 12.0, 14.0]):
        print(metrics)
