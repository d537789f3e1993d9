from __future__ import annotations

from dataclasses import dataclass
import math

from .config import GliderParameters


# Zero-lift drag of the flat paper wing and span efficiency of the induced drag term.
CD0 = 0.02
SPAN_EFFICIENCY = 0.9


@dataclass(frozen=True)
class AeroCoefficients:
    aspect_ratio: float
    lift_slope: float
    oswald_factor: float
    cl: float
    cd: float


def derive_coefficients(params: GliderParameters) -> AeroCoefficients:
    """Lift and drag coefficients of a low aspect ratio wing at a fixed attack angle.

    The lift slope follows the Helmbold correction for small aspect ratios and drag is
    a parabolic polar. Zero span or wing area is a caller error and is not guarded.
    """
    ar = params.wing_span_m * params.wing_span_m / params.wing_area_m2
    half_ar_sq = (ar / 2.0) * (ar / 2.0)
    lift_slope = (math.pi * ar) / (1.0 + math.sqrt(1.0 + half_ar_sq))
    cl = lift_slope * params.attack_angle_rad

    e = 1.0 / (math.pi * SPAN_EFFICIENCY * ar)
    cd = CD0 + e * cl * cl

    return AeroCoefficients(
        aspect_ratio=ar,
        lift_slope=lift_slope,
        oswald_factor=e,
        cl=cl,
        cd=cd,
    )
