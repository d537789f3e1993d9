import math

from paperplane.aero import AeroCoefficients, derive_coefficients
from paperplane.config import GliderParameters


def test_aspect_ratio_of_reference_wing():
    coeffs = derive_coefficients(GliderParameters(wing_span_m=0.12, wing_area_m2=0.017))
    assert abs(coeffs.aspect_ratio - 0.8471) < 1e-4


def test_coefficients_match_closed_form():
    params = GliderParameters(attack_angle_rad=0.16232)
    coeffs = derive_coefficients(params)

    ar = 0.12 * 0.12 / 0.017
    clx = (math.pi * ar) / (1.0 + math.sqrt(1.0 + (ar / 2.0) ** 2))
    cl = clx * 0.16232
    e = 1.0 / (math.pi * 0.9 * ar)

    assert math.isclose(coeffs.lift_slope, clx, rel_tol=1e-12)
    assert math.isclose(coeffs.cl, cl, rel_tol=1e-12)
    assert math.isclose(coeffs.oswald_factor, e, rel_tol=1e-12)
    assert math.isclose(coeffs.cd, 0.02 + e * cl * cl, rel_tol=1e-12)


def test_zero_attack_angle_gives_zero_lift_and_profile_drag():
    coeffs = derive_coefficients(GliderParameters(attack_angle_rad=0.0))
    assert coeffs.cl == 0.0
    assert coeffs.cd == 0.02


def test_derivation_is_deterministic():
    params = GliderParameters()
    assert derive_coefficients(params) == derive_coefficients(params)
    assert isinstance(derive_coefficients(params), AeroCoefficients)


def test_larger_wing_area_lowers_aspect_ratio_and_lift_slope():
    small = derive_coefficients(GliderParameters(wing_area_m2=0.017))
    large = derive_coefficients(GliderParameters(wing_area_m2=0.030))
    assert large.aspect_ratio < small.aspect_ratio
    assert large.lift_slope < small.lift_slope
