import dataclasses
import math

import pytest

from paperplane.config import ConfigurationError, GliderParameters, SimConfig


def test_defaults_describe_reference_paper_plane():
    params = GliderParameters()
    assert params.mass_kg == 0.003
    assert params.wing_span_m == 0.12
    assert params.wing_area_m2 == 0.017
    assert params.gravity_m_s2 == 9.807
    assert params.rho_kg_m3 == 1.225
    assert math.isclose(params.attack_angle_rad, math.radians(9.3))
    assert params.init_speed_m_s == 3.7
    assert params.init_flight_path_deg == 0.0
    assert params.init_height_m == 2.0


def test_parameters_are_frozen():
    params = GliderParameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.mass_kg = 1.0


def test_copy_is_equal_value_not_alias():
    params = GliderParameters(mass_kg=0.004)
    clone = params.copy()
    assert clone == params
    assert clone is not params


def test_with_changes_only_touches_named_fields():
    params = GliderParameters()
    changed = params.with_changes(init_height_m=5.0)
    assert changed.init_height_m == 5.0
    assert changed.mass_kg == params.mass_kg
    assert params.init_height_m == 2.0


@pytest.mark.parametrize(
    "changes",
    [
        {"mass_kg": 0.0},
        {"wing_span_m": -0.1},
        {"wing_area_m2": 0.0},
        {"init_speed_m_s": 0.0},
        {"init_height_m": float("nan")},
        {"gravity_m_s2": float("inf")},
    ],
)
def test_validate_rejects_degenerate_configuration(changes):
    with pytest.raises(ConfigurationError):
        GliderParameters(**changes).validate()


def test_validate_returns_params_unchanged():
    params = GliderParameters()
    assert params.validate() is params


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)


def test_sim_config_defaults():
    cfg = SimConfig()
    assert cfg.steps == 500
    assert cfg.step_size_s == 0.001
    assert cfg.substeps >= 1
