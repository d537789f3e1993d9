from __future__ import annotations

from dataclasses import dataclass, fields, replace
import math


class ConfigurationError(ValueError):
    """Raised by hosts when glider parameters are physically meaningless."""


@dataclass(frozen=True)
class GliderParameters:
    mass_kg: float = 0.003
    wing_span_m: float = 0.12
    wing_area_m2: float = 0.017
    plane_length_m: float = 0.28

    gravity_m_s2: float = 9.807
    rho_kg_m3: float = 1.225

    attack_angle_rad: float = math.radians(9.3)

    # Initial conditions. The flight path angle is given in degrees and converted on reset.
    init_speed_m_s: float = 3.7
    init_flight_path_deg: float = 0.0
    init_height_m: float = 2.0

    def copy(self) -> GliderParameters:
        return replace(self)

    def with_changes(self, **changes: float) -> GliderParameters:
        return replace(self, **changes)

    def validate(self) -> GliderParameters:
        positive = ("mass_kg", "wing_span_m", "wing_area_m2", "init_speed_m_s")
        for name in positive:
            value = getattr(self, name)
            if not value > 0.0:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        for f in fields(self):
            value = getattr(self, f.name)
            if not math.isfinite(value):
                raise ConfigurationError(f"{f.name} must be finite, got {value}")
        return self


@dataclass(frozen=True)
class SimConfig:
    # Predictive trace, drawn every frame from the live configuration.
    steps: int = 500
    step_size_s: float = 0.001

    dt_s: float = 1.0 / 60.0
    substeps: int = 10

    screen_w: int = 1200
    screen_h: int = 720
    fps: int = 60
    pixels_per_meter: float = 220.0
