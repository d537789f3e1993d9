from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math

from .aero import AeroCoefficients, derive_coefficients
from .config import GliderParameters
from .integrator import midpoint_step


logger = logging.getLogger(__name__)


@dataclass
class GliderState:
    v: float = 0.0  # airspeed (m/s)
    y: float = 0.0  # flight path angle (rad), positive climbing
    h: float = 0.0  # height (m)
    r: float = 0.0  # range (m)
    t: float = 0.0  # elapsed time (s)

    def copy(self) -> GliderState:
        return replace(self)

    def as_vector(self) -> list[float]:
        return [self.v, self.y, self.h, self.r, self.t]


def initial_state(params: GliderParameters) -> GliderState:
    return GliderState(
        v=params.init_speed_m_s,
        y=math.radians(params.init_flight_path_deg),
        h=params.init_height_m,
        r=0.0,
        t=0.0,
    )


class Glider:
    """Point-mass glider in the vertical plane over a flat earth.

    The instance owns its parameters, the coefficients derived from them and the
    dynamic state. ``prepare`` must run before ``step``; neither is reentrant.
    """

    def __init__(self, params: GliderParameters | None = None) -> None:
        self.params = params if params is not None else GliderParameters()
        self.coeffs = derive_coefficients(self.params)
        self.state = initial_state(self.params)

    def prepare(self, source: Glider | GliderParameters | None = None) -> tuple[AeroCoefficients, GliderState]:
        if source is not None:
            src_params = source.params if isinstance(source, Glider) else source
            self.params = src_params.copy()

        self.coeffs = derive_coefficients(self.params)
        self.state = initial_state(self.params)
        logger.debug(
            "prepared glider: ar=%.4f CL=%.5f CD=%.5f v0=%.3f h0=%.3f",
            self.coeffs.aspect_ratio,
            self.coeffs.cl,
            self.coeffs.cd,
            self.state.v,
            self.state.h,
        )
        return self.coeffs, self.state

    def configure(self, **changes: float) -> tuple[AeroCoefficients, GliderState]:
        self.params = self.params.with_changes(**changes)
        return self.prepare()

    # Each rate reads the other variables from the state as it stood at the start of
    # the step; only dv_dt and dy_dt see their own midpoint argument.
    def dr_dt(self, r: float, t: float) -> float:
        return self.state.v * math.cos(self.state.y)

    def dh_dt(self, h: float, t: float) -> float:
        return self.state.v * math.sin(self.state.y)

    def dv_dt(self, v: float, t: float) -> float:
        p = self.params
        return -self.coeffs.cd * (0.5 * p.rho_kg_m3 * v * v) * p.wing_area_m2 / p.mass_kg - p.gravity_m_s2 * math.sin(self.state.y)

    def dy_dt(self, y: float, t: float) -> float:
        p = self.params
        v = self.state.v
        return (self.coeffs.cl * (0.5 * p.rho_kg_m3 * v * v) * p.wing_area_m2 / p.mass_kg - p.gravity_m_s2 * math.cos(y)) / v

    def step(self, dt: float) -> GliderState:
        s = self.state

        nv = midpoint_step(self.dv_dt, s.v, s.t, dt)
        ny = midpoint_step(self.dy_dt, s.y, s.t, dt)
        nh = midpoint_step(self.dh_dt, s.h, s.t, dt)
        nr = midpoint_step(self.dr_dt, s.r, s.t, dt)

        self.state = GliderState(v=nv, y=ny, h=nh, r=nr, t=s.t + dt)
        return self.state

    def advance(self, frame_dt: float, substeps: int) -> GliderState:
        dt = frame_dt / substeps
        for _ in range(substeps):
            self.step(dt)
        return self.state

    def position(self) -> tuple[float, float]:
        return self.state.r, self.state.h

    def orientation(self) -> float:
        """Pitch of the symbol about the out-of-plane axis, degrees."""
        return math.degrees(self.state.y)
