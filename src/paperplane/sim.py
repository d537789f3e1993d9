from __future__ import annotations

import logging
import math
import pygame

from .config import GliderParameters, SimConfig
from .dynamics import Glider
from .trajectory import predict_trajectory
from .ui import GliderDisplay


logger = logging.getLogger(__name__)

ALPHA_STEP_RAD = math.radians(0.5)
ALPHA_LIMITS_RAD = (math.radians(-15.0), math.radians(25.0))
SPEED_STEP_M_S = 0.1
SPEED_LIMITS_M_S = (0.5, 15.0)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


class GliderViewerApp:
    def __init__(self, params: GliderParameters | None = None, cfg: SimConfig | None = None) -> None:
        self.cfg = cfg if cfg is not None else SimConfig()
        self.glider = Glider(params.validate() if params is not None else None)
        self.glider.prepare()
        self.display = GliderDisplay(self.cfg.screen_w, self.cfg.screen_h, self.cfg.pixels_per_meter)
        self.trace = predict_trajectory(self.glider, self.cfg.steps, self.cfg.step_size_s)
        self.paused = False
        self.landed = False
        self.notice_text = ""
        self.notice_time_s = 0.0

    def _set_notice(self, text: str, duration_s: float = 1.2) -> None:
        self.notice_text = text
        self.notice_time_s = duration_s

    def reset(self) -> None:
        self.glider.prepare()
        self.trace = predict_trajectory(self.glider, self.cfg.steps, self.cfg.step_size_s)
        self.landed = False

    def _reconfigure(self, **changes: float) -> None:
        self.glider.configure(**changes)
        self.trace = predict_trajectory(self.glider, self.cfg.steps, self.cfg.step_size_s)
        self.landed = False

    def _process_input(self) -> bool:
        params = self.glider.params
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return False

            if event.key == pygame.K_r:
                self.reset()
                self._set_notice("Reset to launch")

            if event.key == pygame.K_p:
                self.paused = not self.paused
                self._set_notice("Paused" if self.paused else "Running")

            if event.key in (pygame.K_UP, pygame.K_DOWN):
                delta = ALPHA_STEP_RAD if event.key == pygame.K_UP else -ALPHA_STEP_RAD
                alpha = clamp(params.attack_angle_rad + delta, *ALPHA_LIMITS_RAD)
                self._reconfigure(attack_angle_rad=alpha)
                self._set_notice(f"Attack angle: {math.degrees(alpha):4.1f} deg")

            if event.key in (pygame.K_LEFT, pygame.K_RIGHT):
                delta = SPEED_STEP_M_S if event.key == pygame.K_RIGHT else -SPEED_STEP_M_S
                speed = clamp(params.init_speed_m_s + delta, *SPEED_LIMITS_M_S)
                self._reconfigure(init_speed_m_s=speed)
                self._set_notice(f"Launch speed: {speed:4.1f} m/s")
        return True

    def update(self) -> None:
        if self.paused or self.landed:
            return
        self.glider.advance(self.cfg.dt_s, self.cfg.substeps)
        if self.glider.state.h <= 0.0:
            self.landed = True
            logger.info("glider reached the ground at r=%.3f m, t=%.3f s", self.glider.state.r, self.glider.state.t)
            self._set_notice("Landed - press R to relaunch", 2.4)

    def run(self) -> None:
        running = True
        clock = pygame.time.Clock()

        while running:
            running = self._process_input()
            self.update()

            if self.notice_time_s > 0.0:
                self.notice_time_s = max(0.0, self.notice_time_s - self.cfg.dt_s)
            notice = self.notice_text if self.notice_time_s > 0.0 else ""

            self.display.render(self.glider, self.trace, notice)
            clock.tick(self.cfg.fps)

        self.display.close()
