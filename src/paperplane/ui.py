from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import importlib
import math
import pygame

from .dynamics import Glider
from .trajectory import Point


SKY = (150, 195, 240)
EARTH = (120, 150, 90)
WHITE = (240, 240, 240)
BLACK = (10, 10, 10)
YELLOW = (230, 220, 70)
TRACE = (200, 60, 60)


class _FontAdapter:
    def __init__(self, backend: str, font_obj) -> None:
        self.backend = backend
        self.font_obj = font_obj

    def render(self, text: str, antialias: bool, color: tuple[int, int, int]):
        if self.backend == "freetype":
            surface, _ = self.font_obj.render(text, fgcolor=color)
            return surface
        return self.font_obj.render(text, antialias, color)


@dataclass(frozen=True)
class SideView:
    """Maps (range, height) in meters to screen pixels; screen y grows downward."""

    width: int
    height: int
    pixels_per_meter: float = 220.0
    origin_x: int = 60
    ground_margin: int = 80

    @property
    def ground_y(self) -> int:
        return self.height - self.ground_margin

    def to_screen(self, point: Point, scroll_m: float = 0.0) -> tuple[float, float]:
        r, h = point
        return (
            self.origin_x + (r - scroll_m) * self.pixels_per_meter,
            self.ground_y - h * self.pixels_per_meter,
        )

    def scroll_for(self, range_m: float) -> float:
        # Keep the glider in the left two thirds of the view.
        visible_m = (self.width * 0.66 - self.origin_x) / self.pixels_per_meter
        return max(0.0, range_m - visible_m)


def _load_fonts() -> tuple[_FontAdapter | None, _FontAdapter | None]:
    for backend, module_name in (("freetype", "pygame.freetype"), ("font", "pygame.font")):
        try:
            font_mod = importlib.import_module(module_name)
            if hasattr(font_mod, "init"):
                font_mod.init()
            return (
                _FontAdapter(backend, font_mod.SysFont("Consolas", 20)),
                _FontAdapter(backend, font_mod.SysFont("Consolas", 16)),
            )
        except Exception:
            continue
    return None, None


class GliderDisplay:
    def __init__(self, width: int, height: int, pixels_per_meter: float = 220.0) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Paper Plane Glide")
        self.font, self.small_font = _load_fonts()
        self.font_available = self.font is not None
        self.width = width
        self.height = height
        self.view = SideView(width, height, pixels_per_meter)
        self.pixels_per_meter = pixels_per_meter
        self.ground_y = self.view.ground_y
        self.max_trace_samples = 360
        self.trace_v = deque(maxlen=self.max_trace_samples)
        self.trace_h = deque(maxlen=self.max_trace_samples)

    def to_screen(self, point: Point, scroll_m: float = 0.0) -> tuple[float, float]:
        return self.view.to_screen(point, scroll_m)

    def _draw_background(self, scroll_m: float) -> None:
        self.screen.fill(SKY)
        pygame.draw.rect(self.screen, EARTH, (0, self.ground_y, self.width, self.height - self.ground_y))
        pygame.draw.line(self.screen, WHITE, (0, self.ground_y), (self.width, self.ground_y), 2)

        # One tick per meter of range.
        first = int(math.floor(scroll_m))
        last = int(math.ceil(scroll_m + self.width / self.pixels_per_meter))
        for meter in range(first, last + 1):
            x, _ = self.to_screen((float(meter), 0.0), scroll_m)
            pygame.draw.line(self.screen, WHITE, (x, self.ground_y), (x, self.ground_y + 8), 1)
            if self.font_available and self.small_font is not None:
                label = self.small_font.render(f"{meter} m", True, WHITE)
                self.screen.blit(label, (x + 3, self.ground_y + 10))

    def _draw_trajectory(self, points: list[Point], scroll_m: float) -> None:
        if len(points) < 2:
            return
        screen_points = [self.to_screen(p, scroll_m) for p in points]
        pygame.draw.lines(self.screen, TRACE, False, screen_points, 2)

    def _draw_glider(self, glider: Glider, scroll_m: float) -> None:
        cx, cy = self.to_screen(glider.position(), scroll_m)
        # Screen y grows downward, so a climbing angle rotates the symbol counter-clockwise.
        angle = -math.radians(glider.orientation())
        c = math.cos(angle)
        s = math.sin(angle)
        length_px = max(12.0, glider.params.plane_length_m * self.pixels_per_meter)

        outline = [(0.5, 0.0), (-0.5, -0.12), (-0.35, 0.0), (-0.5, 0.12)]
        poly = [
            (cx + (px * c - py * s) * length_px, cy + (px * s + py * c) * length_px)
            for px, py in outline
        ]
        pygame.draw.polygon(self.screen, YELLOW, poly)
        pygame.draw.polygon(self.screen, BLACK, poly, 1)

    def _draw_trace_plot(
        self,
        rect: tuple[int, int, int, int],
        series: list[tuple[deque[float], tuple[int, int, int], float]],
        title: str,
        legend: list[str],
    ) -> None:
        x, y, w, h = rect
        pygame.draw.rect(self.screen, (15, 18, 20), rect, border_radius=6)
        pygame.draw.rect(self.screen, WHITE, rect, 1, border_radius=6)
        base_y = y + h - 10

        for data, color, y_limit in series:
            if len(data) < 2:
                continue
            step_x = (w - 12) / max(1, len(data) - 1)
            points = []
            for i, value in enumerate(data):
                frac = max(0.0, min(1.0, value / y_limit))
                points.append((x + 6 + i * step_x, base_y - frac * (h - 44)))
            pygame.draw.lines(self.screen, color, False, points, 2)

        if self.font_available and self.small_font is not None:
            self.screen.blit(self.small_font.render(title, True, WHITE), (x + 8, y + 6))
            for idx, ((_, color, _), label) in enumerate(zip(series, legend)):
                marker_y = y + 24 + idx * 14
                pygame.draw.line(self.screen, color, (x + 8, marker_y + 6), (x + 24, marker_y + 6), 3)
                self.screen.blit(self.small_font.render(label, True, (220, 220, 220)), (x + 30, marker_y))

    def _draw_hud(self, glider: Glider) -> None:
        s = glider.state
        c = glider.coeffs
        p = glider.params

        self.trace_v.append(s.v)
        self.trace_h.append(s.h)

        lines = [
            f"Airspeed : {s.v:6.3f} m/s",
            f"Path angle: {math.degrees(s.y):6.2f} deg",
            f"Height   : {s.h:6.3f} m",
            f"Range    : {s.r:6.3f} m",
            f"Time     : {s.t:6.3f} s",
            f"alpha {math.degrees(p.attack_angle_rad):4.1f} deg | AR {c.aspect_ratio:5.3f} | CL {c.cl:6.4f} | CD {c.cd:6.4f}",
            "Up/Down: attack angle   Left/Right: launch speed   R: reset   P: pause",
        ]

        if self.font_available and self.font is not None and self.small_font is not None:
            y = 12
            for i, txt in enumerate(lines):
                font = self.font if i < 5 else self.small_font
                self.screen.blit(font.render(txt, True, BLACK), (16, y))
                y += 26 if i < 5 else 20

        self._draw_trace_plot(
            (self.width - 260, 14, 240, 150),
            [
                (self.trace_v, (60, 200, 220), max(1.0, 2.0 * p.init_speed_m_s)),
                (self.trace_h, (120, 220, 120), max(1.0, 1.5 * p.init_height_m)),
            ],
            "Live history",
            ["Airspeed [m/s]", "Height [m]"],
        )

    def _draw_notice(self, notice: str) -> None:
        if not notice or not self.font_available or self.small_font is None:
            return

        text_surface = self.small_font.render(notice, True, WHITE)
        x = self.width // 2 - text_surface.get_width() // 2
        y = 54
        box = (x - 10, y - 4, text_surface.get_width() + 20, text_surface.get_height() + 8)
        pygame.draw.rect(self.screen, (25, 25, 30), box, border_radius=6)
        pygame.draw.rect(self.screen, WHITE, box, 1, border_radius=6)
        self.screen.blit(text_surface, (x, y))

    def render(self, glider: Glider, trace: list[Point], notice: str = "") -> None:
        scroll_m = self.view.scroll_for(glider.state.r)
        self._draw_background(scroll_m)
        self._draw_trajectory(trace, scroll_m)
        self._draw_glider(glider, scroll_m)
        self._draw_hud(glider)
        self._draw_notice(notice)
        pygame.display.flip()

    def close(self) -> None:
        pygame.quit()
