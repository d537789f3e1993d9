import dataclasses
import math

import pygame

from paperplane.config import SimConfig
from paperplane.sim import GliderViewerApp


class _DummyDisplay:
    def __init__(self, *_args, **_kwargs):
        pass

    def render(self, *_args, **_kwargs):
        pass

    def close(self):
        pass


def _make_app(monkeypatch) -> GliderViewerApp:
    monkeypatch.setattr("paperplane.sim.GliderDisplay", _DummyDisplay)
    return GliderViewerApp(cfg=SimConfig(steps=50))


def _press(monkeypatch, *keys: int) -> None:
    monkeypatch.setattr(
        "pygame.event.get",
        lambda: [pygame.event.Event(pygame.KEYDOWN, key=key) for key in keys],
    )


def test_app_starts_with_prepared_glider_and_trace(monkeypatch):
    app = _make_app(monkeypatch)
    assert app.glider.state.t == 0.0
    assert len(app.trace) == 51


def test_update_advances_one_frame(monkeypatch):
    app = _make_app(monkeypatch)
    app.update()
    assert math.isclose(app.glider.state.t, app.cfg.dt_s, rel_tol=1e-9)


def test_up_key_raises_attack_angle_and_retraces(monkeypatch):
    app = _make_app(monkeypatch)
    start_alpha = app.glider.params.attack_angle_rad
    start_trace = list(app.trace)
    app.update()

    _press(monkeypatch, pygame.K_UP)
    assert app._process_input() is True

    assert math.isclose(app.glider.params.attack_angle_rad, start_alpha + math.radians(0.5))
    assert app.glider.state.t == 0.0
    assert app.trace != start_trace
    assert "Attack angle" in app.notice_text


def test_right_key_raises_launch_speed(monkeypatch):
    app = _make_app(monkeypatch)
    start_speed = app.glider.params.init_speed_m_s

    _press(monkeypatch, pygame.K_RIGHT)
    app._process_input()

    assert app.glider.params.init_speed_m_s > start_speed
    assert app.glider.state.v == app.glider.params.init_speed_m_s


def test_reset_key_relaunches(monkeypatch):
    app = _make_app(monkeypatch)
    for _ in range(5):
        app.update()

    _press(monkeypatch, pygame.K_r)
    app._process_input()

    assert app.glider.state.t == 0.0
    assert app.glider.position() == (0.0, app.glider.params.init_height_m)


def test_pause_stops_integration(monkeypatch):
    app = _make_app(monkeypatch)
    _press(monkeypatch, pygame.K_p)
    app._process_input()
    app.update()
    assert app.paused is True
    assert app.glider.state.t == 0.0


def test_escape_quits(monkeypatch):
    app = _make_app(monkeypatch)
    _press(monkeypatch, pygame.K_ESCAPE)
    assert app._process_input() is False


def test_landing_freezes_live_glider(monkeypatch):
    app = _make_app(monkeypatch)
    app.glider.state = dataclasses.replace(app.glider.state, h=-0.5)

    app.update()
    assert app.landed is True
    t_landed = app.glider.state.t

    app.update()
    assert app.glider.state.t == t_landed
