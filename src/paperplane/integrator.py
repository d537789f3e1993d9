from __future__ import annotations

from typing import Callable


# f(y, x) -> dy/dx
Derivative = Callable[[float, float], float]


def midpoint_step(func: Derivative, yn: float, xn: float, h: float) -> float:
    """Explicit midpoint (RK2) step: k1 only locates the midpoint, the update uses k2."""
    k1 = h * func(yn, xn)
    k2 = h * func(yn + 0.5 * k1, xn + 0.5 * h)
    return yn + k2
