"""Paper plane glide: point-mass glider integrator with a pygame side view."""

__version__ = "0.1.0"
