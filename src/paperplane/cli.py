"""
Paper plane glide - command line entry point.

``trace`` flies the predictive trajectory headless and prints it; ``view`` opens
the pygame side view.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys

from .config import ConfigurationError, GliderParameters, SimConfig
from .dynamics import Glider
from .trajectory import predict_trajectory, summarize


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _add_parameter_options(parser: argparse.ArgumentParser) -> None:
    defaults = GliderParameters()
    sim_defaults = SimConfig()
    group = parser.add_argument_group("glider parameters")
    group.add_argument("--mass", type=float, default=defaults.mass_kg, help="Mass (kg)")
    group.add_argument("--span", type=float, default=defaults.wing_span_m, help="Wing span (m)")
    group.add_argument("--area", type=float, default=defaults.wing_area_m2, help="Wing area (m^2)")
    group.add_argument("--gravity", type=float, default=defaults.gravity_m_s2, help="Gravity (m/s^2)")
    group.add_argument("--rho", type=float, default=defaults.rho_kg_m3, help="Air density (kg/m^3)")
    group.add_argument(
        "--alpha-deg",
        type=float,
        default=math.degrees(defaults.attack_angle_rad),
        help="Attack angle (deg)",
    )
    group.add_argument("--speed", type=float, default=defaults.init_speed_m_s, help="Launch airspeed (m/s)")
    group.add_argument("--gamma-deg", type=float, default=defaults.init_flight_path_deg, help="Launch flight path angle (deg)")
    group.add_argument("--height", type=float, default=defaults.init_height_m, help="Launch height (m)")

    group = parser.add_argument_group("integration")
    group.add_argument("--steps", type=int, default=sim_defaults.steps, help="Number of integration steps")
    group.add_argument("--step-size", type=float, default=sim_defaults.step_size_s, help="Step size (s)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paperplane",
        description="Paper plane glide simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log debug output")

    sub = parser.add_subparsers(dest="command")

    trace = sub.add_parser(
        "trace",
        help="Print the glide trajectory",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_parameter_options(trace)
    trace.add_argument("--every", type=int, default=50, help="Print one row every N steps")

    view = sub.add_parser(
        "view",
        help="Open the interactive side view",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _add_parameter_options(view)
    view.add_argument("--substeps", type=int, default=SimConfig().substeps, help="Integration steps per frame")
    return parser


def parameters_from_args(args: argparse.Namespace) -> GliderParameters:
    return GliderParameters(
        mass_kg=args.mass,
        wing_span_m=args.span,
        wing_area_m2=args.area,
        gravity_m_s2=args.gravity,
        rho_kg_m3=args.rho,
        attack_angle_rad=math.radians(args.alpha_deg),
        init_speed_m_s=args.speed,
        init_flight_path_deg=args.gamma_deg,
        init_height_m=args.height,
    ).validate()


def run_trace(params: GliderParameters, steps: int, step_size: float, every: int) -> int:
    glider = Glider(params)
    coeffs, _ = glider.prepare()
    logger.info("Tracing %d steps of %.4g s", steps, step_size)

    points = predict_trajectory(glider, steps, step_size)

    print(f"AR={coeffs.aspect_ratio:.4f} CLx={coeffs.lift_slope:.4f} CL={coeffs.cl:.5f} CD={coeffs.cd:.5f}")
    print(f"{'step':>6} {'t [s]':>9} {'range [m]':>11} {'height [m]':>11}")
    stride = max(1, every)
    for i, (r, h) in enumerate(points):
        if i % stride == 0 or i == len(points) - 1:
            print(f"{i:6d} {i * step_size:9.4f} {r:11.5f} {h:11.5f}")

    summary = summarize(points)
    print("=" * 40)
    print(f"Final range : {summary.final_range_m:.5f} m")
    print(f"Final height: {summary.final_height_m:.5f} m")
    print(f"Max height  : {summary.max_height_m:.5f} m")
    ratio = summary.glide_ratio(params.init_height_m)
    if summary.landing_range_m is not None and ratio is not None:
        print(f"Landing at  : {summary.landing_range_m:.5f} m (glide ratio {ratio:.2f})")
    elif summary.landing_range_m is not None:
        print(f"Landing at  : {summary.landing_range_m:.5f} m")
    else:
        print("Landing at  : not reached")
    return 0


def run_view(params: GliderParameters, steps: int, step_size: float, substeps: int) -> int:
    try:
        from .sim import GliderViewerApp
    except ModuleNotFoundError as exc:
        if exc.name == "pygame":
            print("Missing dependency: pygame")
            print("Install dependencies first:")
            print("  pip install -e .")
            return 1
        raise

    cfg = SimConfig(steps=steps, step_size_s=step_size, substeps=max(1, substeps))
    app = GliderViewerApp(params, cfg)
    app.run()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    elif args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if args.command is None:
        parser.print_help()
        return 2

    try:
        params = parameters_from_args(args)
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    if args.command == "trace":
        return run_trace(params, args.steps, args.step_size, args.every)
    return run_view(params, args.steps, args.step_size, args.substeps)


if __name__ == "__main__":
    sys.exit(main())
