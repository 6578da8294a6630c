#!/usr/bin/env python3
"""
Did the basketball go into the basket?
======================================
Command-line program: simulates the throw described by the configuration,
prints the input data, the sampled trajectory and a text plot, and writes an
animated SVG of the path.

Every value has a default (see basketball.config.SimulationConfig); a JSON
file and the flags below can override them.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from basketball.config import SimulationConfig
from basketball.export import save_plot_png, write_csv
from basketball.report import banner, format_initial_data, format_trajectory
from basketball.svg_plot import plot_trajectory_svg
from basketball.trajectory_simulator import (
    ANGLE_UNITS, PhysicsEngine, Trajectory, TrajectorySimulator
)
from basketball.utils.logging import get_logger, set_log_level

logger = get_logger("basketball_app")

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Basketball trajectory simulator")
    parser.add_argument("--config", type=str, default=None, help="JSON file overriding the default parameters")
    parser.add_argument("--velocity", type=float, default=None, help="Launch speed in m/s")
    parser.add_argument("--angle", type=float, default=None, help="Launch angle from horizontal")
    parser.add_argument("--angle-unit", choices=ANGLE_UNITS, default=None,
                        help="Unit of --angle (radians reproduces the historical numbers)")
    parser.add_argument("--svg", type=str, default=None, help="Output SVG file name")
    parser.add_argument("--out-dir", type=str, default=None, help="Directory for the SVG file")
    parser.add_argument("--csv", type=str, default=None, help="Also export the samples to this CSV file")
    parser.add_argument("--png", type=str, default=None, help="Also save a PNG plot to this file")
    parser.add_argument("--no-grid", action="store_true", help="Do not print the text plot")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING or ERROR")
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    config = SimulationConfig.from_json(args.config) if args.config else SimulationConfig()
    return config.with_overrides(
        velocity=args.velocity,
        angle=args.angle,
        angle_unit=args.angle_unit,
        svg_filename=args.svg,
        svg_dir=args.out_dir,
    )


def run_simulation(config: SimulationConfig) -> Trajectory:
    simulator = TrajectorySimulator(PhysicsEngine(config.environment()))
    return simulator.simulate(config.launch_parameters(), config.target(), config.window())


def write_outputs(config: SimulationConfig, trajectory: Trajectory,
                  csv_path: Optional[str] = None, png_path: Optional[str] = None) -> None:
    """SVG first, then the optional exports; stops at the first failure."""
    target = config.target()
    svg = plot_trajectory_svg(trajectory, target, config.svg_width, config.svg_height)
    svg.to_file(config.svg_filename, config.svg_dir)
    if csv_path:
        write_csv(trajectory, csv_path)
    if png_path:
        save_plot_png(trajectory, target, png_path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    print(banner("Did the basketball go into the basket?"))

    try:
        if args.log_level:
            set_log_level(args.log_level)
        config = load_config(args)
        print(format_initial_data(config))
        trajectory = run_simulation(config)
        display = None if args.no_grid else config.display()
        print(format_trajectory(trajectory, display))
    except ValueError as e:
        logger.error("Invalid simulation: %s", e)
        return EXIT_CONFIG_ERROR

    try:
        write_outputs(config, trajectory, args.csv, args.png)
    except ValueError as e:
        logger.error("Cannot render trajectory: %s", e)
        return EXIT_CONFIG_ERROR
    except OSError as e:
        logger.error("Output not written: %s", e)
        return EXIT_IO_ERROR

    print(f"SVG written to {Path(config.svg_dir) / config.svg_filename}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
