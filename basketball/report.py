"""Console report of a simulation run."""

from typing import Optional

from .config import SimulationConfig
from .display_cmd import DisplayCMD, TRACE_CHAR
from .trajectory_simulator import Trajectory, mps_to_kmh

ENTERED_NOTE = "ball entered the basket"


def banner(title: str) -> str:
    line = "*" * (len(title) + 6)
    return f"{line}\n** {title} **\n{line}"


def format_initial_data(config: SimulationConfig) -> str:
    unit = config.angle_unit
    lines = [
        "Data:",
        "",
        "  Player throw position:",
        f"    launch_x: {config.launch_x:0.2f} m - meters",
        f"    launch_y: {config.launch_y:0.2f} m - meters",
        f"    launch_z: {config.launch_z:0.2f} m - meters",
        "",
        "  Initial velocity vector:",
        f"    velocity: {config.velocity:0.2f} m/s - Meters per second",
        f"    velocity: {mps_to_kmh(config.velocity):0.2f} Km/h - Km per hour",
        f"    angle: {config.angle:0.2f} {unit} = angle XX axis to YY axis.",
        f"    phi: {config.phi:0.2f} {unit} = angle ZZ axis to XX axis.",
        "",
        "  Basket position:",
        f"    basket_x: {config.basket_x:0.2f} m - meters",
        f"    basket_y: {config.basket_y:0.2f} m - meters",
        f"    basket_z: {config.basket_z:0.2f} m - meters",
        "",
        "  Test the simulation for how many seconds?",
        f"    simulation_sec: {config.simulation_sec:0.2f} s - Seconds to simulate",
        f"    num_steps: {config.num_steps}        - Divide the simulation seconds into N equal points.",
        "",
        "  Output SVG",
        f"    svg_filename = {config.svg_filename}",
    ]
    return "\n".join(lines) + "\n"


def format_sample_lines(trajectory: Trajectory) -> str:
    lines = []
    for sample in trajectory.samples:
        note = ENTERED_NOTE if sample.entered else ""
        lines.append(f"  t: {sample.time:0.2f} s, x: {sample.x:0.2f} m, y: {sample.y:0.2f} m, {note} ")
    return "\n".join(lines) + "\n"


def format_trajectory(trajectory: Trajectory, display: Optional[DisplayCMD] = None) -> str:
    """
    Trace of every retained sample, followed by the character grid when a
    display is given. The samples are plotted onto ``display``.

    Raises:
        ValueError: if a sample falls outside the display area
    """
    parts = [
        "",
        banner("Trajectory"),
        f"  Entered the basket: {trajectory.entered}",
        "",
        format_sample_lines(trajectory),
    ]
    text = "\n".join(parts)
    if display is not None:
        display.plot_samples(trajectory.samples, TRACE_CHAR)
        text += "\n" + display.render()
    return text
