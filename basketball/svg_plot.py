"""
SVG rendering of a trajectory with an animated ball following the path.
"""

from typing import List, Tuple

from .svg_gen import SVG, Color, SvgElement, circle, rect
from .trajectory_simulator import Target, Trajectory

TRACE_RADIUS = 2.0
BALL_RADIUS = 3
BASKET_WIDTH = 20.0
BASKET_HEIGHT = 4.0
ANIMATION_DURATION = "3s"
MOTION_PATH_ID = "motionPath"
BALL_ID = "circle"


def compute_scale_factor(trajectory: Trajectory, svg_x_max: float) -> float:
    """
    Single uniform scale that fits the larger physical extent (x or y) of the
    trajectory to the SVG width, keeping the aspect ratio.
    """
    if not trajectory.samples:
        raise ValueError("cannot scale an empty trajectory")
    max_x_y = max(trajectory.max_x, trajectory.max_height)
    if not max_x_y > 0:
        raise ValueError(f"trajectory extent must be positive to scale it, got {max_x_y}")
    return svg_x_max / max_x_y


def project_point(x: float, y: float, scale_factor: float, svg_y_max: float) -> Tuple[float, float]:
    """Meters to SVG pixels; SVG y grows downwards."""
    return x * scale_factor, svg_y_max - y * scale_factor


def path_data(points: List[Tuple[float, float]]) -> str:
    """``M x0,y0`` followed by an ``L`` segment to every point (first included)."""
    x_0, y_0 = points[0]
    commands = [f"M{x_0:.2f},{y_0:.2f}"]
    commands.extend(f"L{x:.2f},{y:.2f}" for x, y in points)
    return "\n".join(commands)


def plot_trajectory_svg(
        trajectory: Trajectory,
        target: Target,
        svg_x_max: float,
        svg_y_max: float,
        background_color: Color = Color.BLACK
) -> SVG:
    """
    Build the trajectory document.

    Drawing order: one circle per sample, the basket, the motion path and the
    animated ball bound to it. Coordinates are not bounds-checked.
    """
    if not svg_x_max > 0 or not svg_y_max > 0:
        raise ValueError(f"SVG size must be positive, got {svg_x_max}x{svg_y_max}")

    svg = SVG(svg_x_max, svg_y_max, background_color)
    scale_factor = compute_scale_factor(trajectory, svg_x_max)

    points = [project_point(s.x, s.y, scale_factor, svg_y_max) for s in trajectory.samples]

    for sample, (px, py) in zip(trajectory.samples, points):
        svg.add_elem(circle(px, py, TRACE_RADIUS, Color.GREEN if sample.entered else Color.BLUE))

    basket_x, basket_y = project_point(target.position[0], target.position[1], scale_factor, svg_y_max)
    svg.add_elem(rect(
        basket_x - BASKET_WIDTH / 2,
        basket_y - BASKET_HEIGHT / 2,
        BASKET_WIDTH,
        BASKET_HEIGHT,
        style="fill:green;stroke:green;stroke-width:1.00",
    ))

    svg.add_elem(SvgElement("path", {"id": MOTION_PATH_ID, "fill": "none", "d": path_data(points)}))

    svg.add_elem(circle(0.0, 0.0, BALL_RADIUS, Color.YELLOW, id=BALL_ID))

    animation = SvgElement("animateMotion", {
        "xlink:href": f"#{BALL_ID}",
        "dur": ANIMATION_DURATION,
        "begin": "0s",
        "fill": "freeze",
        "repeatCount": "indefinite",
    })
    animation.add(SvgElement("mpath", {"xlink:href": f"#{MOTION_PATH_ID}"}))
    svg.add_elem(animation)

    return svg
