from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .config import SimulationConfig
from .svg_plot import plot_trajectory_svg
from .trajectory_simulator import (
    ANGLE_DEGREES, EnvironmentConditions, LaunchParameters, PhysicsEngine,
    SimulationWindow, Target, Trajectory, TrajectorySimulator
)
from .utils.logging import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Basketball Trajectory API", version="1.0.0")

_defaults = SimulationConfig()


class SimRequest(BaseModel):
    velocity: float = Field(_defaults.velocity, gt=0, description="Launch speed in m/s")
    angle: float = Field(_defaults.angle, description="Launch angle from horizontal")
    angle_unit: str = Field(ANGLE_DEGREES, pattern="^(degrees|radians)$")
    launch_x: float = _defaults.launch_x
    launch_y: float = _defaults.launch_y
    basket_x: float = _defaults.basket_x
    basket_y: float = _defaults.basket_y
    capture_radius: float = Field(_defaults.capture_radius, gt=0)
    gravity: float = _defaults.gravity
    simulation_sec: float = Field(_defaults.simulation_sec, gt=0, description="Seconds to simulate")
    num_steps: int = Field(_defaults.num_steps, ge=3, description="Sampled instants")


class SvgRequest(SimRequest):
    svg_width: float = Field(_defaults.svg_width, gt=0)
    svg_height: float = Field(_defaults.svg_height, gt=0)


def _run(data: SimRequest) -> Trajectory:
    sim = TrajectorySimulator(PhysicsEngine(EnvironmentConditions(gravity=data.gravity)))
    try:
        launch = LaunchParameters(
            position=(data.launch_x, data.launch_y),
            velocity=data.velocity,
            angle=data.angle,
            angle_unit=data.angle_unit
        )
        target = Target(position=(data.basket_x, data.basket_y), capture_radius=data.capture_radius)
        window = SimulationWindow(duration=data.simulation_sec, num_steps=data.num_steps)
        return sim.simulate(launch, target, window)
    except ValueError as e:
        logger.warning("Rejected simulation request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/api/simulate")
def simulate(data: SimRequest):
    result = _run(data)

    # Return what the frontend needs
    return {
        "success": True,
        "entered": result.entered,
        "samples": [
            {"t": s.time, "x": s.x, "y": s.y, "entered": s.entered}
            for s in result.samples
        ]
    }


@app.post("/api/svg")
def render_svg(data: SvgRequest):
    result = _run(data)
    target = Target(position=(data.basket_x, data.basket_y), capture_radius=data.capture_radius)
    try:
        svg = plot_trajectory_svg(result, target, data.svg_width, data.svg_height)
    except ValueError as e:
        logger.warning("Cannot render trajectory: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
    return Response(content=svg.to_file_string(), media_type="image/svg+xml")
