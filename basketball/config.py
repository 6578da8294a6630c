"""
Simulation configuration.

Every constant of a run lives here with its default value; a JSON file can
override any subset of them.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import TypeAdapter, ValidationError

from .display_cmd import DisplayCMD
from .trajectory_simulator import (
    ANGLE_DEGREES, GRAVITY, MIN_BALL_DELTA_TO_BASKET_CENTER,
    EnvironmentConditions, LaunchParameters, SimulationWindow, Target
)


@dataclass(frozen=True)
class SimulationConfig:
    """All the inputs of one program run."""
    # Player throw position
    launch_x: float = 0.0  # m
    launch_y: float = 1.5  # m
    launch_z: float = 0.0  # m, reported only

    # Initial velocity vector
    velocity: float = 10.0  # m/s
    angle: float = 45.0  # XX axis to YY axis
    phi: float = 0.0  # ZZ axis to XX axis, reported only
    angle_unit: str = ANGLE_DEGREES

    # Basket position
    basket_x: float = 8.0  # m
    basket_y: float = 3.05  # m
    basket_z: float = 5.0  # m, reported only
    capture_radius: float = MIN_BALL_DELTA_TO_BASKET_CENTER  # m

    gravity: float = GRAVITY  # m/s²

    # Simulation window
    simulation_sec: float = 3.0  # s
    num_steps: int = 60

    # SVG output
    svg_filename: str = "basketball_trajectory.svg"
    svg_dir: str = "./"
    svg_width: float = 500.0
    svg_height: float = 300.0

    # Text grid
    grid_rows: int = 50
    grid_cols: int = 80
    grid_rows_meters: float = 10.0
    grid_cols_meters: float = 12.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        try:
            return _config_adapter.validate_python(data)
        except ValidationError as e:
            raise ValueError(f"Invalid configuration values: {e}") from e

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'SimulationConfig':
        """Load a configuration file; missing keys keep their defaults."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ValueError(f"Cannot read configuration {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in configuration {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Configuration {path} must contain a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides) -> 'SimulationConfig':
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def launch_parameters(self) -> LaunchParameters:
        return LaunchParameters(
            position=(self.launch_x, self.launch_y),
            velocity=self.velocity,
            angle=self.angle,
            angle_unit=self.angle_unit
        )

    def target(self) -> Target:
        return Target(position=(self.basket_x, self.basket_y), capture_radius=self.capture_radius)

    def window(self) -> SimulationWindow:
        return SimulationWindow(duration=self.simulation_sec, num_steps=self.num_steps)

    def environment(self) -> EnvironmentConditions:
        return EnvironmentConditions(gravity=self.gravity)

    def display(self) -> DisplayCMD:
        return DisplayCMD(self.grid_rows, self.grid_cols, self.grid_rows_meters, self.grid_cols_meters)


_config_adapter = TypeAdapter(SimulationConfig)
