#!/usr/bin/env python3
"""
Basketball Trajectory Simulator
===============================
Closed-form projectile simulation of a basketball throw under constant gravity,
with a point-distance test deciding whether the ball entered the basket.

Equations in 2D (uniformly accelerated movement):

    v_0_x = v_0 * cos(teta_0)
    v_0_y = v_0 * sin(teta_0)

    x(t) = x_0 + v_0_x * t
    y(t) = y_0 + v_0_y * t - 1/2 * g * t^2

License: MIT
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .utils.logging import get_logger

logger = get_logger(__name__)

GRAVITY = 9.807  # m/s²
MIN_BALL_DELTA_TO_BASKET_CENTER = 0.1  # 10 cm

ANGLE_DEGREES = "degrees"
ANGLE_RADIANS = "radians"
ANGLE_UNITS = (ANGLE_DEGREES, ANGLE_RADIANS)


@dataclass(frozen=True)
class EnvironmentConditions:
    """Environmental constants used by the kinematics."""
    gravity: float = GRAVITY  # m/s²


@dataclass(frozen=True)
class LaunchParameters:
    """Parameters for the basketball throw."""
    position: Tuple[float, float]  # (x, y) in meters
    velocity: float  # m/s
    angle: float  # from horizontal, see angle_unit
    angle_unit: str = ANGLE_DEGREES

    def __post_init__(self):
        if self.angle_unit not in ANGLE_UNITS:
            raise ValueError(
                f"angle_unit must be one of {ANGLE_UNITS}, got {self.angle_unit!r}"
            )

    @property
    def angle_rad(self) -> float:
        """Launch angle as handed to the trig functions."""
        if self.angle_unit == ANGLE_RADIANS:
            return self.angle
        return float(np.radians(self.angle))

    @property
    def velocity_vector(self) -> Tuple[float, float]:
        """Get initial velocity as (vx, vy) vector."""
        angle_rad = self.angle_rad
        return (
            float(self.velocity * np.cos(angle_rad)),
            float(self.velocity * np.sin(angle_rad))
        )


@dataclass(frozen=True)
class Target:
    """The basket: a point with a capture radius around it."""
    position: Tuple[float, float]  # (x, y) center in meters
    capture_radius: float = MIN_BALL_DELTA_TO_BASKET_CENTER  # meters

    def distance_to(self, x: float, y: float) -> float:
        # z is padded with 0 on both sides, the core is 2D only.
        return euclidean_distance((x, y, 0.0), (self.position[0], self.position[1], 0.0))

    def contains(self, x: float, y: float) -> bool:
        """Check if a point is inside the capture sphere."""
        return self.distance_to(x, y) <= self.capture_radius


@dataclass(frozen=True)
class SimulationWindow:
    """How long to simulate and how finely to sample it."""
    duration: float  # seconds
    num_steps: int  # number of sampled instants, both ends included

    def time_steps(self) -> List[float]:
        return get_time_steps(self.duration, self.num_steps)


@dataclass(frozen=True)
class Sample:
    """A single sampled instant of the trajectory."""
    time: float
    x: float
    y: float
    entered: bool = False  # ball inside the capture radius at this instant

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Trajectory:
    """Retained samples of one run plus the aggregate entry outcome."""
    samples: Tuple[Sample, ...]
    entered: bool = False

    def __post_init__(self):
        if self.entered != any(s.entered for s in self.samples):
            raise ValueError(
                f"trajectory entered={self.entered} disagrees with its samples"
            )

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self):
        return iter(self.samples)

    @property
    def entry_samples(self) -> List[Sample]:
        return [s for s in self.samples if s.entered]

    @property
    def max_x(self) -> float:
        return max(s.x for s in self.samples)

    @property
    def max_height(self) -> float:
        return max(s.y for s in self.samples)

    def get_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Get trajectory as numpy arrays (t, x, y)."""
        t = np.array([s.time for s in self.samples])
        x = np.array([s.x for s in self.samples])
        y = np.array([s.y for s in self.samples])
        return t, x, y


def get_time_steps(duration: float, num_steps: int) -> List[float]:
    """
    Split [0, duration] into num_steps uniformly spaced instants.

    The first value is exactly 0.0 and the last one is exactly ``duration``
    rather than ``(num_steps - 1) * delta_t``, so no rounding drift shows up
    at the end of the window.

    Raises:
        ValueError: if num_steps <= 2 or duration <= 0
    """
    if isinstance(num_steps, bool) or not isinstance(num_steps, (int, np.integer)):
        raise ValueError(f"num_steps must be an integer, got {num_steps!r}")
    if num_steps <= 2:
        raise ValueError(f"num_steps must be greater than 2, got {num_steps}")
    if not duration > 0:
        raise ValueError(f"duration must be positive, got {duration}")

    inner_steps = num_steps - 1
    delta_t = duration / inner_steps

    time_steps = [0.0]
    for step in range(1, inner_steps):
        time_steps.append(delta_t * step)
    time_steps.append(float(duration))
    return time_steps


def euclidean_distance(p: Sequence[float], q: Sequence[float]) -> float:
    """dist = sqrt((p_x - q_x)^2 + (p_y - q_y)^2 + (p_z - q_z)^2)"""
    return float(np.sqrt((p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2 + (p[2] - q[2]) ** 2))


class PhysicsEngine:
    """
    Closed-form kinematics for a drag-free projectile.

    Only gravity acts on the ball, so the position at any instant follows
    directly from the launch conditions without integration.
    """

    def __init__(self, environment: EnvironmentConditions = None):
        self.env = environment if environment is not None else EnvironmentConditions()

    @property
    def gravity(self) -> float:
        return self.env.gravity

    def position_at(self, launch: LaunchParameters, t: float) -> Tuple[float, float]:
        """Ball position (x, y) in meters, t seconds after the throw."""
        x_0, y_0 = launch.position
        v_0_x, v_0_y = launch.velocity_vector

        ball_x = x_0 + v_0_x * t
        ball_y = y_0 + v_0_y * t - 0.5 * self.env.gravity * t * t
        return (ball_x, ball_y)


class TrajectorySimulator:
    """
    Samples the throw over a time window and decides whether it scored.
    """

    def __init__(self, physics: PhysicsEngine = None):
        self.physics = physics if physics is not None else PhysicsEngine()

    def simulate(
            self,
            launch: LaunchParameters,
            target: Target,
            window: SimulationWindow
    ) -> Trajectory:
        """
        Simulate the throw and test every sampled instant against the basket.

        Samples below the ground (y < 0) are dropped, but the following
        instants are still evaluated: the model does not stop at ground
        contact, so the retained list may have gaps.

        Args:
            launch: Launch parameters (position, velocity, angle)
            target: Basket position and capture radius
            window: Simulated duration and number of sampled instants

        Returns:
            Trajectory with the retained samples and the entry flag

        Raises:
            ValueError: on a non-positive velocity, duration or capture
                radius, or on fewer than 3 steps
        """
        if not launch.velocity > 0:
            raise ValueError(f"launch velocity must be positive, got {launch.velocity}")
        if not target.capture_radius > 0:
            raise ValueError(f"capture radius must be positive, got {target.capture_radius}")

        time_steps = window.time_steps()
        logger.debug(
            "Simulating %d steps over %.3f s (v0=%.3f m/s, angle=%.3f %s)",
            len(time_steps), window.duration, launch.velocity, launch.angle, launch.angle_unit
        )

        samples = []
        flag_into_the_basket = False

        for t in time_steps:
            ball_x, ball_y = self.physics.position_at(launch, t)
            if ball_y < 0:
                continue
            flag_enter_instant = target.contains(ball_x, ball_y)
            if flag_enter_instant:
                flag_into_the_basket = True
                logger.debug("Ball inside the basket at t=%.3f s (%.3f, %.3f)", t, ball_x, ball_y)
            samples.append(Sample(t, ball_x, ball_y, flag_enter_instant))

        logger.info(
            "Trajectory: %d of %d samples above ground, entered the basket: %s",
            len(samples), len(time_steps), flag_into_the_basket
        )
        return Trajectory(samples=tuple(samples), entered=flag_into_the_basket)


def simulate_throw(
        launch: LaunchParameters,
        target: Target,
        window: SimulationWindow,
        environment: EnvironmentConditions = None
) -> Trajectory:
    """Run a single simulation with a fresh engine."""
    return TrajectorySimulator(PhysicsEngine(environment)).simulate(launch, target, window)


# Utility functions for common calculations

def mps_to_kmh(mps: float) -> float:
    """Convert meters per second to kilometers per hour."""
    return (mps * 3_600.0) / 1_000.0
