import json

import pytest

from basketball.config import SimulationConfig
from basketball.report import banner, format_initial_data, format_trajectory
from basketball.trajectory_simulator import TrajectorySimulator, PhysicsEngine


def test_defaults_match_reference_throw():
    config = SimulationConfig()
    launch = config.launch_parameters()
    assert launch.position == (0.0, 1.5)
    assert launch.velocity == 10.0
    assert launch.angle == 45.0
    assert launch.angle_unit == "degrees"
    assert config.target().position == (8.0, 3.05)
    assert config.target().capture_radius == 0.1
    assert config.window().duration == 3.0
    assert config.window().num_steps == 60
    assert config.environment().gravity == 9.807


def test_from_json_overrides_subset(tmp_path):
    path = tmp_path / "throw.json"
    path.write_text(json.dumps({"velocity": 12.5, "angle_unit": "radians", "num_steps": 30}))
    config = SimulationConfig.from_json(path)
    assert config.velocity == 12.5
    assert config.angle_unit == "radians"
    assert config.num_steps == 30
    assert config.basket_x == 8.0


def test_from_json_rejects_unknown_keys(tmp_path):
    path = tmp_path / "throw.json"
    path.write_text(json.dumps({"velocty": 12.5}))
    with pytest.raises(ValueError, match="velocty"):
        SimulationConfig.from_json(path)


def test_from_json_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        SimulationConfig.from_json(bad)
    with pytest.raises(ValueError, match="Cannot read"):
        SimulationConfig.from_json(tmp_path / "missing.json")
    listing = tmp_path / "list.json"
    listing.write_text("[1, 2]")
    with pytest.raises(ValueError, match="JSON object"):
        SimulationConfig.from_json(listing)


def test_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError, match="Invalid configuration values"):
        SimulationConfig.from_dict({"launch_x": None})
    with pytest.raises(ValueError, match="Invalid configuration values"):
        SimulationConfig.from_dict({"num_steps": "sixty"})
    assert SimulationConfig.from_dict({"num_steps": 40}).num_steps == 40


def test_with_overrides_ignores_none():
    config = SimulationConfig().with_overrides(velocity=None, angle=60.0)
    assert config.velocity == 10.0
    assert config.angle == 60.0


def test_round_trip_dict():
    config = SimulationConfig(velocity=7.0)
    assert SimulationConfig.from_dict(config.to_dict()) == config


def test_initial_data_report():
    text = format_initial_data(SimulationConfig())
    assert "    velocity: 10.00 m/s - Meters per second" in text
    assert "    velocity: 36.00 Km/h - Km per hour" in text
    assert "    angle: 45.00 degrees = angle XX axis to YY axis." in text
    assert "    basket_y: 3.05 m - meters" in text
    assert "    num_steps: 60 " in text
    assert "svg_filename = basketball_trajectory.svg" in text


def run(config):
    return TrajectorySimulator(PhysicsEngine(config.environment())).simulate(
        config.launch_parameters(), config.target(), config.window())


def test_trajectory_report_miss():
    config = SimulationConfig()
    text = format_trajectory(run(config))
    assert "  Entered the basket: False" in text
    assert "  t: 0.00 s, x: 0.00 m, y: 1.50 m,  \n" in text
    assert "ball entered the basket" not in text


def test_trajectory_report_hit_with_grid():
    config = SimulationConfig(angle_unit="radians")
    text = format_trajectory(run(config), config.display())
    assert "  Entered the basket: True" in text
    assert "  t: 1.53 s, x: 8.01 m, y: 3.07 m, ball entered the basket \n" in text
    assert "==*==" in text
    grid = text.splitlines()[-50:]
    assert all(len(line) == 80 for line in grid)
    # One blank line separates the trace from the grid.
    assert text.splitlines()[-51] == ""
    assert text.splitlines()[-52].startswith("  t: ")


def test_trajectory_report_grid_out_of_bounds():
    config = SimulationConfig(grid_cols_meters=5.0)
    with pytest.raises(ValueError):
        format_trajectory(run(config), config.display())


def test_banner():
    assert banner("Trajectory") == "****************\n** Trajectory **\n****************"
