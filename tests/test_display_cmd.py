import pytest

from basketball.display_cmd import DisplayCMD
from basketball.trajectory_simulator import (
    LaunchParameters, Sample, SimulationWindow, Target, simulate_throw
)


@pytest.fixture
def display():
    return DisplayCMD(50, 80, 10.0, 12.0)


def test_corners_map_to_corner_cells(display):
    assert display.meters_to_cell(0.0, 0.0) == (0, 0)
    assert display.meters_to_cell(10.0, 12.0) == (49, 79)


@pytest.mark.parametrize("row_m,col_m", [(10.01, 5.0), (5.0, 12.01), (-0.5, 1.0), (1.0, -0.5)])
def test_out_of_bounds_rejected(display, row_m, col_m):
    with pytest.raises(ValueError):
        display.meters_to_cell(row_m, col_m)


def test_half_cell_rounds_up():
    display = DisplayCMD(3, 3, 4.0, 4.0)
    assert display.meters_to_cell(1.0, 1.0) == (1, 1)
    assert display.meters_to_cell(0.99, 3.0) == (0, 2)


def test_trace_point(display):
    display.set_pixel_meters('O', 5.0, 6.0)
    row, col = display.meters_to_cell(5.0, 6.0)
    assert display.get_pixel(row, col) == 'O'


def test_entry_point_marker(display):
    display.set_pixel_meters('O', 3.0, 6.0, flag_enter_instant=True)
    row, col = display.meters_to_cell(3.0, 6.0)
    marks = ''.join(display.get_pixel(row, c) for c in range(col - 2, col + 3))
    assert marks == '==*=='


@pytest.mark.parametrize("col_m", [0.0, 0.1, 11.85, 12.0])
def test_entry_marker_off_the_edge(display, col_m):
    with pytest.raises(ValueError):
        display.set_pixel_meters('O', 3.0, col_m, flag_enter_instant=True)
    # Nothing of the marker is left behind.
    assert set(display.render()) == {' ', '\n'}


def test_set_pixel_bounds(display):
    with pytest.raises(ValueError):
        display.set_pixel('x', 50, 0)
    with pytest.raises(ValueError):
        display.set_pixel('x', 0, -1)


def test_render_prints_ground_row_last():
    display = DisplayCMD(3, 4, 2.0, 3.0)
    display.set_pixel('g', 0, 0)
    display.set_pixel('t', 2, 3)
    assert display.render() == "   t\n    \ng   \n"


def test_rejects_degenerate_grid():
    with pytest.raises(ValueError):
        DisplayCMD(1, 80, 10.0, 10.0)
    with pytest.raises(ValueError):
        DisplayCMD(50, 80, 0.0, 10.0)


def test_plot_samples_and_clear(display):
    display.plot_samples([Sample(0.0, 0.0, 0.0), Sample(0.1, 12.0, 10.0)])
    assert display.get_pixel(0, 0) == 'O'
    assert display.get_pixel(49, 79) == 'O'
    display.clear()
    assert set(display.render()) == {' ', '\n'}


def test_reference_entry_on_grid(display):
    launch = LaunchParameters((0.0, 1.5), 10.0, 45.0, angle_unit="radians")
    trajectory = simulate_throw(launch, Target((8.0, 3.05)), SimulationWindow(3.0, 60))
    display.plot_samples(trajectory.samples)
    lines = display.rows()
    assert len(lines) == 50
    assert all(len(line) == 80 for line in lines)
    # Entry at x=8.01 m, y=3.07 m -> cell (15, 53); row 15 is the 35th line.
    assert lines[49 - 15][51:56] == '==*=='
    # Launch point sits near the bottom-left corner.
    assert lines[49 - 7][0] == 'O'
