"""
File exports of a trajectory: CSV data and a static PNG plot.
"""

import csv
from pathlib import Path
from typing import Union

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from .trajectory_simulator import Target, Trajectory
from .utils.logging import get_logger

logger = get_logger(__name__)


# Plot color palette
class Colors:
    BACKGROUND = '#0f0f1a'
    SURFACE = '#1a1a2e'
    TRAJECTORY_MAIN = '#6366f1'
    SUCCESS = '#22c55e'
    ERROR = '#ef4444'
    TARGET = '#22c55e'
    LAUNCH = '#ef4444'
    TEXT_PRIMARY = '#f8fafc'
    TEXT_SECONDARY = '#94a3b8'
    GRID = '#2d2d4a'


def write_csv(trajectory: Trajectory, filepath: Union[str, Path]) -> Path:
    """
    Export trajectory samples to CSV.

    Raises:
        OSError: if the file cannot be written
    """
    filepath = Path(filepath)
    with open(filepath, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Time (s)', 'X (m)', 'Y (m)', 'Entered'])

        for sample in trajectory.samples:
            writer.writerow([
                f"{sample.time:.6f}",
                f"{sample.x:.6f}",
                f"{sample.y:.6f}",
                int(sample.entered)
            ])
    logger.info("Exported %d samples to %s", len(trajectory), filepath)
    return filepath


def build_plot(trajectory: Trajectory, target: Target) -> Figure:
    """Side view of the throw with the basket and the entry samples."""
    fig = Figure(figsize=(12, 8), facecolor=Colors.BACKGROUND)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    ax.set_facecolor(Colors.SURFACE)
    ax.grid(True, color=Colors.GRID, linestyle='-', linewidth=0.5, alpha=0.5)

    t, x, y = trajectory.get_arrays()
    ax.plot(x, y, '-o', color=Colors.TRAJECTORY_MAIN, markersize=3, linewidth=2)

    entries = trajectory.entry_samples
    if entries:
        ax.plot([s.x for s in entries], [s.y for s in entries], '*',
                color=Colors.SUCCESS, markersize=14, zorder=5)

    # Launch point
    if len(trajectory):
        first = trajectory.samples[0]
        ax.plot(first.x, first.y, 'o', color=Colors.LAUNCH, markersize=10,
                markeredgecolor='white', markeredgewidth=2, zorder=5)

    # Basket, drawn as the capture circle around its center
    tx, ty = target.position
    ax.add_patch(Circle((tx, ty), target.capture_radius, fill=False,
                        edgecolor=Colors.TARGET, linewidth=1.5))
    ax.plot(tx, ty, 's', color=Colors.TARGET, markersize=8, alpha=0.8)
    ax.set_aspect('equal', adjustable='datalim')

    ax.set_xlabel('Horizontal Distance (m)', color=Colors.TEXT_PRIMARY, fontsize=11)
    ax.set_ylabel('Height (m)', color=Colors.TEXT_PRIMARY, fontsize=11)

    hit_status = "HIT" if trajectory.entered else "MISS"
    hit_color = Colors.SUCCESS if trajectory.entered else Colors.ERROR
    ax.set_title(f'Basketball Trajectory - {hit_status}',
                 color=hit_color, fontsize=14, fontweight='bold')
    ax.tick_params(colors=Colors.TEXT_SECONDARY)
    for spine in ax.spines.values():
        spine.set_color(Colors.GRID)

    legend_elements = [
        Line2D([0], [0], color=Colors.TRAJECTORY_MAIN, linewidth=2, label='Trajectory'),
        Line2D([0], [0], marker='o', color='w', markerfacecolor=Colors.LAUNCH, markersize=10, label='Launch'),
        Line2D([0], [0], marker='s', color='w', markerfacecolor=Colors.TARGET, markersize=8, label='Basket'),
        Line2D([0], [0], marker='*', color='w', markerfacecolor=Colors.SUCCESS, markersize=12, label='Entered'),
    ]
    ax.legend(handles=legend_elements, loc='upper right',
              facecolor=Colors.SURFACE, edgecolor=Colors.GRID,
              labelcolor=Colors.TEXT_PRIMARY, fontsize=9)
    return fig


def save_plot_png(trajectory: Trajectory, target: Target, filepath: Union[str, Path]) -> Path:
    """
    Render the plot to a PNG file.

    Raises:
        OSError: if the file cannot be written
    """
    filepath = Path(filepath)
    fig = build_plot(trajectory, target)
    fig.savefig(filepath, facecolor=fig.get_facecolor())
    logger.info("Plot saved to %s", filepath)
    return filepath
