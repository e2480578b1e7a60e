"""
SMRT Gimbal - Plots

Diagnostic plots of a GimbalLog: nozzle deflection against the gimbal
range, and the magnitudes of the clipped per-axis contributions.
"""

import os
from dataclasses import dataclass
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np


@dataclass
class GimbalPlotData:
    """Arrays extracted from a GimbalLog for plotting."""
    tick: np.ndarray
    deflection_deg: np.ndarray
    locked: np.ndarray
    pitch_contribution: np.ndarray
    yaw_contribution: np.ndarray
    roll_contribution: np.ndarray


def extract_log_data(log) -> GimbalPlotData:
    """Convert the list fields of a GimbalLog into numpy arrays."""
    return GimbalPlotData(
        tick=np.asarray(log.tick, dtype=int),
        deflection_deg=np.asarray(log.deflection_deg, dtype=float),
        locked=np.asarray([mode == 'LOCKED' for mode in log.mode], dtype=bool),
        pitch_contribution=np.asarray(log.pitch_contribution, dtype=float),
        yaw_contribution=np.asarray(log.yaw_contribution, dtype=float),
        roll_contribution=np.asarray(log.roll_contribution, dtype=float),
    )


def plot_deflection(data: GimbalPlotData, gimbal_range: float, output_dir: str) -> str:
    """Nozzle deflection per tick, with the cone limit and locked spans shaded."""
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(data.tick, data.deflection_deg, color='tab:blue', linewidth=1.5,
            label='Deflection')
    ax.axhline(gimbal_range, color='tab:red', linestyle='--', linewidth=1.0,
               label=f'Gimbal range ({gimbal_range:g} deg)')
    if data.locked.any():
        ax.fill_between(data.tick, 0, 1, where=data.locked, step='mid',
                        transform=ax.get_xaxis_transform(), color='grey',
                        alpha=0.2, label='Locked')
    ax.set_xlabel('Tick')
    ax.set_ylabel('Deflection from neutral (deg)')
    ax.set_ylim(bottom=0.0, top=max(gimbal_range, float(np.max(data.deflection_deg, initial=0.0))) * 1.15 + 1e-3)
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')
    ax.set_title('Gimbal Deflection')

    path = os.path.join(output_dir, 'gimbal_deflection.png')
    fig.savefig(path, dpi=120, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_axis_contributions(data: GimbalPlotData, output_dir: str) -> str:
    """Magnitude of each clipped axis contribution per tick."""
    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(data.tick, data.pitch_contribution, label='Pitch')
    ax.plot(data.tick, data.yaw_contribution, label='Yaw')
    ax.plot(data.tick, data.roll_contribution, label='Roll')
    ax.set_xlabel('Tick')
    ax.set_ylabel('|contribution|')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')
    ax.set_title('Per-Axis Displacement Contributions')

    path = os.path.join(output_dir, 'gimbal_axis_contributions.png')
    fig.savefig(path, dpi=120, bbox_inches='tight')
    plt.close(fig)
    return path


def generate_all_plots(log, gimbal_range: float, output_dir: str) -> List[str]:
    """
    Write every gimbal plot for a log into output_dir.

    Returns:
        Paths of the written files
    """
    os.makedirs(output_dir, exist_ok=True)
    data = extract_log_data(log)
    return [
        plot_deflection(data, gimbal_range, output_dir),
        plot_axis_contributions(data, output_dir),
    ]
