"""
SMRT Gimbal - Headless Harness

This module drives a GimbalController the way a host simulation would:
- Fixed-step tick loop
- Scripted control demands and lock/free/toggle commands
- Data logging
- Optional per-tick validation (abort on violation)
"""

from dataclasses import dataclass, field
import logging
import time
from typing import Callable, Dict, List, Optional

import numpy as np

from .config import GimbalConfig
from .gimbal import GimbalController, GimbalMode
from .types import ControlDemand, GimbalTickOutput
from .validation import ValidationError, check_magnitude_preserved, validate_nozzle
from .vehicle import RigidVehicle

# Configure module logger
logger = logging.getLogger(__name__)

DemandSchedule = Callable[[int], ControlDemand]


@dataclass
class GimbalLog:
    """Container for logged controller data."""
    tick: List[int] = field(default_factory=list)
    mode: List[str] = field(default_factory=list)
    pitch: List[float] = field(default_factory=list)
    yaw: List[float] = field(default_factory=list)
    roll: List[float] = field(default_factory=list)
    deflection_deg: List[float] = field(default_factory=list)
    saturated: List[bool] = field(default_factory=list)
    orientation_written: List[bool] = field(default_factory=list)
    # Magnitudes of the clipped per-axis contributions
    pitch_contribution: List[float] = field(default_factory=list)
    yaw_contribution: List[float] = field(default_factory=list)
    roll_contribution: List[float] = field(default_factory=list)
    nozzle_quat_w: List[float] = field(default_factory=list)
    nozzle_quat_x: List[float] = field(default_factory=list)
    nozzle_quat_y: List[float] = field(default_factory=list)
    nozzle_quat_z: List[float] = field(default_factory=list)

    def append(self, tick: int, mode: GimbalMode, demand: ControlDemand,
               output: Optional[GimbalTickOutput], nozzle_rotation: np.ndarray):
        """Log data from the current tick. A locked tick repeats the last deflection."""
        self.tick.append(tick)
        self.mode.append(mode.name)
        self.pitch.append(float(demand.pitch))
        self.yaw.append(float(demand.yaw))
        self.roll.append(float(demand.roll))

        if output is not None:
            self.deflection_deg.append(output['deflection_degrees'])
            self.saturated.append(output['saturated'])
            self.orientation_written.append(output['orientation_written'])
            self.pitch_contribution.append(float(np.linalg.norm(output['pitch_vector'])))
            self.yaw_contribution.append(float(np.linalg.norm(output['yaw_vector'])))
            self.roll_contribution.append(float(np.linalg.norm(output['roll_vector'])))
        else:
            self.deflection_deg.append(self.deflection_deg[-1] if self.deflection_deg else 0.0)
            self.saturated.append(self.saturated[-1] if self.saturated else False)
            self.orientation_written.append(False)
            self.pitch_contribution.append(0.0)
            self.yaw_contribution.append(0.0)
            self.roll_contribution.append(0.0)

        w, x, y, z = nozzle_rotation
        self.nozzle_quat_w.append(float(w))
        self.nozzle_quat_x.append(float(x))
        self.nozzle_quat_y.append(float(y))
        self.nozzle_quat_z.append(float(z))

    def __len__(self) -> int:
        return len(self.tick)


def constant_demand(demand: ControlDemand) -> DemandSchedule:
    """Schedule returning the same demand every tick."""
    return lambda tick: demand


def apply_command(controller: GimbalController, command: str) -> None:
    """Dispatch a named lock command ("lock", "free" or "toggle")."""
    handlers = {
        'lock': controller.lock,
        'free': controller.free,
        'toggle': controller.toggle,
    }
    try:
        handler = handlers[command]
    except KeyError:
        raise ValueError(f"Unknown gimbal command {command!r}; "
                         f"expected one of {sorted(handlers)}") from None
    handler()


def run_simulation(vehicle: RigidVehicle, config: GimbalConfig = None,
                   schedule: Optional[DemandSchedule] = None, n_ticks: int = 100,
                   commands: Optional[Dict[int, str]] = None,
                   controller: Optional[GimbalController] = None,
                   verbose: Optional[bool] = None) -> tuple:
    """
    Drive one gimbal controller for a fixed number of ticks.

    Args:
        vehicle: Vehicle carrying the nozzle; its demand is overwritten each tick
        config: GimbalConfig used when no controller is given
        schedule: tick -> ControlDemand. If None, the vehicle's current demand is kept.
        n_ticks: Number of ticks to run
        commands: {tick: "lock" | "free" | "toggle"} applied before that tick's update
        controller: Existing controller to drive. If None one is created.
        verbose: Print a progress table. Defaults to config.verbose.

    Returns:
        (controller, log, termination_reason) tuple
    """
    if controller is None:
        controller = GimbalController(vehicle, config)
    config = controller.config
    if verbose is None:
        verbose = config.verbose
    commands = commands or {}

    if not controller.started:
        controller.start()

    log = GimbalLog()
    logger.info(f"Starting gimbal run: ticks={n_ticks}, range={config.gimbal_range} deg")

    if verbose:
        print("\n" + "=" * 64)
        print(f"SMRT GIMBAL RUN    | ticks={n_ticks} | range={config.gimbal_range} deg")
        print("=" * 64)
        print(f"{'Tick':^6} | {'Mode':^8} | {'Pitch':^7} | {'Yaw':^7} | {'Roll':^7} | {'Defl (deg)':^10}")
        print("-" * 64)

    start_time = time.time()
    for tick in range(n_ticks):
        if tick in commands:
            apply_command(controller, commands[tick])

        if schedule is not None:
            vehicle.demand = schedule(tick)
        demand = vehicle.control_demand()

        output = controller.update()
        log.append(tick, controller.mode, demand, output, controller.nozzle.rotation)

        if config.validate:
            try:
                validate_nozzle(controller.nozzle, controller.state.rest_rotation,
                                config.gimbal_range)
                if output is not None:
                    check_magnitude_preserved(output['combined'], output['clipped'])
            except ValidationError as e:
                logger.error(f"Validation failed at tick {tick}: {e}")
                if verbose:
                    print(f"\nValidation Error: {e}")
                return controller, log, f"Validation failure: {e}"

        if verbose and (tick % 10 == 0 or tick == n_ticks - 1):
            print(f"{tick:^6d} | {controller.mode.name:^8} | {demand.pitch:^7.2f} | "
                  f"{demand.yaw:^7.2f} | {demand.roll:^7.2f} | {log.deflection_deg[-1]:^10.4f}")

    elapsed = time.time() - start_time
    reason = f"Completed {n_ticks} ticks"
    logger.info(f"Gimbal run complete: {n_ticks} ticks in {elapsed:.3f}s")
    return controller, log, reason
