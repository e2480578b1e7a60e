"""
SMRT Gimbal Package

A Somewhat More Reasonable Thrust-vectoring controller: per-tick mixing of
pitch/yaw/roll demands into a gimbaled nozzle orientation, bounded by a
fixed deflection cone.

Modules:
    - constants: Tolerances, defaults and frame conventions
    - frames: Quaternion operations, angles and look rotation
    - cone: Gimbal cone clipping
    - control: Torque-demand resolver and axis mixing
    - transform: World and child transforms
    - vehicle: Vehicle pose provider protocol and rigid vehicle
    - state: Persistent gimbal state
    - gimbal: Per-tick gimbal controller
    - config: Configuration and part-config parsing
    - validation: Geometric validation checks
    - main: Headless harness
"""

from .cone import clip_to_gimbal_cone
from .control import compute_torque_direction, resolve_axis_demand, mix_axis_demands
from .config import (
    ConfigurationError,
    GimbalConfig,
    create_default_config,
    create_test_config,
    parse_module_config,
)
from .gimbal import GimbalController, GimbalMode
from .main import GimbalLog, run_simulation
from .types import ControlDemand, GimbalTickOutput
from .vehicle import RigidVehicle, VehiclePoseProvider, create_default_vehicle

__version__ = "1.0.0"
__author__ = "SMRT Gimbal Team"

__all__ = [
    'clip_to_gimbal_cone',
    'compute_torque_direction',
    'resolve_axis_demand',
    'mix_axis_demands',
    'ConfigurationError',
    'GimbalConfig',
    'create_default_config',
    'create_test_config',
    'parse_module_config',
    'GimbalController',
    'GimbalMode',
    'GimbalLog',
    'run_simulation',
    'ControlDemand',
    'GimbalTickOutput',
    'RigidVehicle',
    'VehiclePoseProvider',
    'create_default_vehicle',
]
