"""
SMRT Gimbal - Constants and Defaults

This module defines the numerical tolerances, default configuration values
and frame conventions used throughout the gimbal controller.

Frame convention: a nozzle transform thrusts along its local +Z axis; the
vehicle body axes are right = +X, up = +Y, forward = +Z.
"""

import numpy as np

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

# Maximum deflection from the neutral pose (degrees)
DEFAULT_GIMBAL_RANGE = 1.0

# Name of the nozzle transform that pivots
DEFAULT_GIMBAL_TRANSFORM_NAME = "thrustTransform"

# =============================================================================
# CONE CLIPPING TOLERANCES
# =============================================================================

# Targets shorter than this have no usable direction
TARGET_EPSILON = 1e-6

# Below this angle (degrees) target and neutral pose are treated as parallel
PARALLEL_DEGREES = 1e-3

# Factors within this of 1.0 request full authority
FULL_AUTHORITY_TOLERANCE = 1e-3

# Generic "is zero" threshold for norms and squared norms
ZERO_TOLERANCE = 1e-12

# Unit quaternion check
QUATERNION_NORM_TOL = 1e-9

# Saturation flag threshold (degrees below the range)
SATURATION_TOLERANCE_DEG = 1e-6

# Cone-bound check slack for the validation layer (degrees)
CONE_BOUND_TOLERANCE_DEG = 1e-4

# =============================================================================
# FRAME CONVENTIONS
# =============================================================================

# Local axis the nozzle thrusts along
NOZZLE_FORWARD_AXIS = np.array([0.0, 0.0, 1.0])

# Body axes
BODY_RIGHT_AXIS = np.array([1.0, 0.0, 0.0])
BODY_UP_AXIS = np.array([0.0, 1.0, 0.0])
BODY_FORWARD_AXIS = np.array([0.0, 0.0, 1.0])

# Up hint for look rotations
WORLD_UP = np.array([0.0, 1.0, 0.0])

# Identity quaternion [w, x, y, z]
IDENTITY_QUATERNION = np.array([1.0, 0.0, 0.0, 0.0])
