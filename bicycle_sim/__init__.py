"""
Two-Vehicle Kinematic Simulation

This package advances an ego vehicle and an obstacle vehicle with a kinematic
bicycle model, keeping oriented collision rectangles in sync with the state,
for use as the transition model of a reinforcement-learning environment.
"""

from bicycle_sim.dynamics import bicycle_derivative, bicycle_step
from bicycle_sim.environment import BoundedEnvironment, Environment
from bicycle_sim.geometry import compute_corners
from bicycle_sim.params import ConfigurationError, SimulatorConfig, VehicleGeometry
from bicycle_sim.shapes import ShapelyRectangle, VehicleShape
from bicycle_sim.simulator import (
    SimulationTerminatedError,
    Simulator,
    SimulatorStatus,
    Trajectory,
)
from bicycle_sim.state import ControlInput, VehicleState, joint_state, split_joint_state

__all__ = [
    "BoundedEnvironment",
    "ConfigurationError",
    "ControlInput",
    "Environment",
    "ShapelyRectangle",
    "SimulationTerminatedError",
    "Simulator",
    "SimulatorConfig",
    "SimulatorStatus",
    "Trajectory",
    "VehicleGeometry",
    "VehicleShape",
    "VehicleState",
    "bicycle_derivative",
    "bicycle_step",
    "compute_corners",
    "joint_state",
    "split_joint_state",
]
