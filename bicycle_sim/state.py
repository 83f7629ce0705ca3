"""
Vehicle state representation

Heading is measured such that pi rad is driving north, pi/2 rad is driving
east, 0 rad is driving south and -pi/2 rad is driving west.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from bicycle_sim.params import ConfigurationError

STATE_SIZE = 8
EGO_SLICE = slice(0, 4)
OBSTACLE_SLICE = slice(4, 8)


@dataclass
class VehicleState:
    """State of a single vehicle"""

    x: float  # Front axle centre x (m)
    y: float  # Front axle centre y (m)
    theta: float  # Heading (rad)
    v: float  # Forward velocity (m/s)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.theta, self.v], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "VehicleState":
        x, y, theta, v = values
        return cls(float(x), float(y), float(theta), float(v))


@dataclass
class ControlInput:
    """Control applied to one vehicle for one step"""

    acceleration: float  # m/s²
    steering_angle: float  # Front wheel angle psi (rad)


def joint_state(ego: VehicleState, obstacle: VehicleState) -> np.ndarray:
    """
    Stack two vehicle states into the joint state vector

    Returns:
        Array [x1, y1, theta1, v1, x2, y2, theta2, v2]
    """
    return np.concatenate([ego.to_array(), obstacle.to_array()])


def split_joint_state(state: np.ndarray) -> Tuple[VehicleState, VehicleState]:
    """Split a joint state vector into (ego, obstacle)"""
    return (
        VehicleState.from_array(state[EGO_SLICE]),
        VehicleState.from_array(state[OBSTACLE_SLICE]),
    )


def scenario_to_state(scenario: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Build the initial joint state from a scenario

    Args:
        scenario: Two [x, y, theta, v] sequences, ego first

    Returns:
        Joint state vector

    Raises:
        ConfigurationError: If the scenario is not two 4-tuples of finite numbers
    """
    try:
        vehicles = [list(vehicle) for vehicle in scenario]
    except TypeError as exc:
        msg = f"Scenario must be two [x, y, theta, v] sequences, got {scenario!r}"
        raise ConfigurationError(msg) from exc

    if len(vehicles) != 2 or any(len(vehicle) != 4 for vehicle in vehicles):
        msg = f"Scenario must be two [x, y, theta, v] sequences, got {scenario!r}"
        raise ConfigurationError(msg)

    try:
        state = np.array(vehicles, dtype=np.float64).reshape(STATE_SIZE)
    except (TypeError, ValueError) as exc:
        msg = f"Scenario contains non-numeric values: {scenario!r}"
        raise ConfigurationError(msg) from exc

    if not np.all(np.isfinite(state)):
        msg = f"Scenario contains non-finite values: {scenario!r}"
        raise ConfigurationError(msg)
    return state


def split_actions(actions: Sequence[float]) -> Tuple[ControlInput, ControlInput]:
    """
    Split a step action into per-vehicle controls

    Args:
        actions: [acc_ego, psi_ego, acc_obstacle, psi_obstacle]

    Returns:
        Tuple of (ego_control, obstacle_control)
    """
    values = [float(a) for a in actions]
    if len(values) != 4:
        msg = f"Expected 4 actions [acc_ego, psi_ego, acc_obstacle, psi_obstacle], got {len(values)}"
        raise ValueError(msg)
    if not all(math.isfinite(a) for a in values):
        msg = f"Actions must be finite, got {values}"
        raise ValueError(msg)
    return ControlInput(values[0], values[1]), ControlInput(values[2], values[3])
