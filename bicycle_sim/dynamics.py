"""
Kinematic bicycle model
"""

import numpy as np

from bicycle_sim.state import ControlInput, VehicleState


def bicycle_derivative(
    state: VehicleState, control: ControlInput, dt: float, wheel_base: float
) -> np.ndarray:
    """
    State increment over one step

    Displacement uses the velocity before this step's acceleration is
    applied (explicit Euler).

    Args:
        state: Current vehicle state
        control: Acceleration and steering angle
        dt: Time step (s)
        wheel_base: Unscaled wheel base (m)

    Returns:
        Array [dx, dy, dtheta, dv]
    """
    distance = state.v * dt
    return np.array([
        distance * np.sin(state.theta),  # dx
        distance * np.cos(state.theta),  # dy
        distance / wheel_base * np.tan(control.steering_angle),  # dtheta
        control.acceleration * dt,  # dv
    ])


def bicycle_step(
    state: VehicleState, control: ControlInput, dt: float, wheel_base: float
) -> VehicleState:
    """
    Advance one vehicle by a single time step

    Args:
        state: Current vehicle state
        control: Acceleration and steering angle
        dt: Time step (s)
        wheel_base: Unscaled wheel base (m)

    Returns:
        New vehicle state
    """
    return VehicleState.from_array(
        state.to_array() + bicycle_derivative(state, control, dt, wheel_base)
    )
