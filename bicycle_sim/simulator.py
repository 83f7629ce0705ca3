"""
Two-vehicle simulator

State vector:
    [x1, y1, theta1, v1, x2, y2, theta2, v2]

x, y is the front axle centre of the ego (1) and obstacle (2) vehicle in
meters, theta the heading in radians and v the velocity in m/s. Shapes live
in display units (meters * scale).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence, Tuple

import numpy as np

from bicycle_sim.dynamics import bicycle_step
from bicycle_sim.environment import Environment
from bicycle_sim.geometry import vehicle_corners
from bicycle_sim.params import SimulatorConfig, VehicleGeometry
from bicycle_sim.shapes import ShapelyRectangle, VehicleShape
from bicycle_sim.state import (
    EGO_SLICE,
    OBSTACLE_SLICE,
    ControlInput,
    VehicleState,
    scenario_to_state,
    split_actions,
)

logger = logging.getLogger(__name__)

Policy = Callable[[np.ndarray], Sequence[float]]


class SimulationTerminatedError(RuntimeError):
    """Raised when stepping a simulator whose episode has ended"""


class SimulatorStatus(Enum):
    RUNNING = "running"
    TERMINAL = "terminal"


@dataclass
class Trajectory:
    """Result of a rollout"""

    states: np.ndarray  # (n + 1, 8), initial state first
    actions: np.ndarray  # (n, 4)
    rewards: np.ndarray  # (n,)
    terminal: bool

    @property
    def total_reward(self) -> float:
        return float(np.sum(self.rewards))

    def __len__(self) -> int:
        return len(self.rewards)


class Simulator:
    """Advances the ego and obstacle vehicles with a kinematic bicycle model"""

    def __init__(self, config: SimulatorConfig, environment: Environment) -> None:
        """
        Initialize simulator

        Args:
            config: Simulation parameters
            environment: Scenario source, reward function and validity check
        """
        if environment is None:
            msg = "Simulator requires an environment"
            raise ValueError(msg)

        self.config = config
        self.env = environment
        self.scale = config.scale
        self.dt = config.dt
        self.trajectory_length = config.trajectory_length
        self.geometry: VehicleGeometry = config.geometry()
        # Integrator works in meters
        self.unscaled_wheel_base = self.geometry.wheel_base / self.scale
        self.status = SimulatorStatus.RUNNING

        self._state = scenario_to_state(environment.get_scenario(config.scenario))

        # Shapes start at the bottom-left corner, rotated to the absolute heading
        corners = self.compute_corners()
        self.ego_shape = self._create_shape(corners[0], self._state[2])
        self.obstacle_shape = self._create_shape(corners[1], self._state[6])

        logger.info(
            "Simulator created for scenario %r (length=%.3f, width=%.3f, wheel_base=%.3f, dt=%.3f)",
            config.scenario,
            self.geometry.length,
            self.geometry.width,
            self.geometry.wheel_base,
            self.dt,
        )

    def _create_shape(self, corners: np.ndarray, theta: float) -> VehicleShape:
        x_bl, y_bl = corners[1]
        shape = ShapelyRectangle.from_corner(
            x_bl, y_bl, self.geometry.width, self.geometry.length
        )
        shape.rotate(float(theta))
        return shape

    @property
    def is_terminal(self) -> bool:
        return self.status is SimulatorStatus.TERMINAL

    def state(self) -> np.ndarray:
        """Copy of the joint state vector"""
        return self._state.copy()

    def compute_corners(self) -> np.ndarray:
        """
        Rectangular approximation of each vehicle in display units

        Returns:
            (2, 4, 2) array, ego first, corners ordered top-left, bottom-left,
            top-right, bottom-right
        """
        return np.stack([
            vehicle_corners(
                self._state[block][0] * self.scale,
                self._state[block][1] * self.scale,
                self._state[block][2],
                self.geometry,
            )
            for block in (EGO_SLICE, OBSTACLE_SLICE)
        ])

    def draw_ego_vehicle(self, **style: Any) -> Any:
        return self.ego_shape.draw(**style)

    def draw_obstacle_vehicle(self, **style: Any) -> Any:
        return self.obstacle_shape.draw(**style)

    def step(self, actions: Sequence[float]) -> Tuple[float, bool]:
        """
        Apply an acceleration and steering angle to each vehicle

        The reward is observed for the configuration before the update. No
        vehicle moves on a terminal step.

        Args:
            actions: [acc_ego, psi_ego, acc_obstacle, psi_obstacle]

        Returns:
            Tuple of (reward, is_terminal)
        """
        if self.is_terminal:
            msg = "Episode has terminated; create a new Simulator to continue"
            raise SimulationTerminatedError(msg)

        ego_control, obstacle_control = split_actions(actions)
        reward, is_terminal = self.env.reward(self.ego_shape, self.obstacle_shape, actions)
        if is_terminal:
            self.status = SimulatorStatus.TERMINAL
            logger.info("Episode terminated with reward %s", reward)
            return reward, True

        self._update_vehicle(EGO_SLICE, self.ego_shape, ego_control, "ego")
        self._update_vehicle(OBSTACLE_SLICE, self.obstacle_shape, obstacle_control, "obstacle")
        return reward, False

    def _update_vehicle(
        self, block: slice, shape: VehicleShape, control: ControlInput, name: str
    ) -> None:
        """Integrate one vehicle if the environment allows it to move"""
        old = VehicleState.from_array(self._state[block])
        if not self.env.is_valid((old.x, old.y), shape):
            logger.debug("%s vehicle at (%.3f, %.3f) is not valid, state frozen", name, old.x, old.y)
            return

        new = bicycle_step(old, control, self.dt, self.unscaled_wheel_base)
        self._state[block] = new.to_array()

        shape.move_to(new.x * self.scale, new.y * self.scale)
        if self.config.resync_rotation:
            shape.rotate(new.theta - shape.angle)
        else:
            shape.rotate(new.theta - old.theta)

    def rollout(self, policy: Policy) -> Trajectory:
        """
        Run up to trajectory_length steps

        Args:
            policy: Maps a state snapshot to [acc_ego, psi_ego, acc_obstacle, psi_obstacle]

        Returns:
            Trajectory with the visited states, applied actions and rewards
        """
        states = [self.state()]
        actions_taken = []
        rewards = []
        terminal = False

        for i in range(self.trajectory_length):
            actions = [float(a) for a in policy(self.state())]
            reward, terminal = self.step(actions)
            actions_taken.append(actions)
            rewards.append(reward)
            states.append(self.state())
            if terminal:
                logger.debug("Rollout ended at step %d", i)
                break

        return Trajectory(
            states=np.array(states),
            actions=np.array(actions_taken, dtype=np.float64).reshape(-1, 4),
            rewards=np.array(rewards, dtype=np.float64),
            terminal=terminal,
        )
