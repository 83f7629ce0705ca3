"""
Environment interface consumed by the simulator, plus a bounded arena
environment used by the dashboard
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Hashable, Optional, Sequence, Tuple

import numpy as np

from bicycle_sim.params import ConfigurationError
from bicycle_sim.shapes import VehicleShape

Scenario = Tuple[Tuple[float, float, float, float], Tuple[float, float, float, float]]


class Environment(ABC):
    """Scenario source, reward function and validity check"""

    @abstractmethod
    def get_scenario(self, scenario_id: Hashable) -> Scenario:
        """Initial [x, y, theta, v] of the ego and obstacle vehicles"""

    @abstractmethod
    def reward(
        self, ego_shape: VehicleShape, obstacle_shape: VehicleShape, actions: Sequence[float]
    ) -> Tuple[float, bool]:
        """Reward for taking actions in the current configuration, and whether it is terminal"""

    @abstractmethod
    def is_valid(self, position: Tuple[float, float], shape: VehicleShape) -> bool:
        """Whether a vehicle at position may keep moving"""


# Ego heads north, obstacle drives across or towards it
DEFAULT_SCENARIOS: Dict[Hashable, Scenario] = {
    1: ((0.0, 0.0, np.pi, 5.0), (-10.0, -20.0, np.pi / 2, 3.0)),
    2: ((0.0, 0.0, np.pi, 5.0), (0.0, -40.0, 0.0, 5.0)),
    3: ((-3.0, 0.0, np.pi, 4.0), (3.0, -5.0, np.pi, 4.0)),
}


@dataclass
class BoundedEnvironment(Environment):
    """
    Rectangular arena

    Reward is collision_reward and terminal when the two vehicles overlap,
    otherwise the distance the ego footprint moved since the previous reward
    query. Vehicles may move while their position lies inside the arena.
    """

    x_min: float = -50.0  # m
    x_max: float = 50.0  # m
    y_min: float = -50.0  # m
    y_max: float = 50.0  # m
    collision_reward: float = -1.0
    scenarios: Dict[Hashable, Scenario] = field(default_factory=lambda: dict(DEFAULT_SCENARIOS))
    _last_ego_center: Optional[Tuple[float, float]] = field(default=None, init=False, repr=False)

    def get_scenario(self, scenario_id: Hashable) -> Scenario:
        try:
            return self.scenarios[scenario_id]
        except KeyError as exc:
            msg = f"Unknown scenario {scenario_id!r}, available: {sorted(self.scenarios, key=str)}"
            raise ConfigurationError(msg) from exc

    def reward(
        self, ego_shape: VehicleShape, obstacle_shape: VehicleShape, actions: Sequence[float]
    ) -> Tuple[float, bool]:
        center = ego_shape.center
        previous = self._last_ego_center
        self._last_ego_center = center
        if ego_shape.overlaps(obstacle_shape):
            return self.collision_reward, True
        if previous is None:
            return 0.0, False
        # Distance the ego footprint moved since the previous query
        return float(np.hypot(center[0] - previous[0], center[1] - previous[1])), False

    def is_valid(self, position: Tuple[float, float], shape: VehicleShape) -> bool:
        x, y = position
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max
