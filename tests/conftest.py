"""
Shared fixtures
"""

from typing import Hashable, List, Sequence, Tuple

import numpy as np
import pytest

from bicycle_sim import Environment, SimulatorConfig, VehicleShape


class FakeEnvironment(Environment):
    """Environment with scripted reward and validity, recording every call"""

    def __init__(
        self,
        scenario=((0.0, 0.0, 0.0, 5.0), (10.0, 0.0, np.pi, 2.0)),
        reward_value: float = 1.0,
        terminal: bool = False,
        ego_valid: bool = True,
        obstacle_valid: bool = True,
    ) -> None:
        self.scenario = scenario
        self.reward_value = reward_value
        self.terminal = terminal
        self.ego_valid = ego_valid
        self.obstacle_valid = obstacle_valid
        self.scenario_requests: List[Hashable] = []
        self.reward_calls: List[Tuple[VehicleShape, VehicleShape, Sequence[float]]] = []
        self.validity_calls: List[Tuple[Tuple[float, float], VehicleShape]] = []
        self.ego_shape = None

    def get_scenario(self, scenario_id):
        self.scenario_requests.append(scenario_id)
        return self.scenario

    def reward(self, ego_shape, obstacle_shape, actions):
        self.reward_calls.append((ego_shape, obstacle_shape, list(actions)))
        self.ego_shape = ego_shape
        return self.reward_value, self.terminal

    def is_valid(self, position, shape):
        self.validity_calls.append((tuple(position), shape))
        if self.ego_shape is not None and shape is self.ego_shape:
            return self.ego_valid
        return self.obstacle_valid


@pytest.fixture
def config() -> SimulatorConfig:
    """Simulator configuration with unit scale"""
    return SimulatorConfig(
        scale=1.0,
        trajectory_length=20,
        vehicle_length=4.0,
        vehicle_width=2.0,
        wheel_base=2.5,
        dt=0.1,
        scenario="test",
    )


@pytest.fixture
def environment() -> FakeEnvironment:
    """Environment where both vehicles may always move"""
    return FakeEnvironment()


@pytest.fixture
def make_environment():
    """Factory for scripted environments"""
    return FakeEnvironment
