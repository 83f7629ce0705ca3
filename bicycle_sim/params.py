"""
Simulator configuration and vehicle geometry
"""

from dataclasses import dataclass
from typing import Hashable


class ConfigurationError(ValueError):
    """Raised when simulator configuration or scenario data is malformed"""


@dataclass(frozen=True)
class VehicleGeometry:
    """Vehicle footprint in display/collision units (physical size * scale)"""

    length: float
    width: float
    wheel_base: float

    @property
    def overhang(self) -> float:
        """Length the body extends beyond the axles at each end"""
        return (self.length - self.wheel_base) / 2


@dataclass
class SimulatorConfig:
    """Configuration of a two-vehicle simulation"""

    scale: float = 1.0  # display units per meter
    trajectory_length: int = 100  # max steps per rollout
    vehicle_length: float = 4.5  # m
    vehicle_width: float = 1.8  # m
    wheel_base: float = 2.7  # m
    dt: float = 0.1  # s
    scenario: Hashable = 1
    # Rotate shapes to the absolute heading each step instead of by the delta
    resync_rotation: bool = False

    def __post_init__(self) -> None:
        """Validate parameters"""
        for name in ("scale", "dt", "vehicle_length", "vehicle_width", "wheel_base"):
            value = getattr(self, name)
            if not value > 0:
                msg = f"{name} must be positive, got {value!r}"
                raise ConfigurationError(msg)
        if self.trajectory_length < 1:
            msg = f"trajectory_length must be at least 1, got {self.trajectory_length!r}"
            raise ConfigurationError(msg)

    def geometry(self) -> VehicleGeometry:
        """Vehicle geometry scaled to display units"""
        return VehicleGeometry(
            length=self.vehicle_length * self.scale,
            width=self.vehicle_width * self.scale,
            wheel_base=self.wheel_base * self.scale,
        )
