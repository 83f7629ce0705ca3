"""
Collision shapes for vehicles

The simulator only relies on the VehicleShape capability set. ShapelyRectangle
is the concrete adapter backed by shapely polygons.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

import numpy as np
import plotly.graph_objs as go
from shapely import affinity
from shapely.geometry import Polygon, box


class VehicleShape(ABC):
    """Oriented rectangle supporting move, rotate and overlap queries"""

    @property
    @abstractmethod
    def center(self) -> Tuple[float, float]:
        """Centroid of the shape"""

    @property
    @abstractmethod
    def angle(self) -> float:
        """Rotation accumulated since creation (rad)"""

    @abstractmethod
    def move_to(self, x: float, y: float) -> None:
        """Move the centroid to an absolute position"""

    @abstractmethod
    def rotate(self, delta: float) -> None:
        """Rotate about the centroid by a relative angle (rad)"""

    @abstractmethod
    def overlaps(self, other: "VehicleShape") -> bool:
        """Whether this shape intersects another"""

    @abstractmethod
    def corners(self) -> np.ndarray:
        """Current corner points as an (n, 2) array"""

    @abstractmethod
    def draw(self, **style: Any) -> Any:
        """Presentation object for a host renderer"""


class ShapelyRectangle(VehicleShape):
    """Rectangle collision shape backed by a shapely Polygon"""

    def __init__(self, polygon: Polygon) -> None:
        self._polygon = polygon
        self._angle = 0.0

    @classmethod
    def from_corner(cls, x: float, y: float, width: float, length: float) -> "ShapelyRectangle":
        """
        Axis-aligned rectangle with its minimum corner at (x, y)

        Args:
            x: Corner x position
            y: Corner y position
            width: Extent along x
            length: Extent along y
        """
        return cls(box(x, y, x + width, y + length))

    @property
    def polygon(self) -> Polygon:
        return self._polygon

    @property
    def center(self) -> Tuple[float, float]:
        centroid = self._polygon.centroid
        return centroid.x, centroid.y

    @property
    def angle(self) -> float:
        return self._angle

    def move_to(self, x: float, y: float) -> None:
        cx, cy = self.center
        self._polygon = affinity.translate(self._polygon, xoff=x - cx, yoff=y - cy)

    def rotate(self, delta: float) -> None:
        self._polygon = affinity.rotate(
            self._polygon, delta, origin="centroid", use_radians=True
        )
        self._angle += delta

    def overlaps(self, other: VehicleShape) -> bool:
        if isinstance(other, ShapelyRectangle):
            return self._polygon.intersects(other.polygon)
        return self._polygon.intersects(Polygon(other.corners()))

    def corners(self) -> np.ndarray:
        # Exterior ring repeats the first point
        return np.asarray(self._polygon.exterior.coords)[:-1]

    def draw(self, **style: Any) -> go.Scatter:
        """
        Filled polygon trace of the current footprint

        Args:
            **style: Extra go.Scatter keyword arguments (name, fillcolor, ...)

        Returns:
            Plotly scatter trace
        """
        xs, ys = self._polygon.exterior.xy
        trace_style = dict(mode="lines", fill="toself")
        trace_style.update(style)
        return go.Scatter(x=list(xs), y=list(ys), **trace_style)
