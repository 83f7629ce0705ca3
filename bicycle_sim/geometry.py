"""
Oriented rectangle approximation of the vehicle footprint
"""

import numpy as np

from bicycle_sim.params import VehicleGeometry


def compute_corners(
    x: float, y: float, theta: float, width: float, length: float, wheel_base: float
) -> np.ndarray:
    """
    Box approximation to the vehicle frame

    The pose refers to the front axle centre, so the box is offset by the
    overhang beyond the axles.

    Args:
        x: Scaled x position
        y: Scaled y position
        theta: Heading (rad)
        width: Scaled vehicle width
        length: Scaled vehicle length
        wheel_base: Scaled wheel base

    Returns:
        (4, 2) array of top-left, bottom-left, top-right, bottom-right corners
    """
    half_width = width / 2
    overhang = (length - wheel_base) / 2
    sin_t = np.sin(theta)
    cos_t = np.cos(theta)

    x_tl = x - sin_t * overhang - cos_t * half_width
    y_tl = y - cos_t * overhang + sin_t * half_width
    x_bl = x_tl + cos_t * width
    y_bl = y_tl - sin_t * width
    x_tr = x_tl + sin_t * width
    y_tr = y_tl + cos_t * width
    x_br = x_bl + sin_t * length
    y_br = y_bl + cos_t * length

    return np.array([
        [x_tl, y_tl],
        [x_bl, y_bl],
        [x_tr, y_tr],
        [x_br, y_br],
    ])


def vehicle_corners(
    x: float, y: float, theta: float, geometry: VehicleGeometry
) -> np.ndarray:
    """Corners for a pose already expressed in display units"""
    return compute_corners(x, y, theta, geometry.width, geometry.length, geometry.wheel_base)
