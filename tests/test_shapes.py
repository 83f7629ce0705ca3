"""
Unit tests for the shapely rectangle adapter
"""

import numpy as np
import plotly.graph_objs as go
import pytest

from bicycle_sim import ShapelyRectangle


class TestShapelyRectangle:
    """Test suite for ShapelyRectangle"""

    @pytest.fixture
    def rectangle(self) -> ShapelyRectangle:
        """2 x 4 rectangle with its minimum corner at the origin"""
        return ShapelyRectangle.from_corner(0.0, 0.0, 2.0, 4.0)

    def test_from_corner(self, rectangle: ShapelyRectangle) -> None:
        """Test that width extends along x and length along y"""
        min_x, min_y, max_x, max_y = rectangle.polygon.bounds

        assert (min_x, min_y, max_x, max_y) == (0.0, 0.0, 2.0, 4.0)
        assert rectangle.center == pytest.approx((1.0, 2.0))
        assert rectangle.angle == 0.0

    def test_move_to_positions_centroid(self, rectangle: ShapelyRectangle) -> None:
        """Test that move_to is absolute"""
        rectangle.move_to(10.0, -5.0)
        rectangle.move_to(3.0, 4.0)

        assert rectangle.center == pytest.approx((3.0, 4.0))
        assert rectangle.polygon.area == pytest.approx(8.0)

    def test_rotate_is_relative(self, rectangle: ShapelyRectangle) -> None:
        """Test that rotations accumulate about the centroid"""
        rectangle.rotate(np.pi / 4)
        rectangle.rotate(np.pi / 4)

        assert rectangle.angle == pytest.approx(np.pi / 2)
        assert rectangle.center == pytest.approx((1.0, 2.0))
        min_x, min_y, max_x, max_y = rectangle.polygon.bounds
        assert max_x - min_x == pytest.approx(4.0)
        assert max_y - min_y == pytest.approx(2.0)

    def test_overlaps(self, rectangle: ShapelyRectangle) -> None:
        """Test overlap against near and far rectangles"""
        near = ShapelyRectangle.from_corner(1.0, 3.0, 2.0, 4.0)
        far = ShapelyRectangle.from_corner(10.0, 10.0, 2.0, 4.0)

        assert rectangle.overlaps(near)
        assert near.overlaps(rectangle)
        assert not rectangle.overlaps(far)

    def test_overlap_after_rotation(self) -> None:
        """Test that a rotated rectangle reaches a neighbour it missed before"""
        long_box = ShapelyRectangle.from_corner(0.0, 0.0, 1.0, 10.0)
        neighbour = ShapelyRectangle.from_corner(4.0, 4.5, 1.0, 1.0)
        assert not long_box.overlaps(neighbour)

        long_box.rotate(np.pi / 2)

        assert long_box.overlaps(neighbour)

    def test_corners(self, rectangle: ShapelyRectangle) -> None:
        """Test that corners omit the closing point"""
        corners = rectangle.corners()

        assert corners.shape == (4, 2)
        assert {tuple(c) for c in corners} == {(0.0, 0.0), (2.0, 0.0), (2.0, 4.0), (0.0, 4.0)}

    def test_draw(self, rectangle: ShapelyRectangle) -> None:
        """Test that draw returns a filled plotly trace"""
        trace = rectangle.draw(name="Ego")

        assert isinstance(trace, go.Scatter)
        assert trace.fill == "toself"
        assert trace.name == "Ego"
        assert len(trace.x) == 5
