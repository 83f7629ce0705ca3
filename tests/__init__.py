"""
Test suite for the two-vehicle kinematic simulation.

This package contains unit tests organized by component:
- test_params.py: Tests for SimulatorConfig and VehicleGeometry
- test_state.py: Tests for state vectors, scenarios and actions
- test_dynamics.py: Tests for the kinematic bicycle model
- test_geometry.py: Tests for the vehicle corner computation
- test_shapes.py: Tests for the shapely rectangle adapter
- test_simulator.py: Tests for the step protocol
- test_environment.py: Tests for the bounded arena environment
- test_integration.py: Integration tests for full rollouts
"""
