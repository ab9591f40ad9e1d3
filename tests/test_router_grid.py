"""Tests for router/grid.py module."""

import pytest

from schemroute.exceptions import ConfigurationError
from schemroute.router.grid import (
    build_obstacle_map,
    component_cells,
    from_grid,
    point_to_grid,
    to_grid,
)
from schemroute.router.rules import RoutingRules
from schemroute.schema import ComponentKind, SchematicNode


class TestQuantization:
    """Tests for coordinate conversion."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (14, 1), (15, 2), (-14, -1), (-15, -1), (-16, -2), (100, 10)],
    )
    def test_to_grid_rounds_to_nearest(self, value, expected):
        assert to_grid(value, 10) == expected

    def test_from_grid(self):
        assert from_grid(3, 10) == 30
        assert from_grid(-2, 2.5) == -5.0

    def test_point_to_grid(self):
        assert point_to_grid(41, -19, 10) == (4, -2)


class TestComponentCells:
    """Tests for footprint rasterization."""

    def test_capacitor_footprint(self):
        cells = set(component_cells(50, 0, 40, 40, 10))
        assert len(cells) == 25
        assert min(x for x, _ in cells) == 3
        assert max(x for x, _ in cells) == 7
        assert min(y for _, y in cells) == -2
        assert max(y for _, y in cells) == 2

    def test_half_extents_round_up(self):
        """A 30-unit wide body (1.5 cells each side) covers 2 cells each side."""
        cells = set(component_cells(0, 0, 30, 10, 10))
        assert {x for x, _ in cells} == {-2, -1, 0, 1, 2}
        assert {y for _, y in cells} == {-1, 0, 1}

    def test_zero_size_footprint_covers_center(self):
        assert list(component_cells(20, 20, 0, 0, 10)) == [(2, 2)]


class TestBuildObstacleMap:
    """Tests for the obstacle-map builder."""

    @pytest.fixture
    def nodes(self):
        return [
            SchematicNode(id="R1", kind=ComponentKind.RESISTOR, x=0, y=0),
            SchematicNode(id="C1", kind=ComponentKind.CAPACITOR, x=50, y=0),
        ]

    def test_resistor_cells(self):
        obstacles = build_obstacle_map(
            [SchematicNode(id="R1", kind=ComponentKind.RESISTOR, x=0, y=0)]
        )
        # 80x20 -> half extents 4 x 1 cells
        assert len(obstacles) == 9 * 3
        assert (4, 1) in obstacles
        assert (5, 0) not in obstacles

    def test_overlapping_components_union(self, nodes):
        obstacles = build_obstacle_map(nodes)
        r1 = set(component_cells(0, 0, 80, 20, 10))
        c1 = set(component_cells(50, 0, 40, 40, 10))
        assert obstacles == r1 | c1

    def test_rotation_ignored(self):
        upright = build_obstacle_map([SchematicNode("R1", ComponentKind.RESISTOR, 0, 0)])
        rotated = build_obstacle_map(
            [SchematicNode("R1", ComponentKind.RESISTOR, 0, 0, rotation=90)]
        )
        assert upright == rotated

    def test_deterministic_and_order_independent(self, nodes):
        assert build_obstacle_map(nodes) == build_obstacle_map(list(reversed(nodes)))

    def test_returns_immutable_set(self, nodes):
        assert isinstance(build_obstacle_map(nodes), frozenset)

    def test_empty(self):
        assert build_obstacle_map([]) == frozenset()

    def test_custom_pitch(self):
        rules = RoutingRules(grid_pitch=20)
        obstacles = build_obstacle_map(
            [SchematicNode("C1", ComponentKind.CAPACITOR, 0, 0)], rules
        )
        # 40x40 at pitch 20 -> one cell each side
        assert len(obstacles) == 9


class TestRoutingRules:
    def test_defaults(self):
        rules = RoutingRules()
        assert rules.grid_pitch == 10.0
        assert rules.escape_distance == 2
        assert rules.turn_penalty == 10.0
        assert rules.cost_step == 1.0
        assert rules.max_expansions == 3000

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grid_pitch": 0},
            {"escape_distance": -1},
            {"turn_penalty": -5},
            {"cost_step": 0},
            {"max_expansions": 0},
        ],
    )
    def test_invalid_rules_rejected(self, kwargs):
        with pytest.raises(ConfigurationError):
            RoutingRules(**kwargs)
