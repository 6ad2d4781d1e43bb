"""Tests for the layout engine and partial relayout."""

import pytest

from mindmap.config import get_layout_config
from mindmap.layout import compute_layout, compute_subtree_widths, relayout
from mindmap.models.layout import LayoutConfig, LayoutDirection, Position
from mindmap.models.semantic_tree import NodeKind, SemanticNode, SemanticTree
from mindmap.models.view_state import NodeViewState, ViewState
from mindmap.state.view_model import initialize_view_state, set_position, toggle_collapsed

CONFIG = LayoutConfig(node_width=200, node_height=60, horizontal_gap=80, vertical_gap=100)


def make_tree(structure: dict[str, list[str]], root_id: str = "R") -> SemanticTree:
    """Build a tree from {node_id: [child ids]}; ids only seen as children become leaves."""
    ids = list(structure)
    for children in structure.values():
        ids.extend(child for child in children if child not in ids)
    nodes = {
        node_id: SemanticNode(
            id=node_id,
            label=node_id,
            kind=NodeKind.topic,
            children=structure.get(node_id) or None,
        )
        for node_id in ids
    }
    return SemanticTree(root_id=root_id, nodes=nodes)


def scenario_tree() -> SemanticTree:
    return make_tree({"R": ["A", "B"], "A": ["C", "D"]})


def uneven_tree() -> SemanticTree:
    return make_tree({
        "R": ["A", "B", "C"],
        "A": ["A1"],
        "B": ["B1", "B2", "B3"],
        "B2": ["B2a", "B2b"],
        "C": ["C1", "C2"],
        "C2": ["C2a"],
    })


@pytest.fixture
def narrow_nodes(monkeypatch):
    """Environment default of 100-wide nodes, everything else at its default."""
    for name in ("MINDMAP_NODE_HEIGHT", "MINDMAP_HORIZONTAL_GAP",
                 "MINDMAP_VERTICAL_GAP", "MINDMAP_LAYOUT_DIRECTION"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("MINDMAP_NODE_WIDTH", "100")
    return monkeypatch


def _subtree_span(tree: SemanticTree, positions: dict[str, Position], node_id: str, half: float):
    xs = [positions[n].x for n in tree.iter_preorder(node_id)]
    return min(xs) - half, max(xs) + half


class TestSubtreeWidths:
    def test_scenario_widths(self):
        """R[A[C, D], B] with width 200 and gap 80."""
        widths = compute_subtree_widths(scenario_tree(), CONFIG)
        assert widths["C"] == 200
        assert widths["D"] == 200
        assert widths["A"] == 480
        assert widths["B"] == 200
        assert widths["R"] == 760

    def test_single_child_collapses_to_node_width(self):
        widths = compute_subtree_widths(make_tree({"R": ["A"]}), CONFIG)
        assert widths["R"] == 200

    def test_left_to_right_uses_node_height(self):
        """Transposed layouts measure breadth in node heights."""
        config = CONFIG.model_copy(update={"direction": LayoutDirection.left_to_right})
        widths = compute_subtree_widths(scenario_tree(), config)
        assert widths["C"] == 60
        assert widths["A"] == 200
        assert widths["R"] == 340


class TestComputeLayout:
    def test_scenario_positions(self):
        """Children ordered left to right, root centred at x=0."""
        positions = compute_layout(scenario_tree(), CONFIG).positions
        assert positions["R"].x == 0
        assert positions["C"].x < positions["D"].x < positions["B"].x
        assert positions["C"] == Position(x=-280, y=160)
        assert positions["D"] == Position(x=0, y=160)
        assert positions["A"] == Position(x=-140, y=0)
        assert positions["B"] == Position(x=280, y=0)
        assert positions["R"] == Position(x=0, y=-160)

    def test_levels_step_by_height_plus_gap(self):
        positions = compute_layout(scenario_tree(), CONFIG).positions
        assert positions["A"].y - positions["R"].y == 160
        assert positions["C"].y - positions["A"].y == 160
        assert positions["A"].y == positions["B"].y

    def test_left_to_right_transposes_axes(self):
        config = CONFIG.model_copy(update={"direction": LayoutDirection.left_to_right})
        positions = compute_layout(scenario_tree(), config).positions
        assert positions["R"] == Position(x=-300, y=0)
        assert positions["A"] == Position(x=0, y=-70)
        assert positions["B"] == Position(x=0, y=140)
        assert positions["C"] == Position(x=300, y=-140)
        assert positions["D"] == Position(x=300, y=0)

    def test_single_node_at_origin(self):
        result = compute_layout(make_tree({"R": []}), CONFIG)
        assert result.positions == {"R": Position(x=0, y=0)}
        assert result.bounds.min_x == result.bounds.max_x == 0

    def test_every_node_positioned(self):
        tree = uneven_tree()
        positions = compute_layout(tree, CONFIG).positions
        assert set(positions) == set(tree.nodes)

    def test_idempotent(self):
        """Two calls produce byte-identical output."""
        first = compute_layout(uneven_tree(), CONFIG)
        second = compute_layout(uneven_tree(), CONFIG)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    @pytest.mark.parametrize("tree_factory", [scenario_tree, uneven_tree])
    def test_centered_on_origin(self, tree_factory):
        """The bounding box centre of all positions is the origin."""
        result = compute_layout(tree_factory(), CONFIG)
        xs = [p.x for p in result.positions.values()]
        ys = [p.y for p in result.positions.values()]
        assert (min(xs) + max(xs)) / 2 == pytest.approx(0)
        assert (min(ys) + max(ys)) / 2 == pytest.approx(0)
        assert result.bounds.center.x == pytest.approx(0)
        assert result.bounds.center.y == pytest.approx(0)

    @pytest.mark.parametrize("tree_factory", [scenario_tree, uneven_tree])
    def test_sibling_subtrees_do_not_overlap(self, tree_factory):
        """Adjacent sibling subtrees keep at least the sibling gap between them."""
        tree = tree_factory()
        positions = compute_layout(tree, CONFIG).positions
        half = CONFIG.node_width / 2
        for node_id in tree.iter_preorder():
            children = tree.children_of(node_id)
            for left, right in zip(children, children[1:]):
                _, left_max = _subtree_span(tree, positions, left, half)
                right_min, _ = _subtree_span(tree, positions, right, half)
                assert left_max + CONFIG.horizontal_gap <= right_min + 1e-9

    @pytest.mark.parametrize("tree_factory", [scenario_tree, uneven_tree])
    def test_left_to_right_sibling_subtrees_do_not_overlap(self, tree_factory):
        """Sideways trees stack siblings along y using the node height."""
        tree = tree_factory()
        config = CONFIG.model_copy(update={"direction": LayoutDirection.left_to_right})
        positions = compute_layout(tree, config).positions
        half = config.node_height / 2
        for node_id in tree.iter_preorder():
            children = tree.children_of(node_id)
            for upper, lower in zip(children, children[1:]):
                upper_ys = [positions[n].y for n in tree.iter_preorder(upper)]
                lower_ys = [positions[n].y for n in tree.iter_preorder(lower)]
                assert max(upper_ys) + half + config.horizontal_gap <= min(lower_ys) - half + 1e-9

    def test_ignores_view_state(self):
        """Layout is a function of tree and config only."""
        tree = uneven_tree()
        before = compute_layout(tree, CONFIG)
        state = initialize_view_state(tree, CONFIG)
        moved = set_position(state, "B2", 999, 999).state
        moved = toggle_collapsed(moved, "B").state
        assert moved.node_state["B2"].locked
        assert compute_layout(tree, CONFIG) == before

        result = relayout(tree, moved, CONFIG)
        assert result.node_state["B2"].pos == Position(x=999, y=999)
        for node_id, node in result.node_state.items():
            if node_id != "B2":
                assert node.pos == before.positions[node_id]

    def test_uses_environment_config_by_default(self, narrow_nodes):
        tree = scenario_tree()
        positions = compute_layout(tree).positions
        assert positions["A"].x == -90
        assert positions == compute_layout(tree, get_layout_config()).positions


class TestRelayout:
    def _dragged_state(self) -> ViewState:
        tree = uneven_tree()
        state = initialize_view_state(tree, CONFIG)
        state = set_position(state, "B2", 1234.5, -987.25).state
        state = set_position(state, "C", -50, 40).state
        state = toggle_collapsed(state, "A").state
        return state

    def test_locked_nodes_keep_position(self):
        """Locked positions survive relayout exactly."""
        state = self._dragged_state()
        result = relayout(uneven_tree(), state, CONFIG)
        assert result.node_state["B2"].pos == Position(x=1234.5, y=-987.25)
        assert result.node_state["C"].pos == Position(x=-50, y=40)
        assert result.node_state["B2"].locked

    def test_unlocked_nodes_match_fresh_layout(self):
        """Unlocked nodes land exactly where a from-scratch layout puts them."""
        tree = uneven_tree()
        state = self._dragged_state()
        fresh = compute_layout(tree, CONFIG).positions
        result = relayout(tree, state, CONFIG)
        for node_id, node in result.node_state.items():
            if not node.locked:
                assert node.pos == fresh[node_id]

    def test_unlocked_children_of_locked_parent_not_perturbed(self):
        """Children of a moved node still follow the global layout."""
        tree = uneven_tree()
        result = relayout(tree, self._dragged_state(), CONFIG)
        fresh = compute_layout(tree, CONFIG).positions
        assert result.node_state["B2a"].pos == fresh["B2a"]
        assert result.node_state["C1"].pos == fresh["C1"]

    def test_carries_collapse_and_viewport(self):
        state = self._dragged_state()
        result = relayout(uneven_tree(), state, CONFIG)
        assert result.node_state["A"].collapsed
        assert result.viewport == state.viewport

    def test_moves_stale_unlocked_positions(self):
        """An unlocked node at a stale position is moved back."""
        tree = scenario_tree()
        state = ViewState(node_state={
            node_id: NodeViewState(pos=Position(x=5, y=5)) for node_id in tree.nodes
        })
        result = relayout(tree, state, CONFIG)
        assert result.node_state["C"].pos == Position(x=-280, y=160)

    def test_missing_entry_gets_fresh_unlocked_position(self):
        tree = scenario_tree()
        state = initialize_view_state(tree, CONFIG)
        entries = dict(state.node_state)
        del entries["D"]
        result = relayout(tree, ViewState(node_state=entries), CONFIG)
        assert result.node_state["D"].pos == Position(x=0, y=160)
        assert not result.node_state["D"].locked
        assert not result.node_state["D"].collapsed

    def test_drops_entries_for_unknown_nodes(self):
        tree = scenario_tree()
        state = initialize_view_state(tree, CONFIG)
        stale = ViewState(node_state={**state.node_state, "gone": NodeViewState(locked=True)})
        result = relayout(tree, stale, CONFIG)
        assert "gone" not in result.node_state
        assert set(result.node_state) == set(tree.nodes)

    def test_default_config_keeps_initial_layout(self, narrow_nodes):
        """Without an explicit config, relayout agrees with the initial layout."""
        tree = scenario_tree()
        state = initialize_view_state(tree)
        result = relayout(tree, state)
        assert result.node_state["A"].pos.x == -90
        assert result.positions() == state.positions()

    def test_does_not_modify_input(self):
        state = self._dragged_state()
        snapshot = state.model_dump()
        relayout(uneven_tree(), state, CONFIG)
        assert state.model_dump() == snapshot
