from dataclasses import replace

import pytest

from push_grid.actions import Direction, DIRECTION_DELTA, MOVE_DIRECTIONS
from push_grid.components import Shape
from push_grid.systems.push import push_system, resolve_push
from tests.test_utils import cells_of, check_shapes, make_shapes_state


@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_push_into_empty_space_shifts_by_one(direction: Direction) -> None:
    state, (agent_id,) = make_shapes_state([[(2, 2)]])
    new_state, moved = push_system(state, agent_id, direction)
    dx, dy = DIRECTION_DELTA[direction]
    assert moved
    check_shapes(new_state, {agent_id: [(2 + dx, 2 + dy)]})


def test_push_multi_cell_shape_keeps_cell_order() -> None:
    state, (_, block_id) = make_shapes_state(
        [[(0, 0)], [(4, 3), (4, 4), (5, 4)]], width=10, height=8
    )
    new_state, moved = push_system(state, block_id, Direction.UP)
    assert moved
    check_shapes(new_state, {block_id: [(4, 2), (4, 3), (5, 3)]})


def test_push_out_of_bounds_refused() -> None:
    state, (agent_id, block_id) = make_shapes_state([[(0, 2)], [(3, 3)]])
    new_state, moved = push_system(state, agent_id, Direction.LEFT)
    assert not moved
    assert new_state == state
    check_shapes(new_state, {agent_id: [(0, 2)], block_id: [(3, 3)]})


def test_push_refused_when_any_cell_leaves_board() -> None:
    state, (_, block_id) = make_shapes_state([[(4, 4)], [(1, 1), (1, 0), (2, 0)]])
    new_state, moved = push_system(state, block_id, Direction.UP)
    assert not moved
    check_shapes(new_state, {block_id: [(1, 1), (1, 0), (2, 0)]})


def test_push_chain_moves_both() -> None:
    state, (agent_id, block_id) = make_shapes_state([[(1, 2)], [(2, 2)]])
    new_state, moved = push_system(state, agent_id, Direction.RIGHT)
    assert moved
    check_shapes(new_state, {agent_id: [(2, 2)], block_id: [(3, 2)]})


def test_push_long_chain_moves_everything() -> None:
    state, ids = make_shapes_state([[(0, 0)], [(1, 0)], [(2, 0)], [(3, 0)]])
    new_state, moved = push_system(state, ids[0], Direction.RIGHT)
    assert moved
    check_shapes(
        new_state, {ids[0]: [(1, 0)], ids[1]: [(2, 0)], ids[2]: [(3, 0)], ids[3]: [(4, 0)]}
    )


def test_push_chain_through_multi_cell_block() -> None:
    # Agent hits the L block's top cell; the block's foot hits the small block.
    state, (agent_id, l_id, small_id) = make_shapes_state(
        [[(1, 1)], [(2, 1), (2, 2), (3, 2)], [(4, 2)]], width=6
    )
    new_state, moved = push_system(state, agent_id, Direction.RIGHT)
    assert moved
    check_shapes(
        new_state,
        {agent_id: [(2, 1)], l_id: [(3, 1), (3, 2), (4, 2)], small_id: [(5, 2)]},
    )


def test_push_blocked_chain_rolls_back() -> None:
    state, (a_id, b_id, c_id) = make_shapes_state(
        [[(1, 0)], [(2, 0)], [(3, 0)]], width=4, height=1
    )
    new_state, moved = push_system(state, a_id, Direction.RIGHT)
    assert not moved
    check_shapes(new_state, {a_id: [(1, 0)], b_id: [(2, 0)], c_id: [(3, 0)]})
    assert new_state.shape == state.shape


def test_push_mutual_overlap_terminates() -> None:
    # B overlaps A at rest, so each one's shifted shape lands on the other.
    state, (a_id, b_id) = make_shapes_state([[(1, 0)], [(2, 0), (1, 0)]])
    new_state, moved = push_system(state, a_id, Direction.RIGHT)
    assert moved
    check_shapes(new_state, {a_id: [(2, 0)], b_id: [(3, 0), (2, 0)]})


def test_push_overlap_ring_moves_each_entity_once() -> None:
    state, (a_id, b_id, c_id) = make_shapes_state(
        [[(0, 1)], [(1, 1), (0, 1)], [(2, 1), (1, 1)]]
    )
    new_state, moved = push_system(state, a_id, Direction.RIGHT)
    assert moved
    check_shapes(
        new_state,
        {a_id: [(1, 1)], b_id: [(2, 1), (1, 1)], c_id: [(3, 1), (2, 1)]},
    )


def test_push_entity_reached_twice_is_resolved_once() -> None:
    # A lands on both B and C; B's shift also lands on C. C must move only once.
    state, (a_id, b_id, c_id) = make_shapes_state(
        [[(0, 0), (0, 1)], [(1, 0)], [(1, 1), (2, 0)]], width=6
    )
    new_state, moved = push_system(state, a_id, Direction.RIGHT)
    assert moved
    check_shapes(
        new_state,
        {a_id: [(1, 0), (1, 1)], b_id: [(2, 0)], c_id: [(2, 1), (3, 0)]},
    )


def test_push_sibling_commit_survives_later_refusal() -> None:
    # A's shifted cells land on B (free to move) and on C (at the left edge).
    # B is registered before C, so it commits before C refuses.
    state, (a_id, b_id, c_id) = make_shapes_state(
        [[(3, 1), (1, 2)], [(2, 1)], [(0, 2)]]
    )
    new_state, moved = push_system(state, a_id, Direction.LEFT)
    assert not moved
    check_shapes(
        new_state,
        {a_id: [(3, 1), (1, 2)], b_id: [(1, 1)], c_id: [(0, 2)]},
    )


def test_push_registration_order_decides_which_sibling_runs_first() -> None:
    # Same board as above but C is registered before B: C refuses first and B
    # is never inspected.
    state, (a_id, c_id, b_id) = make_shapes_state(
        [[(3, 1), (1, 2)], [(0, 2)], [(2, 1)]]
    )
    new_state, moved = push_system(state, a_id, Direction.LEFT)
    assert not moved
    check_shapes(
        new_state,
        {a_id: [(3, 1), (1, 2)], b_id: [(2, 1)], c_id: [(0, 2)]},
    )


def test_push_resting_overlap_not_dragged() -> None:
    # Overlap at rest only matters if the mover's new cells hit the other shape.
    state, (a_id, b_id) = make_shapes_state([[(1, 1)], [(1, 1)]])
    new_state, moved = push_system(state, a_id, Direction.RIGHT)
    assert moved
    check_shapes(new_state, {a_id: [(2, 1)], b_id: [(1, 1)]})


def test_push_empty_shape_moves_vacuously() -> None:
    state, (agent_id, empty_id) = make_shapes_state([[(0, 0)], []])
    new_state, moved = push_system(state, empty_id, Direction.LEFT)
    assert moved
    assert cells_of(new_state, empty_id) == []
    check_shapes(new_state, {agent_id: [(0, 0)]})


def test_push_empty_shape_never_blocks() -> None:
    state, (agent_id, empty_id) = make_shapes_state([[(1, 1)], []])
    new_state, moved = push_system(state, agent_id, Direction.LEFT)
    assert moved
    check_shapes(new_state, {agent_id: [(0, 1)], empty_id: []})


def test_push_duplicate_cells_shift_together() -> None:
    state, (agent_id,) = make_shapes_state([[(1, 1), (1, 1)]])
    new_state, moved = push_system(state, agent_id, Direction.DOWN)
    assert moved
    check_shapes(new_state, {agent_id: [(1, 2), (1, 2)]})


def test_push_unknown_entity() -> None:
    state, _ = make_shapes_state([[(1, 1)]])
    new_state, moved = push_system(state, 99, Direction.DOWN)
    assert not moved
    assert new_state is state


def test_push_consecutive_calls_start_fresh() -> None:
    state, (agent_id, block_id) = make_shapes_state([[(0, 0)], [(1, 0)]])
    state, first = push_system(state, agent_id, Direction.RIGHT)
    state, second = push_system(state, agent_id, Direction.RIGHT)
    assert first and second
    check_shapes(state, {agent_id: [(2, 0)], block_id: [(3, 0)]})


def test_resolve_push_records_visited_entities() -> None:
    state, (a_id, b_id, c_id) = make_shapes_state([[(0, 0)], [(1, 0)], [(4, 4)]])
    visited: set[int] = set()
    _, moved = resolve_push(state, a_id, Direction.RIGHT, visited)
    assert moved
    assert visited == {a_id, b_id}


def test_resolve_push_skips_already_visited() -> None:
    # A pre-visited blocker is treated as already handled and is not pushed.
    state, (a_id, b_id) = make_shapes_state([[(0, 0)], [(1, 0)]])
    new_state, moved = resolve_push(state, a_id, Direction.RIGHT, {b_id})
    assert moved
    check_shapes(new_state, {a_id: [(1, 0)], b_id: [(1, 0)]})


def test_push_does_not_touch_other_stores() -> None:
    state, (agent_id, block_id) = make_shapes_state([[(0, 0)], [(1, 0)]])
    state = replace(state, message="hello")
    new_state, _ = push_system(state, agent_id, Direction.DOWN)
    assert new_state.agent == state.agent
    assert new_state.block == state.block
    assert new_state.message == "hello"
    assert new_state.shape[block_id] == Shape.of([(1, 0)])
