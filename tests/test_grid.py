# tests/test_grid.py
import pytest

from grid import (
    DEFAULT_CONFIG,
    Grid,
    GridConfig,
    NodeState,
    ValidationError,
    create_grid,
    ensure_grid,
)

from conftest import make_grid


# ---- configuration ----
def test_default_config():
    grid = create_grid()
    assert (grid.rows, grid.cols) == (20, 30)
    assert (grid.start.row, grid.start.col) == (10, 5)
    assert (grid.finish.row, grid.finish.col) == (10, 25)
    assert grid.config is DEFAULT_CONFIG


def test_config_from_camel_case_dict():
    grid = create_grid({"rows": 4, "cols": 5, "startRow": 0, "startCol": 1, "finishRow": 3, "finishCol": 4})
    assert grid.start.coord == [0, 1]
    assert grid.finish.coord == [3, 4]
    assert len(grid) == 20


@pytest.mark.parametrize("overrides", [
    {"rows": 0},
    {"cols": -2},
    {"rows": 2.5},
    {"rows": True},
    {"start_row": 9},
    {"finish_col": 30},
    {"finish_row": 0, "finish_col": 0},
])
def test_invalid_config_rejected(overrides):
    data = {"rows": 3, "cols": 3, "start_row": 0, "start_col": 0, "finish_row": 2, "finish_col": 2}
    data.update(overrides)
    with pytest.raises(ValidationError):
        create_grid(data)


def test_missing_config_key():
    with pytest.raises(ValidationError, match="finish_col"):
        GridConfig.from_dict({"rows": 3, "cols": 3, "startRow": 0, "startCol": 0, "finishRow": 2})


def test_validation_error_is_value_error():
    with pytest.raises(ValueError):
        create_grid({"rows": 0})


def test_ensure_grid_rejects_other_objects():
    with pytest.raises(ValidationError):
        ensure_grid({"rows": 3})


# ---- lookup & adjacency ----
def test_node_index_is_row_major():
    grid = make_grid(3, 4)
    node = grid.node(2, 1)
    assert node.index == 2 * 4 + 1
    assert grid.nodes[node.index] is node


def test_node_out_of_bounds():
    grid = make_grid(3, 3)
    assert grid.get(3, 0) is None
    with pytest.raises(ValidationError):
        grid.node(-1, 0)


def test_neighbor_order_up_down_left_right():
    grid = make_grid(3, 3)
    coords = [n.coord for n in grid.neighbors(grid.node(1, 1))]
    assert coords == [[0, 1], [2, 1], [1, 0], [1, 2]]


def test_corner_has_two_neighbors():
    grid = make_grid(3, 3)
    assert [n.coord for n in grid.neighbors(grid.node(0, 0))] == [[1, 0], [0, 1]]


def test_one_by_two_grid():
    grid = make_grid(1, 2)
    assert [n.coord for n in grid.neighbors(grid.start)] == [[0, 1]]
    assert grid.is_reachable()


# ---- walls ----
def test_start_and_finish_never_become_walls():
    grid = make_grid(3, 3)
    grid.start.is_wall = True
    grid.toggle_wall(grid.finish)
    grid.fill_walls()
    assert not grid.start.is_wall
    assert not grid.finish.is_wall
    assert grid.wall_count() == 7


def test_toggle_wall_at():
    grid = make_grid(3, 3)
    node = grid.toggle_wall_at(1, 1)
    assert node.is_wall
    grid.toggle_wall_at(1, 1)
    assert not node.is_wall


def test_set_walls_rejects_bad_coordinates():
    grid = make_grid(3, 3)
    with pytest.raises(ValidationError):
        grid.set_walls([[1, 1, 1]])
    with pytest.raises(ValidationError):
        grid.set_walls([[5, 5]])


@pytest.mark.parametrize("walls", [
    [5],
    [None],
    ["ab"],
    [["a", 1]],
    [[1.0, 2]],
    [[True, 1]],
    7,
])
def test_set_walls_rejects_malformed_items(walls):
    grid = make_grid(3, 3)
    with pytest.raises(ValidationError):
        grid.set_walls(walls)
    assert grid.wall_count() == 0


def test_node_lookup_requires_integers():
    grid = make_grid(3, 3)
    with pytest.raises(ValidationError):
        grid.node("1", 1)
    with pytest.raises(ValidationError):
        grid.node(1, 1.0)
    assert grid.get(None, 0) is None


def test_enclosed_finish_is_unreachable():
    grid = make_grid(3, 3, walls=[(1, 2), (2, 1)])
    assert not grid.is_reachable()
    grid.clear_walls()
    assert grid.is_reachable()


def test_copy_walls_from():
    left = make_grid(3, 3, walls=[(1, 1), (0, 2)])
    right = make_grid(3, 3)
    right.copy_walls_from(left)
    assert right.walls() == [[0, 2], [1, 1]]

    with pytest.raises(ValidationError):
        make_grid(4, 3).copy_walls_from(left)


def test_dict_round_trip_keeps_walls():
    grid = make_grid(4, 4, walls=[(1, 1), (2, 3)])
    clone = Grid.from_dict(grid.to_dict())
    assert clone.walls() == grid.walls()
    assert clone.config == grid.config


def test_from_dict_rejects_non_object():
    with pytest.raises(ValidationError):
        Grid.from_dict([1, 2])


# ---- search state ----
def test_reset_search_state_keeps_walls():
    grid = make_grid(3, 3, walls=[(1, 1)])
    node = grid.node(0, 1)
    node.is_visited = True
    node.is_path = True

    state = grid.reset_search_state()

    assert len(state) == 9
    assert state.previous == [-1] * 9
    assert not node.is_visited and not node.is_path
    assert grid.node(1, 1).is_wall


def test_node_state_derivation():
    grid = make_grid(3, 3, walls=[(1, 1)])
    grid.node(0, 1).is_visited = True
    grid.node(0, 2).is_visited = True
    grid.node(0, 2).is_path = True

    assert grid.start.state is NodeState.START
    assert grid.finish.state is NodeState.FINISH
    assert grid.node(1, 1).state is NodeState.WALL
    assert grid.node(0, 1).state is NodeState.VISITED
    assert grid.node(0, 2).state is NodeState.PATH
    assert grid.node(2, 0).state is NodeState.UNVISITED
    assert grid.node(2, 0).key == "2,0"
