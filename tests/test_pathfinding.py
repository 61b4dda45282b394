from mazechase.enums import Direction
from mazechase.pathfinding import first_open_direction, return_direction
from mazechase.targeting import choose_direction


def test_straight_corridor(maze):
    assert return_direction(maze, (9, 11), (14, 11), Direction.UP) is Direction.RIGHT


def test_equal_paths_prefer_up_first(maze):
    # Both UP-then-RIGHT and RIGHT-then-UP take nine steps
    assert return_direction(maze, (1, 5), (6, 1), Direction.LEFT) is Direction.UP


def test_equal_paths_prefer_down_over_left(maze):
    assert return_direction(maze, (6, 1), (1, 5), Direction.RIGHT) is Direction.DOWN


def test_goes_through_the_tunnel_when_shorter(maze):
    assert return_direction(maze, (1, 14), (26, 14), Direction.RIGHT) is Direction.LEFT


def test_global_shortest_path_not_greedy(maze):
    # A wall sits between (6, 26) and (6, 29). The greedy choice heads up;
    # the shortest route goes left along row 26 and round.
    assert choose_direction(maze, (6, 26), Direction.RIGHT, (6, 29)) is Direction.UP
    assert return_direction(maze, (6, 26), (6, 29), Direction.RIGHT) is Direction.LEFT


def test_already_home_takes_any_open_neighbour(maze):
    # Above is a wall, below is the ghost door
    assert return_direction(maze, (14, 11), (14, 11), Direction.LEFT) is Direction.DOWN


def test_unreachable_target_falls_back(maze):
    assert return_direction(maze, (14, 11), (0, 0), Direction.LEFT) is Direction.DOWN


def test_boxed_in_keeps_facing(maze):
    assert return_direction(maze, (0, 0), (14, 11), Direction.UP) is Direction.UP


def test_first_open_direction(maze):
    assert first_open_direction(maze, (1, 1)) is Direction.DOWN
    assert first_open_direction(maze, (0, 0)) is Direction.NONE
