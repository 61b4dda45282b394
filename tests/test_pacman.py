import pytest

from mazechase.enums import Direction


def step(pacman, maze, times=1):
    for _ in range(times):
        pacman.update(maze)


def test_spawns_standing_still(pacman):
    assert pacman.pos == (14, 23)
    assert pacman.dir is Direction.NONE
    assert not pacman.power_mode


def test_moves_every_second_tick(pacman, maze):
    pacman.set_direction(Direction.RIGHT)
    step(pacman, maze)
    assert pacman.pos == (14, 23)

    step(pacman, maze)
    assert pacman.pos == (15, 23)
    assert pacman.dir is Direction.RIGHT
    assert pacman.next_dir is Direction.NONE


def test_blocked_request_stays_buffered(pacman, maze):
    pacman.set_direction(Direction.UP)  # wall above the spawn tile
    step(pacman, maze, 4)
    assert pacman.pos == (14, 23)
    assert pacman.dir is Direction.NONE
    assert pacman.next_dir is Direction.UP


def test_queued_turn_taken_at_next_opening(pacman, maze):
    pacman.x, pacman.y = 13, 23
    pacman.dir = Direction.LEFT
    pacman.set_direction(Direction.UP)

    step(pacman, maze, 2)
    assert pacman.pos == (12, 23)
    assert pacman.next_dir is Direction.UP

    step(pacman, maze, 2)
    assert pacman.pos == (12, 22)
    assert pacman.dir is Direction.UP
    assert pacman.next_dir is Direction.NONE


def test_wall_stops_movement_but_keeps_direction(pacman, maze):
    pacman.x, pacman.y = 6, 23
    pacman.dir = Direction.LEFT
    step(pacman, maze, 4)
    assert pacman.pos == (6, 23)
    assert pacman.dir is Direction.LEFT


def test_last_direction_request_wins(pacman):
    pacman.set_direction(Direction.LEFT)
    pacman.set_direction(Direction.RIGHT)
    pacman.set_direction(Direction.RIGHT)
    assert pacman.next_dir is Direction.RIGHT


@pytest.mark.parametrize("start, direction, end", [
    ((0, 14), Direction.LEFT, (27, 14)),
    ((27, 14), Direction.RIGHT, (0, 14)),
])
def test_tunnel_wrap(pacman, maze, start, direction, end):
    pacman.x, pacman.y = start
    pacman.dir = direction
    pacman.move_tick = 1
    step(pacman, maze)
    assert pacman.pos == end


def test_can_turn_back_into_the_tunnel(pacman, maze):
    pacman.x, pacman.y = 0, 14
    pacman.dir = Direction.RIGHT
    pacman.set_direction(Direction.LEFT)
    pacman.move_tick = 1
    step(pacman, maze)
    assert pacman.pos == (27, 14)


@pytest.mark.parametrize("level, ticks", [
    (1, 48), (2, 40), (3, 32), (4, 32), (5, 24), (8, 24), (9, 16), (50, 16),
])
def test_power_duration_shrinks_with_level(pacman, level, ticks):
    pacman.activate_power_mode(level)
    assert pacman.power_mode
    assert pacman.power_ticks == ticks


def test_powered_pacman_moves_every_tick(pacman, maze):
    pacman.activate_power_mode(1)
    pacman.set_direction(Direction.RIGHT)
    step(pacman, maze)
    assert pacman.pos == (15, 23)
    step(pacman, maze)
    assert pacman.pos == (16, 23)
    assert pacman.power_ticks == 46


def test_power_mode_runs_out(pacman, maze):
    pacman.activate_power_mode(1)
    pacman.power_ticks = 1
    step(pacman, maze)
    assert not pacman.power_mode
    assert pacman.power_time_left() == 0


def test_animation_advances_while_standing(pacman, maze):
    step(pacman, maze, 5)
    assert pacman.anim_frame == 5


def test_die_returns_to_spawn(pacman):
    pacman.x, pacman.y = 3, 5
    pacman.dir = Direction.DOWN
    pacman.die()
    assert pacman.pos == (14, 23)
    assert pacman.dir is Direction.NONE


def test_reset_clears_power_and_buffer(pacman):
    pacman.activate_power_mode(1)
    pacman.set_direction(Direction.UP)
    pacman.x = 1
    pacman.reset()
    assert pacman.pos == (14, 23)
    assert not pacman.power_mode
    assert pacman.next_dir is Direction.NONE
