import pytest

from mazechase.enums import Direction, GhostMode, GhostType


def test_starts_in_scatter_facing_left(make_ghost, config):
    ghost = make_ghost(GhostType.CLYDE, 10, 11)
    assert ghost.kind is GhostType.CLYDE
    assert ghost.pos == (10, 11)
    assert ghost.dir is Direction.LEFT
    assert ghost.mode is GhostMode.SCATTER
    assert ghost.target == config.home_entrance
    assert ghost.respawn_timer == 0


@pytest.mark.parametrize("level, frightened, interval", [
    (1, False, 2),
    (3, False, 2),
    (4, False, 1),
    (7, False, 1),
    (1, True, 4),
    (10, True, 3),
])
def test_speed_interval(make_ghost, level, frightened, interval):
    ghost = make_ghost()
    if frightened:
        ghost.mode = GhostMode.FRIGHTENED
    assert ghost.speed_interval(level) == interval


def test_follows_pacman_power_state(make_ghost, pacman, maze):
    ghost = make_ghost()
    pacman.activate_power_mode(1)
    ghost.update(maze, pacman, 1)
    assert ghost.mode is GhostMode.FRIGHTENED

    pacman.power_mode = False
    ghost.update(maze, pacman, 1)
    assert ghost.mode is GhostMode.CHASE


def test_eaten_ghost_ignores_power(make_ghost, pacman, maze):
    ghost = make_ghost(GhostType.PINKY, 1, 29)
    ghost.capture()
    pacman.activate_power_mode(1)
    ghost.update(maze, pacman, 1)
    assert ghost.mode is GhostMode.EATEN


def test_capture_turns_ghost_into_eyes(make_ghost, config):
    ghost = make_ghost()
    ghost.capture()
    assert ghost.mode is GhostMode.EATEN
    assert ghost.target == config.home_entrance


@pytest.mark.parametrize("start", [(13, 11), (16, 13), (14, 11)])
def test_eyes_near_home_respawn_inside(make_ghost, pacman, maze, config, start):
    ghost = make_ghost(GhostType.INKY, *start)
    ghost.capture()
    ghost.update(maze, pacman, 1)
    assert ghost.pos == config.house_interior
    assert ghost.mode is GhostMode.SCATTER
    assert ghost.respawn_timer == config.respawn_immunity


def test_eyes_step_every_tick_toward_home(make_ghost, pacman, maze):
    ghost = make_ghost(GhostType.CLYDE, 9, 11)
    ghost.capture()
    ghost.update(maze, pacman, 1)
    assert ghost.pos == (10, 11)
    assert ghost.dir is Direction.RIGHT


def test_eyes_eventually_get_home(make_ghost, pacman, maze, config):
    ghost = make_ghost(GhostType.BLINKY, 1, 29)
    ghost.capture()
    for _ in range(200):
        ghost.update(maze, pacman, 1)
        if ghost.mode is not GhostMode.EATEN:
            break
    assert ghost.mode is GhostMode.SCATTER
    assert ghost.pos == config.house_interior


def test_respawn_timer_counts_down_without_blocking_fright(make_ghost, pacman, maze):
    ghost = make_ghost()
    ghost.respawn_timer = 16
    pacman.activate_power_mode(1)
    ghost.update(maze, pacman, 1)
    assert ghost.respawn_timer == 15
    assert ghost.mode is GhostMode.FRIGHTENED


def test_blinky_heads_through_the_door(make_ghost, pacman, maze):
    ghost = make_ghost()
    ghost.update(maze, pacman, 1)
    assert ghost.pos == (14, 11)

    ghost.update(maze, pacman, 1)
    assert ghost.dir is Direction.DOWN
    assert ghost.pos == (14, 12)


def test_frightened_ghost_moves_slower(make_ghost, pacman, maze):
    ghost = make_ghost()
    pacman.activate_power_mode(1)
    for _ in range(3):
        ghost.update(maze, pacman, 1)
    assert ghost.pos == (14, 11)
    ghost.update(maze, pacman, 1)
    assert ghost.pos != (14, 11)


def test_boxed_in_ghost_stays_put(make_ghost, pacman, maze):
    ghost = make_ghost(GhostType.BLINKY, 0, 0)
    for _ in range(6):
        ghost.update(maze, pacman, 1)
    assert ghost.pos == (0, 0)
    assert ghost.dir is Direction.LEFT


def test_reset_puts_everything_back(make_ghost, pacman, maze):
    ghost = make_ghost(GhostType.PINKY, 12, 11)
    ghost.capture()
    ghost.x, ghost.y = 1, 1
    ghost.respawn_timer = 4
    ghost.dir = Direction.DOWN
    ghost.reset()
    assert ghost.pos == (12, 11)
    assert ghost.dir is Direction.LEFT
    assert ghost.mode is GhostMode.SCATTER
    assert ghost.respawn_timer == 0
