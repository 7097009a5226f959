import pytest

from space_shooter.clocks import Timer
from space_shooter.entities import Cell, GameState
from space_shooter.mover import (
    boss_bullet_cadence,
    boss_cadence,
    boss_fire_interval,
    enemy_cadence,
    make_movers,
)


@pytest.fixture
def movers():
    return {m.cell: m for m in make_movers()}


def cells(world, kind):
    return list(world.grid.positions_of(kind))


def test_meteor_moves_one_row_per_tick(playing, movers):
    playing.grid.write(0, 3, Cell.METEOR)
    movers[Cell.METEOR].tick(playing)
    assert cells(playing, Cell.METEOR) == [(1, 3)]


def test_downward_scan_moves_a_stack_once(playing, movers):
    for r in (3, 4, 5):
        playing.grid.write(r, 2, Cell.ENEMY)
    movers[Cell.ENEMY].tick(playing)
    assert cells(playing, Cell.ENEMY) == [(4, 2), (5, 2), (6, 2)]


def test_upward_scan_moves_bullets_once(playing, movers):
    for r in (0, 10, 11):
        playing.grid.write(r, 3, Cell.PLAYER_BULLET)
    movers[Cell.PLAYER_BULLET].tick(playing)
    # the one in row 0 leaves the grid
    assert cells(playing, Cell.PLAYER_BULLET) == [(9, 3), (10, 3)]


def test_meteor_leaves_bottom_silently(playing, movers):
    playing.grid.write(22, 0, Cell.METEOR)
    movers[Cell.METEOR].tick(playing)
    assert cells(playing, Cell.METEOR) == []
    assert playing.hud.lives == 3
    assert not playing.hud.invincible


def test_enemy_escape_costs_a_life(playing, movers, fake_time):
    """Enemy injected at (0, 0) escapes after 23 ticks."""
    playing.grid.write(0, 0, Cell.ENEMY)
    mover = movers[Cell.ENEMY]
    for _ in range(22):
        mover.tick(playing)
    assert cells(playing, Cell.ENEMY) == [(22, 0)]
    assert playing.hud.lives == 3

    mover.tick(playing)

    assert cells(playing, Cell.ENEMY) == []
    assert playing.hud.lives == 2
    assert playing.hud.invincible
    assert playing.clocks.elapsed(Timer.INVINCIBILITY) == 0.0


def test_escape_ignores_invincibility(playing, movers):
    playing.hud.invincible = True
    playing.grid.write(22, 1, Cell.BOSS)
    movers[Cell.BOSS].tick(playing)
    assert playing.hud.lives == 2


def test_enemy_hits_player(playing, movers):
    playing.grid.write(21, 7, Cell.ENEMY)
    movers[Cell.ENEMY].tick(playing)

    assert cells(playing, Cell.ENEMY) == []
    assert cells(playing, Cell.PLAYER) == [(22, 7)]
    assert playing.hud.lives == 2
    assert playing.hud.invincible


def test_invincible_player_takes_no_damage(playing, movers):
    playing.grid.write(21, 7, Cell.METEOR)
    playing.hud.invincible = True
    movers[Cell.METEOR].tick(playing)

    assert cells(playing, Cell.METEOR) == []
    assert cells(playing, Cell.PLAYER) == [(22, 7)]
    assert playing.hud.lives == 3


def test_last_life_ends_the_game(playing, movers):
    playing.hud.lives = 1
    playing.grid.write(22, 0, Cell.ENEMY)
    playing.grid.write(10, 4, Cell.ENEMY)

    movers[Cell.ENEMY].tick(playing)

    assert playing.hud.lives == 0
    assert playing.state is GameState.GAME_OVER
    assert playing.cursor == 0
    assert playing.grid.count(Cell.PLAYER) == 0
    assert playing.grid.count(Cell.ENEMY) == 0


def test_enemy_meets_player_bullet(playing, movers):
    playing.grid.write(5, 4, Cell.ENEMY)
    playing.grid.write(6, 4, Cell.PLAYER_BULLET)

    movers[Cell.ENEMY].tick(playing)

    assert playing.grid.read(5, 4) is Cell.EMPTY
    assert playing.grid.read(6, 4) is Cell.EMPTY
    assert playing.hud.score == 1
    assert [(e.row, e.col) for e in playing.effects.active()] == [(6, 4)]


@pytest.mark.parametrize(
    "victim, points",
    [
        (Cell.ENEMY, 1),
        (Cell.BOSS, 3),
        (Cell.METEOR, 0),
        (Cell.BOSS_BULLET, 0),
    ],
)
def test_player_bullet_destroys_hostiles(playing, movers, victim, points):
    playing.grid.write(9, 2, victim)
    playing.grid.write(10, 2, Cell.PLAYER_BULLET)

    movers[Cell.PLAYER_BULLET].tick(playing)

    assert playing.grid.read(9, 2) is Cell.EMPTY
    assert playing.grid.read(10, 2) is Cell.EMPTY
    assert playing.hud.score == points
    assert [(e.row, e.col) for e in playing.effects.active()] == [(9, 2)]


def test_meteor_overwrites_boss_bullet(playing, movers):
    playing.grid.write(3, 3, Cell.METEOR)
    playing.grid.write(4, 3, Cell.BOSS_BULLET)
    movers[Cell.METEOR].tick(playing)
    assert playing.grid.read(4, 3) is Cell.METEOR
    assert playing.grid.count(Cell.BOSS_BULLET) == 0


@pytest.mark.parametrize("occupant", [Cell.METEOR, Cell.ENEMY])
def test_boss_bullet_takes_over_meteor_and_enemy(playing, movers, occupant):
    playing.grid.write(3, 3, Cell.BOSS_BULLET)
    playing.grid.write(4, 3, occupant)

    movers[Cell.BOSS_BULLET].tick(playing)

    assert playing.grid.read(3, 3) is Cell.EMPTY
    assert playing.grid.read(4, 3) is Cell.BOSS_BULLET
    assert playing.grid.count(occupant) == 0
    assert playing.hud.score == 0
    assert playing.effects.active_count() == 0


def test_boss_bullet_meets_player_bullet(playing, movers):
    playing.grid.write(10, 3, Cell.BOSS_BULLET)
    playing.grid.write(11, 3, Cell.PLAYER_BULLET)

    movers[Cell.BOSS_BULLET].tick(playing)

    assert playing.grid.read(10, 3) is Cell.EMPTY
    assert playing.grid.read(11, 3) is Cell.EMPTY
    assert playing.hud.score == 0
    assert [(e.row, e.col) for e in playing.effects.active()] == [(11, 3)]

def test_boss_bullet_hits_player(playing, movers):
    playing.grid.write(21, 7, Cell.BOSS_BULLET)
    movers[Cell.BOSS_BULLET].tick(playing)

    assert playing.grid.count(Cell.BOSS_BULLET) == 0
    assert cells(playing, Cell.PLAYER) == [(22, 7)]
    assert playing.hud.lives == 2
    assert [(e.row, e.col) for e in playing.effects.active()] == [(22, 7)]


def test_boss_overwrites_meteor(playing, movers):
    playing.grid.write(3, 3, Cell.BOSS)
    playing.grid.write(4, 3, Cell.METEOR)
    movers[Cell.BOSS].tick(playing)
    assert playing.grid.read(4, 3) is Cell.BOSS
    assert playing.grid.count(Cell.METEOR) == 0


def test_enemy_blocked_by_meteor_is_lost(playing, movers):
    playing.grid.write(3, 3, Cell.ENEMY)
    playing.grid.write(4, 3, Cell.METEOR)
    movers[Cell.ENEMY].tick(playing)
    assert playing.grid.count(Cell.ENEMY) == 0
    assert playing.grid.read(4, 3) is Cell.METEOR
    assert playing.hud.lives == 3


def test_update_follows_cadence(playing, movers, fake_time):
    playing.grid.write(0, 0, Cell.ENEMY)
    mover = movers[Cell.ENEMY]

    fake_time.advance(0.5)
    assert not mover.update(playing)
    assert cells(playing, Cell.ENEMY) == [(0, 0)]

    fake_time.advance(0.5)
    assert mover.update(playing)
    assert cells(playing, Cell.ENEMY) == [(1, 0)]
    assert playing.clocks.elapsed(Timer.ENEMY_MOVE) == 0.0


def test_cadences():
    assert enemy_cadence(1) == pytest.approx(0.833)
    assert enemy_cadence(5) == pytest.approx(0.433)
    assert boss_cadence(3) == pytest.approx(0.8)
    assert boss_cadence(5) == pytest.approx(0.6)
    assert boss_cadence(10) == pytest.approx(0.5)
    assert boss_bullet_cadence(4) == pytest.approx(0.35)


def test_boss_fire_intervals():
    assert [boss_fire_interval(level) for level in (3, 4, 5)] == [3, 2, 1]


def test_boss_fires_every_second_tick_at_level_four(playing, movers):
    playing.hud.level = 4
    playing.grid.write(5, 7, Cell.BOSS)
    boss = movers[Cell.BOSS]

    boss.tick(playing)
    assert cells(playing, Cell.BOSS) == [(6, 7)]
    assert playing.grid.count(Cell.BOSS_BULLET) == 0

    boss.tick(playing)
    assert cells(playing, Cell.BOSS) == [(7, 7)]
    assert cells(playing, Cell.BOSS_BULLET) == [(8, 7)]
    assert playing.boss_fire_counter == 0


def test_boss_fires_every_tick_at_level_five(playing, movers):
    playing.hud.level = 5
    playing.grid.write(0, 1, Cell.BOSS)
    playing.grid.write(0, 9, Cell.BOSS)
    movers[Cell.BOSS].tick(playing)
    assert cells(playing, Cell.BOSS_BULLET) == [(2, 1), (2, 9)]


def test_boss_fires_every_third_tick_at_level_three(playing, movers):
    playing.hud.level = 3
    playing.grid.write(0, 0, Cell.BOSS)
    boss = movers[Cell.BOSS]
    boss.tick(playing)
    boss.tick(playing)
    assert playing.grid.count(Cell.BOSS_BULLET) == 0
    boss.tick(playing)
    assert cells(playing, Cell.BOSS_BULLET) == [(4, 0)]


def test_boss_does_not_fire_into_occupied_cell(playing, movers):
    playing.hud.level = 5
    playing.grid.write(4, 4, Cell.BOSS)
    playing.grid.write(6, 4, Cell.METEOR)
    movers[Cell.BOSS].tick(playing)

    assert cells(playing, Cell.BOSS) == [(5, 4)]
    assert playing.grid.read(6, 4) is Cell.METEOR
    assert playing.grid.count(Cell.BOSS_BULLET) == 0
    assert playing.boss_fire_counter == 0
