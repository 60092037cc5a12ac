import numpy as np
import pytest

from blockbreaker.entities import Ball, Block, Player, build_board


@pytest.mark.parametrize("left, right", [(True, False), (False, True)])
def test_player_stays_on_screen(config, left, right):
    player = Player(config)
    for _ in range(20):
        player.update(0.1, left, right)
        assert 0 <= player.rect[0] <= config.SCREEN_WIDTH - config.PLAYER_WIDTH

    expected = 0 if left else config.SCREEN_WIDTH - config.PLAYER_WIDTH
    assert player.rect[0] == expected


def test_player_moves_at_constant_speed(config):
    player = Player(config)
    start = player.rect[0]
    player.update(0.1, False, True)
    assert player.rect[0] == pytest.approx(start + config.PLAYER_SPEED * 0.1)


def test_player_ignores_both_directions_at_once(config):
    player = Player(config)
    start = player.rect.copy()
    player.update(0.1, True, True)
    assert player.rect.tolist() == start.tolist()


def test_player_never_moves_vertically(config):
    player = Player(config)
    y = player.rect[1]
    player.update(0.5, True, False)
    assert player.rect[1] == y == config.SCREEN_HEIGHT - config.PLAYER_BOTTOM_OFFSET


def test_block_starts_with_two_lives_and_colour_tracks_them(config):
    block = Block((0, 0), config)
    assert block.lives == 2
    assert block.color == config.COLOR_BLOCK

    assert block.hit() is False
    assert block.lives == 1
    assert block.color == config.COLOR_BLOCK_WEAK

    assert block.hit() is True
    assert not block.alive

    block.lives = 3
    assert block.color == config.COLOR_BLOCK_STRONG


def test_new_ball_heads_down_with_unit_velocity(config, rng):
    ball = Ball(config.ball_spawn_point, rng, config)
    assert np.linalg.norm(ball.vel) == pytest.approx(1.0)
    assert ball.vel[1] > 0
    assert ball.rect.tolist() == [500, 430, config.BALL_SIZE, config.BALL_SIZE]


def test_ball_at_left_edge_turns_right(config, rng):
    ball = Ball((0, 300), rng, config)
    ball.vel = np.array([-0.6, 0.8])
    ball.update(1 / 60)
    assert ball.vel[0] > 0


def test_ball_at_right_edge_turns_left(config, rng):
    ball = Ball((config.SCREEN_WIDTH - config.BALL_SIZE, 300), rng, config)
    ball.vel = np.array([0.6, 0.8])
    ball.update(1 / 60)
    assert ball.vel[0] < 0


def test_ball_at_top_turns_down(config, rng):
    ball = Ball((300, 0), rng, config)
    ball.vel = np.array([0.6, -0.8])
    ball.update(1 / 60)
    assert ball.vel[1] > 0


def test_ball_falls_through_bottom(config, rng):
    ball = Ball((300, config.SCREEN_HEIGHT - 5), rng, config)
    ball.vel = np.array([0.0, 1.0])
    assert not ball.is_out()
    ball.update(1 / 60)
    assert ball.vel[1] == 1.0
    assert ball.is_out()


def test_ball_moves_by_speed_and_time(config, rng):
    ball = Ball((300, 300), rng, config)
    ball.vel = np.array([0.6, 0.8])
    ball.update(0.5)
    assert ball.rect[0] == pytest.approx(300 + 0.6 * config.BALL_SPEED * 0.5)
    assert ball.rect[1] == pytest.approx(300 + 0.8 * config.BALL_SPEED * 0.5)


def test_board_layout(config):
    blocks = build_board(config)
    assert len(blocks) == 60
    assert blocks[0].rect.tolist() == [-25, 50, 100, 40]
    assert blocks[1].rect[0] == 80
    assert blocks[10].rect[1] == 95
    assert all(block.lives == 2 for block in blocks)
