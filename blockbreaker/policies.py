from .states import GameState


def policy(env):
    # Strategy: keep the paddle centre under the lowest ball, since that is the
    # one about to fall off the screen. Outside of play, tap Space to move on;
    # Space only registers on the frame it goes down, so release it in between.
    world = env.world
    if world.state is not GameState.GAME:
        return [0, 0 if env.prev_space_held else 1, 0]

    lowest = max(world.balls, key=lambda ball: ball.rect[1])
    ball_x = lowest.rect[0] + lowest.rect[2] * 0.5
    paddle_x = world.player.rect[0] + world.player.rect[2] * 0.5
    dead_zone = world.player.rect[2] * 0.1

    if ball_x < paddle_x - dead_zone:
        return [3, 0, 0]  # Move left
    elif ball_x > paddle_x + dead_zone:
        return [4, 0, 0]  # Move right
    else:
        return [0, 0, 0]  # Stay
