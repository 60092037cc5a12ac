import dataclasses
import os
from collections import defaultdict

import pygame
import pytest

import blockbreaker.__main__ as play
from blockbreaker.config import DEFAULT_CONFIG
from blockbreaker.errors import FontLoadError


def _keys(*pressed):
    keys = defaultdict(bool)
    for key in pressed:
        keys[key] = True
    return keys


@pytest.mark.parametrize("pressed, expected", [
    ((), [0, 0, 0]),
    ((pygame.K_LEFT,), [3, 0, 0]),
    ((pygame.K_RIGHT,), [4, 0, 0]),
    ((pygame.K_LEFT, pygame.K_RIGHT), [0, 0, 0]),
    ((pygame.K_SPACE,), [0, 1, 0]),
    ((pygame.K_RIGHT, pygame.K_SPACE), [4, 1, 0]),
])
def test_keys_to_action(pressed, expected):
    assert play._keys_to_action(_keys(*pressed)).tolist() == expected


def test_bad_font_exits_with_status_one():
    config = dataclasses.replace(DEFAULT_CONFIG, FONT_PATH="/nonexistent/fonts/missing.ttf")
    with pytest.raises(SystemExit) as exc_info:
        play.main(config)
    assert exc_info.value.code == 1


def test_headless_default_is_dropped_before_env_is_built(monkeypatch):
    monkeypatch.setattr(play, "_USER_VIDEO_DRIVER", None)
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    seen = []

    def fake_env(**kwargs):
        seen.append(os.environ.get("SDL_VIDEODRIVER"))
        raise FontLoadError("stop here")

    monkeypatch.setattr(play, "GameEnv", fake_env)
    with pytest.raises(SystemExit):
        play.main()
    assert seen == [None]


def test_user_chosen_driver_is_kept(monkeypatch):
    monkeypatch.setattr(play, "_USER_VIDEO_DRIVER", "dummy")
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    play._use_real_video_driver()
    assert os.environ["SDL_VIDEODRIVER"] == "dummy"


def test_dummy_display_runs_headless(env):
    assert play._open_window(env) is None


def test_dummy_display_is_restarted_for_a_real_window(env, monkeypatch):
    monkeypatch.setattr(play, "_USER_VIDEO_DRIVER", None)
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    quits = []
    real_quit = pygame.display.quit

    def record_quit():
        quits.append(True)
        real_quit()

    def no_video_device():
        raise pygame.error("No available video device")

    monkeypatch.setattr(pygame.display, "quit", record_quit)
    monkeypatch.setattr(pygame.display, "init", no_video_device)

    assert play._open_window(env) is None
    assert quits == [True]


def test_headless_run_reports_final_score(monkeypatch, capsys):
    monkeypatch.setattr(play, "HEADLESS_STEPS", 5)
    play.main()
    assert "Final score:" in capsys.readouterr().out
