import pygame
import pytest

from swordlord.console import Console
from swordlord.game import Game, main
from swordlord.game_scene import GameScene
from swordlord.settings_menu import SettingsMenu
from swordlord.start_menu import StartMenu
from swordlord.states import GameState, OverlayState
from swordlord.window import Window


@pytest.fixture
def game(tmp_path):
    window = Window()
    window.screen_width = 1600
    window.screen_height = 900
    return Game(
        window,
        levels_dir=tmp_path / "levels",
        background_dir=tmp_path / "backgrounds",
    )


def _click(point):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=point)


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_starts_in_menu(game):
    assert isinstance(game.current_scene, StartMenu)
    assert game.context.game_state is GameState.MENU


def test_state_request_is_consumed(game):
    assert game.step(0.01, []) is True
    assert game.context.game_state is GameState.NONE
    assert game.current_scene is game.start_menu


def test_quit_event_stops(game):
    assert game.step(0.01, [pygame.event.Event(pygame.QUIT)]) is False
    assert game.running is False


def test_start_button_switches_to_level(game):
    game.step(0.01, [])
    game.step(0.01, [_click(game.start_menu.start_rect.center)])
    assert isinstance(game.current_scene, GameScene)
    assert game.current_scene is game.game_scene
    assert game.context.game_state is GameState.NONE


def test_quit_button_stops(game):
    game.step(0.01, [])
    assert game.step(0.01, [_click(game.start_menu.quit_rect.center)]) is False


def test_settings_button_and_escape_back(game):
    game.step(0.01, [])
    game.step(0.01, [_click(game.start_menu.settings_rect.center)])
    assert isinstance(game.current_scene, SettingsMenu)
    game.step(0.01, [_key(pygame.K_ESCAPE)])
    assert game.current_scene is game.start_menu


def test_escape_from_level_returns_to_menu(game):
    game.step(0.01, [])
    game.step(0.01, [_click(game.start_menu.start_rect.center)])
    game.step(0.01, [_key(pygame.K_ESCAPE)])
    assert game.current_scene is game.start_menu
    assert game.game_scene is not None and game.current_scene is not game.game_scene


def test_level_scene_is_reused(game):
    game.step(0.01, [])
    game.step(0.01, [_click(game.start_menu.start_rect.center)])
    first = game.game_scene
    game.step(0.01, [_key(pygame.K_ESCAPE)])
    game.step(0.01, [_click(game.start_menu.start_rect.center)])
    assert game.current_scene is first


def test_f2_creates_console(game):
    game.step(0.01, [])
    game.step(0.01, [_key(pygame.K_F2)])
    assert isinstance(game.console, Console)
    assert game.context.overlay_state is OverlayState.CONSOLE
    assert game.current_overlay is None


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])