import pygame
import pytest

from swordlord.settings_menu import DropDownMenu, SettingsMenu
from swordlord.states import GameContext, GameState


class _Window:
    def __init__(self, width=1280, height=720):
        self.screen_width = width
        self.screen_height = height
        self.surface = pygame.Surface((width, height))


@pytest.fixture
def context():
    return GameContext(game_state=GameState.SETTINGS)


@pytest.fixture
def menu(context, tmp_path):
    return SettingsMenu(
        _Window(), None, None, context, display_names=["Left", "Right"], background_dir=tmp_path
    )


def _click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def test_options_are_stacked_with_labels(menu):
    labels = [option.label for option in menu.display_options]
    assert labels == ["Left", "Right"]
    first, second = menu.display_options
    assert second.rect.y - first.rect.y == first.rect.h
    assert first.rect.x == second.rect.x
    assert all(isinstance(o, DropDownMenu) for o in menu.display_options)


def test_empty_name_becomes_unknown(context, tmp_path):
    menu = SettingsMenu(_Window(), None, None, context, display_names=[""], background_dir=tmp_path)
    assert menu.display_options[0].label == "Unknown"


def test_escape_returns_to_menu(menu, context):
    menu.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert context.game_state is GameState.MENU


def test_click_displays_toggles_dropdown(menu):
    menu.handle_event(_click(menu.displays_rect.center))
    assert menu.dropdown_open is True
    menu.handle_event(_click(menu.displays_rect.center))
    assert menu.dropdown_open is False


def test_selecting_option_closes_dropdown(menu):
    menu.handle_event(_click(menu.displays_rect.center))
    menu.handle_event(_click(menu.display_options[1].rect.center))
    assert menu.selected_display == 1
    assert menu.dropdown_open is False


def test_click_elsewhere_with_dropdown_open_keeps_it_open(menu):
    menu.handle_event(_click(menu.displays_rect.center))
    menu.handle_event(_click((0, 0)))
    assert menu.dropdown_open is True
    assert menu.selected_display == 0


def test_click_elsewhere_with_dropdown_closed_stays_closed(menu):
    menu.handle_event(_click((0, 0)))
    assert menu.dropdown_open is False


def test_options_do_not_overlap_buttons(menu):
    for option in menu.display_options:
        assert not option.rect.colliderect(menu.displays_rect)
        assert not option.rect.colliderect(menu.resolutions_rect)
        assert menu.menu_rect.contains(option.rect)


def test_render_draws_panel_and_open_dropdown(menu):
    menu.handle_event(_click(menu.displays_rect.center))
    menu.render()
    surface = menu.renderer
    assert tuple(surface.get_at(menu.border_rect.topleft))[:3] == (0, 0, 0)
    inner = (menu.menu_rect.x + 1, menu.menu_rect.y + 1)
    assert tuple(surface.get_at(inner))[:3] == (128, 128, 128)
    option = menu.display_options[0].rect
    assert tuple(surface.get_at((option.x + 1, option.y + 1)))[:3] == (100, 100, 100)
    assert menu.text_displays_rect.center == menu.displays_rect.center


def test_render_with_dropdown_closed_leaves_panel_colour(menu):
    menu.render()
    option = menu.display_options[0].rect
    assert tuple(menu.renderer.get_at((option.x + 1, option.y + 1)))[:3] == (128, 128, 128)