"""The settings screen, with a dropdown to move the game to another display."""

from dataclasses import dataclass

import pygame

from swordlord.start_menu import (
    BACKGROUND_DIR,
    BLACK,
    WHITE,
    _center_in,
    _create_text,
    _draw_button,
    _MenuScene,
    _mouse_pos,
    _show_cursor,
)
from swordlord.states import GameState

_BORDER_COLOR = (0, 0, 0)
_MENU_COLOR = (128, 128, 128)
_OPTION_COLOR = (100, 100, 100)
_OPTION_HOVER_COLOR = (150, 100, 100)
_ITEM_HEIGHT = 30
_ITEM_WIDTH = 200
_DROPDOWN_LEFT = 50
_DROPDOWN_TOP = 150
_LABEL_PADDING = 5
_BUTTON_SPACING = 50
UNKNOWN_DISPLAY = "Unknown"


@dataclass
class DropDownMenu:
    """One entry of a dropdown list."""

    label: str
    rect: pygame.Rect
    selected: bool = False


def _system_display_names():
    try:
        count = pygame.display.get_num_displays()
    except pygame.error:
        return []
    return [UNKNOWN_DISPLAY] * count


class SettingsMenu(_MenuScene):
    """Lets the player choose the display the game runs on."""

    def __init__(
        self, window, header_font, font, context, display_names=None, background_dir=BACKGROUND_DIR
    ):
        super().__init__(window, header_font, font, context, background_dir)
        self.dropdown_open = False
        self.selected_display = 0

        names = _system_display_names() if display_names is None else list(display_names)
        left = self.menu_rect.x + _DROPDOWN_LEFT
        top = self.menu_rect.y + _DROPDOWN_TOP
        self.display_options = [
            DropDownMenu(
                name or UNKNOWN_DISPLAY,
                pygame.Rect(left, top + i * _ITEM_HEIGHT, _ITEM_WIDTH, _ITEM_HEIGHT),
            )
            for i, name in enumerate(names)
        ]

        self.displays_rect = self._button_rect(0)
        self.resolutions_rect = self._button_rect(-_BUTTON_SPACING)

        self.text_resolutions, self.text_resolutions_rect = self.create_text(
            "Resolution", font, BLACK
        )
        self.text_displays, self.text_displays_rect = self.create_text("Displays", font, BLACK)
        self.text_header_rect = pygame.Rect(0, 0, 0, 0)

    def create_text(self, text, font, color):
        """Render text; returns (surface, rect sized to it), or (None, empty rect)."""
        return _create_text(text, font, color)

    def draw_button(self, rect, texture, text_rect, hovered):
        """Fill the button, lighter grey when hovered, and draw its label."""
        _draw_button(self.renderer, rect, texture, text_rect, hovered)

    def update(self, delta_time):
        """Track the time spent on this screen."""
        self.elapsed += delta_time

    def _move_to_display(self, index):
        surface = self.window.surface
        if not pygame.display.get_init() or surface is None:
            return
        if pygame.display.get_surface() is not surface:
            return
        try:
            new_surface = pygame.display.set_mode(
                (self.screen_width, self.screen_height), pygame.FULLSCREEN, display=index
            )
        except pygame.error:
            return
        self.window.surface = new_surface
        self.renderer = new_surface

    def handle_event(self, event):
        point = _mouse_pos(event)
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.context.game_state = GameState.MENU
        elif event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            if self.displays_rect.collidepoint(point):
                self.dropdown_open = not self.dropdown_open
            elif self.dropdown_open:
                for index, option in enumerate(self.display_options):
                    if option.rect.collidepoint(point):
                        self.selected_display = index
                        self.dropdown_open = False
                        self._move_to_display(index)
                        break
            else:
                self.dropdown_open = False

    def render(self):
        _show_cursor(True)
        point = _mouse_pos()

        _center_in(self.text_displays_rect, self.displays_rect)
        _center_in(self.text_resolutions_rect, self.resolutions_rect)

        if self.renderer is None:
            return

        self._draw_backgrounds()
        self._draw_panel(_BORDER_COLOR, _MENU_COLOR)

        if self.dropdown_open:
            for option in self.display_options:
                hovered = option.rect.collidepoint(point)
                color = _OPTION_HOVER_COLOR if hovered else _OPTION_COLOR
                pygame.draw.rect(self.renderer, color, option.rect)
                label, label_rect = self.create_text(option.label, self.font, WHITE)
                if label is not None:
                    label_rect.x = option.rect.x + _LABEL_PADDING
                    label_rect.y = option.rect.y + _LABEL_PADDING
                    self.renderer.blit(label, label_rect.topleft)

        header, self.text_header_rect = self.create_text("Settings", self.header_font, WHITE)
        self._place_header(self.text_header_rect)
        if header is not None:
            self.renderer.blit(header, self.text_header_rect.topleft)

        self.draw_button(
            self.displays_rect, self.text_displays, self.text_displays_rect,
            self.displays_rect.collidepoint(point),
        )
        self.draw_button(
            self.resolutions_rect, self.text_resolutions, self.text_resolutions_rect,
            self.resolutions_rect.collidepoint(point),
        )