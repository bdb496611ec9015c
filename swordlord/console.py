"""The developer console overlay: a panel with a command line for typed input."""

import logging

import pygame

from swordlord.scene import Overlay
from swordlord.states import GameState

_log = logging.getLogger(__name__)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
_BACKGROUND_COLOR = (0, 0, 0)
_BAR_COLOR = (128, 128, 128)
_BORDER_COLOR = (44, 44, 44)
_CURSOR_COLOR = (255, 255, 255)
_BAR_DIVISOR = 30
_BORDER_INSET = 4
_CURSOR_SIZE = (10, 20)


def _render_text(text, font, color):
    """Render text; returns (surface, rect sized to it), or (None, empty rect)."""
    if font is None:
        return None, pygame.Rect(0, 0, 0, 0)
    try:
        surface = font.render(text, True, color)
    except pygame.error as exc:
        _log.error("Failed to render text surface: %s", exc)
        return None, pygame.Rect(0, 0, 0, 0)
    return surface, surface.get_rect()


class Console(Overlay):
    """A console panel in the top-left two thirds of the screen."""

    def __init__(self, window, font, context):
        self.window = window
        self.renderer = window.surface
        self.font = font
        self.context = context
        self.elapsed = 0.0
        self.width = (window.screen_width // 3) * 2
        self.height = (window.screen_height // 3) * 2
        bar_height = self.height // _BAR_DIVISOR

        self.console_rect = pygame.Rect(0, 0, self.width, self.height)
        self.console_top_bar_rect = pygame.Rect(0, 0, self.width, bar_height)
        self.command_line_rect = pygame.Rect(0, self.height, self.width, bar_height)
        self.command_line_border_rect = pygame.Rect(
            _BORDER_INSET,
            self.height + _BORDER_INSET,
            self.width - 2 * _BORDER_INSET,
            bar_height - 2 * _BORDER_INSET,
        )
        border = self.command_line_border_rect
        self.input_text_rect = pygame.Rect(border.x + 5, border.y - 3, border.w, border.h)
        self.block_cursor = pygame.Rect(5, self.height + 6, *_CURSOR_SIZE)

        self.input_text = ""
        self.input_text_texture = None
        self.top_bar_text, rect = self.create_text("Console", font, BLACK)
        self.console_top_bar_text_rect = pygame.Rect(0, -2, rect.w, rect.h)

    def create_text(self, text, font, color):
        """Render text; returns (surface, rect sized to it), or (None, empty rect)."""
        return _render_text(text, font, color)

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_F3:
                try:
                    pygame.key.stop_text_input()
                except pygame.error:
                    pass
                self.context.game_state = GameState.OVERLAY_INACTIVE
            elif event.key == pygame.K_BACKSPACE and self.input_text:
                self.input_text = self.input_text[:-1]
            elif event.key == pygame.K_RETURN:
                self.input_text = ""
        elif event.type == pygame.TEXTINPUT:
            self.input_text += event.text

        if self.input_text:
            self.input_text_texture, rect = self.create_text(self.input_text, self.font, WHITE)
            self.input_text_rect.size = rect.size
            self.input_text_rect.x = self.command_line_border_rect.x + 4

    def update(self, delta_time):
        """Track how long the console has been open."""
        self.elapsed += delta_time

    def render(self):
        if self.renderer is None:
            return
        pygame.draw.rect(self.renderer, _BACKGROUND_COLOR, self.console_rect)
        pygame.draw.rect(self.renderer, _BAR_COLOR, self.console_top_bar_rect)
        pygame.draw.rect(self.renderer, _BAR_COLOR, self.command_line_rect)
        pygame.draw.rect(self.renderer, _BORDER_COLOR, self.command_line_border_rect)
        pygame.draw.rect(self.renderer, _CURSOR_COLOR, self.block_cursor)
        if self.top_bar_text is not None:
            self.renderer.blit(self.top_bar_text, self.console_top_bar_text_rect.topleft)
        if self.input_text_texture is not None:
            self.renderer.blit(self.input_text_texture, self.input_text_rect.topleft)