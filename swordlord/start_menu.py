"""The title screen with Start, Settings and Quit buttons."""

from pathlib import Path

import pygame

from swordlord.scene import Scene
from swordlord.states import GameState, OverlayState
from swordlord.utils import render_scale_scrolling_texture, render_scale_texture

BACKGROUND_DIR = "assets/starting_menu_background"
MENU_WIDTH = 800
MENU_HEIGHT = 500

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
_BUTTON_COLOR = (255, 255, 255)
_BUTTON_HOVER_COLOR = (200, 200, 200)
_START_BORDER_COLOR = (255, 165, 0)
_START_MENU_COLOR = (0, 0, 0)
_HEADER_TOP_MARGIN = 40
_BUTTON_SPACING = 50

# Layer indices into the background list: sky, white clouds and water stay put,
# the blue clouds and three grass layers scroll at their own speeds.
_STATIC_LAYERS = (0, 1, 3)
_SCROLLING_LAYERS = ((2, 50), (4, 15), (5, 12), (6, 10))


def _tdiv(a, b):
    """Integer division truncating towards zero."""
    return int(a / b)


def _load_image(path):
    try:
        return pygame.image.load(str(path))
    except (pygame.error, OSError, FileNotFoundError):
        return None


def _mouse_pos(event=None):
    """The mouse position carried by the event, else the current one."""
    pos = getattr(event, "pos", None)
    if pos is not None:
        return tuple(pos)
    try:
        return pygame.mouse.get_pos()
    except pygame.error:
        return (-1, -1)


def _show_cursor(visible):
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        try:
            pygame.mouse.set_visible(visible)
        except pygame.error:
            pass


def _center_in(inner, outer):
    inner.x = outer.x + _tdiv(outer.w - inner.w, 2)
    inner.y = outer.y + _tdiv(outer.h - inner.h, 2)


def _create_text(text, font, color):
    """Render text; returns (surface, rect sized to it), or (None, empty rect)."""
    if font is None:
        return None, pygame.Rect(0, 0, 0, 0)
    try:
        surface = font.render(text, True, color)
    except pygame.error:
        return None, pygame.Rect(0, 0, 0, 0)
    return surface, surface.get_rect()


def _draw_button(target, rect, texture, text_rect, hovered):
    """Fill the button, lighter grey when hovered, and draw its label."""
    if target is None:
        return
    color = _BUTTON_HOVER_COLOR if hovered else _BUTTON_COLOR
    pygame.draw.rect(target, color, rect)
    if texture is not None:
        target.blit(texture, text_rect.topleft)


class _MenuScene(Scene):
    """Shared layout and drawing of the menus over the scrolling landscape."""

    def __init__(self, window, header_font, font, context, background_dir):
        self.window = window
        self.renderer = window.surface
        self.header_font = header_font
        self.font = font
        self.context = context
        self.screen_width = window.screen_width
        self.screen_height = window.screen_height
        self.elapsed = 0.0
        directory = Path(background_dir)
        self.backgrounds = [_load_image(directory / f"{n}.png") for n in range(1, 8)]

        self.menu_rect = pygame.Rect(
            _tdiv(self.screen_width - MENU_WIDTH, 2),
            _tdiv(self.screen_height - MENU_HEIGHT, 2),
            MENU_WIDTH,
            MENU_HEIGHT,
        )
        self.border_rect = self.menu_rect.inflate(8, 8)

    def _button_rect(self, offset_y):
        w = _tdiv(MENU_WIDTH, 5)
        h = _tdiv(MENU_HEIGHT, 12)
        return pygame.Rect(
            self.menu_rect.x + _tdiv(self.menu_rect.w - w, 2),
            self.menu_rect.y + _tdiv(self.menu_rect.h - h, 2) + offset_y,
            w,
            h,
        )

    def _draw_backgrounds(self):
        for index in _STATIC_LAYERS:
            render_scale_texture(
                self.renderer, self.backgrounds[index], self.screen_width, self.screen_height
            )
        for index, speed in _SCROLLING_LAYERS:
            render_scale_scrolling_texture(
                self.renderer, self.backgrounds[index], self.screen_width, self.screen_height, speed
            )

    def _draw_panel(self, border_color, menu_color):
        pygame.draw.rect(self.renderer, border_color, self.border_rect)
        pygame.draw.rect(self.renderer, menu_color, self.menu_rect)

    def _place_header(self, header_rect):
        header_rect.x = self.menu_rect.x + _tdiv(self.menu_rect.w - header_rect.w, 2)
        header_rect.y = self.menu_rect.y + _HEADER_TOP_MARGIN


class StartMenu(_MenuScene):
    """The title screen."""

    def __init__(self, window, header_font, font, context, background_dir=BACKGROUND_DIR):
        super().__init__(window, header_font, font, context, background_dir)
        self.start_rect = self._button_rect(-_BUTTON_SPACING)
        self.quit_rect = self._button_rect(_BUTTON_SPACING)
        self.settings_rect = self._button_rect(0)

        self.text_header, self.text_header_rect = self.create_text("Sword Lord", header_font, WHITE)
        self.text_start, self.text_start_rect = self.create_text("Start", font, BLACK)
        self.text_quit, self.text_quit_rect = self.create_text("Quit", font, BLACK)
        self.text_settings, self.text_settings_rect = self.create_text("Settings", font, BLACK)

    def create_text(self, text, font, color):
        """Render text; returns (surface, rect sized to it), or (None, empty rect)."""
        return _create_text(text, font, color)

    def draw_button(self, rect, texture, text_rect, hovered):
        """Fill the button, lighter grey when hovered, and draw its label."""
        _draw_button(self.renderer, rect, texture, text_rect, hovered)

    def update(self, delta_time):
        """Track the time spent on this screen."""
        self.elapsed += delta_time

    def handle_event(self, event):
        point = _mouse_pos(event)
        if event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1:
            if self.start_rect.collidepoint(point):
                self.context.game_state = GameState.PLAY
            elif self.quit_rect.collidepoint(point):
                self.context.game_state = GameState.QUIT
            elif self.settings_rect.collidepoint(point):
                self.context.game_state = GameState.SETTINGS
        elif getattr(event, "key", None) == pygame.K_F2:
            try:
                pygame.key.start_text_input()
            except pygame.error:
                pass
            self.context.game_state = GameState.OVERLAY_ACTIVE
            self.context.overlay_state = OverlayState.CONSOLE

    def render(self):
        _show_cursor(True)
        point = _mouse_pos()

        self._place_header(self.text_header_rect)
        _center_in(self.text_start_rect, self.start_rect)
        _center_in(self.text_quit_rect, self.quit_rect)
        _center_in(self.text_settings_rect, self.settings_rect)

        if self.renderer is None:
            return

        self._draw_backgrounds()
        self._draw_panel(_START_BORDER_COLOR, _START_MENU_COLOR)

        if self.text_header is not None:
            self.renderer.blit(self.text_header, self.text_header_rect.topleft)

        self.draw_button(
            self.start_rect, self.text_start, self.text_start_rect,
            self.start_rect.collidepoint(point),
        )
        self.draw_button(
            self.quit_rect, self.text_quit, self.text_quit_rect,
            self.quit_rect.collidepoint(point),
        )
        self.draw_button(
            self.settings_rect, self.text_settings, self.text_settings_rect,
            self.settings_rect.collidepoint(point),
        )