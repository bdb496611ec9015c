"""The inventory overlay panel."""

import pygame

from swordlord.console import _render_text
from swordlord.scene import Overlay
from swordlord.states import OverlayState

_PANEL_COLOR = (128, 128, 128)
_BORDER_INSET = 8


class InventoryMenu(Overlay):
    """A panel showing the player's inventory, toggled with the I key."""

    def __init__(self, window, font, context):
        self.renderer = window.surface
        self.font = font
        self.context = context
        self.elapsed = 0.0
        self.screen_width = window.screen_width
        self.screen_height = window.screen_height

        self.inventory_menu_rect = pygame.Rect(
            self.screen_width // 2,
            self.screen_height // 2,
            self.screen_width // 7,
            self.screen_height // 7,
        )
        self.border_rect = pygame.Rect(
            self.inventory_menu_rect.x + _BORDER_INSET,
            self.inventory_menu_rect.y + _BORDER_INSET,
            self.screen_width - _BORDER_INSET,
            self.screen_height - _BORDER_INSET,
        )

    def create_text(self, text, font, color):
        """Render text; returns (surface, rect sized to it), or (None, empty rect)."""
        return _render_text(text, font, color)

    def handle_event(self, event):
        if event.type == pygame.KEYDOWN and event.key == pygame.K_i:
            self.context.overlay_state = OverlayState.NONE

    def update(self, delta_time):
        """Track how long the panel has been open."""
        self.elapsed += delta_time

    def render(self):
        if self.renderer is None:
            return
        pygame.draw.rect(self.renderer, _PANEL_COLOR, self.inventory_menu_rect)
        pygame.draw.rect(self.renderer, _PANEL_COLOR, self.border_rect)