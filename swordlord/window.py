"""The game window."""

import pygame


class WindowError(RuntimeError):
    """Raised when the window cannot be created."""


class Window:
    """A display window and the surface everything is drawn on."""

    def __init__(self):
        self.screen_width = 0
        self.screen_height = 0
        self.surface = None

    def open(self, title, width, height):
        """Create the window; raises WindowError on failure."""
        self.screen_width = width
        self.screen_height = height
        try:
            pygame.display.init()
            self.surface = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise WindowError(f"Window creation failed: {exc}") from exc
        pygame.display.set_caption(title)
        return self

    def close(self):
        """Destroy the window if it is open."""
        if self.surface is not None:
            pygame.display.quit()
            self.surface = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()