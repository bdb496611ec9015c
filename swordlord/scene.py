"""Base classes for full-screen scenes and overlays."""

from abc import ABC, abstractmethod


class Scene(ABC):
    """A full-screen state of the game: menu, settings, level."""

    @abstractmethod
    def handle_event(self, event):
        """React to one input event."""

    @abstractmethod
    def update(self, delta_time):
        """Advance by delta_time seconds."""

    @abstractmethod
    def render(self):
        """Draw the scene."""


class Overlay(ABC):
    """A panel drawn on top of the current scene."""

    @abstractmethod
    def handle_event(self, event):
        """React to one input event."""

    @abstractmethod
    def update(self, delta_time):
        """Advance by delta_time seconds."""

    @abstractmethod
    def render(self):
        """Draw the overlay."""