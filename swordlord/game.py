"""The main loop: switching scenes and overlays, and the command entry point."""

import argparse
import time

import pygame

from swordlord.console import Console
from swordlord.game_scene import GameScene
from swordlord.inventory_menu import InventoryMenu
from swordlord.level_builder import LEVELS_DIR
from swordlord.settings_menu import SettingsMenu
from swordlord.start_menu import BACKGROUND_DIR, StartMenu
from swordlord.states import GameContext, GameState, OverlayState
from swordlord.window import Window, WindowError

TITLE = "Swordlord"
HEADER_FONT_PATH = "assets/fonts/MedievalSharp-Regular.ttf"
BODY_FONT_PATH = "assets/fonts/CinzelDecorative-Bold.ttf"
HEADER_FONT_SIZE = 48
BODY_FONT_SIZE = 24
FRAME_DELAY = 1.0 / 250.0


def _load_font(path, size):
    try:
        return pygame.font.Font(path, size)
    except (pygame.error, OSError):
        return None


class Game:
    """Owns the scenes and overlays and routes events, updates and drawing."""

    def __init__(
        self,
        window,
        header_font=None,
        body_font=None,
        levels_dir=LEVELS_DIR,
        background_dir=BACKGROUND_DIR,
    ):
        self.window = window
        self.header_font = header_font
        self.body_font = body_font
        self.levels_dir = levels_dir
        self.background_dir = background_dir
        self.context = GameContext(GameState.MENU, OverlayState.NONE)
        self.previous_state = GameState.NONE
        self.running = True

        self.start_menu = self._make_start_menu()
        self.game_scene = None
        self.settings_menu = None
        self.inventory_menu = None
        self.console = None
        self.current_scene = self.start_menu
        self.current_overlay = None

    def _make_start_menu(self):
        return StartMenu(
            self.window, self.header_font, self.body_font, self.context, self.background_dir
        )

    def _overlay_active(self):
        return (
            self.current_overlay is not None
            and self.context.game_state is GameState.OVERLAY_ACTIVE
        )

    def _apply_state_change(self):
        state = self.context.game_state
        if state is self.previous_state:
            return
        if state is GameState.PLAY:
            if self.game_scene is None:
                self.game_scene = GameScene(self.window, self.context, levels_dir=self.levels_dir)
            self.current_scene = self.game_scene
        elif state is GameState.SETTINGS:
            if self.settings_menu is None:
                self.settings_menu = SettingsMenu(
                    self.window,
                    self.header_font,
                    self.body_font,
                    self.context,
                    background_dir=self.background_dir,
                )
            self.current_scene = self.settings_menu
        elif state is GameState.QUIT:
            self.running = False
        elif state is GameState.MENU:
            if self.start_menu is None:
                self.start_menu = self._make_start_menu()
            self.current_scene = self.start_menu
        # The requested state is consumed once acted upon.
        self.context.game_state = self.previous_state

    def _apply_overlay_change(self):
        overlay = self.context.overlay_state
        state = self.context.game_state
        if overlay is OverlayState.NONE or state is GameState.OVERLAY_INACTIVE:
            return
        if state is GameState.PLAY and overlay is OverlayState.INVENTORY:
            if self.inventory_menu is None:
                self.inventory_menu = InventoryMenu(self.window, self.body_font, self.context)
            self.current_overlay = self.inventory_menu
        if overlay is OverlayState.CONSOLE and self.console is None:
            self.console = Console(self.window, self.body_font, self.context)

    def step(self, delta_time, events):
        """Run one frame with the given events; returns whether the game keeps running."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            if self._overlay_active():
                self.current_overlay.handle_event(event)
            elif self.current_scene is not None:
                self.current_scene.handle_event(event)

        self.current_scene.update(delta_time)
        if self._overlay_active():
            self.current_overlay.update(delta_time)

        surface = self.window.surface
        if surface is not None:
            surface.fill((0, 0, 0))
        self.current_scene.render()
        if self._overlay_active():
            self.current_overlay.render()
        if surface is not None and pygame.display.get_init():
            if pygame.display.get_surface() is not None:
                pygame.display.flip()

        self._apply_state_change()
        self._apply_overlay_change()
        return self.running

    def run(self):
        """Run frames until the game quits, capped at 250 frames a second."""
        last_frame = time.perf_counter()
        while self.running:
            now = time.perf_counter()
            delta_time = now - last_frame
            last_frame = now
            self.step(delta_time, pygame.event.get())
            frame_time = time.perf_counter() - now
            if frame_time < FRAME_DELAY:
                pygame.time.delay(int((FRAME_DELAY - frame_time) * 1000))


def game_loop(window):
    """Load the fonts and run the game in the given window."""
    header_font = _load_font(HEADER_FONT_PATH, HEADER_FONT_SIZE)
    body_font = _load_font(BODY_FONT_PATH, BODY_FONT_SIZE)
    Game(window, header_font, body_font).run()


def main(argv=None):
    """Open a fullscreen window on the first display and play."""
    parser = argparse.ArgumentParser(prog="swordlord", description="A side-scrolling sword game.")
    parser.parse_args(argv)

    pygame.display.init()
    pygame.font.init()
    try:
        sizes = pygame.display.get_desktop_sizes()
    except pygame.error:
        sizes = []
    width, height = sizes[0] if sizes else (0, 0)

    window = Window()
    try:
        window.open(TITLE, width, height)
    except WindowError:
        print("Failed to initialize SDL.")
        return 1

    try:
        window.surface = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
    except pygame.error:
        pass

    try:
        game_loop(window)
    finally:
        window.close()
        pygame.quit()
    return 0