"""State enumerations shared across the game, and the mutable game context."""

from dataclasses import dataclass
from enum import Enum


class GameState(Enum):
    """Which top-level scene the game is in."""

    MENU = 1
    PLAY = 2
    PAUSE = 3
    SETTINGS = 4
    QUIT = 5
    OVERLAY_ACTIVE = 6
    OVERLAY_INACTIVE = 7
    NONE = 8


class OverlayState(Enum):
    """Which overlay, if any, is requested on top of the current scene."""

    INVENTORY = 0
    CONSOLE = 1
    QUIT_CONSOLE = 2
    NONE = 3


class PlayerState(Enum):
    """The player's current animation."""

    IDLE = 0
    JUMPING = 1
    WALK = 2
    ATTACK_LMB = 3


class WeaponState(Enum):
    """Which weapon the player holds."""

    NO_ITEM = 0
    DEFAULT_SWORD = 1
    SAMURAI_SWORD = 2


class ArmorState(Enum):
    """Which armour the player wears."""

    NO_ARMOR = 0


class ArmorType(Enum):
    """Armour slots."""

    BOOTS = 0
    LEGS = 1
    BELT = 2
    CHEST = 3
    HELMET = 4


@dataclass
class GameContext:
    """Game and overlay state shared by every scene and overlay."""

    game_state: GameState = GameState.MENU
    overlay_state: OverlayState = OverlayState.NONE