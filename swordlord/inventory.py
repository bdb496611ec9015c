"""Items and slot-based inventories."""

from dataclasses import dataclass
from enum import Enum


class ItemType(Enum):
    WEAPON = 0
    ARMOR = 1
    POTION = 2
    COIN = 3


@dataclass
class Item:
    """A stack of one kind of item."""

    item_type: ItemType
    item_id: int
    stackable: bool
    max_amount: int
    current_amount: int = 1

    def add_to_stack(self, amount):
        """Add amount if it fits under max_amount; return whether it was added."""
        if self.current_amount + amount <= self.max_amount:
            self.current_amount += amount
            return True
        return False


class OccupantType(Enum):
    PLAYER = 0
    ENEMY = 1
    BOSS = 2
    CHEST = 3


class Inventory:
    """A fixed number of item slots; None marks an empty slot."""

    MAX_INV_SIZE = 40
    EMPTY_SLOT_ID = -1

    def __init__(self, occupant_type, inventory_slots, items=()):
        items = list(items)
        if len(items) > self.MAX_INV_SIZE:
            raise ValueError(f"an inventory holds at most {self.MAX_INV_SIZE} items")
        self.occupant_type = occupant_type
        self.inventory_slots = inventory_slots
        self.items = items + [None] * (self.MAX_INV_SIZE - len(items))

    def _is_slot_empty(self, idx):
        slot = self.items[idx]
        return slot is None or slot.item_id == self.EMPTY_SLOT_ID

    def _indexes_of(self, item):
        return [
            idx
            for idx, slot in enumerate(self.items)
            if slot is not None and slot.item_id == item.item_id
        ]

    def _next_empty_slot(self):
        return next(
            (idx for idx in range(self.MAX_INV_SIZE) if self._is_slot_empty(idx)), None
        )

    def _add_to_existing_stack(self, item):
        return any(
            self.items[idx].add_to_stack(item.current_amount) for idx in self._indexes_of(item)
        )

    def _add_to_new_stack(self, item):
        idx = self._next_empty_slot()
        if idx is None:
            return False
        self.items[idx] = item
        return True

    @property
    def is_full(self):
        return self._next_empty_slot() is None

    def add_item(self, item):
        """Merge into an existing stack, else place in a free slot.

        Returns True only when the item took a new slot.
        """
        if not self._add_to_existing_stack(item):
            return self._add_to_new_stack(item)
        return False