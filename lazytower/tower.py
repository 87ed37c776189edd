"""A LazyTower accumulator built on Poseidon hashing."""

from __future__ import annotations

from functools import reduce
from typing import Sequence

from .params import MODULUS
from .sponge import PoseidonSponge

__all__ = ["TowerFullError", "LazyTower", "poseidon_pair"]


class TowerFullError(Exception):
    """Raised when an item would need a level above the tower's height."""

    def __init__(self, message: str = "The tower is full.") -> None:
        super().__init__(message)


def poseidon_pair(a: int, b: int) -> int:
    """Hash two field elements with a fresh Poseidon sponge."""
    sponge = PoseidonSponge()
    sponge.update([a, b])
    return sponge.squeeze()


class LazyTower:
    """A tower of levels, each holding up to ``width`` items.

    When a level is full, its digest is pushed one level up and the level
    restarts with the new item. ``full_levels`` keeps every item ever added
    to each level.
    """

    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        self.levels: list[list[int]] = []
        self.full_levels: list[list[int]] = []

    def digest(self, items: Sequence[int]) -> int:
        """Fold the items left to right with ``poseidon_pair``."""
        if not items:
            raise ValueError("cannot digest an empty sequence")
        return reduce(poseidon_pair, items)

    def add(self, item: int) -> None:
        """Add an item at the bottom level, raising TowerFullError on overflow."""
        self._add(0, int(item) % MODULUS)

    def _add(self, level: int, item: int) -> None:
        if level == self.height:
            raise TowerFullError()

        if level == len(self.levels):
            self.full_levels.append([item])
            self.levels.append([item])
        elif len(self.levels[level]) < self.width:
            self.full_levels[level].append(item)
            self.levels[level].append(item)
        else:
            self.full_levels[level].append(item)
            self._add(level + 1, self.digest(self.levels[level]))
            self.levels[level] = [item]