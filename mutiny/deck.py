"""The card deck: navigation and action cards, shuffling and listing."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO


class Navigation(Enum):
    """Which way a card steers the ship."""

    PIRATE = "pirate"
    SAILOR = "sailor"
    CULT = "cult"

    def __str__(self) -> str:
        return self.value


class Action(Enum):
    """The special action printed on a card."""

    DRUNK = "drunk"
    MERMAID = "mermaid"
    TELESCOPE = "telescope"
    ARMED = "armed"
    DISARMED = "disarmed"
    CULT_UPRISING = "cult uprising"

    def __str__(self) -> str:
        return self.value


_NAVIGATION_ORDER = {nav: i for i, nav in enumerate(Navigation)}
_ACTION_ORDER = {act: i for i, act in enumerate(Action)}


@dataclass(frozen=True)
class Card:
    """One card, ordered by navigation first and action second."""

    navigation: Navigation
    action: Action

    @property
    def sort_key(self) -> tuple[int, int]:
        return _NAVIGATION_ORDER[self.navigation], _ACTION_ORDER[self.action]

    def __lt__(self, other: Card) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self) -> str:
        return f"{self.navigation}, {self.action}"


CARD_AMOUNTS: dict[Card, int] = {
    Card(Navigation.CULT, Action.CULT_UPRISING): 6,
    Card(Navigation.SAILOR, Action.DRUNK): 5,
    Card(Navigation.SAILOR, Action.DISARMED): 2,
    Card(Navigation.PIRATE, Action.DRUNK): 5,
    Card(Navigation.PIRATE, Action.MERMAID): 2,
    Card(Navigation.PIRATE, Action.TELESCOPE): 2,
    Card(Navigation.PIRATE, Action.ARMED): 2,
}


@dataclass
class Deck:
    """A draw deck filled from CARD_AMOUNTS in card order, and an empty sea deck."""

    rng: random.Random = field(default_factory=random.Random)
    draw_deck: list[Card] = field(init=False)
    sea_deck: list[Card] = field(init=False, default_factory=list)
    total_cards: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_cards = sum(CARD_AMOUNTS.values())
        self.draw_deck = [
            card
            for card in sorted(CARD_AMOUNTS)
            for _ in range(CARD_AMOUNTS[card])
        ]

    def swap(self, index1: int, index2: int) -> None:
        """Exchange two cards of the draw deck; indices must be in range."""
        size = len(self.draw_deck)
        for index in (index1, index2):
            if not 0 <= index < size:
                raise IndexError(f"card index {index} out of range 0..{size - 1}")
        deck = self.draw_deck
        deck[index1], deck[index2] = deck[index2], deck[index1]

    def shuffle(self) -> None:
        """Swap every position with a uniformly chosen one."""
        for i in range(self.total_cards):
            self.swap(i, self.rng.randint(0, self.total_cards - 1))

    def lines(self) -> Iterator[str]:
        """Yield one "navigation, action" line per card of the draw deck."""
        return (str(card) for card in self.draw_deck)

    def print(self, file: TextIO | None = None) -> None:
        """Write the draw deck, one card per line."""
        out = sys.stdout if file is None else file
        for line in self.lines():
            print(line, file=out)

    def __len__(self) -> int:
        return len(self.draw_deck)