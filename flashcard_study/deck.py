from __future__ import annotations

import random
from collections import deque
from typing import Generic, Iterable, Iterator

from .types import C, FlashCards


class Deck(Generic[C]):
    """Ordered pile of cards.

    Cards are stored head -> tail. ``add`` appends to the tail, ``add_to_top``
    prepends to the head and ``draw`` pops the tail, so a deck filled with
    ``add`` behaves as a stack.
    """

    def __init__(self, cards: Iterable[C] | None = None) -> None:
        self._cards: deque[C] = deque()
        for card in cards or ():
            self.add(card)

    @classmethod
    def from_cards(cls, cards: Iterable[C]) -> "Deck[C]":
        return cls(cards)

    def add(self, card: C) -> None:
        self._cards.append(card)

    def add_to_top(self, card: C) -> None:
        self._cards.appendleft(card)

    def draw(self) -> C | None:
        if not self._cards:
            return None
        return self._cards.pop()

    def size(self) -> int:
        return len(self._cards)

    def deck_size(self) -> int:
        return len(self._cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        # random.shuffle is Fisher-Yates; shuffle a list copy, deque indexing is O(n).
        cards = list(self._cards)
        (rng or random).shuffle(cards)
        self._cards = deque(cards)

    def merge(self, other: FlashCards[C]) -> None:
        """Drain ``other`` into this deck, one draw+add at a time."""
        while other.deck_size() > 0:
            card = other.draw()
            if card is None:
                break
            self.add(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[C]:
        return iter(self._cards)

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Deck({list(self._cards)!r})"
