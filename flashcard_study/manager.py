"""Study session manager.

A session splits the cards of a deck into two queues:

- ``unseen``: cards still to be studied, head = next card to show
- ``seen``: cards already shown, head = the current card

Navigation moves a card between the heads of the two queues, so every card
the manager was built with sits in exactly one queue at all times.

The manager keeps the only strong references it needs. Callers receive
``weakref.ref`` handles: call the handle to get the card. State changes made
through the manager (flip, hint, reset) are visible through every handle to
the same card. Handles stop resolving once the manager and any other owners
are gone.
"""
from __future__ import annotations

import random
import weakref
from collections import deque
from typing import Generic

from .logging_utils import get_logger
from .types import CardState, FlashCards, T

logger = get_logger(__name__)


class CardsManager(Generic[T]):
    def __init__(self, cards: list[T] | None = None, *, rng: random.Random | None = None):
        self._unseen: deque[T] = deque(cards or ())
        self._seen: deque[T] = deque()
        self._rng = rng

    @classmethod
    def create_from_deck(cls, deck: FlashCards[T], *, rng: random.Random | None = None) -> "CardsManager[T]":
        """Drain ``deck`` into the unseen queue, keeping draw order.

        The deck is left empty and is not referenced afterwards.
        """
        cards: list[T] = []
        card = deck.draw()
        while card is not None:
            cards.append(card)
            card = deck.draw()
        logger.debug("session created cards=%d", len(cards))
        return cls(cards, rng=rng)

    # Navigation

    def next_card(self) -> weakref.ref[T] | None:
        """Advance: the head of ``unseen`` becomes the current card.

        Returns None (and changes nothing) when no unseen card is left.
        """
        if not self._unseen:
            return None
        card = self._unseen.popleft()
        self._seen.appendleft(card)
        logger.debug("next_card seen=%d unseen=%d", len(self._seen), len(self._unseen))
        return weakref.ref(card)

    def previous_card(self) -> weakref.ref[T] | None:
        """Undo the last advance: the current card goes back to the head of ``unseen``.

        Returns a handle to the card that was moved, or None when nothing was seen.
        The new current card is whatever is now at the head of ``seen``.
        """
        if not self._seen:
            return None
        card = self._seen.popleft()
        self._unseen.appendleft(card)
        logger.debug("previous_card seen=%d unseen=%d", len(self._seen), len(self._unseen))
        return weakref.ref(card)

    def current_card(self) -> weakref.ref[T] | None:
        if not self._seen:
            return None
        return weakref.ref(self._seen[0])

    # Current card state. All of these are no-ops when nothing was seen yet.

    def flip_current_card(self) -> None:
        if self._seen:
            self._seen[0].flip()

    def try_flip_current_card_to_hint(self) -> None:
        """Show the hint of the current card if it has a non-empty one."""
        if not self._seen:
            return
        card = self._seen[0]
        if card.hint and card.hint.strip():
            card.set_state(CardState.HINT)

    def reset_current_card_state(self) -> None:
        if self._seen:
            self._seen[0].set_state(CardState.FRONT)

    # Bulk operations

    def shuffle(self) -> None:
        """Shuffle the unseen cards; seen cards keep their order."""
        cards = list(self._unseen)
        (self._rng or random).shuffle(cards)
        self._unseen = deque(cards)
        logger.debug("shuffled unseen=%d", len(cards))

    def add_previous_cards_to_deck(self) -> None:
        """Move every seen card back to the head of ``unseen``.

        Same result as calling ``previous_card`` until ``seen`` is empty: the
        oldest seen card ends up first in line.
        """
        moved = len(self._seen)
        # extendleft reverses its input, seen is newest-first.
        self._unseen.extendleft(self._seen)
        self._seen.clear()
        logger.debug("replayed seen cards=%d unseen=%d", moved, len(self._unseen))

    # Queries

    def num_of_cards_seen(self) -> int:
        return len(self._seen)

    def num_of_cards_in_deck(self) -> int:
        return len(self._unseen)

    def total_cards(self) -> int:
        return len(self._seen) + len(self._unseen)

    def seen_cards(self) -> tuple[weakref.ref[T], ...]:
        """Handles to the seen cards, current card first."""
        return tuple(weakref.ref(c) for c in self._seen)

    def unseen_cards(self) -> tuple[weakref.ref[T], ...]:
        """Handles to the unseen cards, next card first."""
        return tuple(weakref.ref(c) for c in self._unseen)

    def __len__(self) -> int:
        return self.total_cards()

    def __repr__(self) -> str:
        return f"CardsManager(seen={len(self._seen)}, unseen={len(self._unseen)})"
