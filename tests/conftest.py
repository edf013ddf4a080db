from __future__ import annotations

from typing import Callable

import pytest

from flashcard_study.card import Card
from flashcard_study.deck import Deck
from flashcard_study.manager import CardsManager


def _make_cards(n: int = 10) -> list[Card]:
    return [Card(f"{i} - front", f"{i} - back", f"{i} - hint") for i in range(n)]


@pytest.fixture
def make_cards() -> Callable[..., list[Card]]:
    """Factory for fresh numbered cards: make_cards(n=10)."""
    return _make_cards


@pytest.fixture
def cards() -> list[Card]:
    return _make_cards()


@pytest.fixture
def deck(cards: list[Card]) -> Deck[Card]:
    return Deck(cards)


@pytest.fixture
def manager(cards: list[Card]) -> CardsManager[Card]:
    """Manager whose unseen queue is cards[0..9] in order."""
    return CardsManager(cards)
