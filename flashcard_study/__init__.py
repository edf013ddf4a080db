"""Flashcard study library.

- Card: front/back/hint text plus the face currently shown
- Deck: ordered pile of cards (draw pops the tail)
- loader: CSV (front,back,hint) -> Deck
- CardsManager: seen/unseen study session over a deck

Persistence of study progress and spaced-repetition scheduling are out of scope.
"""

from __future__ import annotations

from .card import Card
from .deck import Deck
from .loader import ParseError, load, load_path
from .manager import CardsManager
from .types import NO_HINT_TEXT, CardState, FlashCard, FlashCards, FlipFlashCard

__all__ = [
    "__version__",
    "Card",
    "CardState",
    "CardsManager",
    "Deck",
    "FlashCard",
    "FlashCards",
    "FlipFlashCard",
    "NO_HINT_TEXT",
    "ParseError",
    "load",
    "load_path",
]

__version__ = "0.1.0"
