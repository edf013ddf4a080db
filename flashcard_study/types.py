from __future__ import annotations

import random
from enum import Enum
from typing import Any, Iterator, Mapping, Protocol, TypeVar, runtime_checkable

NO_HINT_TEXT = "No Hint Found"


class CardState(Enum):
    FRONT = "front"
    BACK = "back"
    HINT = "hint"


@runtime_checkable
class FlashCard(Protocol):
    front: str
    back: str
    hint: str | None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> FlashCard:
        """Build a card from one parsed table row keyed by column name."""
        ...

    def get_front(self) -> str: ...

    def get_back(self) -> str: ...

    def get_hint(self) -> str: ...

    def get_display_text(self) -> str: ...


@runtime_checkable
class FlipFlashCard(FlashCard, Protocol):
    state: CardState

    def get_state(self) -> CardState: ...

    def set_state(self, state: CardState) -> None: ...

    def flip(self) -> CardState: ...


T = TypeVar("T", bound=FlipFlashCard)
C = TypeVar("C", bound=FlashCard)


class FlashCards(Protocol[C]):
    """Deck contract consumed by the session manager."""

    def draw(self) -> C | None: ...

    def add(self, card: C) -> None: ...

    def add_to_top(self, card: C) -> None: ...

    def shuffle(self, rng: random.Random | None = None) -> None: ...

    def deck_size(self) -> int: ...

    def __iter__(self) -> Iterator[C]: ...
