from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .types import NO_HINT_TEXT, CardState


@dataclass(eq=False)
class Card:
    """A single flashcard plus the face it is currently showing.

    Equality is identity: two cards with the same text are still different
    cards in a session.
    """

    front: str
    back: str
    hint: str | None = None
    state: CardState = field(default=CardState.FRONT, repr=False)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Card":
        hint = str(row.get("hint") or "").strip()
        return cls(
            front=str(row["front"]),
            back=str(row["back"]),
            hint=hint or None,
        )

    def get_front(self) -> str:
        return self.front

    def get_back(self) -> str:
        return self.back

    def get_hint(self) -> str:
        return self.hint if self.hint is not None else NO_HINT_TEXT

    def has_hint(self) -> bool:
        return bool(self.hint and self.hint.strip())

    def get_state(self) -> CardState:
        return self.state

    def set_state(self, state: CardState) -> None:
        self.state = CardState(state)

    def flip(self) -> CardState:
        """Toggle between front and back. A card showing its hint goes back to the front."""
        if self.state is CardState.FRONT:
            self.state = CardState.BACK
        else:
            self.state = CardState.FRONT
        return self.state

    def get_display_text(self) -> str:
        if self.state is CardState.BACK:
            return self.get_back()
        if self.state is CardState.HINT:
            return self.get_hint()
        return self.get_front()

    def __str__(self) -> str:
        return self.get_display_text()
