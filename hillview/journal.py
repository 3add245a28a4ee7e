"""The detective's journal of collected clues."""

from __future__ import annotations

from typing import Iterator

_HEADER = "\n|------------------------Your Clue Journal -----------------------------|\n"
_FOOTER = "|------------------------------------------------------------------------|\n"
_EMPTY = "|- No clues collected yet.\n"


class ClueJournal:
    """An ordered collection of distinct clues."""

    def __init__(self) -> None:
        self._entries: list[str] = []

    def add(self, clue: str) -> bool:
        """Record a clue unless it is already there; return whether it was added."""
        if clue in self._entries:
            return False
        self._entries.append(clue)
        return True

    def render(self) -> str:
        """The journal as shown to the player."""
        if self._entries:
            body = "".join(f"|- {entry}\n" for entry in self._entries)
        else:
            body = _EMPTY
        return _HEADER + body + _FOOTER

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, clue: object) -> bool:
        return clue in self._entries