"""A limited supply of random hints for the detective."""

from __future__ import annotations

import random
import sys
from typing import Protocol, Sequence

MAX_HINTS = 3

HINTS: tuple[str, ...] = (
    "Check entry points for signs of struggle.[?]",
    "No signs of struggle? The killer may have been let in.",
    "Look for who had access to her room and the party.",
    "Notice that her phone is missing — someone took it.",
    "Roommates share secrets. Look for personal items.",
    "Digital devices and Personal papers often hold hidden conflicts.",
    "Alibis need witnesses. Verify timelines",
    "Jealousy Kills!(Sometimes the people you love).",
    "Injuries can betray violent encounters!",
    "Motive + Opportunity + Means = Killer",
)


class _Chooser(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


class NoHintsLeft(Exception):
    """Raised when every allowed hint has already been taken."""

    def __init__(self) -> None:
        super().__init__("You already have choose enough hints! No hints left!")


class HintBook:
    """Hands out up to MAX_HINTS random hints."""

    def __init__(self, rng: _Chooser | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._used = 0

    def reveal(self) -> str:
        """Return a random hint, or raise NoHintsLeft once all are used."""
        if self._used >= MAX_HINTS:
            raise NoHintsLeft()
        hint = self._rng.choice(HINTS)
        self._used += 1
        return hint

    def remaining(self) -> int:
        """Number of hints that can still be revealed."""
        return MAX_HINTS - self._used


def main(argv: list[str] | None = None) -> int:
    """Reveal one hint and report how many remain."""
    book = HintBook()
    out = sys.stdout
    out.write(f"\t\t HINTS[!]\t\t\t(TOTAL HINTS: {MAX_HINTS})\n")
    try:
        out.write(f"->[!] HINT :{book.reveal()}\n")
    except NoHintsLeft:
        out.write("\n[!][!]You already have choose enough hints!\n[!][!]No hints left!")
    out.write(f"\n\t\t\t\t\tRemaining Hints :{book.remaining()}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())