"""The people of the Hillview mystery: characters and suspects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Character:
    """Someone in the story, with their relationship to the victim."""

    name: str = ""
    relationship: str = ""
    age: int = 0

    def details(self) -> str:
        """The character's profile as printed in the game."""
        return (
            f"Name: {self.name}\n"
            f"Age: {self.age}\n"
            f"Relationship with victim: {self.relationship}\n"
        )


@dataclass(frozen=True)
class Suspect(Character):
    """A character under suspicion, with an alibi and a motive."""

    alibi: str = ""
    motive: str = ""
    is_killer: bool = False

    def details(self) -> str:
        """The suspect's profile: the character's details and the alibi."""
        return super().details() + f"Alibi: {self.alibi}\n"


def interrogation_suspects() -> tuple[Suspect, Suspect, Suspect]:
    """The suspects lined up for an interrogation."""
    return (
        Suspect("Mandy", "Suspect", 20, "Stayed with the group",
                "Exposed Alice for cheating", False),
        Suspect("Bob", "Suspect", 19, "Went to get drinks",
                "Scared, under pressure", False),
        Suspect("Chris", "Suspect", 22, "In the kitchen alone",
                "Angry ex-boyfriend", True),
    )


def game_suspects() -> tuple[Suspect, Suspect, Suspect]:
    """The three people in the lounge, in the order the game presents them."""
    return (
        Suspect("Mandy", "Roommate", 20, "At the cafe", "Jealousy", False),
        Suspect("Chris", "Boyfriend", 22, "Library", "Possessiveness", True),
        Suspect("Bob", "Friend", 21, "Stairwell", "Obsession", False),
    )