"""The interactive murder mystery at Hillview Hostel."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field
from typing import Callable, TextIO

from hillview.art import (
    CLEAR_SEQUENCE,
    alice_phone_art,
    busted_art,
    champion_art,
    clear_screen,
    crime_map_art,
    diary_art,
    dorm_art,
    killer_art,
    room_art,
    title_art,
    win_art,
)
from hillview.characters import game_suspects
from hillview.journal import ClueJournal

DIVIDER = "\n________________________________________________________________\n"

STORM_CLUE = "The storm has knocked out all communications. Nobody can leave or call for help."
MANDY_GAZE_CLUE = "Mandy's gaze fixated on someone in the room when discussing Alice's death."
MANDY_NIGHTS_CLUE = (
    "According to Mandy, Alice was frequently upset at night, texting someone - possibly Chris."
)
PHONE_CLUES = (
    "Alice's phone contains threatening messages from Chris: "
    "'You're mine' and 'If you leave, no one will care.'",
    "Chris' last messages were: 'You'll regret it' and 'You can't leave.'",
)
DIARY_CLUES = (
    "Alice's diary mentions Chris has a scary temper and she didn't feel safe.",
    "Alice's diary entry: 'Chris was being rude again. His temper scares me sometimes.'",
)
CHRIS_CLUES = (
    "Chris is hostile and defensive. He pointed towards Mandy.",
    "Chris tried to deflect suspicion by questioning your authority to investigate.",
)
BOB_CLUES = (
    "Bob was close to Alice and seems genuinely upset by her death.",
    "Bob told Alice to break up with Chris, calling him a 'jerk'.",
)


def type_out(
    text: str,
    delay_ms: int,
    out: TextIO | None = None,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """Write text one character at a time with a pause after each."""
    out = sys.stdout if out is None else out
    sleep = time.sleep if sleep is None else sleep
    for ch in text:
        out.write(ch)
        out.flush()
        sleep(delay_ms / 1000)


@dataclass
class Player:
    """The detective and their clue journal."""

    name: str
    journal: ClueJournal = field(default_factory=ClueJournal)

    def results(self, win: bool) -> str:
        """The final results screen."""
        outcome = (
            "Outcome: WIN! Justice is served.\n"
            if win
            else "Outcome: FAIL. The killer got away...\n"
        )
        return f"\n--- Final Results ---\nDetective: {self.name}\n{outcome}"


class Game:
    """Drives the story: discovery, investigation, interviews and accusation."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self._in = sys.stdin if stdin is None else stdin
        self._out = sys.stdout if stdout is None else stdout
        self._sleep = time.sleep if sleep is None else sleep
        if clear is not None:
            self._clear = clear
        elif stdout is None:
            self._clear = clear_screen
        else:
            self._clear = lambda: self._out.write(CLEAR_SEQUENCE)
        self.mandy, self.chris, self.bob = game_suspects()
        self.player_name = ""
        self.player = Player("")

    # --- input and output helpers -------------------------------------

    def _say(self, *parts: str) -> None:
        self._out.write("".join(parts))
        self._out.flush()

    def _delay(self, milliseconds: int) -> None:
        self._sleep(milliseconds / 1000)

    def _type(self, text: str, delay_ms: int) -> None:
        type_out(text, delay_ms, self._out, self._sleep)

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def _read_choice(self) -> int | None:
        """Read a number from the player; None if it is not a number."""
        tokens = self._read_line().split()
        if not tokens:
            return None
        try:
            return int(tokens[0])
        except ValueError:
            return None

    def _pause(self) -> None:
        self._in.readline()

    def _continue(self) -> None:
        self._say("\nPress any key to continue...")
        self._pause()
        self._clear()

    # --- scenes -------------------------------------------------------

    def start(self) -> bool | None:
        """Greet the player, ask their name and play the game through."""
        self._say(DIVIDER, " \t WELCOME TO \n")
        self._delay(350)
        self._say(title_art(), DIVIDER)
        self._say("Enter your name, Detective: ")
        self.player_name = self._read_line()
        self.player = Player(self.player_name)
        self._say(f"\nHello, Detective {self.player.name}! Your investigation begins...\n\n")
        self._delay(1000)
        self._clear()
        return self.discovery()

    def discovery(self) -> bool | None:
        """The body is found; then the investigation begins."""
        self._say(DIVIDER, "SCENE: THE DISCOVERY \n")
        self._delay(1000)
        self._say(
            "After a long semester, you host a party in the common lounge of Hillview Hostel.\n\n"
        )
        self._delay(350)
        self._say(dorm_art())
        self._delay(350)
        self._say(
            "The storm outside is fierce, rain hitting the windows and the lights flickering.\n"
            "As dawn breaks, the hostel falls into an eerie silence.\n"
            "You head to the bathroom, walking through the dim corridors.\n"
            "When you enter, you're shocked to find your friend Alice lying motionless on the floor,\n"
            "her eyes wide open and surrounded by blood.\n"
            "There's bruising around her neck.\n"
        )
        self._type("\t\t\tAlice is dead .\n", 100)
        self._delay(1000)
        self._say(" Press any key to move forward!\n")
        self._pause()
        self._clear()
        self.reaction()
        return self.investigation_phase()

    def reaction(self) -> None:
        """The realisation that the murderer is among the group."""
        self._say(
            "SCENE : REACTION\n",
            "After a quick look around, you realise there is no sign of forced entry.\n"
            "Realizing the gravity of the situation, you run back to the common lounge in a frenzy. \n",
        )
        self._type("\n\t\t\tIt's clear: the murderer is among you.\n", 100)
        self._delay(100)
        self._type("\n\t\t\tYou must find the killer, if you wish to survive.\n", 100)
        self._say("\n", crime_map_art())
        self._delay(100)

    def _call_for_help(self, whom: str) -> None:
        self._type("\n\nCalling.......", 200)
        self._delay(200)
        self._say(
            "\n\nNO SIGNAL\n",
            f"\nDue to the raging storm outside, your call was not forwarded to the {whom}.\n",
        )
        self.player.journal.add(STORM_CLUE)

    def investigation_phase(self) -> bool | None:
        """The first menu; ends once the group is told and the case is solved."""
        while True:
            self._say(
                DIVIDER,
                "\nInvestigation Menu:\n"
                "1. Call the Hostel Warden\n"
                "2. Call the Police\n"
                "3. Tell everyone what's going on\n"
                "4. Review your clue diary\n"
                "Enter your choice: ",
            )
            choice = self._read_choice()
            if choice == 1:
                self._clear()
                self._call_for_help("warden")
            elif choice == 2:
                self._call_for_help("Police")
            elif choice == 3:
                self._clear()
                self._say(
                    "SCENE: THE REVEAL\n",
                    "\nYou reveal what you found to what's left of the group.\n"
                    "Understandably, everyone is horrified.\n",
                    "\nCHARACTER PROFILES OF EVERYONE WHO IS CURRENTLY IN THE ROOM WITH YOU: \n",
                )
                for suspect in (self.mandy, self.chris, self.bob):
                    self._say(DIVIDER, suspect.details())
                self._say(DIVIDER)
                return self.interview_phase()
            elif choice == 4:
                self._clear()
                self._say(self.player.journal.render())
                self._continue()
            else:
                self._say("\nInvalid choice. Please try again.\n")

    def _interview_mandy(self) -> None:
        journal = self.player.journal
        self._say(
            "SCENE: INTERVIEW WITH MANDY\n",
            "MANDY: I'm not comfortable talking in front of...\n"
            "\t*Mandy's gaze fixates on someone in the room for a while but before\n"
            "\tyou can figure out who it is, she looks back at you*\n"
            "\teveryone. Do you mind coming to my room with me?\n\n",
            room_art(),
        )
        journal.add(MANDY_GAZE_CLUE)
        self._say("Press any key to continue...")
        self._pause()
        self._clear()
        self._say(
            "MANDY: Alice had been...distressed as of late.\n"
            "\tSometimes, I'd get up during the night for a glass of water and I'd almost\n"
            "\talways find Alice sniffling, texting someone in disarray.\n"
            "\tI have reason to believe it was her boyfriend, Chris.\n"
            "\tI'm not sure what exactly went down between the two of them but you're welcome to look around\n"
            "\ther side of the room if you wish.\n"
        )
        journal.add(MANDY_NIGHTS_CLUE)
        self._say(
            "\nAs you look around Alice's side of the room, you find her phone and diary.\n"
            "Which do you wish to investigate?\n"
            "1. Her Phone\n"
            "2. Her Diary\n"
            "Please enter your choice (1-2): "
        )
        choice = self._read_choice()
        self._clear()
        if choice == 1:
            self._say(alice_phone_art())
            for clue in PHONE_CLUES:
                journal.add(clue)
        elif choice == 2:
            self._say(diary_art())
            for clue in DIARY_CLUES:
                journal.add(clue)
        self._continue()

    def _interview_chris(self) -> None:
        self._say(
            "SCENE: INTERVIEW WITH CHRIS\n\n",
            "SCENE: INTERVIEW WITH CHRIS\n\n",
            "Chris: How are you so sure this was a murder?\n"
            "\tThat b**** was clearly unstable. The way I see it, this case is pretty open and shut.\n"
            "\tB**** probably took the easy way out\n"
            "\tWho are you to investigate us anyway?\n"
            "\tHow are we so sure you didn't kill her?\t\n"
            "\tJust do everyone a favour and end this little game of yours.\n"
            "\n\t*Chris mumbles to himself\n\n"
            "\tShe *points towards Mandy* did that!\n",
        )
        for clue in CHRIS_CLUES:
            self.player.journal.add(clue)
        self._continue()

    def _interview_bob(self) -> None:
        self._say(
            "SCENE: INTERVIEW WITH BOB\n\n",
            "Bob:\tC-Could we please t-talk in the hallway?\n"
            "\tIf you dont mind...\n"
            "\n\t*You follow Bob into the hallway*\n\n"
            "\tBob: *Sniffling*\n"
            "\tI can't believe she's gone...\n"
            "\tShe and I were close y'know. I didn't even get to tell her...\n"
            "\tIf only that jerk Chris wasn't in the way...\n"
            "\tI told her to break up with him...\n"
            "\tThis wouldn't have happened if..\n"
            "\n\t*Breaks down*\n\n"
            "\tI'm s-sorry, I can't d-do this anymore. I hope you find whoever d-did this.\n",
        )
        for clue in BOB_CLUES:
            self.player.journal.add(clue)
        self._continue()

    def interview_phase(self) -> bool | None:
        """Interview suspects until the player is ready to accuse."""
        while True:
            self._say(
                "\nWho do you wish to interview?\n"
                "1. Mandy\n"
                "2. Chris\n"
                "3. Bob\n"
                "4. Review your clue diary\n"
                "5. Make your accusation\n"
                "Please enter your choice (1-5): "
            )
            choice = self._read_choice()
            self._clear()
            if choice == 1:
                self._interview_mandy()
            elif choice == 2:
                self._interview_chris()
            elif choice == 3:
                self._interview_bob()
            elif choice == 4:
                self._say(self.player.journal.render())
                self._continue()
            elif choice == 5:
                return self.make_accusation()
            else:
                self._say("\nInvalid choice. Please try again.\n")

    def make_accusation(self) -> bool | None:
        """Name the killer; True for a win, False for a loss, None for no choice."""
        name = self.player_name
        self._clear()
        self._say(
            f"So dear {name}, are you ready to choose the Killer?\n",
            "Before making your accusation, you review the evidence one last time:\n",
            self.player.journal.render(),
            "\n1. It was Chris\n2. Bob did it\n3. It was Mandy\n",
            "Please enter your choice (1-3): ",
        )
        choice = self._read_choice()
        self._clear()
        if choice == 1:
            self._say(
                f"Congratulations, Detective {name}!\n",
                "\nYou carefully present your evidence:\n"
                "- The threatening messages on Alice's phone\n"
                "- Alice's diary mentioning Chris's scary temper\n"
                "- Chris's hostile and defensive behavior during questioning\n"
                "\nChris breaks down and confesses to the murder.\n"
                "He couldn't handle Alice trying to leave him, so he followed her\n"
                "and in a fit of rage, strangled her in the bathroom.\n",
                win_art(),
                self.player.results(True),
                champion_art(),
            )
            return True
        if choice == 2:
            self._say(
                f"Oh no, Detective {name}!\n",
                "\nYou accuse Bob, but he's genuinely shocked and hurt by the accusation.\n"
                "While Bob was obsessed with Alice, the evidence doesn't support your theory.\n"
                "Meanwhile, Chris slips away during the confusion...\n",
            )
        elif choice == 3:
            self._say(
                f"Oh no, Detective {name}!\n",
                "\nYou accuse Mandy, but she's absolutely bewildered by your accusation.\n"
                "The evidence clearly points elsewhere, and in your confusion,\n"
                "you've allowed the real killer to escape...\n",
            )
        else:
            return None
        self._say(busted_art(), self.player.results(False), killer_art())
        return False


def main(argv: list[str] | None = None) -> int:
    """Play the game on the terminal."""
    try:
        Game().start()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())