# hillview

A short interactive murder mystery for the terminal.

A semester-end party at Hillview Hostel ends in a storm that cuts off every
line to the outside world. Then your friend Alice is found dead in the
bathroom. Nobody forced their way in, so the killer is still in the building.
Interview the suspects, search Alice's belongings and note what you learn in
your clue journal. When you are ready, name the killer.

## Installation

```
pip install .
```

## Playing

```
hillview
```

The game asks for your name. After that it takes you through three stages:

1. **Investigation**: call the warden, call the police, tell the group what
   happened, or read your clue journal.
2. **Interviews**: question Mandy, Chris or Bob, read your journal again, or
   make your accusation. With Mandy you also choose whether to look at Alice's
   phone or her diary.
3. **Accusation**: pick the killer. Pick the right one and justice is served.
   Pick the wrong one and the killer gets away.

Choices are numbers typed at the prompt. Anything else counts as an invalid
choice, and the menu is shown again. Wherever the game says "press any key",
press Enter. Each clue goes into the journal only once, however many times you
find it. The game closes quietly when input ends or when you press Ctrl-C.

## Hints

```
hillview-hints
```

Shows one hint, picked at random from a fixed list of ten, and tells you how
many hints remain. Hints are a separate command and are not offered inside the
game.

## Using it from Python

`hillview.game.Game` takes its input stream, output stream, sleep function and
screen-clearing function as arguments, so a session can be scripted:

```python
import io
from hillview.game import Game

answers = io.StringIO("Sam\n\n3\n5\n1\n")
game = Game(stdin=answers, stdout=io.StringIO(), sleep=lambda s: None, clear=lambda: None)
outcome = game.start()   # True: Chris was accused
```

`Game.start()` returns `True` if the right suspect is accused and `False` if
the wrong one is. It returns `None` if the final choice is not 1 to 3. If input
runs out while the game is waiting for an answer, `EOFError` is raised.

Each of the other modules can be used by itself:

- `hillview.characters`: the frozen dataclasses `Character` and `Suspect`.
  Their `details()` methods return the profile text. `game_suspects()` returns
  the game's cast and `interrogation_suspects()` returns a second line-up.
- `hillview.journal`: `ClueJournal`, an ordered record of clues with no
  duplicates. `add()` reports whether a clue was new and `render()` returns
  the journal as shown to the player. A journal supports `len()`, `in` and
  iteration.
- `hillview.hints`: `HintBook`, which hands out at most three random hints.
  `reveal()` raises `NoHintsLeft` once they are used up. It takes an optional
  random generator.
- `hillview.art`: the ASCII pictures, each returned as a string, plus
  `clear_screen()` and the `opening()` loading animation.

## Running the tests

```
pip install .[test]
pytest
```