import random

import pytest

from hillview.hints import HINTS, MAX_HINTS, HintBook, NoHintsLeft, main


class _LastChooser:
    def choice(self, seq):
        return seq[-1]


class _RecordingChooser:
    def __init__(self):
        self.seen = None

    def choice(self, seq):
        self.seen = list(seq)
        return seq[0]


def test_hint_pool_is_the_source_list():
    chooser = _RecordingChooser()
    book = HintBook(chooser)
    assert book.reveal() == "Check entry points for signs of struggle.[?]"
    assert len(chooser.seen) == 10
    assert chooser.seen[6] == "Alibis need witnesses. Verify timelines"


def test_reveal_returns_known_hint():
    book = HintBook(random.Random(1))
    assert book.reveal() in HINTS


def test_reveal_uses_rng_choice():
    book = HintBook(_LastChooser())
    assert book.reveal() == "Motive + Opportunity + Means = Killer"


def test_remaining_counts_down():
    book = HintBook(random.Random(2))
    counts = [book.remaining()]
    for _ in range(MAX_HINTS):
        book.reveal()
        counts.append(book.remaining())
    assert counts == [3, 2, 1, 0]


def test_reveal_after_limit_raises():
    book = HintBook(random.Random(3))
    for _ in range(MAX_HINTS):
        book.reveal()
    with pytest.raises(NoHintsLeft):
        book.reveal()
    assert book.remaining() == 0


def test_same_seed_same_hints():
    first = HintBook(random.Random(42))
    second = HintBook(random.Random(42))
    assert [first.reveal() for _ in range(3)] == [second.reveal() for _ in range(3)]


def test_main_prints_one_hint(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\t\t HINTS[!]\t\t\t(TOTAL HINTS: 3)\n")
    hint_line = out.splitlines()[1]
    assert hint_line.startswith("->[!] HINT :")
    assert hint_line[len("->[!] HINT :"):] in HINTS
    assert "Remaining Hints :2" in out