from hillview.journal import ClueJournal

HEADER = "\n|------------------------Your Clue Journal -----------------------------|\n"
FOOTER = "|------------------------------------------------------------------------|\n"
STORM = "The storm has knocked out all communications. Nobody can leave or call for help."
BOB = "Bob was close to Alice and seems genuinely upset by her death."


def test_new_journal_is_empty():
    journal = ClueJournal()
    assert len(journal) == 0
    assert list(journal) == []


def test_empty_render():
    assert ClueJournal().render() == HEADER + "|- No clues collected yet.\n" + FOOTER


def test_add_records_clue():
    journal = ClueJournal()
    assert journal.add(STORM) is True
    assert STORM in journal
    assert len(journal) == 1


def test_duplicates_are_skipped():
    journal = ClueJournal()
    journal.add(STORM)
    assert journal.add(STORM) is False
    assert list(journal) == [STORM]


def test_order_is_preserved():
    journal = ClueJournal()
    journal.add(BOB)
    journal.add(STORM)
    journal.add(BOB)
    assert list(journal) == [BOB, STORM]


def test_render_lists_entries():
    journal = ClueJournal()
    journal.add(STORM)
    journal.add(BOB)
    assert journal.render() == HEADER + f"|- {STORM}\n|- {BOB}\n" + FOOTER


def test_contains_missing_clue():
    journal = ClueJournal()
    journal.add(STORM)
    assert BOB not in journal


def test_journals_are_independent():
    first = ClueJournal()
    second = ClueJournal()
    first.add(STORM)
    assert len(second) == 0