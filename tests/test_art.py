import io
import sys
from unittest import mock

from hillview import art


def _all_art():
    return [
        art.phone_art(),
        art.alice_phone_art(),
        art.room_art(),
        art.diary_art(),
        art.title_art(),
        art.dorm_art(),
        art.alice_room_art(),
        art.floor_plan_art(),
        art.crime_map_art(),
        art.killer_art(),
        art.champion_art(),
        art.busted_art(),
        art.win_art(),
    ]


def test_art_ends_with_newline():
    for text in _all_art():
        assert text.endswith("\n")


def test_art_pieces_are_distinct_and_non_blank():
    pieces = _all_art()
    assert len(set(pieces)) == len(pieces)
    assert all(piece.strip() for piece in pieces)


def test_room_frame():
    lines = art.room_art().splitlines()
    assert len(lines) == 20
    assert lines[0] == "0================================================0"
    assert lines[-1] == lines[0]
    assert all(len(line) == len(lines[0]) for line in lines[1:5])


def test_room_escapes_are_literal_characters():
    lines = art.room_art().splitlines()
    assert lines[4] == "|      '. ____________/===\\_____________ .'      |"
    assert '`\\"/`' in lines[5]


def test_phone_lines():
    lines = art.phone_art().splitlines()
    assert lines[0] == "  __i"
    assert lines[-1] == "   \\_=_\\ "


def test_alice_phone_holds_threats():
    text = art.alice_phone_art()
    assert "* Chris: You're mine.                   54      " in text
    assert "WHATSAPP" in text
    assert "Chris:You can't leave." in text


def test_diary_mentions_temper():
    text = art.diary_art()
    assert "His temper scares" in text
    assert text.splitlines()[-1] == "  `---------------------~___~--------------------''"


def test_killer_starts_with_blank_lines_and_keeps_tab():
    text = art.killer_art()
    assert text.startswith("\n\n")
    assert "\t" in text
    assert "HELP!" in text


def test_champion_text():
    lines = art.champion_art().splitlines()
    assert lines[:2] == ["", ""]
    assert lines[-1] == ">                         YOU ARE THE CHAMPION!"


def test_busted_has_five_lines():
    assert len(art.busted_art().splitlines()) == 5


def test_crime_map_header():
    text = art.crime_map_art()
    assert text.startswith("        \nThe Map of the Crime Scene\n")
    assert "       |        Exit Door ??        |" in text.splitlines()


def test_dorm_sign():
    text = art.dorm_art()
    assert "*** | ^^ ^^|----H-13---DORM-----| ^^  ^^ |--" in text.splitlines()
    assert text.endswith("\n\n")


def test_title_and_win_line_counts():
    assert len(art.title_art().splitlines()) == 13
    assert len(art.win_art().splitlines()) == 17


def test_alice_room_and_floor_plan():
    assert "| o->dead body    |" in art.alice_room_art().splitlines()
    assert "|            Alice & Mandy's Room                |" in art.floor_plan_art()


def test_opening_frames_and_delays():
    out = io.StringIO()
    delays = []
    art.opening(out, delays.append)
    text = out.getvalue()
    assert text.startswith("Welcome to DOKI DOKI Literature society!!\nLoading destinations!!!\n")
    assert len(delays) == 8
    assert delays[0] > delays[1]
    assert len(set(delays[1:])) == 1
    assert text.count(art.CLEAR_SEQUENCE) == 8
    frames = text.split(art.CLEAR_SEQUENCE)
    assert frames[0].endswith("\n---")
    assert frames[7] == " " * 21 + "---"


def test_clear_screen_on_posix(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "linux")
    art.clear_screen()
    assert capsys.readouterr().out == art.CLEAR_SEQUENCE


def test_clear_screen_on_windows(monkeypatch, capsys):
    monkeypatch.setattr(sys, "platform", "win32")
    with mock.patch("hillview.art.subprocess.run") as run:
        art.clear_screen()
    assert capsys.readouterr().out == ""
    assert run.call_args == mock.call("cls", shell=True, check=False)
    assert run.call_count == 1