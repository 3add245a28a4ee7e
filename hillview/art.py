"""ASCII art scenes and screen helpers for the Hillview mystery."""

from __future__ import annotations

import subprocess
import sys
import time
from typing import Callable, TextIO

CLEAR_SEQUENCE = "\033[2J\033[H"


def _block(*lines: str, prefix: str = "") -> str:
    """Join lines, each terminated by a newline, after an optional prefix."""
    return prefix + "".join(f"{line}\n" for line in lines)


def clear_screen() -> None:
    """Clear the terminal."""
    if sys.platform.startswith("win"):
        subprocess.run("cls", shell=True, check=False)
    else:
        sys.stdout.write(CLEAR_SEQUENCE)
        sys.stdout.flush()


def phone_art() -> str:
    """A small mobile phone."""
    return _block(
        "  __i",
        " |---|    ",
        " |[_]|    ",
        " |:::|    ",
        " |:::|    ",
        " `\\   \\   ",
        "   \\_=_\\ ",
    )


def alice_phone_art() -> str:
    """The chat on Alice's phone."""
    return _block(
        "                                                                         ",
        "                           ***********************9999999999996444       ",
        "                          *         46666664444468299995        55       ",
        "                         *           255554444444444443          42      ",
        "                         *_______________________________________25      ",
        "                         *               WHATSAPP                55      ",
        "                         *_______________________________________25      ",
        "                         * MON,2,25                              55      ",
        "                         *                                       42      ",
        "                         * Chris: You never listen to me.        55      ",
        "                         *           Stop controlling me! :Alice 55      ",
        "                         * Chris: I m trying to help!            54      ",
        "                         *                                       55      ",
        "                         *        I dont need your help! : Alice 55      ",
        "                         *       Dont tell me what to do!: Alice 55      ",
        "                         *                                       54      ",
        "                         * Chris: You're mine.                   54      ",
        "                         * Chris:If you leave. no one will care. 54      ",
        "                         *                                       55      ",
        "                         *        Chris, you're scaring me:Alice 55      ",
        "                         *                                       55      ",
        "                         * Chris: Good. You should be scared.    55      ",
        "                         *                                       55      ",
        "                         *       I can't do this anymore. :Alice 55      ",
        "                         *       Maybe we should end this.:Alice 55      ",
        "                         *                      I'm done. :Alice 55      ",
        "                         *                                       55      ",
        "                         *  Chris: You ll regret it.             55      ",
        "                         *  Chris:You can't leave.               55      ",
        "                         *  Chris:If you do ,you'll regret it.   55      ",
        "                         *                                       55      ",
        "                         * Type a message...                     45      ",
        "                         *                                       45      ",
        "                         *_______________________________________47      ",
        "                         *                                       45      ",
        "                          *                o                     45      ",
        "                           **___________________________________47       ",
    )


def room_art() -> str:
    """Mandy's room."""
    return _block(
        "0================================================0",
        "|'.                    (|)                     .'|",
        "|  '.                   |                    .'  |",
        "|    '.                |O|                 .'    |",
        "|      '. ____________/===\\_____________ .'      |",
        "|        :            `\\\"/`  ______     :     .. |",
        "|        :     mmmmmmm  V   |--%%--|    :   .'|| |",
        "|        :     |  |  |      |-%%%%-|    :  |  || |",
        "|        :     |--|--| @@@  |=_||_=|    :  I  || |",
        "|        :     |__|__|@@@@@ |\\_\\__/_|    :  |  || |",
        "|        :             \\|/   ____       :  |  || |",
        "|        :;;       .'``(_)```\\__/````:  :  |  || |",
        "|        :||___   :================:'|  :  | 0+| |",
        "|        :||===)  | |              | |  :  |  || |",
        "|        ://``\\\\__|_|______________|_|__:  I  || |",
        "|      .'/'    \\' | '              | '   '.|  || |",
        "|    .'           |                |       '. || |",
        "|  .'                                        '|| |",
        "|.' Spicer                                     '.|",
        "0================================================0",
    )


def diary_art() -> str:
    """Alice's open diary."""
    return _block(
        "   ___________________   ___________________",
        "  .-/|  80   ~~**~~      \\ /      ~~**~~   81  |\\-.",
        "  ||||                    :                     ||||",
        "  ||||  Chris was being    :  His temper scares ||||",
        "  ||||  rude again.        :  me sometimes.     ||||",
        "  ||||                    :                     ||||",
        "  ||||  Mandy seems        :  Snapped at me     ||||",
        "  ||||  jealous lately.    :  over nothing.     ||||",
        "  ||||                    :                     ||||",
        "  ||||  Bob is texting     :  Overbearing, even ||||",
        "  ||||  too much.          :  for a friend.     ||||",
        "  ||||                    :                     ||||",
        "  ||||  I don't feel safe. :  Not even in my    ||||",
        "  ||||                    :  own room.          ||||",
        "  ||||                    :                     ||||",
        "  ||||    Diary Alice      : April 25           ||||",
        "  ||||____________________:_____________________||||",
        "  ||/====================\\:/====================\\||",
        "  `---------------------~___~--------------------''",
    )


def opening(
    out: TextIO | None = None,
    sleep: Callable[[float], None] | None = None,
) -> None:
    """Play the loading animation: a dash bar sliding to the right."""
    sleep = time.sleep if sleep is None else sleep
    if out is None:
        out = sys.stdout
        clear = clear_screen
    else:
        def clear() -> None:
            out.write(CLEAR_SEQUENCE)

    out.write("Welcome to DOKI DOKI Literature society!!\n")
    out.write("Loading destinations!!!\n")
    for step in range(8):
        out.write(" " * (3 * step) + "---")
        out.flush()
        sleep(0.65 if step == 0 else 0.35)
        clear()


def title_art() -> str:
    """The "WHO IS THE KILLER?" banner."""
    return (
        "               __        ___   _  ___    ___ ____        \n"
        "              \\ \\      / / | | |/ _ \\  |_ _/ ___|       \n"
        "               \\ \\ /\\ / /| |_| | | | |  | |\\___ \\       \n"
        "                \\ V  V / |  _  | |_| |  | | ___) |      \n"
        "              __\\_/\\_/  |_|_|_|\\___/  |___|____/       \n"
        "             |_   _| | | | ____|                       \n"
        "               | | | |_| |  _|                         \n"
        "               | | |  _  | |___                        \n"
        "              _|_|_|_| |_|_____|   _____ ____    ___  \n"
        "             | |/ /_ _| |   | |   | ____|  _ \\  |__ \\ \n"
        "             | ' / | || |   | |   |  _| | |_) |   / / \n"
        "             | . \\ | || |___| |___| |___|  _ <   |_|  \n"
        "             |_|\\_\\___|_____|_____|_____|_| \\_\\  (_)  \n"
    )


def dorm_art() -> str:
    """The H-13 dormitory in the storm."""
    return (
        "\n                                ||______||\n"
        "                                 || ^  ^ ||\n"
        "                                 \\| |  | |/\n"
        "                                  |______|\n"
        "      __                          |  __  |\n"
        "     /  \\     ____________________|_/  \\_|__\n"
        "    / ^^ \\   /=====================/ ^^ \\===|\n"
        "   /  []  \\ /=====================/  []  \\==|\n"
        "  /________\\=====================/________\\=|\n"
        " *  |      |/====================|        |=|\n"
        "*** | ^^ ^^|----H-13---DORM-----| ^^  ^^ |--\n"
        "*****| [][]|        _____        | []  [] | |\n"
        "*******      |      /_____\\       |      * | |\n"
        "******** ^^  | ^^  \t |  |  |  ^^  ^^|     ***| |\n"
        "**********[] | []  \t |  |  |  []  []| ====*** | \n"
        "************  |     @|__|__|@     |/ |*****| \n"
        "***********  ********--===--********|*****  \n"
        "***********__********* |===| ********|******\n"
        " **********   ******* /=====\\ *******|***** \n\n"
    )


def alice_room_art() -> str:
    """A sketch of Alice's room."""
    return _block(
        "+-----------------+",
        "|    Alice Room   |",
        "|                 |",
        "|                 |",
        "| o->dead body    |",
        "|   |---------|   |",
        "|    _______      |",
        "|   |       |     |",
        "+---|_______|-----+",
    )


def floor_plan_art() -> str:
    """A floor plan of the rooms around the party."""
    return _block(
        "+------------------------------------------------+",
        "|            Alice & Mandy's Room                |",
        "|                                                |",
        "|    o-> Dead Body                               |",
        "|    Bed    Desk      Closet                     |",
        "|________________________________________________|",
        "|                Hallway                         |",
        "|________________________________________________|",
        "|   Bob's Room         |     Party Area          |",
        "|                      |                         |",
        "|    Bed  Desk Closet  |    Music    Drinks      |",
        "|______________________|_________________________|",
    )


def crime_map_art() -> str:
    """The map of the crime scene."""
    return (
        "        \nThe Map of the Crime Scene\n"
        "             ==========================\n"
    ) + _block(
        "       +--------------------+    +--------------------+",
        "       |  Alice & Mandy's   |    |     Bob's Room     |",
        "       |      Room          |    |                    |",
        "       |                    |    |                    |",
        "       +--------------------+    +--------------------+",
        "               |                         |",
        "               |                         |",
        "       +------------------------------------------+",
        "       |               Main Hallway              |",
        "       |     (CCTV camera here)   Phone Booth    |",
        "       +------------------------------------------+",
        "               |             Dead Body       |",
        "       +-------------------+     +-------------------+",
        "       |    Party Area     |     |  Common Washroom  |",
        "       |  Music & Snacks   |     | Mirror Broken!    |",
        "       +-------------------+     +-------------------+",
        "               |",
        "       +---------------------------+",
        "       |        Exit Door ??        |",
        "       +---------------------------+",
    )


def killer_art() -> str:
    """The killer escaping."""
    return _block(
        "                                 kill  /\\_.----.",
        ">                                KILL! \\_/ /  / \\                HELP!",
        ">                          \t        / / \\/  /           \\o/",
        ">                           choke\\     / /  <  /             |",
        ">                                 <:^/(_)=. -\\_\\------------/>------",
        ">                                      \\   \\",
        prefix="\n\n",
    )


def champion_art() -> str:
    """The cheering detective."""
    return _block(
        "                                 \\o/",
        ">                                | ",
        ">                              _/ \\_",
        ">                         YOU ARE THE CHAMPION!",
        prefix="\n\n",
    )


def busted_art() -> str:
    """The "YOU BUSTED!" banner."""
    return _block(
        "__   _____  _   _   ____  _   _ ____ _____ _____ ____    _ ",
        "\\ \\ / / _ \\| | | | | __ )| | | / ___|_   _| ____|  _ \\  | |",
        " \\ V / | | | | | | |  _ \\| | | \\___ \\ | | |  _| | | | | | |",
        "  | || |_| | |_| | | |_) | |_| |___) || | | |___| |_| | |_|",
        "  |_| \\___/ \\___/  |____/ \\___/|____/ |_| |_____|____/  (_)",
    )


def win_art() -> str:
    """The "YOU CAUGHT THE KILLER!!" banner."""
    return (
        " __   _____  _   _                     \n"
        " \\ \\ / / _ \\| | | |                    \n"
        "  \\ V / | | | | | |                    \n"
        "   | || |_| | |_| |                    \n"
        "   |_|_\\___/ \\___/ _  ____ _   _ _____ \n"
        "  / ___|  / \\ | | | |/ ___| | | |_   _|\n"
        " | |     / _ \\| | | | |  _| |_| | | |  \n"
        " | |___ / ___ \\ |_| | |_| |  _  | | |  \n"
        "  \\____/_/   \\_\\___/ \\____|_| |_| |_|  \n"
        " |_   _| | | | ____|                   \n"
        "   | | | |_| |  _|                     \n"
        "   | | |  _  | |___                    \n"
        "  _|_|_|_| |_|_____|   _____ ____  _ _ \n"
        " | |/ /_ _| |   | |   | ____|  _ \\| | |\n"
        " | ' / | || |   | |   |  _| | |_) | | |\n"
        " | . \\ | || |___| |___| |___|  _ <|_|_|\n"
        " |_|\\_\\___|_____|_____|_____|_| \\_(_|_)\n"
    )