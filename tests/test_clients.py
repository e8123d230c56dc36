import io

import pytest
from colorama import Fore, Style

from wordguess.clients import ScriptedClient, TerminalGameClient, render_changelog
from wordguess.engine import LetterStatus, RejectionReason

C, Y, W = LetterStatus.CORRECT, LetterStatus.WRONG_POSITION, LetterStatus.WRONG
CHANGELOG = [("s", W), ("l", W), ("a", C), ("t", W), ("e", Y)]


def test_render_plain():
    assert render_changelog(CHANGELOG, color=False) == " s  l  a  t  e "


def test_render_colors():
    out = render_changelog(CHANGELOG)
    assert f"{Fore.BLUE}a{Style.RESET_ALL}" in out
    assert f"{Fore.YELLOW}e{Style.RESET_ALL}" in out
    assert f"{Fore.RED}s{Style.RESET_ALL}" in out


@pytest.mark.parametrize("reason,text", [
    (RejectionReason.WORD_TOO_LONG, "Only 5 letter words are accepted"),
    (RejectionReason.WORD_DOES_NOT_EXIST, "This word does not exist!"),
    (RejectionReason.GAME_OVER, "Game over!"),
])
def test_terminal_error_messages(reason, text):
    out = io.StringIO()
    TerminalGameClient(stream=out, color=False).display_error_message(reason)
    assert out.getvalue() == text + "\n"


def test_terminal_prompt_and_endings():
    out = io.StringIO()
    client = TerminalGameClient(stream=out, color=False, read_line=lambda: "crane")
    assert client.get_new_guess() == "crane"
    client.display_round_changelog(CHANGELOG)
    client.display_win("crane", ["slate", "crane"])
    client.display_loss("crane")
    lines = out.getvalue().splitlines()
    assert lines == [
        "Type your guess",
        " s  l  a  t  e ",
        "You guessed CRANE in 2 attempts!",
        "The word was CRANE.",
    ]


def test_scripted_client_records_and_runs_out():
    client = ScriptedClient(["crane"])
    assert client.get_new_guess() == "crane"
    client.display_error_message(RejectionReason.GAME_OVER)
    client.display_round_changelog(CHANGELOG)
    assert client.errors == [RejectionReason.GAME_OVER]
    assert client.changelogs == [CHANGELOG]
    with pytest.raises(EOFError):
        client.get_new_guess()
