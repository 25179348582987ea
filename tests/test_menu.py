import pytest

from gameboy.menu import Menu


def test_starts_on_first_option():
    menu = Menu()
    assert menu.option_text(menu.selected) == "Hangman"


def test_option_texts_in_order():
    menu = Menu()
    texts = [menu.option_text(i) for i in range(len(Menu.OPTIONS))]
    assert texts == [
        "Hangman",
        "Snake game",
        "Wordle",
        "Instructions",
        "Leaderboard",
        "Exit",
    ]


def test_navigate_up_wraps_to_exit():
    menu = Menu()
    menu.navigate(-1)
    assert menu.option_text(menu.selected) == "Exit"


def test_navigate_down_wraps_to_start():
    menu = Menu()
    for _ in Menu.OPTIONS:
        menu.navigate(1)
    assert menu.selected == Menu().selected


def test_navigate_round_trip():
    menu = Menu()
    menu.navigate(1)
    menu.navigate(1)
    assert menu.option_text(menu.selected) == "Wordle"
    menu.navigate(-1)
    menu.navigate(-1)
    assert menu.option_text(menu.selected) == "Hangman"


@pytest.mark.parametrize("index", [-1, 6, 100])
def test_option_text_out_of_range(index):
    with pytest.raises(IndexError):
        Menu().option_text(index)