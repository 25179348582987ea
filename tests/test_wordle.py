import random

import pytest

from gameboy.scores import ScoreKeeper
from gameboy.wordle import (
    COLUMNS,
    ROWS,
    WORDS,
    LetterState,
    Wordle,
    WordleRound,
    random_word,
    score_guess,
)


def test_dictionary_has_hundred_words_each_winnable():
    assert len(WORDS) == 100
    for word in WORDS:
        current = WordleRound(word)
        for char in word[:COLUMNS]:
            current.type_letter(char)
        assert current.won, word


def test_random_word_comes_from_dictionary():
    rng = random.Random(7)
    for _ in range(50):
        assert random_word(rng) in WORDS


def test_random_word_is_reproducible_with_seed():
    first = [random_word(random.Random(3)) for _ in range(3)]
    second = [random_word(random.Random(3)) for _ in range(3)]
    assert first == second


def test_score_exact_match_is_all_correct():
    assert score_guess("apple", "apple") == (LetterState.CORRECT,) * 5


def test_score_unrelated_letters_are_absent():
    assert score_guess("xyzvw", "apple") == (LetterState.ABSENT,) * 5


def test_score_letter_elsewhere_is_present():
    result = score_guess("elppa", "apple")
    assert result[0] is LetterState.PRESENT
    assert result[2] is LetterState.CORRECT
    assert result[4] is LetterState.PRESENT


def test_score_duplicate_before_its_match_is_present():
    result = score_guess("ppxxx", "apple")
    assert result[0] is LetterState.PRESENT
    assert result[1] is LetterState.CORRECT


def test_score_compares_case_exactly():
    assert score_guess("APPLE", "apple") == (LetterState.ABSENT,) * 5


def test_score_length_matches_guess():
    assert len(score_guess("abcde", "cherry")) == 5


def test_score_rejects_short_answer():
    with pytest.raises(ValueError):
        score_guess("abcde", "abc")


def test_round_win():
    current = WordleRound("apple")
    results = [current.type_letter(c) for c in "apple"]
    assert results[:4] == [None] * 4
    assert results[4] == (LetterState.CORRECT,) * 5
    assert current.won
    assert current.over
    assert current.row == 0


def test_round_six_wrong_guesses_loses():
    current = WordleRound("apple")
    for _ in range(ROWS):
        for char in "xyzvw":
            current.type_letter(char)
    assert current.over
    assert not current.won
    assert current.row == ROWS - 1
    assert all(guess == "xyzvw" for guess in current.guesses)


def test_round_moves_to_next_row_after_wrong_guess():
    current = WordleRound("apple")
    for char in "xyzvw":
        current.type_letter(char)
    assert current.row == 1
    assert not current.over
    assert current.results[0] == (LetterState.ABSENT,) * 5


def test_round_ignores_letters_after_over():
    current = WordleRound("apple")
    for char in "apple":
        current.type_letter(char)
    assert current.type_letter("q") is None
    assert current.guesses[0] == "apple"
    assert current.guesses[1] == ""


def test_round_six_letter_answer_won_by_its_first_five():
    current = WordleRound("cherry")
    for char in "cherr":
        current.type_letter(char)
    assert current.won


@pytest.mark.parametrize("bad", ["1", "", "ab", " "])
def test_round_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        WordleRound("apple").type_letter(bad)


def test_mark_key_lights_letter():
    current = WordleRound("apple")
    assert current.mark_key("q") is True
    assert current.used_keys == {"Q"}


def test_mark_key_ignores_non_keyboard_character():
    current = WordleRound("apple")
    assert current.mark_key("1") is False
    assert current.used_keys == set()


def test_mark_key_rejects_long_input():
    with pytest.raises(ValueError):
        WordleRound("apple").mark_key("ab")


def test_new_round_has_fresh_keys():
    first = WordleRound("apple")
    first.mark_key("a")
    assert WordleRound("apple").used_keys == set()


def test_wordle_keeps_shared_scores():
    scores = ScoreKeeper(20)
    game = Wordle(scores)
    assert game.scores.value == 20