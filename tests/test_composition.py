import pytest

from macrokata.kata.composition import (
    digit,
    hashmap_from,
    number,
    pair,
    run_macros_calling_macros,
    run_pairs,
)

WORDS = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]


@pytest.mark.parametrize("word, expected", list(zip(WORDS, "0123456789")))
def test_digit(word, expected):
    assert digit(word) == expected


def test_digit_unknown_word():
    with pytest.raises(ValueError):
        digit("ten")


def test_number_sum_from_exercise():
    first = int(number("nine", "three", "seven", "two", "zero"))
    second = int(number("one", "two", "four", "six", "eight", "zero"))
    assert first + second == 218400


def test_number_is_concatenation_of_digits():
    assert number("one", "two") == digit("one") + digit("two")
    assert len(number(*WORDS)) == len(WORDS)


def test_number_needs_a_word():
    with pytest.raises(ValueError):
        number()


def test_number_rejects_unknown_word():
    with pytest.raises(ValueError):
        number("one", "eleven")


def test_pair():
    assert pair("a", 1) == ("a", 1)


def test_hashmap_from():
    result = hashmap_from([("Hash", "map"), ("Key", "value")])
    assert result == {"Hash": "map", "Key": "value"}


def test_hashmap_from_later_key_wins():
    result = hashmap_from([("Key", "first"), ("Key", "second")])
    assert result == {"Key": "second"}


def test_run_macros_calling_macros(capsys):
    run_macros_calling_macros()
    assert capsys.readouterr().out == "218400\n"


def test_run_pairs(capsys):
    run_pairs()
    out = capsys.readouterr().out
    assert '"Hash": "map",' in out
    assert '"Key": "value",' in out
    assert out.startswith("(\n")