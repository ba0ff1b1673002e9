import pytest

from macrokata.kata import basics


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_show_output_prints_expected_line(capsys):
    basics.show_output()
    assert capsys.readouterr().out == "I should appear as the output.\n"


def test_run_my_first_macro_matches_show_output(capsys):
    basics.run_my_first_macro()
    assert _lines(capsys) == ["I should appear as the output."]


def test_print_result_format(capsys):
    basics.print_result(42)
    assert capsys.readouterr().out == "The result is 42\n"


@pytest.mark.parametrize("word, value", [("one", 1), ("two", 2), ("three", 3)])
def test_num_words(word, value):
    assert basics.num(word) == value


@pytest.mark.parametrize("word", ["four", "One", ""])
def test_num_unknown_word_raises(word):
    with pytest.raises(ValueError):
        basics.num(word)


def test_math_plus_pinned():
    assert basics.math_plus(3, 5) == 8


def test_math_square_pinned():
    assert basics.math_square(2) == 4


@pytest.mark.parametrize("a, b", [(3, 5), (-2, 7), (0, 0), (10, -10)])
def test_math_plus_commutes(a, b):
    assert basics.math_plus(a, b) == basics.math_plus(b, a)


@pytest.mark.parametrize("value", [0, 1, 3, 12])
def test_math_square_is_even_function(value):
    assert basics.math_square(-value) == basics.math_square(value)
    assert basics.math_square(value) >= 0


def test_run_numbers(capsys):
    basics.run_numbers()
    assert _lines(capsys) == ["The result is 6"]


def test_run_literal_variables_consistent(capsys):
    basics.run_literal_variables()
    assert _lines(capsys) == [
        f"The result is {basics.math_plus(3, 5)}",
        f"The result is {basics.math_square(2)}",
    ]


def test_run_expression_variables_consistent(capsys):
    basics.run_expression_variables()
    assert _lines(capsys) == [
        f"The result is {basics.math_plus(2 * 3, 5)}",
        f"The result is {basics.math_square(5)}",
    ]