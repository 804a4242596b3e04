"""Tests for answer parsing, set-equality grading and percentage rounding."""
import pytest

from certprep.core.exceptions import InvalidInputError
from certprep.services.grading import (
    answer_letters,
    is_correct,
    parse_answer,
    percentage,
    validate_question_options,
)


class TestParseAnswer:

    def test_single_letter(self):
        assert parse_answer("B") == frozenset({"B"})

    def test_multiple_letters(self):
        assert parse_answer("C,A") == frozenset({"A", "C"})

    @pytest.mark.parametrize("raw", ["", "a", "A, C", "A,", ",A", "AB", "A;C", "1"])
    def test_malformed_answers_rejected(self, raw):
        with pytest.raises(InvalidInputError):
            parse_answer(raw)


class TestIsCorrect:

    def test_order_does_not_matter(self):
        assert is_correct("A,C", "A,C")
        assert is_correct("A,C", "C,A")

    def test_repeated_letters_collapse(self):
        assert is_correct("A,C", "A,C,C")

    def test_subset_is_wrong(self):
        assert not is_correct("A,C", "A")

    def test_superset_is_wrong(self):
        assert not is_correct("A,C", "A,B,C")

    def test_stored_answer_with_spaces(self):
        assert answer_letters("A, C") == frozenset({"A", "C"})
        assert is_correct("A, C", "C,A")


class TestPercentage:

    def test_zero_total_is_zero(self):
        assert percentage(0, 0) == 0

    def test_two_of_three(self):
        assert percentage(2, 3) == 67

    def test_one_of_three(self):
        assert percentage(1, 3) == 33

    def test_halves_round_up(self):
        assert percentage(1, 8) == 13
        assert percentage(5, 8) == 63

    def test_bounds(self):
        assert percentage(0, 5) == 0
        assert percentage(5, 5) == 100


class TestValidateQuestionOptions:

    def test_normalizes_correct_answer(self):
        options = {"A": "x", "B": "y", "C": "z"}
        assert validate_question_options(options, "C,A") == "A,C"
        assert validate_question_options(options, "C, A, A") == "A,C"

    def test_letter_missing_from_options(self):
        with pytest.raises(InvalidInputError):
            validate_question_options({"A": "x", "B": "y"}, "C")

    def test_needs_two_options(self):
        with pytest.raises(InvalidInputError):
            validate_question_options({"A": "x"}, "A")

    def test_option_keys_must_be_uppercase_letters(self):
        with pytest.raises(InvalidInputError):
            validate_question_options({"a": "x", "B": "y"}, "B")

    def test_options_beyond_d_allowed(self):
        options = {letter: letter.lower() for letter in "ABCDEFGH"}
        assert validate_question_options(options, "H") == "H"
