"""
Answer parsing and percentage arithmetic shared by sessions, progress and the question bank.
"""
import re
from typing import FrozenSet, Mapping

from certprep.core.exceptions import InvalidInputError

ANSWER_PATTERN = r"^[A-Z](,[A-Z])*$"
_ANSWER_RE = re.compile(ANSWER_PATTERN)
_OPTION_KEY_RE = re.compile(r"^[A-Z]$")


def parse_answer(answer: str) -> FrozenSet[str]:
    """
    Parse a submitted answer like ``"A,C"`` into a set of letters.

    Raises:
        InvalidInputError: If the string is not uppercase letters separated by commas
    """
    if not isinstance(answer, str) or not _ANSWER_RE.match(answer):
        raise InvalidInputError(
            "Answer must be one or more uppercase letters separated by commas, e.g. 'A' or 'A,C'"
        )
    return frozenset(answer.split(","))


def answer_letters(correct_answer: str) -> FrozenSet[str]:
    """Letters of a stored correct-answer field. Tolerates spaces around the commas."""
    return frozenset(part.strip() for part in correct_answer.split(",") if part.strip())


def is_correct(correct_answer: str, user_answer: str) -> bool:
    """Set equality: letter order and repeated letters do not matter."""
    return parse_answer(user_answer) == answer_letters(correct_answer)


def percentage(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def validate_question_options(options: Mapping[str, str], correct_answer: str) -> str:
    """
    Check the option keys and that every correct letter is one of them.

    Returns:
        The correct answer normalized to sorted, de-duplicated letters ("C,A" -> "A,C")

    Raises:
        InvalidInputError: If the options or the correct answer are malformed
    """
    if len(options) < 2:
        raise InvalidInputError("A question needs at least two options")
    bad_keys = [key for key in options if not _OPTION_KEY_RE.match(key)]
    if bad_keys:
        raise InvalidInputError(f"Option keys must be single uppercase letters, got {bad_keys}")

    letters = parse_answer(correct_answer.replace(" ", ""))
    missing = sorted(letters - set(options))
    if missing:
        raise InvalidInputError(
            f"Correct answer letters {missing} are not among the options {sorted(options)}"
        )
    return ",".join(sorted(letters))
