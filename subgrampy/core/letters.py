"""Letter sequence validation."""

from typing import Callable

from loguru import logger

from subgrampy.utils import Constants, is_ascii_alpha


class InvalidLettersError(ValueError):
    """Raised when a raw query cannot be used as a letter sequence."""


def validate_letters(raw: str) -> str:
    """Normalize and validate a raw letter query.

    Surrounding whitespace is stripped and the result lowercased.

    Args:
        raw: Text as typed by the user

    Returns:
        The normalized letter sequence

    Raises:
        InvalidLettersError: If the text is not purely alphabetic or its
            length is outside the accepted range
    """
    if not isinstance(raw, str):
        raise InvalidLettersError(f"letters must be a string, got {type(raw)}")

    letters = raw.strip().lower()
    if not is_ascii_alpha(letters):
        raise InvalidLettersError(f"letters must be alphabetic only, got {letters!r}")
    if not Constants.MIN_LETTERS <= len(letters) <= Constants.MAX_LETTERS:
        raise InvalidLettersError(
            f"letters must be {Constants.MIN_LETTERS} to {Constants.MAX_LETTERS} "
            f"characters long, got {len(letters)}"
        )
    return letters


def prompt_for_letters(input_func: Callable[[str], str] = input) -> str:
    """Ask for a letter sequence until a valid one is entered."""
    prompt = f"Enter a sequence of letters (MAX {Constants.MAX_LETTERS} letters): "
    while True:
        raw = input_func(prompt)
        try:
            return validate_letters(raw)
        except InvalidLettersError:
            logger.warning(
                f" << Please enter a sequence of {Constants.MIN_LETTERS} "
                f"to {Constants.MAX_LETTERS} characters >>"
            )
