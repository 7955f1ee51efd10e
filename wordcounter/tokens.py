"""Split text into maximal runs of words and separators."""

from typing import AbstractSet, Iterator


SEPARATORS = frozenset([',', ' ', '.', '!', '?', '/', ';', ':', '-'])


def next_token(
        text: str, position: int,
        separators: AbstractSet[str] = SEPARATORS) -> str:
    """Return the word or separator run starting at `position`.

    The token is the longest substring beginning at `position` whose
    characters are either all separators or all non-separators, depending on
    the character at `position`.
    """
    assert text is not None, "Text must not be None."
    assert separators is not None, "Separators must not be None."
    assert 0 <= position < len(text), (
        f"Position {position} out of range for text of length {len(text)}.")

    in_separators = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separators:
        end += 1
    return text[position:end]


def tokenize(
        text: str,
        separators: AbstractSet[str] = SEPARATORS) -> Iterator[str]:
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def is_separator_run(
        token: str, separators: AbstractSet[str] = SEPARATORS) -> bool:
    assert token
    return token[0] in separators
