"""
Text helpers shared by the extractor and the generator.
"""

import re

ELLIPSIS = "..."

_SENTENCE_BOUNDARY = re.compile(r"[.!?]")
_LINE_OR_SENTENCE_BOUNDARY = re.compile(r"[.!?\n]")
# Letters/digits, keeping inner apostrophes ("don't", "Friday's")
_WORD = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")
_WHITESPACE = re.compile(r"\s")


def split_sentences(text: str, include_newlines: bool = False) -> list[str]:
    """
    Split text on sentence punctuation and return stripped, non-empty parts.

    Args:
        text: Text to split
        include_newlines: Also treat line breaks as sentence boundaries

    Returns:
        Sentences in original order
    """
    pattern = _LINE_OR_SENTENCE_BOUNDARY if include_newlines else _SENTENCE_BOUNDARY
    return [part.strip() for part in pattern.split(text) if part.strip()]


def first_sentence(text: str) -> str:
    """First sentence or line of text, stripped; empty string if none."""
    sentences = split_sentences(text, include_newlines=True)
    return sentences[0] if sentences else ""


def words(text: str) -> list[str]:
    """Word tokens of text with surrounding punctuation removed."""
    return _WORD.findall(text)


def capitalize_first(word: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return word[:1].upper() + word[1:]


def truncate_at_word_boundary(text: str, cap: int, marker: str = ELLIPSIS) -> str:
    """
    Shorten text to at most `cap` characters without splitting a word.

    The cut is placed at the last whitespace at or before `cap` and the
    marker is appended. A single token longer than `cap` is cut at `cap`.

    Args:
        text: Text to shorten
        cap: Maximum length of the kept text, marker excluded
        marker: Appended when text was shortened

    Returns:
        Original text if short enough, otherwise the shortened text + marker
    """
    if len(text) <= cap:
        return text

    head = text[: cap + 1]
    boundary = max((match.start() for match in _WHITESPACE.finditer(head)), default=-1)
    if boundary <= 0:
        return text[:cap].rstrip() + marker

    return text[:boundary].rstrip() + marker
