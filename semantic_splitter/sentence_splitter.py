"""
Delimiter-based Sentence Splitter

A sentence is a run of non-delimiter characters followed by one or more
delimiter characters. No abbreviation handling and no language rules.

Edge cases:
- Text without any delimiter comes back unchanged as the only sentence.
- Trailing text after the last delimiter is dropped, because it never
  reaches a delimiter.
- Matches that are blank after stripping are skipped (possible with
  whitespace delimiters such as a newline).

Usage:
    from semantic_splitter.sentence_splitter import split_sentences

    split_sentences("One. Two! Three?", [".", "!", "?"])
    # ["One.", "Two!", "Three?"]
"""

import re
from typing import Iterable


def build_sentence_pattern(delimiters: Iterable[str]) -> re.Pattern:
    """Compile the "non-delimiters then delimiters" pattern for a delimiter set."""
    char_class = "".join(re.escape(d) for d in delimiters)
    return re.compile(f"[^{char_class}]+[{char_class}]+")


def split_sentences(text: str, delimiters: Iterable[str]) -> list[str]:
    """
    Split text into sentences at delimiter characters.

    Args:
        text: Input text.
        delimiters: Single characters that terminate a sentence.

    Returns:
        Stripped, non-empty sentences in reading order, or ``[text]``
        untouched when nothing is left (empty text, no delimiters present).
    """
    sentences = [
        match.strip() for match in build_sentence_pattern(delimiters).findall(text)
    ]
    # Whitespace delimiters can leave blank matches
    sentences = [s for s in sentences if s]
    if not sentences:
        return [text]
    return sentences
