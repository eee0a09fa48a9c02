"""Sentence and word segmentation for transcripts."""

import re
from collections.abc import Iterator

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")

# Fragments this short or shorter are treated as noise, not content
MIN_SENTENCE_LENGTH = 10


class Segmenter:
    """Splits one transcript into sentences and normalized words.

    The segmenter keeps the input text, so every method returns a fresh
    iterator and the same segmenter can be consumed by several stages.
    """

    def __init__(self, text: str) -> None:
        self.text = text or ""

    def raw_fragments(self) -> Iterator[str]:
        """Yield every trimmed, non-empty fragment between sentence boundaries."""
        for fragment in SENTENCE_BOUNDARY.split(self.text):
            fragment = fragment.strip()
            if fragment:
                yield fragment

    def sentences(self) -> Iterator[str]:
        """Yield fragments long enough to count as sentences."""
        for fragment in self.raw_fragments():
            if len(fragment) > MIN_SENTENCE_LENGTH:
                yield fragment

    def words(self) -> Iterator[str]:
        """Yield lower-cased, whitespace-separated words."""
        yield from self.text.lower().split()
