"""Frequency-based keyword ranking."""

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

NON_WORD = re.compile(r"[^\w]", re.ASCII)

# Short words are dropped by length instead of a stop-word list
MIN_KEYWORD_LENGTH = 4
TOP_KEYWORDS = 10


@dataclass(frozen=True)
class Keyword:
    """A normalized word and how often it occurs in one transcript."""

    word: str
    count: int


def normalize_word(word: str) -> str:
    """Strip non-word characters from an already lower-cased word."""
    return NON_WORD.sub("", word)


def rank_keywords(words: Iterable[str], limit: int = TOP_KEYWORDS) -> list[Keyword]:
    """Return the most frequent words, most frequent first.

    Counter keeps insertion order and ``most_common`` orders equal counts by
    first insertion, so ties resolve to the word that appeared first.
    """
    counts: Counter[str] = Counter()
    for word in words:
        cleaned = normalize_word(word)
        if len(cleaned) >= MIN_KEYWORD_LENGTH:
            counts[cleaned] += 1

    return [Keyword(word=word, count=count) for word, count in counts.most_common(limit)]
