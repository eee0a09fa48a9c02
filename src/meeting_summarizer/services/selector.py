"""Extractive sentence selection."""

from collections.abc import Iterable
from itertools import islice

from meeting_summarizer.services.directives import DirectiveMode
from meeting_summarizer.services.keywords import Keyword

ACTION_MARKERS = ("will", "going to", "plan to", "need to", "should", "must")

MAX_KEYWORD_SENTENCES = 5
FALLBACK_SENTENCES = 3


def select_by_keywords(
    sentences: Iterable[str],
    keywords: list[Keyword],
    limit: int = MAX_KEYWORD_SENTENCES,
) -> list[str]:
    """Select up to ``limit`` sentences containing at least one keyword."""
    words = [k.word for k in keywords]
    if not words:
        return []
    matching = (s for s in sentences if any(w in s.lower() for w in words))
    return list(islice(matching, limit))


def select_action_items(sentences: Iterable[str]) -> list[str]:
    """Select every sentence containing an action marker."""
    return [s for s in sentences if any(m in s.lower() for m in ACTION_MARKERS)]


def select_sentences(
    mode: DirectiveMode,
    sentences: list[str],
    keywords: list[Keyword],
) -> list[str]:
    """Select the sentences to render for a directive mode.

    Action mode ignores keywords and has no cap. In default mode an empty
    keyword selection falls back to the opening sentences.
    """
    if mode is DirectiveMode.ACTION:
        return select_action_items(sentences)

    selected = select_by_keywords(sentences, keywords)
    if not selected and mode is DirectiveMode.DEFAULT:
        return sentences[:FALLBACK_SENTENCES]
    return selected
