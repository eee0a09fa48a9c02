"""Local extractive summarization pipeline."""

import logging

from meeting_summarizer.services.directives import classify_directive, render_summary
from meeting_summarizer.services.keywords import rank_keywords
from meeting_summarizer.services.segmenter import Segmenter
from meeting_summarizer.services.selector import select_sentences

logger = logging.getLogger(__name__)


class ExtractiveSummarizer:
    """Deterministic summarizer used when the remote tier is unavailable.

    Pipeline: Segmenter -> keyword ranking -> sentence selection -> rendering.
    Holds no state between calls.
    """

    def summarize(self, text: str, custom_prompt: str | None = None) -> str:
        """Summarize a transcript according to an optional directive."""
        segmenter = Segmenter(text)
        mode = classify_directive(custom_prompt)

        sentences = list(segmenter.sentences())
        keywords = rank_keywords(segmenter.words())
        selected = select_sentences(mode, sentences, keywords)

        logger.debug(
            f"Extractive summary: mode={mode.value}, {len(sentences)} sentences, "
            f"{len(keywords)} keywords, {len(selected)} selected"
        )

        return render_summary(mode, selected, segmenter.raw_fragments())
