"""Directive classification and summary rendering."""

from collections.abc import Iterable
from enum import Enum

BULLET_MARKER = "• "
FALLBACK_PREFIX = "Summary: "
FALLBACK_FRAGMENTS = 3


class DirectiveMode(str, Enum):
    """Formatting mode derived from a free-text prompt.

    Priority when several triggers appear in one prompt: BULLET, then ACTION.
    """

    BULLET = "bullet"
    ACTION = "action"
    DEFAULT = "default"


def classify_directive(prompt: str | None) -> DirectiveMode:
    """Classify a custom prompt by case-insensitive substring match."""
    if not prompt:
        return DirectiveMode.DEFAULT

    lowered = prompt.lower()
    if "bullet" in lowered:
        return DirectiveMode.BULLET
    if "action" in lowered:
        return DirectiveMode.ACTION
    return DirectiveMode.DEFAULT


def render_summary(
    mode: DirectiveMode,
    sentences: Iterable[str],
    raw_fragments: Iterable[str],
) -> str:
    """Render selected sentences for the given mode.

    Falls back to ``"Summary: "`` plus the first raw fragments when the
    selection renders to nothing.
    """
    if mode is DirectiveMode.DEFAULT:
        summary = " ".join(s.strip() for s in sentences)
    else:
        summary = "\n".join(f"{BULLET_MARKER}{s.strip()}" for s in sentences)

    if summary:
        return summary

    fragments = []
    for fragment in raw_fragments:
        if len(fragments) == FALLBACK_FRAGMENTS:
            break
        fragments.append(fragment)
    return FALLBACK_PREFIX + " ".join(fragments)
