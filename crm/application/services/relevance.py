"""Relevance scoring and preview text for global search results.

Pure functions: no I/O, no state. Scores are additive; a hit on the primary
field (name or title) outranks any hit on the secondary field (body text).
"""

EXACT_MATCH_SCORE = 100
PREFIX_MATCH_SCORE = 80
PRIMARY_CONTAINS_SCORE = 60
SECONDARY_CONTAINS_SCORE = 30

DEFAULT_PREVIEW_LENGTH = 100
ELLIPSIS = "..."


def calculate_relevance(
    query: str, primary: str | None = None, secondary: str | None = None
) -> int:
    """Score how well query matches a record's primary and secondary text.

    Case-insensitive. Primary contributes the first matching rule of
    exact (100), starts-with (80), contains (60); secondary adds 30 when it
    contains the query. Missing or empty fields contribute nothing.

    Args:
        query: Search text (already trimmed by the caller).
        primary: Name/title field, or None when the entity has none.
        secondary: Body/details field, or None.

    Returns:
        Score in {0, 30, 60, 80, 90, 100, 110, 130}.
    """
    q = query.lower()
    score = 0

    if primary:
        p = primary.lower()
        if p == q:
            score += EXACT_MATCH_SCORE
        elif p.startswith(q):
            score += PREFIX_MATCH_SCORE
        elif q in p:
            score += PRIMARY_CONTAINS_SCORE

    if secondary and q in secondary.lower():
        score += SECONDARY_CONTAINS_SCORE

    return score


def create_preview(text: str | None, max_length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """Shorten text for display, breaking at a word boundary when possible.

    Text at or under max_length is returned unchanged. Longer text is cut to
    max_length, then back to the last space inside that slice (unless the only
    space is at position 0), and "..." is appended.
    """
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        truncated = truncated[:last_space]
    return truncated + ELLIPSIS
