"""
Detection of refusal and non-answer responses.

Small on-device models sometimes answer a summarization request with an
apology or a request for more input. Such answers must never end up as a
note's title or summary.
"""

REFUSAL_INDICATORS: tuple[str, ...] = (
    "I'm sorry, but I can't",
    "I cannot provide",
    "Could you please provide",
    "without the actual content",
    "I don't have access",
    "I'm unable to create",
    "I can't view or process",
    "I cannot fulfill that request",
    "I can't assist with that",
    "if you provide the text content",
    "However, if you provide",
    "I can't process text from",
    "I cannot assist with",
    "visual content",
    "modify visual content",
    "text-based summaries",
    "Please provide the note content",
)

_LOWERED_INDICATORS = tuple(indicator.lower() for indicator in REFUSAL_INDICATORS)


def find_refusal(text: str) -> str | None:
    """
    Return the first denylist phrase contained in text (case-insensitive).

    Args:
        text: Model response

    Returns:
        Matching indicator as listed in REFUSAL_INDICATORS, or None
    """
    lowered = text.lower()
    for indicator, lowered_indicator in zip(REFUSAL_INDICATORS, _LOWERED_INDICATORS):
        if lowered_indicator in lowered:
            return indicator
    return None


def is_refusal(text: str) -> bool:
    """Check whether a model response looks like a refusal or non-answer."""
    return find_refusal(text) is not None
