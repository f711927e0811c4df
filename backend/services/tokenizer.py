"""Text normalization shared by the skill and field extractors."""

import re

from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

_NON_LETTER_RE = re.compile(r"[^a-z]+")

MIN_TOKEN_LENGTH = 2


def normalize(text: str | None) -> str:
    """Lowercase and replace every non-letter run with a single space."""
    if not text:
        return ""
    return _NON_LETTER_RE.sub(" ", text.lower()).strip()


def tokenize(text: str | None) -> set[str]:
    """Split text into a set of lowercase, stop-word-free tokens.

    Tokens shorter than MIN_TOKEN_LENGTH are dropped. Empty or None input
    yields an empty set.
    """
    return {
        token
        for token in normalize(text).split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in ENGLISH_STOP_WORDS
    }
