"""
Word-frequency helpers for blog bodies.

Tokens are produced by splitting on single spaces; each token is reduced
to its ASCII letters and digits before being counted, so "green," and
"green" accumulate under the same key.
"""

import re

_SYMBOLS = re.compile(r"[^a-zA-Z0-9]")
TOKEN_SEPARATOR = " "


def strip_symbols(text: str) -> str:
    """Return `text` with every character that is not an ASCII letter or digit removed."""
    return _SYMBOLS.sub("", text)


def count_words(body: str) -> dict[str, int]:
    """Count occurrences of each normalized token in `body`.

    Tokens that normalize to an empty string (runs of spaces, bare
    punctuation, the empty body) are skipped. Matching is case-sensitive.

    Args:
        body: Plain text to analyze.

    Returns:
        Mapping of normalized token to occurrence count.
    """
    counts: dict[str, int] = {}
    for token in body.split(TOKEN_SEPARATOR):
        key = strip_symbols(token)
        if not key:
            continue
        counts[key] = counts.get(key, 0) + 1
    return counts
