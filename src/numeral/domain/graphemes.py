"""Grapheme splitting: user-perceived characters, not code points.

Text is NFC-normalized first so a base letter followed by combining marks
collapses to its precomposed form where one exists. Segmentation then uses
extended grapheme clusters (``\\X``), which keeps emoji ZWJ sequences,
skin-tone modifiers, regional-indicator flags and leftover combining
sequences together as one unit.
"""

from __future__ import annotations

import unicodedata

import regex

_GRAPHEME = regex.compile(r"\X")


def split_graphemes(text: str) -> list[str]:
    """Split *text* into NFC-normalized grapheme clusters.

    Examples:
        >>> split_graphemes("世界")
        ['世', '界']
        >>> split_graphemes("e\\u0301a")
        ['é', 'a']
        >>> split_graphemes("")
        []
    """
    if not text:
        return []
    return _GRAPHEME.findall(unicodedata.normalize("NFC", text))
