"""Dominant writing-system detection by Unicode block counts."""

from __future__ import annotations

import re

_KANA = re.compile(r"[\u3040-\u309F\u30A0-\u30FF]")

SCRIPT_PATTERNS: dict[str, re.Pattern[str]] = {
    "chinese": re.compile(r"[\u4E00-\u9FFF]"),
    "korean": re.compile(r"[\uAC00-\uD7AF\u1100-\u11FF]"),
    "arabic": re.compile(r"[\u0600-\u06FF]"),
    "hebrew": re.compile(r"[\u0590-\u05FF]"),
    "cyrillic": re.compile(r"[\u0400-\u04FF]"),
    "greek": re.compile(r"[\u0370-\u03FF]"),
}

DEFAULT_SCRIPT = "latin"


def detect_script(text: str) -> str:
    """
    Name the script most of ``text`` is written in.

    Any kana means Japanese, since kanji alone would count as Chinese. Ties
    go to the script listed first in ``SCRIPT_PATTERNS``.
    """
    if not text:
        return DEFAULT_SCRIPT
    if _KANA.search(text):
        return "japanese"

    counts = {script: len(pattern.findall(text)) for script, pattern in SCRIPT_PATTERNS.items()}
    best = max(counts, key=counts.__getitem__)
    return best if counts[best] else DEFAULT_SCRIPT
