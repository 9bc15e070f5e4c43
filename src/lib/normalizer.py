"""
Output normalizer for assembled LRE bodies

Runs once after the translator has written the whole template:

1. Strip trailing spaces and tabs from every line
2. Collapse runs of blank (or punctuation-only) lines to a single blank line
3. Cut anything ahead of the copyright marker, unless it is one optional
   block; the matcher treats the copyright position as the start of text
4. Trim leading newlines and end with exactly one newline
"""

import re
from typing import Optional

from ..models.template import TranslationResult
from .variables import COPYRIGHT_MARKER

TRAILING_SPACE_RE = re.compile(r"[ \t]+$", re.MULTILINE)
BLANK_RUN_RE = re.compile(r'\n([.," \t]*\n){2,}')


def preamble_cut(text: str, window: int = 100) -> tuple[str, Optional[str]]:
    """
    Drop text that precedes the copyright marker

    Only applies when the marker starts before `window`. A preamble that is
    exactly one optional block, "(( ... ))??", is kept.

    Returns:
        The (possibly shortened) text and a warning, or None when nothing
        was dropped.
    """
    i = text.find(COPYRIGHT_MARKER)
    if i < 0 or i >= window:
        return text, None

    cut = text[:i].strip()
    if not cut:
        return text, None
    if cut.startswith("((") and cut.endswith("))??"):
        return text, None
    return text[i:], f"{cut!r} before copyright notice"


def body_normalize(text: str, window: int = 100) -> TranslationResult:
    """
    Normalize an assembled LRE body

    Normalizing an already normalized body returns it unchanged.

    Example:
        >>> body_normalize("\\n\\nfoo  \\n\\n\\n\\nbar").body
        'foo\\n\\nbar\\n'
    """
    text = TRAILING_SPACE_RE.sub("", text)
    text = BLANK_RUN_RE.sub("\n\n", text)
    # The window is measured from the first line that will be kept
    text = text.lstrip("\n")

    text, warning = preamble_cut(text, window)

    if text:
        text = text.rstrip("\n") + "\n"
    return TranslationResult(body=text, warning=warning)
