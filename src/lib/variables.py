"""
Variable substitution policy

Decides what a <<var;...>> tag becomes in the LRE:

- name="copyright": the copyright marker comment
- name="bullet" with a short original: the bullet itself, as an optional
  literal (or as plain text when it has no words, e.g. "*" or "-")
- anything else: the original text as a comment, then a __N__ wildcard
  where N is the word count of the original, at least min_words
"""

import re
from typing import List

from .reflow import OutputBuffer

COPYRIGHT_MARKER = "//** Copyright **//"

WORD_RE = re.compile(r"[\d\w]+", re.ASCII)


def words(text: str) -> List[str]:
    return WORD_RE.findall(text)


def wordCount(text: str) -> int:
    return len(words(text))


def variable_substitute(buffer: OutputBuffer, name: str, original: str, min_words: int = 5) -> bool:
    """
    Write the LRE replacement for one variable tag

    Args:
        buffer: Output buffer being assembled
        name: The tag's name attribute
        original: The tag's original attribute (text the variable replaced)
        min_words: Floor for the wildcard word count of non-bullet variables

    Returns:
        False when the substitution continues the current line (a bullet
        with no words), True when it finished with a fresh indented line.

    Example:
        name="x", original="World" writes:
            //** World **//
            __5__
    """
    buffer.indentNL()

    if name == "copyright":
        buffer.write(COPYRIGHT_MARKER + "\n")
        buffer.indentNL()
        return True

    n = max(wordCount(original), 1)

    if name == "bullet" and n < min_words:
        if wordCount(original) > 0:
            buffer.write(f"(( {original} ))??")
            buffer.indentNL()
            return True
        buffer.write(f"{original} ")
        return False

    if n < min_words:
        n = min_words
    if original:
        buffer.write(f"//** {original} **//")
        buffer.indentNL()
    buffer.write(f"__{n}__")
    buffer.indentNL()
    return True
