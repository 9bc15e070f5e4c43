"""
Variable substitution tests - wildcards, bullets and the copyright marker
"""

import pytest

from spdx2lre.lib.reflow import OutputBuffer
from spdx2lre.lib.variables import COPYRIGHT_MARKER, variable_substitute, wordCount, words


def substitute(name, original, **kwargs):
    buffer = OutputBuffer()
    finished = variable_substitute(buffer, name, original, **kwargs)
    return buffer.getvalue(), finished


class TestWords:
    """Test word splitting used for wildcard sizes"""

    def test_words_are_alphanumeric_runs(self):
        assert words("Copyright (c) <year> <owner>") == ["Copyright", "c", "year", "owner"]
        assert wordCount("1. 2. 3.") == 3

    def test_punctuation_has_no_words(self):
        assert wordCount("* - . ,") == 0
        assert wordCount("") == 0


class TestCopyright:
    """Test the copyright variable"""

    def test_emits_marker(self):
        text, finished = substitute("copyright", "Copyright (c) <year> <owner>")
        assert text == f"\n{COPYRIGHT_MARKER}\n\n"
        assert finished is True

    def test_original_not_annotated(self):
        text, _ = substitute("copyright", "Copyright 2020 Acme")
        assert "Acme" not in text
        assert "__" not in text


class TestWildcards:
    """Test the wildcard substitution for ordinary variables"""

    def test_short_original_raised_to_floor(self):
        text, finished = substitute("owner", "Acme")
        assert text == "\n//** Acme **//\n__5__\n"
        assert finished is True

    def test_long_original_keeps_its_count(self):
        text, _ = substitute("org", "one two three four five six")
        assert text == "\n//** one two three four five six **//\n__6__\n"

    def test_empty_original_has_no_annotation(self):
        text, _ = substitute("owner", "")
        assert text == "\n__5__\n"

    @pytest.mark.parametrize("original", ["", "a", "a b", "a b c d", "a b c d e f g"])
    def test_non_bullet_never_below_five(self, original):
        text, _ = substitute("x", original)
        n = int(text.strip().split("\n")[-1].strip("_"))
        assert n >= 5

    def test_custom_floor(self):
        text, _ = substitute("x", "a", min_words=3)
        assert text.endswith("__3__\n")

    def test_annotation_written_on_one_line(self):
        """The original is copied into its comment without reflow"""
        original = " ".join(["word"] * 20)
        text, _ = substitute("x", original)
        assert text == f"\n//** {original} **//\n__20__\n"
        assert len(text.split("\n")[1]) > 80

    def test_indentation_preserved(self):
        buffer = OutputBuffer()
        buffer.write("  text ")
        variable_substitute(buffer, "x", "Acme")
        assert buffer.getvalue() == "  text \n  //** Acme **//\n  __5__\n  "


class TestBullets:
    """Test the bullet variable"""

    def test_bullet_with_word_is_optional_literal(self):
        text, finished = substitute("bullet", "(a)")
        assert text == "\n(( (a) ))??\n"
        assert finished is True

    def test_wordless_bullet_continues_line(self):
        text, finished = substitute("bullet", "*")
        assert text == "\n* "
        assert finished is False

    def test_empty_bullet_continues_line(self):
        text, finished = substitute("bullet", "")
        assert text == "\n "
        assert finished is False

    def test_long_bullet_becomes_wildcard(self):
        text, _ = substitute("bullet", "a b c d e")
        assert text == "\n//** a b c d e **//\n__5__\n"

    def test_bullet_not_raised_to_floor(self):
        text, _ = substitute("bullet", "1.")
        assert "__" not in text
