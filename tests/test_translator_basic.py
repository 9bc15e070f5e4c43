"""
Basic translator tests - literal text, variables and error reporting

Tests plain templates, variable tags, license-name aliases and the
malformed-markup errors that abort a translation.
"""

import pytest

from spdx2lre.lib.normalizer import body_normalize
from spdx2lre.lib.translator import Translator, TemplateError, translate
from spdx2lre.lib.variables import COPYRIGHT_MARKER


class TestPlainText:
    """Test templates without tags"""

    def test_empty_template(self):
        result = translate("")
        assert result.body == ""
        assert result.warning is None

    def test_plain_text(self):
        assert translate("Permission is hereby granted.").body == "Permission is hereby granted.\n"

    def test_long_text_wrapped(self):
        text = "Permission is hereby granted, free of charge, to any person obtaining a copy. " * 5
        body = translate(text).body

        for line in body.splitlines():
            assert len(line) <= 80
        assert body.split() == text.split()

    def test_width_override(self):
        body = Translator("one two three four five six", width=10).translate().body
        assert body == "one two\nthree four\nfive six\n"


class TestVariables:
    """Test <<var>> tags"""

    def test_short_variable_becomes_five_word_wildcard(self):
        result = translate('Hello <<var;name="x";original="World"/>>!')
        assert result.body == "Hello\n//** World **//\n__5__\n!\n"

    def test_spaces_after_tag_skipped(self):
        body = translate('by <<var;name="owner";original="Acme Inc.";match=".+">>   shall').body
        assert body == "by\n//** Acme Inc. **//\n__5__\nshall\n"

    def test_indentation_carried_around_variable(self):
        body = translate('  Indented text <<var;name="x";original="">> more').body
        assert body == "  Indented text\n  __5__\n  more\n"

    def test_bullet_list(self):
        template = (
            '<<var;name="bullet";original="1.">> Redistributions of source code. '
            '<<var;name="bullet";original="2.">> Redistributions in binary form.'
        )
        body = translate(template).body
        assert body == (
            "(( 1. ))??\nRedistributions of source code.\n"
            "(( 2. ))??\nRedistributions in binary form.\n"
        )

    def test_wordless_bullet_stays_on_line(self):
        body = translate('<<var;name="bullet";original="-">> item one').body
        assert body == "- item one\n"

    def test_license_name_alias(self):
        """original="name" emits the word name and keeps following spaces"""
        body = translate('The <<var;name="title";original="name">> license').body
        assert body == "The name license\n"

    def test_min_words_override(self):
        body = Translator('x <<var;name="v";original="a">>', min_words=2).translate().body
        assert body.endswith("__2__\n")


class TestCopyright:
    """Test the copyright marker and the preamble cut"""

    def test_copyright_first(self):
        result = translate(
            '<<var;name="copyright";original="Copyright (c) <year> <owner>">>\nPermission is granted.'
        )
        assert result.body == f"{COPYRIGHT_MARKER}\n\nPermission is granted.\n"
        assert result.warning is None

    def test_title_before_copyright_cut(self):
        result = translate(
            'MIT License\n\n<<var;name="copyright";original="Copyright (c) <year> <owner>">>\nPermission.'
        )
        assert result.body == f"{COPYRIGHT_MARKER}\n\nPermission.\n"
        assert result.warning == "'MIT License' before copyright notice"

    def test_optional_title_before_copyright_kept(self):
        result = translate(
            '<<beginOptional>>The Foo License<<endOptional>>\n'
            '<<var;name="copyright";original="Copyright X">>\nText.'
        )
        assert result.body == f"(( The Foo License\n))??\n\n{COPYRIGHT_MARKER}\n\nText.\n"
        assert result.warning is None

    def test_leading_tag_does_not_shift_copyright_window(self):
        """Translating then normalizing again gives the same body"""
        result = translate(
            '<<var;name="x";original="">>' + "w" * 91
            + '\n<<var;name="copyright";original="Copyright X">>\nText.'
        )
        assert result.body == f"{COPYRIGHT_MARKER}\n\nText.\n"
        assert result.warning == f"'__5__\\n{'w' * 91}' before copyright notice"

        again = body_normalize(result.body)
        assert again.body == result.body
        assert again.warning is None


class TestErrors:
    """Test malformed markup"""

    def test_unterminated_tag(self):
        with pytest.raises(TemplateError, match="missing '>>'"):
            translate('foo <<var;name="x"')

    def test_end_without_begin(self):
        with pytest.raises(TemplateError, match="endOptional without matching beginOptional"):
            translate("foo<<endOptional>>")

    def test_unknown_tag_kind(self):
        with pytest.raises(TemplateError, match="unrecognized tag kind"):
            translate("foo <<bogus>> bar")

    def test_error_is_syntax_error_with_context(self):
        with pytest.raises(SyntaxError) as excinfo:
            Translator("text <<endOptional>>", source="Foo.json").translate()
        message = str(excinfo.value)
        assert "Foo.json" in message
        assert "Position 5" in message
        assert "^" in message

    def test_error_not_chained_to_classification(self):
        with pytest.raises(TemplateError) as excinfo:
            translate("foo <<bogus>> bar")
        assert excinfo.value.__context__ is None
        assert excinfo.value.__cause__ is None
