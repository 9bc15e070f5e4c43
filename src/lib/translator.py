"""
Translator for SPDX license templates

Transforms an SPDX standardLicenseTemplate into a license regular
expression (LRE) body.

The translator makes a single left-to-right pass over the template:
1. Literal text is copied through the reflow engine
2. <<...>> tags are dispatched by kind (optional blocks, variables)
3. The assembled body is normalized once at the end

Key features:
- Nested optional blocks tracked with a stack of buffer offsets
- Optional blocks without meaningful words are discarded
- Doubled LRE operator characters in literal text are collapsed, so the
  template can never inject LRE syntax
- Line wrapping at a fixed width for diff-friendly output

Example:
    >>> Translator('Hello <<beginOptional>>big <<endOptional>>world').translate().body
    'Hello\\n(( big\\n))??\\nworld\\n'
"""

from typing import Callable, Dict, List, Optional

from ..models.template import Tag, TagKind, TranslationResult
from .attributes import attr_find, tagKind_classify
from .log import LOG
from .normalizer import body_normalize
from .reflow import OutputBuffer
from .variables import variable_substitute, words

# Two-character sequences that are operators in LRE syntax
STRUCTURAL_TOKENS = ("((", "||", "))", "//", "??", "__")


class TemplateError(SyntaxError):
    """Raised when a template is not well-formed markup"""
    pass


class Translator:
    """
    Translator for one SPDX template

    Handles:
    - beginOptional / endOptional nesting
    - var tags (copyright, bullet, free-form variables)
    - original="name" aliases for the license name
    - Error reporting with position and source context
    """

    def __init__(
        self,
        template: str,
        source: str = "<template>",
        width: Optional[int] = None,
        min_words: Optional[int] = None,
        window: Optional[int] = None,
    ) -> None:
        """
        Initialize translator with template text

        Args:
            template: Raw SPDX template text
            source: Name used in error messages (usually the JSON file)
            width: Wrap width (defaults to settings)
            min_words: Wildcard floor for non-bullet variables (defaults to settings)
            window: Copyright preamble window (defaults to settings)

        Attributes:
            template: Template text being translated
            position: Current character position in template
            start: Start of literal text not yet written
            buffer: Output buffer receiving the LRE body
            optional_starts: Buffer offsets of currently open optional blocks
        """
        from ..config import appsettings

        self.template = template
        self.source = source
        self.width = width if width is not None else appsettings.wrap_width
        self.min_words = min_words if min_words is not None else appsettings.min_wildcard_words
        self.window = window if window is not None else appsettings.copyright_window

        self.position = 0
        self.start = 0
        self.buffer = OutputBuffer(self.width)
        self.optional_starts: List[int] = []

        self.handlers: Dict[TagKind, Callable[[Tag], None]] = {
            TagKind.BEGIN_OPTIONAL: self.optional_begin,
            TagKind.END_OPTIONAL: self.optional_end,
            TagKind.VARIABLE: self.variable_handle,
            TagKind.NAME_ALIAS: self.nameAlias_handle,
        }

    def translate(self) -> TranslationResult:
        """
        Translate the template into a normalized LRE body

        Main entry point. Scans the whole template, then normalizes the
        assembled buffer.

        Returns:
            TranslationResult with the body and an optional warning

        Raises:
            TemplateError: If the template contains an unterminated tag, an
                          endOptional without beginOptional, or an unknown
                          tag kind
        """
        t = self.template

        while self.position < len(t):
            if t.startswith(STRUCTURAL_TOKENS, self.position):
                self.structural_escape()
            elif t.startswith("<<", self.position) and not t.startswith("<<<", self.position):
                tag = self.tag_read()
                self.handlers[tag.kind](tag)
            else:
                self.position += 1

        self.buffer.wrap(t[self.start:])

        if self.optional_starts:
            LOG(f"{self.source}: {len(self.optional_starts)} optional block(s) left open", level=2)

        result = body_normalize(self.buffer.getvalue(), self.window)
        if result.warning:
            LOG(f"{self.source}: {result.warning}", level=2)
        return result

    def structural_escape(self) -> None:
        """
        Pass a run of a doubled operator character through as literal text

        Only the first character of the run is kept; the rest of the run is
        skipped. "a??b" becomes "a?b".
        """
        t = self.template
        c = t[self.position]
        self.buffer.wrap(t[self.start:self.position + 1])
        while self.position < len(t) and t[self.position] == c:
            self.position += 1
        self.start = self.position

    def tag_read(self) -> Tag:
        """
        Read the tag at the current position and advance past it

        Literal text before the tag is flushed first. For every tag except a
        name alias, spaces after the tag are skipped.

        Raises:
            TemplateError: If there is no closing >> or the tag kind is unknown
        """
        t = self.template
        self.buffer.wrap(t[self.start:self.position])

        j = t.find(">>", self.position)
        if j < 0:
            self.error("unterminated tag: missing '>>'")

        text = t[self.position:j + 2]
        try:
            kind = tagKind_classify(text)
        except ValueError as e:
            kind, problem = None, str(e)
        if kind is None:
            self.error(problem)

        tag = Tag(text=text, kind=kind, start=self.position, end=j + 2)
        self.position = tag.end

        if kind is not TagKind.NAME_ALIAS:
            while self.position < len(t) and t[self.position] == " ":
                self.position += 1
        self.start = self.position

        LOG(f"{self.source}: {kind.name} tag at {tag.start}", level=3)
        return tag

    def nameAlias_handle(self, tag: Tag) -> None:
        """Handle a tag standing for the license name: emit the word name"""
        self.buffer.wrap("name")

    def optional_begin(self, tag: Tag) -> None:
        """Handle <<beginOptional>>: open a (( group on a new line"""
        self.optional_starts.append(self.buffer.tell())
        self.buffer.indentNL()
        self.buffer.write("(( ")

    def optional_end(self, tag: Tag) -> None:
        """
        Handle <<endOptional>>: close the innermost optional group

        The whole block is discarded when it holds no words, or only a
        plural "s" as in name((s))??. Punctuation is not matched anyway.
        """
        if not self.optional_starts:
            self.error("endOptional without matching beginOptional", tag.start)
        start = self.optional_starts.pop()

        if self.buffer.newline_since(start):
            self.buffer.indentNL()
        else:
            self.buffer.write(" ")
        self.buffer.write("))??")
        self.buffer.indentNL()

        w = words(self.buffer.text_since(start))
        if len(w) == 0 or (len(w) == 1 and w[0] == "s"):
            self.buffer.truncate(start)

    def variable_handle(self, tag: Tag) -> None:
        """Handle <<var;...>> through the variable substitution policy"""
        variable_substitute(
            self.buffer,
            attr_find(tag.text, "name"),
            attr_find(tag.text, "original"),
            self.min_words,
        )

    def error(self, message: str, position: Optional[int] = None) -> None:
        """
        Report translation error with template context

        Raises TemplateError with detailed error message including:
        - Source name and custom error message
        - Character position
        - Template context (±40 characters around error)
        - Caret indicator pointing to error position

        Raises:
            TemplateError: Always (this is an error reporting function)
        """
        if position is None:
            position = self.position
        context_start = max(0, position - 40)
        context_end = min(len(self.template), position + 40)
        context = self.template[context_start:context_end].replace("\n", " ")

        raise TemplateError(
            f"\n{self.source}: {message}\n"
            f"Position {position}\n"
            f"Context: ...{context}...\n"
            f"            {' ' * (position - context_start)}^"
        )


def translate(template: str, source: str = "<template>") -> TranslationResult:
    """
    Translate an SPDX template into an LRE body using configured settings

    Example:
        >>> translate("<<var;name=\\"copyright\\";original=\\"(c) X\\">> text").body
        '//** Copyright **//\\n\\ntext\\n'
    """
    return Translator(template, source=source).translate()
