"""
Custom Pygments lexer for LRE syntax highlighting

Used by the --show option to display generated license regular
expressions on the terminal.

Token types:
- Comment.Multiline: //** ... **// annotations and header blocks
- Keyword: optional-group and alternation operators (( )) ?? ||
- Number: __N__ wildcards
- Text: words, punctuation and whitespace
"""

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer
from pygments.token import (
    Text,
    Punctuation,
    Keyword,
    Comment,
    Number,
    Whitespace,
)


class LRELexer(RegexLexer):
    """
    Lexer for license regular expressions

    Example:
        //** Copyright **//
        (( All rights reserved. ))??
        __5__

    Tokens:
        //** Copyright **// → Comment.Multiline
        (( → Keyword
        All → Text
        ))?? → Keyword
        __5__ → Number
    """

    name = 'LRE'
    aliases = ['lre']
    filenames = ['*.lre']

    tokens = {
        'root': [
            # Annotations and the header block may span lines
            (r'//\*\*', Comment.Multiline, 'comment'),

            # Optional group close with its suffix, before the bare operators
            (r'\)\)\?\?', Keyword),
            (r'\(\(|\)\)|\|\||\?\?', Keyword),

            # Wildcards
            (r'__\d+__', Number),

            (r'\s+', Whitespace),
            (r'[\w]+', Text),
            (r'.', Punctuation),
        ],

        'comment': [
            (r'\*\*//', Comment.Multiline, '#pop'),
            (r'[^*]+', Comment.Multiline),
            (r'\*', Comment.Multiline),
        ],
    }


def get_lexer() -> LRELexer:
    """
    Get the LRELexer instance

    Returns:
        LRELexer instance ready for use with Pygments
    """
    return LRELexer()


def lre_highlight(document: str) -> str:
    """Render an LRE document with ANSI colors for the terminal"""
    return highlight(document, get_lexer(), TerminalFormatter())
