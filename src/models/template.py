"""
Template markup data models

Type-safe structures for the template translator and its return values.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Optional


class TagKind(Enum):
    """
    Kinds of SPDX template tags understood by the translator

    NAME_ALIAS has no spelling of its own: any tag whose original
    attribute is the word "name" stands for the license name.
    """
    BEGIN_OPTIONAL = "beginOptional"    # <<beginOptional>>
    END_OPTIONAL = "endOptional"        # <<endOptional>>
    VARIABLE = "var"                    # <<var;name="...";original="...";match="...">>
    NAME_ALIAS = "name"                 # <<var;...;original="name">>


@dataclass
class Tag:
    """
    A single <<...>> span located in a template

    Attributes:
        text: Full tag text including the << and >> delimiters
        kind: Classified tag kind
        start: Offset of the opening << in the template
        end: Offset just past the closing >>

    Example:
        For template 'Hi <<beginOptional>>':
        Tag(text="<<beginOptional>>", kind=TagKind.BEGIN_OPTIONAL, start=3, end=20)
    """
    text: str
    kind: TagKind
    start: int
    end: int


@dataclass
class TranslationResult:
    """
    Result of translating one template into an LRE body

    Attributes:
        body: Normalized LRE body (no header), ending in a single newline
        warning: Advisory message when text preceding the copyright
                 marker had to be dropped, None otherwise

    Example:
        TranslationResult(body="//** Copyright **//\\nPermission ...\\n", warning=None)
    """
    body: str
    warning: Optional[str] = None
