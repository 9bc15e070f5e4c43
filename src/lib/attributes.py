"""
Tag attribute reader

SPDX template tags carry their parameters as name="value" pairs separated
by semicolons:

    <<var;name="copyright";original="Copyright (c) <year> <owner>";match=".+">>

Attribute lookup is a plain substring search, so values may contain any
character except a double quote. A missing or unterminated attribute reads
as the empty string.
"""

from ..models.template import TagKind


def attr_find(tag: str, name: str) -> str:
    """
    Return the value of attribute `name` in `tag`, or "" if absent

    Example:
        >>> attr_find('<<var;name="x";original="World">>', "original")
        'World'
        >>> attr_find('<<beginOptional>>', "original")
        ''
    """
    marker = f'{name}="'
    i = tag.find(marker)
    if i < 0:
        return ""
    rest = tag[i + len(marker):]
    j = rest.find('"')
    if j < 0:
        return ""
    return rest[:j]


def tagKind_classify(tag: str) -> TagKind:
    """
    Classify a full <<...>> tag by its kind

    A tag whose original attribute is "name" is always a NAME_ALIAS.

    Raises:
        ValueError: If the tag kind is not one the translator understands
    """
    if attr_find(tag, "original") == "name":
        return TagKind.NAME_ALIAS

    body = tag[2:-2] if tag.endswith(">>") else tag[2:]
    kind = body.split(";", 1)[0].strip()
    try:
        kind_enum = TagKind(kind)
    except ValueError:
        raise ValueError(f"unrecognized tag kind {kind!r} in {tag}") from None
    if kind_enum is TagKind.NAME_ALIAS:
        raise ValueError(f"unrecognized tag kind {kind!r} in {tag}")
    return kind_enum
