"""
Line reflow engine for LRE output

OutputBuffer accumulates the LRE body while the translator runs. Literal
template text goes through wrap(), which re-wraps the trailing line so no
line grows past the target width. Wrapping keeps future diffs of the
generated .lre files readable.

The text after the last newline is the "current line". Its leading run of
spaces and tabs is the indentation, and both wrap() and indentNL() carry
that indentation onto every line they start.
"""

from typing import List

BLANKS = " \t"


def indent_split(line: str) -> tuple[str, str]:
    """Split a line into its leading spaces/tabs and the rest"""
    i = 0
    while i < len(line) and line[i] in BLANKS:
        i += 1
    return line[:i], line[i:]


def lines_splitAfter(text: str) -> List[str]:
    """
    Split text after each newline, keeping the newlines

    Always returns at least one element; the last one holds whatever
    follows the final newline (possibly "").

    Example:
        >>> lines_splitAfter("a\\nb")
        ['a\\n', 'b']
        >>> lines_splitAfter("a\\n")
        ['a\\n', '']
    """
    parts = text.split("\n")
    return [part + "\n" for part in parts[:-1]] + [parts[-1]]


class OutputBuffer:
    """
    Append-only text accumulator with line reflow

    Truncation is the only way to remove text, and is used by the
    translator to discard optional blocks that carry no words.

    Text is held as a list of written parts; inspection and truncation
    only walk the parts after the requested offset.
    """

    def __init__(self, width: int = 80) -> None:
        self.width = width
        self._parts: List[str] = []
        self._length = 0

    def __len__(self) -> int:
        return self._length

    def tell(self) -> int:
        """Current length of the buffer, usable as a truncation offset"""
        return self._length

    def getvalue(self) -> str:
        return "".join(self._parts)

    def write(self, text: str) -> None:
        """Append text verbatim, without reflow"""
        if text:
            self._parts.append(text)
            self._length += len(text)

    def truncate(self, offset: int) -> None:
        while self._parts and self._length - len(self._parts[-1]) >= offset:
            self._length -= len(self._parts.pop())
        if self._length > offset:
            keep = len(self._parts[-1]) - (self._length - offset)
            self._parts[-1] = self._parts[-1][:keep]
            self._length = offset

    def lineStart_find(self) -> int:
        """Offset of the first character of the current line"""
        end = self._length
        for part in reversed(self._parts):
            i = part.rfind("\n")
            if i >= 0:
                return end - len(part) + i + 1
            end -= len(part)
        return 0

    def current_line(self) -> str:
        return self.text_since(self.lineStart_find())

    def text_since(self, offset: int) -> str:
        tail = []
        end = self._length
        for part in reversed(self._parts):
            if end <= offset:
                break
            start = end - len(part)
            tail.append(part[max(offset - start, 0):])
            end = start
        return "".join(reversed(tail))

    def newline_since(self, offset: int) -> bool:
        return "\n" in self.text_since(offset)

    def indentNL(self) -> None:
        """
        End the current line and start a new one at the same indentation

        Example:
            buffer holds "  (( foo" -> buffer holds "  (( foo\\n  "
        """
        indent, _ = indent_split(self.current_line())
        self.write("\n" + indent)

    def wrap(self, text: str) -> None:
        """
        Append literal text, wrapping long lines at the target width

        The current (partial) line is taken back out of the buffer, joined
        with the new text, and written out again in wrapped form. A line is
        broken at the last space or tab before the width boundary; if there
        is none, at the first one after it. A line with no break point at
        all is written in full.
        """
        start = self.lineStart_find()
        pending = self.text_since(start)
        self.truncate(start)

        lines = lines_splitAfter(text)
        lines[0] = pending + lines[0]

        out = []
        for line in lines:
            indent, line = indent_split(line)
            limit = max(self.width - len(indent), 0)
            while len(line) > limit:
                j = limit
                while j >= 0 and line[j] not in BLANKS:
                    j -= 1
                if j < 0:
                    j = limit
                    while j < len(line) and line[j] not in BLANKS:
                        j += 1
                    if j == len(line):
                        break
                out.append(indent + line[:j] + "\n")
                while j < len(line) and line[j] in BLANKS:
                    j += 1
                line = line[j:]
            out.append(indent + line)

        self.write("".join(out))
