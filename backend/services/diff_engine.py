"""
Line diff engine
Edit scripts between two line sequences, built on difflib
"""
import difflib
from dataclasses import dataclass, field
from typing import List, Sequence, Union

COPY = "copy"
ADD = "add"
DELETE = "delete"
CHANGE = "change"

_OPCODES = {
    "equal": COPY,
    "insert": ADD,
    "delete": DELETE,
    "replace": CHANGE,
}

Lines = Union[str, Sequence[str]]


def split_lines(text: Lines) -> List[str]:
    """Split text on newlines. An empty text has zero lines, not one empty line."""
    lines = text.split("\n") if isinstance(text, str) else list(text)
    if len(lines) == 1 and lines[0] == "":
        return []
    return lines


@dataclass
class DiffOp:
    """One run of an edit script"""
    type: str
    orig: List[str] = field(default_factory=list)
    closing: List[str] = field(default_factory=list)

    def norig(self) -> int:
        return len(self.orig)

    def nclosing(self) -> int:
        return len(self.closing)


class LineDiffEngine:
    """Classic line-oriented diff: copy, add, delete and change runs"""

    def __init__(self, autojunk: bool = False):
        self.autojunk = autojunk

    def diff(self, a: Lines, b: Lines) -> List[DiffOp]:
        lines1 = split_lines(a)
        lines2 = split_lines(b)

        matcher = difflib.SequenceMatcher(None, lines1, lines2, autojunk=self.autojunk)
        edits = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            op = _OPCODES[tag]
            if op == COPY:
                edits.append(DiffOp(COPY, lines1[i1:i2], lines2[j1:j2]))
            elif op == ADD:
                edits.append(DiffOp(ADD, [], lines2[j1:j2]))
            elif op == DELETE:
                edits.append(DiffOp(DELETE, lines1[i1:i2], []))
            else:
                edits.append(DiffOp(CHANGE, lines1[i1:i2], lines2[j1:j2]))
        return edits
