"""Byte-range edit sets that serialize a rewritten tree back to source text.

Tree-sitter trees are read-only, so a rewrite is recorded as a list of
replacements against the original bytes and applied in one pass at the end.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Edit:
    """Replace source[start:end] with text. start == end is an insertion."""

    start: int
    end: int
    text: str
    seq: int = 0

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end


@dataclass
class EditSet:
    """Ordered collection of non-overlapping edits."""

    edits: list[Edit] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.edits)

    def __bool__(self) -> bool:
        return bool(self.edits)

    def insert(self, offset: int, text: str) -> Edit:
        return self._add(Edit(offset, offset, text, len(self.edits)))

    def replace(self, node: Any, text: str) -> Edit:
        return self._add(Edit(node.start_byte, node.end_byte, text, len(self.edits)))

    def covers(self, node: Any) -> bool:
        """True when a replacement already claims the node's range."""
        return any(
            not e.is_insertion and e.start <= node.start_byte and node.end_byte <= e.end
            for e in self.edits
        )

    def _add(self, edit: Edit) -> Edit:
        if not edit.is_insertion:
            for other in self.edits:
                if other.is_insertion:
                    if edit.start < other.start < edit.end:
                        raise ValueError(f"Insertion at {other.start} falls inside {edit}")
                elif edit.start < other.end and other.start < edit.end:
                    raise ValueError(f"Overlapping edits: {other} and {edit}")
        else:
            for other in self.edits:
                if not other.is_insertion and other.start < edit.start < other.end:
                    raise ValueError(f"Insertion at {edit.start} falls inside {other}")
        self.edits.append(edit)
        return edit

    def _order(self, edit: Edit) -> tuple[int, int, int]:
        # Same offset: insertions before replacements, later insertions first
        return (edit.start, 0 if edit.is_insertion else 1, -edit.seq)

    def apply(self, source: bytes) -> bytes:
        """Return source with every edit applied."""
        if not self.edits:
            return source

        out = []
        cursor = 0
        for edit in sorted(self.edits, key=self._order):
            out.append(source[cursor : edit.start])
            out.append(edit.text.encode("utf-8"))
            cursor = max(cursor, edit.end)
        out.append(source[cursor:])
        return b"".join(out)
