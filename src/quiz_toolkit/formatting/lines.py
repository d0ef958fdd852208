"""Line splitting helpers shared by the classifier and the reconstructor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class LineRecord:
    index: int
    raw: str
    content: str  # raw with surrounding whitespace removed

    @property
    def is_blank(self) -> bool:
        return not self.content


def split_lines(text: str) -> List[LineRecord]:
    """Split text on newlines into records, keeping empty lines.

    Always returns ``text.count("\\n") + 1`` records so joining the
    reconstructed lines preserves the line count.
    """
    return [
        LineRecord(index=i, raw=raw, content=raw.strip())
        for i, raw in enumerate(text.split("\n"))
    ]


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)


def next_content(records: Sequence[LineRecord], index: int) -> Optional[str]:
    """Return the trimmed content of the first non-blank record after ``index``."""
    for record in records[index + 1:]:
        if not record.is_blank:
            return record.content
    return None
