"""SAUCE record data structure."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum


class DataType(IntEnum):
    """SAUCE data types."""
    NONE = 0
    CHARACTER = 1
    BITMAP = 2
    VECTOR = 3
    AUDIO = 4
    BINARYTEXT = 5
    XBIN = 6
    ARCHIVE = 7
    EXECUTABLE = 8


@dataclass
class SauceRecord:
    """
    SAUCE (Standard Architecture for Universal Comment Extensions) record.

    Art-scene metadata appended to the end of ANSI files. Only the fields
    the converter shows or uses are kept. See:
    https://www.acid.org/info/sauce/sauce.htm
    """
    title: str = ""
    author: str = ""
    group: str = ""
    date: datetime | None = None
    data_type: DataType = DataType.CHARACTER
    tinfo1: int = 0  # Width for character data
    tinfo2: int = 0  # Height for character data
    comments: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        """Get width (alias for tinfo1)."""
        return self.tinfo1

    @property
    def height(self) -> int:
        """Get height (alias for tinfo2)."""
        return self.tinfo2

    def to_dict(self) -> dict:
        """JSON-friendly representation."""
        return {
            "title": self.title,
            "author": self.author,
            "group": self.group,
            "date": self.date.strftime('%Y-%m-%d') if self.date else None,
            "width": self.tinfo1,
            "height": self.tinfo2,
            "comments": self.comments,
        }
