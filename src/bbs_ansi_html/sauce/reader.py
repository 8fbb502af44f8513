"""SAUCE record parsing."""

import logging
from datetime import datetime

from bbs_ansi_html.sauce.record import DataType, SauceRecord

logger = logging.getLogger(__name__)

SAUCE_ID = b"SAUCE"
COMNT_ID = b"COMNT"
SAUCE_RECORD_SIZE = 128
COMMENT_LINE_SIZE = 64
EOF_BYTE = 0x1A


def _text(field: bytes) -> str:
    return field.rstrip(b'\x00 ').decode('cp437', errors='replace')


def parse_sauce_bytes(data: bytes) -> SauceRecord | None:
    """Parse the SAUCE record at the end of a file's bytes, if present."""
    if len(data) < SAUCE_RECORD_SIZE:
        return None

    record = data[-SAUCE_RECORD_SIZE:]
    # Check for SAUCE signature
    if record[0:5] != SAUCE_ID:
        return None

    # Parse date (YYYYMMDD format)
    date_str = record[82:90].decode('ascii', errors='replace')
    date = None
    if date_str.isdigit():
        try:
            date = datetime.strptime(date_str, "%Y%m%d")
        except ValueError:
            logger.debug("ignoring malformed SAUCE date %r", date_str)

    num_comments = record[104]
    comments: list[str] = []
    if num_comments:
        comment_start = len(data) - SAUCE_RECORD_SIZE - 5 - num_comments * COMMENT_LINE_SIZE
        if comment_start >= 0 and data[comment_start:comment_start + 5] == COMNT_ID:
            offset = comment_start + 5
            for _ in range(num_comments):
                comments.append(_text(data[offset:offset + COMMENT_LINE_SIZE]))
                offset += COMMENT_LINE_SIZE

    return SauceRecord(
        title=_text(record[7:42]),
        author=_text(record[42:62]),
        group=_text(record[62:82]),
        date=date,
        data_type=DataType(record[94]) if record[94] < 9 else DataType.NONE,
        tinfo1=int.from_bytes(record[96:98], 'little'),
        tinfo2=int.from_bytes(record[98:100], 'little'),
        comments=comments,
    )


def strip_sauce(data: bytes) -> tuple[bytes, SauceRecord | None]:
    """
    Split file bytes into the artwork and its SAUCE record.

    The artwork ends before the SAUCE block and the EOF marker directly
    preceding it.
    Files without a record are returned unchanged.
    """
    sauce = parse_sauce_bytes(data)
    if sauce is None:
        return data, None

    end = len(data) - SAUCE_RECORD_SIZE
    if sauce.comments:
        end -= 5 + len(sauce.comments) * COMMENT_LINE_SIZE
    # EOF marker (0x1A) directly before the SAUCE block
    if end > 0 and data[end - 1] == EOF_BYTE:
        end -= 1

    logger.debug("found SAUCE record %r by %r", sauce.title, sauce.author)
    return data[:end], sauce
