"""SAUCE metadata handling."""

from bbs_ansi_html.sauce.record import DataType, SauceRecord
from bbs_ansi_html.sauce.reader import parse_sauce_bytes, strip_sauce

__all__ = ["DataType", "SauceRecord", "parse_sauce_bytes", "strip_sauce"]
