"""Escape sequence scanning."""

from dataclasses import dataclass

from bbs_ansi_html.core.constants import CSI


@dataclass(frozen=True, slots=True)
class EscapeToken:
    """A terminated ``ESC [ params final`` sequence found in the text."""
    start: int
    end: int
    final: str
    params: tuple[int | str, ...]
    raw: str

    def param(self, index: int, default: int = 1) -> int:
        """Get a positive numeric parameter, or ``default`` if absent."""
        if index < len(self.params):
            value = self.params[index]
            if isinstance(value, int) and value > 0:
                return value
        return default


def is_introducer(text: str, index: int) -> bool:
    """Check if an escape-sequence introducer starts at ``index``."""
    return text.startswith(CSI, index)


def scan(text: str, start: int) -> tuple[int, str]:
    """
    Find the end of the escape sequence introduced at ``start``.

    The sequence ends at the first ASCII letter after the introducer.
    Returns the index just past that letter and the letter itself, or
    ``(len(text), "")`` if the text ends first.
    """
    i = start + len(CSI)
    while i < len(text):
        char = text[i]
        if 'A' <= char <= 'Z' or 'a' <= char <= 'z':
            return i + 1, char
        i += 1
    return len(text), ''


def parse_params(params_str: str) -> tuple[int | str, ...]:
    """Split a parameter string on ``;``, converting numeric parts to int."""
    if not params_str:
        return ()
    return tuple(
        int(part) if part.isascii() and part.isdigit() else part
        for part in params_str.split(';')
    )


def read_escape(text: str, start: int) -> EscapeToken | None:
    """Read the escape sequence at ``start``; None if it is unterminated."""
    end, final = scan(text, start)
    if not final:
        return None
    return EscapeToken(
        start=start,
        end=end,
        final=final,
        params=parse_params(text[start + len(CSI):end - 1]),
        raw=text[start:end],
    )
