"""
BBS color-code dialects.

Each dialect is a marker character followed by a short code. The code
tables are plain data: every entry is a StyleChange describing what the
code does to the render state.
"""

from dataclasses import dataclass, replace

from bbs_ansi_html.core.color import Color
from bbs_ansi_html.core.options import Dialect
from bbs_ansi_html.core.state import RenderState


@dataclass(frozen=True, slots=True)
class StyleChange:
    """The effect of one dialect code on a RenderState."""
    foreground: Color | None = None
    background: Color | None = None
    intensity: bool | None = None
    blink: bool | None = None
    reset: bool = False

    def apply(self, state: RenderState) -> RenderState:
        """Return the state that results from applying this change."""
        if self.reset:
            state = RenderState()
        changes = {
            name: value
            for name, value in (
                ("foreground", self.foreground),
                ("background", self.background),
                ("intensity", self.intensity),
                ("blink", self.blink),
            )
            if value is not None
        }
        return replace(state, **changes) if changes else state


def _fg(index: int, bright: bool = False, blink: bool | None = None) -> StyleChange:
    """Foreground change from a DOS color index."""
    return StyleChange(foreground=Color.from_dos(index), intensity=bright, blink=blink)


def _bg(index: int) -> StyleChange:
    """Background change from a DOS color index."""
    return StyleChange(background=Color.from_dos(index))


# |NN
PIPE_CODES: dict[str, StyleChange] = {
    # 00-15: foreground, 08 and up intensified
    **{f"{n:02d}": _fg(n, bright=n >= 8, blink=False) for n in range(16)},
    # 16-23: background
    **{f"{n + 16:02d}": _bg(n) for n in range(8)},
    # 24-31: blinking foreground
    **{f"{n + 24:02d}": _fg(n, blink=True) for n in range(8)},
    # Mnemonics
    "AL": _fg(4, bright=True),   # alert
    "DE": _fg(7),                # default
    "DI": _fg(0, bright=True),   # dim
    "DT": _fg(3),                # data
    "LT": _fg(7, bright=True),   # light
    "H1": _fg(6, bright=True),   # highlight
    "H2": _fg(3, bright=True),   # second highlight
    "TI": _fg(5, bright=True),   # title
    "IN": _fg(2, bright=True),   # input
}

# ~X
TILDE_CODES: dict[str, StyleChange] = {
    f"{n:x}": _fg(n, bright=n >= 8) for n in range(1, 16)
}

# `X
RTSOFT_CODES: dict[str, StyleChange] = {
    **{str(n): _fg(n) for n in range(1, 8)},
    "8": _fg(0, bright=True),
    "9": _fg(1, bright=True),
    "0": _fg(2, bright=True),
    "!": _fg(3, bright=True),
    "@": _fg(4, bright=True),
    "#": _fg(5, bright=True),
    "$": _fg(6, bright=True),
    "%": _fg(7, bright=True),
    ".": StyleChange(reset=True),
    "^": _fg(0),
}

# `rX
RTSOFT_BACKGROUNDS: dict[str, StyleChange] = {
    str(n): _bg(n) for n in range(8)
}

MARKERS: dict[Dialect, str] = {
    Dialect.PIPE: "|",
    Dialect.TILDE: "~",
    Dialect.RTSOFT: "`",
}


@dataclass(frozen=True, slots=True)
class DialectCode:
    """A dialect code read from the text."""
    dialect: Dialect
    code: str
    end: int
    change: StyleChange | None


def read_dialect_code(dialect: Dialect, text: str, start: int) -> DialectCode | None:
    """
    Read the dialect code whose marker is at ``start``.

    Returns None if the text ends before the code is complete. Codes that
    are complete but not in the table come back with ``change=None``.
    """
    body = start + 1
    if dialect is Dialect.PIPE:
        code = text[body:body + 2]
        if len(code) < 2:
            return None
        return DialectCode(dialect, code, body + 2, PIPE_CODES.get(code.upper()))

    if dialect is Dialect.TILDE:
        code = text[body:body + 1]
        if not code:
            return None
        return DialectCode(dialect, code, body + 1, TILDE_CODES.get(code.lower()))

    if dialect is Dialect.RTSOFT:
        code = text[body:body + 1]
        if not code:
            return None
        if code == 'r':
            code = text[body:body + 2]
            if len(code) < 2:
                return None
            return DialectCode(dialect, code, body + 2, RTSOFT_BACKGROUNDS.get(code[1]))
        return DialectCode(dialect, code, body + 1, RTSOFT_CODES.get(code))

    raise ValueError(f"{dialect.value} has no inline marker")


# Yankee-Trader screens highlight by convention rather than by color codes
YANKEE_LINE_START = "|DE"
YANKEE_MARKERS = (
    (" *** ", " |H1***|DE "),
    (" +++ ", " |H2+++|DE "),
    ("  -  ", "  |DI-|DE  "),
    ("-=*=-", "|TI-=*=-|DE"),
)


def preprocess_yankee(text: str) -> str:
    """Rewrite Yankee-Trader highlight markers into pipe codes."""
    for marker, replacement in YANKEE_MARKERS:
        text = text.replace(marker, replacement)
    return '\n'.join(YANKEE_LINE_START + line for line in text.split('\n'))
