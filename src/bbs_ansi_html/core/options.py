"""Conversion options shared by the library and the CLI."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from bbs_ansi_html.core.constants import SCREEN_WIDTH


class Dialect(Enum):
    """Non-standard inline color-code schemes used by BBS software."""
    PIPE = "pipe"          # |NN  (Renegade and friends)
    TILDE = "tilde"        # ~X
    RTSOFT = "rtsoft"      # `X and `rX  (Robinson Technologies door games)
    YANKEE = "yankee"      # Yankee-Trader screens, rewritten to pipe codes


@dataclass(frozen=True)
class ConvertOptions:
    """
    Configuration bundle for one conversion.

    Flattening is forced off whenever any dialect is enabled, because
    dialect color codes are not escape sequences and their interaction
    with cursor movement is not modeled.
    """
    dialects: frozenset[Dialect] = field(default_factory=frozenset)
    flatten: bool = True
    width: int = SCREEN_WIDTH

    @classmethod
    def from_names(
        cls,
        names: Iterable[str],
        flatten: bool = True,
        width: int = SCREEN_WIDTH,
    ) -> "ConvertOptions":
        """Build options from dialect names such as ``"pipe"``."""
        dialects: set[Dialect] = set()
        for name in names:
            try:
                dialects.add(Dialect(name.lower()))
            except ValueError:
                raise ValueError(f"Unknown dialect: {name}") from None
        return cls(dialects=frozenset(dialects), flatten=flatten, width=width)

    @property
    def should_flatten(self) -> bool:
        """True if the cursor-movement flattener runs before rendering."""
        return self.flatten and not self.dialects

    @property
    def render_dialects(self) -> frozenset[Dialect]:
        """Dialects whose markers the renderer must recognize."""
        if Dialect.YANKEE in self.dialects:
            return self.dialects | {Dialect.PIPE}
        return self.dialects
