"""Pytest configuration and shared fixtures."""

import os
from pathlib import Path
from typing import Optional

import pytest


DEFAULT_STYLE = "color:#aaaaaa;background-color:#000000"


def span(style: str = DEFAULT_STYLE) -> str:
    """Opening tag the renderer emits for a style."""
    return f'<span style="{style}">'


def make_sauce(
    title: str = "Test Title",
    author: str = "Artist",
    group: str = "Group",
    width: int = 80,
    height: int = 25,
    comments: tuple[str, ...] = (),
) -> bytes:
    """Build an EOF marker, optional comment block and SAUCE record."""
    record = bytearray(128)
    record[0:7] = b"SAUCE00"
    record[7:42] = title.encode("ascii").ljust(35)
    record[42:62] = author.encode("ascii").ljust(20)
    record[62:82] = group.encode("ascii").ljust(20)
    record[82:90] = b"19960102"
    record[94] = 1  # character data
    record[95] = 1  # ANSI
    record[96:98] = width.to_bytes(2, "little")
    record[98:100] = height.to_bytes(2, "little")
    record[104] = len(comments)

    block = b""
    if comments:
        block = b"COMNT" + b"".join(c.encode("ascii").ljust(64) for c in comments)
    return b"\x1a" + block + bytes(record)


def get_test_art_dir() -> Optional[Path]:
    """
    Get external art directory from the environment.

    Set BBS_ANSI_HTML_TEST_DIR to a directory of .ans files to enable
    the external tests.
    """
    if env_path := os.environ.get("BBS_ANSI_HTML_TEST_DIR"):
        path = Path(env_path).expanduser()
        if path.exists():
            return path
    return None


@pytest.fixture(scope="session")
def test_art_dir() -> Path:
    """Fixture providing external art directory, skips if unavailable."""
    art_dir = get_test_art_dir()
    if art_dir is None:
        pytest.skip("External art directory not found. Set BBS_ANSI_HTML_TEST_DIR")
    return art_dir


@pytest.fixture(scope="session")
def sample_ans_files(test_art_dir: Path) -> list[Path]:
    """Get list of .ans files for testing."""
    files = list(test_art_dir.glob("*.ans")) + list(test_art_dir.glob("*.ANS"))
    if not files:
        pytest.skip(f"No .ans files found in {test_art_dir}")
    # Limit to avoid very slow tests
    return sorted(files)[:50]


@pytest.fixture
def art_file(tmp_path: Path) -> Path:
    """A small ANSI file with a SAUCE record."""
    path = tmp_path / "welcome.ans"
    art = b"\x1b[1;33mWELCOME\x1b[0m\r\n\x1b[2C\xdb\xdb <bbs>\r\n"
    path.write_bytes(art + make_sauce(title="Welcome Screen", comments=("drawn in 1996",)))
    return path


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Generate test cases from external files."""
    if "ans_file" in metafunc.fixturenames:
        art_dir = get_test_art_dir()
        files = sorted(art_dir.glob("*.ans"))[:50] if art_dir else []
        metafunc.parametrize("ans_file", files, ids=lambda p: p.name)
