"""Tests for the HTML renderer and the conversion pipeline."""

import re

import pytest

from bbs_ansi_html import ConvertOptions, Dialect, convert
from bbs_ansi_html.render.html import HtmlRenderer, render_page

from conftest import DEFAULT_STYLE, span


PIPE = frozenset({Dialect.PIPE})
RED_BG = "color:#aaaaaa;background-color:#aa0000"


def assert_balanced(html: str) -> None:
    """Spans are closed and never nested."""
    depth = 0
    for tag in re.findall(r"<span[^>]*>|</span>", html):
        depth += -1 if tag == "</span>" else 1
        assert depth in (0, 1)
    assert depth == 0


class TestPlainText:
    """Documents without escape sequences."""

    def test_html_escaping(self) -> None:
        html = HtmlRenderer().render("a<b & 'c\">")
        assert html == "a&lt;b&nbsp;&amp;&nbsp;&#39;c&quot;&gt;"
        assert "<span" not in html

    def test_crlf_single_break(self) -> None:
        assert HtmlRenderer().render("a\r\nb") == "a<br>\nb"

    def test_lf_and_cr(self) -> None:
        assert HtmlRenderer().render("a\nb") == "a<br>\nb"
        assert HtmlRenderer().render("a\rb") == "a<br>\nb"
        assert HtmlRenderer().render("a\r\n\nb") == "a<br>\n<br>\nb"

    def test_null_is_blank(self) -> None:
        assert HtmlRenderer().render("a\x00b") == "a&nbsp;b"

    def test_glyphs(self) -> None:
        html = HtmlRenderer().render("\xdb\xb0\x01\x7f")
        assert html == "█░☺⌂"

    def test_code_255_literal(self) -> None:
        assert HtmlRenderer().render("\xff") == "\xff"

    def test_unicode_passthrough(self) -> None:
        assert HtmlRenderer().render("snow☃") == "snow☃"

    def test_latin1_range_is_cp437(self) -> None:
        # Text is one code point per source byte, so 0xE9 is CP437 theta
        assert HtmlRenderer().render("\xe9") == "Θ"


class TestSoftWrap:
    """Column wrapping."""

    def test_wrap_at_80(self) -> None:
        html = HtmlRenderer().render("A" * 80 + "B")
        assert html == "A" * 80 + "<br>\nB"

    def test_no_wrap_before_terminator(self) -> None:
        html = HtmlRenderer().render("A" * 80 + "\r\nB")
        assert html == "A" * 80 + "<br>\nB"

    def test_style_tokens_do_not_count(self) -> None:
        html = HtmlRenderer().render("\x1b[31m" + "A" * 80)
        assert "<br>" not in html

    def test_escaped_characters_count_once(self) -> None:
        html = HtmlRenderer(width=3).render("<<<<")
        assert html == "&lt;&lt;&lt;<br>\n&lt;"

    def test_dialect_markers_do_not_count(self) -> None:
        html = HtmlRenderer(dialects=PIPE).render("|04" + "A" * 80)
        assert "<br>" not in html

    def test_escape_after_full_line_wraps(self) -> None:
        html = HtmlRenderer().render("A" * 80 + "\x1b[0m\r\nB")
        assert html == "A" * 80 + "<br>\n" + span() + "<br>\nB</span>"

    def test_dialect_code_after_full_line_wraps(self) -> None:
        html = HtmlRenderer(width=2, dialects=PIPE).render("AB|07C")
        assert html == "AB<br>\n" + span() + "C</span>"


class TestSgrSpans:
    """SGR sequences."""

    def test_bold_red(self) -> None:
        html = HtmlRenderer().render("\x1b[1;31mX")
        assert html == span("color:#ff5555;background-color:#000000") + "X</span>"

    def test_no_coalescing(self) -> None:
        html = HtmlRenderer().render("\x1b[31m\x1b[31mX")
        red = span("color:#aa0000;background-color:#000000")
        assert html == red + "</span>" + red + "X</span>"

    def test_reset_opens_default_span(self) -> None:
        html = HtmlRenderer().render("\x1b[41mA\x1b[0mB")
        assert html == span(RED_BG) + "A</span>" + span() + "B</span>"

    def test_blink_span(self) -> None:
        html = HtmlRenderer().render("\x1b[5mX")
        assert html == span(DEFAULT_STYLE + ";text-decoration:blink") + "X</span>"

    def test_other_sequences_dropped(self) -> None:
        assert HtmlRenderer().render("\x1b[2JX\x1b[K") == "X"

    def test_unterminated_passes_through(self) -> None:
        assert HtmlRenderer().render("A\x1b[12") == "A←[12"

    def test_lone_escape_is_glyph(self) -> None:
        assert HtmlRenderer().render("\x1bM") == "←M"

    def test_sgr_always_recognized_in_dialect_mode(self) -> None:
        html = HtmlRenderer(dialects=PIPE).render("\x1b[32mX")
        assert html.startswith(span("color:#00aa00;background-color:#000000"))


class TestDialectSpans:
    """BBS color-code dialects."""

    def test_pipe_blue_on_blue(self) -> None:
        html = HtmlRenderer(dialects=PIPE).render("|01|17X")
        assert html == (
            span("color:#0000aa;background-color:#000000") + "</span>"
            + span("color:#0000aa;background-color:#0000aa") + "X</span>"
        )

    def test_disabled_dialect_is_text(self) -> None:
        assert HtmlRenderer().render("|01~2`3") == "|01~2`3"

    def test_unknown_code_swallowed(self) -> None:
        assert HtmlRenderer(dialects=PIPE).render("|ZZA") == "A"

    def test_incomplete_code_literal(self) -> None:
        assert HtmlRenderer(dialects=PIPE).render("x|0") == "x|0"

    def test_tilde(self) -> None:
        html = HtmlRenderer(dialects=frozenset({Dialect.TILDE})).render("~eGold")
        assert html == span("color:#ffff55;background-color:#000000") + "Gold</span>"

    def test_rtsoft_background(self) -> None:
        html = HtmlRenderer(dialects=frozenset({Dialect.RTSOFT})).render("`r3AB")
        assert html == span("color:#aaaaaa;background-color:#00aaaa") + "AB</span>"

    def test_rtsoft_reset(self) -> None:
        html = HtmlRenderer(dialects=frozenset({Dialect.RTSOFT})).render("`@A`.B")
        assert html == (
            span("color:#ff5555;background-color:#000000") + "A</span>"
            + span() + "B</span>"
        )

    def test_combined_dialects(self) -> None:
        renderer = HtmlRenderer(dialects=frozenset({Dialect.PIPE, Dialect.TILDE}))
        html = renderer.render("|15a~1b")
        assert html == (
            span("color:#ffffff;background-color:#000000") + "a</span>"
            + span("color:#0000aa;background-color:#000000") + "b</span>"
        )


class TestConvert:
    """The full pipeline."""

    def test_plain_document(self) -> None:
        assert convert("Hi <there>") == "Hi&nbsp;&lt;there&gt;"

    def test_bytes_are_decoded_per_byte(self) -> None:
        assert convert(b"\xc9\xcd\xbb") == "╔═╗"

    def test_forward_does_not_leak_style(self) -> None:
        html = convert("\x1b[41mA\x1b[5CB")
        assert html == (
            span(RED_BG) + "A</span>"
            + span() + "&nbsp;" * 5 + "</span>"
            + span(RED_BG) + "B</span>"
        )

    def test_inverse_survives_vertical_move(self) -> None:
        html = convert("\x1b[31m\x1b[7mA\x1b[BB")
        inverse = span("color:#000000;background-color:#aa0000")
        assert html == (
            span("color:#aa0000;background-color:#000000") + "</span>"
            + inverse + "A<br>\n&nbsp;</span>"
            + inverse + "B</span>"
        )

    def test_cursor_positioning_resolved(self) -> None:
        assert convert("World\x1b[1;1HHello") == "Hello"

    def test_dialect_skips_flattening(self) -> None:
        options = ConvertOptions(dialects=PIPE)
        # Cursor movement is ignored, not resolved, in dialect mode
        assert convert("World\x1b[1;1HHello", options) == "WorldHello"

    def test_flatten_disabled(self) -> None:
        options = ConvertOptions(flatten=False)
        assert convert("AB\x1b[2DC", options) == "ABC"

    def test_yankee(self) -> None:
        options = ConvertOptions(dialects=frozenset({Dialect.YANKEE}))
        html = convert("Hi *** x", options)
        assert html == (
            span() + "Hi&nbsp;</span>"
            + span("color:#ffff55;background-color:#000000") + "***</span>"
            + span() + "&nbsp;x</span>"
        )

    @pytest.mark.parametrize("doc", [
        "\x1b[1;33mTitle\x1b[0m\r\n\x1b[5C\xdb\xdb\x1b[2D\xb0",
        "\x1b[41mA\x1b[5CB\r\n\x1b[s\x1b[10;10HX\x1b[u\x1b[7mY\x1b[0m",
        "\x1b[31m" + "\xdb" * 200,
        "\x1b[",
    ])
    def test_spans_balanced(self, doc: str) -> None:
        assert_balanced(convert(doc))

    def test_dialect_spans_balanced(self) -> None:
        options = ConvertOptions(dialects=frozenset(Dialect))
        assert_balanced(convert("|01~2`3`r4 *** |AL\x1b[0m", options))


class TestRenderPage:
    """Test render_page."""

    def test_wraps_body(self) -> None:
        page = render_page("<b>x</b>", title="A & B")
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>A &amp; B</title>" in page
        assert '<div class="ansi-art"><b>x</b></div>' in page

    def test_custom_class(self) -> None:
        page = render_page("", css_class="art", font_family="Perfect DOS VGA")
        assert ".art { font-family: Perfect DOS VGA;" in page
