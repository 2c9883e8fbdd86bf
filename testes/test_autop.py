import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wp2jekyll.parsers.autop import wpautop


def test_blank_lines_make_paragraphs():
    assert wpautop("Hello\n\nWorld") == "<p>Hello</p>\n<p>World</p>\n"


def test_single_newline_becomes_line_break():
    assert "Line one<br />\nLine two" in wpautop("Line one\nLine two")


def test_line_breaks_can_be_disabled():
    out = wpautop("Line one\nLine two", br=False)
    assert "<br />" not in out
    assert out.startswith("<p>Line one\nLine two</p>")


def test_block_elements_are_not_wrapped():
    out = wpautop("<div>x</div>")
    assert "<p><div>" not in out
    assert out == "<div>x</div>\n"


def test_pre_blocks_are_preserved():
    out = wpautop("Intro\n<pre>a\n\nb</pre>")
    assert "<p>Intro</p>" in out
    assert "<pre>a\n\nb</pre>" in out


def test_blank_input():
    assert wpautop("") == ""
    assert wpautop("  \n ") == ""
