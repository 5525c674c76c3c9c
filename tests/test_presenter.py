"""
Tests for ghcheck.presenter.
"""

import io

from ghcheck.presenter import C, Presenter


def test_plain_lines(presenter, stream):
    presenter.success("ok")
    presenter.error("bad")
    presenter.warning("hmm")
    presenter.info("note")
    assert stream.getvalue().splitlines() == ["✓ ok", "✗ bad", "⚠ hmm", "  note"]


def test_header_underline_matches_title(presenter, stream):
    presenter.header("2. Checking Git Configuration")
    lines = stream.getvalue().splitlines()
    assert lines == ["", "2. Checking Git Configuration", "=" * len("2. Checking Git Configuration")]


def test_color_wraps_symbols():
    buf = io.StringIO()
    Presenter(color=True, stream=buf).success("ok")
    assert buf.getvalue() == f"{C.GREEN}✓{C.RESET} ok\n"


def test_no_color_has_no_escape_codes(presenter, stream):
    presenter.banner()
    presenter.emphasis("done", C.GREEN)
    assert "\033[" not in stream.getvalue()
    assert "GitHub Integration Checker for VS Code" in stream.getvalue()


def test_banner_box_is_aligned(presenter, stream):
    presenter.banner()
    box = [l for l in stream.getvalue().splitlines() if l]
    assert len({len(l) for l in box}) == 1
