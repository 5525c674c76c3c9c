"""
GHCheck Presenter — Console formatting for check output.

Section headers, status lines and the startup banner. A Presenter holds no
mutable state: color and the output stream are fixed when it is built, and
every method just formats and writes one or more lines.
"""

import sys
from dataclasses import dataclass, field
from typing import TextIO


# ANSI colors
class C:
    RESET  = "\033[0m"
    BOLD   = "\033[1m"
    RED    = "\033[31m"
    GREEN  = "\033[32m"
    YELLOW = "\033[33m"
    BLUE   = "\033[36m"


BANNER_TITLE = "GitHub Integration Checker for VS Code"
BANNER_WIDTH = 52


@dataclass(frozen=True)
class Presenter:
    """Writes formatted status lines to a stream."""
    color: bool = True
    stream: TextIO = field(default_factory=lambda: sys.stdout)

    def paint(self, text: str, *codes: str) -> str:
        """Wrap text in ANSI codes when color is enabled."""
        if not self.color or not codes:
            return text
        return f"{''.join(codes)}{text}{C.RESET}"

    def line(self, text: str = "") -> None:
        print(text, file=self.stream)

    def blank(self) -> None:
        self.line()

    def header(self, title: str) -> None:
        """Section header: a blank line, the title, and an underline of equal length."""
        self.line()
        self.line(self.paint(title, C.BOLD, C.BLUE))
        self.line("=" * len(title))

    def success(self, text: str) -> None:
        self.line(f"{self.paint('✓', C.GREEN)} {text}")

    def error(self, text: str) -> None:
        self.line(f"{self.paint('✗', C.RED)} {text}")

    def warning(self, text: str) -> None:
        self.line(f"{self.paint('⚠', C.YELLOW)} {text}")

    def info(self, text: str) -> None:
        self.line(f"  {text}")

    def emphasis(self, text: str, color: str) -> None:
        """A free-standing colored line (verdicts, resource headings)."""
        self.line(self.paint(text, color))

    def banner(self, title: str = BANNER_TITLE) -> None:
        """Boxed title printed once at startup."""
        inner = BANNER_WIDTH
        lines = [
            "╔" + "═" * inner + "╗",
            "║  " + title.ljust(inner - 2) + "║",
            "╚" + "═" * inner + "╝",
        ]
        self.line()
        for text in lines:
            self.line(self.paint(text, C.BOLD, C.BLUE))
        self.line()
