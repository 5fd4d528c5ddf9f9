# file: src/reports/report.py
# English-only comments

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

Sink = Callable[[str], None]


@dataclass
class Report:
    """
    Fixed-shape document: style, header, content, footer.

    Fields are set independently by a ReportBuilder; nothing ties one
    field to another.
    """
    style: str = ""
    header: str = ""
    content: str = ""
    footer: str = ""

    def set_style(self, style: str) -> None:
        self.style = style

    def set_header(self, header: str) -> None:
        self.header = header

    def set_content(self, content: str) -> None:
        self.content = content

    def set_footer(self, footer: str) -> None:
        self.footer = footer

    def update_content(self, new_content: str) -> None:
        """Late edit after assembly. Replaces content verbatim, other fields untouched."""
        self.content = new_content

    def lines(self) -> Tuple[str, str, str, str]:
        """Display order is always style, header, content, footer."""
        return (self.style, self.header, self.content, self.footer)

    def show(self, sink: Sink = print) -> None:
        for line in self.lines():
            sink(line)
