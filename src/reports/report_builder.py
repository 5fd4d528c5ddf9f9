# file: src/reports/report_builder.py
# English-only comments

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Type, Union

from reports.report import Report


class ReportFormat(str, Enum):
    TEXT = "text"
    HTML = "html"
    XML = "xml"


def _tag(name: str) -> Callable[[str], str]:
    """Wrapper that encloses text in <name>...</name>."""
    def wrap(text: str) -> str:
        return f"<{name}>{text}</{name}>"
    return wrap


def _prefix(prefix: str) -> Callable[[str], str]:
    def wrap(text: str) -> str:
        return prefix + text
    return wrap


def _as_is(text: str) -> str:
    return text


class ReportBuilder:
    """
    Base builder: each setter wraps raw text with the format's markup
    and stores it on its own Report.

    Subclasses only declare the four wrappers. Setters are independent,
    so calling one twice simply overwrites that field.
    """

    fmt: ReportFormat
    wrap_style: Callable[[str], str] = staticmethod(_as_is)
    wrap_header: Callable[[str], str] = staticmethod(_as_is)
    wrap_content: Callable[[str], str] = staticmethod(_as_is)
    wrap_footer: Callable[[str], str] = staticmethod(_as_is)

    def __init__(self) -> None:
        self._report = Report()

    def set_style(self, style: str) -> None:
        self._report.set_style(self.wrap_style(style))

    def set_header(self, header: str) -> None:
        self._report.set_header(self.wrap_header(header))

    def set_content(self, content: str) -> None:
        self._report.set_content(self.wrap_content(content))

    def set_footer(self, footer: str) -> None:
        self._report.set_footer(self.wrap_footer(footer))

    def get_report(self) -> Report:
        return self._report


class TextReportBuilder(ReportBuilder):
    fmt = ReportFormat.TEXT
    wrap_header = staticmethod(_prefix("TEXT HEADER: "))
    wrap_footer = staticmethod(_prefix("END: "))


class HtmlReportBuilder(ReportBuilder):
    fmt = ReportFormat.HTML
    wrap_style = staticmethod(_tag("style"))
    wrap_header = staticmethod(_tag("h1"))
    wrap_content = staticmethod(_tag("p"))
    wrap_footer = staticmethod(_tag("footer"))


class XmlReportBuilder(ReportBuilder):
    fmt = ReportFormat.XML
    wrap_style = staticmethod(_tag("style"))
    wrap_header = staticmethod(_tag("header"))
    wrap_content = staticmethod(_tag("content"))
    wrap_footer = staticmethod(_tag("footer"))


BUILDERS: Dict[ReportFormat, Type[ReportBuilder]] = {
    ReportFormat.TEXT: TextReportBuilder,
    ReportFormat.HTML: HtmlReportBuilder,
    ReportFormat.XML: XmlReportBuilder,
}


def create_builder(fmt: Union[ReportFormat, str]) -> ReportBuilder:
    """
    Return a fresh builder for `fmt` ("text", "html", "xml" or ReportFormat).
    Raises ValueError for an unknown format.
    """
    if isinstance(fmt, str) and not isinstance(fmt, ReportFormat):
        fmt = fmt.strip().lower()
    try:
        key = ReportFormat(fmt)
    except ValueError:
        raise ValueError(f"Unknown report format: {fmt!r}") from None
    return BUILDERS[key]()
