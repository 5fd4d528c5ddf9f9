# file: src/reports/report_director.py
# English-only comments

from __future__ import annotations

from typing import Optional

import public_module
from reports.report import Report
from reports.report_builder import ReportBuilder


def construct_report(
    builder: ReportBuilder,
    *,
    style: Optional[str] = None,
    header: Optional[str] = None,
    content: Optional[str] = None,
    footer: Optional[str] = None,
) -> Report:
    """
    Canonical assembly sequence: style, header, content, footer.

    Any object exposing set_style/set_header/set_content/set_footer/get_report
    works here. Text not passed explicitly comes from config (REPORT_*).
    Returns the builder's report for convenience.
    """
    builder.set_style(public_module.REPORT_STYLE if style is None else style)
    builder.set_header(public_module.REPORT_HEADER if header is None else header)
    builder.set_content(public_module.REPORT_CONTENT if content is None else content)
    builder.set_footer(public_module.REPORT_FOOTER if footer is None else footer)
    return builder.get_report()
