"""Tests for report builders and the director."""

import pytest

import public_module
from reports.report import Report
from reports.report_builder import (
    BUILDERS,
    HtmlReportBuilder,
    ReportFormat,
    TextReportBuilder,
    XmlReportBuilder,
    create_builder,
)
from reports.report_director import construct_report


class TestBuilderMarkup:
    """Header "Report" through each format."""

    @pytest.mark.parametrize(
        "fmt, expected",
        [
            (ReportFormat.TEXT, "TEXT HEADER: Report"),
            (ReportFormat.HTML, "<h1>Report</h1>"),
            (ReportFormat.XML, "<header>Report</header>"),
        ],
    )
    def test_header(self, fmt, expected):
        report = construct_report(create_builder(fmt), header="Report")
        assert report.header == expected

    def test_text_fields(self):
        report = construct_report(
            TextReportBuilder(), style="plain", header="Q1", content="Body", footer="Bye"
        )

        assert report.lines() == ("plain", "TEXT HEADER: Q1", "Body", "END: Bye")

    def test_html_fields(self):
        report = construct_report(
            HtmlReportBuilder(), style="s", header="h", content="c", footer="f"
        )

        assert report.style == "<style>s</style>"
        assert report.header == "<h1>h</h1>"
        assert report.content == "<p>c</p>"
        assert report.footer == "<footer>f</footer>"

    def test_xml_fields(self):
        report = construct_report(
            XmlReportBuilder(), style="s", header="h", content="c", footer="f"
        )

        assert report.style == "<style>s</style>"
        assert report.header == "<header>h</header>"
        assert report.content == "<content>c</content>"
        assert report.footer == "<footer>f</footer>"

    def test_setter_overwrites_only_its_field(self):
        builder = HtmlReportBuilder()
        construct_report(builder, style="s", header="h", content="c", footer="f")

        builder.set_header("again")
        report = builder.get_report()

        assert report.header == "<h1>again</h1>"
        assert report.content == "<p>c</p>"
        assert report.footer == "<footer>f</footer>"

    def test_builders_do_not_share_reports(self):
        a, b = TextReportBuilder(), TextReportBuilder()
        a.set_header("A")

        assert b.get_report().header == ""
        assert a.get_report() is not b.get_report()


class TestDirector:

    def test_uses_configured_demo_text(self):
        report = construct_report(TextReportBuilder())

        assert report.style == public_module.REPORT_STYLE
        assert report.header == "TEXT HEADER: " + public_module.REPORT_HEADER
        assert report.content == public_module.REPORT_CONTENT
        assert report.footer == "END: " + public_module.REPORT_FOOTER

    def test_call_order(self):
        calls = []

        class Recorder:
            def set_style(self, text):
                calls.append("style")

            def set_header(self, text):
                calls.append("header")

            def set_content(self, text):
                calls.append("content")

            def set_footer(self, text):
                calls.append("footer")

            def get_report(self):
                return Report()

        construct_report(Recorder())

        assert calls == ["style", "header", "content", "footer"]


class TestCreateBuilder:

    @pytest.mark.parametrize("name", ["text", "HTML", " xml "])
    def test_accepts_strings(self, name):
        builder = create_builder(name)
        assert isinstance(builder, BUILDERS[ReportFormat(name.strip().lower())])

    def test_fresh_builder_each_call(self):
        assert create_builder("text") is not create_builder("text")

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown report format"):
            create_builder("pdf")


class TestUpdateContent:

    @pytest.mark.parametrize("fmt", list(ReportFormat))
    def test_only_content_changes(self, fmt):
        report = construct_report(create_builder(fmt))
        before = report.lines()

        report.update_content("Late edit")

        assert report.content == "Late edit"
        assert report.style == before[0]
        assert report.header == before[1]
        assert report.footer == before[3]


class TestShow:

    def test_renders_in_display_order(self):
        report = Report(style="s", header="h", content="c", footer="f")
        out = []

        report.show(out.append)

        assert out == ["s", "h", "c", "f"]

    def test_defaults_to_print(self, capsys):
        Report(style="s", header="h", content="c", footer="f").show()

        assert capsys.readouterr().out.splitlines() == ["s", "h", "c", "f"]
