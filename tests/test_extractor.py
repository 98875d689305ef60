"""
Test field extraction from Lighthouse reports
"""
import pytest

from app.services.extractor import (
    NO_H1,
    NO_META,
    NO_TITLE,
    LighthouseReport,
    extract,
    heading_text,
    scale_score,
)


class TestExtract:
    def test_empty_items_yield_sentinels_and_zero_scores(self, lighthouse_result):
        """Audits with empty items arrays never raise"""
        fields = extract(lighthouse_result())

        assert fields.title == NO_TITLE
        assert fields.meta == NO_META
        assert fields.h1 == NO_H1
        assert fields.performance_score == 0
        assert fields.seo_score == 0

    def test_full_report(self, lighthouse_result):
        report = lighthouse_result(
            title="Example Domain",
            description="An example page",
            snippet="<h1>Example</h1>",
            performance=0.87,
            seo=1.0,
        )

        fields = extract(report)

        assert fields.title == "Example Domain"
        assert fields.meta == "An example page"
        assert fields.h1 == "Example"
        assert fields.performance_score == 87
        assert fields.seo_score == 100

    def test_missing_meta_only(self, lighthouse_result):
        fields = extract(lighthouse_result(title="Example Domain", snippet="<h1>Example</h1>"))

        assert fields.title == "Example Domain"
        assert fields.meta == NO_META

    @pytest.mark.parametrize("report", [None, {}, [], "not a report", {"audits": None, "categories": "x"}])
    def test_malformed_reports_do_not_raise(self, report):
        fields = extract(report)

        assert fields.title == NO_TITLE
        assert fields.performance_score == 0

    def test_unexpected_item_shapes(self):
        report = {
            "audits": {
                "document-title": {"details": {"items": ["not a dict"]}},
                "meta-description": {"details": {"items": [{"description": 42}]}},
                "heading-order": {"details": {"items": [{"node": "snippet"}]}},
            },
            "categories": {"performance": {"score": "0.9"}, "seo": {"score": True}},
        }

        fields = extract(report)

        assert fields.title == NO_TITLE
        assert fields.meta == NO_META
        assert fields.h1 == NO_H1
        assert fields.performance_score == 0
        assert fields.seo_score == 0

    def test_blank_title_uses_sentinel(self, lighthouse_result):
        assert extract(lighthouse_result(title="   ")).title == NO_TITLE

    def test_accepts_parsed_report(self):
        report = LighthouseReport(title="Parsed", performance_score=0.5)

        fields = extract(report)

        assert fields.title == "Parsed"
        assert fields.performance_score == 50
        assert fields.seo_score == 0


class TestScaleScore:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (0.0, 0),
            (1.0, 100),
            (0.905, 91),
            (0.87, 87),
            (0.5, 50),
            (0.004, 0),
            (0.005, 1),
            (1, 100),
            (0, 0),
        ],
    )
    def test_scaling_rounds_half_up(self, raw, expected):
        assert scale_score(raw) == expected

    def test_absent_score_is_zero(self):
        assert scale_score(None) == 0

    @pytest.mark.parametrize("raw,expected", [(-0.2, 0), (1.7, 100), (float("nan"), 0)])
    def test_out_of_range_is_clamped(self, raw, expected):
        assert scale_score(raw) == expected

    def test_monotonic(self):
        values = [scale_score(i / 1000) for i in range(1001)]

        assert values == sorted(values)
        assert values[0] == 0
        assert values[-1] == 100


class TestHeadingText:
    def test_attributes_are_skipped(self):
        assert heading_text('<h1 class="x">Welcome Home</h1>') == "Welcome Home"

    def test_whitespace_is_trimmed(self):
        assert heading_text("<h1>\n   Spaced  Out \n</h1>") == "Spaced  Out"

    def test_nested_markup_is_not_parsed(self):
        """Text nested in a child element is not recovered"""
        assert heading_text("<h1><span>Text</span></h1>") is None

    def test_nested_markup_falls_back_to_sentinel(self, lighthouse_result):
        fields = extract(lighthouse_result(snippet="<h1><span>Text</span></h1>"))

        assert fields.h1 == NO_H1

    @pytest.mark.parametrize("snippet", [None, "", "plain text", "<h1>"])
    def test_no_text(self, snippet):
        assert heading_text(snippet) is None
