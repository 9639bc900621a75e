"""Tests for pipeline steps and the Compressor."""

import pytest
from bs4 import BeautifulSoup
from htmlcompact import Compressor, compress_html
from htmlcompact.models.config import (
    AttributeConfig,
    CleanupConfig,
    CompressConfig,
    DedupConfig,
    ProfileName,
    TruncationConfig,
)
from htmlcompact.pipeline.base import CompressContext, CompressPipeline, CompressStep
from htmlcompact.pipeline.steps import (
    AttributeStep,
    CleanupStep,
    DedupStep,
    ParseStep,
    SerializeStep,
    StripStep,
    TruncateStep,
    collapse_html_whitespace,
    truncate_text,
    truncate_url,
)


def parsed(html: str) -> CompressContext:
    """Create a context whose source is already parsed."""
    return ParseStep().execute(CompressContext(source=html))


class FailingStep:
    """Step that always raises."""

    name = "boom"

    def execute(self, ctx: CompressContext) -> CompressContext:
        raise ValueError("bad input")


class RecordingStep:
    """Step that records that it ran."""

    name = "recording"

    def __init__(self):
        self.calls = 0

    def execute(self, ctx: CompressContext) -> CompressContext:
        self.calls += 1
        return ctx


def product_list(count: int) -> str:
    items = "".join(
        f'<li class="item css-{index}a2b3c" style="color: red">'
        f"Paragraph number {index} with enough words to exceed the fallback limit</li>"
        for index in range(count)
    )
    return (
        "<html><head><style>.item { color: red; }</style><script>var a = 1;</script></head>"
        f"<body><ul>{items}</ul></body></html>"
    )


class TestCompressContext:
    """Tests for CompressContext dataclass."""

    def test_create_context(self):
        """Test creating a context."""
        ctx = CompressContext(source="<p>Hi</p>")
        assert ctx.soup is None
        assert ctx.output is None
        assert ctx.stats == {}
        assert ctx.error is None

    def test_require_soup_before_parse(self):
        """Test that steps fail clearly when the tree is missing."""
        with pytest.raises(RuntimeError, match="not been parsed"):
            CompressContext(source="").require_soup()

    def test_record_prefixes_step_name(self):
        """Test counter keys are namespaced by step."""
        ctx = CompressContext(source="")
        ctx.record("strip", {"tags_removed": 2})
        assert ctx.stats == {"strip.tags_removed": 2}

    def test_step_protocol(self):
        """Test that steps satisfy the step protocol."""
        assert isinstance(ParseStep(), CompressStep)
        assert isinstance(FailingStep(), CompressStep)


class TestParseStep:
    """Tests for ParseStep."""

    def test_parses_source(self):
        """Test that the source becomes a tree."""
        ctx = parsed("<p>Hi</p>")
        assert isinstance(ctx.soup, BeautifulSoup)
        assert ctx.soup.p.get_text() == "Hi"
        assert ctx.stats["parse.characters"] == 9


class TestStripStep:
    """Tests for StripStep."""

    def test_removes_scripts_styles_and_comments(self):
        """Test removal of non-content tags and comments."""
        ctx = parsed("<div><script>x()</script><style>p {}</style><p>Hi</p><!-- note --></div>")

        ctx = StripStep().execute(ctx)

        assert str(ctx.soup) == "<div><p>Hi</p></div>"
        assert ctx.stats["strip.tags_removed"] == 2
        assert ctx.stats["strip.comments_removed"] == 1

    def test_nested_matches_counted_once(self):
        """Test that tags inside a removed tag are not removed twice."""
        ctx = parsed("<div><template><p>x</p><script>y()</script></template></div>")

        ctx = StripStep().execute(ctx)

        assert str(ctx.soup) == "<div></div>"
        assert ctx.stats["strip.tags_removed"] == 1


class TestAttributeStep:
    """Tests for AttributeStep."""

    def test_filters_attributes_and_generated_identifiers(self):
        """Test allow-listed attributes survive and generated tokens do not."""
        ctx = parsed(
            '<div class="card css-1a2b3c" id="ember123" style="color: red" data-testid="x" '
            'data-foo="y" onclick="f()"><a href="/a" id="main-nav">x</a></div>'
        )

        ctx = AttributeStep().execute(ctx)

        div = ctx.soup.div
        assert div.attrs == {"class": ["card"], "data-testid": "x"}
        assert ctx.soup.a.attrs == {"href": "/a", "id": "main-nav"}
        assert ctx.stats["attributes.attributes_removed"] == 3
        assert ctx.stats["attributes.classes_removed"] == 1
        assert ctx.stats["attributes.ids_removed"] == 1

    def test_drops_empty_class_attribute(self):
        """Test that a fully generated class attribute is removed."""
        ctx = parsed('<p class="css-1a2b3c ember42">x</p>')

        ctx = AttributeStep().execute(ctx)

        assert str(ctx.soup) == "<p>x</p>"

    def test_keep_generated(self):
        """Test that generated identifiers can be kept."""
        ctx = parsed('<p class="css-1a2b3c" id="ember42">x</p>')

        ctx = AttributeStep(AttributeConfig(drop_generated_identifiers=False)).execute(ctx)

        assert ctx.soup.p["class"] == ["css-1a2b3c"]
        assert ctx.soup.p["id"] == "ember42"


class TestTruncation:
    """Tests for truncate_url and truncate_text."""

    def test_short_url_unchanged(self):
        """Test that short URLs are kept."""
        assert truncate_url("/about", 40) == "/about"

    def test_long_url(self):
        """Test that long URLs are cut to the limit."""
        url = "https://example.com/" + "a" * 100
        shortened = truncate_url(url, 40)
        assert len(shortened) == 40
        assert shortened.startswith("https://example.com/")
        assert shortened.endswith("…")

    def test_data_uri(self):
        """Test that data URIs are reduced to their media type."""
        assert truncate_url("data:image/png;base64,iVBORw0KGgo=", 80) == "data:image/png…"

    def test_text_cut_on_word_boundary(self):
        """Test that text is cut at the last space when one is near the end."""
        text = "word " * 20
        assert truncate_text(text, 30) == "word word word word word…"

    def test_text_without_spaces(self):
        """Test a hard cut when no boundary is available."""
        assert truncate_text("x" * 50, 20) == "x" * 19 + "…"

    def test_short_text_unchanged(self):
        """Test that short text is kept."""
        assert truncate_text("short", 20) == "short"


class TestTruncateStep:
    """Tests for TruncateStep."""

    def test_truncates_urls_and_text(self):
        """Test that long attribute values and text nodes are shortened."""
        ctx = parsed(
            '<div><a href="https://example.com/a/very/long/path/to/a/page">link</a>'
            "<p>lorem ipsum dolor sit amet consectetur adipiscing</p><!-- a long comment that stays --></div>"
        )

        ctx = TruncateStep(TruncationConfig(max_url_length=20, max_text_length=20)).execute(ctx)

        assert len(ctx.soup.a["href"]) == 20
        assert ctx.soup.p.get_text().endswith("…")
        assert len(ctx.soup.p.get_text()) <= 20
        assert "a long comment that stays" in str(ctx.soup)
        assert ctx.stats["truncate.urls_truncated"] == 1
        assert ctx.stats["truncate.texts_truncated"] == 1

    def test_disabled_limits(self):
        """Test that None disables truncation."""
        html = f'<a href="https://example.com/{"a" * 200}">{"b " * 300}</a>'
        ctx = parsed(html)

        ctx = TruncateStep(TruncationConfig(max_url_length=None, max_text_length=None)).execute(ctx)

        assert str(ctx.soup) == html
        assert ctx.stats["truncate.urls_truncated"] == 0


class TestCleanupStep:
    """Tests for CleanupStep."""

    def test_removes_nested_empty_elements(self):
        """Test that parents emptied by a pass are removed by the next one."""
        ctx = parsed('<div><div><span></span></div><p>Text</p><img src="a.png"/></div>')

        ctx = CleanupStep().execute(ctx)

        assert str(ctx.soup) == '<div><p>Text</p><img src="a.png"/></div>'
        assert ctx.stats["cleanup.elements_removed"] == 2
        assert ctx.stats["cleanup.passes"] == 2

    def test_pass_cap(self):
        """Test that cleanup stops after max_passes."""
        ctx = parsed("<section><div><span></span></div><p>Text</p></section>")

        ctx = CleanupStep(CleanupConfig(max_passes=1)).execute(ctx)

        assert "<div></div>" in str(ctx.soup)
        assert ctx.stats["cleanup.passes"] == 1

    def test_whitespace_only_is_empty(self):
        """Test that whitespace-only elements count as empty."""
        step = CleanupStep()
        soup = BeautifulSoup("<p>   </p><td></td>", "html.parser")
        assert step.is_empty(soup.p) is True
        assert step.is_empty(soup.td) is False

    def test_disabled(self):
        """Test that cleanup can be turned off."""
        ctx = parsed("<div><span></span></div>")

        ctx = CleanupStep(CleanupConfig(remove_empty=False)).execute(ctx)

        assert str(ctx.soup) == "<div><span></span></div>"


class TestSerializeStep:
    """Tests for SerializeStep and whitespace collapsing."""

    def test_collapse_whitespace(self):
        """Test empty lines and whitespace runs are collapsed."""
        assert collapse_html_whitespace("  <p>\n\n  Hi   there </p>\n") == "<p> Hi there </p>"

    def test_serializes_tree(self):
        """Test the output text is produced."""
        ctx = parsed("<div>\n  <p>Hi</p>\n</div>\n")

        ctx = SerializeStep().execute(ctx)

        assert ctx.output == "<div> <p>Hi</p> </div>"
        assert ctx.stats["serialize.characters"] == len(ctx.output)


class TestDedupStep:
    """Tests for DedupStep."""

    def test_records_report(self):
        """Test that the dedup report is recorded in the stats."""
        ctx = parsed("<ul>" + "<li></li>" * 4 + "</ul>")

        ctx = DedupStep(DedupConfig()).execute(ctx)

        assert len(ctx.soup.find_all("li")) == 1
        assert ctx.stats["dedup.elements_removed"] == 3
        assert ctx.stats["dedup.markers_inserted"] == 1


class TestCompressPipeline:
    """Tests for CompressPipeline."""

    def test_runs_steps_in_order(self):
        """Test that a pipeline produces output."""
        pipeline = CompressPipeline(steps=[ParseStep(), SerializeStep()])
        ctx = pipeline.execute("<p>Hi</p>")
        assert ctx.output == "<p>Hi</p>"
        assert ctx.error is None

    def test_error_stops_pipeline(self):
        """Test that a failing step sets the error and stops processing."""
        after = RecordingStep()
        pipeline = CompressPipeline(steps=[ParseStep(), FailingStep(), after])

        ctx = pipeline.execute("<p>Hi</p>")

        assert ctx.error == "boom: bad input"
        assert after.calls == 0

    def test_add_step_is_fluent(self):
        """Test that add_step returns the pipeline."""
        pipeline = CompressPipeline(steps=[])
        assert pipeline.add_step(ParseStep()) is pipeline
        assert len(pipeline.steps) == 1


class TestCompressor:
    """Tests for the Compressor."""

    def test_end_to_end(self):
        """Test stripping, identifier filtering and deduplication together."""
        html = product_list(5)

        result = Compressor().compress(html)

        assert "<!-- 5× item collapsed -->" in result.html
        assert result.html.count("<li") == 1
        assert "css-" not in result.html
        assert "<script" not in result.html
        assert "style=" not in result.html
        assert result.stats["dedup.elements_removed"] == 4
        assert result.original_length == len(html)
        assert result.compressed_length == len(result.html)
        assert result.reduction_percent > 50

    def test_keeps_badge_variants(self):
        """Test that one product per distinct badge survives."""
        cards = "".join(
            '<div class="product"><h3>A product title long enough to skip the fallback</h3>'
            f'<a href="/p" title="{badge}">Details</a></div>'
            for badge in ["New", "", "New", "Sale", "", "New"]
        )

        result = compress_html(f"<main>{cards}</main>")

        assert result.html.count('class="product"') == 3
        assert '6× product collapsed (badges: "New" ×3, "Sale" ×1)' in result.html

    def test_empty_members_removed_before_grouping(self):
        """Test that a group of empty elements leaves no marker behind."""
        html = "<ul>" + '<li class="sep"></li>' * 5 + "<li>a</li></ul>"

        result = compress_html(html)

        assert result.html == "<ul><li>a</li></ul>"
        assert result.stats["cleanup.elements_removed"] == 5
        assert result.stats["dedup.markers_inserted"] == 0

    def test_marker_always_precedes_retained_member(self):
        """Test that every marker in the output is followed by a retained element."""
        items = '<li class="row"><span class="icon"></span>Entry</li>' * 4
        empties = '<li class="row"><span class="icon"></span></li>' * 4

        result = compress_html(f"<ul>{items}{empties}</ul>")

        assert result.html == "<ul><!-- 4× row collapsed --><li class=\"row\">Entry</li></ul>"

    def test_nested_repeats_collapse_in_one_pass(self):
        """Test that cards made identical by collapsing their lists are collapsed too."""
        cards = "".join(f'<div class="card"><ul>{"<li>x</li>" * count}</ul></div>' for count in (3, 4, 5))

        result = compress_html(f"<section>{cards}</section>")

        assert result.html.count('class="card"') == 1
        assert "3× card collapsed" in result.html
        assert result.stats["dedup.elements_removed"] == 11

    def test_minimal_profile(self):
        """Test that the minimal profile keeps repeated items and classes."""
        result = compress_html(product_list(5), CompressConfig(profile=ProfileName.MINIMAL))

        assert result.html.count("<li") == 5
        assert "css-0a2b3c" in result.html
        assert "<script" not in result.html

    def test_aggressive_profile(self):
        """Test that the aggressive profile collapses pairs."""
        result = compress_html(product_list(2), CompressConfig(profile=ProfileName.AGGRESSIVE))

        assert result.html.count("<li") == 1
        assert "2× item collapsed" in result.html

    def test_dedup_disabled(self):
        """Test that deduplication can be turned off on its own."""
        config = CompressConfig(dedup=DedupConfig(enabled=False))

        result = compress_html(product_list(5), config)

        assert result.html.count("<li") == 5
        assert "css-" not in result.html

    def test_failure_raises(self):
        """Test that a failing step surfaces as RuntimeError."""
        compressor = Compressor()
        compressor.pipeline.add_step(FailingStep())

        with pytest.raises(RuntimeError, match="boom"):
            compressor.compress("<p>Hi</p>")

    def test_empty_document(self):
        """Test compressing an empty string."""
        result = compress_html("")
        assert result.html == ""
        assert result.reduction_percent == 0.0

    def test_compress_file(self, tmp_path):
        """Test compressing a file from disk."""
        path = tmp_path / "page.html"
        path.write_text("<div>\n\n  <p>Hello</p>\n</div>", encoding="utf-8")

        result = Compressor().compress_file(path)

        assert result.html == "<div> <p>Hello</p> </div>"
