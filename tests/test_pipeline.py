from __future__ import annotations

from tag_cloud.cloud.font_size import CloudEntry
from tag_cloud.cloud.pipeline import build_cloud
from tag_cloud.cloud.tokenizer import build_separator_set
from tag_cloud.constants import DEFAULT_SEPARATORS
from tag_cloud.render.html import render_html, render_span

SEPARATORS = build_separator_set(" .,")


def test_build_cloud_end_to_end() -> None:
    result = build_cloud(["the cat sat on the mat. the cat ran."], SEPARATORS, 3)

    assert result.total_words == 9
    assert result.unique_words == 6
    assert result.entries == [
        CloudEntry("cat", 2, 29),
        CloudEntry("mat", 1, 0),
        CloudEntry("the", 3, 48),
    ]


def test_build_cloud_empty_input() -> None:
    result = build_cloud([], SEPARATORS, 10)
    assert result.entries == []
    assert result.total_words == 0


def test_build_cloud_words_are_lowercase() -> None:
    result = build_cloud(["Hello WORLD", "hello World!"], build_separator_set(DEFAULT_SEPARATORS), 5)
    assert [entry.word for entry in result.entries] == ["hello", "world"]


def test_render_span() -> None:
    span = render_span(CloudEntry("cat", 2, 29))
    assert span == '<span style="cursor:default" class="f29" title="count: 2">cat</span>'


def test_render_span_escapes_word() -> None:
    assert ">a&amp;b</span>" in render_span(CloudEntry("a&b", 1, 0))


def test_render_html_document() -> None:
    entries = [CloudEntry("cat", 2, 29), CloudEntry("mat", 1, 0), CloudEntry("the", 3, 48)]
    html = render_html(entries, "sample.txt", 3)

    assert html.startswith("<html>\n<head>\n<title>Top 3 words in sample.txt</title>\n")
    assert "<h2>Top 3 words in sample.txt</h2>" in html
    assert 'rel="stylesheet" type="text/css"' in html
    assert '<p class="cbox">' in html
    assert html.endswith("</p>\n</div>\n</body>\n</html>\n")
    assert html.count("<span ") == 3
    assert html.index(">cat<") < html.index(">mat<") < html.index(">the<")
    assert 'class="f48" title="count: 3">the</span>' in html


def test_render_html_without_entries() -> None:
    html = render_html([], "empty.txt", 10)
    assert "<span" not in html
    assert "<title>Top 10 words in empty.txt</title>" in html
