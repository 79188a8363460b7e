"""태그 클라우드 HTML 렌더러.

단어마다 ``f<폰트 크기>`` 클래스와 출현 횟수 title을 가진 span을 하나씩 출력한다.
폰트 크기별 스타일은 tagcloud.css 가 정의한다.
"""

from __future__ import annotations

from html import escape
from typing import Iterable

from tag_cloud.cloud.font_size import CloudEntry
from tag_cloud.constants import LOCAL_STYLESHEET, REMOTE_STYLESHEET_URL


def render_span(entry: CloudEntry) -> str:
    """단어 하나의 span 태그를 생성한다."""
    return (
        f'<span style="cursor:default" class="f{entry.font_size}" '
        f'title="count: {entry.count}">{escape(entry.word)}</span>'
    )


def render_header(source_name: str, num_words: int) -> list[str]:
    """제목, 스타일시트 링크, 본문 컨테이너 시작 태그를 생성한다."""
    heading = escape(f"Top {num_words} words in {source_name}")
    return [
        "<html>",
        "<head>",
        f"<title>{heading}</title>",
        f'<link href="{REMOTE_STYLESHEET_URL}" rel="stylesheet" type="text/css">',
        f'<link href="{LOCAL_STYLESHEET}" rel="stylesheet" type="text/css">',
        "</head>",
        "<body>",
        f"<h2>{heading}</h2>",
        "<hr>",
        '<div class="cdiv">',
        '<p class="cbox">',
    ]


def render_html(entries: Iterable[CloudEntry], source_name: str, num_words: int) -> str:
    """태그 클라우드 HTML 문서를 생성한다.

    Args:
        entries: 출력 순서대로 정렬된 항목
        source_name: 입력 파일 이름 (제목에 표시)
        num_words: 요청한 단어 수 (제목에 표시)

    Returns:
        HTML 문서 문자열
    """
    lines = render_header(source_name, num_words)
    lines.extend(render_span(entry) for entry in entries)
    lines.extend(["</p>", "</div>", "</body>", "</html>"])
    return "\n".join(lines) + "\n"
