"""태그 클라우드 출력 렌더러."""

from .html import render_html, render_span

__all__ = ["render_html", "render_span"]
