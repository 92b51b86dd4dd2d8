"""Jinja2 템플릿 필터."""

from __future__ import annotations

from datetime import datetime

import bleach

ALLOWED_TAGS = {
    "a", "abbr", "b", "blockquote", "br", "code", "em", "h1", "h2", "h3", "h4",
    "h5", "h6", "hr", "i", "img", "li", "ol", "p", "pre", "s", "span", "strong",
    "sub", "sup", "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
}
ALLOWED_ATTRS = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "span": ["class"],
}
ALLOWED_PROTOCOLS = ["http", "https", "mailto"]


def sanitize_html(content: str) -> str:
    """게시물 본문 HTML에서 허용 태그/속성만 남긴다."""
    html = bleach.clean(
        content or "",
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRS,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )

    # 외부 링크는 새 탭 + rel
    def set_target(attrs, new=False):
        href = attrs.get((None, "href"), "")
        if href.startswith(("http://", "https://")):
            attrs[(None, "target")] = "_blank"
            attrs[(None, "rel")] = "noopener nofollow ugc"
        return attrs

    return bleach.linkify(html, callbacks=[set_target])


def format_date(value: datetime | None) -> str:
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"
