"""게시물 목록/검색 공통 로직.

저장소 구현과 무관하게 같은 필터링, 정렬, 페이지 분할 규칙을 적용한다.
검색은 제목/요약/본문(태그 제외 평문)에 대한 대소문자 무시 포함 여부만 본다.
"""

from __future__ import annotations

from typing import Iterable, Optional

from simpleblog.domain.entities import Page, Post
from simpleblog.domain.value_objects.excerpt import plain_text


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


def matches(post: Post, query: str) -> bool:
    """query는 normalize_query를 거친 값. 빈 query는 항상 일치."""
    if not query:
        return True
    return (
        query in (post.title or "").lower()
        or query in (post.excerpt or "").lower()
        or query in plain_text(post.content).lower()
    )


def paginate(
    posts: Iterable[Post],
    query: Optional[str] = None,
    published_only: bool = False,
    limit: int = 20,
    offset: int = 0,
) -> Page:
    needle = normalize_query(query)
    selected = [
        p for p in posts
        if (p.published or not published_only) and matches(p, needle)
    ]
    # 최신순 (발행일, 초안은 생성일)
    selected.sort(key=lambda p: p.sort_at, reverse=True)
    return Page(
        items=selected[offset : offset + limit],
        total=len(selected),
        limit=limit,
        offset=offset,
    )
