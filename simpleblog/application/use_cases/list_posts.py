"""유즈케이스: 게시물 목록 및 검색.

빈 검색어는 전체 목록과 같은 결과를 낸다.
"""

from __future__ import annotations

import logging

from simpleblog.domain.entities import Page
from simpleblog.domain.repositories.post_repository import PostRepository
from simpleblog.domain.services.post_search import normalize_query

logger = logging.getLogger(__name__)


class ListPostsUseCase:
    def __init__(self, post_repo: PostRepository, max_limit: int = 100):
        self._post_repo = post_repo
        self._max_limit = max_limit

    async def execute(
        self,
        query: str | None = None,
        limit: int = 20,
        offset: int = 0,
        published_only: bool = False,
    ) -> Page:
        limit = max(1, min(limit, self._max_limit))
        offset = max(0, offset)
        needle = (query or "").strip() or None

        page = await self._post_repo.search(
            query=needle, published_only=published_only, limit=limit, offset=offset
        )
        if needle:
            logger.debug(f"검색 '{normalize_query(needle)}': {page.total}건")
        return page
