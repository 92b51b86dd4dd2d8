"""유즈케이스: 게시물 수정.

패치 필드를 병합한 뒤 병합 결과 전체를 다시 검증한다.
대상이 없으면 PostNotFoundError이며 새 게시물을 만들지 않는다.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from simpleblog.domain.entities import Post, PostDraft, PostPatch
from simpleblog.domain.entities.post import utcnow
from simpleblog.domain.exceptions import PostNotFoundError
from simpleblog.domain.repositories.post_repository import PostRepository
from simpleblog.domain.validation import validate_draft
from simpleblog.domain.value_objects.excerpt import derive_excerpt, estimate_read_time

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    def __init__(self, post_repo: PostRepository):
        self._post_repo = post_repo

    async def execute(self, post_id: str, patch: PostPatch) -> Post:
        post = await self._post_repo.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)

        merged = PostDraft(
            title=post.title if patch.title is None else patch.title,
            content=post.content if patch.content is None else patch.content,
            excerpt=post.excerpt if patch.excerpt is None else patch.excerpt,
            tags=post.tags if patch.tags is None else patch.tags,
            published=post.published if patch.published is None else patch.published,
            author=post.author if patch.author is None else patch.author,
        )
        clean = validate_draft(merged)
        now = utcnow()

        updated = replace(
            post,
            title=clean.title,
            content=clean.content,
            excerpt=clean.excerpt or derive_excerpt(clean.content),
            tags=clean.tags,
            published=clean.published,
            author=clean.author or post.author,
            updated_at=now,
            metadata=replace(post.metadata, read_time=estimate_read_time(clean.content)),
        )
        # 최초 발행 시각만 기록
        if updated.published and updated.published_at is None:
            updated.published_at = now

        updated = await self._post_repo.update(updated)
        logger.info(f"게시물 수정: {post_id}")
        return updated


class DeletePostUseCase:
    def __init__(self, post_repo: PostRepository):
        self._post_repo = post_repo

    async def execute(self, post_id: str) -> None:
        if not await self._post_repo.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info(f"게시물 삭제: {post_id}")
