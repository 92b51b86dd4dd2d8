"""유즈케이스: 게시물 작성.

입력을 검증한 뒤 파생 필드(요약, 읽기 시간)를 채워 저장한다.
"""

from __future__ import annotations

import logging

from simpleblog.domain.entities import Author, Post, PostDraft, PostMetadata
from simpleblog.domain.entities.post import utcnow
from simpleblog.domain.repositories.post_repository import PostRepository
from simpleblog.domain.validation import validate_draft
from simpleblog.domain.value_objects.excerpt import derive_excerpt, estimate_read_time

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    def __init__(self, post_repo: PostRepository, default_author: Author):
        self._post_repo = post_repo
        self._default_author = default_author

    async def execute(self, draft: PostDraft) -> Post:
        clean = validate_draft(draft)
        now = utcnow()

        post = Post(
            title=clean.title,
            content=clean.content,
            excerpt=clean.excerpt or derive_excerpt(clean.content),
            author=clean.author or Author(
                name=self._default_author.name, avatar=self._default_author.avatar
            ),
            tags=clean.tags,
            published=clean.published,
            created_at=now,
            updated_at=now,
            published_at=now if clean.published else None,
            metadata=PostMetadata(read_time=estimate_read_time(clean.content)),
        )
        post = await self._post_repo.add(post)

        state = "발행" if post.published else "초안"
        logger.info(f"게시물 작성: {post.id} ({state}) '{post.title}'")
        return post
