"""유즈케이스: 조회수/좋아요 카운터."""

from __future__ import annotations

from simpleblog.domain.entities import Post
from simpleblog.domain.exceptions import PostNotFoundError
from simpleblog.domain.repositories.post_repository import PostRepository


class _IncrementCounterUseCase:
    counter = ""

    def __init__(self, post_repo: PostRepository):
        self._post_repo = post_repo

    async def execute(self, post_id: str) -> Post:
        post = await self._post_repo.increment(post_id, self.counter)
        if post is None:
            raise PostNotFoundError(post_id)
        return post


class RecordViewUseCase(_IncrementCounterUseCase):
    """상세 페이지 조회 시 조회수 +1 후 최신 게시물 반환."""

    counter = "views"


class LikePostUseCase(_IncrementCounterUseCase):
    counter = "likes"
