from __future__ import annotations

from simpleblog.domain.entities import Post
from simpleblog.domain.exceptions import PostNotFoundError
from simpleblog.domain.repositories.post_repository import PostRepository


class GetPostUseCase:
    def __init__(self, post_repo: PostRepository):
        self._post_repo = post_repo

    async def execute(self, post_id: str) -> Post:
        post = await self._post_repo.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
