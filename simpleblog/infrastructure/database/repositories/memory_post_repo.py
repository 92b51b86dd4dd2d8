"""PostRepository: 인메모리 구현.

개발 모드와 테스트용. 프로세스 종료 시 데이터는 사라진다.
저장/반환 시 복사본을 사용해 호출자가 저장소 상태를 직접 바꾸지 못하게 한다.
"""

from __future__ import annotations

import asyncio
import copy
import uuid

from simpleblog.domain.entities import Page, Post
from simpleblog.domain.exceptions import PostNotFoundError
from simpleblog.domain.services.post_search import paginate

COUNTERS = ("views", "likes")


class MemoryPostRepository:
    def __init__(self):
        self._posts: dict[str, Post] = {}
        self._lock = asyncio.Lock()

    async def add(self, post: Post) -> Post:
        async with self._lock:
            post.id = uuid.uuid4().hex
            self._posts[post.id] = copy.deepcopy(post)
            return post

    async def get_by_id(self, post_id: str) -> Post | None:
        async with self._lock:
            post = self._posts.get(post_id)
            return copy.deepcopy(post) if post else None

    async def update(self, post: Post) -> Post:
        async with self._lock:
            if post.id not in self._posts:
                raise PostNotFoundError(post.id)
            stored = copy.deepcopy(post)
            # 카운터는 increment로만 바뀐다
            current = self._posts[post.id].metadata
            stored.metadata.views = current.views
            stored.metadata.likes = current.likes
            self._posts[post.id] = stored
            return copy.deepcopy(stored)

    async def delete(self, post_id: str) -> bool:
        async with self._lock:
            return self._posts.pop(post_id, None) is not None

    async def search(
        self,
        query: str | None = None,
        published_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> Page:
        async with self._lock:
            snapshot = [copy.deepcopy(p) for p in self._posts.values()]
        return paginate(
            snapshot,
            query=query,
            published_only=published_only,
            limit=limit,
            offset=offset,
        )

    async def increment(self, post_id: str, counter: str, amount: int = 1) -> Post | None:
        if counter not in COUNTERS:
            raise ValueError(f"알 수 없는 카운터: {counter}")
        async with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None
            setattr(post.metadata, counter, getattr(post.metadata, counter) + amount)
            return copy.deepcopy(post)
