from __future__ import annotations

from typing import Protocol

from simpleblog.domain.entities import Page, Post


class PostRepository(Protocol):
    """게시물 저장소 인터페이스 (의존성 역전).

    백엔드 접근 실패는 UpstreamUnavailableError로 변환해서 던진다.
    """

    async def add(self, post: Post) -> Post:
        """새 게시물 저장. 저장소가 id를 부여한 게시물 반환."""
        ...

    async def get_by_id(self, post_id: str) -> Post | None: ...

    async def update(self, post: Post) -> Post:
        """기존 게시물 덮어쓰기. 없으면 PostNotFoundError (새로 만들지 않음).

        views, likes는 저장된 값을 유지하고 반영 후 게시물을 반환한다.
        """
        ...

    async def delete(self, post_id: str) -> bool:
        """삭제 여부 반환. 없으면 False."""
        ...

    async def search(
        self,
        query: str | None = None,
        published_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> Page:
        """최신순 목록. query가 비어 있으면 전체 목록과 동일."""
        ...

    async def increment(self, post_id: str, counter: str, amount: int = 1) -> Post | None:
        """metadata 카운터(views, likes) 증가. 없으면 None."""
        ...
