"""PostRepository: Firebase Firestore 구현.

Firestore 컬렉션: 'posts'
문서 ID: Firestore 자동 생성 ID
author, metadata는 문서 내 map 필드로 임베드.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, TypeVar

from firebase_admin import firestore
from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions

from simpleblog.domain.entities import Author, Page, Post, PostMetadata
from simpleblog.domain.exceptions import PostNotFoundError, UpstreamUnavailableError
from simpleblog.domain.services.post_search import paginate

logger = logging.getLogger(__name__)

T = TypeVar("T")

COUNTERS = ("views", "likes")

# ─── 도메인 엔티티 ↔ Firestore 문서 변환 ───


def _post_to_dict(post: Post) -> dict[str, Any]:
    return {
        "title": post.title,
        "content": post.content,
        "excerpt": post.excerpt,
        "author": {"name": post.author.name, "avatar": post.author.avatar},
        "tags": post.tags,
        "published": post.published,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "published_at": post.published_at,
        # 정렬용 (발행일, 초안은 생성일)
        "sort_at": post.sort_at,
        "metadata": {
            "read_time": post.metadata.read_time,
            "views": post.metadata.views,
            "likes": post.metadata.likes,
        },
    }


def _editable_fields(post: Post) -> dict[str, Any]:
    """수정 시 쓰는 필드. 카운터(views, likes)는 increment 전용이라 제외한다."""
    return {
        "title": post.title,
        "content": post.content,
        "excerpt": post.excerpt,
        "author": {"name": post.author.name, "avatar": post.author.avatar},
        "tags": post.tags,
        "published": post.published,
        "updated_at": post.updated_at,
        "published_at": post.published_at,
        "sort_at": post.sort_at,
        "metadata.read_time": post.metadata.read_time,
    }


def _post_from_doc(doc) -> Post:
    d = doc.to_dict()
    author = d.get("author") or {}
    meta = d.get("metadata") or {}
    return Post(
        id=doc.id,
        title=d.get("title", ""),
        content=d.get("content", ""),
        excerpt=d.get("excerpt", ""),
        author=Author(name=author.get("name", ""), avatar=author.get("avatar")),
        tags=d.get("tags", []),
        published=d.get("published", False),
        created_at=d.get("created_at"),
        updated_at=d.get("updated_at"),
        published_at=d.get("published_at"),
        metadata=PostMetadata(
            read_time=meta.get("read_time", 1),
            views=meta.get("views", 0),
            likes=meta.get("likes", 0),
        ),
    )


class FirestorePostRepository:
    """Firestore 기반 PostRepository 구현."""

    COLLECTION = "posts"

    def __init__(self, db):
        self._db = db

    def _col(self):
        return self._db.collection(self.COLLECTION)

    async def _run(self, fn: Callable[[], T]) -> T:
        """블로킹 Firestore 호출을 스레드에서 실행하고 오류를 도메인 예외로 변환."""
        try:
            return await asyncio.to_thread(fn)
        except google_exceptions.NotFound:
            raise
        except (google_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
            logger.error(f"Firestore 호출 실패: {e}")
            raise UpstreamUnavailableError(str(e)) from e

    async def add(self, post: Post) -> Post:
        def _add():
            doc_ref = self._col().document()
            doc_ref.set(_post_to_dict(post))
            post.id = doc_ref.id
            return post

        return await self._run(_add)

    async def get_by_id(self, post_id: str) -> Post | None:
        def _get():
            doc = self._col().document(post_id).get()
            return _post_from_doc(doc) if doc.exists else None

        return await self._run(_get)

    async def update(self, post: Post) -> Post:
        def _update():
            # update()는 문서가 없으면 NotFound: 새 문서를 만들지 않는다
            doc_ref = self._col().document(post.id)
            doc_ref.update(_editable_fields(post))
            return _post_from_doc(doc_ref.get())

        try:
            return await self._run(_update)
        except google_exceptions.NotFound as e:
            raise PostNotFoundError(post.id) from e

    async def delete(self, post_id: str) -> bool:
        def _delete():
            doc_ref = self._col().document(post_id)
            if not doc_ref.get().exists:
                return False
            doc_ref.delete()
            return True

        return await self._run(_delete)

    async def search(
        self,
        query: str | None = None,
        published_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> Page:
        def _search():
            q = self._col().order_by("sort_at", direction="DESCENDING")
            # Firestore는 부분 문자열 검색이 없으므로 클라이언트에서 필터링
            posts = [_post_from_doc(d) for d in q.stream()]
            return paginate(
                posts,
                query=query,
                published_only=published_only,
                limit=limit,
                offset=offset,
            )

        return await self._run(_search)

    async def increment(self, post_id: str, counter: str, amount: int = 1) -> Post | None:
        if counter not in COUNTERS:
            raise ValueError(f"알 수 없는 카운터: {counter}")

        def _increment():
            doc_ref = self._col().document(post_id)
            doc_ref.update({f"metadata.{counter}": firestore.Increment(amount)})
            return _post_from_doc(doc_ref.get())

        try:
            return await self._run(_increment)
        except google_exceptions.NotFound:
            return None
