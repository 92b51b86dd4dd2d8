from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Author:
    """게시물에 임베드되는 작성자 값 (독립 엔티티 아님)."""

    name: str
    avatar: Optional[str] = None


@dataclass
class PostMetadata:
    read_time: int = 1  # 분 단위
    views: int = 0
    likes: int = 0


@dataclass
class Post:
    """블로그 게시물 도메인 엔티티."""

    title: str
    content: str
    excerpt: str
    author: Author

    id: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    published: bool = False

    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    published_at: Optional[datetime] = None

    metadata: PostMetadata = field(default_factory=PostMetadata)

    @property
    def sort_at(self) -> datetime:
        """목록 정렬 기준 시각. 초안은 생성 시각으로 대체."""
        return self.published_at or self.created_at

    @property
    def was_edited(self) -> bool:
        reference = self.published_at or self.created_at
        return self.updated_at > reference
