from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from simpleblog.domain.entities.post import Author


@dataclass
class PostDraft:
    """작성 폼/API 입력. 검증 전 원본 값을 그대로 담는다."""

    title: str
    content: str
    excerpt: Optional[str] = None
    tags: list[str] = field(default_factory=list)
    published: bool = False
    author: Optional[Author] = None


@dataclass
class PostPatch:
    """수정 입력. None인 필드는 변경하지 않음.

    excerpt를 빈 문자열로 보내면 본문에서 다시 파생한다.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[list[str]] = None
    published: Optional[bool] = None
    author: Optional[Author] = None

    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.title,
                self.content,
                self.excerpt,
                self.tags,
                self.published,
                self.author,
            )
        )
