"""게시물 입력 필드별 검증 함수.

각 함수는 정규화된 값을 반환하고, 규칙 위반 시 ValidationError를 던진다.
"""

from __future__ import annotations

from typing import Iterable, Optional

from simpleblog.domain.entities import Author, PostDraft
from simpleblog.domain.exceptions import ValidationError

TITLE_MAX_LENGTH = 200
EXCERPT_MAX_LENGTH = 500
TAG_MAX_LENGTH = 30
MAX_TAGS = 20
AUTHOR_NAME_MAX_LENGTH = 100


def validate_title(title: Optional[str]) -> str:
    value = (title or "").strip()
    if not value:
        raise ValidationError("Title is required", field="title")
    if len(value) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters", field="title"
        )
    return value


def validate_content(content: Optional[str]) -> str:
    value = (content or "").strip()
    if not value:
        raise ValidationError("Content is required", field="content")
    return value


def validate_excerpt(excerpt: Optional[str]) -> Optional[str]:
    """빈 요약은 None (본문에서 파생)."""
    value = (excerpt or "").strip()
    if not value:
        return None
    if len(value) > EXCERPT_MAX_LENGTH:
        raise ValidationError(
            f"Excerpt must be at most {EXCERPT_MAX_LENGTH} characters", field="excerpt"
        )
    return value


def validate_tags(tags: Optional[Iterable[str]]) -> list[str]:
    """공백 제거, 빈 태그 제외, 중복 제거 (처음 등장 순서 유지)."""
    result: list[str] = []
    for tag in tags or []:
        value = (tag or "").strip()
        if not value or value in result:
            continue
        if len(value) > TAG_MAX_LENGTH:
            raise ValidationError(
                f"Tag '{value[:TAG_MAX_LENGTH]}...' must be at most {TAG_MAX_LENGTH} characters",
                field="tags",
            )
        result.append(value)
    if len(result) > MAX_TAGS:
        raise ValidationError(f"At most {MAX_TAGS} tags are allowed", field="tags")
    return result


def validate_author(author: Author) -> Author:
    name = (author.name or "").strip()
    if not name:
        raise ValidationError("Author name is required", field="author")
    if len(name) > AUTHOR_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Author name must be at most {AUTHOR_NAME_MAX_LENGTH} characters",
            field="author",
        )
    avatar = (author.avatar or "").strip() or None
    return Author(name=name, avatar=avatar)


def validate_draft(draft: PostDraft) -> PostDraft:
    """모든 필드를 검증한 새 PostDraft를 반환."""
    return PostDraft(
        title=validate_title(draft.title),
        content=validate_content(draft.content),
        excerpt=validate_excerpt(draft.excerpt),
        tags=validate_tags(draft.tags),
        published=bool(draft.published),
        author=validate_author(draft.author) if draft.author else None,
    )


def parse_tag_input(raw: Optional[str]) -> list[str]:
    """폼의 쉼표 구분 태그 입력을 리스트로."""
    return (raw or "").split(",")
