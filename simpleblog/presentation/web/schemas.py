from __future__ import annotations

from pydantic import BaseModel, Field

from simpleblog.domain.entities import Author, PostDraft, PostPatch


class AuthorPayload(BaseModel):
    name: str
    avatar: str | None = None

    def to_entity(self) -> Author:
        return Author(name=self.name, avatar=self.avatar)


class PostCreateRequest(BaseModel):
    title: str
    content: str
    excerpt: str | None = None
    tags: list[str] = Field(default_factory=list)
    published: bool = False
    author: AuthorPayload | None = None

    def to_draft(self) -> PostDraft:
        return PostDraft(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            tags=self.tags,
            published=self.published,
            author=self.author.to_entity() if self.author else None,
        )


class PostUpdateRequest(BaseModel):
    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    tags: list[str] | None = None
    published: bool | None = None
    author: AuthorPayload | None = None

    def to_patch(self) -> PostPatch:
        return PostPatch(
            title=self.title,
            content=self.content,
            excerpt=self.excerpt,
            tags=self.tags,
            published=self.published,
            author=self.author.to_entity() if self.author else None,
        )
