"""REST API 라우트: 게시물 리소스."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request

from simpleblog.domain.entities import Page, Post
from simpleblog.presentation.web.schemas import PostCreateRequest, PostUpdateRequest

router = APIRouter(tags=["api"])


def _get_container(request: Request):
    return request.app.state.container


def _iso(value) -> str | None:
    return value.isoformat() if value else None


def _serialize(post: Post, include_content: bool = True) -> dict:
    data = {
        "id": post.id,
        "title": post.title,
        "excerpt": post.excerpt,
        "author": {"name": post.author.name, "avatar": post.author.avatar},
        "tags": post.tags,
        "published": post.published,
        "created_at": _iso(post.created_at),
        "updated_at": _iso(post.updated_at),
        "published_at": _iso(post.published_at),
        "metadata": {
            "read_time": post.metadata.read_time,
            "views": post.metadata.views,
            "likes": post.metadata.likes,
        },
    }
    if include_content:
        data["content"] = post.content
    return data


def _serialize_page(page: Page) -> dict:
    return {
        "items": [_serialize(p, include_content=False) for p in page.items],
        "total": page.total,
        "limit": page.limit,
        "offset": page.offset,
        "has_next": page.has_next,
    }


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/posts")
async def list_posts(
    request: Request,
    q: str | None = None,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    published_only: bool = False,
):
    """게시물 목록. q가 있으면 제목/요약/본문 검색."""
    c = _get_container(request)
    page = await c.list_posts_use_case().execute(
        query=q, limit=limit, offset=offset, published_only=published_only
    )
    return _serialize_page(page)


@router.get("/posts/{post_id}")
async def get_post(request: Request, post_id: str):
    c = _get_container(request)
    post = await c.get_post_use_case().execute(post_id)
    return _serialize(post)


@router.post("/posts", status_code=201)
async def create_post(request: Request, payload: PostCreateRequest):
    c = _get_container(request)
    post = await c.create_post_use_case().execute(payload.to_draft())
    return _serialize(post)


@router.put("/posts/{post_id}")
@router.patch("/posts/{post_id}")
async def update_post(request: Request, post_id: str, payload: PostUpdateRequest):
    """보낸 필드만 병합."""
    c = _get_container(request)
    post = await c.update_post_use_case().execute(post_id, payload.to_patch())
    return _serialize(post)


@router.delete("/posts/{post_id}")
async def delete_post(request: Request, post_id: str):
    c = _get_container(request)
    await c.delete_post_use_case().execute(post_id)
    return {"status": "deleted"}


@router.post("/posts/{post_id}/like")
async def like_post(request: Request, post_id: str):
    c = _get_container(request)
    post = await c.like_post_use_case().execute(post_id)
    return {"id": post.id, "likes": post.metadata.likes}
