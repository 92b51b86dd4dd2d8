"""블로그 HTML 페이지 라우트: 목록, 검색, 상세, 작성/수정 폼."""

from __future__ import annotations

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from simpleblog.application.result import ErrorKind, Result, capture
from simpleblog.domain.entities import PostDraft, PostPatch
from simpleblog.domain.validation import parse_tag_input
from simpleblog.domain.value_objects.excerpt import derive_excerpt

router = APIRouter(tags=["pages"])

LOAD_POST_FAILED = "Failed to load post. Please try again later."
SAVE_POST_FAILED = "Failed to save post"

_STATUS_BY_ERROR = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 422,
    ErrorKind.UPSTREAM: 503,
}


def _get_container(request: Request):
    return request.app.state.container


def _get_templates(request: Request):
    return request.app.state.templates


def _status(result: Result) -> int:
    return 200 if result.ok else _STATUS_BY_ERROR[result.error]


def _error_page(request: Request, result: Result) -> HTMLResponse:
    return _get_templates(request).TemplateResponse(
        request,
        "error.html",
        {"message": result.message},
        status_code=_status(result),
    )


def _form_page(
    request: Request,
    form: dict,
    post_id: str | None = None,
    error: Result | None = None,
) -> HTMLResponse:
    return _get_templates(request).TemplateResponse(
        request,
        "post_form.html",
        {"form": form, "post_id": post_id, "error": error.message if error else None},
        status_code=_status(error) if error else 200,
    )


def _form_values(title: str, excerpt: str, content: str, tags: str, published: bool) -> dict:
    return {
        "title": title,
        "excerpt": excerpt,
        "content": content,
        "tags": tags,
        "published": published,
    }


async def _render_list(
    request: Request, query: str | None, page: int, per_page: int, heading: str
) -> HTMLResponse:
    c = _get_container(request)
    page = max(1, page)
    result = await capture(
        c.list_posts_use_case().execute(
            query=query,
            limit=per_page,
            offset=(page - 1) * per_page,
            published_only=True,
        )
    )
    return _get_templates(request).TemplateResponse(
        request,
        "posts.html",
        {
            "result": result,
            "current_query": (query or "").strip(),
            "heading": heading,
        },
        status_code=_status(result),
    )


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """홈: 최신 발행 게시물."""
    site = _get_container(request).config.site
    return await _render_list(request, None, 1, site.home_count, "Latest Posts")


@router.get("/posts", response_class=HTMLResponse)
async def posts_page(request: Request, q: str | None = None, page: int = 1):
    """게시물 목록 (검색어가 있으면 검색 결과)."""
    site = _get_container(request).config.site
    return await _render_list(request, q, page, site.per_page, "Blog Posts")


@router.get("/posts/new", response_class=HTMLResponse)
async def new_post_form(request: Request):
    return _form_page(request, _form_values("", "", "", "", False))


@router.post("/posts/new", response_class=HTMLResponse)
async def create_post(
    request: Request,
    title: str = Form(""),
    excerpt: str = Form(""),
    content: str = Form(""),
    tags: str = Form(""),
    published: str | None = Form(None),
):
    c = _get_container(request)
    draft = PostDraft(
        title=title,
        content=content,
        excerpt=excerpt,
        tags=parse_tag_input(tags),
        published=published is not None,
    )
    result = await capture(
        c.create_post_use_case().execute(draft),
        messages={ErrorKind.UPSTREAM: SAVE_POST_FAILED},
    )
    if not result.ok:
        form = _form_values(title, excerpt, content, tags, published is not None)
        return _form_page(request, form, error=result)
    return RedirectResponse(f"/posts/{result.value.id}", status_code=303)


@router.get("/posts/{post_id}", response_class=HTMLResponse)
async def post_detail(request: Request, post_id: str):
    """게시물 상세. 열람할 때마다 조회수 +1."""
    c = _get_container(request)
    result = await capture(
        c.record_view_use_case().execute(post_id),
        messages={ErrorKind.UPSTREAM: LOAD_POST_FAILED},
    )
    if not result.ok:
        return _error_page(request, result)
    return _get_templates(request).TemplateResponse(
        request, "post_detail.html", {"post": result.value}
    )


@router.get("/posts/{post_id}/edit", response_class=HTMLResponse)
async def edit_post_form(request: Request, post_id: str):
    c = _get_container(request)
    result = await capture(
        c.get_post_use_case().execute(post_id),
        messages={ErrorKind.UPSTREAM: "Failed to load post"},
    )
    if not result.ok:
        return _error_page(request, result)
    post = result.value
    # 자동 생성된 요약은 비워 둬야 본문 수정 시 다시 생성된다
    excerpt = "" if post.excerpt == derive_excerpt(post.content) else post.excerpt
    form = _form_values(post.title, excerpt, post.content, ", ".join(post.tags), post.published)
    return _form_page(request, form, post_id=post_id)


@router.post("/posts/{post_id}/edit", response_class=HTMLResponse)
async def update_post(
    request: Request,
    post_id: str,
    title: str = Form(""),
    excerpt: str = Form(""),
    content: str = Form(""),
    tags: str = Form(""),
    published: str | None = Form(None),
):
    c = _get_container(request)
    patch = PostPatch(
        title=title,
        content=content,
        excerpt=excerpt,
        tags=parse_tag_input(tags),
        published=published is not None,
    )
    result = await capture(
        c.update_post_use_case().execute(post_id, patch),
        messages={ErrorKind.UPSTREAM: SAVE_POST_FAILED},
    )
    if result.error == ErrorKind.NOT_FOUND:
        return _error_page(request, result)
    if not result.ok:
        form = _form_values(title, excerpt, content, tags, published is not None)
        return _form_page(request, form, post_id=post_id, error=result)
    return RedirectResponse(f"/posts/{post_id}", status_code=303)
