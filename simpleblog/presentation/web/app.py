"""FastAPI 웹 애플리케이션 팩토리."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates

from simpleblog.infrastructure.config.container import Container
from simpleblog.presentation.web import filters
from simpleblog.presentation.web.errors import register_error_handlers
from simpleblog.presentation.web.routes import api, pages

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def _lifespan(app: FastAPI):
    logger.info(f"{app.title} 시작됨")
    yield
    logger.info("종료 신호 수신: 정상 종료 중")


def create_app(container: Container) -> FastAPI:
    site = container.config.site
    app = FastAPI(
        title=site.name,
        description=site.description,
        version="0.1.0",
        debug=container.settings.is_dev,
        lifespan=_lifespan,
    )

    # 컨테이너를 앱 state에 저장
    app.state.container = container

    templates = Jinja2Templates(directory=str(_TEMPLATE_DIR))
    templates.env.filters["sanitize_html"] = filters.sanitize_html
    templates.env.filters["format_date"] = filters.format_date
    templates.env.globals["site"] = site
    app.state.templates = templates

    register_error_handlers(app)

    # 라우터 등록
    app.include_router(pages.router)
    app.include_router(api.router, prefix="/api")

    return app
