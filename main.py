"""SimpleBlog: 엔트리포인트.

1. 설정 로드 (.env + config/settings.yaml)
2. 로깅 설정
3. 저장소(Firestore 또는 인메모리) 준비
4. 의존성 컨테이너 조립
5. 웹 서버 시작 (SIGINT/SIGTERM 시 정상 종료)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import uvicorn

# 프로젝트 루트를 sys.path에 추가
sys.path.insert(0, str(Path(__file__).parent))

from simpleblog.domain.entities import PostDraft
from simpleblog.infrastructure.config.container import Container
from simpleblog.infrastructure.config.settings import AppConfig, Settings, load_app_config
from simpleblog.infrastructure.database.firebase_client import create_firestore_client
from simpleblog.presentation.web.app import create_app

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings, config: AppConfig) -> None:
    level = config.logging.level or ("DEBUG" if settings.is_dev else "INFO")
    log_file = Path(config.logging.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def _log_uncaught(exc_type, exc, tb) -> None:
    """프로세스 경계의 미처리 예외: 기록 후 종료 (exit 1)."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    logger.critical("처리되지 않은 예외로 종료", exc_info=(exc_type, exc, tb))


def build_container(settings: Settings, config: AppConfig) -> Container:
    firestore_db = None
    if settings.resolved_storage_backend == "firestore":
        firestore_db = create_firestore_client(
            credential_path=settings.firebase_credential_path,
            project_id=settings.firebase_project_id or None,
        )
    return Container(settings=settings, app_config=config, firestore_db=firestore_db)


async def seed_posts(container: Container, config: AppConfig) -> None:
    """YAML에 정의된 샘플 게시물을 저장소에 시드."""
    uc = container.create_post_use_case()
    for seed in config.seed_posts:
        await uc.execute(
            PostDraft(
                title=seed.title,
                content=seed.content,
                excerpt=seed.excerpt,
                tags=seed.tags,
                published=seed.published,
            )
        )
    logger.info(f"샘플 게시물 {len(config.seed_posts)}개 시드 완료")


async def run_server(settings: Settings, config: AppConfig, seed: bool = True) -> int:
    """메인 서버 실행. 종료 코드 반환."""
    container = build_container(settings, config)

    if seed and settings.resolved_storage_backend == "memory":
        await seed_posts(container, config)

    app = create_app(container)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.is_dev else "info",
        )
    )

    crashed = False

    def _on_loop_error(loop, context) -> None:
        # 태스크에서 처리되지 않은 예외: 기록 후 서버 종료
        nonlocal crashed
        crashed = True
        logger.critical(
            f"처리되지 않은 비동기 예외: {context.get('message')}",
            exc_info=context.get("exception"),
        )
        server.should_exit = True

    asyncio.get_running_loop().set_exception_handler(_on_loop_error)

    logger.info(
        f"서버 시작: http://{settings.host}:{settings.port} "
        f"(환경: {settings.app_env}, 저장소: {settings.resolved_storage_backend})"
    )
    await server.serve()
    return 1 if crashed else 0


def main() -> None:
    parser = argparse.ArgumentParser(description="SimpleBlog")
    subparsers = parser.add_subparsers(dest="command", help="실행 명령")

    serve_parser = subparsers.add_parser("serve", help="웹 서버 시작")
    serve_parser.add_argument("--host", help="바인드 주소 (기본: HOST 또는 localhost)")
    serve_parser.add_argument("--port", type=int, help="포트 (기본: PORT 또는 3000)")
    serve_parser.add_argument(
        "--storage", choices=["memory", "firestore"], help="저장소 (기본: 환경에 따라)"
    )
    serve_parser.add_argument("--no-seed", action="store_true", help="인메모리 샘플 시드 생략")
    serve_parser.add_argument(
        "--config", default="config/settings.yaml", help="YAML 설정 파일 경로"
    )

    args = parser.parse_args()

    if args.command != "serve":
        parser.print_help()
        print("\n사용 방법:")
        print("  python main.py serve                     # 개발 모드 (인메모리)")
        print("  APP_ENV=production python main.py serve  # Firestore 사용")
        return

    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("storage_backend", args.storage),
        )
        if value is not None
    }
    settings = Settings(**overrides)
    config = load_app_config(args.config)

    configure_logging(settings, config)
    sys.excepthook = _log_uncaught

    try:
        code = asyncio.run(run_server(settings, config, seed=not args.no_seed))
    except KeyboardInterrupt:
        # uvicorn은 정상 종료 후 SIGINT를 다시 발생시킨다
        logger.info("SIGINT 수신: 종료 완료")
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    main()
