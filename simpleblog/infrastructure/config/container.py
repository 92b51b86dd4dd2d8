"""의존성 주입 컨테이너.

모든 의존성 조립은 최외곽(Composition Root)에서 이루어진다.
설정에 따라 저장소 구현을 고르고 유즈케이스에 주입한다.
"""

from __future__ import annotations

import logging

from simpleblog.application.use_cases.create_post import CreatePostUseCase
from simpleblog.application.use_cases.engagement import LikePostUseCase, RecordViewUseCase
from simpleblog.application.use_cases.get_post import GetPostUseCase
from simpleblog.application.use_cases.list_posts import ListPostsUseCase
from simpleblog.application.use_cases.update_post import DeletePostUseCase, UpdatePostUseCase
from simpleblog.domain.entities import Author
from simpleblog.domain.repositories.post_repository import PostRepository
from simpleblog.infrastructure.config.settings import AppConfig, Settings
from simpleblog.infrastructure.database.repositories.memory_post_repo import MemoryPostRepository
from simpleblog.infrastructure.database.repositories.post_repo import FirestorePostRepository

logger = logging.getLogger(__name__)


class Container:
    """애플리케이션 의존성 컨테이너."""

    def __init__(
        self,
        settings: Settings,
        app_config: AppConfig,
        firestore_db=None,
        post_repo: PostRepository | None = None,
    ):
        self.settings = settings
        self.config = app_config

        # ─── Repository ───
        self.post_repo: PostRepository = post_repo or self._build_post_repo(firestore_db)

        self.default_author = Author(
            name=settings.default_author_name,
            avatar=settings.default_author_avatar or None,
        )

    def _build_post_repo(self, firestore_db) -> PostRepository:
        backend = self.settings.resolved_storage_backend
        if backend == "firestore":
            if firestore_db is None:
                raise ValueError("firestore 저장소에는 Firestore 클라이언트가 필요합니다")
            return FirestorePostRepository(firestore_db)
        if backend == "memory":
            logger.warning("인메모리 저장소 사용: 재시작 시 데이터가 사라집니다")
            return MemoryPostRepository()
        raise ValueError(f"알 수 없는 저장소: '{backend}'")

    # ─── Use Case 팩토리 ───

    def get_post_use_case(self) -> GetPostUseCase:
        return GetPostUseCase(post_repo=self.post_repo)

    def list_posts_use_case(self) -> ListPostsUseCase:
        return ListPostsUseCase(post_repo=self.post_repo)

    def create_post_use_case(self) -> CreatePostUseCase:
        return CreatePostUseCase(post_repo=self.post_repo, default_author=self.default_author)

    def update_post_use_case(self) -> UpdatePostUseCase:
        return UpdatePostUseCase(post_repo=self.post_repo)

    def delete_post_use_case(self) -> DeletePostUseCase:
        return DeletePostUseCase(post_repo=self.post_repo)

    def record_view_use_case(self) -> RecordViewUseCase:
        return RecordViewUseCase(post_repo=self.post_repo)

    def like_post_use_case(self) -> LikePostUseCase:
        return LikePostUseCase(post_repo=self.post_repo)
