from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic_settings import BaseSettings


# ──────────────────────────────────────────
# 환경변수 기반 설정 (.env)
# ──────────────────────────────────────────
class Settings(BaseSettings):
    host: str = "localhost"
    port: int = 3000
    app_env: str = "development"  # development, production

    # memory, firestore (비우면 환경에 따라 결정)
    storage_backend: str = ""

    # Firebase
    firebase_credential_path: str = "firebase-service-account.json"
    firebase_project_id: str = ""

    default_author_name: str = "Anonymous"
    default_author_avatar: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_dev(self) -> bool:
        return self.app_env.lower() != "production"

    @property
    def resolved_storage_backend(self) -> str:
        if self.storage_backend:
            return self.storage_backend.lower()
        return "memory" if self.is_dev else "firestore"


# ──────────────────────────────────────────
# YAML 기반 앱 설정 (config/settings.yaml)
# ──────────────────────────────────────────
class SiteConfig:
    def __init__(self, data: dict[str, Any]):
        self.name: str = data.get("name", "SimpleBlog")
        self.description: str = data.get("description", "Share your thoughts with the world")
        self.per_page: int = data.get("per_page", 12)
        self.home_count: int = data.get("home_count", 6)


class LoggingConfig:
    def __init__(self, data: dict[str, Any]):
        self.file: str = data.get("file", "logs/app.log")
        self.level: str | None = data.get("level")


class SeedPostConfig:
    def __init__(self, data: dict[str, Any]):
        self.title: str = data["title"]
        self.content: str = data["content"]
        self.excerpt: str | None = data.get("excerpt")
        self.tags: list[str] = data.get("tags", [])
        self.published: bool = data.get("published", True)


class AppConfig:
    """YAML에서 로드된 전체 앱 설정."""

    def __init__(self, data: dict[str, Any]):
        self.site = SiteConfig(data.get("site", {}))
        self.logging = LoggingConfig(data.get("logging", {}))
        # memory 저장소로 기동할 때만 사용
        self.seed_posts: list[SeedPostConfig] = [
            SeedPostConfig(p) for p in data.get("seed_posts", [])
        ]


def load_app_config(path: str = "config/settings.yaml") -> AppConfig:
    """YAML 설정 파일을 로드하여 AppConfig를 반환."""
    config_path = Path(path)
    if not config_path.exists():
        return AppConfig({})
    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return AppConfig(data)
