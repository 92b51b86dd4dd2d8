"""도메인 레이어 예외 정의."""


class DomainError(Exception):
    """도메인 레이어 최상위 예외."""


class PostNotFoundError(DomainError):
    """요청한 게시물이 저장소에 없을 때."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__("Post not found")


class ValidationError(DomainError):
    """작성/수정 입력이 규칙을 위반했을 때."""

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class UpstreamUnavailableError(DomainError):
    """백엔드 저장소에 접근할 수 없을 때."""
