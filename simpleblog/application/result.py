"""뷰에서 분기용으로 검사하는 결과 값.

유즈케이스는 예외를 던지고, 뷰는 capture()로 감싸 Result를 받아
성공/실패 종류에 따라 렌더링 분기를 고른다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Generic, Optional, TypeVar

from simpleblog.domain.exceptions import (
    PostNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UPSTREAM = "upstream"


DEFAULT_MESSAGES = {
    ErrorKind.NOT_FOUND: "Post not found",
    ErrorKind.UPSTREAM: "Unable to load posts. Please try again later.",
}


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, kind: ErrorKind, message: str, field: Optional[str] = None
    ) -> "Result[T]":
        return cls(error=kind, message=message, field=field)


async def capture(
    awaitable: Awaitable[T],
    messages: Optional[dict[ErrorKind, str]] = None,
) -> Result[T]:
    """도메인 예외를 Result로 변환. 그 외 예외는 그대로 전파."""
    texts = {**DEFAULT_MESSAGES, **(messages or {})}
    try:
        return Result.success(await awaitable)
    except PostNotFoundError:
        return Result.failure(ErrorKind.NOT_FOUND, texts[ErrorKind.NOT_FOUND])
    except ValidationError as e:
        return Result.failure(ErrorKind.VALIDATION, str(e), field=e.field)
    except UpstreamUnavailableError as e:
        logger.error(f"저장소 접근 실패: {e}")
        return Result.failure(ErrorKind.UPSTREAM, texts[ErrorKind.UPSTREAM])
