import html
import math
import re

import bleach

EXCERPT_LENGTH = 150
WORDS_PER_MINUTE = 200

_WS_RE = re.compile(r"\s+")


def plain_text(content: str) -> str:
    """HTML 본문을 평문으로 변환한다.

    정규화: 태그 제거, 엔티티 디코드, 공백 통일.
    """
    # 인접한 블록 태그 사이 단어가 붙지 않도록 태그 앞에 공백
    text = bleach.clean((content or "").replace("<", " <"), tags=[], strip=True)
    text = html.unescape(text)
    return _WS_RE.sub(" ", text).strip()


def derive_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    """본문 앞부분으로 요약을 만든다. 잘린 경우에만 '...'을 붙인다."""
    text = plain_text(content)
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."


def estimate_read_time(content: str) -> int:
    """분 단위 읽기 시간 (최소 1분)."""
    words = len(plain_text(content).split())
    return max(1, math.ceil(words / WORDS_PER_MINUTE))
