from __future__ import annotations

import math
from dataclasses import dataclass, field

from simpleblog.domain.entities.post import Post


@dataclass
class Page:
    """목록/검색 결과의 한 페이지."""

    items: list[Post] = field(default_factory=list)
    total: int = 0
    limit: int = 20
    offset: int = 0

    @property
    def number(self) -> int:
        return self.offset // self.limit + 1 if self.limit else 1

    @property
    def page_count(self) -> int:
        if not self.limit:
            return 1
        return max(1, math.ceil(self.total / self.limit))

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.items) < self.total

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
