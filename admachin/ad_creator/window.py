"""
Lazy render window over the combination preview.

Only a prefix of the combinations is rendered. Each proximity signal from the
host (the "load more" sentinel coming into view) grows the prefix by one page.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, TypeVar

PAGE_SIZE = 20

T = TypeVar("T")


@dataclass(frozen=True)
class RenderWindow:
    """Visible prefix of one generation of combinations."""

    total: int
    visible_count: int
    page_size: int = PAGE_SIZE

    @classmethod
    def start(cls, total: int, page_size: int = PAGE_SIZE) -> "RenderWindow":
        """First page for a new generation."""
        return cls(total=total, visible_count=min(page_size, total), page_size=page_size)

    def on_proximity_signal(self) -> "RenderWindow":
        """Grow by one page, capped at the total. No-op once everything is visible."""
        if self.visible_count >= self.total:
            return self
        return RenderWindow(
            total=self.total,
            visible_count=min(self.visible_count + self.page_size, self.total),
            page_size=self.page_size,
        )

    @property
    def has_more(self) -> bool:
        return self.visible_count < self.total

    @property
    def remaining(self) -> int:
        return max(self.total - self.visible_count, 0)

    def visible(self, items: Sequence[T]) -> Tuple[T, ...]:
        return tuple(items[:self.visible_count])
