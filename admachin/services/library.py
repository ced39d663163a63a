"""
Helpers over library records used when building selection pools.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, TypeVar, Union

from .models import AdCopy, CopyType, Creative

Item = TypeVar("Item", Creative, AdCopy)


@dataclass(frozen=True)
class CopyPools:
    """Ad copies split by the slot they fill."""
    headlines: List[AdCopy]
    primary_texts: List[AdCopy]
    descriptions: List[AdCopy]


def filter_by_scope(
    items: Iterable[Item],
    project_id: Optional[str] = None,
    subproject_id: Optional[str] = None,
    created_by: Optional[str] = None,
) -> List[Item]:
    """
    Narrow library items to a project/subproject/creator.

    Items that are not assigned to any project (or subproject) are shared and
    stay visible under every project (or subproject) filter. The creator
    filter is exact.
    """
    filtered = list(items)
    if project_id:
        filtered = [i for i in filtered if not i.project_id or i.project_id == project_id]
    if subproject_id:
        filtered = [i for i in filtered if not i.subproject_id or i.subproject_id == subproject_id]
    if created_by:
        filtered = [i for i in filtered if i.user_id == created_by]
    return filtered


def split_ad_copies(copies: Iterable[AdCopy]) -> CopyPools:
    copies = list(copies)
    return CopyPools(
        headlines=[c for c in copies if c.type == CopyType.HEADLINE],
        primary_texts=[c for c in copies if c.type == CopyType.PRIMARY_TEXT],
        descriptions=[c for c in copies if c.type == CopyType.DESCRIPTION],
    )


def label_for(item: Union[Creative, AdCopy], limit: int = 30) -> str:
    """Short chip label: creative name, or truncated copy text."""
    if isinstance(item, Creative):
        text = item.name
    else:
        text = item.text or item.name or ""

    text = text.strip()
    if not text:
        return "Untitled"
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def index_by_id(items: Sequence[Item]) -> dict:
    """id -> record lookup for preview cards."""
    return {item.id: item for item in items}
