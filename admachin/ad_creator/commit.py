"""
Bulk commit of selected combinations as ad records.

The included combinations are mapped to ad rows and written with a single
bulk-create call. A failed call is reported as one failure for the whole
batch; the caller keeps its selection and may retry.
"""

import logging
from dataclasses import dataclass
from typing import Any, AbstractSet, Awaitable, Callable, Dict, List, Optional, Sequence

import logfire

from .combinations import ID, AdCombination

logger = logging.getLogger(__name__)

AdRow = Dict[str, Any]
CreateAds = Callable[[List[AdRow]], Awaitable[Any]]


class BulkCommitError(RuntimeError):
    """The bulk-create call for a batch of ads failed."""

    def __init__(self, batch_size: int, cause: BaseException):
        super().__init__(f"Failed to create {batch_size} ads: {cause}")
        self.batch_size = batch_size
        self.cause = cause


@dataclass(frozen=True)
class CommitContext:
    """Ownership fields stamped on every created ad."""
    user_id: Optional[str]
    project_id: Optional[str] = None
    subproject_id: Optional[str] = None


def select_included(
    combinations: Sequence[AdCombination],
    included_ids: AbstractSet[ID],
) -> List[AdCombination]:
    """Included combinations in generator order."""
    return [c for c in combinations if c.id in included_ids]


def build_ad_rows(combinations: Sequence[AdCombination], context: CommitContext) -> List[AdRow]:
    return [
        {
            "creative_id": c.creative_id,
            "headline_id": c.headline_id,
            "primary_id": c.primary_id,
            "description_id": c.description_id,
            "user_id": context.user_id,
            "project_id": context.project_id,
            "subproject_id": context.subproject_id,
        }
        for c in combinations
    ]


async def commit_combinations(
    combinations: Sequence[AdCombination],
    included_ids: AbstractSet[ID],
    context: CommitContext,
    create_ads: CreateAds,
) -> int:
    """
    Create one ad per included combination.

    Args:
        combinations: Current generation, in generator order
        included_ids: Ids the user kept selected
        context: user/project/subproject stamped on each row
        create_ads: Async bulk-create collaborator, called at most once

    Returns:
        Number of ad rows sent. 0 (and no call) when nothing is included.

    Raises:
        BulkCommitError: If the bulk-create call fails
    """
    selected = select_included(combinations, included_ids)
    if not selected:
        logger.info("No combinations selected, skipping ad creation")
        return 0

    rows = build_ad_rows(selected, context)

    with logfire.span("commit_combinations", ads=len(rows), project_id=context.project_id):
        try:
            await create_ads(rows)
        except Exception as e:
            logger.error(f"Bulk ad creation failed for {len(rows)} ads: {e}")
            raise BulkCommitError(len(rows), e) from e

    logger.info(f"Created {len(rows)} ads from {len(combinations)} combinations")
    return len(rows)
