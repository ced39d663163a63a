"""
Tests for bulk commit of selected combinations.

The bulk-create collaborator is an AsyncMock.
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from admachin.ad_creator.combinations import generate_combinations
from admachin.ad_creator.commit import (
    BulkCommitError,
    CommitContext,
    build_ad_rows,
    commit_combinations,
    select_included,
)


@pytest.fixture
def combos():
    # x, y, z
    return generate_combinations(["c1"], ["h1"], ["p1"], ["d1", "d2", "d3"])


@pytest.fixture
def context():
    return CommitContext(user_id="user-1", project_id="proj-1", subproject_id=None)


class TestSelectIncluded:

    def test_keeps_generator_order(self, combos):
        x, y, z = combos
        assert select_included(combos, {z.id, x.id}) == [x, z]


class TestBuildAdRows:

    def test_row_shape(self, combos, context):
        rows = build_ad_rows(combos[:1], context)
        assert rows == [{
            "creative_id": "c1",
            "headline_id": "h1",
            "primary_id": "p1",
            "description_id": "d1",
            "user_id": "user-1",
            "project_id": "proj-1",
            "subproject_id": None,
        }]


class TestCommitCombinations:

    @pytest.mark.asyncio
    async def test_sends_only_included_in_one_call(self, combos, context):
        x, y, z = combos
        create_ads = AsyncMock(return_value=[])

        created = await commit_combinations(combos, {x.id, z.id}, context, create_ads)

        assert created == 2
        create_ads.assert_awaited_once()
        rows = create_ads.call_args[0][0]
        assert [r["description_id"] for r in rows] == ["d1", "d3"]

    @pytest.mark.asyncio
    async def test_empty_selection_makes_no_call(self, combos, context):
        create_ads = AsyncMock()

        created = await commit_combinations(combos, set(), context, create_ads)

        assert created == 0
        create_ads.assert_not_called()

    @pytest.mark.asyncio
    async def test_stale_ids_alone_make_no_call(self, combos, context):
        create_ads = AsyncMock()
        created = await commit_combinations(combos, {"gone_h_p_d"}, context, create_ads)
        assert created == 0
        create_ads.assert_not_called()

    @pytest.mark.asyncio
    async def test_failure_is_one_batch_error(self, combos, context):
        included = {c.id for c in combos}
        cause = RuntimeError("insert failed")
        create_ads = AsyncMock(side_effect=cause)

        with pytest.raises(BulkCommitError) as exc_info:
            await commit_combinations(combos, included, context, create_ads)

        assert exc_info.value.batch_size == 3
        assert exc_info.value.__cause__ is cause
        create_ads.assert_awaited_once()
        # Caller's selection is untouched
        assert included == {c.id for c in combos}

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, combos, context):
        create_ads = AsyncMock(side_effect=asyncio.CancelledError())

        with pytest.raises(asyncio.CancelledError):
            await commit_combinations(combos, {combos[0].id}, context, create_ads)
