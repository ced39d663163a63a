"""
Tests for combination identity and generation.

Tests: cardinality, empty pools, determinism, key injectivity, nested order.
"""

import itertools
import uuid

import pytest

from admachin.ad_creator.combinations import (
    AdCombination,
    combination_id,
    generate_combinations,
)


def _tuples(combos):
    return [(c.creative_id, c.headline_id, c.primary_id, c.description_id) for c in combos]


class TestCombinationId:
    """combination_id is readable for UUIDs and injective for anything else."""

    def test_uuid_ids_use_underscore_join(self):
        ids = [str(uuid.uuid4()) for _ in range(4)]
        assert combination_id(*ids) == "_".join(ids)

    def test_same_inputs_same_key(self):
        assert combination_id("c", "h", "p", "d") == combination_id("c", "h", "p", "d")

    def test_underscores_in_ids_do_not_collide(self):
        # Both would be "a_b_c_d_e" with a naive join
        first = combination_id("a_b", "c", "d", "e")
        second = combination_id("a", "b_c", "d", "e")
        assert first != second

    def test_colon_in_ids_do_not_collide(self):
        first = combination_id("1:a", "b", "c", "d")
        second = combination_id("1", "a:b", "c", "d")
        assert first != second

    def test_prefixed_key_never_equals_plain_key(self):
        plain = combination_id("x", "y", "z", "w")
        assert ":" not in plain
        assert ":" in combination_id("x_", "y", "z", "w")

    def test_injective_over_tricky_alphabet(self):
        alphabet = ["", "_", ":", "a", "a_", "_a", "1:", ":1", "a_b"]
        seen = {}
        for parts in itertools.product(alphabet, repeat=4):
            key = combination_id(*parts)
            assert seen.setdefault(key, parts) == parts


class TestGenerateCombinations:

    def test_cardinality(self):
        combos = generate_combinations(["c1", "c2", "c3"], ["h1", "h2"], ["p1"], ["d1", "d2"])
        assert len(combos) == 3 * 2 * 1 * 2

    @pytest.mark.parametrize("empty_index", [0, 1, 2, 3])
    def test_any_empty_pool_gives_no_combinations(self, empty_index):
        pools = [["c1"], ["h1"], ["p1"], ["d1"]]
        pools[empty_index] = []
        assert generate_combinations(*pools) == ()

    def test_nested_order(self):
        combos = generate_combinations(["c1", "c2"], ["h1"], ["p1"], ["d1", "d2"])
        assert _tuples(combos) == [
            ("c1", "h1", "p1", "d1"),
            ("c1", "h1", "p1", "d2"),
            ("c2", "h1", "p1", "d1"),
            ("c2", "h1", "p1", "d2"),
        ]

    def test_matches_itertools_product_order(self):
        pools = (["c1", "c2"], ["h1", "h2", "h3"], ["p1", "p2"], ["d1", "d2"])
        combos = generate_combinations(*pools)
        assert _tuples(combos) == list(itertools.product(*pools))

    def test_deterministic(self):
        pools = (["c1", "c2"], ["h1", "h2"], ["p1"], ["d1", "d2", "d3"])
        assert generate_combinations(*pools) == generate_combinations(*pools)

    def test_ids_unique(self):
        combos = generate_combinations(
            [f"c{i}" for i in range(5)],
            [f"h{i}" for i in range(4)],
            [f"p{i}" for i in range(3)],
            [f"d{i}" for i in range(2)],
        )
        assert len({c.id for c in combos}) == len(combos)

    def test_combination_fields(self):
        (combo,) = generate_combinations(["c1"], ["h1"], ["p1"], ["d1"])
        assert combo == AdCombination(
            id="c1_h1_p1_d1",
            creative_id="c1",
            headline_id="h1",
            primary_id="p1",
            description_id="d1",
        )

    def test_large_generation(self):
        pools = ([f"c{i}" for i in range(20)], [f"h{i}" for i in range(10)],
                 [f"p{i}" for i in range(10)], [f"d{i}" for i in range(10)])
        combos = generate_combinations(*pools)
        assert len(combos) == 20000
        assert combos[0].id == "c0_h0_p0_d0"
        assert combos[-1].id == "c19_h9_p9_d9"

    def test_accepts_tuples(self):
        combos = generate_combinations(("c1",), ("h1",), ("p1", "p2"), ("d1",))
        assert [c.id for c in combos] == ["c1_h1_p1_d1", "c1_h1_p2_d1"]

