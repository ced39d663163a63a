"""
Ad combination identity and generation.

An ad combination picks exactly one creative, headline, primary text and
description. Combinations are produced as the cartesian product of the four
selection pools in nested order (creative outermost, description innermost),
which is also the order the preview grid renders them in.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

ID = str

# Characters that make the readable underscore join ambiguous
_RESERVED = ("_", ":")


def combination_id(
    creative_id: ID,
    headline_id: ID,
    primary_id: ID,
    description_id: ID,
) -> ID:
    """
    Build the unique key of a combination.

    UUID-style ids produce the readable ``creative_headline_primary_description``
    form. If any part contains ``_`` or ``:`` every part is length-prefixed
    instead (``36:<id>``), so distinct 4-tuples never share a key.

    Examples:
        >>> combination_id("c1", "h1", "p1", "d1")
        'c1_h1_p1_d1'
        >>> combination_id("a_b", "c", "d", "e")
        '3:a_b1:c1:d1:e'
    """
    parts = (creative_id, headline_id, primary_id, description_id)
    if any(ch in part for part in parts for ch in _RESERVED):
        return "".join(f"{len(part)}:{part}" for part in parts)
    return "_".join(parts)


@dataclass(frozen=True)
class AdCombination:
    """One creative + headline + primary text + description tuple."""

    id: ID
    creative_id: ID
    headline_id: ID
    primary_id: ID
    description_id: ID

    @classmethod
    def build(
        cls,
        creative_id: ID,
        headline_id: ID,
        primary_id: ID,
        description_id: ID,
    ) -> "AdCombination":
        return cls(
            id=combination_id(creative_id, headline_id, primary_id, description_id),
            creative_id=creative_id,
            headline_id=headline_id,
            primary_id=primary_id,
            description_id=description_id,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "creative_id": self.creative_id,
            "headline_id": self.headline_id,
            "primary_id": self.primary_id,
            "description_id": self.description_id,
        }


def generate_combinations(
    creative_ids: Sequence[ID],
    headline_ids: Sequence[ID],
    primary_ids: Sequence[ID],
    description_ids: Sequence[ID],
) -> Tuple[AdCombination, ...]:
    """
    Cartesian product of the four selection pools.

    Args:
        creative_ids: Selected creative ids (outermost loop)
        headline_ids: Selected headline copy ids
        primary_ids: Selected primary text copy ids
        description_ids: Selected description copy ids (innermost loop)

    Returns:
        Tuple of AdCombination in nested-loop order. Empty if any pool is empty.

    Ids must be unique within each pool; duplicates produce duplicate keys.
    """
    if not creative_ids or not headline_ids or not primary_ids or not description_ids:
        return ()

    # Materialize once so generator inputs are not exhausted by the inner loops
    creatives = tuple(creative_ids)
    headlines = tuple(headline_ids)
    primaries = tuple(primary_ids)
    descriptions = tuple(description_ids)

    return tuple(
        AdCombination.build(c, h, p, d)
        for c in creatives
        for h in headlines
        for p in primaries
        for d in descriptions
    )
