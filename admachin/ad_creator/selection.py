"""
Which generated combinations the user wants to create.

The selection is bound to one generation of combinations. A new generation
always starts with every combination included; individual exclusions are
not carried across generations.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Sequence, Tuple

from .combinations import ID, AdCombination


@dataclass(frozen=True)
class SelectionState:
    """Included-combination set for the current generation."""

    combination_ids: Tuple[ID, ...] = ()
    included_ids: FrozenSet[ID] = frozenset()
    _id_set: FrozenSet[ID] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_id_set", frozenset(self.combination_ids))

    @property
    def total(self) -> int:
        return len(self.combination_ids)

    @property
    def included_count(self) -> int:
        return len(self.included_ids & self._id_set)

    @property
    def all_selected(self) -> bool:
        return self.total > 0 and self.included_count == self.total

    @property
    def some_selected(self) -> bool:
        return 0 < self.included_count < self.total

    def is_included(self, combination_id: ID) -> bool:
        return combination_id in self.included_ids and combination_id in self._id_set


def reset_selection(combinations: Sequence[AdCombination]) -> SelectionState:
    """Start a selection for a fresh generation with everything included."""
    ids = tuple(c.id for c in combinations)
    return SelectionState(combination_ids=ids, included_ids=frozenset(ids))


def toggle(state: SelectionState, combination_id: ID) -> SelectionState:
    """
    Flip one combination in or out.

    Ids that are not part of the current generation (stale clicks after a
    regeneration) leave the state unchanged.
    """
    if combination_id not in state._id_set:
        return state

    if combination_id in state.included_ids:
        included = state.included_ids - {combination_id}
    else:
        included = state.included_ids | {combination_id}
    return SelectionState(combination_ids=state.combination_ids, included_ids=included)


def select_all(state: SelectionState) -> SelectionState:
    return SelectionState(
        combination_ids=state.combination_ids,
        included_ids=frozenset(state.combination_ids),
    )


def deselect_all(state: SelectionState) -> SelectionState:
    return SelectionState(combination_ids=state.combination_ids, included_ids=frozenset())
