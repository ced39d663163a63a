"""
Ad Creator State - the caller-owned aggregate behind the ad creator screen.

Holds the four selection pools, the project/subproject scope and everything
derived from them:
- combinations: regenerated whenever any pool changes
- selection: reset to "all included" on every regeneration
- window: reset to the first page on every regeneration
- preview_requested: cleared on every regeneration

Every transition returns a new state; nothing is mutated in place, so a
rendered generation and a freshly produced one never alias.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from . import selection as sel
from .combinations import ID, AdCombination, generate_combinations
from .commit import CommitContext, CreateAds, commit_combinations
from .disclosure import AUTO_PREVIEW_LIMIT, PreviewDecision, decide_preview
from .window import PAGE_SIZE, RenderWindow


class SelectionFlavor(str, Enum):
    """The four selection pools"""
    CREATIVES = "creatives"
    HEADLINES = "headlines"
    PRIMARY = "primary"
    DESCRIPTIONS = "descriptions"


_POOL_FIELDS = {
    SelectionFlavor.CREATIVES: "creative_ids",
    SelectionFlavor.HEADLINES: "headline_ids",
    SelectionFlavor.PRIMARY: "primary_ids",
    SelectionFlavor.DESCRIPTIONS: "description_ids",
}


# Marks an omitted subproject in with_scope
_KEEP = object()


def _ordered_unique(ids: Iterable[ID]) -> Tuple[ID, ...]:
    return tuple(dict.fromkeys(ids))


@dataclass(frozen=True)
class AdCreatorState:
    """
    State of one ad creator session.

    Lifecycle:
        1. Start with AdCreatorState() (or cleared())
        2. Each user interaction calls one transition and stores the result
        3. begin_commit() / end_commit() bracket the bulk create call
    """

    # === SCOPE ===
    project_id: Optional[str] = None
    subproject_id: Optional[str] = None

    # === SELECTION POOLS ===
    creative_ids: Tuple[ID, ...] = ()
    headline_ids: Tuple[ID, ...] = ()
    primary_ids: Tuple[ID, ...] = ()
    description_ids: Tuple[ID, ...] = ()

    # === DERIVED FROM THE POOLS ===
    combinations: Tuple[AdCombination, ...] = ()
    selection: sel.SelectionState = field(default_factory=sel.SelectionState)
    window: RenderWindow = field(default_factory=lambda: RenderWindow.start(0))
    preview_requested: bool = False

    # === PREVIEW POLICY ===
    auto_preview_limit: int = AUTO_PREVIEW_LIMIT
    page_size: int = PAGE_SIZE

    # === COMMIT ===
    is_saving: bool = False

    # ------------------------------------------------------------------
    # Pools
    # ------------------------------------------------------------------

    def pool(self, flavor: SelectionFlavor) -> Tuple[ID, ...]:
        return getattr(self, _POOL_FIELDS[SelectionFlavor(flavor)])

    def with_selection(self, flavor: SelectionFlavor, ids: Iterable[ID]) -> "AdCreatorState":
        """Replace one pool and regenerate."""
        changed = replace(self, **{_POOL_FIELDS[SelectionFlavor(flavor)]: _ordered_unique(ids)})
        return changed._regenerated()

    def add_item(self, flavor: SelectionFlavor, item_id: ID) -> "AdCreatorState":
        current = self.pool(flavor)
        if item_id in current:
            return self
        return self.with_selection(flavor, current + (item_id,))

    def remove_item(self, flavor: SelectionFlavor, item_id: ID) -> "AdCreatorState":
        current = self.pool(flavor)
        if item_id not in current:
            return self
        return self.with_selection(flavor, [i for i in current if i != item_id])

    def _regenerated(self) -> "AdCreatorState":
        combinations = generate_combinations(
            self.creative_ids, self.headline_ids, self.primary_ids, self.description_ids
        )
        return replace(
            self,
            combinations=combinations,
            selection=sel.reset_selection(combinations),
            window=RenderWindow.start(len(combinations), self.page_size),
            preview_requested=False,
        )

    # ------------------------------------------------------------------
    # Scope
    # ------------------------------------------------------------------

    def with_scope(self, project_id: Optional[str], subproject_id: Any = _KEEP) -> "AdCreatorState":
        """
        Change project/subproject.

        An explicit subproject_id (None included) is always applied. When it is
        omitted, a different project clears the subproject and the same project
        keeps it.
        """
        if subproject_id is _KEEP:
            subproject_id = self.subproject_id if project_id == self.project_id else None
        return replace(self, project_id=project_id, subproject_id=subproject_id)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def toggle(self, combination_id: ID) -> "AdCreatorState":
        return replace(self, selection=sel.toggle(self.selection, combination_id))

    def select_all(self) -> "AdCreatorState":
        return replace(self, selection=sel.select_all(self.selection))

    def deselect_all(self) -> "AdCreatorState":
        return replace(self, selection=sel.deselect_all(self.selection))

    def toggle_all(self) -> "AdCreatorState":
        """Select-all checkbox: deselect when everything is selected, else select all."""
        return self.deselect_all() if self.selection.all_selected else self.select_all()

    # ------------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------------

    @property
    def preview(self) -> PreviewDecision:
        return decide_preview(
            len(self.combinations),
            preview_requested=self.preview_requested,
            limit=self.auto_preview_limit,
        )

    def request_preview(self) -> "AdCreatorState":
        if not self.combinations:
            return self
        return replace(self, preview_requested=True)

    def load_more(self) -> "AdCreatorState":
        """Proximity signal from the bottom of the preview grid."""
        window = self.window.on_proximity_signal()
        if window is self.window:
            return self
        return replace(self, window=window)

    @property
    def visible_combinations(self) -> Tuple[AdCombination, ...]:
        if not self.preview.show_preview:
            return ()
        return self.window.visible(self.combinations)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    @property
    def included_combinations(self) -> List[AdCombination]:
        return [c for c in self.combinations if self.selection.is_included(c.id)]

    @property
    def can_commit(self) -> bool:
        return self.selection.included_count > 0 and not self.is_saving

    def begin_commit(self) -> Optional["AdCreatorState"]:
        """
        Mark a commit as in flight.

        Returns None when a commit is already running or nothing is selected;
        the caller must not start another bulk create in that case.
        """
        if not self.can_commit:
            return None
        return replace(self, is_saving=True)

    def end_commit(self) -> "AdCreatorState":
        return replace(self, is_saving=False)

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def cleared(self) -> "AdCreatorState":
        """Fresh state keeping only the preview policy (modal closed)."""
        return AdCreatorState(
            auto_preview_limit=self.auto_preview_limit,
            page_size=self.page_size,
            window=RenderWindow.start(0, self.page_size),
        )

    @property
    def has_all_pools(self) -> bool:
        return all(self.pool(flavor) for flavor in SelectionFlavor)

    def summary(self) -> str:
        """
        Human readable combination count.

        Example:
            "2 × 3 × 1 × 2 = 12 combinations"
        """
        counts = " × ".join(str(len(self.pool(flavor))) for flavor in SelectionFlavor)
        return f"{counts} = {len(self.combinations)} combinations"

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot for logging and CLI JSON output."""
        return {
            "project_id": self.project_id,
            "subproject_id": self.subproject_id,
            "creative_ids": list(self.creative_ids),
            "headline_ids": list(self.headline_ids),
            "primary_ids": list(self.primary_ids),
            "description_ids": list(self.description_ids),
            "total_combinations": len(self.combinations),
            "included_count": self.selection.included_count,
            "visible_count": self.window.visible_count,
            "preview_status": self.preview.status.value,
            "is_saving": self.is_saving,
        }


async def commit_session(
    load: Callable[[], AdCreatorState],
    store: Callable[[AdCreatorState], None],
    user_id: Optional[str],
    create_ads: CreateAds,
) -> Optional[int]:
    """
    Run one guarded bulk commit against a stored session state.

    The saving flag is stored before the bulk-create call and always cleared
    afterwards, including when the call fails or the run is interrupted.

    Args:
        load: Reads the current state (e.g. from st.session_state)
        store: Writes a new state back
        user_id: Owner stamped on each created ad
        create_ads: Async bulk-create collaborator

    Returns:
        Number of ads created, or None when a commit was already in flight
        or nothing is selected.

    Raises:
        BulkCommitError: If the bulk-create call fails
    """
    saving = load().begin_commit()
    if saving is None:
        return None
    store(saving)

    context = CommitContext(
        user_id=user_id,
        project_id=saving.project_id,
        subproject_id=saving.subproject_id,
    )
    try:
        return await commit_combinations(
            saving.combinations,
            saving.selection.included_ids,
            context,
            create_ads,
        )
    finally:
        store(load().end_commit())
