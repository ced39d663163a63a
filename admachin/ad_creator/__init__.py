"""
Ad Creator - combination generation, selection and commit.

Pure functions and immutable state; the Streamlit page and the CLI own the
state objects and call the service layer for reads and writes.
"""

from .combinations import AdCombination, combination_id, generate_combinations
from .selection import SelectionState, reset_selection
from .disclosure import AUTO_PREVIEW_LIMIT, PreviewDecision, PreviewStatus, decide_preview
from .window import PAGE_SIZE, RenderWindow
from .commit import BulkCommitError, CommitContext, commit_combinations
from .state import AdCreatorState, SelectionFlavor, commit_session

__all__ = [
    "AdCombination",
    "combination_id",
    "generate_combinations",
    "SelectionState",
    "reset_selection",
    "AUTO_PREVIEW_LIMIT",
    "PreviewDecision",
    "PreviewStatus",
    "decide_preview",
    "PAGE_SIZE",
    "RenderWindow",
    "BulkCommitError",
    "CommitContext",
    "commit_combinations",
    "AdCreatorState",
    "SelectionFlavor",
    "commit_session",
]
