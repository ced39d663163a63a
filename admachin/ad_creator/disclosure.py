"""
Preview disclosure policy for generated combinations.

Small generations are previewed automatically. Large ones stay collapsed
until the user asks for the preview, since rendering thousands of cards at
once stalls the page.
"""

from dataclasses import dataclass
from enum import Enum

AUTO_PREVIEW_LIMIT = 100


class PreviewStatus(str, Enum):
    """Why the preview is (or is not) shown"""
    INCOMPLETE_SELECTION = "incomplete_selection"
    AUTO = "auto"
    NEEDS_CONFIRMATION = "needs_confirmation"


@dataclass(frozen=True)
class PreviewDecision:
    status: PreviewStatus
    show_preview: bool

    @property
    def needs_manual_trigger(self) -> bool:
        """True while the "Generate Preview" action should be offered."""
        return self.status == PreviewStatus.NEEDS_CONFIRMATION and not self.show_preview


def decide_preview(
    total: int,
    preview_requested: bool = False,
    limit: int = AUTO_PREVIEW_LIMIT,
) -> PreviewDecision:
    """
    Decide whether the combination preview is rendered.

    Args:
        total: Number of combinations in the current generation
        preview_requested: User explicitly asked for the preview of this generation
        limit: Largest generation previewed without asking

    Returns:
        PreviewDecision. ``total == 0`` means at least one pool is empty and is
        reported as INCOMPLETE_SELECTION, never as an empty preview.
    """
    if total <= 0:
        return PreviewDecision(PreviewStatus.INCOMPLETE_SELECTION, show_preview=False)
    if total <= limit:
        return PreviewDecision(PreviewStatus.AUTO, show_preview=True)
    return PreviewDecision(PreviewStatus.NEEDS_CONFIRMATION, show_preview=preview_requested)
