"""
Ad combination commands for AdMachin CLI

Preview the combinations produced by a set of creatives and ad copies and
create the selected ones as ads.
"""

import asyncio
import json
from typing import Optional, Tuple

import click

from ..ad_creator import (
    AdCreatorState,
    BulkCommitError,
    CommitContext,
    PreviewStatus,
    SelectionFlavor,
    commit_combinations,
)
from ..core.config import Config


def _pool_options(f):
    """Shared --creative/--headline/--primary/--description options."""
    options = [
        click.option('--creative', '-c', 'creatives', multiple=True, required=True, help='Creative ID (repeatable)'),
        click.option('--headline', '-h', 'headlines', multiple=True, required=True, help='Headline copy ID (repeatable)'),
        click.option('--primary', '-p', 'primaries', multiple=True, required=True, help='Primary text copy ID (repeatable)'),
        click.option('--description', '-d', 'descriptions', multiple=True, required=True, help='Description copy ID (repeatable)'),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _build_state(creatives, headlines, primaries, descriptions) -> AdCreatorState:
    state = AdCreatorState(
        auto_preview_limit=Config.AUTO_PREVIEW_LIMIT,
        page_size=Config.PREVIEW_PAGE_SIZE,
    )
    state = state.with_selection(SelectionFlavor.CREATIVES, creatives)
    state = state.with_selection(SelectionFlavor.HEADLINES, headlines)
    state = state.with_selection(SelectionFlavor.PRIMARY, primaries)
    return state.with_selection(SelectionFlavor.DESCRIPTIONS, descriptions)


def _load_labels() -> dict:
    from ..services import AdLibraryService, label_for

    service = AdLibraryService()
    items = list(service.get_creatives()) + list(service.get_ad_copies())
    return {item.id: label_for(item) for item in items}


@click.group('combos')
def combos_group():
    """Build ad combinations from creatives and ad copies"""
    pass


@combos_group.command('preview')
@_pool_options
@click.option('--pages', default=1, show_default=True, type=click.IntRange(min=1), help='Pages of combinations to show')
@click.option('--labels', is_flag=True, help='Resolve names/texts from the library')
@click.option('--output-json', type=click.Path(), help='Export the full combination list to JSON')
def preview_combos(
    creatives: Tuple[str, ...],
    headlines: Tuple[str, ...],
    primaries: Tuple[str, ...],
    descriptions: Tuple[str, ...],
    pages: int,
    labels: bool,
    output_json: Optional[str],
):
    """
    Show how many ads a selection produces and list the first pages.

    Examples:
        admachin combos preview -c cr1 -c cr2 -h h1 -p p1 -d d1 -d d2
        admachin combos preview -c cr1 -h h1 -p p1 -d d1 --pages 3 --labels
    """
    state = _build_state(creatives, headlines, primaries, descriptions)

    click.echo(f"\n📊 {state.summary()}")

    status = state.preview.status
    if status == PreviewStatus.INCOMPLETE_SELECTION:
        click.echo("⚠️  Select at least one item from each category to see combinations")
        return
    if status == PreviewStatus.NEEDS_CONFIRMATION:
        click.echo(f"⚠️  More than {state.auto_preview_limit} combinations; showing the requested pages only")
        state = state.request_preview()

    for _ in range(pages - 1):
        state = state.load_more()

    names = _load_labels() if labels else {}

    click.echo(f"\n{'='*60}")
    for i, combo in enumerate(state.visible_combinations, 1):
        parts = [combo.creative_id, combo.headline_id, combo.primary_id, combo.description_id]
        click.echo(f"{i:>4}. " + " | ".join(names.get(p, p) for p in parts))
    click.echo(f"{'='*60}")

    if state.window.has_more:
        click.echo(f"... {state.window.remaining} more (use --pages to show more)")

    if output_json:
        with open(output_json, 'w') as f:
            json.dump([c.to_dict() for c in state.combinations], f, indent=2)
        click.echo(f"\n📄 Combinations exported to: {output_json}")


@combos_group.command('create')
@_pool_options
@click.option('--user-id', required=True, help='User UUID stamped on created ads')
@click.option('--project-id', default=None, help='Optional project UUID')
@click.option('--subproject-id', default=None, help='Optional subproject UUID')
@click.option('--exclude', '-x', multiple=True, help='Combination ID to leave out (repeatable)')
@click.option('--yes', '-y', is_flag=True, help='Skip confirmation for large batches')
def create_combos(
    creatives: Tuple[str, ...],
    headlines: Tuple[str, ...],
    primaries: Tuple[str, ...],
    descriptions: Tuple[str, ...],
    user_id: str,
    project_id: Optional[str],
    subproject_id: Optional[str],
    exclude: Tuple[str, ...],
    yes: bool,
):
    """
    Create one ad per combination (minus any excluded ones).

    Examples:
        admachin combos create -c cr1 -h h1 -h h2 -p p1 -d d1 --user-id u1
        admachin combos create -c cr1 -h h1 -p p1 -d d1 --user-id u1 -x cr1_h1_p1_d1
    """
    state = _build_state(creatives, headlines, primaries, descriptions)
    state = state.with_scope(project_id, subproject_id)
    for combination_id in exclude:
        if state.selection.is_included(combination_id):
            state = state.toggle(combination_id)

    count = state.selection.included_count
    click.echo(f"\n📊 {state.summary()}")
    click.echo(f"   Selected: {count} of {state.selection.total}")

    if count == 0:
        click.echo("Nothing to create.")
        return

    if count > state.auto_preview_limit and not yes:
        click.confirm(f"Create {count} ads?", abort=True)

    from ..services import AdLibraryService

    service = AdLibraryService()
    context = CommitContext(
        user_id=user_id,
        project_id=state.project_id,
        subproject_id=state.subproject_id,
    )

    try:
        created = asyncio.run(commit_combinations(
            state.combinations,
            state.selection.included_ids,
            context,
            service.create_ads,
        ))
    except BulkCommitError as e:
        click.echo(f"❌ {e}", err=True)
        raise SystemExit(1)

    click.echo(f"✅ Created {created} ads")
