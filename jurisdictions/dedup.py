"""
Cross-jurisdiction deduplication.

Requirement lists from several JurisdictionResults are merged into a single
view keyed by requirement id:

  - attribution: every jurisdiction that produced the id, first-seen order,
    no duplicates
  - winner: the occurrence with strictly the highest priority; on a tie the
    first-seen occurrence is kept

For actions priority is CRITICAL > IMPORTANT > RECOMMENDED. For artifacts a
required artifact beats an optional one.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence, Tuple, TypeVar

from shared.models import (
    ActionRequirement,
    ArtifactRequirement,
    JurisdictionResult,
    MergedAction,
    MergedArtifact,
)

T = TypeVar("T")


def merge_by_id(
    occurrences: Iterable[Tuple[str, T]],
    key: Callable[[T], str],
    outranks: Callable[[T, T], bool],
) -> List[Tuple[T, List[str]]]:
    """
    Generic dedup-and-prioritize reduction.

    Args:
        occurrences: (jurisdiction, item) pairs in iteration order
        key: Identifier shared by the same requirement across jurisdictions
        outranks: True if the first item strictly beats the second

    Returns:
        (winning item, jurisdictions) per id, in first-seen id order
    """
    winners: Dict[str, T] = {}
    attribution: Dict[str, List[str]] = {}

    for jurisdiction, item in occurrences:
        item_id = key(item)
        if item_id not in winners:
            winners[item_id] = item
            attribution[item_id] = [jurisdiction]
            continue
        if jurisdiction not in attribution[item_id]:
            attribution[item_id].append(jurisdiction)
        if outranks(item, winners[item_id]):
            winners[item_id] = item

    return [(winners[item_id], attribution[item_id]) for item_id in winners]


def _action_occurrences(results: Sequence[JurisdictionResult]) -> Iterable[Tuple[str, ActionRequirement]]:
    for result in results:
        for action in result.all_actions:
            yield result.jurisdiction, action


def _artifact_occurrences(results: Sequence[JurisdictionResult]) -> Iterable[Tuple[str, ArtifactRequirement]]:
    for result in results:
        for artifact in result.required_artifacts:
            yield result.jurisdiction, artifact


def merge_actions(results: Sequence[JurisdictionResult]) -> List[MergedAction]:
    """Deduplicate actions across jurisdictions, keeping the highest priority."""
    merged = merge_by_id(
        _action_occurrences(results),
        key=lambda a: a.id,
        outranks=lambda a, b: a.priority.outranks(b.priority),
    )
    return [
        MergedAction(
            requirement=action.model_copy(update={"jurisdictions": jurisdictions}),
            jurisdictions=jurisdictions,
        )
        for action, jurisdictions in merged
    ]


def merge_artifacts(results: Sequence[JurisdictionResult]) -> List[MergedArtifact]:
    """Deduplicate artifacts across jurisdictions; required beats optional."""
    merged = merge_by_id(
        _artifact_occurrences(results),
        key=lambda a: a.id,
        outranks=lambda a, b: a.required and not b.required,
    )
    return [
        MergedArtifact(requirement=artifact, jurisdictions=jurisdictions)
        for artifact, jurisdictions in merged
    ]
