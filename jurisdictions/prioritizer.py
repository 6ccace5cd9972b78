"""
Action plan prioritization.

Merged actions are bucketed by priority and, within each bucket, sorted by
deadline (earliest first, missing or unparseable deadlines last), then
effort band (shortest first), then title.

Actions whose deadline has already passed are escalated to CRITICAL and
flagged as overdue. When a launch date is known, each dated action is
annotated with how its deadline relates to launch.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from shared.models import ActionPlan, ActionPriority, MergedAction

logger = logging.getLogger(__name__)

OVERDUE_PREFIX = "[OVERDUE — compliance required immediately] "

EFFORT_ORDER: Dict[str, int] = {
    "1-2 weeks": 1,
    "2-4 weeks": 2,
    "3-6 weeks": 3,
    "4-8 weeks": 4,
    "4-12 weeks": 5,
    "6-12 weeks": 6,
}
DEFAULT_EFFORT_RANK = 3


def parse_deadline(deadline: Optional[str]) -> Optional[date]:
    """Parse an ISO date (or datetime) string; None when absent or invalid."""
    if not deadline:
        return None
    try:
        return date.fromisoformat(deadline[:10])
    except ValueError:
        return None


def effort_rank(effort: Optional[str]) -> int:
    if effort is None:
        return DEFAULT_EFFORT_RANK
    return EFFORT_ORDER.get(effort, DEFAULT_EFFORT_RANK)


def _sort_key(item: MergedAction) -> Tuple[int, date, int, str]:
    deadline = parse_deadline(item.requirement.deadline)
    return (
        0 if deadline else 1,
        deadline or date.max,
        effort_rank(item.requirement.estimated_effort),
        item.requirement.title.casefold(),
    )


def annotate_overdue(
    actions: Iterable[MergedAction],
    today: Optional[date] = None,
) -> List[MergedAction]:
    """Escalate actions whose deadline is before ``today`` to CRITICAL."""
    today = today or datetime.now().date()
    annotated: List[MergedAction] = []
    for item in actions:
        deadline = parse_deadline(item.requirement.deadline)
        if deadline is None or deadline >= today:
            annotated.append(item)
            continue
        logger.debug(f"Action {item.requirement.id} overdue since {deadline.isoformat()}")
        requirement = item.requirement.model_copy(
            update={
                "description": OVERDUE_PREFIX + item.requirement.description,
                "priority": ActionPriority.CRITICAL,
            }
        )
        annotated.append(item.model_copy(update={"requirement": requirement}))
    return annotated


def annotate_launch_date(
    actions: Iterable[MergedAction],
    launch_date: str,
) -> List[MergedAction]:
    """
    Append a note on each dated action relating its deadline to launch.

    An unparseable launch date leaves the actions untouched.
    """
    items = list(actions)
    launch = parse_deadline(launch_date)
    if launch is None:
        logger.warning(f"Ignoring unparseable launch date: {launch_date!r}")
        return items

    annotated: List[MergedAction] = []
    for item in items:
        deadline = parse_deadline(item.requirement.deadline)
        if deadline is None:
            annotated.append(item)
            continue
        days = (deadline - launch).days
        note = (
            " [DEADLINE PASSED relative to launch date]"
            if days <= 0
            else f" [{days} days before launch deadline]"
        )
        requirement = item.requirement.model_copy(
            update={"description": item.requirement.description + note}
        )
        annotated.append(item.model_copy(update={"requirement": requirement}))
    return annotated


def bucket_by_priority(actions: Sequence[MergedAction]) -> ActionPlan:
    """Split into priority buckets and sort each bucket."""
    buckets: Dict[ActionPriority, List[MergedAction]] = {p: [] for p in ActionPriority}
    for item in actions:
        buckets[item.priority].append(item)
    return ActionPlan(
        critical=sorted(buckets[ActionPriority.CRITICAL], key=_sort_key),
        important=sorted(buckets[ActionPriority.IMPORTANT], key=_sort_key),
        recommended=sorted(buckets[ActionPriority.RECOMMENDED], key=_sort_key),
    )


def prioritize_actions(
    actions: Sequence[MergedAction],
    today: Optional[date] = None,
    launch_date: Optional[str] = None,
) -> ActionPlan:
    """
    Build a prioritized action plan from merged actions.

    Args:
        actions: Deduplicated actions (see ``dedup.merge_actions``)
        today: Reference date for overdue detection (defaults to today)
        launch_date: Optional planned launch date for deadline notes

    Returns:
        ActionPlan with critical, important and recommended buckets
    """
    annotated = annotate_overdue(actions, today)
    if launch_date:
        annotated = annotate_launch_date(annotated, launch_date)
    plan = bucket_by_priority(annotated)
    logger.info(
        f"Action plan: {len(plan.critical)} critical, {len(plan.important)} important, "
        f"{len(plan.recommended)} recommended"
    )
    return plan
