"""
Unit Tests for action plan prioritization
"""

from datetime import date

import pytest

from jurisdictions import prioritize_actions
from jurisdictions.prioritizer import (
    DEFAULT_EFFORT_RANK,
    OVERDUE_PREFIX,
    annotate_launch_date,
    annotate_overdue,
    effort_rank,
    parse_deadline,
)
from shared.models import ActionPriority, ActionRequirement, MergedAction

TODAY = date(2025, 6, 1)


def _merged(action_id, priority=ActionPriority.IMPORTANT, deadline=None, effort=None, title=None):
    return MergedAction(
        requirement=ActionRequirement(
            id=action_id,
            title=title or action_id,
            description="Do it.",
            priority=priority,
            legal_basis="Law",
            deadline=deadline,
            estimated_effort=effort,
        ),
        jurisdictions=["uk"],
    )


class TestParsing:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2026-02-01", date(2026, 2, 1)),
            ("2026-02-01T00:00:00Z", date(2026, 2, 1)),
            (None, None),
            ("", None),
            ("soon", None),
        ],
    )
    def test_parse_deadline(self, value, expected):
        assert parse_deadline(value) == expected

    def test_effort_rank(self):
        assert effort_rank("1-2 weeks") < effort_rank("4-8 weeks")
        assert effort_rank(None) == DEFAULT_EFFORT_RANK
        assert effort_rank("a while") == DEFAULT_EFFORT_RANK


class TestBucketing:
    def test_buckets_by_priority(self):
        plan = prioritize_actions(
            [
                _merged("r", ActionPriority.RECOMMENDED),
                _merged("c", ActionPriority.CRITICAL),
                _merged("i", ActionPriority.IMPORTANT),
            ],
            today=TODAY,
        )
        assert [m.requirement.id for m in plan.critical] == ["c"]
        assert [m.requirement.id for m in plan.important] == ["i"]
        assert [m.requirement.id for m in plan.recommended] == ["r"]
        assert plan.total == 3

    def test_sort_deadline_then_effort_then_title(self):
        plan = prioritize_actions(
            [
                _merged("undated-b", title="b"),
                _merged("late", deadline="2027-01-01"),
                _merged("undated-a", title="a"),
                _merged("early-long", deadline="2026-01-01", effort="6-12 weeks"),
                _merged("early-short", deadline="2026-01-01", effort="1-2 weeks"),
            ],
            today=TODAY,
        )
        assert [m.requirement.id for m in plan.important] == [
            "early-short",
            "early-long",
            "late",
            "undated-a",
            "undated-b",
        ]


class TestOverdue:
    def test_past_deadline_escalated(self):
        [item] = annotate_overdue([_merged("x", ActionPriority.RECOMMENDED, deadline="2025-01-01")], TODAY)
        assert item.priority is ActionPriority.CRITICAL
        assert item.requirement.description == "[OVERDUE — compliance required immediately] Do it."
        assert item.jurisdictions == ["uk"]

    def test_future_and_today_untouched(self):
        items = annotate_overdue(
            [_merged("a", deadline="2025-06-01"), _merged("b", deadline="2030-01-01"), _merged("c")],
            TODAY,
        )
        assert all(i.priority is ActionPriority.IMPORTANT for i in items)
        assert all(not i.requirement.description.startswith(OVERDUE_PREFIX) for i in items)

    def test_overdue_lands_in_critical_bucket(self):
        plan = prioritize_actions([_merged("x", deadline="2024-01-01")], today=TODAY)
        assert [m.requirement.id for m in plan.critical] == ["x"]
        assert plan.important == []


class TestLaunchDate:
    def test_days_before_launch(self):
        [item] = annotate_launch_date([_merged("x", deadline="2026-01-11")], "2026-01-01")
        assert item.requirement.description.endswith("[10 days before launch deadline]")

    def test_deadline_passed_relative_to_launch(self):
        [item] = annotate_launch_date([_merged("x", deadline="2025-12-01")], "2026-01-01")
        assert item.requirement.description.endswith("[DEADLINE PASSED relative to launch date]")

    def test_undated_and_bad_launch_untouched(self):
        [undated] = annotate_launch_date([_merged("x")], "2026-01-01")
        assert undated.requirement.description == "Do it."
        [dated] = annotate_launch_date([_merged("y", deadline="2026-05-01")], "next spring")
        assert dated.requirement.description == "Do it."
