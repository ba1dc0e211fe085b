"""Weekly recap injection."""

from __future__ import annotations

import logging

from planner.i18n import revision_label, weekly_recap_title
from planner.schemas import PlanDay, PlanTask

logger = logging.getLogger(__name__)

# A day already holding this many tasks gets no recap.
MAX_TASKS_FOR_REVISION = 3


def _is_revision_day(days: list[PlanDay], day_index: int) -> bool:
    day = days[day_index]
    if not any(t.type == "study" for t in day.tasks):
        return False
    return day_index % 7 == 6 or day_index == len(days) - 1


def _covered_subjects(days: list[PlanDay], day_index: int) -> list[str]:
    """Distinct study subjects from the start of this week up to day_index, first seen first."""
    start_of_week = day_index - (day_index % 7)
    covered: dict[str, None] = {}
    for day in days[start_of_week:day_index + 1]:
        for task in day.tasks:
            if task.type == "study":
                covered.setdefault(task.subject, None)
    return list(covered)


def inject_weekly_revision(days: list[PlanDay], language: str) -> None:
    """Adds a recap task to each week's last day and to the final plan day, replacing those days in the list."""
    for day_index, day in enumerate(days):
        if len(day.tasks) >= MAX_TASKS_FOR_REVISION:
            continue
        if not _is_revision_day(days, day_index):
            continue

        subjects = _covered_subjects(days, day_index)
        if not subjects:
            continue

        recap = PlanTask(
            id=f"revision-{day_index}",
            subject=revision_label(language),
            title=weekly_recap_title(subjects, language),
            type="revision",
            estimated_hours=1,
            week_index=day_index // 7,
        )
        days[day_index] = day.model_copy(update={"tasks": day.tasks + (recap,)})
        logger.debug("Weekly recap on day %d covering %s", day_index, subjects)
