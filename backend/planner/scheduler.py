"""
Day allocator with deterministic greedy-fill.
Pours the derived tasks into calendar days from today until the exam,
growing the plan past the exam date instead of dropping anything.
"""
from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta

from planner.i18n import focus_message, format_readable_date
from planner.schemas import PlanDay, PlanSettings, PlanTask, StudentProfile

logger = logging.getLogger(__name__)

# Anything below this is treated as "no room left" for the day.
MIN_REMAINING_HOURS = 0.5


def resolve_exam_date(exam_date: str, today: date) -> date:
    """Parse the exam date; empty, unparsable or past dates fall back to today."""
    if not exam_date:
        return today
    try:
        parsed = datetime.fromisoformat(exam_date.strip().replace("Z", "+00:00")).date()
    except ValueError:
        logger.warning("Unparsable exam date %r, planning from today", exam_date)
        return today
    if parsed < today:
        logger.info("Exam date %s is in the past, planning from today", parsed)
        return today
    return parsed


def daily_capacity(profile: StudentProfile, settings: PlanSettings) -> int:
    """Whole task-hours per day; never below 1 so every day makes progress."""
    return max(1, math.floor(profile.daily_hours * settings.lighten_factor))


def _day_iso(day: date) -> str:
    return datetime.combine(day, time.min).isoformat()


def allocate_tasks_to_days(
    tasks: list[PlanTask],
    profile: StudentProfile,
    settings: PlanSettings,
    language: str,
    today: date,
) -> list[PlanDay]:
    """
    Fills days in order, one task pointer across the whole plan.
    A day's focus message is taken from the task under the pointer when the
    day is created, not from what ends up placed in it.
    """
    exam = resolve_exam_date(profile.exam_date, today)
    total_days_initial = max(1, (exam - today).days) + 1
    capacity = daily_capacity(profile, settings)

    days: list[PlanDay] = []
    placed: list[list[PlanTask]] = []  # per day, parallel to days
    task_pointer = 0

    def _new_day(day: date) -> PlanDay:
        focus_subject = tasks[task_pointer].subject if task_pointer < len(tasks) else ""
        return PlanDay(
            date=_day_iso(day),
            readable_date=format_readable_date(day, language),
            focus_message=focus_message(focus_subject, language),
            tasks=(),
        )

    for i in range(total_days_initial):
        days.append(_new_day(today + timedelta(days=i)))
        placed.append([])

    day_index = 0
    while task_pointer < len(tasks):
        if day_index >= len(days):
            last_date = datetime.fromisoformat(days[-1].date).date()
            days.append(_new_day(last_date + timedelta(days=1)))
            placed.append([])
        day_tasks = placed[day_index]
        remaining = capacity

        while remaining >= MIN_REMAINING_HOURS and task_pointer < len(tasks):
            task = tasks[task_pointer]
            planned = task.model_copy(update={
                "id": f"{task.id}-d{day_index}",
                "week_index": day_index // 7,
            })
            day_tasks.append(planned)
            remaining -= planned.estimated_hours
            task_pointer += 1

        day_index += 1

    if len(days) > total_days_initial:
        logger.info(
            "Plan extended by %d day(s) past the exam to fit %d tasks at %d/day",
            len(days) - total_days_initial, len(tasks), capacity,
        )
    days = [day.model_copy(update={"tasks": tuple(day_tasks)}) for day, day_tasks in zip(days, placed)]
    logger.debug(
        "Allocated %d tasks over %d days (exam=%s, capacity=%d)",
        len(tasks), len(days), exam.isoformat(), capacity,
    )
    return days
