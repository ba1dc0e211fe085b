"""Planner — turns a student profile into a day-by-day study plan."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from planner.revision import inject_weekly_revision
from planner.scheduler import allocate_tasks_to_days
from planner.schemas import GeneratedPlan, PlanSettings, StudentProfile
from planner.summary import build_summary
from planner.tasks import build_study_tasks

logger = logging.getLogger(__name__)


def generate_study_plan(
    profile: StudentProfile,
    settings: PlanSettings,
    today: Optional[date] = None,
) -> GeneratedPlan:
    """
    Derive tasks, pour them into days, add weekly recaps, summarise.
    `today` is read once; pass it explicitly for reproducible plans.
    """
    if today is None:
        today = date.today()

    tasks = build_study_tasks(profile)
    days = allocate_tasks_to_days(tasks, profile, settings, profile.language, today)
    inject_weekly_revision(days, profile.language)

    plan = GeneratedPlan(days=days, summary=build_summary(days, today))
    logger.info(
        "Generated plan: %d tasks over %d days (%d/day), %d day(s) to go",
        plan.summary.total_tasks, plan.summary.total_days,
        plan.summary.tasks_per_day, plan.summary.exam_countdown,
    )
    return plan
