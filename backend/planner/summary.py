from __future__ import annotations

import math
from datetime import date, datetime

from planner.schemas import PlanDay, PlanSummary


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def build_summary(days: list[PlanDay], today: date) -> PlanSummary:
    total_tasks = sum(len(day.tasks) for day in days)
    total_days = len(days)
    tasks_per_day = round_half_up(total_tasks / total_days) if total_days else total_tasks

    exam_countdown = 0
    if days:
        last_day = datetime.fromisoformat(days[-1].date).date()
        exam_countdown = max(0, (last_day - today).days)

    return PlanSummary(
        total_tasks=total_tasks,
        total_days=total_days,
        tasks_per_day=tasks_per_day,
        exam_countdown=exam_countdown,
    )
