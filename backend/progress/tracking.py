"""
Completion tracking on top of a generated plan.
The state is a plain value; hosts decide where (and whether) to keep it.
"""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Iterable, Optional

from planner import generate_study_plan
from planner.i18n import text_for
from planner.schemas import GeneratedPlan
from planner.summary import round_half_up
from profiles.intake import settings_for_mode
from progress.schemas import ProgressReport, StoredState

logger = logging.getLogger(__name__)


def dump_state(state: StoredState) -> str:
    return state.model_dump_json()


def load_state(raw: str) -> StoredState:
    return StoredState.model_validate_json(raw)


def restore_plan(state: StoredState, today: Optional[date] = None) -> GeneratedPlan:
    """Plans are never stored; they are regenerated from the stored profile."""
    return generate_study_plan(state.profile, settings_for_mode(state.plan_mode), today=today)


def toggle_task(completed: Iterable[str], task_id: str) -> set[str]:
    updated = set(completed)
    if task_id in updated:
        updated.discard(task_id)
    else:
        updated.add(task_id)
    return updated


def reset_progress() -> set[str]:
    return set()


def plan_task_ids(plan: GeneratedPlan) -> set[str]:
    return {task.id for day in plan.days for task in day.tasks}


def progress_report(plan: GeneratedPlan, completed: Iterable[str], daily_hours: float) -> ProgressReport:
    """
    Counts only ids that exist in this plan: switching plan mode renumbers the
    day suffixes, which would otherwise leave stale ticks in the count.
    """
    ids = plan_task_ids(plan)
    completed = set(completed)
    stale = completed - ids
    if stale:
        logger.debug("Ignoring %d completed id(s) not in the current plan", len(stale))

    done = len(completed & ids)
    total = plan.summary.total_tasks
    percent = round_half_up(done * 100 / total) if total else 0
    return ProgressReport(
        completed=done,
        total=total,
        percent=percent,
        overloaded=plan.summary.tasks_per_day > math.ceil(daily_hours),
    )


def progress_line(report: ProgressReport, language: str) -> str:
    return text_for(language)["progress"].format(done=report.completed, total=report.total)
