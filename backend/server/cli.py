"""
Command line host for the planner.

  calm-study-buddy plan profile.json [--gentle] [--today 2026-10-18] [--json]
  calm-study-buddy restore state.json [--today ...] [--json]
  calm-study-buddy explain "Why is photosynthesis important?" [--language hi]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from coach.helpers import choose_motivation, quick_explanation
from planner import generate_study_plan
from planner.i18n import text_for
from planner.schemas import GeneratedPlan, StudentProfile
from profiles.intake import ProfileValidationError, build_profile, settings_for_mode
from profiles.schemas import PlanMode, ProfileForm
from progress.tracking import load_state, progress_line, progress_report, restore_plan
from server.config import DEFAULT_LANGUAGE
from server.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def render_plan(
    plan: GeneratedPlan,
    profile: StudentProfile,
    mode: PlanMode,
    completed: Iterable[str] = (),
    motivation: Optional[str] = None,
) -> str:
    copy = text_for(profile.language)
    done = set(completed)
    report = progress_report(plan, done, profile.daily_hours)

    lines = [f"# {copy['app_title']}", f"## {copy['plan_title']}", ""]
    lines.append(copy["gentle_mode_note"] if mode == "gentle" else copy["normal_mode_note"])
    if report.overloaded:
        lines.append(copy["overload_detected"])
    lines.append(copy["weekly_revision"])
    lines.append(progress_line(report, profile.language))
    lines.append("")

    for day in plan.days:
        lines.append(f"### {day.readable_date}")
        lines.append(f"{copy['todays_focus']}: {day.focus_message}")
        for task in day.tasks:
            mark = "x" if task.id in done else " "
            lines.append(f"- [{mark}] {task.subject}: {task.title}")
        lines.append("")

    if motivation:
        lines.append(f"{copy['motivation_title']}: {motivation}")
    return "\n".join(lines).rstrip() + "\n"


def _parse_today(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value) if value else None


def _emit(plan: GeneratedPlan, profile: StudentProfile, mode: PlanMode, completed, as_json: bool) -> None:
    if as_json:
        print(plan.model_dump_json(indent=2))
    else:
        print(render_plan(plan, profile, mode, completed, choose_motivation(profile.language)), end="")


def cmd_plan(args: argparse.Namespace) -> int:
    form = ProfileForm.model_validate_json(Path(args.profile).read_text(encoding="utf-8"))
    profile = build_profile(form)
    mode: PlanMode = "gentle" if args.gentle else "normal"
    plan = generate_study_plan(profile, settings_for_mode(mode), today=_parse_today(args.today))
    _emit(plan, profile, mode, (), args.json)
    return 0


def cmd_restore(args: argparse.Namespace) -> int:
    state = load_state(Path(args.state).read_text(encoding="utf-8"))
    plan = restore_plan(state, today=_parse_today(args.today))
    _emit(plan, state.profile, state.plan_mode, state.completed, args.json)
    return 0


def cmd_explain(args: argparse.Namespace) -> int:
    print(quick_explanation(args.question, args.language))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calm-study-buddy", description="A gentle exam study planner.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_plan = sub.add_parser("plan", help="Build a plan from a profile form JSON file")
    p_plan.add_argument("profile", help="Path to the profile JSON")
    p_plan.add_argument("--gentle", action="store_true", help="Lighten the daily load")
    p_plan.add_argument("--today", help="Plan as if today were this date (YYYY-MM-DD)")
    p_plan.add_argument("--json", action="store_true", help="Print the plan as JSON")
    p_plan.set_defaults(func=cmd_plan)

    p_restore = sub.add_parser("restore", help="Rebuild a plan from a saved state JSON file")
    p_restore.add_argument("state", help="Path to the state JSON")
    p_restore.add_argument("--today", help="Plan as if today were this date (YYYY-MM-DD)")
    p_restore.add_argument("--json", action="store_true", help="Print the plan as JSON")
    p_restore.set_defaults(func=cmd_restore)

    p_explain = sub.add_parser("explain", help="Get a quick study tip for a question")
    p_explain.add_argument("question")
    p_explain.add_argument("--language", choices=["en", "hi"], default=DEFAULT_LANGUAGE)
    p_explain.set_defaults(func=cmd_explain)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ProfileValidationError, ValidationError) as e:
        logger.error("Invalid input: %s", e)
        return 1
    except OSError as e:
        logger.error("Could not read input: %s", e)
        return 1
    except ValueError as e:
        # bad --today
        logger.error("Invalid value: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
