import math
from datetime import date, datetime

import pytest
from pydantic import ValidationError

from planner import generate_study_plan
from planner.schemas import PlanDay, PlanSettings
from planner.summary import build_summary, round_half_up
from planner.tasks import build_study_tasks


def test_round_half_up():
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(1.49) == 1


def test_summary_with_no_days(today):
    summary = build_summary([], today)
    assert summary.total_tasks == 0
    assert summary.total_days == 0
    assert summary.tasks_per_day == 0
    assert summary.exam_countdown == 0


def test_countdown_never_negative():
    days = [PlanDay(date="2026-10-10T00:00:00", readable_date="", focus_message="", tasks=[])]
    assert build_summary(days, date(2026, 10, 18)).exam_countdown == 0


def test_exam_today_two_topics(make_profile, full_pace, today):
    plan = generate_study_plan(make_profile([("Math", ["A", "B"])], days_out=0), full_pace, today=today)

    assert [len(d.tasks) for d in plan.days] == [2, 0]
    assert all(t.type == "study" for t in plan.days[0].tasks)
    assert plan.summary.total_tasks == 2
    assert plan.summary.total_days == 2
    assert plan.summary.tasks_per_day == 1
    assert plan.summary.exam_countdown == 1


def test_two_week_plan_summary(make_profile, full_pace, today):
    topics = [f"Topic {i}" for i in range(20)]
    plan = generate_study_plan(make_profile([("Physics", topics)], days_out=13, daily_hours=2), full_pace, today=today)

    assert plan.summary.total_days == 14
    assert plan.summary.total_tasks == 21  # 20 topics + one weekly recap
    assert plan.summary.tasks_per_day == 2  # 1.5 rounds up
    assert plan.summary.exam_countdown == 13


def test_gentle_single_hour_still_progresses(make_profile, today):
    profile = make_profile([("Art", ["A", "B", "C"])], days_out=0, daily_hours=1)
    plan = generate_study_plan(profile, PlanSettings(lighten_factor=0.75), today=today)

    study_per_day = [sum(1 for t in d.tasks if t.type == "study") for d in plan.days]
    assert study_per_day == [1, 1, 1]
    assert plan.days[-1].tasks[-1].id == "revision-2"
    assert plan.summary.exam_countdown == 2


def test_no_subjects_gives_generic_days(make_profile, full_pace, today):
    plan = generate_study_plan(make_profile([], days_out=3), full_pace, today=today)

    assert plan.summary.total_days == 4
    assert plan.summary.total_tasks == 0
    assert plan.days[0].focus_message == "Use today for light revision and stay confident."


def test_same_inputs_same_plan(make_profile, full_pace, today):
    profile = make_profile([("Math", ["A", "B", "C"]), ("Bio", [])], days_out=9, daily_hours=2)

    first = generate_study_plan(profile, full_pace, today=today)
    second = generate_study_plan(profile, full_pace, today=today)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert first.days[0] is not second.days[0]


def test_defaults_to_the_real_today(make_profile, full_pace):
    plan = generate_study_plan(make_profile([("Math", ["A"])], exam_date=""), full_pace)
    assert plan.days[0].date == datetime.combine(date.today(), datetime.min.time()).isoformat()


SCENARIOS = [
    (0, 3, 1, [("Math", ["A", "B"])]),
    (13, 2, 1, [("Physics", [f"T{i}" for i in range(20)])]),
    (3, 1, 0.75, [("Math", [f"M{i}" for i in range(9)]), ("Bio", [])]),
    (20, 4, 0.75, [("Math", []), ("Bio", []), ("Chem", ["x", " ", "y"])]),
    (6, 1.5, 1, [("Hist", [f"H{i}" for i in range(30)])]),
    (2, 8, 1, [("A", [f"a{i}" for i in range(40)]), ("B", ["b"])]),
]


@pytest.mark.parametrize("days_out, hours, factor, subjects", SCENARIOS)
def test_plan_invariants(make_profile, today, days_out, hours, factor, subjects):
    profile = make_profile(subjects, days_out=days_out, daily_hours=hours)
    settings = PlanSettings(lighten_factor=factor)
    plan = generate_study_plan(profile, settings, today=today)
    days = plan.days
    capacity = max(1, math.floor(hours * factor))

    # at least today → exam
    assert len(days) >= max(1, days_out) + 1

    # every derived task placed exactly once
    derived = [t.id for t in build_study_tasks(profile)]
    placed = [t.id.rsplit("-d", 1)[0] for d in days for t in d.tasks if t.type == "study"]
    assert placed == derived

    ids = [t.id for d in days for t in d.tasks]
    assert len(ids) == len(set(ids))

    for index, day in enumerate(days):
        study = [t for t in day.tasks if t.type == "study"]
        assert sum(t.estimated_hours for t in study) <= capacity
        assert all(t.week_index == index // 7 for t in day.tasks)
        for task in day.tasks:
            if task.type == "revision":
                assert index % 7 == 6 or index == len(days) - 1
                assert study

    last = datetime.fromisoformat(days[-1].date).date()
    assert plan.summary.exam_countdown == max(0, (last - today).days)
    assert plan.summary.total_tasks == len(ids)


def test_returned_plan_cannot_be_changed(make_profile, full_pace, today):
    plan = generate_study_plan(make_profile([("Math", ["A", "B"])], days_out=6, daily_hours=1), full_pace, today=today)

    assert isinstance(plan.days, tuple)
    assert isinstance(plan.days[0].tasks, tuple)
    with pytest.raises(ValidationError):
        plan.days[0].focus_message = "changed"
    with pytest.raises(ValidationError):
        plan.summary.total_tasks = 0
    with pytest.raises(AttributeError):
        plan.days[0].tasks.append(plan.days[0].tasks[0])
