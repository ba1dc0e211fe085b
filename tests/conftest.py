from datetime import date, timedelta

import pytest

from planner.schemas import PlanSettings, StudentProfile, SubjectDetails

TODAY = date(2026, 10, 18)  # a Sunday


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def make_profile():
    def _make(subjects=(), days_out=0, daily_hours=3, language="en", exam_date=None):
        if exam_date is None:
            exam_date = (TODAY + timedelta(days=days_out)).isoformat()
        return StudentProfile(
            grade="Grade 10",
            exam_date=exam_date,
            daily_hours=daily_hours,
            language=language,
            subjects=[
                SubjectDetails(id=f"subject-{i}", name=name, topics=list(topics))
                for i, (name, topics) in enumerate(subjects)
            ],
        )
    return _make


@pytest.fixture
def full_pace():
    return PlanSettings(lighten_factor=1)
