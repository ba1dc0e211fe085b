"""Form rows → validated StudentProfile, and back again for editing."""

from __future__ import annotations

import re
import uuid

from planner.schemas import PlanSettings, StudentProfile, SubjectDetails
from profiles.schemas import PlanMode, ProfileForm, SubjectFormState
from server.config import GENTLE_LIGHTEN_FACTOR, NORMAL_LIGHTEN_FACTOR

_TOPIC_SPLIT = re.compile(r"\r?\n|,")


class ProfileValidationError(ValueError):
    """Raised when form input cannot become a StudentProfile."""


def split_topics(topics_text: str) -> list[str]:
    return [line.strip() for line in _TOPIC_SPLIT.split(topics_text or "") if line.strip()]


def build_subject_payload(rows: list[SubjectFormState]) -> list[SubjectDetails]:
    return [
        SubjectDetails(id=row.id, name=row.name.strip(), topics=split_topics(row.topics_text))
        for row in rows
        if row.name.strip()
    ]


def build_profile(form: ProfileForm) -> StudentProfile:
    grade = form.grade.strip()
    if not grade:
        raise ProfileValidationError("Class / grade is required")
    return StudentProfile(
        grade=grade,
        exam_date=form.exam_date,
        daily_hours=form.daily_hours if form.daily_hours > 0 else 1,
        language=form.language,
        subjects=build_subject_payload(form.subjects),
    )


def subjects_to_form(profile: StudentProfile) -> list[SubjectFormState]:
    """Rows for re-editing a stored profile; always at least one row."""
    if not profile.subjects:
        return [SubjectFormState(id="subject-1")]
    return [
        SubjectFormState(
            id=subject.id or str(uuid.uuid4()),
            name=subject.name,
            topics_text="\n".join(subject.topics),
        )
        for subject in profile.subjects
    ]


def settings_for_mode(mode: PlanMode) -> PlanSettings:
    factor = GENTLE_LIGHTEN_FACTOR if mode == "gentle" else NORMAL_LIGHTEN_FACTOR
    return PlanSettings(lighten_factor=factor)
