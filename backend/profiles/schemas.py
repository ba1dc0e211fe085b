"""Profile intake schemas."""

from pydantic import BaseModel, Field
from typing import List, Literal

from planner.schemas import Language
from server.config import DEFAULT_DAILY_HOURS, DEFAULT_LANGUAGE

PlanMode = Literal["normal", "gentle"]


class SubjectFormState(BaseModel):
    id: str
    name: str = ""
    topics_text: str = ""  # one task per line, commas also split


class ProfileForm(BaseModel):
    grade: str = ""
    exam_date: str = ""
    daily_hours: float = Field(default=DEFAULT_DAILY_HOURS, allow_inf_nan=False)
    language: Language = DEFAULT_LANGUAGE
    subjects: List[SubjectFormState] = []
