"""Planner schemas."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Tuple

Language = Literal["en", "hi"]
PlanTaskType = Literal["study", "revision"]


class SubjectDetails(BaseModel):
    id: str
    name: str
    topics: List[str] = []


class StudentProfile(BaseModel):
    grade: str
    exam_date: str = ""
    daily_hours: float = Field(gt=0, allow_inf_nan=False)
    language: Language = "en"
    subjects: List[SubjectDetails] = []


class PlanSettings(BaseModel):
    lighten_factor: float = Field(default=1.0, gt=0, le=1)


class PlanTask(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    subject: str
    title: str
    type: PlanTaskType
    estimated_hours: float = 1
    week_index: int = 0


class PlanDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: str  # local midnight, YYYY-MM-DDT00:00:00
    readable_date: str
    focus_message: str
    tasks: Tuple[PlanTask, ...] = ()


class PlanSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_tasks: int
    total_days: int
    tasks_per_day: int
    exam_countdown: int


class GeneratedPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    days: Tuple[PlanDay, ...]
    summary: PlanSummary
