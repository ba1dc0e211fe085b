"""Progress schemas."""

from pydantic import BaseModel
from typing import List

from planner.schemas import StudentProfile
from profiles.schemas import PlanMode


class StoredState(BaseModel):
    """Everything a host needs to rebuild the plan and the tick marks."""
    profile: StudentProfile
    plan_mode: PlanMode = "normal"
    completed: List[str] = []


class ProgressReport(BaseModel):
    completed: int
    total: int
    percent: int
    overloaded: bool
