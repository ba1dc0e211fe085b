"""Turns subjects and their topics into a flat list of one-hour study tasks."""

from __future__ import annotations

from planner.schemas import PlanTask, StudentProfile


def _default_topics(subject_name: str) -> list[str]:
    return [
        f"{subject_name} quick notes",
        f"{subject_name} practice set",
        f"{subject_name} recap questions",
    ]


def build_study_tasks(profile: StudentProfile) -> list[PlanTask]:
    """
    One task per non-blank topic, in subject order then topic order.
    Subjects without topics get three generic ones. Blank topics are skipped
    but still consume their index, so ids stay tied to the input position.
    """
    tasks: list[PlanTask] = []
    for subject_index, subject in enumerate(profile.subjects):
        base_topics = subject.topics or _default_topics(subject.name)
        for topic_index, topic in enumerate(base_topics):
            clean_topic = topic.strip()
            if not clean_topic:
                continue
            tasks.append(PlanTask(
                id=f"study-{subject_index}-{topic_index}",
                subject=subject.name,
                title=clean_topic,
                type="study",
                estimated_hours=1,
                week_index=0,
            ))
    return tasks
