"""Small presentation-side helpers: a motivation line and a quick explanation tip."""

from __future__ import annotations

import random
import re
from typing import Optional

from planner.i18n import text_for

_NON_LETTERS = re.compile(r"[^a-zA-Z\u0900-\u097F]")  # keep Latin and Devanagari letters


def choose_motivation(language: str, rng: Optional[random.Random] = None) -> str:
    phrases = text_for(language)["motivation_phrases"]
    return (rng or random).choice(phrases)


def extract_keywords(question: str, limit: int = 4) -> list[str]:
    """First few words longer than 3 characters, stripped of punctuation and digits."""
    words = [word for word in question.split() if len(word) > 3][:limit]
    return [_NON_LETTERS.sub("", word) for word in words]


def quick_explanation(question: str, language: str) -> str:
    copy = text_for(language)
    trimmed = (question or "").strip()
    if not trimmed:
        return copy["empty_answer"]

    keyword_text = ", ".join(extract_keywords(trimmed))
    return copy["answer"].format(keywords=keyword_text or trimmed, tip=copy["answer_tip"])
