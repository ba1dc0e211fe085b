import random

from coach.helpers import choose_motivation, extract_keywords, quick_explanation
from planner.i18n import TEXT_COPY


def test_motivation_comes_from_language_phrases():
    rng = random.Random(7)
    for _ in range(10):
        assert choose_motivation("hi", rng) in TEXT_COPY["hi"]["motivation_phrases"]
    assert choose_motivation("en") in TEXT_COPY["en"]["motivation_phrases"]


def test_keywords_are_long_words_without_punctuation():
    assert extract_keywords("Why is photosynthesis important for green plants?") == [
        "photosynthesis",
        "important",
        "green",
        "plants",
    ]


def test_quick_explanation():
    assert quick_explanation("Why is photosynthesis important?", "en") == (
        "Try this: photosynthesis, important in simple words, then "
        "break it into keywords, write a short summary, and test yourself once."
    )


def test_short_question_falls_back_to_itself():
    assert quick_explanation("  why is it  ", "en").startswith("Try this: why is it in simple words")


def test_empty_question():
    assert quick_explanation("   ", "hi") == TEXT_COPY["hi"]["empty_answer"]
