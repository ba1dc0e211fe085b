"""User-visible copy for the two supported languages, plus date labels."""

from __future__ import annotations

from datetime import date
from typing import Iterable

TEXT_COPY = {
    "en": {
        "app_title": "Calm Study Buddy",
        "plan_title": "Your steady plan",
        "focus": "Focus on {subject} and take short breaks.",
        "light_day": "Use today for light revision and stay confident.",
        "revision_subject": "Revision",
        "weekly_recap": "Weekly recap: {subjects}",
        "gentle_mode_note": "Plan lightened. Tasks are spaced out so you can breathe easier.",
        "normal_mode_note": "Full pace restored. Stay steady and take breaks.",
        "overload_detected": "Looks intense. Daily tasks were trimmed to stay within your hours.",
        "weekly_revision": "Weekly revision added automatically.",
        "todays_focus": "Today's focus",
        "progress": "Nice! You finished {done} out of {total} tasks.",
        "motivation_title": "Little boost",
        "motivation_phrases": [
            "You're moving forward. Keep the rhythm gentle and steady.",
            "Small wins add up. Celebrate each finished task.",
            "Deep breath. One topic at a time does the magic.",
            "You're doing better than you think. Trust your effort.",
        ],
        "empty_answer": "Ask anything and I'll keep it short.",
        "answer": "Try this: {keywords} in simple words, then {tip}",
        "answer_tip": "break it into keywords, write a short summary, and test yourself once.",
    },
    "hi": {
        "app_title": "Calm Study Buddy",
        "plan_title": "आपकी स्थिर योजना",
        "focus": "{subject} पर ध्यान रखें और छोटे-छोटे ब्रेक लें।",
        "light_day": "आज हल्का दोहराव करें और आत्मविश्वास रखें।",
        "revision_subject": "दोहराव",
        "weekly_recap": "सप्ताह का पुनरावलोकन: {subjects}",
        "gentle_mode_note": "योजना हल्की कर दी गई है। कार्यों को आराम से फैलाया गया है।",
        "normal_mode_note": "फिर से सामान्य गति पर। ध्यान से पढ़ें और छोटे ब्रेक लें।",
        "overload_detected": "थोड़ा सघन था। कार्यों को आपकी समय सीमा में ढाल दिया गया है।",
        "weekly_revision": "साप्ताहिक पुनरावलोकन अपने आप जुड़ता रहेगा।",
        "todays_focus": "आज का फोकस",
        "progress": "{done} में से {total} कार्य पूरे किए।",
        "motivation_title": "छोटी प्रेरणा",
        "motivation_phrases": [
            "आप आगे बढ़ रहे हैं। लय को शांत और लगातार रखें।",
            "छोटी जीतें जुड़कर बड़ी सफलता बनती हैं।",
            "गहरी सांस लें। एक विषय पर ध्यान, और काम पूरा।",
            "आप सोच से बेहतर कर रहे हैं। अपने प्रयास पर भरोसा रखें।",
        ],
        "empty_answer": "कुछ भी पूछें, मैं छोटा जवाब दूंगा।",
        "answer": "ऐसा करें: {keywords} को सरल शब्दों में लिखें और {tip}",
        "answer_tip": "इसे मुख्य शब्दों में बाँटें, एक छोटा सार लिखें, और खुद से एक प्रश्न पूछें।",
    },
}

# Monday first, matching date.weekday()
_WEEKDAYS = {
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
    "hi": ["सोम", "मंगल", "बुध", "गुरु", "शुक्र", "शनि", "रवि"],
}
_MONTHS = {
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sept", "Oct", "Nov", "Dec"],
    "hi": ["जन॰", "फ़र॰", "मार्च", "अप्रैल", "मई", "जून", "जुल॰", "अग॰", "सित॰", "अक्तू॰", "नव॰", "दिस॰"],
}


def text_for(language: str) -> dict:
    """Copy table for a language; anything unknown falls back to English."""
    return TEXT_COPY.get(language, TEXT_COPY["en"])


def format_readable_date(day: date, language: str) -> str:
    """Short Indian-style label, e.g. 'Sun, 18 Oct'."""
    lang = language if language in _WEEKDAYS else "en"
    weekday = _WEEKDAYS[lang][day.weekday()]
    month = _MONTHS[lang][day.month - 1]
    return f"{weekday}, {day.day} {month}"


def focus_message(subject: str, language: str) -> str:
    copy = text_for(language)
    if subject:
        return copy["focus"].format(subject=subject)
    return copy["light_day"]


def revision_label(language: str) -> str:
    return text_for(language)["revision_subject"]


def weekly_recap_title(subjects: Iterable[str], language: str) -> str:
    return text_for(language)["weekly_recap"].format(subjects=", ".join(subjects))
