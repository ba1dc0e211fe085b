"""Global configuration — paths, env vars.

Copy .env.example → .env in the project root to override any of these.
"""

import os
from dotenv import load_dotenv

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # backend/
PROJECT_DIR = os.path.dirname(BASE_DIR)  # project root

# Load .env from project root (overrides any system env vars with same name)
load_dotenv(os.path.join(PROJECT_DIR, ".env"), override=True)

# ─── Plan modes ──────────────────────────────────────────────
# Multiplier applied to daily hours when the student asks for a lighter plan.
GENTLE_LIGHTEN_FACTOR = float(os.environ.get("GENTLE_LIGHTEN_FACTOR", 0.75))
NORMAL_LIGHTEN_FACTOR = 1.0

# ─── Profile defaults ────────────────────────────────────────
SUPPORTED_LANGUAGES = ("en", "hi")


def _supported_language(value: str) -> str:
    return value if value in SUPPORTED_LANGUAGES else "en"


DEFAULT_LANGUAGE = _supported_language(os.environ.get("DEFAULT_LANGUAGE", "en"))
DEFAULT_DAILY_HOURS = float(os.environ.get("DEFAULT_DAILY_HOURS", 3))

# ─── Logging ─────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
# Empty → console only
LOG_FILE = os.environ.get("LOG_FILE", "")
