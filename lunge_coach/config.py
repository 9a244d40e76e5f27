# lunge_coach/config.py

import logging
import os

import dotenv
dotenv.load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


BACKEND_URL = os.getenv("LUNGE_BACKEND_URL", "http://127.0.0.1:8000").rstrip("/")
CAMERA_INDEX = int(os.getenv("LUNGE_CAMERA_INDEX", "0"))
VOICE_ENABLED = _env_bool("LUNGE_VOICE", True)
COUNTDOWN_SECONDS = int(os.getenv("LUNGE_COUNTDOWN_SECONDS", "5"))
MIN_VISIBILITY = float(os.getenv("LUNGE_MIN_VISIBILITY", "0.0"))
LOG_LEVEL = os.getenv("LUNGE_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
