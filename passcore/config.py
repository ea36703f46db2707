"""Library configuration from environment."""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Project root (parent of passcore/)
ROOT_DIR = Path(__file__).resolve().parent.parent

# Load .env from the project root
load_dotenv(str(ROOT_DIR / ".env"))

BUNDLED_CORPUS = Path(__file__).resolve().parent / "data" / "common_passwords.txt"

LOG_LEVEL = os.environ.get("PASSCORE_LOG_LEVEL", "WARNING").upper()


def corpus_path() -> Optional[Path]:
    """Alternative wordlist (e.g. the full NCSC 100k list), or None for the bundled one."""
    raw = os.environ.get("PASSCORE_CORPUS_PATH", "").strip()
    return Path(raw).expanduser() if raw else None
