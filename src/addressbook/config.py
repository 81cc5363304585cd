"""Settings read from the environment, after loading .env from the repo root or cwd."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/addressbook/config.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REGION = "SG"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    default_region: str | None = DEFAULT_REGION
    seed_path: Path | None = None


def load_env() -> None:
    """Load the first .env found (repo root, then current dir). Existing env vars win."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


def load_settings() -> Settings:
    load_env()
    level = os.environ.get("ADDRESSBOOK_LOG_LEVEL", "").strip().upper()
    if level not in VALID_LEVELS:
        level = DEFAULT_LOG_LEVEL
    region = os.environ.get("ADDRESSBOOK_DEFAULT_REGION", DEFAULT_REGION).strip().upper()
    seed = os.environ.get("ADDRESSBOOK_SEED_PATH", "").strip()
    return Settings(
        log_level=level,
        default_region=region or None,
        seed_path=Path(seed).expanduser() if seed else None,
    )
