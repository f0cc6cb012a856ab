"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "03_data"
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_DB_PATH = DATA_DIR / "bot_state.db"
DEFAULT_LOG_PATH = LOGS_DIR / "bot.log"
DEFAULT_LLM_MODEL = "claude-3-5-sonnet-20241022"


PathLike = Union[str, Path]


def resolve_db_path(env_value: PathLike | None = None) -> PathLike:
    """Resolve DATABASE_URL to an absolute path."""
    if not env_value:
        DATA_DIR.mkdir(parents=True, exist_ok=True)
        return DEFAULT_DB_PATH

    if str(env_value) == ":memory:":
        return ":memory:"

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    db_path: PathLike = DEFAULT_DB_PATH
    log_level: str = "INFO"
    log_file: str = str(DEFAULT_LOG_PATH)
    anthropic_api_key: str | None = None
    llm_model: str = DEFAULT_LLM_MODEL
    native_languages: list[str] = field(default_factory=lambda: ["en"])


def load_settings(env_file: PathLike | None = None) -> Settings:
    """
    Load settings from environment variables.

    Args:
        env_file: Optional .env file. Defaults to PROJECT_ROOT/.env.
                  Variables already set in the environment win.

    Returns:
        Settings instance
    """
    load_dotenv(env_file or PROJECT_ROOT / ".env")

    languages = os.getenv("NATIVE_LANGUAGES", "en")
    return Settings(
        db_path=resolve_db_path(os.getenv("DATABASE_URL")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE", str(DEFAULT_LOG_PATH)),
        anthropic_api_key=os.getenv("ANTHROPIC_API_KEY"),
        llm_model=os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL),
        native_languages=[lang.strip() for lang in languages.split(",") if lang.strip()],
    )
