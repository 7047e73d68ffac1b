# config.py
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env, if present
load_dotenv()

BASE_DIR = Path(__file__).parent


class Settings:
    """Application settings, read from the process environment."""

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Flat JSON file acting as the task database
    tasks_file: Path = Path(os.getenv("TASKS_FILE", str(BASE_DIR / "tasks.json")))
    # Frontend assets; only mounted when the directory exists
    public_dir: Path = Path(os.getenv("PUBLIC_DIR", str(BASE_DIR / "public")))


settings = Settings()


def get_settings() -> Settings:
    """Get settings instance."""
    return settings
