"""Environment configuration"""
import os
import logging
from functools import lru_cache
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Backend connection and runtime settings"""
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_jwt_secret: Optional[str] = None
    jwt_audience: str = "authenticated"
    database_url: str
    db_echo: bool = False
    log_level: str = "INFO"
    display_timezone: str = "UTC"

    @classmethod
    def from_env(cls) -> "Settings":
        database_url = os.getenv("DATABASE_URL")
        if not database_url:
            database_url = (
                f"postgresql+asyncpg://{os.getenv('DB_USER', 'postgres')}:{os.getenv('DB_PASSWORD', '')}"
                f"@{os.getenv('DB_HOST', 'localhost')}:{os.getenv('DB_PORT', '5432')}/{os.getenv('DB_NAME', 'postgres')}"
            )
        return cls(
            supabase_url=os.getenv("SUPABASE_URL", "").rstrip("/"),
            supabase_anon_key=os.getenv("SUPABASE_ANON_KEY", ""),
            supabase_jwt_secret=os.getenv("SUPABASE_JWT_SECRET") or None,
            jwt_audience=os.getenv("JWT_AUDIENCE", "authenticated"),
            database_url=database_url,
            db_echo=os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            display_timezone=os.getenv("DISPLAY_TIMEZONE", "UTC"),
        )

    def backend_problems(self) -> List[str]:
        """List what is wrong with the backend connection values (empty when usable)."""
        problems = []
        if not self.supabase_url or not self.supabase_anon_key:
            problems.append("Missing backend configuration. Required: SUPABASE_URL, SUPABASE_ANON_KEY")
        if self.supabase_url and not self.supabase_url.startswith("https://"):
            problems.append("SUPABASE_URL must be a valid HTTPS URL starting with https://")
        return problems

    @property
    def backend_configured(self) -> bool:
        return not self.backend_problems()


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def log_configuration_problems(settings: Settings) -> None:
    """Report configuration problems without stopping the service."""
    for problem in settings.backend_problems():
        logger.error(problem)
