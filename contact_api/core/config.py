from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

DEFAULT_TEMPLATE = Path(__file__).resolve().parent.parent / "emails" / "confirmation.html"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Verified "from" identity at Resend, e.g. "Wyn Strategies <contact@wynstrategies.com>"
    email_user: Optional[str] = None
    team_inbox: Optional[str] = None

    # Resend
    resend_api_key: Optional[str] = None
    resend_api_url: str = "https://api.resend.com/emails"
    email_timeout: float = 10.0

    # CORS settings (comma-separated)
    allowed_origins: str = ",".join([
        "https://wynstrategies.com",
        "https://www.wynstrategies.com",
        "https://wyn-strategies.vercel.app",
        "http://localhost:3000",
    ])

    contact_rate_limit: str = "5/15 minutes"
    confirmation_subject: str = "Thank you for reaching out to Wyn Strategies."
    confirmation_template: Optional[str] = None

    port: int = 4000
    app_env: str = "development"
    log_level: str = "INFO"

    @property
    def effective_team_inbox(self) -> Optional[str]:
        """Team inbox, falling back to the sender identity when TEAM_INBOX is unset"""
        return self.team_inbox or self.email_user

    @property
    def origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def template_path(self) -> Path:
        if self.confirmation_template:
            return Path(self.confirmation_template)
        return DEFAULT_TEMPLATE

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"

@lru_cache
def get_settings():
    return Settings()
