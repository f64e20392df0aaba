import os

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    def __init__(self):
        self.app_name = "PayTrack"
        self.api_version = "1.0.0"
        self.environment = os.getenv("PAYTRACK_ENV", "development")
        self.secret_key = os.getenv("PAYTRACK_SECRET_KEY", "CHANGE_ME")
        self.SECRET_KEY = self.secret_key
        self.access_token_expire_minutes = int(os.getenv("PAYTRACK_ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.access_token_expire_minutes
        self.database_url = os.getenv("PAYTRACK_DATABASE_URL", "sqlite:///./paytrack.db")
        self.cors_origins = _split_csv(
            os.getenv("PAYTRACK_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
        )
        self.log_level = os.getenv("PAYTRACK_LOG_LEVEL", "INFO").upper()
        self.upcoming_days = int(os.getenv("PAYTRACK_UPCOMING_DAYS", "30"))
        self.default_admin_username = os.getenv("PAYTRACK_DEFAULT_ADMIN_USERNAME", "admin")
        self.default_admin_password = os.getenv("PAYTRACK_DEFAULT_ADMIN_PASSWORD", "")


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
