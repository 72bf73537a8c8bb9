from dotenv import load_dotenv
import os

load_dotenv()

DEFAULT_ADMIN_EMAIL = "admin@aria-creative.com"
DEFAULT_ADMIN_PASSWORD = "admin123"


def get_database_url() -> str:
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise ValueError("DATABASE_URL not found in .env file")
    return database_url


def get_app_env() -> str:
    return os.getenv("APP_ENV", "development")


def get_log_file() -> str | None:
    return os.getenv("LOG_FILE") or None


def get_admin_credentials() -> tuple[str, str]:
    """Admin email and password from the environment, with hardcoded fallbacks."""
    email = os.getenv("ADMIN_EMAIL") or DEFAULT_ADMIN_EMAIL
    password = os.getenv("ADMIN_PASSWORD") or DEFAULT_ADMIN_PASSWORD
    return email, password
