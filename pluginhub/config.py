from pydantic_settings import BaseSettings
from pathlib import Path

# Get the repository root directory (parent of pluginhub directory)
REPO_ROOT = Path(__file__).parent.parent.absolute()

class Settings(BaseSettings):
    """Application settings."""

    # API settings
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_RELOAD: bool = True

    # Version and environment
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Document store (apps, versions, system plugin customizations)
    DATABASE_URL: str = f"sqlite+aiosqlite:///{REPO_ROOT / 'storage' / 'pluginhub.db'}"

    # Static registry of community/commercial plugins
    SYSTEM_PLUGIN_FILE: str = str(REPO_ROOT / "data" / "system_plugins.json")

    class Config:
        env_file = ".env"

settings = Settings()
