"""
Web compile configuration
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Web build settings"""

    # Toolchain identity
    ENGINE_REVISION: str = "unknown"
    FRAMEWORK_VERSION: str = "unknown"

    # Build reports (web_build_report.json); disabled when unset
    REPORT_OUTPUT_DIR: str | None = None

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
