"""
Configuration management for File Diff Finder.
Loads settings from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


class Settings:
    """Application settings loaded from environment."""

    # Application
    APP_NAME: str = "File Diff Finder"
    APP_VERSION: str = "1.0.0"

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    # Baseline file, fixed for the process lifetime
    FILE_CONTENT: str = os.getenv("FILE_CONTENT", "")
    FILE_VERSION: int = int(os.getenv("FILE_VERSION", "1"))

    # Diff execution
    # Deadline for a single diff request, in seconds
    DIFF_TIMEOUT_SECONDS: float = float(os.getenv("DIFF_TIMEOUT_SECONDS", "3.0"))
    DIFF_POLL_INTERVAL_SECONDS: float = float(os.getenv("DIFF_POLL_INTERVAL_SECONDS", "0.01"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> list[str]:
        """Validate settings. Returns list of invalid settings."""
        issues = []

        if cls.FILE_VERSION <= 0:
            issues.append("FILE_VERSION must be a positive integer")

        if cls.DIFF_TIMEOUT_SECONDS <= 0:
            issues.append("DIFF_TIMEOUT_SECONDS must be positive")

        if cls.DIFF_POLL_INTERVAL_SECONDS <= 0:
            issues.append("DIFF_POLL_INTERVAL_SECONDS must be positive")

        if not cls.FILE_CONTENT:
            issues.append("FILE_CONTENT is empty - every diff will report only added characters")

        return issues


settings = Settings()
