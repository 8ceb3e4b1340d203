"""
Settings Module (v1.0.0)
Centralized configuration from environment variables.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment variables."""

    # API Keys
    openai_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None

    # Provider call limits
    provider_timeout_s: float = 60.0

    # Upload limits (the dashboard accepts images up to 4MB)
    max_image_mb: float = 4.0

    # Observability
    logging_enabled: bool = True
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            # API Keys
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            gemini_api_key=os.getenv("GEMINI_API_KEY"),

            # Provider call limits
            provider_timeout_s=float(os.getenv("LUCENT_PROVIDER_TIMEOUT", "60")),

            # Upload limits
            max_image_mb=float(os.getenv("LUCENT_MAX_IMAGE_MB", "4")),

            # Observability
            logging_enabled=os.getenv("LUCENT_LOGGING_ENABLED", "true").lower() == "true",
            log_dir=os.getenv("LUCENT_LOG_DIR"),
        )

    @property
    def max_image_bytes(self) -> int:
        return int(self.max_image_mb * 1024 * 1024)

    @property
    def timeout(self) -> Optional[float]:
        """Provider timeout in seconds, or None when disabled."""
        return self.provider_timeout_s if self.provider_timeout_s > 0 else None

    def has_openai(self) -> bool:
        """Check if OpenAI API key is configured."""
        return bool(self.openai_api_key)

    def has_gemini(self) -> bool:
        """Check if Gemini API key is configured."""
        return bool(self.gemini_api_key)

    def to_dict(self) -> dict:
        """Export settings as dict (without sensitive keys)."""
        return {
            "provider_timeout_s": self.provider_timeout_s,
            "max_image_mb": self.max_image_mb,
            "logging_enabled": self.logging_enabled,
            "openai_configured": self.has_openai(),
            "gemini_configured": self.has_gemini(),
        }


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.info(f"Settings loaded: {_settings.to_dict()}")
    return _settings


def reload_settings() -> Settings:
    """Force reload settings from environment."""
    global _settings
    _settings = Settings.from_env()
    logger.info(f"Settings reloaded: {_settings.to_dict()}")
    return _settings


# Singleton instance
_settings: Optional[Settings] = None
