"""
Centralized Configuration System
Environment-aware settings for the inference engine and the brief service.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow"
    )
    """
    Operational configuration.
    Scoring constants (threshold, evidence weight, saturation cap) are not
    configurable: the merge invariants depend on them.
    """

    # ============================================
    # INFERENCE CONTEXT
    # ============================================
    history_window_size: int = 3           # Prior messages combined with the current one
    conversation_history_limit: int = 6    # Messages remembered per draft
    max_message_length: int = 5000         # Longer messages are truncated before inference
    enable_platform_mention_boost: bool = True

    # ============================================
    # LOGGING
    # ============================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    enable_structured_logging: bool = False  # Set to True for production JSON logs

    # ============================================
    # ENVIRONMENT
    # ============================================
    environment: Literal["development", "staging", "production"] = "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Singleton pattern for settings.
    Uses LRU cache to ensure only one Settings instance exists.
    """
    return Settings()


# Convenience accessor for common use
settings = get_settings()
