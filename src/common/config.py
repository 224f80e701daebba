"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")

# Environment variable holding the credential for each provider
API_KEY_ENV_VARS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class LLMSettings(BaseModel):
    """LLM API settings.

    Sampling parameters are left to the provider defaults. ``max_tokens`` is
    only sent to Anthropic, whose API requires it.
    """
    gemini_model: str = "gemini-1.5-flash"
    openai_model: str = "gpt-4o"
    anthropic_model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 4096


class Settings(BaseModel):
    """Top-level application settings."""
    llm: LLMSettings = Field(default_factory=LLMSettings)
    default_provider: str = "gemini"
    default_variant: str = "academic"

    @classmethod
    def load(cls) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults."""
        settings_path = CONFIG_DIR / "settings.yaml"
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        return cls()


def get_api_key(provider: str) -> str:
    """Get the API key for a provider from environment.

    Returns an empty string when the variable is unset; callers decide
    whether that is an error.
    """
    env_var = API_KEY_ENV_VARS.get(provider)
    if env_var is None:
        raise ValueError(f"Unknown LLM provider: {provider}")
    return os.getenv(env_var, "").strip()


# Singleton settings instance
settings = Settings.load()
