"""
Configuration management for the travel guide service.
Supports multiple LLM providers: OpenAI, Mistral, OpenRouter, Ollama, Gemini.
"""
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # LLM Configuration
    llm_provider: Literal["openai", "mistral", "openrouter", "ollama", "gemini", "mock"] = "mock"
    llm_api_key: str = "ollama"  # Not needed for Ollama
    llm_base_url: str = ""
    llm_model: str = "gemini-2.5-flash"
    llm_model_fast: str = "gemini-flash-lite-latest"
    llm_model_deep: str = "gemini-3-pro-preview"

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    # LLM Parameters
    llm_temperature: float = 0.7
    llm_max_tokens: int = 4000

    # Saved plans
    plans_file: str = "data/myvication_plans_v1.json"
    legacy_plans_files: list[str] = ["data/wanderguard_plans_v2.json"]
    default_currency: str = "USD"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_llm_config() -> dict:
    """Get LLM configuration based on provider."""
    config = {
        "api_key": settings.llm_api_key,
        "model": settings.llm_model,
        "temperature": settings.llm_temperature,
        "max_tokens": settings.llm_max_tokens,
    }

    # Set base URL based on provider
    if settings.llm_provider == "ollama":
        config["base_url"] = settings.llm_base_url or "http://localhost:11434/v1"
    elif settings.llm_provider == "mistral":
        config["base_url"] = settings.llm_base_url or "https://api.mistral.ai/v1"
    elif settings.llm_provider == "openrouter":
        config["base_url"] = settings.llm_base_url or "https://openrouter.ai/api/v1"
    elif settings.llm_provider == "gemini":
        config["base_url"] = settings.llm_base_url or "https://generativelanguage.googleapis.com/v1beta/openai/"
    else:  # openai
        config["base_url"] = settings.llm_base_url or "https://api.openai.com/v1"

    return config


def get_model_for_mode(plan_mode: str) -> str:
    """Pick the model matching a plan mode (fast, detailed, deep)."""
    if plan_mode == "fast":
        return settings.llm_model_fast
    if plan_mode == "deep":
        return settings.llm_model_deep
    return settings.llm_model
