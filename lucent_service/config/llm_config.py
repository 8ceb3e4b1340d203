"""
LLM Configuration Layer (v1.0.0)
Model-agnostic config for the Analyst (structured text/vision) and
Image (garment rendering) roles.

Environment Variables:
  ANALYST (style insight, alignment, compass, outfit identification):
    - LUCENT_LLM_PROVIDER: "gemini" | "openai" (default: gemini)
    - LUCENT_LLM_MODEL: Override default model (optional)

  IMAGE (outfit visualizer garment renders):
    - LUCENT_IMAGE_PROVIDER: "gemini" | "openai" (default: gemini)
    - LUCENT_IMAGE_MODEL: Override default model (optional)

  Shared:
    - LUCENT_LLM_TEMPERATURE, LUCENT_LLM_MAX_TOKENS
"""
import os
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


# ==================== ENUMS ====================

class LLMProvider(Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    GEMINI = "gemini"


class LLMRole(Enum):
    """LLM usage role."""
    ANALYST = "analyst"  # Structured JSON from text or photos
    IMAGE = "image"      # Image generation


# ==================== PROVIDER CONFIGS ====================

@dataclass
class OpenAIConfig:
    """OpenAI model configuration."""
    default_model: str = "gpt-4o-mini"
    image_model: str = "gpt-image-1"
    temperature: float = 0.7
    max_tokens: int = 2500


@dataclass
class GeminiConfig:
    """Gemini model configuration."""
    default_model: str = "gemini-2.0-flash"
    image_model: str = "gemini-2.0-flash-preview-image-generation"
    temperature: float = 0.7
    max_tokens: int = 2500


# ==================== ACTIVE CONFIG ====================

@dataclass
class ActiveLLMConfig:
    """Active LLM configuration for a specific role."""
    role: LLMRole
    provider: LLMProvider
    model: str
    temperature: float
    max_tokens: int

    @classmethod
    def from_env(cls, role: LLMRole = LLMRole.ANALYST) -> "ActiveLLMConfig":
        """Resolve configuration from environment variables."""

        if role == LLMRole.IMAGE:
            provider_env = "LUCENT_IMAGE_PROVIDER"
            model_env = "LUCENT_IMAGE_MODEL"
        else:
            provider_env = "LUCENT_LLM_PROVIDER"
            model_env = "LUCENT_LLM_MODEL"

        provider_str = os.getenv(provider_env, "gemini").lower()

        if provider_str == "openai":
            provider = LLMProvider.OPENAI
            defaults = OpenAIConfig()
        else:
            provider = LLMProvider.GEMINI
            defaults = GeminiConfig()

        default_model = defaults.image_model if role == LLMRole.IMAGE else defaults.default_model
        model = os.getenv(model_env, default_model)
        temperature = float(os.getenv("LUCENT_LLM_TEMPERATURE", str(defaults.temperature)))
        max_tokens = int(os.getenv("LUCENT_LLM_MAX_TOKENS", str(defaults.max_tokens)))

        config = cls(
            role=role,
            provider=provider,
            model=model,
            temperature=temperature,
            max_tokens=max_tokens
        )

        logger.info(f"LLM Config [{role.value}]: provider={provider.value}, model={model}")
        return config

    def is_openai(self) -> bool:
        return self.provider == LLMProvider.OPENAI

    def is_gemini(self) -> bool:
        return self.provider == LLMProvider.GEMINI

    def api_key_env(self) -> str:
        return "OPENAI_API_KEY" if self.is_openai() else "GEMINI_API_KEY"

    def to_dict(self) -> dict:
        return {
            "role": self.role.value,
            "provider": self.provider.value,
            "model": self.model,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens
        }


# ==================== SINGLETON INSTANCES ====================

_configs: dict = {}


def get_llm_config(role: LLMRole = LLMRole.ANALYST) -> ActiveLLMConfig:
    """Get active LLM configuration for a role."""
    if role not in _configs:
        _configs[role] = ActiveLLMConfig.from_env(role)
    return _configs[role]


def get_analyst_config() -> ActiveLLMConfig:
    """Get analyst (structured output) config."""
    return get_llm_config(LLMRole.ANALYST)


def get_image_config() -> ActiveLLMConfig:
    """Get image generation config."""
    return get_llm_config(LLMRole.IMAGE)


def reset_llm_config():
    """Reset all configs (for testing)."""
    _configs.clear()


def get_all_configs_dict() -> dict:
    """Get all configs as dict for /health endpoint."""
    return {
        "analyst": get_analyst_config().to_dict(),
        "image": get_image_config().to_dict()
    }


def is_role_configured(role: LLMRole) -> bool:
    """Check that the API key for a role's provider is present."""
    return bool(os.getenv(get_llm_config(role).api_key_env()))
