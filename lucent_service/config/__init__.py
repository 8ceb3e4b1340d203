# Config module (v1.0.0)
from lucent_service.config.settings import get_settings, reload_settings, Settings
from lucent_service.config.llm_config import (
    LLMProvider,
    LLMRole,
    OpenAIConfig,
    GeminiConfig,
    ActiveLLMConfig,
    get_llm_config,
    get_analyst_config,
    get_image_config,
    get_all_configs_dict,
    is_role_configured,
    reset_llm_config,
)
