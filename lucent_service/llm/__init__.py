# LLM module (v1.0.0)
from lucent_service.llm.llm_adapter import (
    LLMClient, ProviderError, get_llm_client, get_analyst_client,
    get_image_client, reset_llm_clients
)
from lucent_service.llm import style_insight, identity_alignment, content_compass, outfit_visualizer
