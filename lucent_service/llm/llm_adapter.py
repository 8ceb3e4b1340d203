"""
LLM Initialization Adapter (v1.0.0)
Unified provider client for structured JSON, photo analysis and image generation.

Supports both Gemini and OpenAI providers with role-based configuration.
"""
import os
import json
import base64
import asyncio
import logging
from typing import Any, Optional, Sequence

from lucent_service.config.llm_config import get_llm_config, LLMRole
from lucent_service.config.settings import get_settings

logger = logging.getLogger(__name__)

JSON_SUFFIX = "\n\nRespond with valid JSON only, no markdown code blocks."
IMAGE_RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


class ProviderError(Exception):
    """Transport, timeout or unusable response from the generation provider."""
    def __init__(self, message: str, provider: Optional[str] = None):
        self.message = message
        self.provider = provider
        super().__init__(message)


class LLMClient:
    """
    Unified LLM client interface for any provider/model.

    Usage:
        client = LLMClient(role=LLMRole.ANALYST)
        client.initialize()
        data = await client.generate_json(system, user, images=[photo])
    """

    def __init__(self, role: LLMRole = LLMRole.ANALYST):
        self.role = role
        self.config = get_llm_config(role)
        self._openai_client = None
        self._gemini_model = None
        self._initialized = False

    @property
    def provider_name(self) -> str:
        return self.config.provider.value

    def initialize(self):
        """Initialize the provider SDK based on configuration."""
        if self.config.is_openai():
            self._init_openai(self.config.model)
        elif self.config.is_gemini():
            self._init_gemini(self.config.model)
        else:
            raise ProviderError(f"Unsupported provider: {self.config.provider}")

        self._initialized = True

    def _init_openai(self, model: str):
        """Initialize OpenAI client."""
        from openai import AsyncOpenAI

        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ProviderError("OPENAI_API_KEY not set", provider="openai")

        self._openai_client = AsyncOpenAI(api_key=api_key)
        logger.info(f"OpenAI [{self.role.value}]: model={model}")

    def _init_gemini(self, model: str):
        """Initialize Gemini client."""
        import google.generativeai as genai

        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ProviderError("GEMINI_API_KEY not set", provider="gemini")

        genai.configure(api_key=api_key)
        self._gemini_model = genai.GenerativeModel(model)
        logger.info(f"Gemini [{self.role.value}]: model={model}")

    async def _call(self, coro):
        """Await a provider coroutine under the configured timeout."""
        timeout = get_settings().timeout
        try:
            return await asyncio.wait_for(coro, timeout=timeout)
        except asyncio.TimeoutError:
            raise ProviderError(
                f"{self.provider_name} timed out after {timeout}s", provider=self.provider_name
            )
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError(
                f"{self.provider_name} request failed: {e}", provider=self.provider_name
            ) from e

    # ==================== STRUCTURED OUTPUT ====================

    async def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        images: Optional[Sequence[Any]] = None
    ) -> Any:
        """
        Generate a JSON response, optionally grounded on photos.

        Args:
            system_prompt: Instructions for the model
            user_prompt: Rendered feature prompt
            images: ImagePayload objects to attach (vision)

        Raises:
            ProviderError: On any transport failure or unparseable output
        """
        if not self._initialized:
            self.initialize()

        if self.config.is_openai():
            text = await self._call(self._generate_openai(system_prompt, user_prompt, images or []))
        else:
            text = await self._call(self._generate_gemini(system_prompt, user_prompt, images or []))

        return self._parse_json(text)

    def _parse_json(self, text: Optional[str]) -> Any:
        """Parse JSON from text, handling markdown code blocks."""
        if not text or not text.strip():
            raise ProviderError("empty response", provider=self.provider_name)

        text = text.strip()

        # Remove markdown code blocks
        if "```json" in text:
            text = text.split("```json")[1].split("```")[0]
        elif "```" in text:
            text = text.split("```")[1].split("```")[0]

        try:
            return json.loads(text.strip())
        except json.JSONDecodeError as e:
            raise ProviderError(f"malformed JSON response: {e}", provider=self.provider_name)

    async def _generate_openai(self, system_prompt: str, user_prompt: str, images: Sequence[Any]) -> str:
        """Generate using OpenAI chat completions (vision via data URIs)."""
        if images:
            user_content: Any = [{"type": "text", "text": user_prompt}]
            for image in images:
                user_content.append({"type": "image_url", "image_url": {"url": image.data_uri}})
        else:
            user_content = user_prompt

        response = await self._openai_client.chat.completions.create(
            model=self.config.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_content}
            ],
            temperature=self.config.temperature,
            max_tokens=self.config.max_tokens,
            response_format={"type": "json_object"}
        )
        return response.choices[0].message.content

    async def _generate_gemini(self, system_prompt: str, user_prompt: str, images: Sequence[Any]) -> str:
        """Generate using Gemini (vision via PIL images)."""
        combined = f"{system_prompt}\n\n{user_prompt}{JSON_SUFFIX}"
        content = [combined] + [image.image for image in images]

        response = await self._gemini_model.generate_content_async(
            content,
            generation_config={
                "temperature": self.config.temperature,
                "max_output_tokens": self.config.max_tokens,
                "response_mime_type": "application/json",
            }
        )
        # .text raises when the candidate was blocked
        return response.text

    # ==================== IMAGE GENERATION ====================

    async def generate_image(self, prompt: str) -> str:
        """
        Generate one image and return it as a data URI.

        Raises:
            ProviderError: If the provider fails or returns no image
        """
        if not self._initialized:
            self.initialize()

        if self.config.is_openai():
            return await self._call(self._generate_image_openai(prompt))
        return await self._call(self._generate_image_gemini(prompt))

    async def _generate_image_openai(self, prompt: str) -> str:
        response = await self._openai_client.images.generate(
            model=self.config.model,
            prompt=prompt,
            size="1024x1024",
            n=1
        )
        image = response.data[0] if response.data else None
        if image is None:
            raise ProviderError("no image returned", provider="openai")
        if getattr(image, "b64_json", None):
            return f"data:image/png;base64,{image.b64_json}"
        if getattr(image, "url", None):
            return image.url
        raise ProviderError("no image returned", provider="openai")

    async def _generate_image_gemini(self, prompt: str) -> str:
        # Image-preview models reject requests that do not ask for the image modality
        response = await self._gemini_model.generate_content_async(
            prompt,
            generation_config={"response_modalities": IMAGE_RESPONSE_MODALITIES}
        )

        candidates = getattr(response, "candidates", None) or []
        if candidates:
            for part in candidates[0].content.parts:
                inline = getattr(part, "inline_data", None)
                if inline is not None and inline.data:
                    data = inline.data
                    if isinstance(data, bytes):
                        data = base64.b64encode(data).decode("ascii")
                    mime = inline.mime_type or "image/png"
                    return f"data:{mime};base64,{data}"

        feedback = getattr(response, "prompt_feedback", None)
        reason = getattr(feedback, "block_reason", None) if feedback else None
        raise ProviderError(f"no image returned (reason: {reason or 'unknown'})", provider="gemini")


# ==================== SINGLETON INSTANCES ====================

_clients: dict = {}


def get_llm_client(role: LLMRole = LLMRole.ANALYST) -> LLMClient:
    """Get initialized LLM client for a role."""
    if role not in _clients:
        client = LLMClient(role=role)
        client.initialize()
        _clients[role] = client
    return _clients[role]


def get_analyst_client() -> LLMClient:
    """Get analyst (structured output) client."""
    return get_llm_client(LLMRole.ANALYST)


def get_image_client() -> LLMClient:
    """Get image generation client."""
    return get_llm_client(LLMRole.IMAGE)


def reset_llm_clients():
    """Reset all clients (for testing)."""
    _clients.clear()
