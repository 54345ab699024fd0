"""
LLM Client - Unified interface for multiple LLM providers.
Supports OpenAI, Mistral, OpenRouter, Ollama and Gemini's OpenAI endpoint.
"""
from openai import AsyncOpenAI
from typing import Optional
import logging

from ..config import get_llm_config

logger = logging.getLogger(__name__)


class LLMClient:
    """Async LLM client with OpenAI-compatible API."""

    def __init__(self):
        from ..config import settings
        config = get_llm_config()

        # Use mock client if provider is 'mock'
        if settings.llm_provider == "mock":
            from .mock_llm import MockLLMClient
            self._mock = MockLLMClient()
            self.model = "mock-demo"
            self.temperature = 0.7
            self.max_tokens = 4000
            self.client = None
        else:
            self._mock = None
            self.client = AsyncOpenAI(
                api_key=config["api_key"],
                base_url=config["base_url"]
            )
            self.model = config["model"]
            self.temperature = config["temperature"]
            self.max_tokens = config["max_tokens"]
        logger.info(f"LLM client ready with provider={settings.llm_provider}, model={self.model}")

    async def chat(
        self,
        messages: list[dict],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None
    ) -> str:
        """
        Send a chat completion request.

        Args:
            messages: List of message dicts with 'role' and 'content'
            temperature: Override default temperature
            max_tokens: Override default max tokens
            model: Override the configured model

        Returns:
            The assistant's response content
        """
        # Use mock client if available
        if self._mock is not None:
            return await self._mock.chat(messages, temperature, max_tokens, model)

        response = await self.client.chat.completions.create(
            model=model or self.model,
            messages=messages,
            temperature=temperature or self.temperature,
            max_tokens=max_tokens or self.max_tokens,
        )
        return response.choices[0].message.content or ""


# Global LLM client instance
llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get or create the global LLM client."""
    global llm_client
    if llm_client is None:
        llm_client = LLMClient()
    return llm_client
