"""
OpenAI LLM provider using official SDK.
"""

import openai
from openai import AsyncOpenAI

from codenote.core.llm.base import LLMProvider
from codenote.utils.exceptions import (
    ModelRuntimeError,
    ModelTimeoutError,
    ModelUnavailableError,
    ValidationError,
)
from codenote.utils.logger import get_logger

logger = get_logger(__name__)


class OpenAILLM(LLMProvider):
    """
    OpenAI LLM provider for text generation.

    Works with any OpenAI-compatible chat completions endpoint.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        organization: str | None = None,
        base_url: str | None = None,
        timeout: float = 120.0,
    ):
        """
        Initialize OpenAI LLM provider.

        Args:
            api_key: OpenAI API key
            model: Model name (e.g., "gpt-4o", "gpt-4o-mini")
            organization: Optional organization ID
            base_url: Optional custom base URL
            timeout: Request timeout in seconds
        """
        self.model = model

        self.client = AsyncOpenAI(
            api_key=api_key, organization=organization, base_url=base_url, timeout=timeout
        )

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 256,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion using OpenAI.

        Args:
            prompt: Input prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional parameters (e.g., stop, presence_penalty)
        Returns:
            Generated text
        Raises:
            ValidationError: If the prompt is empty
            ModelTimeoutError: If the request timed out
            ModelUnavailableError: If the endpoint cannot be reached
            ModelRuntimeError: If the API call fails or returns no content
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        params = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
            "max_tokens": max_tokens,
            **kwargs,
        }

        try:
            response = await self.client.chat.completions.create(**params)
        except openai.APITimeoutError as e:
            raise ModelTimeoutError(
                f"OpenAI request timed out: {e}", context={"model": self.model}
            ) from e
        except openai.APIConnectionError as e:
            raise ModelUnavailableError(
                f"OpenAI endpoint unreachable: {e}", context={"model": self.model}
            ) from e
        except Exception as e:
            # SDK messages carry braces; bind context instead of format kwargs
            logger.bind(model=self.model, error_type=type(e).__name__).error(
                f"OpenAI API error: {e}"
            )
            raise ModelRuntimeError(
                f"OpenAI API error: {e}",
                context={"model": self.model, "error_type": type(e).__name__},
            ) from e

        content = response.choices[0].message.content
        if not content:
            raise ModelRuntimeError("OpenAI returned empty content", context={"model": self.model})

        return content

    async def close(self):
        """Close OpenAI client."""
        await self.client.close()
