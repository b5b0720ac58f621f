"""
Ollama LLM provider using native ollama-python SDK.
"""

import httpx
import ollama

from codenote.core.llm.base import LLMProvider
from codenote.utils.exceptions import (
    ModelRuntimeError,
    ModelTimeoutError,
    ModelUnavailableError,
    ValidationError,
)
from codenote.utils.logger import get_logger

logger = get_logger(__name__)


class OllamaLLM(LLMProvider):
    """
    Ollama LLM provider for text generation.

    Uses native ollama-python SDK for chat completions.
    """

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.2:3b",
        timeout: float = 120.0,
    ):
        """
        Initialize Ollama LLM provider.

        Args:
            host: Ollama server URL
            model: Model name for text generation (e.g., "llama3.2:3b", "mistral")
            timeout: Request timeout in seconds
        """
        self.host = host
        self.model = model
        self.timeout = timeout

        self.client = ollama.AsyncClient(host=host, timeout=timeout)

    async def complete(
        self,
        prompt: str,
        max_tokens: int = 256,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion using Ollama.

        Args:
            prompt: Input prompt
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature
            **kwargs: Additional options (passed to Ollama)

        Returns:
            Generated text

        Raises:
            ValidationError: If the prompt is empty
            ModelUnavailableError: If the Ollama server is unreachable
            ModelTimeoutError: If the request timed out
            ModelRuntimeError: If Ollama returned an error
        """
        if not prompt or not prompt.strip():
            raise ValidationError("Prompt cannot be empty")

        options = {
            "temperature": temperature,
            "num_predict": max_tokens,
            **kwargs.get("options", {}),
        }
        messages = [{"role": "user", "content": prompt}]

        try:
            response = await self.client.chat(
                model=self.model,
                messages=messages,
                options=options,
                **{k: v for k, v in kwargs.items() if k != "options"},
            )
        except httpx.TimeoutException as e:
            raise ModelTimeoutError(
                f"Ollama request timed out: {e}", context={"model": self.model}
            ) from e
        except (ConnectionError, httpx.ConnectError) as e:
            raise ModelUnavailableError(
                f"Ollama unreachable at {self.host}: {e}", context={"host": self.host}
            ) from e
        except ollama.ResponseError as e:
            logger.bind(model=self.model, status_code=e.status_code).error(
                f"Ollama API error: {e.error}"
            )
            raise ModelRuntimeError(
                f"Ollama API error: {e.error}",
                context={"model": self.model, "status_code": e.status_code},
            ) from e

        return response["message"]["content"]

    async def close(self):
        """Close client (Ollama SDK handles cleanup internally)."""
        pass
