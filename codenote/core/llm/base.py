"""
Abstract base class for LLM providers.
Handles plain text generation for note derivation.
"""

from abc import ABC, abstractmethod


class LLMProvider(ABC):
    """
    Abstract base for LLM text generation providers.

    Responsibilities:
    - Answer a single prompt with generated text
    - Translate provider failures into LLMError subclasses
    """

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        max_tokens: int = 256,
        temperature: float = 0.0,
        **kwargs,
    ) -> str:
        """
        Generate completion from prompt.

        Args:
            prompt: The input prompt (instructions followed by note content)
            max_tokens: Maximum tokens to generate
            temperature: Sampling temperature (0.0 = deterministic, 1.0 = creative)
            **kwargs: Provider-specific parameters

        Returns:
            Generated text

        Raises:
            ModelUnavailableError: If the backend cannot be reached
            ModelTimeoutError: If the backend timed out
            ModelRuntimeError: If the backend failed while generating
        """
        pass

    @abstractmethod
    async def close(self):
        """
        Close any open connections.
        Optional to override if provider needs cleanup.
        """
