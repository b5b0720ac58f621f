"""
LLM provider abstraction layer for note derivation.

Supported providers:
- Ollama (native SDK)
- OpenAI (official SDK)
- Disabled (no model available, always falls back)
"""
from codenote.core.llm.base import LLMProvider
from codenote.core.llm.disabled import DisabledLLM
from codenote.core.llm.ollama import OllamaLLM
from codenote.core.llm.openai import OpenAILLM
from codenote.core.llm.refusal import REFUSAL_INDICATORS, find_refusal, is_refusal

__all__ = [
    "LLMProvider",
    "OllamaLLM",
    "OpenAILLM",
    "DisabledLLM",
    "REFUSAL_INDICATORS",
    "find_refusal",
    "is_refusal",
]
