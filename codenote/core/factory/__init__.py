"""
Factory modules for creating CodeNote components.
"""

from codenote.core.factory.llm_factory import LLMFactory

__all__ = [
    "LLMFactory",
]
