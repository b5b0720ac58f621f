"""Fixtures for service tests.

Model backends are scripted in-process fakes, so every test here runs
without a network. Fixtures use function scope to avoid event loop issues.
"""

import asyncio

import pytest

from codenote.config import Config, DerivationConfig
from codenote.core.llm.base import LLMProvider
from codenote.services import NoteService, TitleSummaryGenerator


class ScriptedLLM(LLMProvider):
    """
    Fake model that answers from a script.

    Each call pops the next entry; an exception entry is raised instead of
    returned. The last entry repeats once the script is exhausted.
    """

    def __init__(self, *responses):
        self.responses = list(responses) or [""]
        self.calls: list[dict] = []
        self.closed = False

    async def complete(self, prompt: str, max_tokens: int = 256, temperature: float = 0.0, **kwargs):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, BaseException):
            raise response
        return response

    async def close(self):
        self.closed = True


class PromptRoutedLLM(ScriptedLLM):
    """Fake model answering title and summary prompts separately."""

    def __init__(self, title, summary):
        super().__init__(title)
        self.title = title
        self.summary = summary

    async def complete(self, prompt: str, max_tokens: int = 256, temperature: float = 0.0, **kwargs):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        response = self.summary if prompt.startswith("You are summarizing") else self.title
        if isinstance(response, BaseException):
            raise response
        return response


class HangingLLM(LLMProvider):
    """Fake model that never answers."""

    def __init__(self):
        self.cancelled = 0

    async def complete(self, prompt: str, max_tokens: int = 256, temperature: float = 0.0, **kwargs):
        try:
            await asyncio.sleep(3600)
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        return "never"

    async def close(self):
        pass


@pytest.fixture
def fast_config() -> Config:
    """Config with a short model time budget."""
    return Config(derivation=DerivationConfig(timeout=0.2))


@pytest.fixture
def fallback_generator() -> TitleSummaryGenerator:
    """Generator without a model backend."""
    return TitleSummaryGenerator(llm=None)


@pytest.fixture
def note_service(fallback_generator) -> NoteService:
    return NoteService(fallback_generator)


@pytest.fixture
def scripted_llm():
    """Factory for ScriptedLLM instances."""
    return ScriptedLLM


@pytest.fixture
def routed_llm():
    """Factory for PromptRoutedLLM instances."""
    return PromptRoutedLLM


@pytest.fixture
def hanging_llm() -> HangingLLM:
    return HangingLLM()
