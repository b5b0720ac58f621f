"""
Title and summary derivation for notes.

Each derivation makes exactly one model attempt under a time budget. The
answer is rejected when it is empty or reads like a refusal. Any failure
falls through to the heuristic extractor, so callers always get a string.

Per call: Idle -> Attempting Primary -> (Validating -> Success | Fallback) -> Done
"""

import asyncio

from codenote.config import Config
from codenote.core.extractor import HeuristicExtractor, get_locale_profile
from codenote.core.llm.base import LLMProvider
from codenote.core.llm.refusal import find_refusal
from codenote.models.derivation import DerivationResult, DerivationSource
from codenote.services.prompts import build_summary_prompt, build_title_prompt
from codenote.utils.exceptions import (
    LLMError,
    ModelRefusalError,
    ModelRuntimeError,
    ModelUnavailableError,
)
from codenote.utils.logger import get_logger
from codenote.utils.text import truncate_at_word_boundary, words
from codenote.utils.timeout import with_timeout

logger = get_logger(__name__)

_TITLE_QUOTES = "\"'“”‘’"
# Upper bound of the 2-5 word title range
MAX_MODEL_TITLE_WORDS = 5


class TitleSummaryGenerator:
    """
    Derives a note's title and summary from its content.

    The model path is optional: pass `llm=None` (or a DisabledLLM) and every
    derivation goes straight to the deterministic fallback.

    Usage:
        generator = TitleSummaryGenerator(llm=OllamaLLM(), config=Config())
        title = await generator.derive_title(note.content)
        summary = await generator.derive_summary(note.content)
    """

    def __init__(
        self,
        llm: LLMProvider | None = None,
        config: Config | None = None,
        extractor: HeuristicExtractor | None = None,
    ):
        """
        Initialize generator.

        Args:
            llm: Model backend, or None when no model is available
            config: Configuration object
            extractor: Fallback extractor (built from config if not given)
        """
        self.llm = llm
        self.config = config or Config()
        self.profile = get_locale_profile(self.config.derivation.locale)
        self.extractor = extractor or HeuristicExtractor(self.profile, self.config.derivation)

    @property
    def placeholder_title(self) -> str:
        return self.profile.placeholder_title

    async def derive_title(self, content: str) -> str:
        """
        Derive a short title.

        Args:
            content: Raw note content

        Returns:
            Model title, heuristic title, or the locale placeholder
        """
        title, _ = await self._derive_title(content)
        return title

    async def derive_summary(self, content: str) -> str:
        """
        Derive a short summary.

        Args:
            content: Raw note content

        Returns:
            "" for content at or below the summary threshold, otherwise a
            summary no longer than the hard cap (plus ellipsis)
        """
        summary, _ = await self._derive_summary(content)
        return summary

    async def derive(self, content: str) -> DerivationResult:
        """
        Derive title and summary concurrently.

        Args:
            content: Raw note content

        Returns:
            DerivationResult with both values and the path that produced each
        """
        (title, title_source), (summary, summary_source) = await asyncio.gather(
            self._derive_title(content), self._derive_summary(content)
        )
        return DerivationResult(
            title=title,
            summary=summary,
            title_source=title_source,
            summary_source=summary_source,
        )

    async def _derive_title(self, content: str) -> tuple[str, DerivationSource]:
        if not content.strip():
            return self.placeholder_title, DerivationSource.PLACEHOLDER

        try:
            response = await self._ask_model(build_title_prompt(content), kind="title")
            title = response.strip(_TITLE_QUOTES).strip()
            if not title:
                raise ModelRuntimeError("Model title was only quotes")
            word_count = len(words(title))
            if word_count > MAX_MODEL_TITLE_WORDS:
                raise ModelRuntimeError(
                    f"Model title too long ({word_count} words)",
                    context={"words": word_count, "title": title[:100]},
                )
            return title, DerivationSource.MODEL
        except LLMError as e:
            logger.warning(f"Title generation failed ({type(e).__name__}): {e.message}")
        except Exception as e:
            logger.warning(f"Title generation failed unexpectedly ({type(e).__name__}): {e}")

        title = self.extractor.extract_title(content)
        if title:
            logger.info(f"Using fallback title: '{title}'")
            return title, DerivationSource.FALLBACK

        logger.info("Fallback title empty, using placeholder")
        return self.placeholder_title, DerivationSource.PLACEHOLDER

    async def _derive_summary(self, content: str) -> tuple[str, DerivationSource]:
        threshold = self.extractor.summary_threshold
        if len(content) <= threshold or not content.strip():
            logger.debug(f"Content too short ({len(content)} chars), skipping summary")
            return "", DerivationSource.SKIPPED

        try:
            summary = await self._ask_model(build_summary_prompt(content), kind="summary")
            source = DerivationSource.MODEL
        except LLMError as e:
            logger.warning(f"Summary generation failed ({type(e).__name__}): {e.message}")
            summary, source = self._fallback_summary(content), DerivationSource.FALLBACK
        except Exception as e:
            logger.warning(f"Summary generation failed unexpectedly ({type(e).__name__}): {e}")
            summary, source = self._fallback_summary(content), DerivationSource.FALLBACK

        return truncate_at_word_boundary(summary, self.config.derivation.summary_hard_cap), source

    def _fallback_summary(self, content: str) -> str:
        summary = self.extractor.extract_summary(content)
        if not summary:
            # Nothing qualified (only stop words or short sentences)
            summary = content.strip()
        logger.info(f"Using fallback summary ({len(summary)} chars)")
        return summary

    async def _ask_model(self, prompt: str, kind: str) -> str:
        """
        Single primary attempt: call, time-box, validate.

        Raises:
            ModelUnavailableError: If no model is configured
            ModelTimeoutError: If the time budget ran out
            ModelRefusalError: If the answer matches the refusal denylist
            ModelRuntimeError: If the answer is empty
        """
        if self.llm is None:
            raise ModelUnavailableError("No model backend configured")

        llm = self.llm
        llm_config = self.config.llm
        raw = await with_timeout(
            lambda: llm.complete(
                prompt, max_tokens=llm_config.max_tokens, temperature=llm_config.temperature
            ),
            self.config.derivation.timeout,
        )

        response = (raw or "").strip()
        if not response:
            raise ModelRuntimeError(f"Model returned an empty {kind}")

        indicator = find_refusal(response)
        if indicator is not None:
            raise ModelRefusalError(
                f"Model returned a refusal-like {kind}",
                context={"indicator": indicator, "response": response[:100]},
            )

        logger.debug(f"Model {kind} accepted ({len(response)} chars)")
        return response
