"""
Deterministic title and summary extraction.

Used as the fallback of the title/summary generator whenever the model path
fails. Everything here is pure: the same input always yields the same output.
"""

from codenote.config import DerivationConfig
from codenote.core.extractor.stopwords import LocaleProfile, get_locale_profile
from codenote.utils.text import (
    ELLIPSIS,
    capitalize_first,
    first_sentence,
    split_sentences,
    truncate_at_word_boundary,
    words,
)

MIN_WORD_LENGTH = 3
MIN_TITLE_WORDS = 2
MIN_SENTENCE_LENGTH = 10


class HeuristicExtractor:
    """
    Stop-word based title and summary extraction.

    Title modes:
    - sentence: meaningful words of the first sentence or line
    - word: meaningful words of the whole text

    Summary modes:
    - keyword: meaningful words, sized toward the configured length band
    - sentence: first sentence plus the middle one

    Usage:
        extractor = HeuristicExtractor()
        title = extractor.extract_title("Quarterly report draft. Send to Anna.")
        summary = extractor.extract_summary(long_text)
    """

    def __init__(
        self,
        profile: LocaleProfile | None = None,
        config: DerivationConfig | None = None,
    ):
        """
        Initialize extractor.

        Args:
            profile: Locale profile. Defaults to the profile named by config.locale.
            config: Derivation configuration. Uses defaults if not provided.
        """
        self.config = config or DerivationConfig()
        self.profile = profile or get_locale_profile(self.config.locale)

    @property
    def summary_threshold(self) -> int:
        """Content length at or below which no summary is produced."""
        if self.config.summary_threshold is not None:
            return self.config.summary_threshold
        return self.profile.summary_threshold

    def meaningful_words(self, text: str) -> list[str]:
        """
        Words of text that carry meaning.

        Drops words shorter than three characters and stop words of the
        active locale. Original casing is preserved.
        """
        return [
            word
            for word in words(text)
            if len(word) >= MIN_WORD_LENGTH and not self.profile.is_stop_word(word)
        ]

    def extract_title(self, text: str, mode: str | None = None) -> str:
        """
        Build a short title from the leading meaningful words.

        Args:
            text: Note content
            mode: "sentence" or "word" (default from config)

        Returns:
            Capitalized words joined by spaces, or "" if fewer than two
            meaningful words were found
        """
        mode = mode or self.config.title_mode
        source = first_sentence(text) if mode == "sentence" else text

        selected = self.meaningful_words(source)[: self.config.title_max_words]
        if len(selected) < MIN_TITLE_WORDS:
            return ""

        return " ".join(capitalize_first(word.lower()) for word in selected)

    def extract_summary(self, text: str, mode: str | None = None) -> str:
        """
        Build a short summary of text.

        Args:
            text: Note content
            mode: "keyword" or "sentence" (default from config)

        Returns:
            Summary no longer than the hard cap (plus ellipsis), or "" when
            text is at or below the summary threshold or nothing qualifies
        """
        if len(text) <= self.summary_threshold:
            return ""

        mode = mode or self.config.summary_mode
        if mode == "sentence":
            summary = self._sentence_summary(text)
        else:
            summary = self._keyword_summary(text)

        return truncate_at_word_boundary(summary, self.config.summary_hard_cap)

    def _sentence_summary(self, text: str) -> str:
        """
        First qualifying sentence, plus the middle one when more than two exist.

        Only the upper band bound applies here: the middle sentence is dropped
        when the pair exceeds band_max, but nothing is added to reach band_min.
        """
        sentences = [s for s in split_sentences(text) if len(s) > MIN_SENTENCE_LENGTH]
        if not sentences:
            return ""

        selected = [sentences[0]]
        if len(sentences) > 2:
            selected.append(sentences[len(sentences) // 2])

        summary = self._join_sentences(selected)
        if len(summary) > self.config.band_max and len(selected) > 1:
            summary = self._join_sentences(selected[:1])
        return summary

    def _keyword_summary(self, text: str) -> str:
        """Meaningful words sized toward [band_min, band_max] characters."""
        tokens = self.meaningful_words(text)
        if not tokens:
            return ""

        band_min, band_max = self.config.band_min, self.config.band_max
        count = min(self.config.keyword_count, len(tokens))
        summary = self._join_keywords(tokens[:count])

        while len(summary) > band_max and count > 1:
            count -= 1
            summary = self._join_keywords(tokens[:count])

        while len(summary) < band_min and count < len(tokens):
            candidate = self._join_keywords(tokens[: count + 1])
            if len(candidate) > band_max:
                break
            count += 1
            summary = candidate

        if len(summary) > self.config.keyword_ellipsis_after:
            summary += ELLIPSIS
        return summary

    @staticmethod
    def _join_sentences(sentences: list[str]) -> str:
        return ". ".join(sentences) + "."

    @staticmethod
    def _join_keywords(tokens: list[str]) -> str:
        return capitalize_first(" ".join(tokens))
