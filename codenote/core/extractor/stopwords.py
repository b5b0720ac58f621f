"""
Locale profiles for heuristic extraction.

A profile bundles the stop-word list, the placeholder title and the default
summary threshold of one language.
"""

from pydantic import BaseModel, ConfigDict, Field

from codenote.utils.exceptions import ConfigurationError

ENGLISH_STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "is", "are", "was", "were", "be", "been", "have", "has",
        "had", "do", "does", "did", "will", "would", "could", "should", "may",
        "might", "can", "this", "that", "these", "those", "i", "you", "he",
        "she", "it", "we", "they", "me", "him", "her", "us", "them", "my",
        "your", "his", "its", "our", "their", "from", "into", "about", "as",
        "not", "no", "so", "if", "then", "than", "too", "very", "just", "also",
        "some", "any", "all", "more", "most", "other", "such", "what", "which",
        "who", "whom", "when", "where", "why", "how", "there", "here", "before",
        "after", "over", "under", "again", "once", "only", "own", "same", "both",
        "each", "few", "because", "until", "while", "during", "above", "below",
        "up", "down", "out", "off", "through", "between", "being", "having",
        "doing", "am", "don't", "i'm", "it's", "let's", "need", "needs",
    }
)  # fmt: skip

POLISH_STOP_WORDS = frozenset(
    {
        "i", "w", "z", "na", "do", "nie", "się", "to", "że", "jest", "jak", "ale",
        "po", "od", "za", "o", "co", "czy", "tak", "już", "jeszcze", "tylko",
        "przez", "dla", "ten", "ta", "te", "tego", "tej", "tym", "jego", "jej",
        "ich", "oraz", "lub", "albo", "bo", "więc", "też", "także", "być",
        "był", "była", "było", "były", "będzie", "są", "ma", "mają", "mnie",
        "mi", "ja", "ty", "on", "ona", "ono", "my", "wy", "oni", "one", "go",
        "mu", "je", "jako", "przy", "pod", "nad", "bez", "przed", "między",
        "który", "która", "które", "którzy", "gdy", "kiedy", "gdzie", "aby",
        "żeby", "może", "można", "trzeba", "bardzo", "tu", "tam", "teraz",
        "wszystko", "nic", "coś", "ze", "we", "ku", "u", "a", "iż", "jednak",
        "nawet", "sobie", "swój", "swoje", "tę", "tych", "temu", "niż",
    }
)  # fmt: skip


class LocaleProfile(BaseModel):
    """Language-specific data used by the heuristic extractor."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Locale code (en, pl)")
    placeholder_title: str = Field(..., description="Title used when nothing can be derived")
    summary_threshold: int = Field(..., ge=0, description="Default minimum content length")
    stop_words: frozenset[str] = Field(default_factory=frozenset)

    def is_stop_word(self, word: str) -> bool:
        """Case-insensitive stop-word check."""
        return word.lower() in self.stop_words


ENGLISH = LocaleProfile(
    code="en",
    placeholder_title="New Note",
    summary_threshold=10,
    stop_words=ENGLISH_STOP_WORDS,
)

POLISH = LocaleProfile(
    code="pl",
    placeholder_title="Nowa notatka",
    summary_threshold=50,
    stop_words=POLISH_STOP_WORDS,
)

LOCALE_PROFILES: dict[str, LocaleProfile] = {
    ENGLISH.code: ENGLISH,
    POLISH.code: POLISH,
}


def get_locale_profile(locale: str) -> LocaleProfile:
    """
    Look up a locale profile by code.

    Raises:
        ConfigurationError: If the locale is not supported
    """
    profile = LOCALE_PROFILES.get(locale.lower())
    if profile is None:
        raise ConfigurationError(
            f"Unsupported locale: {locale}",
            context={"supported": sorted(LOCALE_PROFILES)},
        )
    return profile
