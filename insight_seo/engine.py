import logging

from .config import Settings
from .content import ContentAnalyzer, KeywordInserter

logger = logging.getLogger(__name__)


class SEOEngine:
    """
    Entry point for the two analysis operations.

    Built once from a `Settings` object; holds no per-request state, so a single
    instance can serve concurrent requests.
    """

    def __init__(self, settings: Settings = None):
        self.settings = settings if settings else Settings()
        self.content_analyzer = ContentAnalyzer(settings=self.settings)
        self.keyword_inserter = KeywordInserter(settings=self.settings)

    def analyze(self, text: str) -> dict:
        """Return `{readability, readabilityDetails, stats, keywordAnalysis, suggestions, spellCheck}`.

        Raises EmptyInputError for blank text.
        """
        result = self.content_analyzer.analyze(text)
        logger.debug(
            "Analyzed %d characters: %d words, %d keywords, %d suggestions",
            result.stats.character_count, result.stats.word_count,
            len(result.keyword_analysis), len(result.suggestions),
        )
        return result.to_dict()

    def insert_keyword(self, text: str, keyword: str) -> dict:
        """Return `{"updatedText": ...}`.

        Raises EmptyInputError for blank text and InvalidKeywordError for a blank keyword.
        """
        updated_text = self.keyword_inserter.insert(text, keyword)
        logger.debug("Inserted keyword %r: %d -> %d characters", keyword, len(text), len(updated_text))
        return {"updatedText": updated_text}
