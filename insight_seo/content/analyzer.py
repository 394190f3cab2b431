from dataclasses import dataclass

from ..base_module import TextModule, require_text
from .keywords import KeywordEntry, extract_keywords
from .readability import ReadabilityDetails, calculate_readability, score_readability
from .spellcheck import SpellCheck
from .suggestions import generate_suggestions
from .text_utils import Segmentation, segment


@dataclass(frozen=True)
class Stats:
    word_count: int
    sentence_count: int
    character_count: int

    @classmethod
    def from_segmentation(cls, segmentation: Segmentation) -> "Stats":
        return cls(
            word_count=len(segmentation.words),
            sentence_count=len(segmentation.sentences),
            character_count=segmentation.character_count,
        )

    def to_dict(self) -> dict:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "characterCount": self.character_count,
        }


@dataclass(frozen=True)
class AnalysisResult:
    readability: str
    readability_details: ReadabilityDetails
    stats: Stats
    keyword_analysis: tuple[KeywordEntry, ...]
    suggestions: tuple[str, ...]
    spell_check: dict

    def to_dict(self) -> dict:
        return {
            "readability": self.readability,
            "readabilityDetails": self.readability_details.to_dict(),
            "stats": self.stats.to_dict(),
            "keywordAnalysis": [entry.to_dict() for entry in self.keyword_analysis],
            "suggestions": list(self.suggestions),
            "spellCheck": dict(self.spell_check),
        }


class ContentAnalyzer(TextModule):
    """Readability, keyword and suggestion analysis of a block of prose."""

    def __init__(self, settings=None):
        super().__init__(settings=settings)
        self.content_settings = self.settings.content
        self.spell_check = SpellCheck(
            language=self.content_settings.spellcheck_language,
            enabled=self.content_settings.spellcheck_enabled,
        )

    def analyze(self, text: str) -> AnalysisResult:
        require_text(text)
        cfg = self.content_settings

        segmentation = segment(text)
        stats = Stats.from_segmentation(segmentation)
        details = calculate_readability(segmentation.words, stats.sentence_count)
        label = score_readability(stats, segmentation.sentences, segmentation.words, cfg, details=details)
        keywords = extract_keywords(segmentation.words, segmentation.sentences, text, cfg)
        spell_check = self.spell_check.check(text)
        suggestions = generate_suggestions(stats, label, keywords, cfg, spell_check)

        return AnalysisResult(
            readability=label,
            readability_details=details,
            stats=stats,
            keyword_analysis=tuple(keywords),
            suggestions=tuple(suggestions),
            spell_check=spell_check,
        )
