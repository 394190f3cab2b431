"""Content analysis package.

Provides `ContentAnalyzer` orchestrating the tokenizer, readability,
keyword, suggestion and spellcheck helpers implemented in sibling modules,
and `KeywordInserter` for rewriting text around a chosen keyword.
"""

from .analyzer import AnalysisResult, ContentAnalyzer, Stats
from .insertion import KeywordInserter
