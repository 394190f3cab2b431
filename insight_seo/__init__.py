"""InsightSEO text analysis package.

Provides `SEOEngine` (readability, keyword analysis, suggestions and keyword
insertion over plain prose) and `GrammarChecker`, a thin LanguageTool client.
"""

from .engine import SEOEngine
from .grammar import GrammarChecker
