import logging
import re
from collections import Counter

from ..base_module import require_text
from ..config import Settings
from ..errors import InvalidKeywordError
from .text_utils import TERMINAL_RE, ends_with_terminal, segment, tokenize, tokenize_sentence

logger = logging.getLogger(__name__)

# Characters dropped from the end of a clause before new words are attached to it
_TRAILING_JOINERS = " \t\r\n,;:-–—"


def keyword_pattern(keyword: str) -> re.Pattern:
    """Case-insensitive pattern matching `keyword` as a whole term, any whitespace between words."""
    parts = [re.escape(part) for part in keyword.split()]
    return re.compile(r"(?<!\w)" + r"\s+".join(parts) + r"(?!\w)", re.IGNORECASE)


def count_occurrences(text: str, keyword: str) -> int:
    return len(keyword_pattern(keyword).findall(text))


class KeywordInserter:
    """
    Rewrites a text so that it mentions a keyword once more.

    Policy, in order:
      1. keyword is the dominant term of the text: text is returned unchanged;
      2. keyword density already sufficient: a closing sentence is appended;
      3. otherwise the keyword is attached to the end of the first sentence,
         unless that sentence already has it or would grow past
         `max_sentence_words`, in which case a new sentence is appended.
    """

    def __init__(self, settings: Settings = None):
        self.settings = settings if settings else Settings()
        self.insertion_settings = self.settings.insertion
        self.stopwords = self.settings.content.stopwords

    @staticmethod
    def clean_keyword(keyword) -> str:
        if not isinstance(keyword, str):
            raise InvalidKeywordError("Keyword is required")
        # Terminal punctuation comes from the surrounding sentence, not the keyword
        keyword = " ".join(keyword.split()).rstrip(".!?").rstrip()
        if not keyword:
            raise InvalidKeywordError("Keyword is required")
        return keyword

    def insert(self, text: str, keyword: str) -> str:
        require_text(text)
        keyword = self.clean_keyword(keyword)
        cfg = self.insertion_settings

        segmentation = segment(text)
        occurrences = count_occurrences(text, keyword)
        word_count = len(segmentation.words)
        density = 100 * occurrences / word_count if word_count else 0.0

        if occurrences and self._is_dominant(keyword, occurrences, density, segmentation):
            logger.debug("Keyword %r is dominant (density %.2f%%); text left unchanged", keyword, density)
            return text
        if occurrences and density >= cfg.sufficient_density:
            return self._append_sentence(text, cfg.closing_template.format(keyword=keyword))

        updated = self._insert_into_first_sentence(text, keyword, segmentation)
        if updated is not None:
            return updated
        return self._append_sentence(text, cfg.append_template.format(keyword=keyword))

    def _is_dominant(self, keyword, occurrences, density, segmentation) -> bool:
        if density < self.insertion_settings.dominant_density:
            return False
        keyword_words = set(tokenize_sentence(keyword))
        others = Counter(
            w for w in segmentation.normalized
            if w not in self.stopwords and w not in keyword_words
        )
        top_other = max(others.values(), default=0)
        return occurrences >= top_other

    def _insert_into_first_sentence(self, text, keyword, segmentation):
        if not segmentation.sentence_spans:
            return None
        start, end = segmentation.sentence_spans[0]
        sentence = text[start:end]
        if count_occurrences(sentence, keyword):
            return None

        addition = self.insertion_settings.connector.format(keyword=keyword)
        if len(tokenize(sentence)) + len(tokenize(addition)) > self.insertion_settings.max_sentence_words:
            return None

        match = TERMINAL_RE.search(sentence)
        if match and match.group()[-1] not in ".!?":
            # Closed by a quote or bracket; splicing here would rewrite quoted words
            return None
        if match:
            body, tail = sentence[:match.start()], sentence[match.start():]
        else:
            body, tail = sentence, "."
        body = body.rstrip(_TRAILING_JOINERS)
        if not body:
            return None

        updated = text[:start] + body + addition + tail + text[end:]
        if len(updated) < len(text):
            return None
        return updated

    @staticmethod
    def _append_sentence(text: str, sentence: str) -> str:
        body = text.rstrip()
        trailing = text[len(body):]
        if not ends_with_terminal(body):
            body = body.rstrip(_TRAILING_JOINERS)
            body = body + "." if body else ""
        if not body:
            return sentence + trailing
        return f"{body} {sentence}{trailing}"
