from collections import Counter
from dataclasses import dataclass

from .text_utils import tokenize

SINGLE = "single"
PHRASE = "phrase"


@dataclass(frozen=True)
class KeywordEntry:
    keyword: str
    type: str
    count: int
    density: float
    relevance: float

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "type": self.type,
            "count": self.count,
            "density": self.density,
            "relevance": self.relevance,
        }


def _ngrams(tokens: list[str], n: int) -> list[tuple[int, list[str]]]:
    return [(i, tokens[i:i + n]) for i in range(len(tokens) - n + 1)]


def _is_candidate(gram: list[str], settings) -> bool:
    stopwords = settings.stopwords
    if len(gram) == 1:
        word = gram[0]
        return (
            word not in stopwords
            and len(word) >= settings.min_keyword_length
            and not word.isdigit()
        )
    if all(word in stopwords for word in gram):
        return False
    if settings.trim_phrase_stopwords and (gram[0] in stopwords or gram[-1] in stopwords):
        return False
    return True


def _collect_candidates(sentences, settings):
    """Count every candidate n-gram sentence by sentence.

    Returns (counts, surface forms, first occurrence as (sentence index, token index), n).
    """
    counts = Counter()
    surfaces = {}
    first_seen = {}
    sizes = {}
    sizes_to_scan = sorted({1, *settings.phrase_lengths})
    offset = 0
    for sentence_index, sentence in enumerate(sentences):
        tokens = tokenize(sentence)
        lowered = [t.lower() for t in tokens]
        for n in sizes_to_scan:
            for i, gram in _ngrams(lowered, n):
                if not _is_candidate(gram, settings):
                    continue
                key = ' '.join(gram)
                counts[key] += 1
                surfaces.setdefault(key, Counter())[' '.join(tokens[i:i + n])] += 1
                sizes[key] = n
                if key not in first_seen:
                    first_seen[key] = (sentence_index, offset + i)
        offset += len(tokens)
    return counts, surfaces, first_seen, sizes


def _relevance(count, max_count, position, n, max_n, settings) -> float:
    frequency = count / max_count if max_count else 0.0
    length_bonus = (n - 1) / (max_n - 1) if max_n > 1 else 0.0
    score = (
        settings.frequency_weight * frequency
        + settings.position_weight * position
        + settings.length_weight * length_bonus
    )
    return round(min(max(score, 0.0), 1.0), 4)


def extract_keywords(words, sentences, full_text: str, settings) -> list[KeywordEntry]:
    """Rank single words and 2-3 word phrases as keyword candidates.

    Ordered by relevance, then count, then keyword; capped to `top_n_keywords`.
    """
    total_words = len(words)
    if total_words == 0:
        return []
    if not sentences and full_text and full_text.strip():
        sentences = [full_text]

    counts, surfaces, first_seen, sizes = _collect_candidates(sentences, settings)
    counts = Counter({
        key: c for key, c in counts.items()
        if sizes[key] == 1 or c >= settings.min_phrase_count
    })
    if not counts:
        return []

    max_count = max(counts.values())
    max_n = max({1, *settings.phrase_lengths})
    total_tokens = max(total_words, 1)

    ranked = []
    for key, count in counts.items():
        sentence_index, token_index = first_seen[key]
        if sentence_index == 0:
            position = 1.0
        else:
            position = 0.5 * (1 - token_index / total_tokens)
        n = sizes[key]
        ranked.append((key, KeywordEntry(
            keyword=surfaces[key].most_common(1)[0][0],
            type=SINGLE if n == 1 else PHRASE,
            count=count,
            density=min(100.0, round(100 * count / total_words, 2)),
            relevance=_relevance(count, max_count, position, n, max_n, settings),
        )))

    ranked.sort(key=lambda item: (-item[1].relevance, -item[1].count, item[0]))
    return [entry for _, entry in ranked[:settings.top_n_keywords]]
