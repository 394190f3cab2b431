import re
from dataclasses import dataclass

WORD_RE = re.compile(r"[^\W_]+(?:['’-][^\W_]+)*")
ABBREVIATIONS = ("Dr", "Mr", "Mrs", "Ms", "Prof", "St", "vs", "e.g", "i.e")
_ABBREVIATION_GUARD = "".join(rf"(?<!\b{re.escape(a)}\.)" for a in ABBREVIATIONS)
# Break after terminal punctuation, optionally followed by one closing quote/bracket,
# unless the period belongs to a known abbreviation.
SENTENCE_BREAK_RE = re.compile(
    r"(?:(?<=[.!?])|(?<=[.!?][\"'”’)\]]))" + _ABBREVIATION_GUARD + r"\s+"
)
TERMINAL_RE = re.compile(r"[.!?]+[\"'”’)\]]?$")


@dataclass(frozen=True)
class Segmentation:
    """Words, sentences and character count of one input text."""
    words: tuple
    normalized: tuple
    sentences: tuple
    sentence_spans: tuple
    character_count: int


def tokenize(text: str) -> list[str]:
    """Return the words of `text` with their original case."""
    return WORD_RE.findall(text or "")


def tokenize_sentence(sentence: str) -> list[str]:
    """Return the lowercase words of a single sentence."""
    return [w.lower() for w in tokenize(sentence)]


def split_sentence_spans(text: str) -> list[tuple[int, int]]:
    """(start, end) offsets of each non-empty, stripped sentence in `text`."""
    if not text:
        return []
    bounds = []
    start = 0
    for match in SENTENCE_BREAK_RE.finditer(text):
        bounds.append((start, match.start()))
        start = match.end()
    bounds.append((start, len(text)))

    spans = []
    for begin, end in bounds:
        chunk = text[begin:end]
        stripped = chunk.strip()
        if not stripped:
            continue
        lead = len(chunk) - len(chunk.lstrip())
        spans.append((begin + lead, begin + lead + len(stripped)))
    return spans


def split_sentences(text: str) -> list[str]:
    return [text[s:e] for s, e in split_sentence_spans(text)]


def segment(text: str) -> Segmentation:
    text = text or ""
    words = tokenize(text)
    spans = split_sentence_spans(text)
    return Segmentation(
        words=tuple(words),
        normalized=tuple(w.lower() for w in words),
        sentences=tuple(text[s:e] for s, e in spans),
        sentence_spans=tuple(spans),
        character_count=len(text),
    )


def ends_with_terminal(sentence: str) -> bool:
    return bool(TERMINAL_RE.search(sentence.rstrip()))


def count_syllables(word: str) -> int:
    word = word.lower()
    if not word:
        return 0
    word = re.sub(r'[^a-z]', '', word)
    if len(word) <= 3:
        return 1
    if word.endswith("e") and not word.endswith("le") and len(word) > 1:
        word = word[:-1]
    vowels = "aeiouy"
    syllable_count = 0
    prev_char_was_vowel = False
    for char in word:
        is_vowel = char in vowels
        if is_vowel and not prev_char_was_vowel:
            syllable_count += 1
        prev_char_was_vowel = is_vowel
    return max(1, syllable_count)
