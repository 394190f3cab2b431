from dataclasses import dataclass

from .text_utils import count_syllables


@dataclass(frozen=True)
class ReadabilityDetails:
    score: float
    grade_level: float
    avg_sentence_length: float
    avg_syllables_per_word: float
    word_count: int = 0

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "gradeLevel": self.grade_level,
            "avgSentenceLength": self.avg_sentence_length,
            "avgSyllablesPerWord": self.avg_syllables_per_word,
        }


def calculate_readability(words, sentence_count: int) -> ReadabilityDetails:
    """Flesch reading ease and Flesch-Kincaid grade for a tokenized text.

    Returns an all-zero result for empty input instead of dividing by zero.
    """
    num_words = len(words)
    if num_words == 0 or sentence_count <= 0:
        return ReadabilityDetails(0.0, 0.0, 0.0, 0.0, word_count=0)
    num_syllables = sum(count_syllables(word) for word in words)
    asl = num_words / sentence_count
    asw = num_syllables / num_words
    score = round(206.835 - 1.015 * asl - 84.6 * asw, 2)
    fk_grade = round(0.39 * asl + 11.8 * asw - 15.59, 2)
    return ReadabilityDetails(
        score=score,
        grade_level=fk_grade,
        avg_sentence_length=round(asl, 2),
        avg_syllables_per_word=round(asw, 2),
        word_count=num_words,
    )


def readability_label(details: ReadabilityDetails, settings) -> str:
    if details.word_count == 0:
        return settings.readability_default_label
    for threshold, label in settings.readability_bands:
        if details.score >= threshold:
            return label
    return settings.readability_default_label


def score_readability(stats, sentences, words, settings, details: ReadabilityDetails = None) -> str:
    """Map a text's statistics to its readability label ("Easy", "Medium", "Hard").

    `details` may be passed when it was already computed for the same text.
    """
    if details is None:
        sentence_count = stats.sentence_count if stats is not None else len(sentences)
        details = calculate_readability(words, sentence_count)
    return readability_label(details, settings)
