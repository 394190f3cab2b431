from insight_seo.content.text_utils import (
    count_syllables,
    ends_with_terminal,
    segment,
    split_sentences,
    tokenize,
)


def test_segment_counts_words_and_sentences():
    seg = segment("SEO is great. SEO helps websites rank.")
    assert seg.words == ("SEO", "is", "great", "SEO", "helps", "websites", "rank")
    assert seg.normalized[0] == "seo"
    assert seg.sentences == ("SEO is great.", "SEO helps websites rank.")


def test_trailing_fragment_is_a_sentence():
    assert split_sentences("First point. Second point without a stop") == [
        "First point.",
        "Second point without a stop",
    ]


def test_character_count_uses_untrimmed_input():
    text = "  Hi there.  "
    assert segment(text).character_count == len(text) == 13


def test_blank_input_yields_empty_segmentation():
    for text in ("", "   \n\t"):
        seg = segment(text)
        assert seg.words == ()
        assert seg.sentences == ()
        assert seg.character_count == len(text)


def test_intra_word_apostrophes_and_hyphens_are_kept():
    assert tokenize("It's a well-known fact.") == ["It's", "a", "well-known", "fact"]


def test_sentence_break_after_closing_quote():
    assert split_sentences('He said "stop." Then he left!') == ['He said "stop."', "Then he left!"]


def test_decimal_numbers_do_not_split_sentences():
    assert split_sentences("Version 3.5 is out. Update today.") == ["Version 3.5 is out.", "Update today."]


def test_sentence_spans_point_into_original_text():
    text = "  One here.\n\nTwo there?  "
    seg = segment(text)
    assert [text[s:e] for s, e in seg.sentence_spans] == list(seg.sentences)
    assert seg.sentences == ("One here.", "Two there?")


def test_ends_with_terminal():
    assert ends_with_terminal("Done.")
    assert ends_with_terminal('He said "yes!"')
    assert not ends_with_terminal("Not done")


def test_count_syllables():
    assert count_syllables("") == 0
    assert count_syllables("cat") == 1
    assert count_syllables("make") == 1
    assert count_syllables("table") == 2
    assert count_syllables("readability") == 5
    assert count_syllables("2024") == 1


def test_abbreviations_do_not_end_sentences():
    assert split_sentences("Dr. Smith writes daily. Mrs. Lee edits.") == [
        "Dr. Smith writes daily.",
        "Mrs. Lee edits.",
    ]
    assert split_sentences("Use tools, e.g. analytics. Then measure.") == [
        "Use tools, e.g. analytics.",
        "Then measure.",
    ]
