import pytest

from insight_seo.content.insertion import KeywordInserter, count_occurrences
from insight_seo.errors import EmptyInputError, InvalidKeywordError

FILLER = "Writers should focus on clear structure, helpful examples and honest answers to real questions. "
MODERATE_TEXT = (
    "SEO matters for every small business. Writers plan articles around SEO and audience needs. "
    "Clear headlines help readers."
)


@pytest.fixture
def inserter(settings):
    return KeywordInserter(settings)


def test_keyword_joins_the_first_sentence(inserter):
    updated = inserter.insert("Write better content.", "SEO")
    assert updated == "Write better content, focusing on SEO."
    assert updated[-1] in ".!?"


def test_first_sentence_without_terminal_punctuation_is_closed(inserter):
    assert inserter.insert("Write better content", "SEO") == "Write better content, focusing on SEO."
    assert inserter.insert("Write better content;", "SEO") == "Write better content, focusing on SEO."


def test_rest_of_text_is_preserved(inserter):
    text = "  Write better content. More detail follows here!"
    assert inserter.insert(text, "SEO") == "  Write better content, focusing on SEO. More detail follows here!"


def test_absent_keyword_is_added(inserter):
    text = "Good writing keeps readers engaged. Clear structure helps too."
    updated = inserter.insert(text, "Content Strategy")
    assert count_occurrences(updated, "content strategy") == 1
    assert len(updated) >= len(text)


def test_long_first_sentence_falls_back_to_new_sentence(inserter):
    text = (
        "This long opening sentence keeps going with many extra words so that adding anything "
        "else would push it well past the limit we set for readability today."
    )
    assert inserter.insert(text, "SEO") == text + " Learn more about SEO."


def test_keyword_already_in_first_sentence_appends(inserter):
    text = "SEO is one part of a bigger plan. " + FILLER * 4
    updated = inserter.insert(text, "seo")
    assert updated == text.rstrip() + " Learn more about seo. "
    assert count_occurrences(updated, "SEO") == 2


def test_sufficient_density_appends_closing_sentence(inserter):
    updated = inserter.insert(MODERATE_TEXT, "SEO")
    assert updated == MODERATE_TEXT + " In summary, SEO ties everything together."
    assert count_occurrences(updated, "SEO") == 3


def test_appending_keeps_trailing_whitespace(inserter):
    updated = inserter.insert(MODERATE_TEXT + "\n\n", "SEO")
    assert updated.endswith("In summary, SEO ties everything together.\n\n")


def test_dominant_keyword_leaves_text_unchanged(inserter):
    text = "SEO SEO SEO. SEO rocks."
    assert inserter.insert(text, "SEO") == text


def test_frequent_keyword_that_is_not_the_top_term_still_gets_inserted(inserter):
    text = "SEO tips. Tips tips tips."
    assert inserter.insert(text, "SEO") == text + " In summary, SEO ties everything together."


def test_keyword_whitespace_is_collapsed(inserter):
    updated = inserter.insert("Write better content.", "  content   marketing ")
    assert updated == "Write better content, focusing on content marketing."


@pytest.mark.parametrize("keyword", ["", "   ", None])
def test_blank_keyword_is_rejected(inserter, keyword):
    with pytest.raises(InvalidKeywordError):
        inserter.insert("Write better content.", keyword)


@pytest.mark.parametrize("text", ["", "  \n "])
def test_blank_text_is_rejected(inserter, text):
    with pytest.raises(EmptyInputError):
        inserter.insert(text, "SEO")


def test_insertion_is_deterministic(inserter):
    assert inserter.insert(MODERATE_TEXT, "headlines") == inserter.insert(MODERATE_TEXT, "headlines")


def test_count_occurrences_matches_whole_terms_case_insensitively():
    assert count_occurrences("seo and SEO, but not SEOs", "SEO") == 2
    assert count_occurrences("Content\nmarketing works", "content marketing") == 1
    assert count_occurrences("C++ beats C", "C++") == 1


@pytest.mark.parametrize("keyword", ["SEO!", "SEO.", "SEO?!", " SEO ... "])
def test_keyword_terminal_punctuation_is_not_doubled(inserter, keyword):
    assert inserter.insert("Write better content.", keyword) == "Write better content, focusing on SEO."
    appended = inserter.insert(MODERATE_TEXT, keyword)
    assert appended == MODERATE_TEXT + " In summary, SEO ties everything together."


def test_punctuation_only_keyword_is_rejected(inserter):
    with pytest.raises(InvalidKeywordError):
        inserter.insert("Write better content.", "?!")


@pytest.mark.parametrize("text", ['He said "stop." Then he left!', "Read the guide (it helps.) Then start."])
def test_quoted_first_sentence_is_left_intact(inserter, text):
    assert inserter.insert(text, "SEO") == text + " Learn more about SEO."


def test_abbreviation_does_not_cut_the_first_sentence(inserter):
    text = "Dr. Smith writes about marketing. Readers love it."
    assert inserter.insert(text, "SEO") == (
        "Dr. Smith writes about marketing, focusing on SEO. Readers love it."
    )
