from insight_seo.config import ContentSettings
from insight_seo.content.keywords import extract_keywords
from insight_seo.content.text_utils import segment


def _extract(text, settings):
    seg = segment(text)
    return extract_keywords(seg.words, seg.sentences, text, settings)


def test_repeated_term_ranks_first(content_settings):
    entries = _extract("SEO is great. SEO helps websites rank.", content_settings)
    top = entries[0]
    assert top.keyword == "SEO"
    assert top.type == "single"
    assert top.count == 2
    assert top.density == 28.57
    assert top.relevance == 0.9


def test_keywords_are_sorted_and_unique(content_settings):
    text = (
        "Content marketing drives growth. Good content marketing takes time. "
        "Content marketing wins when writers publish helpful guides. Guides attract readers."
    )
    entries = _extract(text, content_settings)
    keys = [(-e.relevance, -e.count, e.keyword.lower()) for e in entries]
    assert keys == sorted(keys)
    normalized = [e.keyword.lower() for e in entries]
    assert len(normalized) == len(set(normalized))
    for e in entries:
        assert 0 <= e.density <= 100
        assert 0 <= e.relevance <= 1


def test_frequent_phrase_is_detected(content_settings):
    text = "Content marketing drives growth. Good content marketing takes time. Content marketing wins."
    top = _extract(text, content_settings)[0]
    assert top.keyword == "Content marketing"
    assert top.type == "phrase"
    assert top.count == 3
    assert top.density == 25.0


def test_stopword_only_phrases_are_never_candidates(content_settings):
    text = "Out of the box thinking. Out of the office."
    keys = {e.keyword.lower() for e in _extract(text, content_settings)}
    assert "of the" not in keys
    assert "out of the" not in keys
    assert "the box" not in keys


def test_edge_stopwords_allowed_when_trimming_disabled():
    settings = ContentSettings(spellcheck_enabled=False, trim_phrase_stopwords=False, top_n_keywords=50)
    keys = {e.keyword.lower() for e in _extract("Out of the box thinking. Out of the office.", settings)}
    assert "the box" in keys
    assert "of the" not in keys


def test_result_is_capped_to_top_n():
    settings = ContentSettings(spellcheck_enabled=False, top_n_keywords=5)
    text = " ".join(f"term{i}" for i in range(30)) + "."
    assert len(_extract(text, settings)) == 5


def test_small_vocabulary_returns_everything_without_padding(content_settings):
    entries = _extract("Apples bananas.", content_settings)
    assert [e.keyword for e in entries] == ["Apples bananas", "Apples", "bananas"]


def test_relevance_increases_with_frequency(content_settings):
    entries = {e.keyword: e for e in _extract("alpha beta beta gamma gamma gamma.", content_settings)}
    assert entries["gamma"].relevance > entries["beta"].relevance > entries["alpha"].relevance


def test_first_sentence_terms_score_higher(content_settings):
    entries = {e.keyword: e for e in _extract("Rockets fly. Boats float.", content_settings)}
    assert entries["Rockets"].count == entries["Boats"].count
    assert entries["Rockets"].relevance > entries["Boats"].relevance


def test_numbers_and_short_words_are_skipped(content_settings):
    keys = {e.keyword for e in _extract("In 2024 we go to Rome.", content_settings)}
    assert "2024" not in keys
    assert "go" not in keys
    assert "Rome" in keys


def test_extra_stopwords_from_config():
    settings = ContentSettings(spellcheck_enabled=False, extra_stopwords=("SEO",))
    keys = {e.keyword.lower() for e in _extract("SEO is great. SEO helps websites rank.", settings)}
    assert "seo" not in keys
    assert "websites" in keys


def test_min_phrase_count_filters_rare_phrases():
    settings = ContentSettings(spellcheck_enabled=False, min_phrase_count=2)
    entries = _extract("Rockets fly fast. Boats float slowly.", settings)
    assert entries
    assert all(e.type == "single" for e in entries)


def test_extraction_is_idempotent(content_settings):
    text = "Search engines reward helpful content. Helpful content earns links and readers."
    assert _extract(text, content_settings) == _extract(text, content_settings)


def test_no_words_yields_no_keywords(content_settings):
    assert _extract("", content_settings) == []
    assert _extract("... !!!", content_settings) == []
