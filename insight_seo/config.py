"""Configuration for the analysis service.

Config files use the same nested layout as `DEFAULT_CONFIG`: one section per
module plus a `Global` section. `load_config` merges a JSON file over the
defaults and `Settings.from_config` freezes the result into the objects the
engine is built from.
"""

import copy
import json
import logging
from dataclasses import dataclass, field, fields

from .stopwords import STOPWORDS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "ContentAnalyzer": {
        "top_n_keywords": 10,
        "min_keyword_length": 3,
        "phrase_lengths": [2, 3],
        "min_phrase_count": 1,
        "trim_phrase_stopwords": True,
        "extra_stopwords": [],
        "frequency_weight": 0.7,
        "position_weight": 0.2,
        "length_weight": 0.1,
        "readability_bands": [[70.0, "Easy"], [50.0, "Medium"]],
        "readability_default_label": "Hard",
        "min_word_count": 300,
        "max_avg_sentence_length": 20.0,
        "max_keyword_density": 3.0,
        "min_keyword_density": 0.5,
        "phrase_hint_min_words": 50,
        "spellcheck_enabled": True,
        "spellcheck_language": "en",
        "max_spelling_errors": 3,
    },
    "KeywordInserter": {
        "sufficient_density": 2.0,
        "dominant_density": 20.0,
        "max_sentence_words": 25,
        "connector": ", focusing on {keyword}",
        "closing_template": "In summary, {keyword} ties everything together.",
        "append_template": "Learn more about {keyword}.",
    },
    "GrammarChecker": {
        "api_url": "https://api.languagetool.org/v2/check",
        "language": "en-US",
    },
    "Global": {
        "request_timeout": 10,
        "user_agent": "InsightSEO/1.0 (+https://languagetool.org/http-api/)",
        "http_retries_total": 2,
        "http_backoff_factor": 0.2,
        "http_status_forcelist": [429, 500, 502, 503, 504],
        "http_allowed_retry_methods": ["POST"],
        "cors_origins": "*",
        "log_level": "INFO",
        "log_dir": "logs",
    },
}


def _freeze(value):
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


def _section_kwargs(cls, section: dict) -> dict:
    names = {f.name for f in fields(cls)}
    return {k: _freeze(v) for k, v in (section or {}).items() if k in names}


@dataclass(frozen=True)
class ContentSettings:
    top_n_keywords: int = 10
    min_keyword_length: int = 3
    phrase_lengths: tuple = (2, 3)
    min_phrase_count: int = 1
    trim_phrase_stopwords: bool = True
    extra_stopwords: tuple = ()
    frequency_weight: float = 0.7
    position_weight: float = 0.2
    length_weight: float = 0.1
    readability_bands: tuple = ((70.0, "Easy"), (50.0, "Medium"))
    readability_default_label: str = "Hard"
    min_word_count: int = 300
    max_avg_sentence_length: float = 20.0
    max_keyword_density: float = 3.0
    min_keyword_density: float = 0.5
    phrase_hint_min_words: int = 50
    spellcheck_enabled: bool = True
    spellcheck_language: str = "en"
    max_spelling_errors: int = 3
    stopwords: frozenset = field(init=False, repr=False)

    def __post_init__(self):
        extra = frozenset(w.lower() for w in self.extra_stopwords)
        object.__setattr__(self, "stopwords", STOPWORDS | extra)
        # Bands are checked from the highest threshold down.
        bands = tuple(sorted(((float(t), str(l)) for t, l in self.readability_bands), reverse=True))
        object.__setattr__(self, "readability_bands", bands)


@dataclass(frozen=True)
class InsertionSettings:
    sufficient_density: float = 2.0
    dominant_density: float = 20.0
    max_sentence_words: int = 25
    connector: str = ", focusing on {keyword}"
    closing_template: str = "In summary, {keyword} ties everything together."
    append_template: str = "Learn more about {keyword}."


@dataclass(frozen=True)
class GrammarSettings:
    api_url: str = "https://api.languagetool.org/v2/check"
    language: str = "en-US"
    request_timeout: float = 10
    user_agent: str = "InsightSEO/1.0 (+https://languagetool.org/http-api/)"
    http_retries_total: int = 2
    http_backoff_factor: float = 0.2
    http_status_forcelist: tuple = (429, 500, 502, 503, 504)
    http_allowed_retry_methods: tuple = ("POST",)


@dataclass(frozen=True)
class Settings:
    content: ContentSettings = field(default_factory=ContentSettings)
    insertion: InsertionSettings = field(default_factory=InsertionSettings)
    grammar: GrammarSettings = field(default_factory=GrammarSettings)

    @classmethod
    def from_config(cls, config: dict = None) -> "Settings":
        config = config or {}
        global_cfg = config.get("Global", {})
        grammar_cfg = dict(global_cfg)
        grammar_cfg.update(config.get("GrammarChecker", {}))
        return cls(
            content=ContentSettings(**_section_kwargs(ContentSettings, config.get("ContentAnalyzer", {}))),
            insertion=InsertionSettings(**_section_kwargs(InsertionSettings, config.get("KeywordInserter", {}))),
            grammar=GrammarSettings(**_section_kwargs(GrammarSettings, grammar_cfg)),
        )


def merge_config(base: dict, override: dict) -> dict:
    """Shallow per-section merge of `override` into a copy of `base`."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path: str = None) -> dict:
    """Defaults merged with the JSON file at `path`, if given and readable."""
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, "r") as f:
            custom_config = json.load(f)
    except FileNotFoundError:
        logger.warning("Config file %s not found. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    except json.JSONDecodeError:
        logger.warning("Error decoding JSON from %s. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(custom_config, dict):
        logger.warning("Config file %s must contain a JSON object. Using default settings.", path)
        return copy.deepcopy(DEFAULT_CONFIG)
    logger.info("Loaded custom configuration from %s", path)
    return merge_config(DEFAULT_CONFIG, custom_config)
