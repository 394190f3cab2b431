"""Rule-based content suggestions.

Each rule looks at the statistics, the readability label, the keyword list and
(optionally) the spell check result, and returns a message or None. Rules run
in the fixed order of `RULES`, so output order never depends on discovery order.
"""


def _avg_sentence_length(stats) -> float:
    if stats.sentence_count <= 0:
        return 0.0
    return stats.word_count / stats.sentence_count


def _rule_content_length(ctx):
    stats, settings = ctx["stats"], ctx["settings"]
    if stats.word_count < settings.min_word_count:
        return (
            f"Add more content: aim for at least {settings.min_word_count} words "
            f"(currently {stats.word_count})."
        )


def _rule_readability(ctx):
    if ctx["readability"] == ctx["settings"].readability_default_label:
        return "Simplify sentence structure: use shorter sentences and simpler words to improve readability."


def _rule_sentence_length(ctx):
    avg = _avg_sentence_length(ctx["stats"])
    if avg > ctx["settings"].max_avg_sentence_length:
        return (
            f"Break up long sentences: they average {avg:.1f} words, "
            f"try to keep them under {ctx['settings'].max_avg_sentence_length:g}."
        )


def _rule_no_keywords(ctx):
    if ctx["stats"].word_count > 0 and not ctx["keywords"]:
        return "Use more descriptive, topic-specific terms so that clear keywords emerge from the text."


def _rule_keyword_stuffing(ctx):
    if not ctx["keywords"]:
        return None
    top = ctx["keywords"][0]
    if top.density > ctx["settings"].max_keyword_density:
        return (
            f"Reduce keyword stuffing: '{top.keyword}' makes up {top.density}% of the text, "
            f"keep it below {ctx['settings'].max_keyword_density:g}%."
        )


def _rule_keyword_underused(ctx):
    if not ctx["keywords"]:
        return None
    top = ctx["keywords"][0]
    if top.density < ctx["settings"].min_keyword_density:
        return (
            f"Use your main keyword '{top.keyword}' more often: its density is only {top.density}%."
        )


def _rule_phrases(ctx):
    if ctx["stats"].word_count < ctx["settings"].phrase_hint_min_words:
        return None
    if not any(entry.type == "phrase" for entry in ctx["keywords"]):
        return "Add multi-word key phrases: specific phrases rank better than single words."


def _rule_spelling(ctx):
    spell_check = ctx["spell_check"] or {}
    count = spell_check.get("misspelledCount", 0)
    if spell_check.get("status") == "completed" and count >= ctx["settings"].max_spelling_errors:
        return f"Fix {count} potential spelling errors before publishing."


RULES = (
    _rule_content_length,
    _rule_readability,
    _rule_sentence_length,
    _rule_no_keywords,
    _rule_keyword_stuffing,
    _rule_keyword_underused,
    _rule_phrases,
    _rule_spelling,
)


def generate_suggestions(stats, readability: str, keyword_analysis, settings, spell_check: dict = None) -> list[str]:
    ctx = {
        "stats": stats,
        "readability": readability,
        "keywords": list(keyword_analysis or []),
        "settings": settings,
        "spell_check": spell_check,
    }
    suggestions = []
    for rule in RULES:
        message = rule(ctx)
        if message:
            suggestions.append(message)
    return suggestions
