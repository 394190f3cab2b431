import re

from spellchecker import SpellChecker


class SpellCheck:
    """Flags words missing from the pyspellchecker dictionary.

    The dictionary is loaded once per instance and only read afterwards.
    """

    sample_limit = 5000
    report_limit = 20

    def __init__(self, language: str = "en", enabled: bool = True):
        self.language = language
        self.enabled = enabled
        self._spell = SpellChecker(language=language) if enabled else None

    def check(self, text_content: str) -> dict:
        if not self.enabled:
            return {"status": "disabled", "misspelledWords": [], "misspelledCount": 0}
        words_for_spellcheck = re.findall(r'\b[a-zA-Z]+\b', text_content)
        # Reduce size to speed up checks on very long texts
        if len(words_for_spellcheck) > self.sample_limit:
            words_for_spellcheck = words_for_spellcheck[:self.sample_limit]
        # Acronyms such as "SEO" are not dictionary words
        candidates = [w.lower() for w in words_for_spellcheck if len(w) > 2 and not w.isupper()]
        misspelled = sorted(self._spell.unknown(candidates))
        return {
            "status": "completed",
            "misspelledWords": misspelled[:self.report_limit],
            "misspelledCount": len(misspelled),
        }
